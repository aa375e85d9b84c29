# backend/app/planner/risk.py
from __future__ import annotations

import math
from typing import Iterable

from .assumptions import AGE_WEIGHT, HORIZON_WEIGHT, NEUTRAL_HORIZON_FACTOR
from .schema import Goal, Horizon

HORIZON_FACTORS = {
    Horizon.LONG: 100.0,
    Horizon.MEDIUM: 50.0,
    Horizon.SHORT: 10.0,
}


def round_half_up(value: float) -> int:
    # 62.5 -> 63, -0.5 -> 0; builtin round() would give banker's 62.
    return int(math.floor(value + 0.5))


def average_horizon_factor(goals: Iterable[Goal]) -> float:
    factors = [HORIZON_FACTORS[g.horizon] for g in goals]
    if not factors:
        return NEUTRAL_HORIZON_FACTOR
    return sum(factors) / len(factors)


def score_risk(age: float, goals: Iterable[Goal]) -> int:
    """Younger owners and longer goal horizons both push the score up."""
    age_factor = max(0.0, 100.0 - age)
    raw = age_factor * AGE_WEIGHT + average_horizon_factor(goals) * HORIZON_WEIGHT
    return round_half_up(raw)
