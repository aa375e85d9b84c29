# backend/app/planner/tax.py
from __future__ import annotations

from typing import Dict

from .assumptions import (
    DEFAULT_STATE_RATE,
    FEDERAL_BOTTOM_RATE,
    FEDERAL_BRACKETS_2024,
    NON_US_FLAT_RATE,
    STATE_TAX_RATES,
    TAX_COUNTRY,
)


def federal_tax(salary: float) -> float:
    for floor, rate, base in FEDERAL_BRACKETS_2024:
        if salary > floor:
            return (salary - floor) * rate + base
    return salary * FEDERAL_BOTTOM_RATE


def state_rate(state: str) -> float:
    return STATE_TAX_RATES.get(state, DEFAULT_STATE_RATE)


def state_tax(salary: float, state: str) -> float:
    return salary * state_rate(state)


def estimate_tax(salary: float, country: str, state: str) -> float:
    """
    Annual tax estimate.

    Non-US jurisdictions get a flat 25% of salary. US salaries get 2024
    single-filer federal brackets plus a flat state rate (5% for states not
    in the table). Total over all numbers: no input raises.
    """
    if country != TAX_COUNTRY:
        return salary * NON_US_FLAT_RATE
    return federal_tax(salary) + state_tax(salary, state)


def estimate_tax_breakdown(salary: float, country: str, state: str) -> Dict[str, float]:
    total = estimate_tax(salary, country, state)
    state_part = state_tax(salary, state) if country == TAX_COUNTRY else 0.0
    federal = total - state_part
    return {
        "federal": federal,
        "state": state_part,
        "total": total,
        "effectiveRate": total / salary if salary > 0 else 0.0,
    }
