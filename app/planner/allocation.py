# backend/app/planner/allocation.py
from __future__ import annotations

from typing import Dict, List, Tuple

from .assumptions import (
    BOND_SHARE_OF_REMAINDER,
    REAL_ESTATE_MAX_PCT,
    REAL_ESTATE_SCORE_DIVISOR,
    STOCK_MAX_PCT,
    STOCK_MIN_PCT,
    STOCK_SCORE_MULTIPLIER,
)
from .schema import Allocation, AssetClass

ASSET_CLASS_ORDER = (
    AssetClass.STOCKS,
    AssetClass.BONDS,
    AssetClass.REAL_ESTATE,
    AssetClass.CASH,
)

SUGGESTED_INSTRUMENTS: Dict[AssetClass, Tuple[str, ...]] = {
    AssetClass.STOCKS: ("VTI (Total US Stock)", "VXUS (International Stock)", "ITOT"),
    AssetClass.BONDS: ("BND (Total Bond Market)", "AGG", "BNDX (Intl Bonds)"),
    AssetClass.REAL_ESTATE: ("VNQ (Vanguard Real Estate)", "O (Realty Income)"),
    AssetClass.CASH: ("VMFXX (Money Market)", "HYSA (High-Yield Savings)"),
}


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def target_percentages(risk_score: float) -> Dict[AssetClass, float]:
    """
    Piecewise-linear mix for a 0-100 risk score.

    Stocks track 0.9x the score inside [10, 90], real estate a tenth of it up
    to 15, bonds take 80% of what is left, and cash absorbs the remainder so
    the four always total 100.
    """
    stock = _clamp(risk_score * STOCK_SCORE_MULTIPLIER, STOCK_MIN_PCT, STOCK_MAX_PCT)
    real_estate = _clamp(risk_score / REAL_ESTATE_SCORE_DIVISOR, 0.0, REAL_ESTATE_MAX_PCT)
    bond = max(0.0, (100.0 - stock - real_estate) * BOND_SHARE_OF_REMAINDER)
    cash = 100.0 - stock - real_estate - bond
    return {
        AssetClass.STOCKS: stock,
        AssetClass.BONDS: bond,
        AssetClass.REAL_ESTATE: real_estate,
        AssetClass.CASH: cash,
    }


def synthesize(risk_score: float, total_investable: float) -> List[Allocation]:
    pct = target_percentages(risk_score)
    allocations: List[Allocation] = []
    for asset_class in ASSET_CLASS_ORDER:
        p = pct[asset_class]
        allocations.append(
            Allocation(
                asset_class=asset_class,
                percentage=p,
                amount=total_investable * (p / 100.0),
                suggested_instruments=list(SUGGESTED_INSTRUMENTS[asset_class]),
            )
        )
    return allocations
