# backend/app/planner/checks.py
from __future__ import annotations

from typing import List

from .assumptions import DEBT_TO_INCOME_LIMIT, EMERGENCY_FUND_MONTHS
from .schema import UserProfile

NO_SURPLUS_WARNING = (
    "Your monthly investable amount is zero or negative. Consider reviewing your budget."
)
HIGH_DEBT_WARNING = (
    "Your debt-to-income ratio is high (>36%). Focus on high-interest debt reduction."
)


def format_usd(value: float) -> str:
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def emergency_fund_target(salary: float) -> float:
    return (salary / 12.0) * EMERGENCY_FUND_MONTHS


def debt_to_income(debt_payments: float, salary: float) -> float:
    if salary <= 0:
        return 0.0
    return (debt_payments * 12.0) / salary


def evaluate_warnings(profile: UserProfile) -> List[str]:
    warnings: List[str] = []

    if profile.monthly_investable <= 0:
        warnings.append(NO_SURPLUS_WARNING)

    target = emergency_fund_target(profile.salary)
    if profile.emergency_fund < target:
        warnings.append(
            f"Emergency fund is below 3 months of income ({format_usd(target)}). "
            "Priority should be building this first."
        )

    # No income means no meaningful ratio; skip rather than divide by zero.
    if profile.salary > 0 and debt_to_income(profile.debt_payments, profile.salary) > DEBT_TO_INCOME_LIMIT:
        warnings.append(HIGH_DEBT_WARNING)

    return warnings
