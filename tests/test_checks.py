from dataclasses import replace

import pytest

from app.planner.checks import (
    HIGH_DEBT_WARNING,
    NO_SURPLUS_WARNING,
    debt_to_income,
    emergency_fund_target,
    evaluate_warnings,
    format_usd,
)
from app.planner.schema import UserProfile


@pytest.fixture
def profile(scenario_profile_dict) -> UserProfile:
    return UserProfile.from_dict(scenario_profile_dict)


def test_emergency_fund_warning_names_target(profile) -> None:
    assert emergency_fund_target(80000) == 20000
    assert evaluate_warnings(profile) == [
        "Emergency fund is below 3 months of income ($20,000.00). "
        "Priority should be building this first."
    ]


def test_all_three_warnings_in_fixed_order(profile) -> None:
    stressed = replace(profile, salary=60000, monthly_investable=-100, emergency_fund=0, debt_payments=2000)
    warnings = evaluate_warnings(stressed)
    assert len(warnings) == 3
    assert warnings[0] == NO_SURPLUS_WARNING
    assert warnings[1].startswith("Emergency fund is below 3 months of income ($15,000.00)")
    assert warnings[2] == HIGH_DEBT_WARNING


def test_healthy_profile_has_no_warnings(profile) -> None:
    healthy = replace(profile, emergency_fund=20000)
    assert evaluate_warnings(healthy) == []


def test_debt_ratio_at_limit_is_not_flagged(profile) -> None:
    at_limit = replace(profile, salary=60000, emergency_fund=20000, debt_payments=1800)
    assert debt_to_income(1800, 60000) == pytest.approx(0.36)
    assert HIGH_DEBT_WARNING not in evaluate_warnings(at_limit)


def test_zero_salary_skips_debt_ratio(profile) -> None:
    broke = replace(profile, salary=0, monthly_investable=0, emergency_fund=0, debt_payments=500)
    assert evaluate_warnings(broke) == [NO_SURPLUS_WARNING]
    assert debt_to_income(500, 0) == 0.0


def test_format_usd() -> None:
    assert format_usd(20000) == "$20,000.00"
    assert format_usd(1234.5) == "$1,234.50"
    assert format_usd(-50) == "-$50.00"
