from typing import Any, Dict, Iterable, List, Optional

from .allocation import synthesize
from .checks import evaluate_warnings
from .risk import round_half_up, score_risk
from .schema import Goal, PlanResult, UserProfile
from .tax import estimate_tax, estimate_tax_breakdown

PLAN_SOURCE = "deterministic"


def _clamp_score(score: int) -> int:
    return max(0, min(100, score))


# ---------- Plan ----------

def compute_total_investable(profile: UserProfile) -> float:
    # Annualised view: what is on hand plus a year of monthly surplus.
    return profile.savings + profile.monthly_investable * 12


def build_plan(profile: UserProfile, goals: Iterable[Goal]) -> PlanResult:
    goals = list(goals)

    risk_score = _clamp_score(score_risk(profile.age, goals))
    tax_estimate = estimate_tax(profile.salary, profile.country, profile.state)
    warnings = evaluate_warnings(profile)
    total_investable = compute_total_investable(profile)
    allocations = synthesize(risk_score, total_investable)

    return PlanResult(
        risk_score=risk_score,
        allocations=allocations,
        total_investable=total_investable,
        warnings=warnings,
        tax_estimate=tax_estimate,
    )


def plan_payload(profile: UserProfile, goals: Iterable[Goal]) -> Dict[str, Any]:
    """Wire-shaped deterministic plan, stamped with its source."""
    out = build_plan(profile, goals).to_dict()
    out["source"] = PLAN_SOURCE
    return out


# ---------- Dashboard ----------

def summarize_dashboard(
    profile: Optional[UserProfile],
    goals: List[Goal],
) -> Dict[str, Any]:
    total_target = sum(g.target_amount for g in goals)
    savings = profile.savings if profile else 0.0

    if total_target > 0:
        savings_progress = round_half_up(savings / total_target * 100)
    else:
        savings_progress = 0

    return {
        "profileCompletion": 100 if profile else 0,
        "monthlyInvestable": profile.monthly_investable if profile else 0.0,
        "numGoals": len(goals),
        "totalTargetCapital": total_target,
        "savingsProgress": savings_progress,
        "taxBreakdown": (
            estimate_tax_breakdown(profile.salary, profile.country, profile.state) if profile else None
        ),
    }
