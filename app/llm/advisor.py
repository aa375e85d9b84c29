from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from openai import OpenAI
from pydantic import ValidationError

from app.planner.schema import Goal, UserProfile
from app.settings import Settings, get_settings
from models import PlanResultModel

LOGGER = logging.getLogger(__name__)

FALLBACK_ADVICE = (
    "Your financial plan is ready for review. "
    "Focus on consistency and building your core savings first."
)


def _plan_system_prompt() -> str:
    return (
        "You are a financial investment engine that produces an allocation plan.\n"
        "Rules:\n"
        "- Output must be valid JSON matching the PlanResult schema ONLY.\n"
        "- Do not include markdown fences, commentary, or extra keys.\n"
        "- Allocation percentages must sum exactly to 100.\n"
        "- List 2-3 specific ETF/ticker examples per asset class.\n"
        "- Give 2-3 specific strategic warnings.\n"
        "\n"
        "PlanResult schema:\n"
        "{\n"
        '  "riskScore": <integer 0-100>,\n'
        '  "taxEstimate": <number, annual tax in dollars>,\n'
        '  "totalInvestable": <number, annual capital available>,\n'
        '  "warnings": ["string"],\n'
        '  "allocations": [{"assetClass": "string", "percentage": <number>, '
        '"amount": <number>, "suggestedInstruments": ["string"]}]\n'
        "}\n"
    )


def _describe_goals(goals: Iterable[Goal]) -> str:
    parts = [
        f"{g.name} (Target ${g.target_amount:,.0f}, Horizon: {g.horizon.value}, Priority: {g.priority}/5)"
        for g in goals
    ]
    return ", ".join(parts) if parts else "none"


def _plan_user_prompt(profile: UserProfile, goals: List[Goal]) -> str:
    return (
        f"User Profile: Age {profile.age}, Salary ${profile.salary:,.0f}, "
        f"Country {profile.country}, State {profile.state}, Savings ${profile.savings:,.0f}, "
        f"Monthly Investable ${profile.monthly_investable:,.0f}, "
        f"Monthly Debt ${profile.debt_payments:,.0f}, Emergency Fund ${profile.emergency_fund:,.0f}.\n"
        f"User Goals: {_describe_goals(goals)}.\n"
        "\n"
        "Tasks:\n"
        "1. Calculate a Risk Score (0-100) based on age, goal time horizons and stability (income vs debt).\n"
        "2. Estimate annual tax (federal + state if USA, flat fallback otherwise).\n"
        "3. Calculate total annualized investable capital: savings + (monthly investable * 12).\n"
        "4. Provide asset allocations with percentages and dollar amounts.\n"
        "Return PlanResult JSON only."
    )


def _advice_prompt(profile: UserProfile, goals: List[Goal], plan: Dict[str, Any]) -> str:
    mix = ", ".join(
        f"{a.get('assetClass')}: {a.get('percentage')}%" for a in plan.get("allocations") or []
    )
    return (
        "Review this financial plan:\n"
        f"Profile: Age {profile.age}, Salary ${profile.salary:,.0f}.\n"
        f"Goals: {_describe_goals(goals)}.\n"
        f"Allocations: {mix}.\n"
        f"Risk Score: {plan.get('riskScore')}.\n"
        "\n"
        "Provide a professional, encouraging coaching note (2 paragraphs). "
        "Explain why this allocation fits their goals. "
        "End with a disclaimer that this is automated educational content."
    )


def _extract_response_text(resp: Any) -> str:
    if resp is None:
        return ""
    text = getattr(resp, "output_text", None)
    if text:
        return text
    choices = getattr(resp, "choices", None)
    if choices:
        msg = getattr(choices[0], "message", None)
        if msg and getattr(msg, "content", None):
            return msg.content
    return ""


def _call_openai(system: str, user: str, settings: Settings) -> str:
    if not settings.openai_api_key:
        LOGGER.info("OPENAI_API_KEY not set; skipping AI call")
        return ""
    client = OpenAI(api_key=settings.openai_api_key)
    messages = [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]

    try:
        resp = client.responses.create(
            model=settings.openai_model,
            input=messages,
            temperature=settings.openai_temperature,
        )
        return _extract_response_text(resp)
    except Exception as exc:
        LOGGER.warning("responses API failed (%s); retrying with chat completions", exc)
        try:
            resp = client.chat.completions.create(
                model=settings.openai_model,
                messages=messages,
                temperature=settings.openai_temperature,
            )
            return _extract_response_text(resp)
        except Exception as exc2:
            LOGGER.error("OpenAI call failed: %s", exc2)
            return ""


def _parse_json(raw: str) -> Optional[Dict[str, Any]]:
    if not raw:
        return None
    text = raw.strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        start = text.find("{")
        end = text.rfind("}")
        if start >= 0 and end > start:
            try:
                return json.loads(text[start : end + 1])
            except json.JSONDecodeError:
                return None
    return None


def generate_ai_plan(
    profile: UserProfile,
    goals: Iterable[Goal],
    settings: Optional[Settings] = None,
) -> Optional[PlanResultModel]:
    """
    Ask the model for a PlanResult-shaped plan. Returns None on any failure
    so callers can serve the deterministic plan instead.
    """
    settings = settings or get_settings()
    if not settings.ai_plan_enabled:
        return None
    goals = list(goals)

    raw = _call_openai(_plan_system_prompt(), _plan_user_prompt(profile, goals), settings)
    data = _parse_json(raw)
    if data is None:
        if raw:
            LOGGER.warning("AI plan response was not JSON")
        return None

    try:
        return PlanResultModel.model_validate(data)
    except ValidationError as exc:
        LOGGER.warning("AI plan failed schema validation: %s", exc.error_count())
        return None


def generate_advice_note(
    profile: UserProfile,
    goals: Iterable[Goal],
    plan: Dict[str, Any],
    settings: Optional[Settings] = None,
) -> str:
    settings = settings or get_settings()
    system = "You are a concise, encouraging financial coach."
    text = _call_openai(system, _advice_prompt(profile, list(goals), plan), settings)
    return text.strip() or FALLBACK_ADVICE
