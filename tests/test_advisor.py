import json

import pytest

from app.llm import advisor
from app.planner.schema import Goal, Horizon, UserProfile
from app.settings import Settings

AI_PLAN = {
    "riskScore": 70,
    "taxEstimate": 17000,
    "totalInvestable": 22000,
    "warnings": ["Build your emergency fund."],
    "allocations": [
        {"assetClass": "US Stocks", "percentage": 60, "amount": 13200, "suggestedInstruments": ["VTI", "ITOT"]},
        {"assetClass": "Bonds", "percentage": 30, "amount": 6600, "suggestedInstruments": ["BND", "AGG"]},
        {"assetClass": "Cash", "percentage": 10, "amount": 2200, "suggestedInstruments": ["VMFXX"]},
    ],
}


@pytest.fixture
def profile(scenario_profile_dict) -> UserProfile:
    return UserProfile.from_dict(scenario_profile_dict)


@pytest.fixture
def goals():
    return [Goal(id="g", name="Retire", target_amount=1000000, horizon=Horizon.LONG, priority=5)]


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="test-key")


def _reply_with(monkeypatch, text: str):
    calls = []

    def fake_call(system, user, settings):
        calls.append(user)
        return text

    monkeypatch.setattr(advisor, "_call_openai", fake_call)
    return calls


def test_ai_plan_parses_valid_json(monkeypatch, profile, goals, settings) -> None:
    calls = _reply_with(monkeypatch, json.dumps(AI_PLAN))
    plan = advisor.generate_ai_plan(profile, goals, settings=settings)

    assert plan is not None
    assert plan.riskScore == 70
    assert [a.assetClass for a in plan.allocations] == ["US Stocks", "Bonds", "Cash"]
    assert "Retire (Target $1,000,000, Horizon: Long term (7+ years), Priority: 5/5)" in calls[0]


def test_ai_plan_tolerates_surrounding_text(monkeypatch, profile, goals, settings) -> None:
    _reply_with(monkeypatch, "Here is the plan:\n" + json.dumps(AI_PLAN) + "\nGood luck!")
    assert advisor.generate_ai_plan(profile, goals, settings=settings) is not None


def test_ai_plan_rejects_bad_percentages(monkeypatch, profile, goals, settings) -> None:
    bad = dict(AI_PLAN)
    bad["allocations"] = AI_PLAN["allocations"][:2]
    _reply_with(monkeypatch, json.dumps(bad))
    assert advisor.generate_ai_plan(profile, goals, settings=settings) is None


def test_ai_plan_rejects_extra_keys(monkeypatch, profile, goals, settings) -> None:
    _reply_with(monkeypatch, json.dumps({**AI_PLAN, "confidence": "high"}))
    assert advisor.generate_ai_plan(profile, goals, settings=settings) is None


def test_ai_plan_none_on_empty_reply(monkeypatch, profile, goals, settings) -> None:
    _reply_with(monkeypatch, "")
    assert advisor.generate_ai_plan(profile, goals, settings=settings) is None


def test_ai_plan_disabled_skips_call(monkeypatch, profile, goals) -> None:
    calls = _reply_with(monkeypatch, json.dumps(AI_PLAN))
    disabled = Settings(openai_api_key="test-key", ai_plan_enabled=False)
    assert advisor.generate_ai_plan(profile, goals, settings=disabled) is None
    assert calls == []


def test_call_without_key_returns_empty() -> None:
    assert advisor._call_openai("sys", "user", Settings(openai_api_key=None)) == ""


def test_advice_note_falls_back(monkeypatch, profile, goals, settings) -> None:
    _reply_with(monkeypatch, "   ")
    note = advisor.generate_advice_note(profile, goals, AI_PLAN, settings=settings)
    assert note == advisor.FALLBACK_ADVICE


def test_advice_note_mentions_allocations_in_prompt(monkeypatch, profile, goals, settings) -> None:
    calls = _reply_with(monkeypatch, "  Stay the course.  ")
    note = advisor.generate_advice_note(profile, goals, AI_PLAN, settings=settings)
    assert note == "Stay the course."
    assert "US Stocks: 60%" in calls[0]
    assert "Risk Score: 70" in calls[0]
