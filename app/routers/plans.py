# backend/app/routers/plans.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from app.deps.authz import get_uid
from app.llm.advisor import generate_advice_note, generate_ai_plan
from app.planner.engine import plan_payload
from app.planner.exporters import export_plan_csv
from app.planner.schema import Goal, UserProfile
from app.store import get_db, list_goals, load_profile
from models import ExportRequest, PlanRequest, PlanResponse

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["plans"])


def _resolve_inputs(db, uid: str, req: PlanRequest) -> Tuple[UserProfile, List[Goal]]:
    if req.profile is not None:
        profile_data: Dict[str, Any] = req.profile.model_dump()
    else:
        profile_data = load_profile(db, uid)
        if profile_data is None:
            raise HTTPException(status_code=404, detail=f"profiles/{uid} not found")

    if req.goals is not None:
        goals_data = [g.model_dump() for g in req.goals]
    else:
        goals_data = list_goals(db, uid)

    return UserProfile.from_dict(profile_data), [Goal.from_dict(g) for g in goals_data]


@router.post("/deterministic", response_model=PlanResponse)
def plans_deterministic(
    req: PlanRequest,
    uid: str = Depends(get_uid),
    db=Depends(get_db),
):
    profile, goals = _resolve_inputs(db, uid, req)
    payload = plan_payload(profile, goals)
    if req.includeAdvice:
        payload["advice"] = generate_advice_note(profile, goals, payload)
    return payload


@router.post("/ai", response_model=PlanResponse)
def plans_ai(
    req: PlanRequest,
    uid: str = Depends(get_uid),
    db=Depends(get_db),
):
    profile, goals = _resolve_inputs(db, uid, req)

    ai_plan = generate_ai_plan(profile, goals)
    if ai_plan is None:
        LOGGER.info("AI plan unavailable for %s; serving deterministic plan", uid)
        payload = plan_payload(profile, goals)
    else:
        payload = ai_plan.model_dump()
        payload["source"] = "ai"

    if req.includeAdvice:
        payload["advice"] = generate_advice_note(profile, goals, payload)
    return payload


@router.post("/export")
def plans_export(
    req: ExportRequest,
    uid: str = Depends(get_uid),
    db=Depends(get_db),
):
    if req.plan is not None:
        plan = req.plan.model_dump()
    else:
        profile, goals = _resolve_inputs(db, uid, req)
        plan = plan_payload(profile, goals)

    filename, body = export_plan_csv(plan)
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
