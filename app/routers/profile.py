from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.deps.authz import get_uid
from app.planner.engine import summarize_dashboard
from app.planner.schema import Goal, UserProfile
from app.store import (
    create_goal,
    delete_goal,
    get_db,
    list_goals,
    load_profile,
    save_profile,
    update_goal,
)
from models import DashboardOut, GoalIn, GoalOut, ProfileIn

router = APIRouter(tags=["profile"])


@router.get("/profile", response_model=ProfileIn)
def get_profile(uid: str = Depends(get_uid), db=Depends(get_db)):
    data = load_profile(db, uid)
    if data is None:
        raise HTTPException(status_code=404, detail=f"profiles/{uid} not found")
    return UserProfile.from_dict(data).to_dict()


@router.put("/profile", response_model=ProfileIn)
def put_profile(req: ProfileIn, uid: str = Depends(get_uid), db=Depends(get_db)):
    return save_profile(db, uid, req.model_dump())


@router.get("/goals", response_model=List[GoalOut])
def get_goals(uid: str = Depends(get_uid), db=Depends(get_db)):
    return [Goal.from_dict(g).to_dict() for g in list_goals(db, uid)]


@router.post("/goals", response_model=GoalOut, status_code=201)
def post_goal(req: GoalIn, uid: str = Depends(get_uid), db=Depends(get_db)):
    return create_goal(db, uid, req.model_dump())


@router.put("/goals/{goal_id}", response_model=GoalOut)
def put_goal(goal_id: str, req: GoalIn, uid: str = Depends(get_uid), db=Depends(get_db)):
    updated = update_goal(db, uid, goal_id, req.model_dump())
    if updated is None:
        raise HTTPException(status_code=404, detail="Goal not found")
    return updated


@router.delete("/goals/{goal_id}")
def remove_goal(goal_id: str, uid: str = Depends(get_uid), db=Depends(get_db)):
    if not delete_goal(db, uid, goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"ok": True, "id": goal_id}


@router.get("/dashboard", response_model=DashboardOut)
def dashboard(uid: str = Depends(get_uid), db=Depends(get_db)):
    data = load_profile(db, uid)
    profile = UserProfile.from_dict(data) if data is not None else None
    goals = [Goal.from_dict(g) for g in list_goals(db, uid)]
    return summarize_dashboard(profile, goals)
