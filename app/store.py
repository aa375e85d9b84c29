from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional
from uuid import uuid4

import firebase_admin
from firebase_admin import credentials, firestore

from app.settings import get_settings

LOGGER = logging.getLogger(__name__)

PROFILES = "profiles"
GOALS = "goals"


def ensure_firebase_db():
    # Safe to call multiple times
    if not firebase_admin._apps:
        settings = get_settings()
        path = settings.firebase_credentials_path
        if path and os.path.exists(path):
            cred = credentials.Certificate(path)
        elif settings.firebase_credentials_json:
            cred = credentials.Certificate(json.loads(settings.firebase_credentials_json))
        else:
            raise RuntimeError(
                "Missing FIREBASE_ADMIN_CREDENTIALS/GOOGLE_APPLICATION_CREDENTIALS or FIREBASE_ADMIN_JSON"
            )
        options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
        firebase_admin.initialize_app(cred, options)
        LOGGER.info("Firebase admin initialised")
    return firestore.client()


def get_db():
    """FastAPI dependency; tests override it with an in-memory fake."""
    return ensure_firebase_db()


# ---------- Profile ----------

def load_profile(db, uid: str) -> Optional[Dict[str, Any]]:
    snap = db.collection(PROFILES).document(uid).get()
    if not snap.exists:
        return None
    data = snap.to_dict() or {}
    data.pop("updatedAt", None)
    return data


def save_profile(db, uid: str, profile: Dict[str, Any]) -> Dict[str, Any]:
    db.collection(PROFILES).document(uid).set(
        {**profile, "updatedAt": firestore.SERVER_TIMESTAMP},
        merge=True,
    )
    return profile


# ---------- Goals ----------

def _goals(db, uid: str):
    return db.collection(PROFILES).document(uid).collection(GOALS)


def list_goals(db, uid: str) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for snap in _goals(db, uid).stream():
        data = snap.to_dict() or {}
        data["id"] = snap.id
        out.append(data)
    return out


def create_goal(db, uid: str, goal: Dict[str, Any]) -> Dict[str, Any]:
    goal_id = uuid4().hex
    _goals(db, uid).document(goal_id).set(goal)
    return {**goal, "id": goal_id}


def update_goal(db, uid: str, goal_id: str, goal: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    ref = _goals(db, uid).document(goal_id)
    if not ref.get().exists:
        return None
    ref.set(goal)
    return {**goal, "id": goal_id}


def delete_goal(db, uid: str, goal_id: str) -> bool:
    ref = _goals(db, uid).document(goal_id)
    if not ref.get().exists:
        return False
    ref.delete()
    return True
