from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth as fb_auth

from app.store import ensure_firebase_db

LOGGER = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_user_ctx(
    request: Request,
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    token: Optional[str] = None

    if creds and creds.credentials:
        token = creds.credentials
    else:
        auth_header = request.headers.get("Authorization") or request.headers.get("authorization")
        if auth_header:
            raw = auth_header.strip()
            token = raw.split(" ", 1)[1].strip() if raw.lower().startswith("bearer ") else raw

    if not token:
        raise HTTPException(status_code=401, detail="Missing Bearer token")

    try:
        ensure_firebase_db()
    except RuntimeError as e:
        LOGGER.error("Firebase admin unavailable: %s", e)
        raise HTTPException(status_code=503, detail="Auth backend unavailable")

    try:
        return fb_auth.verify_id_token(token)
    except Exception as e:
        # tiny clock skew tolerance
        if "Token used too early" in str(e):
            time.sleep(1)
            return fb_auth.verify_id_token(token)
        LOGGER.info("Rejected ID token: %s", e)
        raise HTTPException(status_code=401, detail=f"Invalid token: {e}")


def get_uid(ctx: Dict[str, Any] = Depends(get_user_ctx)) -> str:
    uid = ctx.get("uid") or ctx.get("user_id") or ctx.get("sub")
    if not uid:
        raise HTTPException(status_code=401, detail="Unauthenticated")
    return uid
