"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_WEB_ORIGINS = ["http://127.0.0.1:3000", "http://localhost:3000"]


@dataclass(frozen=True)
class Settings:
    app_name: str = "FinPlanner API"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_WEB_ORIGINS))
    firebase_credentials_path: Optional[str] = None
    firebase_credentials_json: Optional[str] = None
    firebase_project_id: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.2
    ai_plan_enabled: bool = True
    log_level: str = "INFO"


def _as_float(value: Optional[str], default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _csv_list(value: Optional[str]) -> List[str]:
    raw = (value or "").replace(";", ",")
    return [item.strip() for item in raw.split(",") if item.strip()]


def _cors_origins() -> List[str]:
    origins = list(DEFAULT_WEB_ORIGINS)
    extra = _csv_list(os.getenv("CORS_ORIGINS"))
    app_base = os.getenv("APP_BASE_URL")
    if app_base:
        extra.append(app_base.strip())
    for origin in extra:
        if origin not in origins:
            origins.append(origin)
    return origins


def get_settings() -> Settings:
    """Load runtime settings from environment variables; .env is read once at import."""
    return Settings(
        app_name=os.getenv("APP_NAME", "FinPlanner API"),
        cors_origins=_cors_origins(),
        firebase_credentials_path=(
            os.getenv("FIREBASE_ADMIN_CREDENTIALS") or os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
        ),
        firebase_credentials_json=os.getenv("FIREBASE_ADMIN_JSON"),
        firebase_project_id=os.getenv("FIREBASE_PROJECT_ID"),
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openai_model=os.getenv("OPENAI_MODEL") or "gpt-4o-mini",
        openai_temperature=_as_float(os.getenv("OPENAI_TEMPERATURE"), 0.2),
        ai_plan_enabled=_as_bool(os.getenv("AI_PLAN_ENABLED"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )
