# apps/api/main.py

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.routers import plans, profile
from app.settings import get_settings

# ---------- Boot ----------

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# FastAPI app (create ONCE)
app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profile.router)
app.include_router(plans.router)


# ---------- Probes ----------
@app.get("/")
def root():
    return {"ok": True, "service": "finplanner-api", "cors": settings.cors_origins}


@app.get("/health")
def health():
    return {"ok": True}
