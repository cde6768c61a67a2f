"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from app.api import generate, health, history, pack

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(pack.router)
api_router.include_router(generate.router)
api_router.include_router(history.router)
