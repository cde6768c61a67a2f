"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from app.models.responses import HealthResponse
from app.packing.config import PackerConfig

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    from app.llm.client import is_llm_configured

    packer = PackerConfig.from_settings()
    return HealthResponse(
        status="ok",
        version="0.1.0",
        gap=packer.gap,
        max_attempts_per_rect=packer.max_attempts_per_rect,
        llm_configured=is_llm_configured(),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from app.llm.prompts import get_all_templates

    return get_all_templates()
