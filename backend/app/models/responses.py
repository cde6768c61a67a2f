"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.art import Artwork, HistoryEntry


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    gap: float = 2.0
    max_attempts_per_rect: int = 500
    llm_configured: bool = False


class GenerateResponse(BaseModel):
    result_type: str
    artwork: Artwork
    history_id: str | None = None


class HistoryListResponse(BaseModel):
    items: list[HistoryEntry] = Field(default_factory=list)


class HistoryItemResponse(BaseModel):
    item: HistoryEntry
