"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from app.models.art import GenerationConfig, Zone

# Upper bound for directly requested rectangle counts (/pack, /render).
MAX_PACK_COUNT = 20000
MAX_CANVAS_SIZE = 10000


class PackRequest(BaseModel):
    canvas_width: float = Field(..., gt=0, le=MAX_CANVAS_SIZE, description="Canvas width in CSS pixels")
    canvas_height: float = Field(..., gt=0, le=MAX_CANVAS_SIZE, description="Canvas height in CSS pixels")
    config: GenerationConfig = Field(default_factory=GenerationConfig)
    zones: list[Zone] = Field(default_factory=list, description="Color zones, first match wins")
    seed: int | None = Field(default=None, description="Random seed for a reproducible layout")


class GenerateRequest(BaseModel):
    prompt: str = Field(..., min_length=1, description="Natural-language art prompt")
    canvas_width: float = Field(..., gt=0, le=MAX_CANVAS_SIZE)
    canvas_height: float = Field(..., gt=0, le=MAX_CANVAS_SIZE)
    seed: int | None = None
    save_history: bool = Field(default=False, description="Persist the result to history")
    mode: Literal["auto", "rectangles", "art_plan"] = Field(
        default="auto",
        description="auto lets the model choose; rectangles or art_plan forces that result type",
    )
