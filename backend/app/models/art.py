"""Artwork models: generation config, zones and placed rectangles."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})$"


class GenerationConfig(BaseModel):
    """Sanitized rectangle parameters. Sizes are inclusive pixel bounds."""

    color: str = Field("#1f77b4", pattern=HEX_COLOR_PATTERN)
    count: int = Field(1000, ge=0)
    min_size: int = Field(8, ge=1)
    max_size: int = Field(60, ge=1)

    @model_validator(mode="after")
    def _check_size_order(self) -> GenerationConfig:
        if self.min_size > self.max_size:
            raise ValueError("min_size must be <= max_size")
        return self


class CircleZone(BaseModel):
    shape: Literal["circle"] = "circle"
    x: float
    y: float
    radius: float = Field(..., gt=0)
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)


class RectZone(BaseModel):
    shape: Literal["rect"] = "rect"
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)


def _zone_shape(value: Any) -> str | None:
    """Discriminator value for a zone. Without ``shape``, ``width`` means rect."""
    if isinstance(value, dict):
        shape = value.get("shape")
        if shape is None:
            return "rect" if "width" in value and "radius" not in value else "circle"
        return shape
    return getattr(value, "shape", None)


Zone = Annotated[
    Union[Annotated[CircleZone, Tag("circle")], Annotated[RectZone, Tag("rect")]],
    Discriminator(_zone_shape),
]


class GenerationRequest(BaseModel):
    """Everything one packing run needs, passed explicitly."""

    model_config = ConfigDict(frozen=True)

    canvas_width: float = Field(..., gt=0)
    canvas_height: float = Field(..., gt=0)
    config: GenerationConfig
    zones: tuple[Zone, ...] = ()


class PlacedRect(BaseModel):
    x: float
    y: float
    w: float
    h: float
    color: str


class Artwork(BaseModel):
    canvas_width: float
    canvas_height: float
    config: GenerationConfig
    zones: list[Zone] = Field(default_factory=list)
    rectangles: list[PlacedRect] = Field(default_factory=list)
    placed: int = 0
    target: int = 0
    attempts: int = 0
    complete: bool = True
    status: str = ""


class RectBox(BaseModel):
    x: float
    y: float
    w: float
    h: float


class HistoryCreate(BaseModel):
    prompt: str = ""
    result_type: str = "unknown"
    config: dict = Field(default_factory=dict)
    rectangles: list[RectBox] = Field(default_factory=list)
    canvas_width: float = Field(..., allow_inf_nan=False)
    canvas_height: float = Field(..., allow_inf_nan=False)


class HistoryEntry(BaseModel):
    id: str
    prompt: str
    result_type: str
    created_at: str
    config: dict = Field(default_factory=dict)
    rectangles: list[RectBox] = Field(default_factory=list)
    canvas_width: int
    canvas_height: int
