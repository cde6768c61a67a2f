"""GenerationRequest -> Artwork: pack, then color by zone."""

from __future__ import annotations

import logging
from typing import Any

from app.models.art import Artwork, GenerationRequest
from app.packing.config import PackerConfig
from app.packing.packer import pack_detailed
from app.packing.sanitize import sanitize_art_plan, sanitize_config
from app.packing.zones import colorize

logger = logging.getLogger(__name__)


def status_line(placed: int, target: int) -> str:
    return f"Placed {placed} / {target} rectangles"


def build_request(
    kind: str,
    raw: dict[str, Any],
    canvas_w: float,
    canvas_h: float,
) -> GenerationRequest:
    """Sanitize interpreted settings into a GenerationRequest for this canvas."""
    if kind == "art_plan":
        config, zones = sanitize_art_plan(raw, canvas_w, canvas_h)
    else:
        config, zones = sanitize_config(raw, mode="rectangles"), []
    return GenerationRequest(
        canvas_width=canvas_w,
        canvas_height=canvas_h,
        config=config,
        zones=tuple(zones),
    )


def generate_artwork(
    request: GenerationRequest,
    *,
    seed: int | None = None,
    packer_config: PackerConfig | None = None,
) -> Artwork:
    """Run one packing pass for *request*. A short count is reported, not raised."""
    cfg = request.config
    result = pack_detailed(
        request.canvas_width,
        request.canvas_height,
        cfg.count,
        cfg.min_size,
        cfg.max_size,
        config=packer_config,
        seed=seed,
    )
    zones = list(request.zones)
    rects = colorize(result.rectangles, zones, cfg.color)

    logger.info(
        "Generated artwork %sx%s: %d/%d rectangles, %d zones",
        request.canvas_width, request.canvas_height,
        result.placed, result.target_count, len(zones),
    )

    return Artwork(
        canvas_width=request.canvas_width,
        canvas_height=request.canvas_height,
        config=cfg,
        zones=zones,
        rectangles=rects,
        placed=result.placed,
        target=result.target_count,
        attempts=result.attempts,
        complete=result.complete,
        status=status_line(result.placed, result.target_count),
    )
