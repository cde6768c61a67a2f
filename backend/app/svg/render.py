"""Render an Artwork to SVG, and optionally rasterize it to PNG."""

from __future__ import annotations

import logging

from app.models.art import Artwork
from app.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

# Light yellow canvas, matching the contrast palette given to the art planner.
DEFAULT_BACKGROUND = "#fffbe6"


def artwork_to_svg(
    artwork: Artwork,
    title: str = "",
    background: str | None = DEFAULT_BACKGROUND,
) -> str:
    elements = [
        {"tag": "rect", "x": r.x, "y": r.y, "width": r.w, "height": r.h, "fill": r.color}
        for r in artwork.rectangles
    ]
    return serialize_svg(
        elements,
        canvas_w=artwork.canvas_width,
        canvas_h=artwork.canvas_height,
        title=title,
        description=artwork.status,
        background=background,
    )


def render_svg_to_png(svg: str, width: int | None = None, height: int | None = None) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise
