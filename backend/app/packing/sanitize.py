"""Clamp raw model/user output into a valid GenerationConfig and zone list.

Anything missing or malformed falls back to a default, and every number is
clamped into the range advertised to the model for that result type.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any

from app.models.art import CircleZone, GenerationConfig, RectZone, Zone

logger = logging.getLogger(__name__)

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")

DEFAULT_COLOR = "#1f77b4"
DEFAULT_COUNT = 1000
DEFAULT_MIN_SIZE = 8
DEFAULT_MAX_SIZE = 60

# Smallest zone radius the art planner is allowed to emit.
MIN_ZONE_RADIUS = 20.0


@dataclass(frozen=True)
class ConfigRanges:
    count: tuple[int, int]
    min_size: tuple[int, int]
    max_size: tuple[int, int]


RANGES: dict[str, ConfigRanges] = {
    "rectangles": ConfigRanges(count=(500, 5000), min_size=(5, 30), max_size=(10, 50)),
    "art_plan": ConfigRanges(count=(1000, 5000), min_size=(10, 30), max_size=(20, 50)),
}

# camelCase keys from model output -> our field names
_ALIASES = {
    "minSize": "min_size",
    "maxSize": "max_size",
    "colorZones": "zones",
    "color_zones": "zones",
}


def _normalize_keys(raw: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in raw.items():
        out[_ALIASES.get(key, key)] = value
    return out


def _finite_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _clamp_int(value: Any, default: int, bounds: tuple[int, int]) -> int:
    number = _finite_number(value)
    if number is None:
        number = default
    return int(_clamp(round(number), bounds[0], bounds[1]))


def is_hex_color(value: Any) -> bool:
    return isinstance(value, str) and bool(_HEX_COLOR_RE.match(value.strip()))


def sanitize_config(raw: Any, mode: str = "rectangles") -> GenerationConfig:
    """Build a GenerationConfig from an untrusted dict."""
    ranges = RANGES.get(mode, RANGES["rectangles"])
    data = _normalize_keys(raw) if isinstance(raw, dict) else {}

    color = data.get("color")
    color = color.strip() if is_hex_color(color) else DEFAULT_COLOR

    count = _clamp_int(data.get("count"), DEFAULT_COUNT, ranges.count)
    min_size = _clamp_int(data.get("min_size"), DEFAULT_MIN_SIZE, ranges.min_size)
    max_size = _clamp_int(data.get("max_size"), DEFAULT_MAX_SIZE, ranges.max_size)
    if max_size < min_size:
        max_size = min_size

    return GenerationConfig(color=color, count=count, min_size=min_size, max_size=max_size)


def sanitize_zone(raw: Any, canvas_w: float, canvas_h: float) -> Zone | None:
    """Return a clamped zone, or None if the entry is unusable."""
    if not isinstance(raw, dict):
        return None
    color = raw.get("color")
    if not is_hex_color(color):
        return None
    x = _finite_number(raw.get("x"))
    y = _finite_number(raw.get("y"))
    if x is None or y is None:
        return None
    x = _clamp(x, 0.0, canvas_w)
    y = _clamp(y, 0.0, canvas_h)

    shape = raw.get("shape")
    if shape == "rect" or (shape is None and "radius" not in raw and "width" in raw):
        width = _finite_number(raw.get("width"))
        height = _finite_number(raw.get("height"))
        if width is None or height is None or width <= 0 or height <= 0:
            return None
        return RectZone(x=x, y=y, width=width, height=height, color=color.strip())

    radius = _finite_number(raw.get("radius"))
    if radius is None or radius <= 0:
        return None
    max_radius = min(canvas_w, canvas_h)
    radius = _clamp(radius, min(MIN_ZONE_RADIUS, max_radius), max_radius)
    return CircleZone(x=x, y=y, radius=radius, color=color.strip())


def sanitize_zones(raw: Any, canvas_w: float, canvas_h: float) -> list[Zone]:
    if not isinstance(raw, list):
        return []
    zones = []
    for entry in raw:
        zone = sanitize_zone(entry, canvas_w, canvas_h)
        if zone is None:
            logger.debug("Dropping unusable zone: %r", entry)
            continue
        zones.append(zone)
    return zones


def sanitize_art_plan(
    raw: Any, canvas_w: float, canvas_h: float,
) -> tuple[GenerationConfig, list[Zone]]:
    """Split an art plan into (config, zones). Accepts {rectangles, colorZones}."""
    data = _normalize_keys(raw) if isinstance(raw, dict) else {}
    config = sanitize_config(data.get("rectangles"), mode="art_plan")
    zones = sanitize_zones(data.get("zones"), canvas_w, canvas_h)
    return config, zones
