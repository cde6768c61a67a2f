"""Zone coloring: first zone containing a rectangle's center sets its fill."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from app.models.art import CircleZone, PlacedRect, RectZone, Zone
from app.packing.geometry import Rectangle


def point_in_zone(px: float, py: float, zone: Zone) -> bool:
    """Membership test, boundary inclusive."""
    if isinstance(zone, CircleZone):
        return math.hypot(px - zone.x, py - zone.y) <= zone.radius
    if isinstance(zone, RectZone):
        return (
            zone.x <= px <= zone.x + zone.width
            and zone.y <= py <= zone.y + zone.height
        )
    return False


def color_for_rect(rect: Rectangle, zones: Iterable[Zone], default_color: str) -> str:
    cx, cy = rect.center
    for zone in zones:
        if point_in_zone(cx, cy, zone):
            return zone.color
    return default_color


def colorize(
    rects: Sequence[Rectangle],
    zones: Sequence[Zone],
    default_color: str,
) -> list[PlacedRect]:
    """Attach an effective fill color to every rectangle."""
    return [
        PlacedRect(
            x=r.x, y=r.y, w=r.w, h=r.h,
            color=color_for_rect(r, zones, default_color),
        )
        for r in rects
    ]
