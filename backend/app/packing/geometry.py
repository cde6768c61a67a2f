"""Leaf-node rectangle geometry. No packer imports.

All rectangles are axis-aligned with a top-left origin, in CSS pixels.
Edges are treated as closed intervals: two rectangles whose edges coincide
touch, but do not intersect.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box: top-left corner (x, y) and size (w, h)."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.w / 2, self.y + self.h / 2)

    @property
    def area(self) -> float:
        return self.w * self.h

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rectangle:
        return cls(x=data["x"], y=data["y"], w=data["w"], h=data["h"])


def rect_contains(outer: Rectangle, inner: Rectangle) -> bool:
    """True if all four sides of *inner* lie within *outer* (inclusive)."""
    return (
        inner.x >= outer.x
        and inner.y >= outer.y
        and inner.right <= outer.right
        and inner.bottom <= outer.bottom
    )


def contains_with_gap(outer: Rectangle, inner: Rectangle, gap: float) -> bool:
    """True if every side of *inner* is at least *gap* inside *outer*."""
    return (
        inner.x - outer.x >= gap
        and inner.y - outer.y >= gap
        and outer.right - inner.right >= gap
        and outer.bottom - inner.bottom >= gap
    )


def rects_intersect_strict(a: Rectangle, b: Rectangle) -> bool:
    """True if the areas overlap. Shared edges do not count."""
    return not (
        a.right <= b.x
        or b.right <= a.x
        or a.bottom <= b.y
        or b.bottom <= a.y
    )


def rects_touch_or_overlap(a: Rectangle, b: Rectangle) -> bool:
    """True if the rectangles overlap or touch (zero separation)."""
    return not (
        a.right < b.x
        or b.right < a.x
        or a.bottom < b.y
        or b.bottom < a.y
    )


def _axis_separation(a0: float, a1: float, b0: float, b1: float) -> float:
    """Gap between intervals [a0, a1] and [b0, b1]; 0 if they overlap."""
    if a0 > b1:
        return a0 - b1
    if b0 > a1:
        return b0 - a1
    return 0.0


def min_edge_distance(a: Rectangle, b: Rectangle) -> float:
    """Minimum Euclidean distance between the borders of two disjoint rectangles.

    An axis on which the projections overlap contributes zero, so side-by-side
    rectangles measure straight across and diagonal neighbours measure
    corner to corner.
    """
    dx = _axis_separation(a.x, a.right, b.x, b.right)
    dy = _axis_separation(a.y, a.bottom, b.y, b.bottom)
    return math.hypot(dx, dy)


def is_valid_pair(
    candidate: Rectangle,
    other: Rectangle,
    gap: float,
    allow_nesting: bool = False,
) -> bool:
    """Apply the placement rule to one pair of rectangles.

    Area overlap is checked first, so a nested pair (whose areas always
    overlap) is rejected unless *allow_nesting* is set. With nesting allowed,
    a rectangle may sit inside another if every side keeps *gap* margin.
    """
    cand_in_other = rect_contains(other, candidate)
    other_in_cand = rect_contains(candidate, other)
    nested = cand_in_other or other_in_cand

    if rects_intersect_strict(candidate, other) and not (allow_nesting and nested):
        return False

    if nested:
        # Nested with enough margin is conclusive; no distance check needed.
        if cand_in_other:
            return contains_with_gap(other, candidate, gap)
        return contains_with_gap(candidate, other, gap)

    dist = min_edge_distance(candidate, other)
    if dist < gap:
        return False

    # Shared border point or edge without nesting. Only reachable when gap <= 0.
    if rects_touch_or_overlap(candidate, other) and dist == 0:
        return False

    return True


def is_valid_placement(
    candidate: Rectangle,
    placed: Iterable[Rectangle],
    gap: float,
    allow_nesting: bool = False,
) -> bool:
    """True if *candidate* passes the pair rule against every placed rectangle."""
    for other in placed:
        if not is_valid_pair(candidate, other, gap, allow_nesting):
            return False
    return True


def rect_in_canvas(rect: Rectangle, width: float, height: float) -> bool:
    """True if *rect* lies within [0, width] x [0, height]."""
    return rect.x >= 0 and rect.y >= 0 and rect.right <= width and rect.bottom <= height


def find_violations(
    rects: Sequence[Rectangle],
    width: float,
    height: float,
    gap: float,
    allow_nesting: bool = False,
) -> list[str]:
    """Audit a finished placement set. Returns one message per broken invariant."""
    issues: list[str] = []
    for i, r in enumerate(rects):
        if not rect_in_canvas(r, width, height):
            issues.append(f"rect {i} {r.to_dict()} outside canvas {width}x{height}")

    for i in range(len(rects)):
        a = rects[i]
        for j in range(i + 1, len(rects)):
            b = rects[j]
            nested = rect_contains(a, b) or rect_contains(b, a)
            if rects_intersect_strict(a, b) and not (allow_nesting and nested):
                issues.append(f"rects {i} and {j} overlap")
            elif rect_contains(a, b):
                if not contains_with_gap(a, b, gap):
                    issues.append(f"rect {j} nested in {i} with margin < {gap}")
            elif rect_contains(b, a):
                if not contains_with_gap(b, a, gap):
                    issues.append(f"rect {i} nested in {j} with margin < {gap}")
            elif min_edge_distance(a, b) < gap:
                issues.append(
                    f"rects {i} and {j} closer than {gap} "
                    f"({min_edge_distance(a, b):.3f})"
                )
            elif rects_touch_or_overlap(a, b):
                issues.append(f"rects {i} and {j} touch")
    return issues
