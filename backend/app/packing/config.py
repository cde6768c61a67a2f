"""Packer configuration: gap, retry budget and nesting."""

from __future__ import annotations

from dataclasses import dataclass

# Minimum border-to-border separation between two rectangles, in CSS pixels.
GAP = 2

# Placement retries per requested rectangle before the run gives up.
MAX_ATTEMPTS_PER_RECT = 500


@dataclass(frozen=True)
class PackerConfig:
    """Controls the packer's geometric tolerance and attempt budget.

    With *allow_nesting* off (the default) every pair of placed rectangles is
    area-disjoint. Turning it on lets a rectangle land inside another one as
    long as it keeps *gap* margin on all four sides.
    """

    gap: float = GAP
    max_attempts_per_rect: int = MAX_ATTEMPTS_PER_RECT
    allow_nesting: bool = False

    @classmethod
    def from_settings(cls) -> PackerConfig:
        from app.config import settings

        return cls(
            gap=settings.packer_gap,
            max_attempts_per_rect=settings.packer_max_attempts_per_rect,
            allow_nesting=settings.packer_allow_nesting,
        )
