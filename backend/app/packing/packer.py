"""Rectangle packer: randomized greedy placement under a bounded retry budget.

Each attempt draws a random size in [min_size, max_size] and a random
top-left corner that keeps the rectangle on the canvas, then checks the
candidate against everything placed so far:

- strict area overlap is rejected (nested pairs included, unless the
  config allows nesting);
- an allowed nested pair needs >= gap margin on all four sides;
- any other pair needs >= gap Euclidean border distance, diagonals included.

The run stops when target_count rectangles are placed or after
target_count * max_attempts_per_rect attempts, whichever comes first.
Falling short of the target is a normal outcome, not an error.
"""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field

import numpy as np

from app.packing.config import PackerConfig
from app.packing.geometry import Rectangle, is_valid_pair

logger = logging.getLogger(__name__)

# Random draws are generated in blocks to keep per-attempt overhead low.
_DRAW_BLOCK = 2048
# Upper bound on coverage mask cells (about 20 MB with its summed-area table).
_MASK_CELLS = 4_000_000


@dataclass
class PackResult:
    """Outcome of one packing run."""

    rectangles: list[Rectangle] = field(default_factory=list)
    target_count: int = 0
    attempts: int = 0
    max_attempts: int = 0

    @property
    def placed(self) -> int:
        return len(self.rectangles)

    @property
    def complete(self) -> bool:
        return self.placed >= self.target_count

    @property
    def exhausted(self) -> bool:
        """True if the attempt budget ran out before the target was reached."""
        return not self.complete


class _PlacementGrid:
    """Placed rectangles bucketed into uniform cells for local validity checks.

    Each rectangle is registered in every cell its closed box touches, so any
    rectangle that can reject a candidate shares a cell with the candidate's
    box grown by the gap.
    """

    def __init__(self, cell_size: float) -> None:
        self.cell_size = max(float(cell_size), 1.0)
        self._cells: defaultdict[tuple[int, int], list[Rectangle]] = defaultdict(list)

    def _span(self, lo: float, hi: float) -> range:
        return range(math.floor(lo / self.cell_size), math.floor(hi / self.cell_size) + 1)

    def add(self, rect: Rectangle) -> None:
        for cx in self._span(rect.x, rect.right):
            for cy in self._span(rect.y, rect.bottom):
                self._cells[(cx, cy)].append(rect)

    def accepts(self, rect: Rectangle, gap: float, allow_nesting: bool = False) -> bool:
        """is_valid_placement restricted to the rectangles near *rect*."""
        reach = max(gap, 0.0)
        seen: set[int] = set()
        for cx in self._span(rect.x - reach, rect.right + reach):
            for cy in self._span(rect.y - reach, rect.bottom + reach):
                for other in self._cells.get((cx, cy), ()):
                    if id(other) in seen:
                        continue
                    seen.add(id(other))
                    if not is_valid_pair(rect, other, gap, allow_nesting):
                        return False
        return True


class _CoverageMask:
    """Raster of cells lying fully inside some placed rectangle.

    A candidate whose box contains a covered cell strictly overlaps a placed
    rectangle, so whole blocks of draws can be rejected with one
    summed-area lookup. The cell side is 1 px up to _MASK_CELLS cells.
    """

    def __init__(self, width: float, height: float) -> None:
        w, h = int(math.floor(width)), int(math.floor(height))
        self.scale = max(1, math.ceil(math.sqrt(w * h / _MASK_CELLS)))
        self.nx = w // self.scale + 1
        self.ny = h // self.scale + 1
        self._covered = np.zeros((self.ny, self.nx), dtype=bool)
        self._table = np.zeros((self.ny + 1, self.nx + 1), dtype=np.int32)
        self._stale = False

    def mark(self, rect: Rectangle) -> None:
        s = self.scale
        i0, i1 = math.ceil(rect.x / s), math.floor(rect.right / s)
        j0, j1 = math.ceil(rect.y / s), math.floor(rect.bottom / s)
        if i1 > i0 and j1 > j0:
            self._covered[j0:j1, i0:i1] = True
            self._stale = True

    def blocked(self, xs: np.ndarray, ys: np.ndarray, ws: np.ndarray, hs: np.ndarray) -> np.ndarray:
        """Boolean mask of candidates that contain at least one covered cell."""
        if self._stale:
            self._table[1:, 1:] = self._covered.cumsum(axis=0, dtype=np.int32).cumsum(axis=1, dtype=np.int32)
            self._stale = False
        s = self.scale
        i0 = np.clip(-(-xs // s), 0, self.nx)
        i1 = np.clip((xs + ws) // s, 0, self.nx)
        j0 = np.clip(-(-ys // s), 0, self.ny)
        j1 = np.clip((ys + hs) // s, 0, self.ny)
        t = self._table
        total = t[j1, i1] - t[j0, i1] - t[j1, i0] + t[j0, i0]
        return (i1 > i0) & (j1 > j0) & (total > 0)


def pack_detailed(
    width: float,
    height: float,
    target_count: int,
    min_size: int,
    max_size: int,
    *,
    config: PackerConfig | None = None,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> PackResult:
    """Place up to *target_count* rectangles on a width x height canvas.

    Parameters
    ----------
    width, height : float
        Canvas extent in CSS pixels, both > 0.
    target_count : int
        Number of rectangles requested, >= 0.
    min_size, max_size : int
        Inclusive bounds for each rectangle side, 1 <= min_size <= max_size.
    config : PackerConfig, optional
        Gap, attempt budget and nesting. Defaults to GAP=2, 500 attempts per
        rect, no nesting.
    rng : numpy.random.Generator, optional
        Private random source. When omitted one is created from *seed*.

    Returns
    -------
    PackResult
        Placed rectangles in insertion order plus attempt accounting.
    """
    config = config or PackerConfig()
    rng = rng if rng is not None else np.random.default_rng(seed)

    target_count = max(0, int(target_count))
    max_attempts = target_count * config.max_attempts_per_rect
    result = PackResult(target_count=target_count, max_attempts=max_attempts)

    if target_count == 0:
        return result
    if min_size > width or min_size > height:
        logger.debug(
            "min_size %d exceeds canvas %sx%s, nothing can be placed",
            min_size, width, height,
        )
        return result

    gap = config.gap
    allow_nesting = config.allow_nesting
    grid = _PlacementGrid(max_size + max(gap, 0.0))
    # Allowed nesting overlaps in area, so the mask only prefilters without it.
    mask = None if allow_nesting else _CoverageMask(width, height)
    attempts = 0

    while result.placed < target_count and attempts < max_attempts:
        block = min(_DRAW_BLOCK, max_attempts - attempts)
        ws = rng.integers(min_size, max_size, size=block, endpoint=True)
        hs = rng.integers(min_size, max_size, size=block, endpoint=True)
        x_hi = np.maximum(0, np.floor(width - ws)).astype(np.int64)
        y_hi = np.maximum(0, np.floor(height - hs)).astype(np.int64)
        xs = rng.integers(0, x_hi, endpoint=True)
        ys = rng.integers(0, y_hi, endpoint=True)

        # Oversized draws would spill off the canvas.
        open_draws = (ws <= width) & (hs <= height)
        if mask is not None:
            open_draws &= ~mask.blocked(xs, ys, ws, hs)

        used = block
        for i in np.flatnonzero(open_draws):
            rect = Rectangle(x=int(xs[i]), y=int(ys[i]), w=int(ws[i]), h=int(hs[i]))
            if not grid.accepts(rect, gap, allow_nesting):
                continue
            grid.add(rect)
            if mask is not None:
                mask.mark(rect)
            result.rectangles.append(rect)
            if result.placed >= target_count:
                used = int(i) + 1
                break
        attempts += used

    result.attempts = attempts

    if result.exhausted:
        logger.info(
            "Attempt budget exhausted: placed %d / %d rectangles after %d attempts",
            result.placed, target_count, attempts,
        )
    else:
        logger.debug(
            "Placed %d rectangles in %d attempts (%.1f%% of budget)",
            result.placed, attempts, 100.0 * attempts / max_attempts,
        )
    return result


def pack(
    width: float,
    height: float,
    target_count: int,
    min_size: int,
    max_size: int,
    *,
    config: PackerConfig | None = None,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> list[Rectangle]:
    """Return a placement set of at most *target_count* rectangles."""
    return pack_detailed(
        width, height, target_count, min_size, max_size,
        config=config, rng=rng, seed=seed,
    ).rectangles


def attempt_ceiling(target_count: int, config: PackerConfig | None = None) -> int:
    """Upper bound on validity checks for one run."""
    config = config or PackerConfig()
    return max(0, target_count) * config.max_attempts_per_rect
