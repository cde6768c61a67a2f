"""Shared test fixtures."""

from __future__ import annotations

import pytest

from app.packing.geometry import Rectangle


# Art plan as returned by the model for "happy face" on a 400x400 canvas
HAPPY_FACE_PLAN = {
    "color_zones": [
        {"x": 140, "y": 160, "radius": 32, "color": "#000000"},
        {"x": 260, "y": 160, "radius": 32, "color": "#000000"},
        {"x": 200, "y": 260, "radius": 60, "color": "#ff0000"},
    ],
    "rectangles": {"color": "#ffd700", "count": 1200, "min_size": 10, "max_size": 24},
}

SIMPLE_RECTANGLES = {"color": "#0000ff", "count": 800, "min_size": 6, "max_size": 20}


def random_candidates(rng, n: int, width: int, height: int, lo: int = 1, hi: int = 40) -> list[Rectangle]:
    """Random integer rectangles inside a canvas, for cross-checking predicates."""
    out = []
    for _ in range(n):
        w = int(rng.integers(lo, hi, endpoint=True))
        h = int(rng.integers(lo, hi, endpoint=True))
        x = int(rng.integers(0, max(0, width - w), endpoint=True))
        y = int(rng.integers(0, max(0, height - h), endpoint=True))
        out.append(Rectangle(x, y, w, h))
    return out


@pytest.fixture
def happy_face_plan() -> dict:
    return {
        "color_zones": [dict(z) for z in HAPPY_FACE_PLAN["color_zones"]],
        "rectangles": dict(HAPPY_FACE_PLAN["rectangles"]),
    }


@pytest.fixture
def history_store(tmp_path):
    from app.history.store import HistoryStore

    return HistoryStore(data_dir=tmp_path / "history")


@pytest.fixture
def no_llm(monkeypatch):
    """Make sure no API key leaks in from the environment."""
    from app.config import settings

    monkeypatch.setattr(settings, "anthropic_api_key", "")
