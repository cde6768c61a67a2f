"""Task → model selection. Cheap model for routing and plain rectangles, mid tier for art plans."""

from __future__ import annotations

from app.config import settings

_TASK_MODEL_MAP = {
    "interpret": "cheap",
    "art_plan": "mid",
    "rectangles": "cheap",
}


def get_model_for_task(task: str) -> str:
    tier = _TASK_MODEL_MAP.get(task, "cheap")
    if tier == "cheap":
        return settings.model_cheap
    return settings.model_mid
