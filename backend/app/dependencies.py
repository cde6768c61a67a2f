"""FastAPI dependency injection."""

from __future__ import annotations

from app.history.store import HistoryStore, get_history_store


def get_store() -> HistoryStore:
    return get_history_store()
