"""Generation history: JSONL-based store of past artworks.

Each saved generation records the prompt, the result type, the sanitized
config (with zones), the placed rectangles and the canvas size. Entries are
appended; listing returns the newest first.
"""

from __future__ import annotations

import json
import logging
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from app.models.art import HistoryCreate, HistoryEntry

logger = logging.getLogger(__name__)


class HistoryStoreError(Exception):
    """Reading or writing the history file failed."""


class HistoryStore:
    """Append-only JSONL store for generation history."""

    def __init__(self, data_dir: Path | None = None) -> None:
        if data_dir is None:
            from app.config import settings

            data_dir = settings.history_dir
        self.data_dir = Path(data_dir)
        self.history_file = self.data_dir / "history.jsonl"
        self._lock = threading.Lock()

    def save(self, payload: HistoryCreate) -> HistoryEntry:
        """Append one generation. Canvas size is rounded to whole pixels."""
        entry = HistoryEntry(
            id=str(uuid.uuid4()),
            prompt=payload.prompt,
            result_type=payload.result_type,
            created_at=datetime.now(timezone.utc).isoformat(),
            config=payload.config,
            rectangles=payload.rectangles,
            canvas_width=round(payload.canvas_width),
            canvas_height=round(payload.canvas_height),
        )
        line = entry.model_dump_json() + "\n"
        try:
            with self._lock:
                self.data_dir.mkdir(parents=True, exist_ok=True)
                with open(self.history_file, "a", encoding="utf-8") as f:
                    f.write(line)
        except OSError as e:
            logger.error("Failed to save history: %s", e)
            raise HistoryStoreError("Failed to save history.") from e

        logger.info("Saved history entry %s (%d rectangles)", entry.id, len(entry.rectangles))
        return entry

    def list(self, limit: int = 10) -> list[HistoryEntry]:
        """Most recent *limit* entries, newest first."""
        entries = self._load()
        entries.reverse()
        return entries[: max(0, limit)]

    def get(self, entry_id: str) -> HistoryEntry | None:
        for entry in self._load():
            if entry.id == entry_id:
                return entry
        return None

    def _load(self) -> list[HistoryEntry]:
        if not self.history_file.exists():
            return []
        entries = []
        try:
            with open(self.history_file, encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        entries.append(HistoryEntry.model_validate(json.loads(line)))
                    except (json.JSONDecodeError, ValidationError) as e:
                        logger.warning("Skipping malformed history line %d: %s", lineno, e)
        except OSError as e:
            logger.error("Failed to read history: %s", e)
            raise HistoryStoreError("Failed to fetch history.") from e
        return entries


# Singleton
_store: HistoryStore | None = None


def get_history_store() -> HistoryStore:
    """Get or create the global HistoryStore singleton."""
    global _store
    if _store is None:
        _store = HistoryStore()
    return _store
