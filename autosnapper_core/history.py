#!/usr/bin/env python3
"""
Capture history.

Keeps the most recent captures, newest first. When a file path is
given the list survives restarts: it is loaded on start-up and
rewritten as JSON after every append.
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional

from .models import HistoryEntry

logger = logging.getLogger(__name__)


class HistoryStore:
    def __init__(self, max_entries: int = 50, path: Optional[Path] = None):
        self.max_entries = max(1, int(max_entries))
        self.path = Path(path) if path else None
        self._entries: List[HistoryEntry] = []
        self._lock = threading.Lock()
        if self.path:
            self._entries = self._load()[: self.max_entries]

    def _load(self) -> List[HistoryEntry]:
        if not self.path or not self.path.exists():
            return []
        try:
            obj = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable history file {self.path}: {e}")
            return []
        items = obj.get("history") if isinstance(obj, dict) else None
        if not isinstance(items, list):
            return []
        return [HistoryEntry.from_dict(it) for it in items if isinstance(it, dict)]

    def _save(self) -> None:
        # Caller holds the lock
        if not self.path:
            return
        payload = {"history": [e.to_dict() for e in self._entries]}
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target, then swap it in atomically
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent,
                prefix=f".{self.path.name}.", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump(payload, f)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.error(f"Failed to persist history to {self.path}: {e}")
        finally:
            if tmp_name:
                Path(tmp_name).unlink(missing_ok=True)

    def add(self, url: str, image_data: str) -> HistoryEntry:
        entry = HistoryEntry.create(url, image_data)
        with self._lock:
            self._entries.insert(0, entry)
            del self._entries[self.max_entries:]
            self._save()
        return entry

    def list(self, limit: Optional[int] = None) -> List[HistoryEntry]:
        with self._lock:
            items = list(self._entries)
        if limit is not None:
            items = items[:limit]
        return items

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._save()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
