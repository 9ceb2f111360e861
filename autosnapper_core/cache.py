#!/usr/bin/env python3
"""
In-memory screenshot cache.

Rendered pages are kept as raw PNG bytes keyed by a hash of the
normalised URL so that repeat requests skip the browser entirely.
"""
import hashlib
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Optional

from .url_utils import normalize_url

logger = logging.getLogger(__name__)


def generate_cache_key(url: str) -> str:
    return hashlib.sha256(normalize_url(url).encode("utf-8")).hexdigest()


@dataclass
class CacheEntry:
    png: bytes
    created_at: float = field(default_factory=time.time)

    def is_expired(self, ttl_seconds: float, now: Optional[float] = None) -> bool:
        if ttl_seconds <= 0:
            return False
        now = time.time() if now is None else now
        return now - self.created_at >= ttl_seconds


class ScreenshotCache:
    """
    Thread-safe TTL cache with oldest-first eviction.

    Args:
        ttl_seconds: Entry lifetime; ``<= 0`` keeps entries until evicted
        max_entries: Capacity; the oldest entry is dropped when full
    """

    def __init__(self, ttl_seconds: float = 3600, max_entries: int = 100):
        self.ttl = ttl_seconds
        self.max_entries = max(1, int(max_entries))
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self.ttl):
                logger.debug(f"Cache entry expired: {key[:12]}")
                del self._entries[key]
                return None
            return entry.png

    def set(self, key: str, png: bytes) -> None:
        with self._lock:
            if key in self._entries:
                del self._entries[key]
            self._entries[key] = CacheEntry(png=png)
            while len(self._entries) > self.max_entries:
                old_key, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache evicted: {old_key[:12]}")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> Dict[str, float]:
        with self._lock:
            return {
                "entries": len(self._entries),
                "max_entries": self.max_entries,
                "ttl_seconds": self.ttl,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
