#!/usr/bin/env python3
"""
Screenshot service: cache lookup, single-flight capture, history.

Usage:
    service = ScreenshotService.from_config(config)
    result = service.get_screenshot("https://example.com")
    result.cached  # False the first time, True on repeat requests
"""
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Optional

from .cache import ScreenshotCache, generate_cache_key
from .config import Config
from .errors import CaptureFailedError, InvalidURLError
from .history import HistoryStore
from .models import CaptureResult
from .url_utils import is_valid_http_url

logger = logging.getLogger(__name__)

Capturer = Callable[[str], bytes]


class ScreenshotService:
    """
    Serves screenshots, capturing each distinct URL at most once per
    cache lifetime.

    Concurrent requests for the same URL share one capture: the later
    request blocks on a per-key lock and is then answered from cache.
    """

    def __init__(self, cache: ScreenshotCache, history: HistoryStore, capturer: Capturer):
        self.cache = cache
        self.history = history
        self.capturer = capturer
        # key -> [lock, number of requests holding or waiting on it]
        self._key_locks: Dict[str, list] = {}
        self._locks_guard = threading.Lock()

    @classmethod
    def from_config(cls, cfg: Config, capturer: Optional[Capturer] = None) -> "ScreenshotService":
        if capturer is None:
            from .capture import PlaywrightCapturer
            capturer = PlaywrightCapturer(cfg)
        return cls(
            cache=ScreenshotCache(ttl_seconds=cfg.cache_ttl, max_entries=cfg.cache_max_entries),
            history=HistoryStore(max_entries=cfg.history_max, path=cfg.history_file),
            capturer=capturer,
        )

    @contextmanager
    def _capture_lock(self, key: str):
        """Hold the per-key lock; the entry is dropped when the last user leaves."""
        with self._locks_guard:
            slot = self._key_locks.setdefault(key, [threading.Lock(), 0])
            slot[1] += 1
        try:
            with slot[0]:
                yield
        finally:
            with self._locks_guard:
                slot[1] -= 1
                if slot[1] == 0:
                    del self._key_locks[key]

    def get_screenshot(self, url: str) -> CaptureResult:
        """
        Return a screenshot of ``url``.

        Raises:
            InvalidURLError: url is not an absolute http(s) URL
            CaptureFailedError: the browser failed to render the page
        """
        url = (url or "").strip()
        if not is_valid_http_url(url):
            raise InvalidURLError(f"Invalid URL: {url!r} must be an absolute http or https URL")

        key = generate_cache_key(url)
        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"Cache hit for {url}")
            return CaptureResult.from_png(cached, cached=True)

        with self._capture_lock(key):
            # Another request may have filled the cache while we waited
            cached = self.cache.get(key)
            if cached is not None:
                logger.info(f"Cache hit for {url} after waiting on in-flight capture")
                return CaptureResult.from_png(cached, cached=True)

            logger.info(f"Capturing {url}")
            try:
                png = self.capturer(url)
            except CaptureFailedError:
                raise
            except Exception as e:
                raise CaptureFailedError(url, e) from e
            if not png:
                raise CaptureFailedError(url, ValueError("browser returned an empty screenshot"))

            self.cache.set(key, png)
            result = CaptureResult.from_png(png, cached=False)
            self.history.add(url, result.image_data)
            return result

    def stats(self) -> Dict[str, float]:
        cache_stats = self.cache.stats()
        return {
            "cache_entries": cache_stats["entries"],
            "cache_max_entries": cache_stats["max_entries"],
            "cache_ttl_seconds": cache_stats["ttl_seconds"],
            "history_entries": len(self.history),
        }
