"""
Screenshot client session state.

Holds what a capture UI needs for one session: the typed URL and its
validity, the current screenshot, the pending flag, the last error and
the history list.

Usage:
    client = ScreenshotClient()
    client.set_url("https://example.com")
    if client.can_submit:
        await client.capture()
    client.screenshot_bytes()
"""

import asyncio
import logging
from typing import List, Optional

from autosnapper_client.api import ApiError, ScreenshotApi
from autosnapper_client.config import HISTORY_REFRESH_DELAY
from autosnapper_core.models import CaptureResult, HistoryEntry
from autosnapper_core.url_utils import is_valid_http_url

logger = logging.getLogger(__name__)

EMPTY_HISTORY_TEXT = "No screenshots captured yet."


def validate(url: str) -> bool:
    """True iff ``url`` is an absolute http/https URL"""
    return is_valid_http_url(url)


def format_history(entries: List[HistoryEntry]) -> str:
    """Render history as text, or the empty-state line"""
    if not entries:
        return EMPTY_HISTORY_TEXT
    return "\n".join(f"{i}. {e.url} ({e.timestamp})" for i, e in enumerate(entries, 1))


class ScreenshotClient:
    """
    One capture session against an AutoSnapper backend.

    At most one capture is in flight; while ``loading`` is set further
    ``capture()`` calls return immediately. A failed capture only sets
    ``error_message``; the previous screenshot stays on display.
    """

    def __init__(self, api: Optional[ScreenshotApi] = None, history_refresh_delay: float = HISTORY_REFRESH_DELAY):
        self.api = api or ScreenshotApi()
        self.history_refresh_delay = history_refresh_delay
        self.url = ""
        self.is_valid_url = True
        self.result: Optional[CaptureResult] = None
        self.error_message = ""
        self.loading = False
        self.history: List[HistoryEntry] = []
        self._refresh_task: Optional[asyncio.Task] = None

    def set_url(self, value: str) -> None:
        self.url = value
        self.is_valid_url = validate(value)

    @property
    def show_url_warning(self) -> bool:
        return bool(self.url) and not self.is_valid_url

    @property
    def can_submit(self) -> bool:
        return bool(self.url) and self.is_valid_url and not self.loading

    @property
    def cached(self) -> bool:
        return bool(self.result and self.result.cached)

    @property
    def history_is_empty(self) -> bool:
        return not self.history

    def screenshot_bytes(self) -> Optional[bytes]:
        return self.result.png_bytes() if self.result else None

    async def capture(self, url: Optional[str] = None) -> Optional[CaptureResult]:
        """
        Capture ``url`` (or the URL already set).

        Returns the new result, or None when the call was a no-op or
        failed. Failures are reported through ``error_message``.
        """
        if url is not None and not self.loading:
            self.set_url(url)
        if not self.can_submit:
            return None

        self.loading = True
        self.error_message = ""
        try:
            result = await self.api.capture(self.url)
        except ApiError as e:
            logger.error(f"Capture failed: {e}")
            self.error_message = str(e) or "An unexpected error occurred."
            return None
        finally:
            self.loading = False

        self.result = result
        if not result.cached:
            self._schedule_history_refresh()
        return result

    def _schedule_history_refresh(self) -> None:
        if self._refresh_task and not self._refresh_task.done():
            return
        self._refresh_task = asyncio.ensure_future(self._refresh_history_later())

    async def _refresh_history_later(self) -> None:
        await asyncio.sleep(self.history_refresh_delay)
        await self.load_history()

    async def wait_for_history_refresh(self) -> None:
        """Wait for a scheduled history refresh, if any"""
        if self._refresh_task is not None:
            await self._refresh_task

    @property
    def history_refresh_pending(self) -> bool:
        return self._refresh_task is not None and not self._refresh_task.done()

    async def load_history(self) -> List[HistoryEntry]:
        """Fetch history; failures are logged and yield an empty list"""
        try:
            self.history = await self.api.fetch_history()
        except ApiError as e:
            logger.error(f"Failed to load history: {e}")
            self.history = []
        return self.history
