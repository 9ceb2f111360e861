"""AutoSnapper API client"""

import asyncio
import json
import logging
from typing import List, Optional

import aiohttp

from autosnapper_client.config import get_backend_url, get_timeout
from autosnapper_core.models import CaptureRequest, CaptureResult, HistoryEntry

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Any failed API call; the message is meant for the user"""


def _decode(body: bytes) -> str:
    # Undecodable bytes become U+FFFD
    return body.decode("utf-8", errors="replace")


class ScreenshotApi:
    """Thin async wrapper over ``/api/screenshot`` and ``/api/history``"""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or get_backend_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_timeout()

    async def capture(self, url: str) -> CaptureResult:
        """POST a capture request. Raises ApiError on any failure."""
        endpoint = f"{self.base_url}/api/screenshot"
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    endpoint,
                    json=CaptureRequest(url=url).to_dict(),
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as resp:
                    body = await resp.read()
                    status = resp.status
        except aiohttp.ClientError as e:
            logger.error(f"Cannot reach AutoSnapper API at {self.base_url}: {e}")
            raise ApiError(f"Cannot connect to {self.base_url}: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"Capture request for {url} timed out")
            raise ApiError("Request timed out") from e

        text = _decode(body)
        logger.debug(f"Raw response ({status}): {text[:200]}")
        if not 200 <= status < 300:
            raise ApiError(text.strip() or f"Server error: {status}")

        try:
            return CaptureResult.from_dict(json.loads(text))
        except (ValueError, TypeError, AttributeError) as e:
            raise ApiError("Invalid response from server") from e

    async def fetch_history(self) -> List[HistoryEntry]:
        """GET the capture history. Raises ApiError on any failure."""
        endpoint = f"{self.base_url}/api/history"
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    endpoint,
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as resp:
                    body = await resp.read()
                    status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ApiError(f"Failed to fetch history: {e}") from e

        text = _decode(body)
        if not 200 <= status < 300:
            raise ApiError(f"Failed to fetch history: {status} {text.strip()}")
        try:
            items = json.loads(text).get("history") or []
            return [HistoryEntry.from_dict(it) for it in items]
        except (ValueError, TypeError, AttributeError) as e:
            raise ApiError("Invalid history response from server") from e
