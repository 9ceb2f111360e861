"""
Wire-level data model shared by the server and the client.

Field names on the wire are camelCase (``imageData``) to match the
JSON contract of ``/api/screenshot`` and ``/api/history``.
"""

import base64
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass
class CaptureRequest:
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CaptureRequest":
        return cls(url=str(data.get("url") or "").strip())


@dataclass
class CaptureResult:
    """A rendered screenshot, base64-encoded PNG."""
    image_data: str
    cached: bool = False

    @classmethod
    def from_png(cls, png: bytes, cached: bool = False) -> "CaptureResult":
        return cls(image_data=base64.b64encode(png).decode("ascii"), cached=cached)

    def png_bytes(self) -> bytes:
        return base64.b64decode(self.image_data)

    def to_dict(self) -> Dict[str, Any]:
        return {"imageData": self.image_data, "cached": self.cached}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CaptureResult":
        image_data = data.get("imageData")
        if not image_data or not isinstance(image_data, str):
            raise ValueError("Invalid response from server")
        return cls(image_data=image_data, cached=bool(data.get("cached", False)))


@dataclass
class HistoryEntry:
    url: str
    timestamp: str
    image_data: str

    @classmethod
    def create(cls, url: str, image_data: str, when: Optional[datetime] = None) -> "HistoryEntry":
        when = when or datetime.now(timezone.utc)
        return cls(url=url, timestamp=when.isoformat(), image_data=image_data)

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "timestamp": self.timestamp, "imageData": self.image_data}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls(
            url=str(data.get("url", "")),
            timestamp=str(data.get("timestamp", "")),
            image_data=str(data.get("imageData", "")),
        )
