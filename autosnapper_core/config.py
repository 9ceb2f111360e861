#!/usr/bin/env python3
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Config:
    """Application configuration"""
    host: str = os.getenv("AUTOSNAPPER_HOST", "0.0.0.0")
    port: int = int(os.getenv("AUTOSNAPPER_PORT", os.getenv("PORT", "8080")))
    debug: bool = os.getenv("AUTOSNAPPER_DEBUG", "false").lower() == "true"
    log_level: str = os.getenv("AUTOSNAPPER_LOG_LEVEL", "INFO").upper()

    # Browser
    headless: bool = os.getenv("AUTOSNAPPER_HEADLESS", "true").lower() == "true"
    viewport_width: int = int(os.getenv("AUTOSNAPPER_VIEWPORT_WIDTH", "1280"))
    viewport_height: int = int(os.getenv("AUTOSNAPPER_VIEWPORT_HEIGHT", "800"))
    navigation_timeout_ms: int = int(os.getenv("AUTOSNAPPER_NAV_TIMEOUT_MS", "30000"))
    wait_until: str = os.getenv("AUTOSNAPPER_WAIT_UNTIL", "load")
    full_page: bool = os.getenv("AUTOSNAPPER_FULL_PAGE", "true").lower() in ["true", "1", "yes"]
    proxy: Optional[str] = (os.getenv("AUTOSNAPPER_PROXY") or os.getenv("HTTPS_PROXY") or os.getenv("HTTP_PROXY") or None)

    # Cache of rendered pages
    cache_ttl: int = int(os.getenv("AUTOSNAPPER_CACHE_TTL", "3600"))
    cache_max_entries: int = int(os.getenv("AUTOSNAPPER_CACHE_MAX_ENTRIES", "100"))

    # Capture history; empty file path keeps it in memory only
    history_max: int = int(os.getenv("AUTOSNAPPER_HISTORY_MAX", "50"))
    history_file: Optional[Path] = Path(os.environ["AUTOSNAPPER_HISTORY_FILE"]) if os.getenv("AUTOSNAPPER_HISTORY_FILE") else None


config = Config()
