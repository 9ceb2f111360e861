#!/usr/bin/env python3
"""
Headless page capture with Playwright.

Each capture launches its own Chromium, renders the page and returns
the PNG bytes. The browser is always closed before returning.
"""
import asyncio
import logging
import subprocess
import sys
from typing import Any, Dict, Optional

from .config import Config, config as default_config
from .errors import CaptureFailedError

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]


def _install_chromium() -> bool:
    """Install the Playwright Chromium build. Returns True on success."""
    logger.warning("Chromium not found for Playwright, installing...")
    try:
        result = subprocess.run(
            [sys.executable, "-m", "playwright", "install", "chromium"],
            capture_output=True,
            text=True,
            timeout=300
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.error(f"Playwright install failed: {e}")
        return False
    if result.returncode != 0:
        logger.error(f"Playwright install failed: {result.stderr[:200]}")
        return False
    logger.info("Playwright Chromium installed")
    return True


def _launch_options(cfg: Config) -> Dict[str, Any]:
    launch_args: Dict[str, Any] = {
        "headless": bool(cfg.headless),
        "args": list(LAUNCH_ARGS),
    }
    if cfg.proxy:
        launch_args["proxy"] = {"server": cfg.proxy}
    return launch_args


async def _launch(playwright, cfg: Config):
    launch_args = _launch_options(cfg)
    try:
        return await playwright.chromium.launch(**launch_args)
    except Exception as e:
        if "Executable doesn't exist" in str(e) and _install_chromium():
            return await playwright.chromium.launch(**launch_args)
        raise


async def capture_page_png(url: str, cfg: Optional[Config] = None) -> bytes:
    """
    Render ``url`` in headless Chromium and return a PNG screenshot.

    Args:
        url: Absolute http(s) URL
        cfg: Browser settings (viewport, timeouts, full page)

    Returns:
        PNG bytes

    Raises:
        CaptureFailedError: navigation or screenshot failed
    """
    from playwright.async_api import async_playwright

    cfg = cfg or default_config
    try:
        async with async_playwright() as playwright:
            browser = await _launch(playwright, cfg)
            try:
                context = await browser.new_context(
                    viewport={"width": cfg.viewport_width, "height": cfg.viewport_height},
                )
                page = await context.new_page()
                await page.goto(url, wait_until=cfg.wait_until, timeout=cfg.navigation_timeout_ms)
                png = await page.screenshot(full_page=cfg.full_page, type="png")
            finally:
                await browser.close()
    except CaptureFailedError:
        raise
    except Exception as e:
        raise CaptureFailedError(url, e) from e

    logger.info(f"Captured {url} ({len(png)} bytes)")
    return png


class PlaywrightCapturer:
    """Synchronous capture callable; runs each capture on a fresh event loop."""

    def __init__(self, cfg: Optional[Config] = None):
        self.config = cfg or default_config

    def __call__(self, url: str) -> bytes:
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            return loop.run_until_complete(capture_page_png(url, self.config))
        finally:
            loop.close()
            asyncio.set_event_loop(None)
