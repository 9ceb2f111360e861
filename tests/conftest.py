"""
Shared fixtures: a fake capturer instead of a real browser, and a
Flask test client wired to it.
"""

import pytest

from autosnapper_core.cache import ScreenshotCache
from autosnapper_core.history import HistoryStore
from autosnapper_core.service import ScreenshotService

PNG = b"\x89PNG\r\n\x1a\n" + b"fake-image-data"


class FakeCapturer:
    """Records calls; returns PNG bytes or raises ``error`` if set."""

    def __init__(self, png: bytes = PNG, error: Exception = None):
        self.png = png
        self.error = error
        self.calls = []

    def __call__(self, url: str) -> bytes:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.png


@pytest.fixture
def capturer():
    return FakeCapturer()


@pytest.fixture
def service(capturer):
    return ScreenshotService(
        cache=ScreenshotCache(ttl_seconds=3600, max_entries=10),
        history=HistoryStore(max_entries=10),
        capturer=capturer,
    )


@pytest.fixture
def app(service):
    from autosnapper_server.app import create_app
    app = create_app(service=service)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
