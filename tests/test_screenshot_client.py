"""Tests for ScreenshotClient session behaviour."""

import asyncio

import pytest

from autosnapper_client.api import ApiError
from autosnapper_client.client import EMPTY_HISTORY_TEXT, ScreenshotClient, format_history, validate
from autosnapper_core.models import CaptureResult, HistoryEntry


class FakeApi:
    """Scripted stand-in for ScreenshotApi."""

    def __init__(self, results=None, history=None, history_error=None):
        self.results = list(results or [])
        self.history = history or []
        self.history_error = history_error
        self.capture_calls = []
        self.history_calls = 0
        self.release = None

    async def capture(self, url):
        self.capture_calls.append(url)
        if self.release is not None:
            await self.release.wait()
        outcome = self.results.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def fetch_history(self):
        self.history_calls += 1
        if self.history_error is not None:
            raise self.history_error
        return list(self.history)


def make_client(api):
    return ScreenshotClient(api=api, history_refresh_delay=0.01)


class TestValidate:
    @pytest.mark.parametrize("url", ["http://a.com", "https://a.com"])
    def test_accepts(self, url):
        assert validate(url) is True

    @pytest.mark.parametrize("url", ["ftp://a.com", "not a url", "", "HTTP://a.com"])
    def test_rejects(self, url):
        assert validate(url) is False

    def test_warning_only_for_non_empty_invalid(self):
        client = make_client(FakeApi())
        client.set_url("")
        assert client.show_url_warning is False
        assert client.can_submit is False
        client.set_url("nope")
        assert client.show_url_warning is True
        client.set_url("https://a.com")
        assert client.show_url_warning is False
        assert client.can_submit is True


@pytest.mark.asyncio
async def test_successful_capture_replaces_screenshot():
    api = FakeApi(results=[CaptureResult("AAAA", cached=True)])
    client = make_client(api)

    result = await client.capture("https://a.com")

    assert result.image_data == "AAAA"
    assert client.result is result
    assert client.cached is True
    assert client.error_message == ""
    assert client.loading is False


@pytest.mark.asyncio
async def test_invalid_url_is_noop():
    api = FakeApi()
    client = make_client(api)

    assert await client.capture("ftp://a.com") is None
    assert api.capture_calls == []


@pytest.mark.asyncio
async def test_submit_while_pending_is_noop():
    api = FakeApi(results=[CaptureResult("AAAA", cached=True)])
    api.release = asyncio.Event()
    client = make_client(api)

    first = asyncio.ensure_future(client.capture("https://a.com"))
    await asyncio.sleep(0)
    assert client.loading is True
    assert client.can_submit is False

    assert await client.capture("https://b.com") is None
    assert client.url == "https://a.com"

    api.release.set()
    await first
    assert api.capture_calls == ["https://a.com"]
    assert client.loading is False


@pytest.mark.asyncio
async def test_error_keeps_previous_screenshot():
    api = FakeApi(results=[
        CaptureResult("FIRST", cached=True),
        ApiError("Failed to capture screenshot: The page took too long to load"),
    ])
    client = make_client(api)

    await client.capture("https://a.com")
    result = await client.capture("https://b.com")

    assert result is None
    assert client.result.image_data == "FIRST"
    assert client.cached is True
    assert client.error_message == "Failed to capture screenshot: The page took too long to load"
    assert client.loading is False


@pytest.mark.asyncio
async def test_new_capture_clears_previous_error():
    api = FakeApi(results=[ApiError("boom"), CaptureResult("OK", cached=True)])
    client = make_client(api)

    await client.capture("https://a.com")
    assert client.error_message == "boom"
    await client.capture()
    assert client.error_message == ""


@pytest.mark.asyncio
async def test_cached_result_does_not_refresh_history():
    api = FakeApi(results=[CaptureResult("AAAA", cached=True)])
    client = make_client(api)

    await client.capture("https://a.com")
    await asyncio.sleep(0.05)

    assert client.history_refresh_pending is False
    assert api.history_calls == 0


@pytest.mark.asyncio
async def test_fresh_result_refreshes_history_after_delay():
    entry = HistoryEntry("https://a.com", "2026-01-01T00:00:00+00:00", "AAAA")
    api = FakeApi(results=[CaptureResult("AAAA", cached=False)], history=[entry])
    client = make_client(api)

    await client.capture("https://a.com")
    assert api.history_calls == 0
    assert client.history_refresh_pending is True

    await client.wait_for_history_refresh()
    assert api.history_calls == 1
    assert client.history == [entry]


@pytest.mark.asyncio
async def test_history_failure_is_empty_list():
    api = FakeApi(history_error=ApiError("down"))
    client = make_client(api)
    client.history = [HistoryEntry("https://old.com", "t", "x")]

    assert await client.load_history() == []
    assert client.history_is_empty is True
    assert client.error_message == ""


def test_format_history_empty_state():
    assert format_history([]) == EMPTY_HISTORY_TEXT


def test_format_history_lists_entries():
    text = format_history([
        HistoryEntry("https://b.com", "2026-01-02T00:00:00+00:00", "x"),
        HistoryEntry("https://a.com", "2026-01-01T00:00:00+00:00", "x"),
    ])
    assert text.splitlines()[0].startswith("1. https://b.com")
    assert "2. https://a.com" in text


def test_screenshot_bytes():
    client = make_client(FakeApi())
    assert client.screenshot_bytes() is None
    client.result = CaptureResult.from_png(b"png")
    assert client.screenshot_bytes() == b"png"
