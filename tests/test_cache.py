"""Tests for the screenshot cache."""

import time

from autosnapper_core.cache import CacheEntry, ScreenshotCache, generate_cache_key


def test_generate_cache_key():
    key1 = generate_cache_key("https://example.com")
    key2 = generate_cache_key("https://google.com")

    assert key1 != key2, "Different URLs should generate different cache keys"
    assert key1 == generate_cache_key("https://example.com"), "Same URL should generate same cache key"
    assert len(key1) == 64


def test_cache_key_ignores_case_and_fragment():
    assert generate_cache_key("https://EXAMPLE.com/#x") == generate_cache_key("https://example.com/")


def test_get_missing_returns_none():
    cache = ScreenshotCache()
    assert cache.get("nope") is None
    assert len(cache) == 0


def test_set_then_get():
    cache = ScreenshotCache()
    cache.set("k", b"png")
    assert cache.get("k") == b"png"


def test_expired_entry_is_a_miss_and_removed():
    cache = ScreenshotCache(ttl_seconds=10)
    cache.set("k", b"png")
    cache._entries["k"].created_at = time.time() - 11

    assert cache.get("k") is None
    assert len(cache) == 0


def test_zero_ttl_never_expires():
    entry = CacheEntry(png=b"x", created_at=0)
    assert entry.is_expired(0) is False
    assert entry.is_expired(5, now=10) is True


def test_oldest_entry_evicted_when_full():
    cache = ScreenshotCache(max_entries=2)
    cache.set("a", b"1")
    cache.set("b", b"2")
    cache.set("c", b"3")

    assert cache.get("a") is None
    assert cache.get("b") == b"2"
    assert cache.get("c") == b"3"


def test_reset_existing_key_refreshes_position():
    cache = ScreenshotCache(max_entries=2)
    cache.set("a", b"1")
    cache.set("b", b"2")
    cache.set("a", b"1b")
    cache.set("c", b"3")

    assert cache.get("a") == b"1b"
    assert cache.get("b") is None


def test_clear_and_stats():
    cache = ScreenshotCache(ttl_seconds=60, max_entries=5)
    cache.set("a", b"1")
    assert cache.stats() == {"entries": 1, "max_entries": 5, "ttl_seconds": 60}
    cache.clear()
    assert len(cache) == 0
