import time

import pytest

from pokefetch.cache import Cache


def test_add_then_get_returns_value():
    cache = Cache(60, start_reaper=False)
    cache.add("key", b"value")
    assert cache.get("key") == b"value"
    assert "key" in cache


def test_get_missing_returns_none():
    cache = Cache(60, start_reaper=False)
    assert cache.get("missing") is None
    assert "missing" not in cache


def test_add_overwrites_existing_entry():
    cache = Cache(60, start_reaper=False)
    cache.add("key", b"first")
    cache.add("key", b"second")
    assert cache.get("key") == b"second"
    assert len(cache) == 1


def test_remove_expired_keeps_fresh_entries():
    cache = Cache(3600, start_reaper=False)
    cache.add("a", b"1")
    cache.add("b", b"2")
    assert cache.remove_expired() == []
    assert len(cache) == 2


def test_remove_expired_drops_old_entries():
    cache = Cache(0, start_reaper=False)
    cache.add("a", b"1")
    cache.add("b", b"2")
    removed = cache.remove_expired()
    assert sorted(removed) == ["a", "b"]
    assert cache.get("a") is None
    assert len(cache) == 0


def test_reaper_purges_entries_in_background():
    with Cache(0.05) as cache:
        cache.add("key", b"value")
        deadline = time.monotonic() + 5
        while "key" in cache and time.monotonic() < deadline:
            time.sleep(0.01)
        assert cache.get("key") is None


def test_close_leaves_entries_readable():
    cache = Cache(3600)
    cache.add("key", b"value")
    cache.close()
    cache.close()
    assert cache.get("key") == b"value"


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        Cache(-1, start_reaper=False)


def test_reaper_needs_positive_interval():
    with pytest.raises(ValueError):
        Cache(0)