import time

import pytest

from pokedexcli.cache import Cache


@pytest.mark.parametrize(
    "key, val",
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, val):
    with Cache(5.0) as cache:
        cache.add(key, val)
        assert cache.get(key) == val


def test_reap_loop():
    base_time = 0.005
    with Cache(base_time) as cache:
        cache.add("https://example.com", b"terstdata")
        deadline = time.monotonic() + 2.0
        while cache.get("https://example.com") is not None and time.monotonic() < deadline:
            time.sleep(base_time + 0.005)
        assert cache.get("https://example.com") is None


def test_get_missing_key_returns_none():
    with Cache(5.0) as cache:
        assert cache.get("https://example.com/missing") is None


def test_add_replaces_value():
    with Cache(5.0) as cache:
        cache.add("k", b"one")
        cache.add("k", b"two")
        assert cache.get("k") == b"two"
        assert len(cache) == 1


def test_reap_keeps_fresh_entries():
    with Cache(60.0) as cache:
        cache.add("k", b"v")
        cache.reap(time.monotonic(), 60.0)
        assert cache.get("k") == b"v"


def test_reap_removes_old_entries():
    with Cache(60.0) as cache:
        cache.add("a", b"1")
        cache.add("b", b"2")
        cache.reap(time.monotonic() + 120.0, 60.0)
        assert cache.get("a") is None
        assert cache.get("b") is None
        assert len(cache) == 0


def test_close_stops_reaper():
    cache = Cache(0.01)
    cache.close()
    assert not cache._reaper.is_alive()


def test_contains():
    with Cache(5.0) as cache:
        cache.add("k", b"v")
        assert "k" in cache
        assert "other" not in cache


def test_invalid_interval():
    with pytest.raises(ValueError):
        Cache(0)