"""Unit tests for ResultCache."""
import pytest

from xssan.utils import cache as cache_module
from xssan.utils.cache import ResultCache


@pytest.fixture
def clock(monkeypatch):
    """Controllable monotonic clock."""
    now = [1000.0]
    monkeypatch.setattr(cache_module.time, "monotonic", lambda: now[0])
    return now


def test_get_missing_returns_none():
    cache = ResultCache()
    assert cache.get("nope") is None
    assert cache.misses == 1


def test_set_then_get():
    cache = ResultCache()
    cache.set("k", "v")
    assert cache.get("k") == "v"
    assert cache.hits == 1


def test_entries_expire(clock):
    cache = ResultCache(ttl_seconds=10)
    cache.set("k", "v")
    clock[0] += 9
    assert cache.get("k") == "v"
    clock[0] += 2
    assert cache.get("k") is None
    assert cache.size == 0


def test_least_recently_used_is_evicted():
    cache = ResultCache(max_size=2)
    cache.set("a", "1")
    cache.set("b", "2")
    cache.get("a")
    cache.set("c", "3")
    assert cache.get("b") is None
    assert cache.get("a") == "1"
    assert cache.get("c") == "3"


def test_expired_entries_evicted_before_live_ones(clock):
    cache = ResultCache(ttl_seconds=10, max_size=2)
    cache.set("old", "1")
    clock[0] += 5
    cache.set("live", "2")
    clock[0] += 6
    cache.set("new", "3")
    assert cache.get("live") == "2"
    assert cache.get("new") == "3"


def test_zero_ttl_disables_storage():
    cache = ResultCache(ttl_seconds=0)
    cache.set("k", "v")
    assert cache.size == 0


def test_clear_resets_counters():
    cache = ResultCache()
    cache.set("k", "v")
    cache.get("k")
    cache.clear()
    assert cache.size == 0
    assert cache.hits == 0


def test_make_key():
    key = ResultCache.make_key("strip_tags", "<b>")
    assert key.startswith("strip_tags:")
    assert key == ResultCache.make_key("strip_tags", "<b>")
    assert key != ResultCache.make_key("entities", "<b>")
    assert ResultCache.make_key("strip_tags", "") == (
        "strip_tags:e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
