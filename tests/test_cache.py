"""
Response Cache Tests
====================
"""

import pytest

from paris_traffic.cache import ResponseCache


class TestResponseCache:
    """Tests for the bounded FIFO cache."""

    def test_miss_returns_none(self):
        cache = ResponseCache(max_entries=2)
        assert cache.get("absent") is None

    def test_set_and_get(self):
        cache = ResponseCache(max_entries=2)
        cache.set("a", {"x": 1})
        assert cache.get("a") == {"x": 1}
        assert "a" in cache
        assert len(cache) == 1

    def test_evicts_oldest_inserted(self):
        cache = ResponseCache(max_entries=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")  # reads do not refresh
        cache.set("c", 3)

        assert "a" not in cache
        assert cache.get("b") == 2
        assert cache.get("c") == 3
        assert cache.evicted_count == 1

    def test_overwrite_keeps_position(self):
        cache = ResponseCache(max_entries=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)
        cache.set("c", 3)

        assert "a" not in cache
        assert "b" in cache

    def test_size_never_exceeds_capacity(self):
        cache = ResponseCache(max_entries=3)
        for i in range(20):
            cache.set(i, i)
            assert len(cache) <= 3
        assert cache.evicted_count == 17

    def test_unbounded(self):
        cache = ResponseCache(max_entries=None)
        for i in range(1000):
            cache.set(i, i)
        assert len(cache) == 1000

    def test_clear(self):
        cache = ResponseCache(max_entries=5)
        cache.set("a", 1)
        cache.set("b", 2)

        assert cache.clear() == 2
        assert len(cache) == 0
        assert cache.get("a") is None

    def test_metrics(self):
        cache = ResponseCache(max_entries=5, name="density")
        cache.set("a", 1)
        cache.get("a")
        cache.get("b")

        metrics = cache.metrics()
        assert metrics["name"] == "density"
        assert metrics["size"] == 1
        assert metrics["hits"] == 1
        assert metrics["misses"] == 1

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ResponseCache(max_entries=0)
