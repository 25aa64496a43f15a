"""Tests for docmuse.cache."""

from __future__ import annotations

import pytest

from docmuse.analysis.analyzer import analyze_source_structure
from docmuse.cache import LRUCache, maybe_memoize, memoize
from docmuse.extraction.decisions import extract_design_decisions


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestLRUCache:
    def test_rejects_zero_size(self):
        with pytest.raises(ValueError):
            LRUCache(max_size=0)

    def test_get_set(self):
        cache = LRUCache(max_size=2)
        cache.set("a", 1)
        assert cache.get("a") == 1
        assert cache.get("missing") is None
        assert cache.hits == 1
        assert cache.misses == 1

    def test_evicts_least_recently_used(self):
        cache = LRUCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache
        assert len(cache) == 2

    def test_expiry(self):
        clock = FakeClock()
        cache = LRUCache(max_size=2, ttl=10, clock=clock)
        cache.set("a", 1)
        clock.now = 5
        assert cache.get("a") == 1
        clock.now = 16
        assert cache.get("a") is None
        assert len(cache) == 0

    def test_overwrite(self):
        cache = LRUCache(max_size=2)
        cache.set("a", 1)
        cache.set("a", 2)
        assert cache.get("a") == 2
        assert len(cache) == 1

    def test_clear(self):
        cache = LRUCache()
        cache.set("a", 1)
        cache.clear()
        assert len(cache) == 0


class TestMemoize:
    def test_reuses_result(self):
        calls = []

        def double(x):
            calls.append(x)
            return [x * 2]

        wrapped = memoize(double, LRUCache())
        assert wrapped(2) == [4]
        assert wrapped(2) == [4]
        assert calls == [2]

    def test_returns_copies(self):
        wrapped = memoize(lambda: {"items": []}, LRUCache())
        first = wrapped()
        first["items"].append("x")
        assert wrapped() == {"items": []}

    def test_kwargs_are_part_of_key(self):
        calls = []

        def f(a, b=0):
            calls.append((a, b))
            return a + b

        wrapped = memoize(f, LRUCache())
        wrapped(1, b=2)
        wrapped(1, b=3)
        wrapped(1, b=2)
        assert calls == [(1, 2), (1, 3)]


class TestMaybeMemoize:
    def test_disabled_returns_function(self):
        assert maybe_memoize(analyze_source_structure, 0) is analyze_source_structure

    def test_enabled_wraps(self):
        wrapped = maybe_memoize(analyze_source_structure, 4)
        assert wrapped is not analyze_source_structure
        assert wrapped.cache.get is not None

    def test_same_results_with_and_without_cache(self, english_log):
        cached = maybe_memoize(extract_design_decisions, 8)

        def strip(report):
            data = report.to_dict()
            for d in data["decisions"]:
                del d["id"]
                del d["timestamp"]
            return data

        assert strip(cached(english_log)) == strip(extract_design_decisions(english_log))
        assert strip(cached(english_log)) == strip(extract_design_decisions(english_log))
        assert cached.cache.hits == 1
