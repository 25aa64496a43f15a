"""Optional memoization for the pure extraction functions.

Nothing depends on this for correctness: with a size of 0 the wrapped
function is returned unchanged. Cached results are deep-copied on the way
out so callers never share a mutable record.
"""

from __future__ import annotations

import copy
import functools
import time
from collections import OrderedDict
from typing import Any, Callable, Hashable

DEFAULT_MAX_SIZE = 128
DEFAULT_TTL = 300.0  # seconds


class LRUCache:
    """Least-recently-used cache with per-entry expiry."""

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._entries: OrderedDict[Hashable, tuple[float, Any]] = OrderedDict()
        self._max_size = max_size
        self._ttl = ttl
        self._clock = clock
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return None
        stored_at, value = entry
        if self._clock() - stored_at > self._ttl:
            del self._entries[key]
            self.misses += 1
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        return value

    def set(self, key: Hashable, value: Any) -> None:
        if key in self._entries:
            del self._entries[key]
        while len(self._entries) >= self._max_size:
            self._entries.popitem(last=False)
        self._entries[key] = (self._clock(), value)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)


def _make_key(args: tuple, kwargs: dict) -> Hashable:
    return (args, tuple(sorted(kwargs.items())))


def memoize(func: Callable[..., Any], cache: LRUCache) -> Callable[..., Any]:
    """Wrap ``func`` so repeated calls with equal arguments reuse the first result."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        key = _make_key(args, kwargs)
        cached = cache.get(key)
        if cached is None:
            cached = func(*args, **kwargs)
            cache.set(key, cached)
        return copy.deepcopy(cached)

    wrapper.cache = cache  # type: ignore[attr-defined]
    return wrapper


def maybe_memoize(func: Callable[..., Any], max_size: int, ttl: float = DEFAULT_TTL) -> Callable[..., Any]:
    """Memoize ``func`` when ``max_size`` is positive, otherwise return it as is."""
    if max_size <= 0:
        return func
    return memoize(func, LRUCache(max_size=max_size, ttl=ttl))
