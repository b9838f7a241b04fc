"""Thread-safe result cache for sanitization calls.

Results are keyed by strategy name plus a SHA-256 digest of the input, so
large texts are never held as dictionary keys. Entries expire after a TTL
and the cache never grows past ``max_size``.

Usage:
    cache = ResultCache(ttl_seconds=300, max_size=256)
    key = ResultCache.make_key("strip_tags", "<b>hi</b>")
    cache.set(key, "hi")
    cache.get(key)  # 'hi', or None once expired
"""
from __future__ import annotations

import hashlib
import threading
import time
from collections import OrderedDict


class ResultCache:
    """In-memory cache of sanitized results with TTL and LRU eviction.

    Attributes:
        _store: Ordered mapping of key to (expiry_timestamp, result).
        _ttl: Seconds an entry stays valid.
        _max_size: Entry limit; the least recently used entry goes first.
        _lock: Guards ``_store`` across request threads.
    """

    def __init__(self, ttl_seconds: int = 300, max_size: int = 256) -> None:
        self._store: OrderedDict[str, tuple[float, str]] = OrderedDict()
        self._ttl = ttl_seconds
        self._max_size = max_size
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> str | None:
        """Return the cached result for ``key``, or None if absent or expired."""
        with self._lock:
            entry = self._store.get(key)
            if entry is not None:
                expiry, result = entry
                if time.monotonic() < expiry:
                    self._store.move_to_end(key)
                    self.hits += 1
                    return result
                del self._store[key]
            self.misses += 1
        return None

    def set(self, key: str, result: str) -> None:
        """Store ``result`` under ``key``, evicting as needed.

        Expired entries are dropped first; if the cache is still full the
        least recently used entry is removed.
        """
        if self._ttl <= 0:
            return
        with self._lock:
            if key in self._store:
                self._store.move_to_end(key)
            elif len(self._store) >= self._max_size:
                self._evict_expired()
                while len(self._store) >= self._max_size:
                    self._store.popitem(last=False)
            self._store[key] = (time.monotonic() + self._ttl, result)

    def clear(self) -> None:
        """Remove all entries and reset the hit counters."""
        with self._lock:
            self._store.clear()
            self.hits = 0
            self.misses = 0

    @property
    def size(self) -> int:
        """Number of entries, including any that have expired but not been evicted."""
        return len(self._store)

    def _evict_expired(self) -> None:
        """Drop expired entries. Caller must hold the lock."""
        now = time.monotonic()
        for key in [k for k, (expiry, _) in self._store.items() if expiry <= now]:
            del self._store[key]

    @staticmethod
    def make_key(strategy: str, text: str) -> str:
        """Build a cache key from a strategy name and the input text.

        Example:
            >>> ResultCache.make_key("strip_tags", "")
            'strip_tags:e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
        """
        digest = hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()
        return f"{strategy}:{digest}"
