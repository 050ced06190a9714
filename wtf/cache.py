"""In-memory caches with expiry: a plain TTL cache and a bounded LRU cache."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable

Clock = Callable[[], float]

_DEFAULT_LRU_CAPACITY = 100


@dataclass
class _TimedItem:
    value: Any
    expires_at: float


class Cache:
    """Thread-safe mapping whose entries expire ``ttl`` seconds after being set."""

    def __init__(self, ttl: float, *, clock: Clock = time.monotonic) -> None:
        self._ttl = ttl
        self._clock = clock
        self._items: dict[str, _TimedItem] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: str) -> Any:
        """Return the value for ``key``, or None if missing or expired."""
        with self._lock:
            item = self._items.get(key)
            if item is None or self._clock() > item.expires_at:
                # Expired items are left for cleanup().
                return None
            return item.value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._items[key] = _TimedItem(value, self._clock() + self._ttl)

    def delete(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def cleanup(self) -> int:
        """Drop expired items and return how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, item in self._items.items() if now > item.expires_at]
            for key in expired:
                del self._items[key]
            return len(expired)

    def size(self) -> int:
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.size()


@dataclass
class CacheEntry:
    """A value held by an LRUCache together with its bookkeeping."""

    key: str
    value: Any
    created_at: float
    accessed_at: float
    access_count: int = 1


@dataclass(frozen=True)
class CacheStats:
    """Performance counters of a cache."""

    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int
    hit_ratio: float

    def __str__(self) -> str:
        return (
            f"Cache Stats: Hits={self.hits}, Misses={self.misses}, "
            f"Evictions={self.evictions}, Size={self.size}/{self.capacity}, "
            f"HitRatio={self.hit_ratio * 100:.2f}%"
        )


class LRUCache:
    """Thread-safe least-recently-used cache with an optional TTL.

    A ``ttl`` of zero or less disables expiry. A non-positive ``capacity``
    falls back to 100 entries.
    """

    def __init__(self, capacity: int, ttl: float = 0.0, *, clock: Clock = time.monotonic) -> None:
        self._capacity = capacity if capacity > 0 else _DEFAULT_LRU_CAPACITY
        self._ttl = ttl
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def ttl(self) -> float:
        return self._ttl

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return self._ttl > 0 and now - entry.created_at > self._ttl

    def get(self, key: str) -> Any:
        """Return the value for ``key`` and mark it recently used, or None on a miss."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            now = self._clock()
            if self._expired(entry, now):
                del self._entries[key]
                self._misses += 1
                return None
            entry.accessed_at = now
            entry.access_count += 1
            self._entries.move_to_end(key)
            self._hits += 1
            return entry.value

    def put(self, key: str, value: Any) -> None:
        """Add or update ``key``, evicting the least recently used entry if full."""
        with self._lock:
            now = self._clock()
            entry = self._entries.get(key)
            if entry is not None:
                entry.value = value
                entry.accessed_at = now
                entry.access_count += 1
                self._entries.move_to_end(key)
                return
            self._entries[key] = CacheEntry(key, value, now, now)
            if len(self._entries) > self._capacity:
                self._entries.popitem(last=False)
                self._evictions += 1

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Remove every entry and reset the counters."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def stats(self) -> CacheStats:
        with self._lock:
            total = self._hits + self._misses
            ratio = self._hits / total if total else 0.0
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
                capacity=self._capacity,
                hit_ratio=ratio,
            )

    def keys(self) -> list[str]:
        """Return the keys, least recently used first."""
        with self._lock:
            return list(self._entries)

    def cleanup_expired(self) -> int:
        """Drop expired entries from the least recently used end; return the count."""
        if self._ttl <= 0:
            return 0
        with self._lock:
            now = self._clock()
            removed = 0
            for key, entry in list(self._entries.items()):
                if not self._expired(entry, now):
                    break
                del self._entries[key]
                removed += 1
            return removed