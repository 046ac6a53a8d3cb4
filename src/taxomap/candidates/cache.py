"""Thread-safe LRU cache keyed by stable entity handles."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Dict, Generic, Hashable, Optional, TypeVar

V = TypeVar("V")


class EntityCache(Generic[V]):
    """Per-family memo of generation results.

    Keys are stable handles (entity ids, term ids, infobox names) rather than
    object identity. The first stored value for a key wins: a concurrent
    recomputation is discarded because generation is deterministic. With
    ``max_entries=None`` entries live as long as the cache itself.
    """

    def __init__(self, name: str, *, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive when provided")
        self.name = name
        self.max_entries = max_entries
        self._lock = threading.RLock()
        self._entries: "OrderedDict[Hashable, V]" = OrderedDict()
        self._stats = {"hits": 0, "misses": 0, "evictions": 0}

    def get(self, key: Hashable) -> Optional[V]:
        with self._lock:
            if key not in self._entries:
                self._stats["misses"] += 1
                return None
            self._entries.move_to_end(key)
            self._stats["hits"] += 1
            return self._entries[key]

    def put(self, key: Hashable, value: V) -> V:
        """Store ``value`` unless ``key`` is already present; return the cached value."""

        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                self._entries.move_to_end(key)
                return existing
            self._entries[key] = value
            if self.max_entries is not None and len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
                self._stats["evictions"] += 1
            return value

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {**self._stats, "size": len(self._entries)}


__all__ = ["EntityCache"]
