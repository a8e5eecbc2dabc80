"""
Response Cache
==============

Bounded key -> value store for generated payloads.

Design Rules:
    - Fixed maximum entry count (evicts oldest inserted key on overflow)
    - Eviction is insertion-order FIFO, NOT least-recently-used: reads do
      not refresh an entry, and overwriting a key keeps its position
    - Thread-safe; FastAPI runs sync handlers in a threadpool
    - Exposes minimal metrics for observability
    - Does NOT inspect or modify values
"""

import logging
import threading
from typing import Any, Dict, Hashable, Optional


logger = logging.getLogger(__name__)


class ResponseCache:
    """
    Thread-safe bounded FIFO cache.

    Attributes:
        max_entries: Maximum number of entries kept
        evicted_count: Number of entries evicted due to overflow

    Example:
        cache = ResponseCache(max_entries=500, name="density")

        cache.set("density-5-14-0-high", payload)
        payload = cache.get("density-5-14-0-high")
    """

    def __init__(self, max_entries: Optional[int] = 500, name: str = "cache") -> None:
        """
        Initialize the cache.

        Args:
            max_entries: Capacity, >= 1. None means unbounded.
            name: Label used in logs and metrics
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be >= 1")

        self._max_entries = max_entries
        self.name = name
        self._entries: Dict[Hashable, Any] = {}
        self._lock = threading.Lock()
        self._evicted_count: int = 0
        self._hits: int = 0
        self._misses: int = 0

    @property
    def max_entries(self) -> Optional[int]:
        """Maximum cache size."""
        return self._max_entries

    @property
    def size(self) -> int:
        """Current number of entries."""
        return len(self._entries)

    @property
    def evicted_count(self) -> int:
        """Number of entries evicted due to overflow."""
        return self._evicted_count

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Hashable) -> Optional[Any]:
        """
        Look up a value.

        Returns:
            Cached value, or None on a miss.
        """
        with self._lock:
            if key in self._entries:
                self._hits += 1
                return self._entries[key]
            self._misses += 1
            return None

    def set(self, key: Hashable, value: Any) -> None:
        """
        Store a value, evicting the oldest inserted key if over capacity.
        """
        with self._lock:
            self._entries[key] = value

            if self._max_entries is not None and len(self._entries) > self._max_entries:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                self._evicted_count += 1
                logger.debug(f"Cache '{self.name}' full, evicted {oldest!r}")

    def clear(self) -> int:
        """
        Remove all entries.

        Returns:
            Number of entries cleared.
        """
        with self._lock:
            cleared = len(self._entries)
            self._entries.clear()
        logger.info(f"Cache '{self.name}' cleared ({cleared} entries)")
        return cleared

    def metrics(self) -> dict:
        """
        Get cache metrics for observability.

        Returns:
            Dict with size, max_entries, evicted_count, hits, misses
        """
        return {
            "name": self.name,
            "size": self.size,
            "max_entries": self._max_entries,
            "evicted_count": self._evicted_count,
            "hits": self._hits,
            "misses": self._misses,
        }
