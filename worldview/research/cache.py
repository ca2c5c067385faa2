"""In-memory LRU cache for composed research results."""

import threading
import time
from collections import OrderedDict
from typing import Any, Protocol

from ..config import CACHE_MAX_SIZE
from ..logging_config import get_logger
from ..models import AggregateResult

logger = get_logger(__name__)

SAMPLE_KEYS = 5


class IResultCache(Protocol):
    """Exact-key store of AggregateResults."""

    def get(self, key: str) -> AggregateResult | None:
        """Return the cached result, or None on a miss."""
        ...

    def put(self, key: str, value: AggregateResult) -> None:
        """Store a result, replacing any existing entry."""
        ...

    def clear(self) -> int:
        """Drop every entry. Return the number dropped."""
        ...

    def stats(self) -> dict[str, Any]:
        """Return size and a sample of keys."""
        ...


class ResultCache:
    """
    Bounded LRU cache with optional TTL.

    Note: This is per-process. With multiple workers, each worker keeps
    its own cache.
    """

    def __init__(self, max_size: int = CACHE_MAX_SIZE, ttl_seconds: float | None = None):
        """
        Initialize cache.

        Args:
            max_size: Maximum number of cached places
            ttl_seconds: Time to live in seconds; None keeps entries until evicted
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._entries: OrderedDict[str, tuple[AggregateResult, float | None]] = OrderedDict()
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> AggregateResult | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                value, expiry = entry
                if expiry is None or time.monotonic() < expiry:
                    self._entries.move_to_end(key)
                    self.hits += 1
                    return value
                del self._entries[key]
                logger.debug("Expired cache entry %s", key)

            self.misses += 1
            return None

    def put(self, key: str, value: AggregateResult) -> None:
        with self._lock:
            expiry = time.monotonic() + self._ttl if self._ttl is not None else None
            self._entries[key] = (value, expiry)
            self._entries.move_to_end(key)

            while len(self._entries) > self._max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cache entry %s", evicted)

    def clear(self) -> int:
        with self._lock:
            previous_size = len(self._entries)
            self._entries.clear()
            self.hits = 0
            self.misses = 0
            return previous_size

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._entries),
                "keys_sample": list(self._entries)[:SAMPLE_KEYS],
                "max_size": self._max_size,
                "ttl_seconds": self._ttl,
                "hits": self.hits,
                "misses": self.misses,
            }
