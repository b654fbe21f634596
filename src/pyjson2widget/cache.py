"""Read-through cache for fetched API documents.

Entries expire after a fixed time-to-live and are evicted lazily when read.
There is no invalidation API. One instance is shared by whatever fetch layer
creates it; nothing here is process-global.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from pyjson2widget._constants import DEFAULT_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the clock reading it was stored at."""

    value: Any
    stored_at: float


class TTLCache:
    """Time-to-live cache keyed by request URL (or any hashable key)."""

    def __init__(
        self,
        ttl: float = DEFAULT_CACHE_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl!r}")
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> float:
        return self._ttl

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.stored_at < self._ttl

    def get(self, key: Hashable) -> CacheEntry | None:
        """Return the live entry for ``key``, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("cache miss: %s", key)
                return None
            if not self._is_fresh(entry):
                del self._entries[key]
                logger.debug("cache expired: %s", key)
                return None
            logger.debug("cache hit: %s", key)
            return entry

    def put(self, key: Hashable, value: Any) -> CacheEntry:
        entry = CacheEntry(value=value, stored_at=self._clock())
        with self._lock:
            self._entries[key] = entry
        return entry

    def get_or_load(self, key: Hashable, loader: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, calling ``loader`` on a miss.

        Exceptions from ``loader`` propagate and nothing is cached.
        """
        entry = self.get(key)
        if entry is not None:
            return entry.value
        value = loader()
        self.put(key, value)
        return value

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for entry in self._entries.values() if self._is_fresh(entry))
