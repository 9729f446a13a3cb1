"""In-memory TTL cache for normalized flight lookups.

Entries live for a fixed, process-wide TTL and are dropped lazily the next
time the cache is touched; there is no background sweep. The cache is only
accessed from the event loop thread, so it carries no lock.

Memory is unbounded unless ``max_entries`` is set, in which case the least
recently used entries are evicted first.
"""

import logging
import math
import time
from collections.abc import Callable
from typing import Any

from cachetools import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_TTL = 3600  # 1h


class FlightCache:
    """TTL cache keyed by route and date."""

    def __init__(
        self,
        ttl: int = DEFAULT_TTL,
        max_entries: int = 0,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        maxsize = max_entries if max_entries > 0 else math.inf
        self._store: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)

    @staticmethod
    def make_key(dep_iata: str, arr_iata: str, flight_date: str | None = None) -> str:
        """Deterministic key: ``DEP-ARR-DATE`` with ``today`` for a missing date."""
        return f"{dep_iata}-{arr_iata}-{flight_date or 'today'}"

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if never set or expired."""
        value = self._store.get(key)
        if value is not None:
            logger.info("Cache HIT | key=%s", key)
        return value

    def set(self, key: str, value: Any) -> None:
        self._store[key] = value
        logger.info("Cache SET | key=%s | ttl=%ds", key, self.ttl)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        self._store.expire()
        return len(self._store)
