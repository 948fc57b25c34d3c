"""
Search Cache
Memoizing cache from search criteria to result lists.

Concurrent callers asking for the same criteria share one computation:
the first caller runs the supplier, the others wait for its result.
Callers for different criteria only contend on a short bookkeeping lock.
Entries live until the next full invalidation; there is no TTL or eviction.
"""

import logging
import threading
import time
from concurrent.futures import Future
from typing import Any, Callable, Dict, List

from ..models import Product, SearchCriteria

logger = logging.getLogger(__name__)


def _snapshot(results: List[Product]) -> List[Product]:
    """Copy results so callers cannot mutate what the cache holds."""
    return [product.model_copy() for product in results]


class CacheStatistics:
    """Track cache counters. Callers serialize updates."""

    def __init__(self):
        self.hits = 0
        self.misses = 0
        self.errors = 0
        self.invalidations = 0
        self.start_time = time.time()

    def get_hit_rate(self) -> float:
        """Calculate overall hit rate."""
        total = self.hits + self.misses
        return (self.hits / total * 100) if total > 0 else 0.0

    def get_stats(self) -> Dict[str, Any]:
        return {
            "uptime_seconds": time.time() - self.start_time,
            "hits": self.hits,
            "misses": self.misses,
            "errors": self.errors,
            "invalidations": self.invalidations,
            "hit_rate_percent": self.get_hit_rate(),
        }


class SearchCache:
    """
    Single-flight cache of search results.

    Each key maps to a ``Future``. The caller that creates the future owns
    the computation; later callers block on ``Future.result()``. A failed
    computation is removed so the next caller retries, and the exception is
    re-raised to the owner and to every waiter.
    """

    def __init__(self):
        self._entries: Dict[SearchCriteria, Future] = {}
        self._lock = threading.Lock()
        self.stats = CacheStatistics()

        logger.info("Search cache initialized")

    def get_or_compute(
        self, criteria: SearchCriteria, supplier: Callable[[], List[Product]]
    ) -> List[Product]:
        """
        Return cached results for ``criteria``, computing them at most once.

        Args:
            criteria: Cache key
            supplier: Called without arguments to produce the results on a miss

        Returns:
            A fresh list owned by the caller
        """
        with self._lock:
            future = self._entries.get(criteria)
            owner = future is None
            if owner:
                future = Future()
                self._entries[criteria] = future
                self.stats.misses += 1
            else:
                self.stats.hits += 1

        if not owner:
            logger.debug(f"Search cache HIT: {criteria!r}")
            return _snapshot(future.result())

        logger.debug(f"Search cache MISS: {criteria!r}")
        try:
            results = list(supplier())
        except BaseException as e:
            with self._lock:
                # Invalidation may already have dropped or replaced the entry
                if self._entries.get(criteria) is future:
                    del self._entries[criteria]
                self.stats.errors += 1
            future.set_exception(e)
            raise

        future.set_result(results)
        return _snapshot(results)

    def invalidate_all(self) -> int:
        """
        Drop every entry.

        A computation still running keeps answering the callers already
        waiting on it, but its result is no longer reachable from the cache.

        Returns:
            Number of entries dropped
        """
        with self._lock:
            dropped = len(self._entries)
            self._entries = {}
            if dropped:
                self.stats.invalidations += 1

        if dropped:
            logger.debug(f"Search cache invalidated: {dropped} entries dropped")
        return dropped

    def get_statistics(self) -> Dict[str, Any]:
        with self._lock:
            stats = self.stats.get_stats()
            stats["size"] = len(self._entries)
        return stats

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, criteria: object) -> bool:
        with self._lock:
            return criteria in self._entries
