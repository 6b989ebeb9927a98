"""
Exchange Rate Cache

Process-wide cache of the latest RateSnapshot with a 24 hour expiry.

REFRESH CHAIN
-------------
    1. Cached snapshot younger than the TTL
    2. Primary source, then secondary source
    3. Last cached snapshot (stale)
    4. Hardcoded fallback table

Only one refresh runs at a time. A caller that finds a refresh in progress
gets the stale snapshot (or the fallback table) instead of waiting.
"""

import logging
import threading
import time
from datetime import timedelta
from functools import partial
from typing import Callable, Optional, Sequence

from shared.errors import RateSourceUnavailable

from .rates import RateSnapshot, fetch_rate_snapshot
from .reference import CACHE_TTL, PRIMARY_URL, SECONDARY_URL

logger = logging.getLogger(__name__)

Fetcher = Callable[[], RateSnapshot]


def default_fetchers() -> list[Fetcher]:
    """Primary then secondary upstream source."""
    return [
        partial(fetch_rate_snapshot, PRIMARY_URL, "primary"),
        partial(fetch_rate_snapshot, SECONDARY_URL, "secondary"),
    ]


class RateCache:
    """
    Cached exchange rates with time-based expiry.

    Example:
        cache = RateCache()
        rates = cache.get_rates()
        inr = rates.to_home(1000, "USD")
    """

    def __init__(
        self,
        fetchers: Sequence[Fetcher] | None = None,
        ttl: timedelta = CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetchers = list(fetchers) if fetchers is not None else default_fetchers()
        self._ttl_seconds = ttl.total_seconds()
        self._clock = clock

        self._snapshot: RateSnapshot | None = None
        self._fetched_at: float | None = None

        self._lock = threading.Lock()
        self._refresh_lock = threading.Lock()

    @property
    def snapshot(self) -> RateSnapshot | None:
        with self._lock:
            return self._snapshot

    @property
    def last_update_date(self) -> str | None:
        """Upstream publication date of the cached snapshot."""
        snapshot = self.snapshot
        return snapshot.date if snapshot is not None else None

    def is_fresh(self) -> bool:
        with self._lock:
            return self._is_fresh(self._fetched_at)

    def _is_fresh(self, fetched_at: float | None) -> bool:
        return fetched_at is not None and self._clock() - fetched_at < self._ttl_seconds

    def get_rates(self) -> RateSnapshot:
        """Return current rates, refreshing from upstream when expired."""
        with self._lock:
            snapshot, fetched_at = self._snapshot, self._fetched_at

        if snapshot is not None and self._is_fresh(fetched_at):
            return snapshot

        if not self._refresh_lock.acquire(blocking=False):
            logger.debug("Rate refresh already in progress, not waiting")
            return snapshot if snapshot is not None else RateSnapshot.fallback()

        try:
            return self._refresh(stale=snapshot)
        finally:
            self._refresh_lock.release()

    def _refresh(self, stale: RateSnapshot | None) -> RateSnapshot:
        for fetch in self._fetchers:
            try:
                fresh = fetch()
            except RateSourceUnavailable as e:
                logger.warning("Exchange rate source failed: %s", e)
                continue

            with self._lock:
                self._snapshot = fresh
                self._fetched_at = self._clock()

            logger.info(
                "Exchange rates refreshed from %s (date %s, %d currencies, USD=%.4f)",
                fresh.source, fresh.date, len(fresh.rates), fresh.usd_rate,
            )
            return fresh

        if stale is not None:
            logger.warning("All rate sources failed, using cached rates from %s", stale.date)
            return stale

        logger.warning("All rate sources failed, using fallback rates")
        return RateSnapshot.fallback()

    def clear(self) -> None:
        """Drop the cached snapshot so the next call refetches."""
        with self._lock:
            self._snapshot = None
            self._fetched_at = None


# Global cache object
_default_cache: Optional[RateCache] = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> RateCache:
    """Get or lazily create the process-wide cache."""
    global _default_cache

    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = RateCache()
        return _default_cache


def get_rates() -> RateSnapshot:
    """Current rates from the process-wide cache."""
    return get_default_cache().get_rates()


def get_last_update_date() -> str | None:
    return get_default_cache().last_update_date
