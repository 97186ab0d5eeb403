"""Tiered resolution of monthly performance records."""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from dataclasses import replace
from datetime import date
from typing import Callable, Optional

from mgnrega.core.months import MonthLike, normalize_month
from mgnrega.domain.models import DataSource, PerformanceRecord
from mgnrega.providers.performance_provider import PerformanceProvider
from mgnrega.repositories.protocols import PerformanceRepository
from mgnrega.services.result_cache import ResultCache, cache_key
from mgnrega.services.synthetic import generate_performance

logger = logging.getLogger(__name__)

Generator = Callable[[str, date], PerformanceRecord]


class PerformanceResolver:
    """
    Resolves a region's monthly record from the cheapest source available.

    Priority: cache -> database -> upstream API -> synthetic data. A record
    found in a lower tier is written back into every tier above it, so
    repeated calls for the same key settle into cache hits. The synthetic tier
    always succeeds, which makes ``resolve`` total: unavailable caches, stores
    or providers degrade to the next tier and write-back failures are logged,
    never raised.

    Holds no per-key state and takes no locks, so it can be shared across
    threads. Two concurrent misses for the same key both do the work; the
    writes are upserts, so the outcome is the same.
    """

    def __init__(
        self,
        cache: ResultCache,
        store: PerformanceRepository,
        provider: PerformanceProvider,
        generator: Generator = generate_performance,
        upstream_timeout_seconds: Optional[float] = None,
        cache_ttl_hours: Optional[float] = None,
    ):
        self._cache = cache
        self._store = store
        self._provider = provider
        self._generator = generator
        self._upstream_timeout = upstream_timeout_seconds
        self._cache_ttl = cache_ttl_hours

    def resolve(self, region_key: str, month: MonthLike) -> PerformanceRecord:
        """Return the record for ``region_key`` in the month containing ``month``."""
        month_start = normalize_month(month)
        key = cache_key(region_key, month_start)

        cached = self._from_cache(key)
        if cached is not None:
            logger.info("Data source for %s: CACHE", key)
            return cached

        stored = self._from_store(region_key, month_start)
        if stored is not None:
            logger.info("Data source for %s: DATABASE", key)
            self._write_cache(key, stored)
            return stored.with_source(DataSource.DATABASE)

        fetched = self._from_upstream(region_key, month_start)
        if fetched is not None:
            logger.info("Data source for %s: API", key)
            fetched = replace(fetched, region_key=region_key, month=month_start)
            self._write_store(fetched)
            self._write_cache(key, fetched)
            return fetched.with_source(DataSource.API)

        logger.info("Data source for %s: SYNTHETIC", key)
        synthetic = self._generator(region_key, month_start)
        self._write_store(synthetic)
        self._write_cache(key, synthetic)
        return synthetic.with_source(DataSource.SYNTHETIC)

    def _from_cache(self, key: str) -> Optional[PerformanceRecord]:
        payload = self._cache.get(key)
        if payload is None:
            return None
        try:
            record = PerformanceRecord.from_payload(payload)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Ignoring malformed cache payload for %s: %s", key, exc)
            return None
        return record.with_source(DataSource.CACHE)

    def _from_store(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        try:
            return self._store.find(region_key, month)
        except Exception as exc:
            logger.warning("Performance store unavailable for %s %s: %s", region_key, month, exc)
            return None

    def _from_upstream(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        """Ask the provider; errors and timeouts count as "no data"."""
        try:
            if self._upstream_timeout is None:
                return self._provider.fetch(region_key, month)

            executor = ThreadPoolExecutor(max_workers=1)
            try:
                future = executor.submit(self._provider.fetch, region_key, month)
                return future.result(timeout=self._upstream_timeout)
            finally:
                executor.shutdown(wait=False)
        except FuturesTimeoutError:
            logger.warning(
                "Upstream fetch for %s %s timed out after %ss",
                region_key,
                month,
                self._upstream_timeout,
            )
        except Exception as exc:
            logger.warning("Upstream fetch for %s %s failed: %s", region_key, month, exc)
        return None

    def _write_store(self, record: PerformanceRecord) -> None:
        try:
            self._store.upsert(record)
        except Exception as exc:
            logger.error(
                "Could not persist %s %s, returning unsaved record: %s",
                record.region_key,
                record.month,
                exc,
            )

    def _write_cache(self, key: str, record: PerformanceRecord) -> None:
        result = self._cache.set(key, record.to_payload(), self._cache_ttl)
        if not result.ok:
            logger.debug("Cache write-back skipped for %s: %s", key, result.error)
