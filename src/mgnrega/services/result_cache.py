"""TTL cache of resolved payloads."""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Callable, Optional

from mgnrega.core.months import month_label, normalize_month
from mgnrega.core.timezone import now_ist
from mgnrega.domain.models import CacheEntry, CacheStats, CacheWriteResult
from mgnrega.repositories.protocols import CacheRepository

logger = logging.getLogger(__name__)

DEFAULT_TTL_HOURS = 6


def cache_key(region_key: str, month: date) -> str:
    """Cache key for a region and month: ``<regionKey>_<YYYY>-<MM>``."""
    return f"{region_key}_{month_label(normalize_month(month))}"


class ResultCache:
    """
    Cache of opaque JSON payloads with lazy expiry.

    Expired entries are reported as misses but stay stored until
    ``clear_expired`` or ``clear_all`` runs. The backend being unavailable
    never raises out of this class: reads become misses and writes return a
    failed CacheWriteResult.
    """

    def __init__(
        self,
        repository: CacheRepository,
        default_ttl_hours: float = DEFAULT_TTL_HOURS,
        clock: Callable[[], datetime] = now_ist,
    ):
        self._repo = repository
        self._default_ttl = default_ttl_hours
        self._clock = clock

    @property
    def default_ttl_hours(self) -> float:
        return self._default_ttl

    def get(self, key: str) -> Optional[Any]:
        """Return the live payload for ``key``, or None."""
        try:
            entry = self._repo.get_active(key, self._clock())
        except Exception as exc:
            logger.warning("Cache GET error for %s: %s", key, exc)
            return None

        if entry is None:
            logger.debug("Cache MISS for key: %s", key)
            return None
        logger.debug("Cache HIT for key: %s", key)
        return entry.payload

    def set(self, key: str, payload: Any, ttl_hours: Optional[float] = None) -> CacheWriteResult:
        """Store ``payload`` under ``key``, replacing any previous entry."""
        hours = self._default_ttl if ttl_hours is None else ttl_hours
        now = self._clock()
        entry = CacheEntry(
            cache_key=key,
            payload=payload,
            expires_at=now + timedelta(hours=hours),
            created_at=now,
        )
        try:
            self._repo.upsert(entry)
        except Exception as exc:
            logger.warning("Cache SET error for %s: %s", key, exc)
            return CacheWriteResult(ok=False, error=str(exc))

        logger.debug("Cache SET for key: %s, expires in %s hours", key, hours)
        return CacheWriteResult(ok=True)

    def delete(self, key: str) -> int:
        """Remove one entry."""
        try:
            return self._repo.delete(key)
        except Exception as exc:
            logger.warning("Cache DELETE error for %s: %s", key, exc)
            return 0

    def clear_expired(self) -> int:
        """Purge logically expired entries; returns the number removed."""
        try:
            deleted = self._repo.delete_expired(self._clock())
        except Exception as exc:
            logger.error("Clear expired cache error: %s", exc)
            return 0
        logger.info("Cleared %d expired cache entries", deleted)
        return deleted

    def clear_all(self) -> int:
        """Remove every entry; returns the number removed."""
        try:
            deleted = self._repo.delete_all()
        except Exception as exc:
            logger.error("Clear all cache error: %s", exc)
            return 0
        logger.info("Cleared all cache (%d entries)", deleted)
        return deleted

    def stats(self) -> CacheStats:
        """Counts of stored, live and expired entries."""
        try:
            now = self._clock()
            total = self._repo.count_all()
            expired = self._repo.count_expired(now)
        except Exception as exc:
            logger.error("Cache stats error: %s", exc)
            return CacheStats()
        return CacheStats(total=total, active=total - expired, expired=expired)
