"""Result cache models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass
class CacheEntry:
    """
    A cached payload with its expiry.

    An entry whose ``expires_at`` is at or before "now" is logically absent,
    even while it is still stored.
    """

    cache_key: str
    payload: Any
    expires_at: datetime
    created_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now


@dataclass(frozen=True)
class CacheStats:
    """Counts of stored cache entries."""

    total: int = 0
    active: int = 0
    expired: int = 0


@dataclass(frozen=True)
class CacheWriteResult:
    """Outcome of a best-effort cache write."""

    ok: bool
    error: Optional[str] = None
