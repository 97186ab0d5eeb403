"""Cache repository protocol for resolved payloads."""

from datetime import datetime
from typing import Protocol, Optional

from mgnrega.domain.models import CacheEntry


class CacheRepository(Protocol):
    """
    Key-value backend for the result cache.

    Implementations may raise on connection failures; ResultCache turns
    those into misses and failed write results.
    """

    def get_active(self, cache_key: str, now: datetime) -> Optional[CacheEntry]:
        """Get the entry for a key if it expires after ``now``."""
        ...

    def upsert(self, entry: CacheEntry) -> None:
        """Insert or replace the entry for ``entry.cache_key``."""
        ...

    def delete(self, cache_key: str) -> int:
        """Delete one entry; returns rows removed."""
        ...

    def delete_expired(self, now: datetime) -> int:
        """Delete entries that expire at or before ``now``."""
        ...

    def delete_all(self) -> int:
        """Delete every entry."""
        ...

    def count_all(self) -> int:
        """Number of stored entries, expired or not."""
        ...

    def count_expired(self, now: datetime) -> int:
        """Number of stored entries that expire at or before ``now``."""
        ...
