"""In-process implementation of CacheRepository."""

import json
import threading
from dataclasses import replace
from datetime import datetime
from typing import Optional

from mgnrega.domain.models import CacheEntry


class InMemoryCacheRepository:
    """
    Dict-backed result cache for single-process deployments and tests.

    Payloads are stored as JSON text so callers never share mutable state
    with the cache.
    """

    def __init__(self):
        self._entries: dict[str, tuple[str, CacheEntry]] = {}
        self._lock = threading.Lock()

    def get_active(self, cache_key: str, now: datetime) -> Optional[CacheEntry]:
        with self._lock:
            stored = self._entries.get(cache_key)
        if stored is None:
            return None
        data, entry = stored
        if entry.is_expired(now):
            return None
        return replace(entry, payload=json.loads(data))

    def upsert(self, entry: CacheEntry) -> None:
        data = json.dumps(entry.payload)
        with self._lock:
            self._entries[entry.cache_key] = (data, replace(entry, payload=None))

    def delete(self, cache_key: str) -> int:
        with self._lock:
            return 1 if self._entries.pop(cache_key, None) is not None else 0

    def delete_expired(self, now: datetime) -> int:
        with self._lock:
            expired = [k for k, (_, e) in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def delete_all(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def count_all(self) -> int:
        with self._lock:
            return len(self._entries)

    def count_expired(self, now: datetime) -> int:
        with self._lock:
            return sum(1 for _, e in self._entries.values() if e.is_expired(now))
