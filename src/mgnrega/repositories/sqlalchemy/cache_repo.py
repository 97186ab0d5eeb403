"""SQLAlchemy implementation of CacheRepository."""

import json
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import sessionmaker

from mgnrega.core.timezone import IST_TZ, to_naive_ist
from mgnrega.domain.models import CacheEntry
from mgnrega.repositories.sqlalchemy.orm_models import CacheORM


class SqlAlchemyCacheRepository:
    """SQLAlchemy-backed result cache table (``api_cache``)."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_active(self, cache_key: str, now: datetime) -> Optional[CacheEntry]:
        """Get the entry for a key if it has not expired."""
        with self._session_factory() as db:
            orm_entry = (
                db.query(CacheORM)
                .filter(
                    CacheORM.cache_key == cache_key,
                    CacheORM.expires_at > to_naive_ist(now),
                )
                .first()
            )
            return self._to_domain(orm_entry) if orm_entry else None

    def upsert(self, entry: CacheEntry) -> None:
        """Insert or replace a cache entry."""
        with self._session_factory() as db:
            orm_entry = db.get(CacheORM, entry.cache_key)
            data = json.dumps(entry.payload)
            created_at = to_naive_ist(entry.created_at) if entry.created_at else None

            if orm_entry:
                orm_entry.cache_data = data
                orm_entry.expires_at = to_naive_ist(entry.expires_at)
                orm_entry.created_at = created_at
            else:
                db.add(
                    CacheORM(
                        cache_key=entry.cache_key,
                        cache_data=data,
                        expires_at=to_naive_ist(entry.expires_at),
                        created_at=created_at,
                    )
                )
            db.commit()

    def delete(self, cache_key: str) -> int:
        """Delete one entry."""
        with self._session_factory() as db:
            deleted = db.query(CacheORM).filter(CacheORM.cache_key == cache_key).delete()
            db.commit()
            return deleted

    def delete_expired(self, now: datetime) -> int:
        """Delete entries that expire at or before ``now``."""
        with self._session_factory() as db:
            deleted = (
                db.query(CacheORM)
                .filter(CacheORM.expires_at <= to_naive_ist(now))
                .delete()
            )
            db.commit()
            return deleted

    def delete_all(self) -> int:
        """Delete every entry."""
        with self._session_factory() as db:
            deleted = db.query(CacheORM).delete()
            db.commit()
            return deleted

    def count_all(self) -> int:
        """Number of stored entries."""
        with self._session_factory() as db:
            return db.query(CacheORM).count()

    def count_expired(self, now: datetime) -> int:
        """Number of stored entries that are logically expired."""
        with self._session_factory() as db:
            return (
                db.query(CacheORM)
                .filter(CacheORM.expires_at <= to_naive_ist(now))
                .count()
            )

    @staticmethod
    def _to_domain(orm: CacheORM) -> CacheEntry:
        """Convert ORM cache row to domain model."""
        return CacheEntry(
            cache_key=orm.cache_key,
            payload=json.loads(orm.cache_data),
            expires_at=IST_TZ.localize(orm.expires_at),
            created_at=IST_TZ.localize(orm.created_at) if orm.created_at else None,
        )
