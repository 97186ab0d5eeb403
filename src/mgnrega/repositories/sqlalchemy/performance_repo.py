"""SQLAlchemy implementation of PerformanceRepository."""

import logging
from datetime import date, datetime
from typing import Callable, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from mgnrega.core.exceptions import StoreError
from mgnrega.core.timezone import IST_TZ, now_ist, to_naive_ist
from mgnrega.domain.models import DataSource, PerformanceRecord
from mgnrega.repositories.sqlalchemy.orm_models import PerformanceORM

logger = logging.getLogger(__name__)


class SqlAlchemyPerformanceRepository:
    """SQLAlchemy-backed store of monthly performance records."""

    def __init__(
        self,
        session_factory: sessionmaker,
        clock: Callable[[], datetime] = now_ist,
    ):
        self._session_factory = session_factory
        self._clock = clock

    def find(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        """Get the record for (region_key, month); None when absent or unavailable."""
        try:
            with self._session_factory() as db:
                orm_record = self._query_one(db, region_key, month)
                return self._to_domain(orm_record) if orm_record else None
        except SQLAlchemyError as exc:
            logger.warning("Performance store read failed for %s %s: %s", region_key, month, exc)
            return None

    def upsert(self, record: PerformanceRecord) -> PerformanceRecord:
        """Insert or overwrite the record for (region_key, month)."""
        stamp = to_naive_ist(self._clock())
        try:
            try:
                return self._write(record, stamp)
            except IntegrityError:
                # Another writer inserted the same key between our read and insert
                return self._write(record, stamp)
        except SQLAlchemyError as exc:
            raise StoreError(
                f"Failed to save performance record for {record.region_key} {record.month}: {exc}"
            ) from exc

    def insert_if_absent(self, record: PerformanceRecord) -> bool:
        """Insert the record unless (region_key, month) already exists."""
        stamp = to_naive_ist(self._clock())
        try:
            with self._session_factory() as db:
                if self._query_one(db, record.region_key, record.month):
                    return False
                orm_record = PerformanceORM(
                    region_key=record.region_key,
                    month=record.month,
                    created_at=stamp,
                )
                self._apply(orm_record, record, stamp)
                db.add(orm_record)
                db.commit()
                return True
        except IntegrityError:
            return False
        except SQLAlchemyError as exc:
            raise StoreError(
                f"Failed to insert performance record for {record.region_key} {record.month}: {exc}"
            ) from exc

    def count(self) -> int:
        """Number of stored records."""
        with self._session_factory() as db:
            return db.query(PerformanceORM).count()

    def month_range(self) -> tuple[Optional[date], Optional[date]]:
        """Earliest and latest stored month."""
        with self._session_factory() as db:
            earliest, latest = db.query(
                func.min(PerformanceORM.month),
                func.max(PerformanceORM.month),
            ).one()
            return earliest, latest

    def _write(self, record: PerformanceRecord, stamp: datetime) -> PerformanceRecord:
        with self._session_factory() as db:
            orm_record = self._query_one(db, record.region_key, record.month)
            if orm_record is None:
                orm_record = PerformanceORM(
                    region_key=record.region_key,
                    month=record.month,
                    created_at=stamp,
                )
                db.add(orm_record)
            self._apply(orm_record, record, stamp)
            db.commit()
            return self._to_domain(orm_record)

    @staticmethod
    def _query_one(db: Session, region_key: str, month: date) -> Optional[PerformanceORM]:
        return (
            db.query(PerformanceORM)
            .filter(
                PerformanceORM.region_key == region_key,
                PerformanceORM.month == month,
            )
            .first()
        )

    @staticmethod
    def _apply(orm: PerformanceORM, record: PerformanceRecord, stamp: datetime) -> None:
        """Copy measured fields onto the row and stamp fetch time."""
        orm.total_workers = record.total_workers
        orm.active_workers = record.active_workers
        orm.job_cards_issued = record.job_cards_issued
        orm.work_completed = record.work_completed_pct
        orm.average_wage = record.average_wage
        orm.total_expenditure = record.total_expenditure
        orm.person_days_generated = record.person_days_generated
        orm.api_last_fetched = stamp
        orm.updated_at = stamp

    @staticmethod
    def _to_domain(orm: PerformanceORM) -> PerformanceRecord:
        """Convert ORM row to domain model."""
        return PerformanceRecord(
            region_key=orm.region_key,
            month=orm.month,
            total_workers=int(orm.total_workers),
            active_workers=int(orm.active_workers),
            job_cards_issued=int(orm.job_cards_issued),
            work_completed_pct=float(orm.work_completed),
            average_wage=float(orm.average_wage),
            person_days_generated=int(orm.person_days_generated),
            total_expenditure=float(orm.total_expenditure),
            source=DataSource.DATABASE,
            last_fetched_at=IST_TZ.localize(orm.api_last_fetched) if orm.api_last_fetched else None,
        )
