"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    UniqueConstraint,
)

from mgnrega.repositories.sqlalchemy.database import Base


class RegionORM(Base):
    """SQLAlchemy model for Region (reference data)."""

    __tablename__ = "regions"

    region_key = Column(String(64), primary_key=True)
    display_name = Column(String(255), nullable=False)
    parent_region_key = Column(String(64), nullable=True, index=True)


class PerformanceORM(Base):
    """SQLAlchemy model for a monthly district performance record."""

    __tablename__ = "district_performance"
    __table_args__ = (
        UniqueConstraint("region_key", "month", name="uq_performance_region_month"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    region_key = Column(String(64), nullable=False, index=True)
    month = Column(Date, nullable=False)
    total_workers = Column(Integer, nullable=False, default=0)
    active_workers = Column(Integer, nullable=False, default=0)
    job_cards_issued = Column(Integer, nullable=False, default=0)
    work_completed = Column(Float, nullable=False, default=0.0)
    average_wage = Column(Float, nullable=False, default=0.0)
    total_expenditure = Column(Float, nullable=False, default=0.0)
    person_days_generated = Column(Integer, nullable=False, default=0)
    api_last_fetched = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)


class CacheORM(Base):
    """SQLAlchemy model for a result cache entry."""

    __tablename__ = "api_cache"

    cache_key = Column(String(255), primary_key=True)
    cache_data = Column(Text, nullable=False)
    expires_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, nullable=True)
