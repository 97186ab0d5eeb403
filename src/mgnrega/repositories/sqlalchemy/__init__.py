"""SQLAlchemy repository implementations."""

from mgnrega.repositories.sqlalchemy.database import (
    Base,
    create_db_engine,
    create_session_factory,
    init_db,
)
from mgnrega.repositories.sqlalchemy.region_repo import SqlAlchemyRegionRepository
from mgnrega.repositories.sqlalchemy.performance_repo import SqlAlchemyPerformanceRepository
from mgnrega.repositories.sqlalchemy.cache_repo import SqlAlchemyCacheRepository

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "SqlAlchemyRegionRepository",
    "SqlAlchemyPerformanceRepository",
    "SqlAlchemyCacheRepository",
]
