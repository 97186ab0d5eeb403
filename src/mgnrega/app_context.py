"""Application context: explicit wiring of repositories and services.

The CLI and the HTTP app each build one context and pass it around; there is
no process-wide engine or service instance.
"""

from datetime import datetime
from typing import Callable, Optional

from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from mgnrega.config.settings import Settings, get_settings
from mgnrega.core.timezone import now_ist
from mgnrega.providers import PerformanceProvider, StubPerformanceProvider
from mgnrega.repositories.memory import InMemoryCacheRepository
from mgnrega.repositories.protocols import CacheRepository
from mgnrega.repositories.sqlalchemy import (
    SqlAlchemyCacheRepository,
    SqlAlchemyPerformanceRepository,
    SqlAlchemyRegionRepository,
    create_db_engine,
    create_session_factory,
    init_db,
)
from mgnrega.services import (
    AggregationService,
    MaintenanceService,
    PerformanceResolver,
    ResultCache,
)


class AppContext:
    """
    Builds and holds the object graph for one process.

    Services are created lazily on first access and reused afterwards; all of
    them are safe to share across threads.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider: Optional[PerformanceProvider] = None,
        clock: Callable[[], datetime] = now_ist,
    ):
        self._settings = settings or get_settings()
        self._provider = provider
        self._clock = clock
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

        self._region_repo: Optional[SqlAlchemyRegionRepository] = None
        self._record_repo: Optional[SqlAlchemyPerformanceRepository] = None
        self._cache: Optional[ResultCache] = None
        self._resolver: Optional[PerformanceResolver] = None
        self._aggregation: Optional[AggregationService] = None
        self._maintenance: Optional[MaintenanceService] = None

    def initialize(self) -> None:
        """Create the engine and any missing tables."""
        if self._engine is not None:
            return
        self._engine = create_db_engine(self._settings.get_database_url())
        init_db(self._engine)
        self._session_factory = create_session_factory(self._engine)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def session_factory(self) -> sessionmaker:
        self.initialize()
        return self._session_factory

    # Repository accessors
    @property
    def region_repo(self) -> SqlAlchemyRegionRepository:
        if self._region_repo is None:
            self._region_repo = SqlAlchemyRegionRepository(self.session_factory)
        return self._region_repo

    @property
    def record_repo(self) -> SqlAlchemyPerformanceRepository:
        if self._record_repo is None:
            self._record_repo = SqlAlchemyPerformanceRepository(
                self.session_factory,
                clock=self._clock,
            )
        return self._record_repo

    def _build_cache_backend(self) -> CacheRepository:
        if self._settings.cache_backend == "memory":
            return InMemoryCacheRepository()
        return SqlAlchemyCacheRepository(self.session_factory)

    # Service accessors
    @property
    def cache(self) -> ResultCache:
        if self._cache is None:
            self._cache = ResultCache(
                self._build_cache_backend(),
                default_ttl_hours=self._settings.cache_ttl_hours,
                clock=self._clock,
            )
        return self._cache

    @property
    def resolver(self) -> PerformanceResolver:
        if self._resolver is None:
            self._resolver = PerformanceResolver(
                cache=self.cache,
                store=self.record_repo,
                provider=self._provider or StubPerformanceProvider(),
                upstream_timeout_seconds=self._settings.upstream_timeout_seconds,
            )
        return self._resolver

    @property
    def aggregation(self) -> AggregationService:
        if self._aggregation is None:
            self._aggregation = AggregationService(
                resolver=self.resolver,
                region_repo=self.region_repo,
                max_workers=self._settings.aggregation_max_workers,
                clock=self._clock,
            )
        return self._aggregation

    @property
    def maintenance(self) -> MaintenanceService:
        if self._maintenance is None:
            self._maintenance = MaintenanceService(
                resolver=self.resolver,
                cache=self.cache,
                region_repo=self.region_repo,
                record_repo=self.record_repo,
                clock=self._clock,
            )
        return self._maintenance

    def close(self) -> None:
        """Dispose of the engine and drop cached services."""
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._region_repo = None
        self._record_repo = None
        self._cache = None
        self._resolver = None
        self._aggregation = None
        self._maintenance = None
