"""
Pytest configuration and fixtures for the district performance tests.

This module provides:
- In-memory SQLite database fixtures
- A controllable clock pinned to India Standard Time
- Deterministic, failing and slow upstream providers
- Service and repository fixtures
- A FastAPI test client wired to an in-memory AppContext
"""

import time
from datetime import date, datetime, timedelta
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from mgnrega.api.main import create_app
from mgnrega.app_context import AppContext
from mgnrega.config.settings import Settings, reset_settings, set_settings
from mgnrega.core.timezone import IST_TZ
from mgnrega.domain.models import PerformanceRecord, Region
from mgnrega.providers import StubPerformanceProvider
from mgnrega.repositories.memory import InMemoryCacheRepository
from mgnrega.repositories.sqlalchemy import (
    Base,
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


# =============================================================================
# TIME HELPERS
# =============================================================================


def ist_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in Asia/Kolkata."""
    return IST_TZ.localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests (mid March 2024)."""
    return ist_datetime(2024, 3, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_db_engine("sqlite:///:memory:")
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    """Session factory bound to the test engine."""
    return create_session_factory(test_engine)


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def region_repo(session_factory) -> SqlAlchemyRegionRepository:
    """Provide test RegionRepository."""
    return SqlAlchemyRegionRepository(session_factory)


@pytest.fixture
def record_repo(session_factory, clock) -> SqlAlchemyPerformanceRepository:
    """Provide test PerformanceRepository."""
    return SqlAlchemyPerformanceRepository(session_factory, clock=clock)


@pytest.fixture
def sql_cache_repo(session_factory) -> SqlAlchemyCacheRepository:
    """Provide test CacheRepository backed by the api_cache table."""
    return SqlAlchemyCacheRepository(session_factory)


@pytest.fixture
def memory_cache_repo() -> InMemoryCacheRepository:
    """Provide in-process CacheRepository."""
    return InMemoryCacheRepository()


# =============================================================================
# REGION FIXTURES
# =============================================================================


FIVE_REGIONS = [
    Region("UP_AGRA", "Agra", "UP"),
    Region("UP_BANDA", "Banda", "UP"),
    Region("UP_LUCKNOW", "Lucknow", "UP"),
    Region("UP_VARANASI", "Varanasi", "UP"),
    Region("UP_MEERUT", "Meerut", "UP"),
]


@pytest.fixture
def sample_regions(region_repo) -> list[Region]:
    """Five Uttar Pradesh districts loaded into the region repository."""
    for region in FIVE_REGIONS:
        region_repo.add(region)
    return list(FIVE_REGIONS)


# =============================================================================
# UPSTREAM PROVIDERS
# =============================================================================


def make_record(
    region_key: str = "UP_AGRA",
    month: date = date(2024, 3, 1),
    total_workers: int = 1000,
    active_workers: int = 800,
    total_expenditure: float = 12.5,
    average_wage: float = 300.0,
    person_days_generated: int = 20000,
) -> PerformanceRecord:
    """Build a hand-written record with distinctive numbers."""
    return PerformanceRecord(
        region_key=region_key,
        month=month,
        total_workers=total_workers,
        active_workers=active_workers,
        job_cards_issued=total_workers + 100,
        work_completed_pct=75.0,
        average_wage=average_wage,
        person_days_generated=person_days_generated,
        total_expenditure=total_expenditure,
    )


class FixedProvider:
    """Upstream provider that returns the same record for every key."""

    def __init__(self, record: PerformanceRecord):
        self.record = record
        self.calls: list[tuple[str, date]] = []

    def fetch(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        self.calls.append((region_key, month))
        return self.record


class FailingProvider:
    """Upstream provider that always raises."""

    def fetch(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        raise ConnectionError("upstream unavailable")


class SlowProvider:
    """Upstream provider that answers after ``delay`` seconds."""

    def __init__(self, record: PerformanceRecord, delay: float = 0.5):
        self.record = record
        self.delay = delay

    def fetch(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        time.sleep(self.delay)
        return self.record


@pytest.fixture
def stub_provider() -> StubPerformanceProvider:
    return StubPerformanceProvider()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def result_cache(memory_cache_repo, clock) -> ResultCache:
    """Result cache over the in-memory backend with the fake clock."""
    return ResultCache(memory_cache_repo, default_ttl_hours=6, clock=clock)


@pytest.fixture
def resolver(result_cache, record_repo, stub_provider) -> PerformanceResolver:
    """Resolver with the stub provider, so misses end in synthetic data."""
    return PerformanceResolver(
        cache=result_cache,
        store=record_repo,
        provider=stub_provider,
    )


@pytest.fixture
def aggregation_service(resolver, region_repo, clock) -> AggregationService:
    """Aggregation service running resolutions inline (one SQLite connection)."""
    return AggregationService(
        resolver=resolver,
        region_repo=region_repo,
        max_workers=1,
        clock=clock,
    )


@pytest.fixture
def maintenance_service(resolver, result_cache, region_repo, record_repo, clock) -> MaintenanceService:
    """Provide MaintenanceService over the test repositories."""
    return MaintenanceService(
        resolver=resolver,
        cache=result_cache,
        region_repo=region_repo,
        record_repo=record_repo,
        clock=clock,
    )


# =============================================================================
# APP CONTEXT / API CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at in-memory storage."""
    settings = Settings(
        data_dir=tmp_path,
        database_url="sqlite:///:memory:",
        cache_backend="memory",
        aggregation_max_workers=1,
        upstream_timeout_seconds=None,
        log_level="WARNING",
    )
    set_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture
def app_context(test_settings, clock) -> AppContext:
    """Initialized AppContext over an in-memory database."""
    context = AppContext(settings=test_settings, clock=clock)
    context.initialize()
    yield context
    context.close()


@pytest.fixture
def client(app_context) -> TestClient:
    """Test client; startup seeds the default districts."""
    app = create_app(app_context)
    with TestClient(app) as test_client:
        yield test_client
