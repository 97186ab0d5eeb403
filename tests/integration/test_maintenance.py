"""
Integration tests for MaintenanceService.

Tests cover:
- Seeding the region reference set
- Refreshing the current month
- Backfilling history without touching existing rows
- Database statistics
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from mgnrega.core.exceptions import ValidationError
from mgnrega.data.regions import DEFAULT_REGIONS
from mgnrega.domain.models import DataSource
from mgnrega.repositories.sqlalchemy import (
    SqlAlchemyPerformanceRepository,
    SqlAlchemyRegionRepository,
)
from mgnrega.services import MaintenanceService, PerformanceResolver, ResultCache

from tests.conftest import FakeClock, make_record

MARCH = date(2024, 3, 1)


class TestSeedRegions:
    """Tests for seed_regions."""

    def test_seeds_default_districts(
        self,
        maintenance_service: MaintenanceService,
        region_repo: SqlAlchemyRegionRepository,
    ):
        count = maintenance_service.seed_regions()

        assert count == len(DEFAULT_REGIONS) == 20
        assert region_repo.count() == 20
        assert len(region_repo.list_children("UP")) == 20

    def test_seeding_twice_does_not_duplicate(
        self,
        maintenance_service: MaintenanceService,
        region_repo: SqlAlchemyRegionRepository,
    ):
        maintenance_service.seed_regions()
        maintenance_service.seed_regions()

        assert region_repo.count() == 20


class TestRefresh:
    """Tests for refresh_current_month."""

    def test_refresh_resolves_every_region(
        self,
        maintenance_service: MaintenanceService,
        record_repo: SqlAlchemyPerformanceRepository,
        sample_regions,
    ):
        """
        GIVEN five regions and an empty store
        WHEN I refresh the current month
        THEN every region is resolved and persisted for March 2024
        """
        summary = maintenance_service.refresh_current_month()

        assert summary.month == MARCH
        assert summary.total == 5
        assert summary.succeeded == 5
        assert summary.failed == 0
        assert record_repo.count() == 5
        assert record_repo.find("UP_MEERUT", MARCH) is not None

    def test_refresh_clears_expired_cache_first(
        self,
        maintenance_service: MaintenanceService,
        result_cache: ResultCache,
        clock: FakeClock,
        sample_regions,
    ):
        result_cache.set("stale", {"v": 1}, ttl_hours=1)
        clock.advance(hours=2)

        summary = maintenance_service.refresh_current_month()

        assert summary.expired_cleared == 1
        assert result_cache.stats().total == 5

    def test_refresh_reports_failures(
        self,
        result_cache: ResultCache,
        region_repo: SqlAlchemyRegionRepository,
        record_repo: SqlAlchemyPerformanceRepository,
        clock: FakeClock,
        sample_regions,
    ):
        resolver = MagicMock(spec=PerformanceResolver)

        def resolve(region_key, month):
            if region_key == "UP_BANDA":
                raise RuntimeError("boom")
            return make_record(region_key, month)

        resolver.resolve.side_effect = resolve
        service = MaintenanceService(resolver, result_cache, region_repo, record_repo, clock=clock)

        summary = service.refresh_current_month()

        assert summary.succeeded == 4
        assert summary.failed == 1
        assert summary.failures == ["UP_BANDA"]


class TestBackfill:
    """Tests for backfill."""

    def test_backfill_inserts_history(
        self,
        maintenance_service: MaintenanceService,
        record_repo: SqlAlchemyPerformanceRepository,
        sample_regions,
    ):
        summary = maintenance_service.backfill(3)

        assert summary.months == 3
        assert summary.regions == 5
        assert summary.inserted == 15
        assert summary.skipped == 0
        assert record_repo.month_range() == (date(2024, 1, 1), MARCH)

    def test_backfill_is_repeatable(
        self,
        maintenance_service: MaintenanceService,
        sample_regions,
    ):
        maintenance_service.backfill(2)

        summary = maintenance_service.backfill(2)

        assert summary.inserted == 0
        assert summary.skipped == 10

    def test_backfill_does_not_overwrite(
        self,
        maintenance_service: MaintenanceService,
        record_repo: SqlAlchemyPerformanceRepository,
        sample_regions,
    ):
        """
        GIVEN a stored record with real figures for UP_AGRA in March
        WHEN I backfill
        THEN that record is left as it was
        """
        record_repo.upsert(make_record("UP_AGRA", MARCH, total_workers=31337))

        summary = maintenance_service.backfill(1)

        assert summary.inserted == 4
        assert summary.skipped == 1
        assert record_repo.find("UP_AGRA", MARCH).total_workers == 31337

    def test_backfilled_rows_are_served_from_store(
        self,
        maintenance_service: MaintenanceService,
        resolver: PerformanceResolver,
        sample_regions,
    ):
        maintenance_service.backfill(1)

        assert resolver.resolve("UP_AGRA", MARCH).source == DataSource.DATABASE

    @pytest.mark.parametrize("months", [0, 25, "12"])
    def test_invalid_months_rejected(self, maintenance_service: MaintenanceService, months):
        with pytest.raises(ValidationError):
            maintenance_service.backfill(months)


class TestDatabaseStats:
    """Tests for database_stats."""

    def test_stats_reflect_store_and_cache(
        self,
        maintenance_service: MaintenanceService,
        sample_regions,
    ):
        maintenance_service.backfill(2)
        maintenance_service.refresh_current_month()

        stats = maintenance_service.database_stats()

        assert stats.region_count == 5
        assert stats.record_count == 10
        assert stats.earliest_month == date(2024, 2, 1)
        assert stats.latest_month == MARCH
        assert stats.cache.total == 5
        assert stats.cache.active == 5

    def test_empty_stats(self, maintenance_service: MaintenanceService):
        stats = maintenance_service.database_stats()

        assert stats.region_count == 0
        assert stats.record_count == 0
        assert stats.earliest_month is None
