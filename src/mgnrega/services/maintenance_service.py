"""Maintenance jobs: refresh, backfill, seeding and statistics."""

import logging
from datetime import datetime
from typing import Callable, Optional

from mgnrega.core.exceptions import ValidationError
from mgnrega.core.months import current_month, trailing_months
from mgnrega.core.timezone import now_ist
from mgnrega.data.regions import DEFAULT_REGIONS
from mgnrega.domain.models import Region
from mgnrega.domain.views import BackfillSummary, DatabaseStats, RefreshSummary
from mgnrega.repositories.protocols import PerformanceRepository, RegionRepository
from mgnrega.services.resolver import Generator, PerformanceResolver
from mgnrega.services.result_cache import ResultCache
from mgnrega.services.synthetic import generate_performance

logger = logging.getLogger(__name__)

MAX_BACKFILL_MONTHS = 24


class MaintenanceService:
    """
    Operational jobs run from the CLI or a scheduler.

    Unlike the resolver these jobs report failures per region instead of
    hiding them, so an operator can see what did not get refreshed.
    """

    def __init__(
        self,
        resolver: PerformanceResolver,
        cache: ResultCache,
        region_repo: RegionRepository,
        record_repo: PerformanceRepository,
        generator: Generator = generate_performance,
        clock: Callable[[], datetime] = now_ist,
    ):
        self._resolver = resolver
        self._cache = cache
        self._regions = region_repo
        self._records = record_repo
        self._generator = generator
        self._clock = clock

    def seed_regions(self, regions: Optional[list[Region]] = None) -> int:
        """Load reference regions (default: Uttar Pradesh districts)."""
        regions = DEFAULT_REGIONS if regions is None else regions
        for region in regions:
            self._regions.add(region)
        logger.info("Seeded %d regions", len(regions))
        return len(regions)

    def refresh_current_month(self) -> RefreshSummary:
        """
        Clear expired cache entries, then resolve every region for this month.

        Regions already cached stay cached; the rest are pulled through the
        resolver and written back.
        """
        month = current_month(self._clock())
        summary = RefreshSummary(month=month)
        summary.expired_cleared = self._cache.clear_expired()

        regions = self._regions.list_all()
        summary.total = len(regions)
        logger.info("Refreshing %d regions for %s", len(regions), month)

        for index, region in enumerate(regions, start=1):
            logger.debug("[%d/%d] Refreshing %s", index, len(regions), region.display_name)
            try:
                self._resolver.resolve(region.region_key, month)
                summary.succeeded += 1
            except Exception as exc:
                logger.error("Failed to refresh %s: %s", region.display_name, exc)
                summary.failed += 1
                summary.failures.append(region.region_key)

        return summary

    def backfill(self, months: int = 12) -> BackfillSummary:
        """
        Store synthetic records for the last ``months`` months of every region.

        Existing rows are left untouched.
        """
        if isinstance(months, bool) or not isinstance(months, int) or not 1 <= months <= MAX_BACKFILL_MONTHS:
            raise ValidationError(f"Months must be between 1 and {MAX_BACKFILL_MONTHS}")

        regions = self._regions.list_all()
        summary = BackfillSummary(months=months, regions=len(regions))
        month_list = trailing_months(months, end=self._clock())
        logger.info(
            "Backfilling %d months for %d regions (%d data points)",
            months,
            len(regions),
            len(regions) * months,
        )

        for region in regions:
            for month in month_list:
                record = self._generator(region.region_key, month)
                try:
                    if self._records.insert_if_absent(record):
                        summary.inserted += 1
                    else:
                        summary.skipped += 1
                except Exception as exc:
                    logger.error("Backfill failed for %s %s: %s", region.region_key, month, exc)
                    summary.failed += 1

        return summary

    def database_stats(self) -> DatabaseStats:
        """Counts and month range of persisted data plus cache statistics."""
        earliest, latest = self._records.month_range()
        return DatabaseStats(
            region_count=self._regions.count(),
            record_count=self._records.count(),
            earliest_month=earliest,
            latest_month=latest,
            cache=self._cache.stats(),
        )
