"""Aggregations over resolved performance records."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from typing import Callable, Optional, Union

from mgnrega.core.exceptions import ValidationError
from mgnrega.core.months import MonthLike, current_month, normalize_month, trailing_months
from mgnrega.core.timezone import now_ist
from mgnrega.domain.models import CRORE, PerformanceMetric, PerformanceRecord
from mgnrega.domain.views import ComparisonView, RankedRegion, RegionalSummary
from mgnrega.repositories.protocols import RegionRepository
from mgnrega.services.resolver import PerformanceResolver

logger = logging.getLogger(__name__)

MAX_RANK_LIMIT = 50
MAX_HISTORY_MONTHS = 24
DEFAULT_RANK_LIMIT = 10
DEFAULT_HISTORY_MONTHS = 12


class AggregationService:
    """
    Comparison, ranking, regional roll-up and history built on the resolver.

    Every operation validates its input before resolving anything. The
    per-region (or per-month) resolutions are independent, so they run on a
    bounded thread pool and are put back into caller order afterwards.
    """

    def __init__(
        self,
        resolver: PerformanceResolver,
        region_repo: RegionRepository,
        max_workers: int = 8,
        clock: Callable[[], datetime] = now_ist,
    ):
        self._resolver = resolver
        self._regions = region_repo
        self._max_workers = max(1, max_workers)
        self._clock = clock

    def compare(
        self,
        region_a: str,
        region_b: str,
        month: Optional[MonthLike] = None,
    ) -> ComparisonView:
        """
        Resolve two regions for the same month and diff them.

        Differences are ``a - b`` for workers, expenditure and average wage.
        """
        self._require_key(region_a, "region_a")
        self._require_key(region_b, "region_b")
        month_start = self.resolve_month(month)

        record_a, record_b = self._resolve_many(
            [(region_a, month_start), (region_b, month_start)]
        )
        return ComparisonView(
            month=month_start,
            record_a=record_a,
            record_b=record_b,
            workers_diff=record_a.total_workers - record_b.total_workers,
            expenditure_diff=record_a.total_expenditure - record_b.total_expenditure,
            wage_diff=record_a.average_wage - record_b.average_wage,
        )

    def rank_top(
        self,
        metric: Union[PerformanceMetric, str] = PerformanceMetric.ACTIVE_WORKERS,
        limit: int = DEFAULT_RANK_LIMIT,
        month: Optional[MonthLike] = None,
    ) -> list[RankedRegion]:
        """
        Top ``limit`` regions by ``metric``, highest first.

        Ties keep reference-list order (display name, then key). The list
        returned by the region repository is not reordered.
        """
        metric = self._parse_metric(metric)
        if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= MAX_RANK_LIMIT:
            raise ValidationError(f"Limit must be between 1 and {MAX_RANK_LIMIT}")
        month_start = self.resolve_month(month)

        regions = self._regions.list_all()
        logger.info("Ranking %d regions by %s for %s", len(regions), metric.value, month_start)
        records = self._resolve_many([(r.region_key, month_start) for r in regions])

        values = [float(getattr(record, metric.attribute)) for record in records]
        order = sorted(range(len(regions)), key=lambda i: (-values[i], i))

        return [
            RankedRegion(
                rank=position + 1,
                region=regions[i],
                record=records[i],
                value=values[i],
            )
            for position, i in enumerate(order[:limit])
        ]

    def regional_summary(
        self,
        parent_region_key: str,
        month: Optional[MonthLike] = None,
    ) -> RegionalSummary:
        """Sum every child region of ``parent_region_key`` for one month."""
        self._require_key(parent_region_key, "parent_region_key")
        month_start = self.resolve_month(month)

        children = self._regions.list_children(parent_region_key)
        logger.info(
            "Summarising %d regions under %s for %s",
            len(children),
            parent_region_key,
            month_start,
        )
        records = self._resolve_many([(r.region_key, month_start) for r in children])

        summary = RegionalSummary(
            parent_region_key=parent_region_key,
            month=month_start,
            region_count=len(children),
        )
        for record in records:
            summary.total_workers += record.total_workers
            summary.total_active_workers += record.active_workers
            summary.total_expenditure += record.total_expenditure
            summary.total_person_days += record.person_days_generated

        if summary.total_person_days > 0:
            summary.average_wage = summary.total_expenditure * CRORE / summary.total_person_days
        return summary

    def historical_series(
        self,
        region_key: str,
        months_back: int = DEFAULT_HISTORY_MONTHS,
    ) -> list[PerformanceRecord]:
        """``months_back`` consecutive months ending this month, oldest first."""
        self._require_key(region_key, "region_key")
        if (
            isinstance(months_back, bool)
            or not isinstance(months_back, int)
            or not 1 <= months_back <= MAX_HISTORY_MONTHS
        ):
            raise ValidationError(f"Months must be between 1 and {MAX_HISTORY_MONTHS}")

        months = trailing_months(months_back, end=self._clock())
        return self._resolve_many([(region_key, m) for m in months])

    def _resolve_many(self, keys: list[tuple[str, date]]) -> list[PerformanceRecord]:
        """Resolve (region, month) pairs; results come back in input order."""
        if len(keys) <= 1 or self._max_workers == 1:
            return [self._resolver.resolve(region_key, month) for region_key, month in keys]

        workers = min(self._max_workers, len(keys))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="resolve") as executor:
            return list(executor.map(lambda item: self._resolver.resolve(*item), keys))

    def resolve_month(self, month: Optional[MonthLike] = None) -> date:
        """Month start for ``month``, or the current month when omitted."""
        if month is None:
            return current_month(self._clock())
        return normalize_month(month)

    @staticmethod
    def _parse_metric(metric: Union[PerformanceMetric, str]) -> PerformanceMetric:
        if isinstance(metric, PerformanceMetric):
            return metric
        try:
            return PerformanceMetric(metric)
        except ValueError:
            valid = ", ".join(m.value for m in PerformanceMetric)
            raise ValidationError(f"Invalid metric. Valid metrics are: {valid}")

    @staticmethod
    def _require_key(value: str, name: str) -> None:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{name} is required")
