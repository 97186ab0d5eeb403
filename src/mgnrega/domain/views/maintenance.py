"""View models for maintenance jobs and statistics."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from mgnrega.domain.models import CacheStats


@dataclass
class RefreshSummary:
    """Result of re-resolving every region for one month."""

    month: date
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    expired_cleared: int = 0
    failures: list[str] = field(default_factory=list)


@dataclass
class BackfillSummary:
    """Result of filling historical months with synthetic records."""

    months: int
    regions: int = 0
    inserted: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass
class DatabaseStats:
    """Row counts and date range of the persisted data."""

    region_count: int = 0
    record_count: int = 0
    earliest_month: Optional[date] = None
    latest_month: Optional[date] = None
    cache: CacheStats = field(default_factory=CacheStats)
