"""View models for aggregation outputs."""

from dataclasses import dataclass
from datetime import date

from mgnrega.domain.models import PerformanceRecord, Region


@dataclass
class ComparisonView:
    """Two regions side by side; differences are ``a - b``."""

    month: date
    record_a: PerformanceRecord
    record_b: PerformanceRecord
    workers_diff: int
    expenditure_diff: float
    wage_diff: float


@dataclass
class RankedRegion:
    """One entry in a top-N ranking."""

    rank: int
    region: Region
    record: PerformanceRecord
    value: float


@dataclass
class RegionalSummary:
    """Totals over every child region of a parent."""

    parent_region_key: str
    month: date
    region_count: int = 0
    total_workers: int = 0
    total_active_workers: int = 0
    total_expenditure: float = 0.0
    total_person_days: int = 0
    average_wage: float = 0.0
