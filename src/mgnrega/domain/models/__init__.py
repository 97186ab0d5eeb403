"""Domain models package."""

from mgnrega.domain.models.enums import DataSource, PerformanceMetric
from mgnrega.domain.models.performance import PerformanceRecord, CRORE
from mgnrega.domain.models.region import Region
from mgnrega.domain.models.cache import CacheEntry, CacheStats, CacheWriteResult

__all__ = [
    "DataSource",
    "PerformanceMetric",
    "PerformanceRecord",
    "CRORE",
    "Region",
    "CacheEntry",
    "CacheStats",
    "CacheWriteResult",
]
