"""Domain layer - pure models with no external dependencies."""

from mgnrega.domain.models import (
    DataSource,
    PerformanceMetric,
    PerformanceRecord,
    Region,
    CacheEntry,
    CacheStats,
    CacheWriteResult,
)

__all__ = [
    "DataSource",
    "PerformanceMetric",
    "PerformanceRecord",
    "Region",
    "CacheEntry",
    "CacheStats",
    "CacheWriteResult",
]
