"""Repository layer - data access abstractions and implementations."""

from mgnrega.repositories.protocols import (
    RegionRepository,
    PerformanceRepository,
    CacheRepository,
)

__all__ = [
    "RegionRepository",
    "PerformanceRepository",
    "CacheRepository",
]
