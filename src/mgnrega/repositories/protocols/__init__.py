"""Repository protocol definitions (interfaces)."""

from mgnrega.repositories.protocols.region_repo import RegionRepository
from mgnrega.repositories.protocols.record_repo import PerformanceRepository
from mgnrega.repositories.protocols.cache_repo import CacheRepository

__all__ = [
    "RegionRepository",
    "PerformanceRepository",
    "CacheRepository",
]
