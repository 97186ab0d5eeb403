"""Service layer - resolution and aggregation orchestration."""

from mgnrega.services.synthetic import generate_performance, region_seed
from mgnrega.services.result_cache import ResultCache, cache_key
from mgnrega.services.resolver import PerformanceResolver
from mgnrega.services.aggregation_service import AggregationService
from mgnrega.services.maintenance_service import MaintenanceService

__all__ = [
    "generate_performance",
    "region_seed",
    "ResultCache",
    "cache_key",
    "PerformanceResolver",
    "AggregationService",
    "MaintenanceService",
]
