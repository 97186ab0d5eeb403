"""Pydantic schemas for API request/response."""

from mgnrega.api.schemas.performance import (
    RegionResponse,
    RegionListResponse,
    PerformanceResponse,
    HistoryResponse,
)
from mgnrega.api.schemas.aggregation import (
    ComparisonResponse,
    RankedRegionResponse,
    TopPerformersResponse,
    RegionalSummaryResponse,
)
from mgnrega.api.schemas.health import (
    CacheStatsResponse,
    DatabaseHealthResponse,
    HealthResponse,
)

__all__ = [
    "RegionResponse",
    "RegionListResponse",
    "PerformanceResponse",
    "HistoryResponse",
    "ComparisonResponse",
    "RankedRegionResponse",
    "TopPerformersResponse",
    "RegionalSummaryResponse",
    "CacheStatsResponse",
    "DatabaseHealthResponse",
    "HealthResponse",
]
