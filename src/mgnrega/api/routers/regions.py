"""Region and per-region performance endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from mgnrega.api.deps import get_aggregation_service, get_region_repo, get_resolver
from mgnrega.api.schemas import (
    HistoryResponse,
    PerformanceResponse,
    RegionListResponse,
    RegionResponse,
)
from mgnrega.core.exceptions import NotFoundError
from mgnrega.repositories.protocols import RegionRepository
from mgnrega.services import AggregationService, PerformanceResolver

router = APIRouter(prefix="/regions", tags=["regions"])


@router.get("", response_model=RegionListResponse)
def list_regions(
    regions: RegionRepository = Depends(get_region_repo),
) -> RegionListResponse:
    """List the region reference set."""
    items = regions.list_all()
    return RegionListResponse(
        regions=[RegionResponse.from_domain(r) for r in items],
        count=len(items),
    )


@router.get("/{region_key}", response_model=RegionResponse)
def get_region(
    region_key: str,
    regions: RegionRepository = Depends(get_region_repo),
) -> RegionResponse:
    """Get one region."""
    region = regions.find_by_key(region_key)
    if region is None:
        raise NotFoundError("Region", region_key)
    return RegionResponse.from_domain(region)


@router.get("/{region_key}/performance", response_model=PerformanceResponse)
def get_performance(
    region_key: str,
    month: Optional[str] = Query(None, description="YYYY-MM or YYYY-MM-DD (current month if empty)"),
    resolver: PerformanceResolver = Depends(get_resolver),
    aggregation: AggregationService = Depends(get_aggregation_service),
) -> PerformanceResponse:
    """Resolve one region's record for a month."""
    record = resolver.resolve(region_key, aggregation.resolve_month(month or None))
    return PerformanceResponse.from_domain(record)


@router.get("/{region_key}/history", response_model=HistoryResponse)
def get_history(
    region_key: str,
    months: int = Query(12, description="Number of months ending this month"),
    aggregation: AggregationService = Depends(get_aggregation_service),
) -> HistoryResponse:
    """Resolve consecutive months for one region, oldest first."""
    records = aggregation.historical_series(region_key, months)
    return HistoryResponse(
        region_key=region_key,
        months=months,
        records=[PerformanceResponse.from_domain(r) for r in records],
    )
