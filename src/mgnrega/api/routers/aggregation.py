"""Comparison, ranking and regional summary endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from mgnrega.api.deps import get_aggregation_service, get_app_context
from mgnrega.api.schemas import (
    ComparisonResponse,
    PerformanceResponse,
    RankedRegionResponse,
    RegionalSummaryResponse,
    RegionResponse,
    TopPerformersResponse,
)
from mgnrega.app_context import AppContext
from mgnrega.services import AggregationService

router = APIRouter(tags=["aggregation"])


@router.get("/compare", response_model=ComparisonResponse)
def compare_regions(
    region_a: str = Query(..., description="First region key"),
    region_b: str = Query(..., description="Second region key"),
    month: Optional[str] = Query(None, description="YYYY-MM or YYYY-MM-DD"),
    aggregation: AggregationService = Depends(get_aggregation_service),
) -> ComparisonResponse:
    """Compare two regions for one month."""
    comparison = aggregation.compare(region_a, region_b, month or None)
    return ComparisonResponse(
        month=comparison.month,
        region_a=PerformanceResponse.from_domain(comparison.record_a),
        region_b=PerformanceResponse.from_domain(comparison.record_b),
        workers_diff=comparison.workers_diff,
        expenditure_diff=comparison.expenditure_diff,
        wage_diff=comparison.wage_diff,
    )


@router.get("/top-performers", response_model=TopPerformersResponse)
def top_performers(
    metric: str = Query("activeWorkers", description="Metric to rank by"),
    limit: int = Query(10, description="Number of regions (1-50)"),
    month: Optional[str] = Query(None, description="YYYY-MM or YYYY-MM-DD"),
    aggregation: AggregationService = Depends(get_aggregation_service),
) -> TopPerformersResponse:
    """Rank regions by a metric, highest first."""
    ranked = aggregation.rank_top(metric, limit, month or None)
    month_start = ranked[0].record.month if ranked else aggregation.resolve_month(month or None)
    return TopPerformersResponse(
        metric=metric,
        limit=limit,
        month=month_start,
        regions=[
            RankedRegionResponse(
                rank=item.rank,
                region=RegionResponse.from_domain(item.region),
                value=item.value,
                performance=PerformanceResponse.from_domain(item.record),
            )
            for item in ranked
        ],
    )


@router.get("/summary/{parent_region_key}", response_model=RegionalSummaryResponse)
def regional_summary(
    parent_region_key: str,
    month: Optional[str] = Query(None, description="YYYY-MM or YYYY-MM-DD"),
    aggregation: AggregationService = Depends(get_aggregation_service),
) -> RegionalSummaryResponse:
    """Totals across every district of a parent region."""
    summary = aggregation.regional_summary(parent_region_key, month or None)
    return RegionalSummaryResponse.model_validate(summary)


@router.get("/summary", response_model=RegionalSummaryResponse)
def default_regional_summary(
    month: Optional[str] = Query(None, description="YYYY-MM or YYYY-MM-DD"),
    context: AppContext = Depends(get_app_context),
) -> RegionalSummaryResponse:
    """Summary for the configured default parent region."""
    summary = context.aggregation.regional_summary(
        context.settings.default_parent_region,
        month or None,
    )
    return RegionalSummaryResponse.model_validate(summary)
