"""Pydantic schemas for aggregation endpoints."""

from datetime import date

from pydantic import BaseModel

from mgnrega.api.schemas.performance import PerformanceResponse, RegionResponse


class ComparisonResponse(BaseModel):
    """Response schema for a two-region comparison."""

    month: date
    region_a: PerformanceResponse
    region_b: PerformanceResponse
    workers_diff: int
    expenditure_diff: float
    wage_diff: float


class RankedRegionResponse(BaseModel):
    """Response schema for one ranking entry."""

    rank: int
    region: RegionResponse
    value: float
    performance: PerformanceResponse


class TopPerformersResponse(BaseModel):
    """Response schema for a top-N ranking."""

    metric: str
    limit: int
    month: date
    regions: list[RankedRegionResponse]


class RegionalSummaryResponse(BaseModel):
    """Response schema for a regional roll-up."""

    model_config = {"from_attributes": True}

    parent_region_key: str
    month: date
    region_count: int
    total_workers: int
    total_active_workers: int
    total_expenditure: float
    total_person_days: int
    average_wage: float
