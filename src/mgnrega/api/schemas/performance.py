"""Pydantic schemas for region and performance endpoints."""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from mgnrega.domain.models import DataSource, PerformanceRecord, Region


class RegionResponse(BaseModel):
    """Response schema for a single region."""

    model_config = {"from_attributes": True}

    region_key: str
    display_name: str
    parent_region_key: Optional[str] = None

    @classmethod
    def from_domain(cls, region: Region) -> "RegionResponse":
        return cls.model_validate(region)


class RegionListResponse(BaseModel):
    """Response schema for listing regions."""

    regions: list[RegionResponse]
    count: int


class PerformanceResponse(BaseModel):
    """Response schema for one monthly performance record."""

    model_config = {"from_attributes": True}

    region_key: str
    month: date
    total_workers: int
    active_workers: int
    job_cards_issued: int
    work_completed_pct: float
    average_wage: float
    person_days_generated: int
    total_expenditure: float
    source: Optional[DataSource] = None

    @classmethod
    def from_domain(cls, record: PerformanceRecord) -> "PerformanceResponse":
        return cls.model_validate(record)


class HistoryResponse(BaseModel):
    """Response schema for a historical series, oldest month first."""

    region_key: str
    months: int
    records: list[PerformanceResponse]
