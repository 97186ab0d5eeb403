"""Pydantic schemas for the health endpoint."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class CacheStatsResponse(BaseModel):
    """Response schema for cache statistics."""

    model_config = {"from_attributes": True}

    total: int
    active: int
    expired: int


class DatabaseHealthResponse(BaseModel):
    """Database section of the health report."""

    connected: bool
    regions: int
    performance_records: int
    earliest_month: Optional[date] = None
    latest_month: Optional[date] = None


class HealthResponse(BaseModel):
    """Response schema for the health report."""

    status: str
    timestamp: datetime
    database: DatabaseHealthResponse
    cache: CacheStatsResponse
    version: str
