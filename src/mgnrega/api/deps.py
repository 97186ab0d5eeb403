"""Dependency injection for FastAPI."""

from fastapi import Depends, Request

from mgnrega.app_context import AppContext
from mgnrega.repositories.protocols import RegionRepository
from mgnrega.services import AggregationService, MaintenanceService, PerformanceResolver


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext built at startup."""
    return request.app.state.context


def get_region_repo(context: AppContext = Depends(get_app_context)) -> RegionRepository:
    """Provide RegionRepository instance."""
    return context.region_repo


def get_resolver(context: AppContext = Depends(get_app_context)) -> PerformanceResolver:
    """Provide PerformanceResolver instance."""
    return context.resolver


def get_aggregation_service(
    context: AppContext = Depends(get_app_context),
) -> AggregationService:
    """Provide AggregationService instance."""
    return context.aggregation


def get_maintenance_service(
    context: AppContext = Depends(get_app_context),
) -> MaintenanceService:
    """Provide MaintenanceService instance."""
    return context.maintenance
