"""API routers package."""

from mgnrega.api.routers.regions import router as regions_router
from mgnrega.api.routers.aggregation import router as aggregation_router

__all__ = [
    "regions_router",
    "aggregation_router",
]
