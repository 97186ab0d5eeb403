"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from mgnrega import __version__
from mgnrega.api.deps import get_maintenance_service
from mgnrega.api.routers import aggregation_router, regions_router
from mgnrega.api.schemas import CacheStatsResponse, DatabaseHealthResponse, HealthResponse
from mgnrega.app_context import AppContext
from mgnrega.config.logging_config import setup_logging
from mgnrega.config.settings import get_settings
from mgnrega.core.exceptions import AppError, NotFoundError
from mgnrega.core.timezone import now_ist
from mgnrega.services import MaintenanceService

logger = logging.getLogger(__name__)


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the API around an AppContext.

    When no context is given one is created from settings at startup and
    closed at shutdown. A context passed in is left open for its owner.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        setup_logging()
        owned = context is None
        ctx = context or AppContext()
        ctx.initialize()
        if ctx.region_repo.count() == 0:
            ctx.maintenance.seed_regions()
        app.state.context = ctx
        yield
        # Shutdown
        if owned:
            ctx.close()

    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="District-level MGNREGA performance with cache, store and synthetic fallback",
        version=__version__,
        lifespan=lifespan,
    )
    if context is not None:
        app.state.context = context

    app.include_router(regions_router)
    app.include_router(aggregation_router)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"error": exc.code, "message": exc.message},
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return JSONResponse(
            status_code=400,
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health", response_model=HealthResponse)
    def health_check(
        maintenance: MaintenanceService = Depends(get_maintenance_service),
    ):
        """Database counts and cache statistics."""
        try:
            stats = maintenance.database_stats()
        except Exception as exc:
            logger.error("Health check failed: %s", exc)
            return JSONResponse(
                status_code=503,
                content={"status": "unhealthy", "message": str(exc)},
            )
        return HealthResponse(
            status="healthy",
            timestamp=now_ist(),
            database=DatabaseHealthResponse(
                connected=True,
                regions=stats.region_count,
                performance_records=stats.record_count,
                earliest_month=stats.earliest_month,
                latest_month=stats.latest_month,
            ),
            cache=CacheStatsResponse.model_validate(stats.cache),
            version=__version__,
        )

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": __version__,
            "docs": "/docs",
        }

    return app


app = create_app()
