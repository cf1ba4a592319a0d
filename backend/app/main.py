"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.infrastructure.database import Database
from app.infrastructure.logging.log_config import setup_logging
from app.infrastructure.telemetry import setup_tracing
from app.presentation.api.errors import register_exception_handlers
from app.presentation.api.router import router as api_router
from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.metrics import router as metrics_router
from app.presentation.middleware.telemetry import TelemetryMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — logging, tracing, schema; dispose the pool on shutdown."""
    settings: Settings = app.state.settings
    database: Database = app.state.database
    setup_logging(settings)
    tracer_provider = setup_tracing(settings)

    if settings.db_auto_create_schema:
        await database.create_all()
        logger.info("Database schema ensured")

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    # Shutdown — uvicorn has already drained in-flight requests (or given up
    # after shutdown_grace_period) by the time this runs.
    await database.dispose()
    if tracer_provider is not None:
        tracer_provider.shutdown()


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TelemetryMiddleware)

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_grace_period,
    )
