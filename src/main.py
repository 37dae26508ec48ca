"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance. Application startup
ensures the configured store holds its baseline data (reference geography,
first site, default roles and the administrator account) before any request
is served.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Seed initial data when settings.seed_on_startup is enabled.
      A seeding failure propagates and aborts startup.
    - Shutdown: Dispose of the database connection pool, also when
      startup fails.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from src.core.container import ensure_initial_data, get_database, get_logger

    logger = get_logger()
    try:
        if settings.seed_on_startup:
            report = await ensure_initial_data()
            app.state.seed_report = report
        else:
            logger.info("initial_data_skipped", reason="seed_on_startup disabled")

        yield
    finally:
        await get_database().close()


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Site bootstrap service with idempotent initial data seeding",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint - basic health check.

    Returns:
        dict: Welcome message with API status.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator and active storage backend.
    """
    return {
        "status": "healthy",
        "storage_backend": settings.storage_backend.value,
    }
