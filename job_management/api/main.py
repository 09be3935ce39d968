"""
FastAPI application with assembled routers.

Initializes FastAPI app with the job and health routers and configures
uvicorn server.

Dependencies: fastapi, job_management.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI

from job_management.api.deps.dependencies import get_service_cache
from job_management.configs import get_settings
from job_management.observability.logger import configure_logging
from job_management.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import health_router, jobs_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and builds the shared clients before the first
    request; closes them on shutdown.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting %s in %s environment", settings.app_name, settings.environment)
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.request_handler
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    await cache.aclose()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title=get_settings().app_name,
        description="Status and cancellation of EMR Serverless query jobs",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(jobs_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "job_management.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
