"""
API routers.

Exports all routers for registration with the FastAPI app.
"""

from job_management.api.routers.health import router as health_router
from job_management.api.routers.jobs import router as jobs_router

__all__ = ["health_router", "jobs_router"]
