"""
Dependency injection for API routes.

Exports factory functions for FastAPI Depends() injection.
"""

from job_management.api.deps.dependencies import (
    ServiceCache,
    get_job_request_handler,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_job_request_handler",
    "get_service_cache",
]
