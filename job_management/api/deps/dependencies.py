"""
Dependency injection container.

Builds the process-wide clients once and hands the shared request handler
to routes and to the Lambda entry point.

Dependencies: job_management.configs, job_management.application, job_management.boundary
System role: DI container for service injection
"""

import httpx

from job_management.application.services import JobRequestHandler
from job_management.boundary.authorization import VaultAuthorizationClient
from job_management.boundary.aws import EMRServerlessClient
from job_management.boundary.db import JobRecordStore, get_async_engine, get_async_session_factory
from job_management.configs import get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._http_client = None
        self._engine = None
        self._emr_client = None
        self._request_handler = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get cached HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient()
        return self._http_client

    @property
    def engine(self):
        """Get cached async database engine."""
        if self._engine is None:
            self._engine = get_async_engine()
        return self._engine

    @property
    def emr_client(self) -> EMRServerlessClient:
        """Get cached EMR Serverless client."""
        if self._emr_client is None:
            execution = get_settings().execution
            self._emr_client = EMRServerlessClient(
                application_id=execution.application_id,
                region=execution.region,
                connect_timeout=execution.connect_timeout,
                read_timeout=execution.read_timeout,
            )
        return self._emr_client

    @property
    def request_handler(self) -> JobRequestHandler:
        """Get cached job request handler."""
        if self._request_handler is None:
            settings = get_settings()
            self._request_handler = JobRequestHandler(
                authorization_client=VaultAuthorizationClient(
                    http_client=self.http_client,
                    base_url=settings.authorization.management_url,
                    timeout=settings.authorization.timeout_seconds,
                ),
                record_store=JobRecordStore(
                    session_factory=get_async_session_factory(self.engine),
                    lookup_timeout=settings.database.lookup_timeout,
                ),
                execution_client=self.emr_client,
                vault_allow_list=settings.authorization.vault_allow_list,
                token_claim=settings.authorization.token_claim,
            )
        return self._request_handler

    async def aclose(self) -> None:
        """Close network resources and clear all cached instances."""
        if self._http_client is not None:
            await self._http_client.aclose()
        if self._engine is not None:
            await self._engine.dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._http_client = None
        self._engine = None
        self._emr_client = None
        self._request_handler = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_job_request_handler() -> JobRequestHandler:
    """
    Get the shared job request handler.

    Returns:
        JobRequestHandler: Handler wired to the cached clients
    """
    return get_service_cache().request_handler
