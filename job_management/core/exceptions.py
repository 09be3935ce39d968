"""
Exception hierarchy for the Job Management API.

Every pipeline stage raises one of these; the request handler turns the
exception into the failure response. Each class carries the HTTP status it
maps to so the mapping lives next to the error, not in the handler.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class JobManagementException(Exception):
    """Base exception for all Job Management API errors."""

    status_code: int = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message returned to the caller
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ClientInputError(JobManagementException):
    """Raised when the request itself is unusable (scheme, vault, credential)."""


class UnsupportedAuthSchemeError(ClientInputError):
    """Raised when the Authorization header is not a Bearer credential."""

    status_code = 401

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Auth Scheme not supported", details)


class InvalidVaultIdError(ClientInputError):
    """Raised when the vault ID is not in the configured allow-list."""

    status_code = 403

    def __init__(self, vault_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["vault_id"] = vault_id
        super().__init__("Invalid Vault ID", details)


class MalformedCredentialError(ClientInputError):
    """Raised when the bearer token cannot be decoded or lacks the claim."""

    status_code = 403


class UpstreamAuthError(JobManagementException):
    """
    Raised when the vault management service rejects or cannot be reached.

    The status code is forwarded from the upstream response; transport
    failures arrive here already normalized to 500.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream authorization error.

        Args:
            message: Upstream response body or transport error text
            status_code: Status code to return to the caller
            details: Additional context
        """
        self.status_code = status_code
        super().__init__(message, details)


class JobNotFoundError(JobManagementException):
    """Raised when no job record matches the requested ID."""

    def __init__(self, job_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["job_id"] = job_id
        super().__init__("no job record found", details)


class JobStoreError(JobManagementException):
    """Raised when the job record lookup fails for infrastructure reasons."""

    def __init__(
        self,
        message: str,
        job_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if job_id:
            details["job_id"] = job_id
        super().__init__(message, details)


class PolicyDeniedError(JobManagementException):
    """Raised when the job's status forbids the requested transition."""

    def __init__(
        self,
        run_id: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize policy denial.

        Args:
            run_id: Backend run identifier of the job
            reason: Short reason from the job state policy
            details: Additional context
        """
        details = details or {}
        details["run_id"] = run_id
        super().__init__(f"Job for jobId:{run_id} is {reason}", details)


class ExecutionError(JobManagementException):
    """Raised when the execution backend fails to cancel a job run."""

    def __init__(
        self,
        message: str,
        run_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if run_id:
            details["run_id"] = run_id
        super().__init__(message, details)
