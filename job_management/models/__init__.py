"""Domain models and API response schemas."""

from job_management.models.job import (
    AuthorizationOutcome,
    FailureResponse,
    JobApiResponse,
    JobCancelResponse,
    JobRecord,
    JobRequest,
    JobStatus,
    JobStatusResponse,
)

__all__ = [
    "AuthorizationOutcome",
    "FailureResponse",
    "JobApiResponse",
    "JobCancelResponse",
    "JobRecord",
    "JobRequest",
    "JobStatus",
    "JobStatusResponse",
]
