"""
Job domain models and schemas.

Job record, authorization outcome, and the request/response contracts
shared by the HTTP router and the Lambda entry point.

Dependencies: pydantic
System role: Job status and cancellation API contracts
"""

import enum
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JobStatus(str, enum.Enum):
    """
    EMR Serverless job run states as recorded in the job details table.

    PENDING: Submitted, waiting for capacity
    RUNNING: Executing on the application
    SUCCESS: Finished successfully (terminal)
    FAILURE: Finished with an error (terminal)
    CANCELLING: Cancellation requested, not yet acknowledged
    CANCELLED: Cancelled (terminal)
    """

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    CANCELLING = "CANCELLING"
    CANCELLED = "CANCELLED"


class JobRecord(BaseModel):
    """
    Persisted metadata for one submitted query job.

    job_status keeps the raw stored value so statuses outside JobStatus
    are reported back unchanged.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str = Field(description="External job identifier")
    job_id: str = Field(description="EMR Serverless job run ID")
    job_status: str = Field(description="Current job run status")
    request_id: str = Field(description="ID of the request that submitted the job")
    query: str = Field(default="", description="Query text that produced the job")
    destination: str = Field(default="", description="Output location")
    token_id: str | None = Field(
        default=None,
        description="Credential claim captured at submission time",
    )


@dataclass(frozen=True)
class AuthorizationOutcome:
    """Result of one vault management service round trip. Never persisted."""

    status_code: int
    request_id: str = ""
    body: str = ""
    error: str = ""

    @property
    def is_authorized(self) -> bool:
        return not self.error and self.status_code == 200


@dataclass(frozen=True)
class JobRequest:
    """Transport-neutral view of an incoming GET/DELETE job request."""

    method: str
    job_id: str
    vault_id: str
    authorization: str | None = None
    forwarded_for: str | None = None

    @property
    def client_ip(self) -> str:
        """First hop of X-Forwarded-For, informational only."""
        return (self.forwarded_for or "").split(",")[0].strip()


@dataclass(frozen=True)
class JobApiResponse:
    """Status code and JSON body; body is None for the empty pass-through."""

    status_code: int
    body: dict[str, Any] | None = None


class JobStatusResponse(BaseModel):
    """Response schema for GET."""

    id: str
    jobId: str
    jobStatus: str
    requestId: str


class JobCancelResponse(BaseModel):
    """Response schema for a successful DELETE."""

    id: str
    jobId: str
    requestId: str
    message: str = "Successfully deleted"


class FailureResponse(BaseModel):
    """Response schema for any failed stage."""

    id: str
    message: str
