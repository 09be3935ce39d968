"""
Job state policy.

Decides whether an operation is allowed for a job's current status and which
side effect, if any, the request handler must apply.

Dependencies: job_management.models
System role: Status-dependent branching before mutating the execution backend
"""

import enum
import logging
from dataclasses import dataclass

from job_management.models.job import JobStatus

logger = logging.getLogger(__name__)

COMPLETED_STATUSES = frozenset({JobStatus.SUCCESS.value, JobStatus.FAILURE.value})
CANCELLED_STATUSES = frozenset({JobStatus.CANCELLING.value, JobStatus.CANCELLED.value})
KNOWN_STATUSES = frozenset(status.value for status in JobStatus)


class JobOperation(str, enum.Enum):
    """Operations exposed on a job."""

    GET = "GET"
    DELETE = "DELETE"


class JobEffect(str, enum.Enum):
    """Side effect the handler applies after an Allow decision."""

    NONE = "none"
    ISSUE_CANCELLATION = "issue_cancellation"


@dataclass(frozen=True)
class Allow:
    effect: JobEffect = JobEffect.NONE


@dataclass(frozen=True)
class Deny:
    reason: str


def decide(current_status: str, operation: JobOperation) -> Allow | Deny:
    """
    Decide an operation against the job's current status.

    GET is always allowed. DELETE is denied once the job has completed or a
    cancellation is already under way; any other status, including values
    this service does not recognize, results in a cancellation request.

    Args:
        current_status: Raw status from the job record
        operation: Requested operation

    Returns:
        Allow | Deny: Decision with effect or reason
    """
    if operation == JobOperation.GET:
        return Allow(JobEffect.NONE)

    if current_status in COMPLETED_STATUSES:
        return Deny("already completed")

    if current_status in CANCELLED_STATUSES:
        return Deny("already cancelled")

    if current_status not in KNOWN_STATUSES:
        logger.warning(
            "decide - Unrecognized job status %r, allowing cancellation",
            current_status,
        )
    return Allow(JobEffect.ISSUE_CANCELLATION)
