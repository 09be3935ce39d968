"""
Job API endpoints.

Routes: GET /v1/vaults/{vault_id}/jobs/{job_id}, DELETE /v1/vaults/{vault_id}/jobs/{job_id}

Dependencies: job_management.application.services, job_management.models
System role: Job status and cancellation HTTP API
"""

from fastapi import APIRouter, Depends, Header, Request, Response
from fastapi.responses import JSONResponse

from job_management.api.deps import get_job_request_handler
from job_management.application.services import JobRequestHandler
from job_management.models.job import JobApiResponse, JobRequest

router = APIRouter(prefix="/v1/vaults/{vault_id}/jobs", tags=["jobs"])


def to_http_response(result: JobApiResponse) -> Response:
    """Render a handler result; a missing body becomes an empty response."""
    if result.body is None:
        return Response(status_code=result.status_code)
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.api_route("/{job_id}", methods=["GET", "DELETE"])
async def job_request(
    request: Request,
    vault_id: str,
    job_id: str,
    authorization: str | None = Header(default=None),
    x_forwarded_for: str | None = Header(default=None),
    handler: JobRequestHandler = Depends(get_job_request_handler),
) -> Response:
    """
    Get the status of a job or cancel it.

    GET returns {id, jobId, jobStatus, requestId}. DELETE requests
    cancellation of a pending or running job and returns
    {id, jobId, requestId, message}. Failures return {id, message} with the
    status of the failing stage (401, 403, 400, or the vault service's own
    status on an authorization rejection).

    Args:
        request: Incoming request (method)
        vault_id: Vault the caller must be authorized for
        job_id: External job identifier
        authorization: Bearer credential
        x_forwarded_for: Client address chain, logged only
        handler: Injected JobRequestHandler

    Example Response:
        {
            "id": "8f14e45f-ceea-467f-a8f5-3b2a1c9e7d10",
            "jobId": "00fabc1d2e3f4g5h",
            "jobStatus": "RUNNING",
            "requestId": "2f1e0d9c-8b7a-4c5d-9e6f-1a2b3c4d5e6f"
        }
    """
    result = await handler.handle(
        JobRequest(
            method=request.method,
            job_id=job_id,
            vault_id=vault_id,
            authorization=authorization,
            forwarded_for=x_forwarded_for,
        )
    )
    return to_http_response(result)
