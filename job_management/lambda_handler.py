"""
Lambda handler for API Gateway job requests.

Translates an API Gateway proxy event into a JobRequest, runs it through the
shared JobRequestHandler and returns the proxy response.

Environment variables:
- DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME: job details database
- MANAGEMENT_URL: vault management service base URL
- VALID_VAULT_IDS: comma-delimited vault allow-list
- REGION, APPLICATION_ID: EMR Serverless application
- LOG_LEVEL: Logging level

Dependencies: job_management.api.deps, job_management.models
System role: Lambda entry point for job status and cancellation
"""

import asyncio
import json
from typing import Any, Dict

from job_management.api.deps.dependencies import get_service_cache
from job_management.configs import get_settings
from job_management.models.job import JobApiResponse, JobRequest
from job_management.observability.logger import configure_logging, get_logger

configure_logging(get_settings().log_level)
logger = get_logger(__name__)

# One loop per container so the cached async clients stay bound to it
# across warm invocations.
_loop = asyncio.new_event_loop()


def _header(headers: Dict[str, str] | None, name: str) -> str | None:
    """Case-insensitive header lookup; API Gateway may lowercase names."""
    for key, value in (headers or {}).items():
        if key.lower() == name.lower():
            return value
    return None


def parse_event(event: Dict[str, Any]) -> JobRequest:
    """
    Build a JobRequest from an API Gateway proxy event.

    Args:
        event: API Gateway REST proxy event

    Returns:
        JobRequest: Transport-neutral request
    """
    path_parameters = event.get("pathParameters") or {}
    headers = event.get("headers")
    return JobRequest(
        method=event.get("httpMethod", ""),
        job_id=path_parameters.get("jobID", ""),
        vault_id=path_parameters.get("vaultID", ""),
        authorization=_header(headers, "Authorization"),
        forwarded_for=_header(headers, "X-Forwarded-For"),
    )


def to_proxy_response(result: JobApiResponse) -> Dict[str, Any]:
    """Render a handler result as an API Gateway proxy response."""
    return {
        "statusCode": result.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(result.body) if result.body is not None else "",
    }


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for job status and cancellation requests.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        Dict with statusCode, headers and JSON body
    """
    request = parse_event(event)
    logger.info("handler - Received %s request for job: %s", request.method, request.job_id)
    request_handler = get_service_cache().request_handler
    result = _loop.run_until_complete(request_handler.handle(request))
    return to_proxy_response(result)
