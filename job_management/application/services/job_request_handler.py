"""
Job request handler.

Runs one GET or DELETE job request through a fixed pipeline:
scheme check, claim extraction, vault allow-list, vault authorization,
job record lookup, then status read or policy-gated cancellation.
Every stage can end the request; the first failure becomes the response.
Nothing is kept between requests apart from the injected shared clients.

Dependencies: fastapi (threadpool), job_management.core, job_management.boundary
System role: Orchestrator for job status and cancellation requests
"""

import logging
from collections.abc import Collection
from typing import Protocol

from fastapi.concurrency import run_in_threadpool

from job_management.core import job_state_policy, token_validator, vault_validator
from job_management.core.exceptions import (
    InvalidVaultIdError,
    JobManagementException,
    JobNotFoundError,
    JobStoreError,
    PolicyDeniedError,
    UnsupportedAuthSchemeError,
    UpstreamAuthError,
)
from job_management.core.job_state_policy import Deny, JobEffect, JobOperation
from job_management.models.job import (
    AuthorizationOutcome,
    FailureResponse,
    JobApiResponse,
    JobCancelResponse,
    JobRecord,
    JobRequest,
    JobStatusResponse,
)
from job_management.observability.correlation import get_correlation_id, set_correlation_id
from job_management.observability.log_utils import log_with_context, redact_credential

logger = logging.getLogger(__name__)


class AuthorizationClient(Protocol):
    async def authorize(self, credential: str, vault_id: str) -> AuthorizationOutcome: ...


class RecordStore(Protocol):
    async def get(self, job_id: str) -> JobRecord: ...


class ExecutionClient(Protocol):
    def cancel(self, run_id: str) -> None: ...


class JobRequestHandler:
    """
    Orchestrates authorization and job lifecycle decisions for one request.

    Collaborators are process-wide handles built once at startup and passed
    in; the handler itself holds no per-request state.
    """

    def __init__(
        self,
        authorization_client: AuthorizationClient,
        record_store: RecordStore,
        execution_client: ExecutionClient,
        vault_allow_list: Collection[str],
        token_claim: str = token_validator.DEFAULT_CLAIM,
    ) -> None:
        """
        Initialize request handler.

        Args:
            authorization_client: Vault management service client
            record_store: Job record lookup
            execution_client: EMR Serverless cancellation client
            vault_allow_list: Vault IDs served by this deployment
            token_claim: Bearer token claim logged for correlation
        """
        self.authorization_client = authorization_client
        self.record_store = record_store
        self.execution_client = execution_client
        self.vault_allow_list = frozenset(vault_allow_list)
        self.token_claim = token_claim

    async def handle(self, request: JobRequest) -> JobApiResponse:
        """
        Handle a job request end to end.

        Args:
            request: Transport-neutral job request

        Returns:
            JobApiResponse: Success body, failure body, or empty pass-through
        """
        job_id = request.job_id
        if not get_correlation_id():
            set_correlation_id(job_id)
        log_with_context(logger, logging.INFO, f"handle - Initiated with id: {job_id}", job_id=job_id)
        logger.info("handle - Client IP address: %s", request.client_ip)

        try:
            return await self._run(request)
        except (JobNotFoundError, JobStoreError) as e:
            return self._failure(
                job_id,
                f"Failed to check record for id: {job_id} with error: {e.message}",
                e.status_code,
            )
        except JobManagementException as e:
            return self._failure(job_id, e.message, e.status_code)

    async def _run(self, request: JobRequest) -> JobApiResponse:
        self._check_credential(request.authorization)
        self._check_vault(request.vault_id)
        await self._authorize(request.authorization or "", request.vault_id)

        record = await self._lookup(request.job_id)

        method = request.method
        if method == JobOperation.GET.value:
            return JobApiResponse(
                status_code=200,
                body=JobStatusResponse(
                    id=record.id,
                    jobId=record.job_id,
                    jobStatus=record.job_status,
                    requestId=record.request_id,
                ).model_dump(),
            )

        if method == JobOperation.DELETE.value:
            return await self._cancel(record)

        # TODO: answer 405 for other methods once product confirms nothing relies on the empty 200.
        logger.warning("handle - Unsupported method %s, returning empty response", method)
        return JobApiResponse(status_code=200)

    def _check_credential(self, credential: str | None) -> None:
        if not token_validator.validate_scheme(credential):
            log_with_context(
                logger,
                logging.WARNING,
                "_check_credential - Auth scheme not supported",
                credential=redact_credential(credential),
            )
            raise UnsupportedAuthSchemeError()

        claim = token_validator.extract_claim(credential, self.token_claim)
        logger.info("_check_credential - Token %s: %s", self.token_claim, claim)

    def _check_vault(self, vault_id: str) -> None:
        if not vault_validator.validate(vault_id, self.vault_allow_list):
            logger.warning("_check_vault - Vault ID not allowed: %s", vault_id)
            raise InvalidVaultIdError(vault_id)

    async def _authorize(self, credential: str, vault_id: str) -> None:
        outcome = await self.authorization_client.authorize(credential, vault_id)
        if outcome.error:
            raise UpstreamAuthError(
                outcome.error,
                outcome.status_code,
                details={"request_id": outcome.request_id},
            )
        if not outcome.is_authorized:
            raise UpstreamAuthError(
                outcome.body,
                outcome.status_code,
                details={"request_id": outcome.request_id},
            )
        logger.info("_authorize - Successfully authorized, request id: %s", outcome.request_id)

    async def _lookup(self, job_id: str) -> JobRecord:
        logger.info("_lookup - Checking record for id: %s", job_id)
        record = await self.record_store.get(job_id)
        logger.info("_lookup - Found record with status: %s", record.job_status)
        return record

    async def _cancel(self, record: JobRecord) -> JobApiResponse:
        decision = job_state_policy.decide(record.job_status, JobOperation.DELETE)
        if isinstance(decision, Deny):
            raise PolicyDeniedError(record.job_id, decision.reason)

        if decision.effect is JobEffect.ISSUE_CANCELLATION:
            logger.info("_cancel - Cancelling job run: %s", record.job_id)
            await run_in_threadpool(self.execution_client.cancel, record.job_id)
            logger.info("_cancel - Successfully cancelled job run: %s", record.job_id)

        return JobApiResponse(
            status_code=200,
            body=JobCancelResponse(
                id=record.id,
                jobId=record.job_id,
                requestId=record.request_id,
            ).model_dump(),
        )

    @staticmethod
    def _failure(job_id: str, message: str, status_code: int) -> JobApiResponse:
        logger.warning("handle - Request failed with status %s: %s", status_code, message)
        return JobApiResponse(
            status_code=status_code,
            body=FailureResponse(id=job_id, message=message).model_dump(),
        )
