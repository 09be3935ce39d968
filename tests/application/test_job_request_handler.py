"""
Test suite for JobRequestHandler.

Drives the full pipeline with mocked collaborators (authorization client,
record store, execution client) and checks the stage ordering, the
short-circuit behaviour and the response bodies.

System role: Verification of the job request orchestration layer
"""

import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from job_management.application.services.job_request_handler import JobRequestHandler
from job_management.core.exceptions import ExecutionError, JobNotFoundError, JobStoreError
from job_management.models.job import AuthorizationOutcome, JobRecord, JobRequest
from job_management.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


@pytest.fixture
def handler(
    mock_authorization_client: AsyncMock,
    mock_record_store: AsyncMock,
    mock_execution_client: MagicMock,
) -> JobRequestHandler:
    """Provide handler serving vaults v1 and v2."""
    return JobRequestHandler(
        authorization_client=mock_authorization_client,
        record_store=mock_record_store,
        execution_client=mock_execution_client,
        vault_allow_list=["v1", "v2"],
    )


@pytest.fixture
def make_request(bearer_credential: str):
    """Provide JobRequest factory with valid defaults."""

    def _make(method: str = "GET", **overrides) -> JobRequest:
        fields = {
            "method": method,
            "job_id": "j1",
            "vault_id": "v1",
            "authorization": bearer_credential,
            "forwarded_for": "203.0.113.7, 10.0.0.1",
        }
        fields.update(overrides)
        return JobRequest(**fields)

    return _make


def record_with_status(status: str) -> JobRecord:
    return JobRecord(
        id="j1",
        job_id="00fabc1d2e3f4g5h",
        job_status=status,
        request_id="req-1",
        query="SELECT * FROM orders",
        destination="s3://results-bucket/j1/",
    )


class TestSchemeCheck:
    """Stage 1: Authorization scheme."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("credential", ["Basic xyz", "bearer abc", "", None])
    async def test_handle_should_return_401_for_non_bearer_credential(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_authorization_client: AsyncMock,
        mock_record_store: AsyncMock,
        mock_execution_client: MagicMock,
        credential,
    ) -> None:
        response = await handler.handle(make_request(authorization=credential))

        assert response.status_code == 401
        assert response.body == {"id": "j1", "message": "Auth Scheme not supported"}
        mock_authorization_client.authorize.assert_not_awaited()
        mock_record_store.get.assert_not_awaited()
        mock_execution_client.cancel.assert_not_called()

    @pytest.mark.asyncio
    async def test_handle_should_serialize_scheme_failure_exactly(
        self, handler: JobRequestHandler, make_request
    ) -> None:
        response = await handler.handle(make_request(authorization="Basic xyz"))

        assert json.dumps(response.body, separators=(",", ":")) == (
            '{"id":"j1","message":"Auth Scheme not supported"}'
        )


class TestClaimExtraction:
    """Stage 2: Bearer token claim."""

    @pytest.mark.asyncio
    async def test_handle_should_return_403_for_undecodable_token(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_authorization_client: AsyncMock,
    ) -> None:
        response = await handler.handle(make_request(authorization="Bearer not-a-jwt"))

        assert response.status_code == 403
        assert response.body["message"].startswith("Unable to decode bearer token")
        mock_authorization_client.authorize.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handle_should_return_403_for_missing_claim(
        self,
        handler: JobRequestHandler,
        make_request,
        make_token,
    ) -> None:
        credential = f"Bearer {make_token({'sub': 'user'})}"

        response = await handler.handle(make_request(authorization=credential))

        assert response.status_code == 403
        assert response.body == {"id": "j1", "message": "Bearer token has no valid jti claim"}

    @pytest.mark.asyncio
    async def test_handle_should_return_403_for_bare_bearer_keyword(
        self, handler: JobRequestHandler, make_request
    ) -> None:
        response = await handler.handle(make_request(authorization="Bearer"))

        assert response.status_code == 403
        assert response.body["message"] == "Bearer token is missing"


class TestVaultIdCheck:
    """Stage 3: Vault allow-list."""

    @pytest.mark.asyncio
    async def test_handle_should_return_403_for_unknown_vault(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_authorization_client: AsyncMock,
        mock_record_store: AsyncMock,
    ) -> None:
        response = await handler.handle(make_request(vault_id="v-unknown"))

        assert response.status_code == 403
        assert response.body == {"id": "j1", "message": "Invalid Vault ID"}
        mock_authorization_client.authorize.assert_not_awaited()
        mock_record_store.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handle_should_reject_every_vault_with_empty_allow_list(
        self,
        mock_authorization_client: AsyncMock,
        mock_record_store: AsyncMock,
        mock_execution_client: MagicMock,
        make_request,
    ) -> None:
        handler = JobRequestHandler(
            authorization_client=mock_authorization_client,
            record_store=mock_record_store,
            execution_client=mock_execution_client,
            vault_allow_list=[],
        )

        response = await handler.handle(make_request(vault_id="v1"))

        assert response.status_code == 403


class TestAuthorize:
    """Stage 4: Vault management service."""

    @pytest.mark.asyncio
    async def test_handle_should_forward_credential_and_vault(
        self,
        handler: JobRequestHandler,
        make_request,
        bearer_credential: str,
        mock_authorization_client: AsyncMock,
    ) -> None:
        await handler.handle(make_request(vault_id="v2"))

        mock_authorization_client.authorize.assert_awaited_once_with(bearer_credential, "v2")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code,body", [(403, "forbidden"), (401, "expired"), (502, "bad gateway")])
    async def test_handle_should_forward_upstream_rejection(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_authorization_client: AsyncMock,
        mock_record_store: AsyncMock,
        status_code: int,
        body: str,
    ) -> None:
        mock_authorization_client.authorize.return_value = AuthorizationOutcome(
            status_code=status_code, request_id="auth-req-2", body=body
        )

        response = await handler.handle(make_request())

        assert response.status_code == status_code
        assert response.body == {"id": "j1", "message": body}
        mock_record_store.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handle_should_return_500_on_transport_error(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_authorization_client: AsyncMock,
        mock_record_store: AsyncMock,
    ) -> None:
        mock_authorization_client.authorize.return_value = AuthorizationOutcome(
            status_code=500, error="connection refused"
        )

        response = await handler.handle(make_request())

        assert response.status_code == 500
        assert response.body == {"id": "j1", "message": "connection refused"}
        mock_record_store.get.assert_not_awaited()


class TestLookup:
    """Stage 5: Job record store."""

    @pytest.mark.asyncio
    async def test_handle_should_return_400_when_record_missing(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_record_store: AsyncMock,
        mock_execution_client: MagicMock,
    ) -> None:
        mock_record_store.get.side_effect = JobNotFoundError("j404")

        response = await handler.handle(make_request("DELETE", job_id="j404"))

        assert response.status_code == 400
        assert response.body == {
            "id": "j404",
            "message": "Failed to check record for id: j404 with error: no job record found",
        }
        mock_execution_client.cancel.assert_not_called()

    @pytest.mark.asyncio
    async def test_handle_should_return_400_on_store_error(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_record_store: AsyncMock,
    ) -> None:
        mock_record_store.get.side_effect = JobStoreError("job record lookup failed", job_id="j1")

        response = await handler.handle(make_request())

        assert response.status_code == 400
        assert response.body["message"] == (
            "Failed to check record for id: j1 with error: job record lookup failed"
        )

    @pytest.mark.asyncio
    async def test_handle_should_not_log_store_traceback_again(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_record_store: AsyncMock,
        caplog,
    ) -> None:
        mock_record_store.get.side_effect = JobStoreError("job record lookup failed", job_id="j1")

        with caplog.at_level(logging.DEBUG):
            await handler.handle(make_request())

        assert not [record for record in caplog.records if record.exc_info]

    @pytest.mark.asyncio
    async def test_handle_should_look_up_requested_job(
        self, handler: JobRequestHandler, make_request, mock_record_store: AsyncMock
    ) -> None:
        await handler.handle(make_request(job_id="j1"))

        mock_record_store.get.assert_awaited_once_with("j1")


class TestGet:
    """Stage 6: GET dispatch."""

    @pytest.mark.asyncio
    async def test_handle_get_should_return_job_status(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_execution_client: MagicMock,
    ) -> None:
        response = await handler.handle(make_request("GET"))

        assert response.status_code == 200
        assert response.body == {
            "id": "j1",
            "jobId": "00fabc1d2e3f4g5h",
            "jobStatus": "RUNNING",
            "requestId": "req-1",
        }
        mock_execution_client.cancel.assert_not_called()

    @pytest.mark.asyncio
    async def test_handle_get_should_be_idempotent(
        self, handler: JobRequestHandler, make_request
    ) -> None:
        first = await handler.handle(make_request("GET"))
        second = await handler.handle(make_request("GET"))

        assert json.dumps(first.body) == json.dumps(second.body)

    @pytest.mark.asyncio
    async def test_handle_get_should_report_unrecognized_status_verbatim(
        self, handler: JobRequestHandler, make_request, mock_record_store: AsyncMock
    ) -> None:
        mock_record_store.get.return_value = record_with_status("QUEUED")

        response = await handler.handle(make_request("GET"))

        assert response.body["jobStatus"] == "QUEUED"


class TestDelete:
    """Stage 6: DELETE dispatch through the job state policy."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["PENDING", "RUNNING"])
    async def test_handle_delete_should_cancel_active_job_once(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_record_store: AsyncMock,
        mock_execution_client: MagicMock,
        status: str,
    ) -> None:
        mock_record_store.get.return_value = record_with_status(status)

        response = await handler.handle(make_request("DELETE"))

        mock_execution_client.cancel.assert_called_once_with("00fabc1d2e3f4g5h")
        assert response.status_code == 200
        assert response.body == {
            "id": "j1",
            "jobId": "00fabc1d2e3f4g5h",
            "requestId": "req-1",
            "message": "Successfully deleted",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["SUCCESS", "FAILURE"])
    async def test_handle_delete_should_refuse_completed_job(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_record_store: AsyncMock,
        mock_execution_client: MagicMock,
        status: str,
    ) -> None:
        mock_record_store.get.return_value = record_with_status(status)

        response = await handler.handle(make_request("DELETE"))

        assert response.status_code == 400
        assert response.body == {
            "id": "j1",
            "message": "Job for jobId:00fabc1d2e3f4g5h is already completed",
        }
        mock_execution_client.cancel.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["CANCELLING", "CANCELLED"])
    async def test_handle_delete_should_refuse_cancelled_job(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_record_store: AsyncMock,
        mock_execution_client: MagicMock,
        status: str,
    ) -> None:
        mock_record_store.get.return_value = record_with_status(status)

        response = await handler.handle(make_request("DELETE"))

        assert response.status_code == 400
        assert response.body["message"] == "Job for jobId:00fabc1d2e3f4g5h is already cancelled"
        mock_execution_client.cancel.assert_not_called()

    @pytest.mark.asyncio
    async def test_handle_delete_should_cancel_unrecognized_status(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_record_store: AsyncMock,
        mock_execution_client: MagicMock,
    ) -> None:
        mock_record_store.get.return_value = record_with_status("SUBMITTED")

        response = await handler.handle(make_request("DELETE"))

        assert response.status_code == 200
        mock_execution_client.cancel.assert_called_once_with("00fabc1d2e3f4g5h")

    @pytest.mark.asyncio
    async def test_handle_delete_should_surface_execution_error(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_execution_client: MagicMock,
    ) -> None:
        mock_execution_client.cancel.side_effect = ExecutionError(
            "Failed to cancel job for jobId: 00fabc1d2e3f4g5h with error: throttled",
            run_id="00fabc1d2e3f4g5h",
        )

        response = await handler.handle(make_request("DELETE"))

        assert response.status_code == 400
        assert response.body == {
            "id": "j1",
            "message": "Failed to cancel job for jobId: 00fabc1d2e3f4g5h with error: throttled",
        }
        assert mock_execution_client.cancel.call_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["delete", "Delete"])
    async def test_handle_should_not_cancel_for_non_exact_method(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_record_store: AsyncMock,
        mock_execution_client: MagicMock,
        method: str,
    ) -> None:
        mock_record_store.get.return_value = record_with_status("RUNNING")

        response = await handler.handle(make_request(method))

        assert response.status_code == 200
        assert response.body is None
        mock_execution_client.cancel.assert_not_called()


class TestOtherMethods:
    """Methods other than GET and DELETE pass through."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH"])
    async def test_handle_should_return_empty_200(
        self,
        handler: JobRequestHandler,
        make_request,
        mock_execution_client: MagicMock,
        method: str,
    ) -> None:
        response = await handler.handle(make_request(method))

        assert response.status_code == 200
        assert response.body is None
        mock_execution_client.cancel.assert_not_called()


class TestCorrelation:
    """Correlation ID seen by every stage of one request."""

    @staticmethod
    def capture_correlation(mock_authorization_client: AsyncMock) -> list[str]:
        seen: list[str] = []

        async def authorize(credential: str, vault_id: str) -> AuthorizationOutcome:
            seen.append(get_correlation_id())
            return AuthorizationOutcome(status_code=200, request_id="req-auth-1")

        mock_authorization_client.authorize.side_effect = authorize
        return seen

    @pytest.mark.asyncio
    async def test_handle_should_fall_back_to_job_id(
        self, handler: JobRequestHandler, make_request, mock_authorization_client: AsyncMock
    ) -> None:
        clear_correlation_id()
        seen = self.capture_correlation(mock_authorization_client)

        await handler.handle(make_request(job_id="j1"))

        assert seen == ["j1"]

    @pytest.mark.asyncio
    async def test_handle_should_keep_existing_correlation_id(
        self, handler: JobRequestHandler, make_request, mock_authorization_client: AsyncMock
    ) -> None:
        set_correlation_id("corr-9")
        seen = self.capture_correlation(mock_authorization_client)

        await handler.handle(make_request(job_id="j1"))

        assert seen == ["corr-9"]
        assert get_correlation_id() == "corr-9"
