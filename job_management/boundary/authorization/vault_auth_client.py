"""
Vault authorization client.

Delegates the authorization decision to the vault management service:
the caller's credential is forwarded unchanged to GET /v1/vaults/{vault_id}
and only a 200 response counts as authorized.

Dependencies: httpx
System role: Authorization stage of the request pipeline
"""

import logging

import httpx

from job_management.models.job import AuthorizationOutcome

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"


class VaultAuthorizationClient:
    """Client for the vault management service."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        timeout: float = 60.0,
    ) -> None:
        """
        Initialize authorization client.

        Args:
            http_client: Shared async HTTP client
            base_url: Vault management service base URL
            timeout: Request timeout in seconds
        """
        self._http_client = http_client
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout)

    async def authorize(self, credential: str, vault_id: str) -> AuthorizationOutcome:
        """
        Ask the vault management service whether the credential may access the vault.

        Transport failures are not retried; they come back as status 500 with
        the error text. Any response is returned as-is for the caller to judge.

        Args:
            credential: Raw Authorization header value
            vault_id: Vault identifier (already allow-listed)

        Returns:
            AuthorizationOutcome: Status code, upstream request ID, body or error
        """
        url = f"{self._base_url}/v1/vaults/{vault_id}"
        logger.info("authorize - Requesting vault authorization for vault: %s", vault_id)

        try:
            response = await self._http_client.get(
                url,
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                    "Authorization": credential,
                },
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            error = str(e) or type(e).__name__
            logger.error("authorize - Vault authorization request failed: %s", error)
            return AuthorizationOutcome(status_code=500, error=error)

        outcome = AuthorizationOutcome(
            status_code=response.status_code,
            request_id=response.headers.get(REQUEST_ID_HEADER, ""),
            body=response.text,
        )

        if response.status_code != 200:
            logger.warning(
                "authorize - Vault authorization rejected status code: %s request id: %s",
                response.status_code,
                outcome.request_id,
            )
        return outcome
