"""
Authorization configuration settings.

Vault management service endpoint, request deadline, the vault allow-list
and the bearer token claim used for log correlation.

Dependencies: pydantic, pydantic_settings
System role: Configuration for request authorization
"""

from pydantic import Field

from job_management.configs.base import BaseSettings


class AuthorizationSettings(BaseSettings):
    """Vault management service and allow-list configuration."""

    management_url: str = Field(
        default="http://localhost:8080",
        validation_alias="MANAGEMENT_URL",
        description="Base URL of the vault management service",
    )
    timeout_seconds: float = Field(
        default=60.0,
        validation_alias="AUTH_TIMEOUT_SECONDS",
        description="Timeout for the vault authorization request",
    )
    valid_vault_ids: str = Field(
        default="",
        validation_alias="VALID_VAULT_IDS",
        description="Comma-delimited list of vault IDs accepted by this API",
    )
    token_claim: str = Field(
        default="jti",
        validation_alias="TOKEN_CLAIM",
        description="Bearer token claim extracted for log correlation",
    )

    @property
    def vault_allow_list(self) -> frozenset[str]:
        """Parsed allow-list; blank entries are dropped."""
        return frozenset(
            vault_id.strip()
            for vault_id in self.valid_vault_ids.split(",")
            if vault_id.strip()
        )
