"""Vault management service adapter."""

from job_management.boundary.authorization.vault_auth_client import VaultAuthorizationClient

__all__ = ["VaultAuthorizationClient"]
