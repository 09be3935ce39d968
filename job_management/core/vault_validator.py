"""
Vault ID allow-list check.

Dependencies: None
System role: Rejects vaults this deployment does not serve before any upstream call
"""

from collections.abc import Collection


def validate(vault_id: str | None, allow_list: Collection[str]) -> bool:
    """Exact, case-sensitive membership; an empty allow-list accepts nothing."""
    if not vault_id:
        return False
    return vault_id in allow_list
