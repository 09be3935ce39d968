"""
Bearer token checks.

Checks the Authorization scheme and pulls a single claim out of the token
for log correlation. The claim is decoded without verifying the signature:
trust comes only from the vault management service round trip, so nothing
returned here may be used to make an authorization decision.

Dependencies: PyJWT
System role: First gate of the request pipeline
"""

import jwt

from job_management.core.exceptions import MalformedCredentialError

BEARER_SCHEME = "Bearer"
DEFAULT_CLAIM = "jti"


def validate_scheme(credential: str | None) -> bool:
    """
    Check that the credential uses the Bearer scheme.

    Args:
        credential: Raw Authorization header value

    Returns:
        bool: True only if the text before the first space is "Bearer"
    """
    if not credential:
        return False
    scheme = credential.split(" ", 1)[0]
    return scheme == BEARER_SCHEME


def extract_claim(credential: str | None, claim: str = DEFAULT_CLAIM) -> str:
    """
    Decode the bearer token payload and return one claim.

    Args:
        credential: Raw Authorization header value ("Bearer <jwt>")
        claim: Name of the string claim to return

    Returns:
        str: Claim value

    Raises:
        MalformedCredentialError: Missing token segment, undecodable token,
            or claim absent / not a string
    """
    parts = (credential or "").split(" ", 1)
    if len(parts) < 2 or not parts[1]:
        raise MalformedCredentialError("Bearer token is missing")

    try:
        payload = jwt.decode(parts[1], options={"verify_signature": False})
    except jwt.PyJWTError as e:
        raise MalformedCredentialError(
            f"Unable to decode bearer token: {e}",
            details={"error_type": type(e).__name__},
        ) from e

    value = payload.get(claim)
    if not isinstance(value, str):
        raise MalformedCredentialError(
            f"Bearer token has no valid {claim} claim",
            details={"claim": claim},
        )
    return value
