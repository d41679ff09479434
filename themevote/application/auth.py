from __future__ import annotations

from datetime import datetime, timezone

from ..domain.errors import MissingCredential, VerificationFailure
from ..domain.repositories import CredentialVerifier

BEARER_PREFIX = "Bearer "


def extract_bearer(header: str | None) -> str:
    if not header:
        raise MissingCredential("no auth")
    if not header.startswith(BEARER_PREFIX):
        raise MissingCredential("no bearer")
    return header[len(BEARER_PREFIX):]


async def authorize(
    verifier: CredentialVerifier,
    header: str | None,
    *,
    now: datetime | None = None,
) -> str:
    """Return the user id carried by an ``Authorization`` header value."""
    token = extract_bearer(header)
    credential = await verifier.verify(token)
    if credential.is_expired(now or datetime.now(timezone.utc)):
        raise VerificationFailure("token expired")
    return credential.subject
