from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Sequence

import jwt

from ...domain.errors import VerificationFailure
from ...domain.models import VerifiedCredential
from ...domain.repositories import CredentialVerifier

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHMS = ("ES256", "RS256")

KeyResolver = Callable[[str], Any]


def jwks_url_for(provider_url: str) -> str:
    return f"{provider_url.rstrip('/')}/auth/v1/.well-known/jwks.json"


class JwksCredentialVerifier(CredentialVerifier):
    """
    Checks bearer tokens against the identity provider's published key set.

    Only the signature and the required claims are checked here; the caller
    decides what to do with an expired credential.
    """

    def __init__(
        self,
        jwks_url: str,
        *,
        algorithms: Sequence[str] = DEFAULT_ALGORITHMS,
        audience: str | None = None,
        key_resolver: KeyResolver | None = None,
    ):
        self._algorithms = list(algorithms)
        self._audience = audience
        if key_resolver is None:
            client = jwt.PyJWKClient(jwks_url, cache_keys=True)
            key_resolver = lambda token: client.get_signing_key_from_jwt(token).key  # noqa: E731
        self._resolve_key = key_resolver

    async def verify(self, token: str) -> VerifiedCredential:
        try:
            key = await asyncio.to_thread(self._resolve_key, token)
            claims = jwt.decode(
                token,
                key,
                algorithms=self._algorithms,
                audience=self._audience,
                options={
                    "require": ["sub", "exp"],
                    "verify_exp": False,
                    "verify_aud": self._audience is not None,
                },
            )
        except jwt.PyJWTError as exc:
            logger.info("Rejected bearer token: %s", exc)
            raise VerificationFailure(str(exc)) from exc

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise VerificationFailure("token subject is empty")
        try:
            expiry = datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError) as exc:
            raise VerificationFailure("token expiry is malformed") from exc
        return VerifiedCredential(subject=subject, expiry=expiry)
