from __future__ import annotations

from contextlib import asynccontextmanager

from ..domain.repositories import CredentialVerifier
from .container import AppContainer, ServerConfig, create_container


@asynccontextmanager
async def bootstrap_app(config: ServerConfig, *, verifier: CredentialVerifier | None = None):
    container = create_container(config, verifier=verifier)
    await container.init_resources()
    yield container
