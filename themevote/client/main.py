import asyncio
import logging
import os
from dataclasses import dataclass

import aiohttp
from dotenv import load_dotenv

from ..domain.errors import AuthError
from .api import ApiError, VotingApiClient
from .handshake import AuthHandshake, HandshakeSettings
from .presenter import ConsolePresenter
from .voting import VotingSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    provider_url: str
    backend_url: str = "http://localhost:3000"
    provider: str = "discord"
    callback_port: int = 8080
    auth_timeout: float = 120.0


def load_client_config() -> ClientConfig:
    provider_url = os.getenv("SUPABASE_URL", "").strip()
    if not provider_url:
        raise RuntimeError("SUPABASE_URL is empty. Put it to .env")
    config = ClientConfig(
        provider_url=provider_url,
        backend_url=os.getenv("BACKEND_URL", "http://localhost:3000").strip(),
        provider=os.getenv("AUTH_PROVIDER", "discord").strip(),
        callback_port=int(os.getenv("CALLBACK_PORT", "8080")),
        auth_timeout=float(os.getenv("AUTH_TIMEOUT", "120")),
    )
    logger.debug(
        "Client config loaded: backend=%s, provider=%s, callback_port=%s, auth_timeout=%s",
        config.backend_url,
        config.provider,
        config.callback_port,
        config.auth_timeout,
    )
    return config


async def main() -> int:
    config = load_client_config()
    presenter = ConsolePresenter()
    print(presenter.banner())

    handshake = AuthHandshake(
        HandshakeSettings(
            provider_url=config.provider_url,
            provider=config.provider,
            callback_port=config.callback_port,
            timeout=config.auth_timeout,
        )
    )
    try:
        token = await handshake.authenticate()
    except AuthError as exc:
        print(presenter.auth_failed(exc))
        return 1
    print(presenter.auth_succeeded())

    async with VotingApiClient(config.backend_url, token) as api:
        try:
            await VotingSession(api, presenter).run()
        except (ApiError, aiohttp.ClientError) as exc:
            logger.error("Voting stopped: %s", exc)
            print(presenter.api_failed(exc))
            return 1
    return 0


def run() -> None:
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        code = 130
    raise SystemExit(code)


if __name__ == "__main__":
    run()
