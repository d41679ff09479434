from __future__ import annotations

import asyncio
import logging
import time
import webbrowser
from dataclasses import dataclass
from typing import Callable, Protocol
from urllib.parse import urlencode

from ..domain.errors import AuthTimeout, ProviderError
from .callback import CallbackCapture
from .token_cell import CallbackOutcome, TokenCell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandshakeSettings:
    provider_url: str
    provider: str = "discord"
    callback_host: str = "127.0.0.1"
    callback_port: int = 8080
    timeout: float = 120.0
    poll_interval: float = 0.5


class Capture(Protocol):
    cell: TokenCell

    @property
    def redirect_uri(self) -> str: ...

    async def start(self) -> None: ...

    async def stop(self) -> None: ...


def build_authorize_url(provider_url: str, provider: str, redirect_uri: str) -> str:
    query = urlencode({"provider": provider, "redirect_to": redirect_uri})
    return f"{provider_url.rstrip('/')}/auth/v1/authorize?{query}"


class AuthHandshake:
    """
    Browser login through the provider's implicit flow.

    The listener is always stopped before ``authenticate`` returns or raises.
    """

    def __init__(
        self,
        settings: HandshakeSettings,
        *,
        capture: Capture | None = None,
        open_browser: Callable[[str], bool] = webbrowser.open,
        announce: Callable[[str], None] = print,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings
        self.capture = capture or CallbackCapture(
            TokenCell(),
            host=settings.callback_host,
            port=settings.callback_port,
        )
        self._open_browser = open_browser
        self._announce = announce
        self._clock = clock

    async def authenticate(self) -> str:
        started = self._clock()
        url = build_authorize_url(self.settings.provider_url, self.settings.provider, self.capture.redirect_uri)
        try:
            await self.capture.start()
            await self._open_in_browser(url)
            outcome = await self._wait_for_outcome(started)
        finally:
            await self.capture.stop()

        if not outcome.succeeded:
            raise ProviderError(outcome.error or "unknown error")
        return outcome.token

    async def _open_in_browser(self, url: str) -> None:
        self._announce("Opening browser for login...")
        try:
            if await asyncio.to_thread(self._open_browser, url):
                return
            reason = "no browser available"
        except (webbrowser.Error, OSError) as exc:
            reason = str(exc)
        logger.warning("Could not open browser automatically: %s", reason)
        self._announce(f"Could not open browser automatically: {reason}")
        self._announce("Please open this URL manually:")
        self._announce(url)

    async def _wait_for_outcome(self, started: float) -> CallbackOutcome:
        deadline = started + self.settings.timeout
        while True:
            outcome = self.capture.cell.get()
            if outcome is not None:
                return outcome
            remaining = deadline - self._clock()
            if remaining <= 0:
                raise AuthTimeout(self.settings.timeout)
            await asyncio.sleep(min(self.settings.poll_interval, remaining))
