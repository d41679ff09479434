"""
Short-lived local listener that receives the identity provider's redirect.

The provider returns the access token in the URL fragment, which browsers
never send to a server. The first request therefore gets a page whose script
reads ``window.location.hash`` and sends the token back as a query parameter
to the same endpoint.
"""

from __future__ import annotations

import logging
from pathlib import Path

from aiohttp import web
from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..domain.errors import TransportError
from .token_cell import CallbackOutcome, TokenCell

logger = logging.getLogger(__name__)

CALLBACK_PATH = "/callback"


class CallbackPages:
    def __init__(self, templates_dir: Path | None = None):
        base_dir = templates_dir or (Path(__file__).resolve().parent / "templates")
        self._env = Environment(
            loader=FileSystemLoader(str(base_dir)),
            autoescape=select_autoescape(enabled_extensions=("html", "j2"), default_for_string=True, default=True),
        )

    def _render(self, template: str, **context) -> str:
        return self._env.get_template(template).render(**context)

    def relay(self, path: str) -> str:
        return self._render("callback_relay.html.j2", callback_path=path)

    def success(self) -> str:
        return self._render("callback_success.html.j2")

    def error(self, message: str) -> str:
        return self._render("callback_error.html.j2", message=message)

    def failed(self) -> str:
        return self._render("callback_failed.html.j2")


class CallbackCapture:
    def __init__(
        self,
        cell: TokenCell,
        *,
        host: str = "127.0.0.1",
        port: int = 8080,
        path: str = CALLBACK_PATH,
        shutdown_timeout: float = 0.1,
        pages: CallbackPages | None = None,
    ):
        self.cell = cell
        self.host = host
        self.port = port
        self.path = path
        self._shutdown_timeout = shutdown_timeout
        self._pages = pages or CallbackPages()
        self._runner: web.AppRunner | None = None

    @property
    def redirect_uri(self) -> str:
        return f"http://localhost:{self.port}{self.path}"

    @property
    def running(self) -> bool:
        return self._runner is not None

    def build_app(self) -> web.Application:
        app = web.Application()
        app.add_routes([web.get(self.path, self.handle_callback)])
        return app

    async def start(self) -> None:
        if self._runner is not None:
            return
        runner = web.AppRunner(self.build_app(), shutdown_timeout=self._shutdown_timeout, access_log=None)
        await runner.setup()
        site = web.TCPSite(runner, host=self.host, port=self.port)
        try:
            await site.start()
        except OSError as exc:
            await runner.cleanup()
            raise TransportError(f"Could not start callback listener on {self.host}:{self.port}: {exc}") from exc
        self._runner = runner
        logger.info("Local callback server started on port %s", self.port)

    async def stop(self) -> None:
        runner, self._runner = self._runner, None
        if runner is None:
            return
        await runner.cleanup()
        logger.info("Local callback server stopped")

    async def handle_callback(self, request: web.Request) -> web.Response:
        error = request.query.get("error")
        token = request.query.get("access_token")

        if error:
            message = request.query.get("error_description") or error
            if not self.cell.set(CallbackOutcome.failure(message)):
                return self._failed()
            logger.warning("Identity provider reported an error: %s", message)
            return self._html(self._pages.error(message))

        if token:
            if not self.cell.set(CallbackOutcome.success(token)):
                return self._failed()
            logger.info("Access token received")
            return self._html(self._pages.success())

        return self._html(self._pages.relay(self.path))

    def _failed(self) -> web.Response:
        logger.error("Could not store the callback result")
        return self._html(self._pages.failed(), status=500)

    @staticmethod
    def _html(body: str, status: int = 200) -> web.Response:
        return web.Response(text=body, status=status, content_type="text/html")
