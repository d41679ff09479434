from __future__ import annotations

import logging

import aiosqlite
from aiohttp import web

from ..domain.errors import MissingCredential, VerificationFailure, VoteError
from .auth import authorize
from .container import AppContainer
from .queries import exported_vote_to_dict, theme_stats_to_dict

logger = logging.getLogger(__name__)

CONTAINER_KEY = web.AppKey("container", AppContainer)

UNAUTHORIZED_MESSAGE = "Unauthorized - Invalid or missing JWT token"


@web.middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except MissingCredential as exc:
        return web.Response(status=400, text=str(exc))
    except VerificationFailure:
        return web.Response(status=401, text=UNAUTHORIZED_MESSAGE)
    except VoteError as exc:
        return web.Response(status=400, text=str(exc))
    except aiosqlite.Error:
        logger.exception("Database error while handling %s %s", request.method, request.path)
        return web.Response(status=500, text="Database error")


async def _current_user(request: web.Request) -> str:
    container = request.app[CONTAINER_KEY]
    return await authorize(container.verifier, request.headers.get("Authorization"))


async def root(request: web.Request) -> web.Response:
    return web.Response(text="Theme Voting Backend - Use /health to check status")


async def health(request: web.Request) -> web.Response:
    container = request.app[CONTAINER_KEY]
    if await container.database.ping():
        return web.json_response({"status": "ok", "database": "connected"})
    return web.json_response({"status": "error", "database": "disconnected"})


async def next_theme(request: web.Request) -> web.Response:
    user_id = await _current_user(request)
    response = await request.app[CONTAINER_KEY].theme_selector.next_theme(user_id)
    return web.json_response(response.to_dict())


async def submit_vote(request: web.Request) -> web.Response:
    user_id = await _current_user(request)
    try:
        body = await request.json()
    except ValueError:
        return web.Response(status=400, text="Invalid request body")
    if not isinstance(body, dict):
        return web.Response(status=400, text="Invalid request body")

    theme_id = body.get("theme_id")
    if not isinstance(theme_id, int) or isinstance(theme_id, bool):
        return web.Response(status=400, text="Invalid request body")

    await request.app[CONTAINER_KEY].vote_recorder.record(user_id, theme_id, body.get("vote_type"))
    return web.Response(status=200)


async def admin_stats(request: web.Request) -> web.Response:
    stats = await request.app[CONTAINER_KEY].results.stats()
    return web.json_response([theme_stats_to_dict(s) for s in stats])


async def admin_export(request: web.Request) -> web.Response:
    votes = await request.app[CONTAINER_KEY].results.export()
    return web.json_response([exported_vote_to_dict(v) for v in votes])


def create_web_app(container: AppContainer) -> web.Application:
    app = web.Application(middlewares=[error_middleware])
    app[CONTAINER_KEY] = container
    app.add_routes(
        [
            web.get("/", root),
            web.get("/health", health),
            web.get("/themes/next", next_theme),
            web.post("/themes/vote", submit_vote),
            # TODO: put the admin routes behind a credential check before exposing the server publicly.
            web.get("/admin/stats", admin_stats),
            web.get("/admin/export", admin_export),
        ]
    )
    return app
