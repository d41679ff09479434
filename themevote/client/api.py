from __future__ import annotations

from typing import Any

import aiohttp

from ..domain.models import Theme, ThemeResponse, ThemeStats, VoteType


class ApiError(Exception):
    def __init__(self, status: int, body: str):
        super().__init__(f"API error ({status}): {body}")
        self.status = status
        self.body = body


def theme_response_from_json(data: dict[str, Any]) -> ThemeResponse:
    raw_theme = data.get("theme")
    theme = Theme(id=int(raw_theme["id"]), content=str(raw_theme["content"])) if raw_theme else None
    return ThemeResponse(theme=theme, total=int(data.get("total", 0)), seen=int(data.get("seen", 0)))


def theme_stats_from_json(data: dict[str, Any]) -> ThemeStats:
    return ThemeStats(
        theme_id=int(data["theme_id"]),
        content=str(data.get("content") or "Unknown"),
        yes_votes=int(data.get("yes_votes", 0)),
        no_votes=int(data.get("no_votes", 0)),
        skip_votes=int(data.get("skip_votes", 0)),
        total_votes=int(data.get("total_votes", 0)),
    )


class VotingApiClient:
    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        session: aiohttp.ClientSession | None = None,
        session_timeout: int = 30,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._session = session
        self._owns_session = session is None
        self._session_timeout = session_timeout

    async def __aenter__(self) -> "VotingApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if not self._session or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._session_timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    @staticmethod
    async def _raise_for_status(resp: aiohttp.ClientResponse) -> None:
        if resp.status >= 400:
            raise ApiError(resp.status, await resp.text())

    async def next_theme(self) -> ThemeResponse:
        session = self._get_session()
        async with session.get(f"{self._base_url}/themes/next", headers=self._auth_headers()) as resp:
            await self._raise_for_status(resp)
            return theme_response_from_json(await resp.json())

    async def submit_vote(self, theme_id: int, vote_type: VoteType) -> None:
        session = self._get_session()
        payload = {"theme_id": theme_id, "vote_type": vote_type.value}
        async with session.post(
            f"{self._base_url}/themes/vote",
            json=payload,
            headers=self._auth_headers(),
        ) as resp:
            await self._raise_for_status(resp)

    async def results(self) -> list[ThemeStats]:
        session = self._get_session()
        async with session.get(f"{self._base_url}/admin/stats") as resp:
            await self._raise_for_status(resp)
            return [theme_stats_from_json(item) for item in await resp.json()]

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None
