from aiohttp import web
from aiohttp.test_utils import AioHTTPTestCase

from themevote.client import ApiError, VotingApiClient
from themevote.domain import VoteType


class VotingApiClientTests(AioHTTPTestCase):
    async def get_application(self):
        self.received: list[tuple[str, dict]] = []
        self.auth_headers: list[str | None] = []

        async def next_theme(request: web.Request):
            self.auth_headers.append(request.headers.get("Authorization"))
            return web.json_response({"theme": {"id": 3, "content": "Alpha"}, "total": 5, "seen": 2})

        async def vote(request: web.Request):
            self.auth_headers.append(request.headers.get("Authorization"))
            body = await request.json()
            self.received.append(("vote", body))
            if body["theme_id"] == 404:
                return web.Response(status=400, text="Theme not found")
            return web.Response(status=200)

        async def stats(request: web.Request):
            return web.json_response(
                [{"theme_id": 3, "content": "Alpha", "yes_votes": 2, "no_votes": 1, "skip_votes": 0, "total_votes": 3}]
            )

        app = web.Application()
        app.add_routes(
            [
                web.get("/themes/next", next_theme),
                web.post("/themes/vote", vote),
                web.get("/admin/stats", stats),
            ]
        )
        return app

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.api = VotingApiClient(str(self.client.make_url("/")), "secret-token")

    async def asyncTearDown(self):
        await self.api.close()
        await super().asyncTearDown()

    async def test_next_theme_sends_bearer_token(self):
        response = await self.api.next_theme()

        self.assertEqual(response.theme.content, "Alpha")
        self.assertEqual((response.total, response.seen), (5, 2))
        self.assertEqual(self.auth_headers, ["Bearer secret-token"])

    async def test_submit_vote_payload(self):
        await self.api.submit_vote(3, VoteType.SKIP)

        self.assertEqual(self.received, [("vote", {"theme_id": 3, "vote_type": "skip"})])

    async def test_error_status_raises_api_error(self):
        with self.assertRaises(ApiError) as ctx:
            await self.api.submit_vote(404, VoteType.YES)

        self.assertEqual(ctx.exception.status, 400)
        self.assertEqual(str(ctx.exception), "API error (400): Theme not found")

    async def test_results(self):
        stats = await self.api.results()

        self.assertEqual(stats[0].content, "Alpha")
        self.assertEqual(stats[0].total_votes, 3)
