import unittest

from themevote.client.presenter import ConsolePresenter
from themevote.client.voting import VotingSession
from themevote.domain import Theme, ThemeResponse, ThemeStats, VoteType


class FakeApi:
    def __init__(self, responses: list[ThemeResponse]):
        self.responses = list(responses)
        self.votes: list[tuple[int, VoteType]] = []
        self.results_calls = 0

    async def next_theme(self) -> ThemeResponse:
        return self.responses.pop(0)

    async def submit_vote(self, theme_id: int, vote_type: VoteType) -> None:
        self.votes.append((theme_id, vote_type))

    async def results(self):
        self.results_calls += 1
        return [ThemeStats(1, "Alpha", 1, 0, 0, 1)]


class ScriptedInput:
    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answers.pop(0)


def theme_response(theme_id: int | None, total: int = 2, seen: int = 0) -> ThemeResponse:
    theme = Theme(theme_id, f"Theme {theme_id}") if theme_id is not None else None
    return ThemeResponse(theme=theme, total=total, seen=seen)


class VotingSessionTests(unittest.IsolatedAsyncioTestCase):
    def _session(self, api: FakeApi, reader: ScriptedInput):
        self.output: list[str] = []
        return VotingSession(api, ConsolePresenter(), read_input=reader, write=self.output.append)

    async def test_votes_until_all_themes_seen_then_shows_results(self):
        api = FakeApi([theme_response(1), theme_response(2, seen=1), theme_response(None, seen=2)])
        reader = ScriptedInput("Y", " no ", "")

        await self._session(api, reader).run()

        self.assertEqual(api.votes, [(1, VoteType.YES), (2, VoteType.NO)])
        self.assertEqual(api.results_calls, 1)
        self.assertTrue(any("voted on all themes" in line for line in self.output))

    async def test_declining_results_at_the_end(self):
        api = FakeApi([theme_response(None, seen=2)])

        await self._session(api, ScriptedInput("n")).run()

        self.assertEqual(api.results_calls, 0)

    async def test_skip_results_and_quit(self):
        api = FakeApi([theme_response(1), theme_response(2), theme_response(2)])
        reader = ScriptedInput("s", "r", "q")

        await self._session(api, reader).run()

        self.assertEqual(api.votes, [(1, VoteType.SKIP)])
        self.assertEqual(api.results_calls, 1)
        self.assertIn("Thanks for voting!", self.output[-1])

    async def test_invalid_choice_asks_again(self):
        api = FakeApi([theme_response(1), theme_response(1)])

        await self._session(api, ScriptedInput("maybe", "quit")).run()

        self.assertEqual(api.votes, [])
        self.assertIn("Invalid choice. Please try again.", self.output)
