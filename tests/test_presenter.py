import unittest

from themevote.client.presenter import ConsolePresenter
from themevote.domain import Theme, ThemeResponse, ThemeStats, VoteType


def make_stats(idx: int, content: str, yes: int = 0, no: int = 0) -> ThemeStats:
    return ThemeStats(
        theme_id=idx,
        content=content,
        yes_votes=yes,
        no_votes=no,
        skip_votes=0,
        total_votes=yes + no,
    )


class ConsolePresenterTests(unittest.TestCase):
    def setUp(self):
        self.presenter = ConsolePresenter(results_limit=2)

    def test_theme_page_shows_progress_and_choices(self):
        text = self.presenter.theme_page(ThemeResponse(theme=Theme(7, "Built to Scale"), total=12, seen=3))

        self.assertIn("Progress: 3/12", text)
        self.assertIn("Built to Scale", text)
        self.assertIn("[Y]es  [N]o  [S]kip  [Q]uit  [R]esults", text)

    def test_results_page_is_limited_and_numbered(self):
        text = self.presenter.results_page(
            [make_stats(1, "Alpha", yes=3, no=1), make_stats(2, "Beta", yes=1), make_stats(3, "Gamma")]
        )

        self.assertIn("VOTING RESULTS", text)
        self.assertIn("1. Alpha (4 votes: 3 yes, 1 no)", text)
        self.assertIn("2. Beta (1 votes: 1 yes, 0 no)", text)
        self.assertNotIn("Gamma", text)

    def test_results_page_without_themes(self):
        self.assertIn("No themes yet.", self.presenter.results_page([]))

    def test_vote_acknowledgements(self):
        self.assertEqual(self.presenter.vote_ack(VoteType.YES), "Voted YES")
        self.assertEqual(self.presenter.vote_ack(VoteType.SKIP), "Skipped")

    def test_auth_failed_includes_reason(self):
        self.assertEqual(self.presenter.auth_failed("timeout"), "Authentication failed: timeout")
