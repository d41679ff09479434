from __future__ import annotations

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from ..domain.models import ThemeResponse, ThemeStats, VoteType

RULE_WIDTH = 60

VOTE_ACKS = {
    VoteType.YES: "Voted YES",
    VoteType.NO: "Voted NO",
    VoteType.SKIP: "Skipped",
}


class ConsolePresenter:
    def __init__(self, templates_dir: Path | None = None, *, results_limit: int = 10):
        base_dir = templates_dir or (Path(__file__).resolve().parent / "templates")
        self._env = Environment(
            loader=FileSystemLoader(str(base_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._results_limit = results_limit

    def _render(self, template: str, **context) -> str:
        return self._env.get_template(template).render(rule_width=RULE_WIDTH, **context).strip("\n")

    def banner(self) -> str:
        rule = "=" * RULE_WIDTH
        return f"{rule}\n    THEME VOTING\n{rule}\n"

    def auth_succeeded(self) -> str:
        return "Authentication successful!\n"

    def auth_failed(self, reason: object) -> str:
        return f"Authentication failed: {reason}"

    def fetching(self) -> str:
        return "Fetching next theme..."

    def theme_page(self, response: ThemeResponse) -> str:
        return self._render("theme_page.txt.j2", response=response)

    def prompt(self) -> str:
        return "> "

    def vote_ack(self, vote_type: VoteType) -> str:
        return VOTE_ACKS[vote_type]

    def invalid_choice(self) -> str:
        return "Invalid choice. Please try again."

    def all_voted(self) -> str:
        return "\nYou've voted on all themes!\n"

    def results_prompt(self) -> str:
        return "View results? [Y/n]\n> "

    def results_page(self, stats: Sequence[ThemeStats]) -> str:
        return self._render("results_page.txt.j2", entries=list(stats)[: self._results_limit])

    def goodbye(self) -> str:
        return "\nThanks for voting!"

    def api_failed(self, reason: object) -> str:
        return f"Request failed: {reason}"
