from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from ..domain.models import VoteType
from .api import VotingApiClient
from .presenter import ConsolePresenter

logger = logging.getLogger(__name__)

VOTE_CHOICES = {
    "y": VoteType.YES,
    "yes": VoteType.YES,
    "n": VoteType.NO,
    "no": VoteType.NO,
    "s": VoteType.SKIP,
    "skip": VoteType.SKIP,
}
QUIT_CHOICES = {"q", "quit"}
RESULTS_CHOICES = {"r", "results"}

InputReader = Callable[[str], Awaitable[str]]


async def read_console_input(prompt: str) -> str:
    try:
        return await asyncio.to_thread(input, prompt)
    except EOFError:
        return "q"


class VotingSession:
    def __init__(
        self,
        api: VotingApiClient,
        presenter: ConsolePresenter,
        *,
        read_input: InputReader = read_console_input,
        write: Callable[[str], None] = print,
    ):
        self._api = api
        self._presenter = presenter
        self._read = read_input
        self._write = write

    async def run(self) -> None:
        while True:
            self._write(self._presenter.fetching())
            response = await self._api.next_theme()
            if response.theme is None:
                await self._finish()
                return

            self._write(self._presenter.theme_page(response))
            choice = (await self._read(self._presenter.prompt())).strip().lower()

            vote_type = VOTE_CHOICES.get(choice)
            if vote_type is not None:
                await self._api.submit_vote(response.theme.id, vote_type)
                self._write(self._presenter.vote_ack(vote_type))
            elif choice in QUIT_CHOICES:
                self._write(self._presenter.goodbye())
                return
            elif choice in RESULTS_CHOICES:
                await self.show_results()
            else:
                self._write(self._presenter.invalid_choice())

    async def show_results(self) -> None:
        stats = await self._api.results()
        self._write(self._presenter.results_page(stats))

    async def _finish(self) -> None:
        self._write(self._presenter.all_voted())
        answer = await self._read(self._presenter.results_prompt())
        if not answer.strip().lower().startswith("n"):
            await self.show_results()
