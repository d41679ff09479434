from __future__ import annotations

import logging

from ..models import ThemeResponse
from ..repositories import Randomizer, ThemesRepository, VotesRepository

logger = logging.getLogger(__name__)


class ThemeSelector:
    """
    Picks the next theme to show a user: uniformly at random among the themes
    the user has not voted on yet. Every vote type, skip included, marks a
    theme as seen.
    """

    def __init__(
        self,
        *,
        themes_repo: ThemesRepository,
        votes_repo: VotesRepository,
        randomizer: Randomizer,
    ):
        self._themes = themes_repo
        self._votes = votes_repo
        self._randomizer = randomizer

    async def next_theme(self, user_id: str) -> ThemeResponse:
        total = await self._themes.count()
        seen_ids = await self._votes.seen_theme_ids(user_id)
        candidates = list(await self._themes.ids_excluding(seen_ids))
        if not candidates:
            logger.debug("User %s has no unseen themes left (%s/%s)", user_id, len(seen_ids), total)
            return ThemeResponse(theme=None, total=total, seen=len(seen_ids))

        theme_id = self._randomizer.choice(candidates)
        theme = await self._themes.get(theme_id)
        return ThemeResponse(theme=theme, total=total, seen=len(seen_ids))
