from __future__ import annotations

import logging

from ..errors import InvalidVoteType, UnknownTheme
from ..models import VoteType
from ..repositories import ThemesRepository, VotesRepository

logger = logging.getLogger(__name__)


def parse_vote_type(value: object) -> VoteType:
    if isinstance(value, VoteType):
        return value
    if not isinstance(value, str):
        raise InvalidVoteType(value)
    try:
        return VoteType(value)
    except ValueError:
        raise InvalidVoteType(value) from None


class VoteRecorder:
    """
    Keeps exactly one current vote per (user, theme). Voting again on the same
    theme replaces the previous answer.
    """

    def __init__(self, *, themes_repo: ThemesRepository, votes_repo: VotesRepository):
        self._themes = themes_repo
        self._votes = votes_repo

    async def record(self, user_id: str, theme_id: int, vote_type: object) -> None:
        parsed = parse_vote_type(vote_type)
        if not await self._themes.exists(theme_id):
            raise UnknownTheme(theme_id)
        await self._votes.upsert(user_id, theme_id, parsed)
        logger.info("Recorded %s vote from %s on theme %s", parsed.value, user_id, theme_id)
