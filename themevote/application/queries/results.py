from __future__ import annotations

from typing import Sequence

from ...domain.models import ExportedVote, ThemeStats
from ...domain.repositories import ResultsRepository


def theme_stats_to_dict(stats: ThemeStats) -> dict:
    return {
        "theme_id": stats.theme_id,
        "content": stats.content,
        "yes_votes": stats.yes_votes,
        "no_votes": stats.no_votes,
        "skip_votes": stats.skip_votes,
        "total_votes": stats.total_votes,
    }


def exported_vote_to_dict(vote: ExportedVote) -> dict:
    return {
        "user_id": vote.user_id,
        "theme_id": vote.theme_id,
        "theme_content": vote.theme_content,
        "vote_type": vote.vote_type.value,
    }


class ResultsQueryService:
    def __init__(self, repo: ResultsRepository):
        self._repo = repo

    async def stats(self) -> Sequence[ThemeStats]:
        return list(await self._repo.theme_stats())

    async def export(self) -> Sequence[ExportedVote]:
        return list(await self._repo.exported_votes())
