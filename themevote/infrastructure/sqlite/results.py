from __future__ import annotations

from typing import Sequence

from themevote.domain import ExportedVote, ThemeStats
from themevote.domain.repositories import ResultsRepository
from themevote.infrastructure.mappers import exported_vote_from_row, theme_stats_from_row

from .database import SQLiteDatabase
from ..metrics import metrics


class SQLiteResultsRepository(ResultsRepository):
    def __init__(self, db: SQLiteDatabase):
        self._db = db

    @metrics.wrap_async("db:results.theme_stats", source="database")
    async def theme_stats(self) -> Sequence[ThemeStats]:
        async with self._db.connect() as conn:
            cur = await conn.execute(
                """
                SELECT
                  t.id AS theme_id,
                  t.content,
                  COUNT(CASE WHEN v.vote_type = 'yes' THEN 1 END) AS yes_votes,
                  COUNT(CASE WHEN v.vote_type = 'no' THEN 1 END) AS no_votes,
                  COUNT(CASE WHEN v.vote_type = 'skip' THEN 1 END) AS skip_votes,
                  COUNT(v.id) AS total_votes
                FROM themes t
                LEFT JOIN votes v ON t.id = v.theme_id
                GROUP BY t.id, t.content
                ORDER BY yes_votes DESC, t.id ASC
                """
            )
            rows = await cur.fetchall()
        return [theme_stats_from_row(dict(r)) for r in rows]

    @metrics.wrap_async("db:results.exported_votes", source="database")
    async def exported_votes(self) -> Sequence[ExportedVote]:
        async with self._db.connect() as conn:
            cur = await conn.execute(
                """
                SELECT v.user_id, v.theme_id, t.content AS theme_content, v.vote_type
                FROM votes v
                JOIN themes t ON v.theme_id = t.id
                ORDER BY v.created_at DESC, v.id DESC
                """
            )
            rows = await cur.fetchall()
        return [exported_vote_from_row(dict(r)) for r in rows]
