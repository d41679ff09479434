from __future__ import annotations

from themevote.domain import Vote, VoteType
from themevote.domain.repositories import VotesRepository
from themevote.infrastructure.mappers import vote_from_row

from .database import SQLiteDatabase
from ..metrics import metrics


class SQLiteVotesRepository(VotesRepository):
    def __init__(self, db: SQLiteDatabase):
        self._db = db

    @metrics.wrap_async("db:votes.seen_theme_ids", source="database")
    async def seen_theme_ids(self, user_id: str) -> set[int]:
        async with self._db.connect() as conn:
            cur = await conn.execute("SELECT theme_id FROM votes WHERE user_id=?", (user_id,))
            rows = await cur.fetchall()
        return {int(r["theme_id"]) for r in rows}

    @metrics.wrap_async("db:votes.upsert", source="database")
    async def upsert(self, user_id: str, theme_id: int, vote_type: VoteType) -> None:
        async with self._db.connect() as conn:
            await conn.execute(
                """
                INSERT INTO votes(user_id, theme_id, vote_type)
                VALUES(?, ?, ?)
                ON CONFLICT(user_id, theme_id)
                DO UPDATE SET vote_type=excluded.vote_type, created_at=datetime('now')
                """,
                (user_id, theme_id, vote_type.value),
            )
            await conn.commit()

    @metrics.wrap_async("db:votes.get", source="database")
    async def get(self, user_id: str, theme_id: int) -> Vote | None:
        async with self._db.connect() as conn:
            cur = await conn.execute(
                """
                SELECT id, user_id, theme_id, vote_type, created_at
                FROM votes
                WHERE user_id=? AND theme_id=?
                """,
                (user_id, theme_id),
            )
            row = await cur.fetchone()
        if not row:
            return None
        return vote_from_row(dict(row))
