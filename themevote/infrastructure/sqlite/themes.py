from __future__ import annotations

import json
from typing import AbstractSet, Sequence

from themevote.domain import Theme
from themevote.domain.repositories import ThemesRepository
from themevote.infrastructure.mappers import theme_from_row

from .database import SQLiteDatabase
from ..metrics import metrics

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be stored.
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


def _storable_id(theme_id: int) -> bool:
    return MIN_ROW_ID <= theme_id <= MAX_ROW_ID


class SQLiteThemesRepository(ThemesRepository):
    def __init__(self, db: SQLiteDatabase):
        self._db = db

    @metrics.wrap_async("db:themes.count", source="database")
    async def count(self) -> int:
        async with self._db.connect() as conn:
            cur = await conn.execute("SELECT COUNT(*) AS c FROM themes")
            row = await cur.fetchone()
        return int(row["c"])

    @metrics.wrap_async("db:themes.get", source="database")
    async def get(self, theme_id: int) -> Theme | None:
        if not _storable_id(theme_id):
            return None
        async with self._db.connect() as conn:
            cur = await conn.execute("SELECT id, content FROM themes WHERE id=?", (theme_id,))
            row = await cur.fetchone()
        if not row:
            return None
        return theme_from_row(dict(row))

    @metrics.wrap_async("db:themes.exists", source="database")
    async def exists(self, theme_id: int) -> bool:
        if not _storable_id(theme_id):
            return False
        async with self._db.connect() as conn:
            cur = await conn.execute("SELECT 1 FROM themes WHERE id=?", (theme_id,))
            row = await cur.fetchone()
        return row is not None

    @metrics.wrap_async("db:themes.ids_excluding", source="database")
    async def ids_excluding(self, excluded: AbstractSet[int]) -> Sequence[int]:
        async with self._db.connect() as conn:
            if not excluded:
                cur = await conn.execute("SELECT id FROM themes ORDER BY id")
            else:
                cur = await conn.execute(
                    """
                    SELECT id FROM themes
                    WHERE id NOT IN (SELECT value FROM json_each(?))
                    ORDER BY id
                    """,
                    (json.dumps(sorted(excluded)),),
                )
            rows = await cur.fetchall()
        return [int(r["id"]) for r in rows]

    @metrics.wrap_async("db:themes.add_if_missing", source="database")
    async def add_if_missing(self, content: str) -> bool:
        async with self._db.connect() as conn:
            await conn.execute("BEGIN IMMEDIATE;")
            cur = await conn.execute("SELECT 1 FROM themes WHERE content=?", (content,))
            if await cur.fetchone():
                await conn.rollback()
                return False
            await conn.execute("INSERT INTO themes(content) VALUES(?)", (content,))
            await conn.commit()
        return True
