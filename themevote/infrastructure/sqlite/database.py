from __future__ import annotations

from contextlib import asynccontextmanager

import aiosqlite

SCHEMA_SQL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS themes (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  content TEXT NOT NULL,
  created_at TEXT NOT NULL DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS votes (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  user_id TEXT NOT NULL,
  theme_id INTEGER NOT NULL,
  vote_type TEXT NOT NULL CHECK (vote_type IN ('yes', 'no', 'skip')),
  created_at TEXT NOT NULL DEFAULT (datetime('now')),
  UNIQUE(user_id, theme_id),
  FOREIGN KEY(theme_id) REFERENCES themes(id)
);

CREATE INDEX IF NOT EXISTS idx_votes_user_id ON votes(user_id);
CREATE INDEX IF NOT EXISTS idx_votes_theme_id ON votes(theme_id);
CREATE INDEX IF NOT EXISTS idx_votes_vote_type ON votes(vote_type);
"""


class SQLiteDatabase:
    def __init__(self, path: str):
        self.path = path

    async def init(self) -> None:
        async with aiosqlite.connect(self.path) as conn:
            await conn.executescript(SCHEMA_SQL)
            await conn.commit()

    async def ping(self) -> bool:
        try:
            async with self.connect() as conn:
                await conn.execute("SELECT 1")
        except aiosqlite.Error:
            return False
        return True

    @asynccontextmanager
    async def connect(self):
        conn = await aiosqlite.connect(self.path)
        conn.row_factory = aiosqlite.Row
        try:
            await conn.execute("PRAGMA foreign_keys=ON")
            yield conn
        finally:
            await conn.close()
