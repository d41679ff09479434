from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import AbstractSet, Sequence

from themevote.domain import Theme, VerificationFailure, VerifiedCredential, Vote, VoteType


class InMemoryThemesRepo:
    def __init__(self, themes: Sequence[Theme] = ()):
        self.themes: dict[int, Theme] = {t.id: t for t in themes}

    async def count(self) -> int:
        return len(self.themes)

    async def get(self, theme_id: int):
        return self.themes.get(theme_id)

    async def exists(self, theme_id: int) -> bool:
        return theme_id in self.themes

    async def ids_excluding(self, excluded: AbstractSet[int]):
        return [theme_id for theme_id in sorted(self.themes) if theme_id not in excluded]

    async def add_if_missing(self, content: str) -> bool:
        if any(t.content == content for t in self.themes.values()):
            return False
        new_id = max(self.themes, default=0) + 1
        self.themes[new_id] = Theme(id=new_id, content=content)
        return True


class InMemoryVotesRepo:
    def __init__(self):
        self.rows: dict[tuple[str, int], VoteType] = {}
        self.upsert_calls: list[tuple[str, int, VoteType]] = []

    async def seen_theme_ids(self, user_id: str) -> set[int]:
        return {theme_id for (uid, theme_id) in self.rows if uid == user_id}

    async def upsert(self, user_id: str, theme_id: int, vote_type: VoteType) -> None:
        self.upsert_calls.append((user_id, theme_id, vote_type))
        self.rows[(user_id, theme_id)] = vote_type

    async def get(self, user_id: str, theme_id: int):
        vote_type = self.rows.get((user_id, theme_id))
        if vote_type is None:
            return None
        return Vote(id=0, user_id=user_id, theme_id=theme_id, vote_type=vote_type, created_at="")


class FirstChoiceRandomizer:
    def __init__(self, index: int = 0):
        self.index = index
        self.calls: list[list] = []

    def choice(self, seq):
        self.calls.append(list(seq))
        return seq[self.index % len(seq)]


class FakeVerifier:
    def __init__(self):
        self.credentials: dict[str, VerifiedCredential] = {}
        self.calls: list[str] = []

    def allow(self, token: str, subject: str, *, expires_in: timedelta = timedelta(hours=1)) -> None:
        self.credentials[token] = VerifiedCredential(
            subject=subject,
            expiry=datetime.now(timezone.utc) + expires_in,
        )

    async def verify(self, token: str) -> VerifiedCredential:
        self.calls.append(token)
        try:
            return self.credentials[token]
        except KeyError:
            raise VerificationFailure("unknown token") from None


def make_themes(*contents: str) -> list[Theme]:
    return [Theme(id=idx, content=content) for idx, content in enumerate(contents, start=1)]
