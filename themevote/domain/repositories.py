from __future__ import annotations

from typing import AbstractSet, Protocol, Sequence, TypeVar

from .models import ExportedVote, Theme, ThemeStats, VerifiedCredential, Vote, VoteType

T = TypeVar("T")


class ThemesRepository(Protocol):
    async def count(self) -> int: ...

    async def get(self, theme_id: int) -> Theme | None: ...

    async def exists(self, theme_id: int) -> bool: ...

    async def ids_excluding(self, excluded: AbstractSet[int]) -> Sequence[int]: ...

    async def add_if_missing(self, content: str) -> bool: ...


class VotesRepository(Protocol):
    async def seen_theme_ids(self, user_id: str) -> set[int]: ...

    async def upsert(self, user_id: str, theme_id: int, vote_type: VoteType) -> None: ...

    async def get(self, user_id: str, theme_id: int) -> Vote | None: ...


class ResultsRepository(Protocol):
    async def theme_stats(self) -> Sequence[ThemeStats]: ...

    async def exported_votes(self) -> Sequence[ExportedVote]: ...


class Randomizer(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...


class CredentialVerifier(Protocol):
    async def verify(self, token: str) -> VerifiedCredential: ...
