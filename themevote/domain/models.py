from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class VoteType(str, Enum):
    YES = "yes"
    NO = "no"
    SKIP = "skip"


@dataclass(frozen=True)
class Theme:
    id: int
    content: str

    def to_dict(self) -> dict:
        return {"id": self.id, "content": self.content}


@dataclass(frozen=True)
class Vote:
    id: int
    user_id: str
    theme_id: int
    vote_type: VoteType
    created_at: str


@dataclass(frozen=True)
class ThemeResponse:
    theme: Theme | None
    total: int
    seen: int

    @property
    def exhausted(self) -> bool:
        return self.theme is None

    def to_dict(self) -> dict:
        return {
            "theme": self.theme.to_dict() if self.theme else None,
            "total": self.total,
            "seen": self.seen,
        }


@dataclass(frozen=True)
class VerifiedCredential:
    subject: str
    expiry: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expiry


@dataclass(frozen=True)
class ThemeStats:
    theme_id: int
    content: str
    yes_votes: int
    no_votes: int
    skip_votes: int
    total_votes: int


@dataclass(frozen=True)
class ExportedVote:
    user_id: str
    theme_id: int
    theme_content: str
    vote_type: VoteType
