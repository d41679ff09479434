from __future__ import annotations

from typing import Any, Mapping

from ..domain.models import ExportedVote, Theme, ThemeStats, Vote, VoteType


def _coerce(mapping: Mapping[str, Any], key: str, default: Any = None) -> Any:
    value = mapping.get(key, default)
    return value if value is not None else default


def theme_from_row(row: Mapping[str, Any]) -> Theme:
    return Theme(id=int(row["id"]), content=str(row["content"]))


def vote_from_row(row: Mapping[str, Any]) -> Vote:
    return Vote(
        id=int(row["id"]),
        user_id=str(row["user_id"]),
        theme_id=int(row["theme_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=str(_coerce(row, "created_at", "")),
    )


def theme_stats_from_row(row: Mapping[str, Any]) -> ThemeStats:
    return ThemeStats(
        theme_id=int(row["theme_id"]),
        content=str(row["content"]),
        yes_votes=int(_coerce(row, "yes_votes", 0)),
        no_votes=int(_coerce(row, "no_votes", 0)),
        skip_votes=int(_coerce(row, "skip_votes", 0)),
        total_votes=int(_coerce(row, "total_votes", 0)),
    )


def exported_vote_from_row(row: Mapping[str, Any]) -> ExportedVote:
    return ExportedVote(
        user_id=str(row["user_id"]),
        theme_id=int(row["theme_id"]),
        theme_content=str(row["theme_content"]),
        vote_type=VoteType(row["vote_type"]),
    )
