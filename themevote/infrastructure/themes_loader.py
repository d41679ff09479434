from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from ..domain.repositories import ThemesRepository

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class LoadReport:
    added: int
    skipped: int


def _load_yaml_themes(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "themes" not in data:
        raise RuntimeError("Invalid themes.yaml format")

    themes = data["themes"]
    if not isinstance(themes, list):
        raise RuntimeError("themes must be a list")

    normalized = []
    for entry in themes:
        if not isinstance(entry, str) or not entry.strip():
            raise RuntimeError(f"Invalid theme entry: {entry!r}")
        normalized.append(entry.strip())
    return normalized


def _load_text_themes(path: Path) -> list[str]:
    themes = []
    for line in path.read_text(encoding="utf-8").splitlines():
        theme = line.strip()
        if not theme or theme.startswith("#"):
            continue
        themes.append(theme)
    return themes


def load_themes_from_file(path: str) -> list[str]:
    p = Path(path)
    if not p.exists():
        raise RuntimeError(f"themes file not found: {path}")
    if p.suffix.lower() in YAML_SUFFIXES:
        return _load_yaml_themes(p)
    return _load_text_themes(p)


async def sync_themes(repo: ThemesRepository, path: str) -> LoadReport:
    added = 0
    skipped = 0
    for theme in load_themes_from_file(path):
        if await repo.add_if_missing(theme):
            added += 1
            logger.info("Loaded theme: %s", theme)
        else:
            skipped += 1
            logger.info("Skipped duplicate theme: %s", theme)
    return LoadReport(added=added, skipped=skipped)
