#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from themevote.infrastructure import sync_themes
from themevote.infrastructure.sqlite import SQLiteDatabase, SQLiteThemesRepository


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load voting themes into the database.")
    parser.add_argument(
        "path",
        nargs="?",
        default="themes.txt",
        help="Theme file: one theme per line, or a YAML file with a 'themes' list (default: themes.txt)",
    )
    parser.add_argument(
        "--db",
        default=os.getenv("DB_PATH", "themes.db"),
        help="SQLite database path (default: $DB_PATH or themes.db)",
    )
    return parser.parse_args(argv)


async def load(path: str, db_path: str) -> int:
    database = SQLiteDatabase(db_path)
    await database.init()
    report = await sync_themes(SQLiteThemesRepository(database), path)
    print("-" * 30)
    print(f"Successfully loaded {report.added} new themes!")
    if report.skipped:
        print(f"Skipped {report.skipped} duplicate themes")
    print("-" * 30)
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper(), format="%(levelname)s %(message)s")
    args = parse_args(argv)
    try:
        return asyncio.run(load(args.path, args.db))
    except RuntimeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
