from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


def configure_metrics_logger(
    path: str,
    *,
    when: str = "midnight",
    backups: int = 30,
    logger_name: str = "metrics.actions",
) -> logging.Logger:
    """
    Route action metrics to their own JSON-lines file, rotated daily by default.
    Calling it again with the same path keeps the existing handler.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for handler in logger.handlers[:]:
        if getattr(handler, "baseFilename", None) == os.path.abspath(target):
            return logger
        logger.removeHandler(handler)
        handler.close()

    handler = TimedRotatingFileHandler(
        filename=target,
        when=when,
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
