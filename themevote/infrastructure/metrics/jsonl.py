from __future__ import annotations

import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")


class MetricsClient:
    """Writes one JSON line per timed action to the ``metrics.actions`` logger."""

    def __init__(self):
        self._logger = logging.getLogger("metrics.actions")

    def configure(self, logger: logging.Logger | None = None) -> None:
        if logger:
            self._logger = logger

    def _emit(self, action: str, duration_ms: float, success: bool, *, source: str | None) -> None:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "action": action,
            "duration_ms": round(duration_ms, 3),
            "success": success,
        }
        if source:
            payload["source"] = source
        self._logger.info(json.dumps(payload, ensure_ascii=False))

    @asynccontextmanager
    async def span_async(self, action: str, *, source: str | None = None):
        start = time.perf_counter()
        success = True
        try:
            yield
        except Exception:
            success = False
            raise
        finally:
            self._emit(action, (time.perf_counter() - start) * 1000, success, source=source)

    def wrap_async(self, action: str, *, source: str | None = None):
        def decorator(func: Callable[..., Awaitable[T]]):
            @wraps(func)
            async def wrapper(*args, **kwargs):
                async with self.span_async(action, source=source):
                    return await func(*args, **kwargs)

            return wrapper

        return decorator


metrics = MetricsClient()
