from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class CallbackOutcome:
    token: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, token: str) -> "CallbackOutcome":
        return cls(token=token)

    @classmethod
    def failure(cls, error: str) -> "CallbackOutcome":
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.token is not None


class TokenCell:
    """
    Single slot shared by the callback handler (writer) and the handshake
    poll loop (reader). Reads do not consume the value.
    """

    def __init__(self, *, lock_timeout: float = 1.0):
        self._lock = threading.Lock()
        self._lock_timeout = lock_timeout
        self._outcome: CallbackOutcome | None = None

    def set(self, outcome: CallbackOutcome) -> bool:
        if not self._lock.acquire(timeout=self._lock_timeout):
            return False
        try:
            self._outcome = outcome
        finally:
            self._lock.release()
        return True

    def get(self) -> CallbackOutcome | None:
        with self._lock:
            return self._outcome
