from __future__ import annotations

import random
from typing import Sequence, TypeVar

from ...domain.repositories import Randomizer

T = TypeVar("T")


class SystemRandomizer(Randomizer):
    def __init__(self, source: random.Random | None = None):
        self._random = source or random.Random()

    def choice(self, seq: Sequence[T]) -> T:
        return self._random.choice(seq)
