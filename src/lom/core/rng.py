"""Seeded RNG wrapper used for critical, block and loot rolls."""
from __future__ import annotations

from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random so combat rolls can be replayed from a seed."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def random(self) -> float:
        """Return the next draw in the range [0.0, 1.0)."""
        return self._random.random()

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll(self, chance: float) -> bool:
        """Return True when a uniform draw lands below ``chance``."""
        return self.random() < chance

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)
