"""Three-tier currency stored as a single copper count."""
from __future__ import annotations

from dataclasses import dataclass

COPPER_PER_SILVER = 100
COPPER_PER_GOLD = 10_000


@dataclass(frozen=True, slots=True, order=True)
class Currency:
    """Gold/silver/copper amount. 1 gold = 100 silver = 10000 copper."""

    total_copper: int = 0

    @classmethod
    def of(cls, gold: int = 0, silver: int = 0, copper: int = 0) -> Currency:
        return cls(gold * COPPER_PER_GOLD + silver * COPPER_PER_SILVER + copper)

    @classmethod
    def from_copper(cls, copper: int) -> Currency:
        return cls(copper)

    @property
    def gold(self) -> int:
        return self.total_copper // COPPER_PER_GOLD

    @property
    def silver(self) -> int:
        return (self.total_copper % COPPER_PER_GOLD) // COPPER_PER_SILVER

    @property
    def copper(self) -> int:
        return self.total_copper % COPPER_PER_SILVER

    def scaled(self, factor: float) -> Currency:
        """Return the amount multiplied by ``factor``, rounded, never negative."""
        return Currency(max(0, round(self.total_copper * factor)))

    def __add__(self, other: Currency) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency(self.total_copper + other.total_copper)

    def __sub__(self, other: Currency) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency(max(0, self.total_copper - other.total_copper))

    def __str__(self) -> str:
        if self.gold > 0:
            return f"{self.gold}g {self.silver}s {self.copper}c"
        if self.silver > 0:
            return f"{self.silver}s {self.copper}c"
        return f"{self.copper}c"
