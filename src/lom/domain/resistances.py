"""Elemental resistance entries shared by armor, shields and enemies."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from lom.core.types import ElementType


def clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True, slots=True)
class ElementalResistance:
    """Resistance to one element as a fraction between 0 and 1."""

    element: ElementType
    percentage: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", clamp01(self.percentage))


def resistance_for(resistances: Sequence[ElementalResistance], element: ElementType) -> float:
    """Return the resistance against ``element`` or 0.0 when none is listed."""
    for entry in resistances:
        if entry.element == element:
            return entry.percentage
    return 0.0
