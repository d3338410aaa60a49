"""Armor definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field

from lom.core.types import ArmorType
from lom.domain.attributes import NO_REQUIREMENTS, AttributeRequirements
from lom.domain.currency import Currency
from lom.domain.resistances import ElementalResistance


@dataclass(frozen=True, slots=True)
class ArmorDef:
    """Body armor with penalties expressed as fractions (0.2 == 20%)."""

    id: str
    name: str
    armor_type: ArmorType
    defense_bonus: int
    movement_penalty: float = 0.0
    stealth_penalty: float = 0.0
    resistances: tuple[ElementalResistance, ...] = ()
    requirements: AttributeRequirements = NO_REQUIREMENTS
    value: Currency = field(default_factory=Currency)
    description: str = ""
