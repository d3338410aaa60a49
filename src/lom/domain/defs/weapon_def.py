"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field

from lom.core.types import WeaponHandedness, WeaponType
from lom.domain.attributes import NO_REQUIREMENTS, AttributeRequirements
from lom.domain.currency import Currency


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Immutable weapon stat block. Poison state lives in WeaponEnhancementState."""

    id: str
    name: str
    weapon_type: WeaponType
    base_damage: int
    handedness: WeaponHandedness = "one_handed"
    critical_chance: float = 0.05
    can_be_enhanced: bool = True
    has_armor_penetration: bool = False
    poison_effectiveness: float = 1.0
    requirements: AttributeRequirements = NO_REQUIREMENTS
    value: Currency = field(default_factory=Currency)
    description: str = ""
