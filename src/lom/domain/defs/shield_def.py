"""Shield definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field

from lom.core.types import ShieldType
from lom.domain.attributes import NO_REQUIREMENTS, AttributeRequirements
from lom.domain.currency import Currency
from lom.domain.resistances import ElementalResistance


@dataclass(frozen=True, slots=True)
class ShieldDef:
    """Shield stat block including block and counter-attack mechanics."""

    id: str
    name: str
    shield_type: ShieldType
    defense_bonus: int
    block_chance: float = 0.15
    blocks_ranged_attacks: bool = False
    resistances: tuple[ElementalResistance, ...] = ()
    requirements: AttributeRequirements = NO_REQUIREMENTS
    value: Currency = field(default_factory=Currency)
    stamina_cost: float = 5.0
    counter_attack_chance: float = 0.0
    counter_attack_damage: int = 0
    description: str = ""
