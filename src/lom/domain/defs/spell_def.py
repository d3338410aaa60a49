"""Spell definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from lom.core.types import EffectKind, ElementType, SpellSchool, TargetType
from lom.domain.attributes import NO_REQUIREMENTS, AttributeRequirements

MIN_SPELL_LEVEL = 1
MAX_SPELL_LEVEL = 5


@dataclass(frozen=True, slots=True)
class SpellEffectDef:
    """One effect applied by a spell.

    Damage and healing resolve instantly and ignore ``duration``. Timed kinds
    (buffs, debuffs and over-time effects) with ``duration`` 0 last for the
    configured base status effect duration.
    """

    kind: EffectKind
    element: ElementType = "physical"
    base_value: int = 0
    attribute_scaling: float = 0.0
    duration: int = 0
    stackable: bool = False


@dataclass(frozen=True, slots=True)
class SpellDef:
    """Describes a school spell with its cost, targeting and effects."""

    id: str
    name: str
    school: SpellSchool
    mana_cost: int
    target_type: TargetType
    effects: tuple[SpellEffectDef, ...] = ()
    requirements: AttributeRequirements = NO_REQUIREMENTS
    level: int = MIN_SPELL_LEVEL
    minimum_character_level: int = 1
    cast_time: float = 1.0
    cooldown_turns: float = 0.0
    requires_line_of_sight: bool = True
    range: float = 10.0
    description: str = ""
