"""Playable character definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field

from lom.core.types import CharacterClass
from lom.domain.attributes import ZERO_GROWTH, AttributeSet
from lom.domain.currency import Currency


@dataclass(frozen=True, slots=True)
class CharacterDef:
    """Class template with base attributes and per-level growth."""

    id: str
    name: str
    character_class: CharacterClass
    base_attributes: AttributeSet
    base_hp: int
    base_mp: int
    attribute_growth: AttributeSet = ZERO_GROWTH
    hp_per_level: int = 8
    mp_per_level: int = 4
    description: str = ""
    starting_weapon_id: str | None = None
    starting_armor_id: str | None = None
    starting_shield_id: str | None = None
    starting_currency: Currency = field(default_factory=Currency)
    spell_ids: tuple[str, ...] = ()
    special_abilities: tuple[str, ...] = ()
