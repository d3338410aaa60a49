"""Level-based attribute, HP and MP growth for playable characters."""
from __future__ import annotations

from lom.domain.attributes import AttributeSet
from lom.domain.defs import CharacterDef


def attributes_at_level(character: CharacterDef, level: int) -> AttributeSet:
    return character.base_attributes.at_level(character.attribute_growth, level)


def max_hp_at_level(character: CharacterDef, level: int) -> int:
    level = max(1, level)
    attributes = attributes_at_level(character, level)
    return character.base_hp + character.hp_per_level * (level - 1) + attributes.constitution_modifier


def max_mp_at_level(character: CharacterDef, level: int) -> int:
    """Mages double their INT bonus and clerics their WIS bonus."""
    level = max(1, level)
    attributes = attributes_at_level(character, level)
    intelligence_bonus = attributes.intelligence_modifier
    wisdom_bonus = attributes.wisdom_modifier
    if character.character_class == "mage":
        intelligence_bonus *= 2
    if character.character_class == "cleric":
        wisdom_bonus *= 2
    return character.base_mp + character.mp_per_level * (level - 1) + intelligence_bonus + wisdom_bonus
