"""Weapon damage and handling formulas."""
from __future__ import annotations

from lom.core.types import CharacterClass, WeaponHandedness, WeaponType
from lom.domain.attributes import AttributeSet
from lom.domain.defs import WeaponDef

MIN_WEAPON_DAMAGE = 1
RANGED_WEAPON_TYPES = frozenset({"bow", "crossbow"})
TWO_HANDED_WEAPON_TYPES = frozenset({"great_sword", "great_axe", "bow", "crossbow", "staff"})

_SPEED_MODIFIERS: dict[str, float] = {
    "knife": 1.2,
    "sword": 1.0,
    "bow": 1.1,
    "crossbow": 0.9,
    "great_sword": 0.8,
    "great_axe": 0.7,
    "staff": 1.0,
    "mace": 0.9,
    "spear": 1.0,
    "axe": 0.9,
}

_CLASS_WEAPONS: dict[str, frozenset[str]] = {
    "warrior": frozenset({"sword", "great_sword", "axe", "great_axe", "mace", "spear", "knife"}),
    "ranger": frozenset({"bow", "crossbow", "knife", "sword", "spear"}),
    "mage": frozenset({"staff", "knife"}),
    "cleric": frozenset({"mace", "sword", "staff", "knife"}),
}


def attack_modifier(weapon_type: WeaponType, attributes: AttributeSet) -> int:
    """DEX drives ranged weapons, INT drives staves, STR everything else."""
    if weapon_type in RANGED_WEAPON_TYPES:
        return attributes.dexterity_modifier
    if weapon_type == "staff":
        return attributes.intelligence_modifier
    return attributes.strength_modifier


def calculate_damage(weapon: WeaponDef, attributes: AttributeSet) -> int:
    return max(MIN_WEAPON_DAMAGE, weapon.base_damage + attack_modifier(weapon.weapon_type, attributes))


def is_ranged_weapon(weapon: WeaponDef) -> bool:
    return weapon.weapon_type in RANGED_WEAPON_TYPES


def get_speed_modifier(weapon: WeaponDef) -> float:
    return _SPEED_MODIFIERS.get(weapon.weapon_type, 1.0)


def default_handedness(weapon_type: WeaponType) -> WeaponHandedness:
    return "two_handed" if weapon_type in TWO_HANDED_WEAPON_TYPES else "one_handed"


def can_class_use_weapon(character_class: CharacterClass, weapon_type: WeaponType) -> bool:
    return weapon_type in _CLASS_WEAPONS.get(character_class, frozenset())


def can_equip_weapon(weapon: WeaponDef, attributes: AttributeSet, character_class: CharacterClass) -> bool:
    if not can_class_use_weapon(character_class, weapon.weapon_type):
        return False
    return weapon.requirements.meets(attributes, character_class)
