"""Armor and shield formulas: effective defense, block, penalties, compatibility."""
from __future__ import annotations

from lom.core.types import ArmorType, CharacterClass, ShieldType
from lom.domain.attributes import AttributeSet
from lom.domain.defs import ArmorDef, ShieldDef
from lom.domain.resistances import clamp01

PENALTY_OFFSET_PER_MODIFIER = 0.02
BLOCK_BONUS_PER_DEX_MODIFIER = 0.02
COUNTER_BONUS_PER_DEX_MODIFIER = 0.01

# Heavier armor converts more of the constitution modifier into defense.
_ARMOR_CONSTITUTION_SCALING = {"light": 0.5, "medium": 0.75, "heavy": 1.0}
_ARMOR_WEIGHT = {"light": 1.0, "medium": 2.5, "heavy": 5.0}
_ARMOR_DURABILITY = {"light": 0.8, "medium": 1.0, "heavy": 1.3}
_ARMOR_INITIATIVE_PENALTY = {"light": 0.0, "medium": 0.1, "heavy": 0.25}

_SHIELD_BLOCK_SCALING = {"buckler": 1.2, "round": 1.0, "tower": 0.8, "magic": 1.1}
_SHIELD_WEIGHT = {"buckler": 1.0, "round": 2.0, "tower": 4.0, "magic": 1.5}
_SHIELD_MOVEMENT_PENALTY = {"buckler": 0.0, "round": 0.02, "tower": 0.08, "magic": 0.0}
_SHIELD_DURABILITY = {"buckler": 0.9, "round": 1.0, "tower": 1.2, "magic": 1.3}


# -----------------------
# Armor
# -----------------------
def armor_effective_defense(armor: ArmorDef, attributes: AttributeSet) -> int:
    scaling = _ARMOR_CONSTITUTION_SCALING.get(armor.armor_type, 1.0)
    bonus = round(attributes.constitution_modifier * scaling)
    return max(0, armor.defense_bonus + bonus)


def armor_movement_penalty(armor: ArmorDef, attributes: AttributeSet) -> float:
    """Heavy armor penalty shrinks with strength; lighter armor keeps its listed penalty."""
    penalty = armor.movement_penalty
    if armor.armor_type == "heavy":
        penalty -= attributes.strength_modifier * PENALTY_OFFSET_PER_MODIFIER
    return clamp01(penalty)


def armor_effective_movement_speed(armor: ArmorDef, base_speed: float, attributes: AttributeSet) -> float:
    return base_speed * (1.0 - armor_movement_penalty(armor, attributes))


def armor_stealth_penalty(armor: ArmorDef, attributes: AttributeSet) -> float:
    return clamp01(armor.stealth_penalty - attributes.dexterity_modifier * PENALTY_OFFSET_PER_MODIFIER)


def armor_effective_stealth_modifier(armor: ArmorDef, attributes: AttributeSet) -> float:
    return 1.0 - armor_stealth_penalty(armor, attributes)


def armor_weight(armor_type: ArmorType) -> float:
    return _ARMOR_WEIGHT.get(armor_type, 1.0)


def armor_durability_multiplier(armor_type: ArmorType) -> float:
    return _ARMOR_DURABILITY.get(armor_type, 1.0)


def armor_initiative_penalty(armor_type: ArmorType) -> float:
    return _ARMOR_INITIATIVE_PENALTY.get(armor_type, 0.0)


def is_armor_class_compatible(armor_type: ArmorType, character_class: CharacterClass) -> bool:
    if armor_type == "heavy":
        return character_class == "warrior"
    if armor_type == "medium":
        return character_class != "mage"
    return True


def can_equip_armor(armor: ArmorDef, attributes: AttributeSet, character_class: CharacterClass) -> bool:
    if not is_armor_class_compatible(armor.armor_type, character_class):
        return False
    return armor.requirements.meets(attributes, character_class)


# -----------------------
# Shields
# -----------------------
def shield_effective_defense(shield: ShieldDef, attributes: AttributeSet) -> int:
    defense = shield.defense_bonus
    if shield.shield_type == "tower":
        defense += attributes.strength_modifier
    if shield.shield_type == "buckler":
        defense += attributes.dexterity_modifier
    return max(0, defense)


def shield_effective_block_chance(shield: ShieldDef, attributes: AttributeSet) -> float:
    scaling = _SHIELD_BLOCK_SCALING.get(shield.shield_type, 1.0)
    chance = (shield.block_chance + attributes.dexterity_modifier * BLOCK_BONUS_PER_DEX_MODIFIER) * scaling
    return clamp01(chance)


def shield_can_block_attack(shield: ShieldDef, *, is_ranged: bool, is_magical: bool) -> bool:
    if is_magical and shield.shield_type == "magic":
        return True
    if is_ranged:
        return shield.blocks_ranged_attacks
    return not is_magical


def shield_effective_counter_chance(shield: ShieldDef, attributes: AttributeSet) -> float:
    if shield.counter_attack_chance <= 0.0:
        return 0.0
    return clamp01(shield.counter_attack_chance + attributes.dexterity_modifier * COUNTER_BONUS_PER_DEX_MODIFIER)


def shield_counter_attack_damage(shield: ShieldDef, attributes: AttributeSet) -> int:
    if shield.counter_attack_damage <= 0:
        return 0
    return max(1, shield.counter_attack_damage + attributes.strength_modifier)


def shield_weight(shield_type: ShieldType) -> float:
    return _SHIELD_WEIGHT.get(shield_type, 2.0)


def shield_movement_penalty(shield_type: ShieldType) -> float:
    return _SHIELD_MOVEMENT_PENALTY.get(shield_type, 0.02)


def shield_durability_multiplier(shield_type: ShieldType) -> float:
    return _SHIELD_DURABILITY.get(shield_type, 1.0)


def is_shield_class_compatible(shield_type: ShieldType, character_class: CharacterClass) -> bool:
    if character_class in ("warrior", "cleric"):
        return True
    if character_class == "ranger":
        return shield_type != "tower"
    if character_class == "mage":
        return shield_type == "magic"
    return False


def can_equip_shield(shield: ShieldDef, attributes: AttributeSet, character_class: CharacterClass) -> bool:
    if not is_shield_class_compatible(shield.shield_type, character_class):
        return False
    return shield.requirements.meets(attributes, character_class)
