"""Shared vocabularies for the core and domain layers."""
from typing import Literal, get_args

CharacterClass = Literal["warrior", "ranger", "mage", "cleric"]

WeaponType = Literal[
    "sword",
    "great_sword",
    "axe",
    "great_axe",
    "mace",
    "spear",
    "knife",
    "bow",
    "crossbow",
    "staff",
]
WeaponHandedness = Literal["one_handed", "two_handed"]
ArmorType = Literal["light", "medium", "heavy"]
ShieldType = Literal["buckler", "round", "tower", "magic"]

SpellSchool = Literal["fire", "water", "earth"]
TargetType = Literal["self", "single_ally", "single_enemy", "all_allies", "all_enemies", "area"]
EffectKind = Literal["damage", "healing", "buff", "debuff", "damage_over_time", "healing_over_time"]

PoisonType = Literal["none", "weak", "strong", "paralysis", "weakness"]
ElementType = Literal["physical", "fire", "water", "earth", "poison"]

EnemyType = Literal["minion", "elite", "boss", "champion"]
EnemyBehavior = Literal["aggressive", "defensive", "tactical", "berserker", "cowardly", "supportive"]
StatusEffectType = Literal[
    "poison",
    "paralysis",
    "sleep",
    "charm",
    "fear",
    "weakness",
    "burning",
    "frozen",
]

DifficultyLevel = Literal["easy", "normal", "hard"]
ScalingKind = Literal["damage", "health", "mana", "experience", "accuracy", "loot", "currency"]

CHARACTER_CLASSES: tuple[str, ...] = get_args(CharacterClass)
WEAPON_TYPES: tuple[str, ...] = get_args(WeaponType)
WEAPON_HANDEDNESS: tuple[str, ...] = get_args(WeaponHandedness)
ARMOR_TYPES: tuple[str, ...] = get_args(ArmorType)
SHIELD_TYPES: tuple[str, ...] = get_args(ShieldType)
SPELL_SCHOOLS: tuple[str, ...] = get_args(SpellSchool)
TARGET_TYPES: tuple[str, ...] = get_args(TargetType)
EFFECT_KINDS: tuple[str, ...] = get_args(EffectKind)
POISON_TYPES: tuple[str, ...] = get_args(PoisonType)
ELEMENT_TYPES: tuple[str, ...] = get_args(ElementType)
ENEMY_TYPES: tuple[str, ...] = get_args(EnemyType)
ENEMY_BEHAVIORS: tuple[str, ...] = get_args(EnemyBehavior)
STATUS_EFFECT_TYPES: tuple[str, ...] = get_args(StatusEffectType)
DIFFICULTY_LEVELS: tuple[str, ...] = get_args(DifficultyLevel)
SCALING_KINDS: tuple[str, ...] = get_args(ScalingKind)

__all__ = [
    "ArmorType",
    "CharacterClass",
    "DifficultyLevel",
    "EffectKind",
    "ElementType",
    "EnemyBehavior",
    "EnemyType",
    "PoisonType",
    "ScalingKind",
    "ShieldType",
    "SpellSchool",
    "StatusEffectType",
    "TargetType",
    "WeaponHandedness",
    "WeaponType",
    "ARMOR_TYPES",
    "CHARACTER_CLASSES",
    "DIFFICULTY_LEVELS",
    "EFFECT_KINDS",
    "ELEMENT_TYPES",
    "ENEMY_BEHAVIORS",
    "ENEMY_TYPES",
    "POISON_TYPES",
    "SCALING_KINDS",
    "SHIELD_TYPES",
    "SPELL_SCHOOLS",
    "STATUS_EFFECT_TYPES",
    "TARGET_TYPES",
    "WEAPON_HANDEDNESS",
    "WEAPON_TYPES",
]
