"""Balance configuration records consumed by the combat formulas.

Every group is a frozen dataclass whose defaults form a playable baseline, so a
partial ``balance.json`` only needs to list the values it overrides. Per-type
multiplier groups are read-only mappings keyed by the shared vocabularies.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from lom.core.types import (
    ArmorType,
    CharacterClass,
    DifficultyLevel,
    PoisonType,
    ScalingKind,
    SpellSchool,
    WeaponType,
)
from lom.domain.attributes import AttributeSet
from lom.domain.currency import Currency
from lom.domain.resistances import clamp01

ITEM_CATEGORIES = ("weapon", "armor", "shield", "consumable", "poison")


def _default_weapon_multipliers() -> Mapping[str, float]:
    return MappingProxyType(
        {
            "sword": 1.0,
            "great_sword": 1.4,
            "axe": 1.1,
            "great_axe": 1.5,
            "mace": 1.05,
            "spear": 1.0,
            "knife": 0.8,
            "bow": 1.0,
            "crossbow": 1.2,
            "staff": 0.9,
        }
    )


def _default_armor_effectiveness() -> Mapping[str, float]:
    return MappingProxyType({"light": 1.0, "medium": 1.0, "heavy": 1.0})


def _default_class_growth() -> Mapping[str, float]:
    return MappingProxyType({"warrior": 1.0, "ranger": 1.0, "mage": 1.0, "cleric": 1.0})


def _default_category_prices() -> Mapping[str, float]:
    return MappingProxyType({category: 1.0 for category in ITEM_CATEGORIES})


def _default_school_power() -> Mapping[str, float]:
    return MappingProxyType({"fire": 1.0, "water": 1.0, "earth": 1.0})


def _default_poison_damage() -> Mapping[str, int]:
    return MappingProxyType({"weak": 2, "strong": 5, "paralysis": 1, "weakness": 1})


def _default_poison_duration() -> Mapping[str, int]:
    return MappingProxyType({"weak": 3, "strong": 3, "paralysis": 2, "weakness": 3})


@dataclass(frozen=True, slots=True)
class CombatConfig:
    base_damage_multiplier: float = 1.0
    base_critical_chance: float = 0.05
    critical_damage_multiplier: float = 1.5
    base_dodge_chance: float = 0.05
    base_block_chance: float = 0.15
    block_damage_reduction: float = 0.5
    # fraction of incoming damage removed per point of effective defense
    armor_damage_reduction: float = 0.02
    max_armor_reduction: float = 0.8
    base_status_effect_duration: int = 3
    weapon_damage_multipliers: Mapping[str, float] = field(default_factory=_default_weapon_multipliers)
    armor_effectiveness: Mapping[str, float] = field(default_factory=_default_armor_effectiveness)
    base_initiative: float = 10.0
    dexterity_initiative_bonus: float = 1.0
    armor_initiative_penalty: float = 1.0

    def weapon_damage_multiplier(self, weapon_type: WeaponType) -> float:
        return self.weapon_damage_multipliers.get(weapon_type, 1.0)

    def armor_effectiveness_for(self, armor_type: ArmorType) -> float:
        return self.armor_effectiveness.get(armor_type, 1.0)

    def armor_reduction(self, defense: int) -> float:
        """Return the damage fraction absorbed by ``defense``, capped at the maximum."""
        return min(self.max_armor_reduction, max(0.0, defense * self.armor_damage_reduction))


@dataclass(frozen=True, slots=True)
class ProgressionConfig:
    base_experience_required: int = 100
    experience_scaling: float = 1.2
    max_level: int = 20
    attribute_points_per_level: int = 1
    attribute_growth: Mapping[str, float] = field(default_factory=_default_class_growth)
    base_hp_per_level: int = 8
    base_mp_per_level: int = 4
    constitution_hp_bonus: float = 1.0
    intelligence_mp_bonus: float = 1.0
    wisdom_mp_bonus: float = 1.0

    def experience_required(self, level: int) -> int:
        """Experience needed to reach ``level``; level 1 needs none."""
        if level <= 1:
            return 0
        return round(self.base_experience_required * self.experience_scaling ** (level - 1))

    def attribute_growth_multiplier(self, character_class: CharacterClass) -> float:
        return self.attribute_growth.get(character_class, 1.0)


@dataclass(frozen=True, slots=True)
class EconomyConfig:
    starting_gold: int = 0
    starting_silver: int = 50
    starting_copper: int = 0
    category_price_multipliers: Mapping[str, float] = field(default_factory=_default_category_prices)
    shop_buy_price_multiplier: float = 1.0
    shop_sell_price_multiplier: float = 0.5
    rarity_price_multiplier: float = 1.0
    base_loot_chance: float = 0.3
    luck_loot_bonus: float = 0.05
    base_currency_drop: Currency = field(default_factory=lambda: Currency(50))

    def starting_currency(self) -> Currency:
        return Currency.of(self.starting_gold, self.starting_silver, self.starting_copper)

    def item_price(
        self,
        base_price: Currency,
        rarity_multiplier: float = 1.0,
        category: str | None = None,
    ) -> Currency:
        multiplier = rarity_multiplier * self.rarity_price_multiplier
        if category is not None:
            multiplier *= self.category_price_multipliers.get(category, 1.0)
        return base_price.scaled(multiplier)

    def buy_price(self, base_price: Currency, difficulty: DifficultySettings) -> Currency:
        return base_price.scaled(self.shop_buy_price_multiplier * difficulty.shop_price_multiplier)

    def sell_price(self, base_price: Currency, difficulty: DifficultySettings) -> Currency:
        return base_price.scaled(self.shop_sell_price_multiplier * difficulty.shop_price_multiplier)

    def luck_modifier(self, attributes: AttributeSet) -> float:
        """Loot luck from charisma; never drops below zero."""
        return max(0.0, 1.0 + attributes.charisma_modifier * self.luck_loot_bonus)


@dataclass(frozen=True, slots=True)
class MagicConfig:
    base_mana_regeneration_rate: float = 1.0
    mana_regeneration_multiplier: float = 1.0
    intelligence_mana_bonus: float = 0.5
    wisdom_mana_bonus: float = 0.5
    school_power_multipliers: Mapping[str, float] = field(default_factory=_default_school_power)
    base_mana_scaling: float = 1.0
    spell_level_cost_multiplier: float = 0.25
    intelligence_cost_reduction: float = 0.01
    spell_critical_chance: float = 0.05
    spell_critical_multiplier: float = 1.5
    base_elemental_resistance: float = 0.0
    resistance_per_level: float = 0.01
    max_elemental_resistance: float = 0.75

    def spell_power_multiplier(self, school: SpellSchool) -> float:
        return self.school_power_multipliers.get(school, 1.0)

    def calculate_mana_cost(self, base_cost: int, spell_level: int, intelligence: int) -> int:
        """Level-scaled cost reduced by the raw intelligence score; never below 1."""
        cost = base_cost * (1.0 + (spell_level - 1) * self.spell_level_cost_multiplier)
        cost *= 1.0 - intelligence * self.intelligence_cost_reduction
        cost *= self.base_mana_scaling
        return max(1, round(cost))

    def mana_regeneration(self, attributes: AttributeSet) -> int:
        rate = (
            self.base_mana_regeneration_rate
            + attributes.intelligence_modifier * self.intelligence_mana_bonus
            + attributes.wisdom_modifier * self.wisdom_mana_bonus
        )
        return max(0, round(rate * self.mana_regeneration_multiplier))

    def elemental_resistance_at_level(self, level: int) -> float:
        resistance = self.base_elemental_resistance + self.resistance_per_level * (max(1, level) - 1)
        return clamp01(min(self.max_elemental_resistance, resistance))


@dataclass(frozen=True, slots=True)
class PoisonConfig:
    damage: Mapping[str, int] = field(default_factory=_default_poison_damage)
    duration: Mapping[str, int] = field(default_factory=_default_poison_duration)
    poison_application_chance: float = 1.0
    poison_resistance_base: float = 0.0
    constitution_resistance_bonus: float = 0.02
    base_charges_per_application: int = 3
    charges_per_poison_level: int = 1
    enhancement_cost: Currency = field(default_factory=lambda: Currency(50))

    def damage_for(self, poison: PoisonType) -> int:
        return self.damage.get(poison, 0)

    def duration_for(self, poison: PoisonType) -> int:
        return self.duration.get(poison, 0)

    def charges_for(self, poison_level: int = 1) -> int:
        return self.base_charges_per_application + self.charges_per_poison_level * (max(1, poison_level) - 1)

    def resistance_chance(self, attributes: AttributeSet) -> float:
        return clamp01(self.poison_resistance_base + attributes.constitution_modifier * self.constitution_resistance_bonus)


@dataclass(frozen=True, slots=True)
class DifficultySettings:
    player_damage_multiplier: float = 1.0
    player_health_multiplier: float = 1.0
    player_mana_multiplier: float = 1.0
    player_experience_multiplier: float = 1.0
    enemy_damage_multiplier: float = 1.0
    enemy_health_multiplier: float = 1.0
    enemy_accuracy_multiplier: float = 1.0
    enemy_loot_multiplier: float = 1.0
    currency_drop_multiplier: float = 1.0
    shop_price_multiplier: float = 1.0
    repair_cost_multiplier: float = 1.0
    permadeath_enabled: bool = False
    auto_save_enabled: bool = True
    poison_damage_multiplier: float = 1.0
    magic_damage_multiplier: float = 1.0

    def apply_player_scaling(self, base_value: float, kind: ScalingKind) -> float:
        multipliers = {
            "damage": self.player_damage_multiplier,
            "health": self.player_health_multiplier,
            "mana": self.player_mana_multiplier,
            "experience": self.player_experience_multiplier,
        }
        return base_value * multipliers.get(kind, 1.0)

    def apply_enemy_scaling(self, base_value: float, kind: ScalingKind) -> float:
        multipliers = {
            "damage": self.enemy_damage_multiplier,
            "health": self.enemy_health_multiplier,
            "accuracy": self.enemy_accuracy_multiplier,
            "loot": self.enemy_loot_multiplier,
            "currency": self.currency_drop_multiplier,
        }
        return base_value * multipliers.get(kind, 1.0)


EASY_DIFFICULTY = DifficultySettings(
    player_damage_multiplier=1.25,
    player_health_multiplier=1.25,
    player_mana_multiplier=1.2,
    player_experience_multiplier=1.25,
    enemy_damage_multiplier=0.8,
    enemy_health_multiplier=0.8,
    enemy_accuracy_multiplier=0.9,
    enemy_loot_multiplier=1.25,
    currency_drop_multiplier=1.25,
    shop_price_multiplier=0.9,
    repair_cost_multiplier=0.8,
    magic_damage_multiplier=1.1,
)

NORMAL_DIFFICULTY = DifficultySettings()

HARD_DIFFICULTY = DifficultySettings(
    player_damage_multiplier=0.85,
    player_health_multiplier=0.85,
    player_mana_multiplier=0.9,
    player_experience_multiplier=0.9,
    enemy_damage_multiplier=1.25,
    enemy_health_multiplier=1.3,
    enemy_accuracy_multiplier=1.1,
    enemy_loot_multiplier=0.8,
    currency_drop_multiplier=0.8,
    shop_price_multiplier=1.15,
    repair_cost_multiplier=1.25,
    permadeath_enabled=True,
    auto_save_enabled=False,
    poison_damage_multiplier=1.2,
    magic_damage_multiplier=0.9,
)


@dataclass(frozen=True, slots=True)
class BalanceConfig:
    """The full balance table. Selecting a difficulty never mutates it."""

    version: str = "1.0.0"
    last_modified: str = ""
    description: str = "Land of Mist RPG Balance Configuration"
    combat: CombatConfig = field(default_factory=CombatConfig)
    progression: ProgressionConfig = field(default_factory=ProgressionConfig)
    economy: EconomyConfig = field(default_factory=EconomyConfig)
    magic: MagicConfig = field(default_factory=MagicConfig)
    poison: PoisonConfig = field(default_factory=PoisonConfig)
    easy: DifficultySettings = EASY_DIFFICULTY
    normal: DifficultySettings = NORMAL_DIFFICULTY
    hard: DifficultySettings = HARD_DIFFICULTY

    def difficulty(self, level: DifficultyLevel) -> DifficultySettings:
        profiles = {"easy": self.easy, "normal": self.normal, "hard": self.hard}
        return profiles.get(level, self.normal)
