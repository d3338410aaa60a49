"""Static balance configuration validation utilities.

Validation only reports: the configuration is never mutated or clamped here.
A configuration with any ERROR issue should be rejected by the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from lom.domain.balance import (
    BalanceConfig,
    CombatConfig,
    DifficultySettings,
    EconomyConfig,
    MagicConfig,
    PoisonConfig,
    ProgressionConfig,
)

logger = logging.getLogger(__name__)

Severity = str

# (two-handed, one-handed) weapon types compared for the damage multiplier rule
_TWO_HANDED_COUNTERPARTS = (("great_sword", "sword"), ("great_axe", "axe"))

_DIFFICULTY_POSITIVE_FIELDS = (
    "player_damage_multiplier",
    "player_health_multiplier",
    "player_mana_multiplier",
    "player_experience_multiplier",
    "enemy_damage_multiplier",
    "enemy_health_multiplier",
    "enemy_accuracy_multiplier",
    "currency_drop_multiplier",
    "shop_price_multiplier",
    "repair_cost_multiplier",
    "poison_damage_multiplier",
    "magic_damage_multiplier",
)


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def validate_balance_config(config: BalanceConfig) -> list[Issue]:
    issues: list[Issue] = []
    _validate_combat(config.combat, issues)
    _validate_progression(config.progression, issues)
    _validate_economy(config.economy, issues)
    _validate_magic(config.magic, issues)
    _validate_poison(config.poison, issues)
    for level in ("easy", "normal", "hard"):
        _validate_difficulty(level, config.difficulty(level), issues)
    return issues


def is_valid_config(config: BalanceConfig) -> bool:
    """Log every issue and return True when none of them is an ERROR."""
    issues = validate_balance_config(config)
    for issue in issues:
        if issue.severity == "ERROR":
            logger.error(format_issue(issue))
        else:
            logger.warning(format_issue(issue))
    return not any(issue.severity == "ERROR" for issue in issues)


def _validate_combat(combat: CombatConfig, issues: list[Issue]) -> None:
    section = "combat"
    _require_positive(section, "base_damage_multiplier", combat.base_damage_multiplier, issues)
    _require_probability(section, "base_critical_chance", combat.base_critical_chance, issues)
    _require_probability(section, "base_dodge_chance", combat.base_dodge_chance, issues)
    _require_probability(section, "base_block_chance", combat.base_block_chance, issues)
    _require_probability(section, "block_damage_reduction", combat.block_damage_reduction, issues)
    _require_probability(section, "armor_damage_reduction", combat.armor_damage_reduction, issues)
    if not 0.0 < combat.max_armor_reduction <= 1.0:
        issues.append(_out_of_range(section, "max_armor_reduction", combat.max_armor_reduction, "(0, 1]"))
    _require_positive(section, "base_status_effect_duration", combat.base_status_effect_duration, issues)
    _require_positive(section, "base_initiative", combat.base_initiative, issues)
    _require_non_negative(section, "dexterity_initiative_bonus", combat.dexterity_initiative_bonus, issues)
    _require_non_negative(section, "armor_initiative_penalty", combat.armor_initiative_penalty, issues)
    _require_positive_mapping(section, "weapon_damage_multipliers", combat.weapon_damage_multipliers, issues)
    _require_positive_mapping(section, "armor_effectiveness", combat.armor_effectiveness, issues)
    _warn_weak_critical(section, "critical_damage_multiplier", combat.critical_damage_multiplier, issues)

    for two_handed, one_handed in _TWO_HANDED_COUNTERPARTS:
        heavy = combat.weapon_damage_multiplier(two_handed)
        light = combat.weapon_damage_multiplier(one_handed)
        if heavy < light:
            issues.append(
                Issue(
                    severity="WARNING",
                    code="TWO_HANDED_WEAKER",
                    message="Two-handed weapon multiplier is below its one-handed counterpart.",
                    context={
                        "section": section,
                        "two_handed": f"{two_handed}={heavy:g}",
                        "one_handed": f"{one_handed}={light:g}",
                    },
                )
            )


def _validate_progression(progression: ProgressionConfig, issues: list[Issue]) -> None:
    section = "progression"
    _require_positive(section, "base_experience_required", progression.base_experience_required, issues)
    if progression.experience_scaling <= 1.0:
        issues.append(_out_of_range(section, "experience_scaling", progression.experience_scaling, "> 1"))
    if progression.max_level <= 1:
        issues.append(_out_of_range(section, "max_level", progression.max_level, "> 1"))
    _require_positive(section, "attribute_points_per_level", progression.attribute_points_per_level, issues)
    _require_positive(section, "base_hp_per_level", progression.base_hp_per_level, issues)
    _require_positive(section, "base_mp_per_level", progression.base_mp_per_level, issues)
    _require_non_negative(section, "constitution_hp_bonus", progression.constitution_hp_bonus, issues)
    _require_non_negative(section, "intelligence_mp_bonus", progression.intelligence_mp_bonus, issues)
    _require_non_negative(section, "wisdom_mp_bonus", progression.wisdom_mp_bonus, issues)
    _require_positive_mapping(section, "attribute_growth", progression.attribute_growth, issues)


def _validate_economy(economy: EconomyConfig, issues: list[Issue]) -> None:
    section = "economy"
    _require_non_negative(section, "starting_gold", economy.starting_gold, issues)
    _require_non_negative(section, "starting_silver", economy.starting_silver, issues)
    _require_non_negative(section, "starting_copper", economy.starting_copper, issues)
    _require_positive(section, "shop_buy_price_multiplier", economy.shop_buy_price_multiplier, issues)
    _require_positive(section, "shop_sell_price_multiplier", economy.shop_sell_price_multiplier, issues)
    _require_positive(section, "rarity_price_multiplier", economy.rarity_price_multiplier, issues)
    _require_probability(section, "base_loot_chance", economy.base_loot_chance, issues)
    _require_non_negative(section, "luck_loot_bonus", economy.luck_loot_bonus, issues)
    _require_non_negative(section, "base_currency_drop", economy.base_currency_drop.total_copper, issues)
    _require_positive_mapping(section, "category_price_multipliers", economy.category_price_multipliers, issues)
    if economy.shop_sell_price_multiplier > economy.shop_buy_price_multiplier:
        issues.append(
            Issue(
                severity="ERROR",
                code="SELL_EXCEEDS_BUY",
                message="Shops would buy items back for more than they sell them.",
                context={
                    "section": section,
                    "shop_sell_price_multiplier": f"{economy.shop_sell_price_multiplier:g}",
                    "shop_buy_price_multiplier": f"{economy.shop_buy_price_multiplier:g}",
                },
            )
        )


def _validate_magic(magic: MagicConfig, issues: list[Issue]) -> None:
    section = "magic"
    _require_non_negative(section, "base_mana_regeneration_rate", magic.base_mana_regeneration_rate, issues)
    _require_positive(section, "mana_regeneration_multiplier", magic.mana_regeneration_multiplier, issues)
    _require_non_negative(section, "intelligence_mana_bonus", magic.intelligence_mana_bonus, issues)
    _require_non_negative(section, "wisdom_mana_bonus", magic.wisdom_mana_bonus, issues)
    _require_positive(section, "base_mana_scaling", magic.base_mana_scaling, issues)
    _require_positive(section, "spell_level_cost_multiplier", magic.spell_level_cost_multiplier, issues)
    _require_probability(section, "intelligence_cost_reduction", magic.intelligence_cost_reduction, issues)
    _require_probability(section, "spell_critical_chance", magic.spell_critical_chance, issues)
    _require_probability(section, "base_elemental_resistance", magic.base_elemental_resistance, issues)
    _require_probability(section, "max_elemental_resistance", magic.max_elemental_resistance, issues)
    _require_non_negative(section, "resistance_per_level", magic.resistance_per_level, issues)
    _require_positive_mapping(section, "school_power_multipliers", magic.school_power_multipliers, issues)
    _warn_weak_critical(section, "spell_critical_multiplier", magic.spell_critical_multiplier, issues)
    if magic.base_elemental_resistance > magic.max_elemental_resistance:
        issues.append(
            Issue(
                severity="ERROR",
                code="RESISTANCE_BASE_EXCEEDS_MAX",
                message="Base elemental resistance is above the resistance cap.",
                context={
                    "section": section,
                    "base_elemental_resistance": f"{magic.base_elemental_resistance:g}",
                    "max_elemental_resistance": f"{magic.max_elemental_resistance:g}",
                },
            )
        )


def _validate_poison(poison: PoisonConfig, issues: list[Issue]) -> None:
    section = "poison"
    _require_positive_mapping(section, "damage", poison.damage, issues)
    _require_positive_mapping(section, "duration", poison.duration, issues)
    _require_probability(section, "poison_application_chance", poison.poison_application_chance, issues)
    _require_probability(section, "poison_resistance_base", poison.poison_resistance_base, issues)
    _require_non_negative(section, "constitution_resistance_bonus", poison.constitution_resistance_bonus, issues)
    _require_positive(section, "base_charges_per_application", poison.base_charges_per_application, issues)
    _require_non_negative(section, "charges_per_poison_level", poison.charges_per_poison_level, issues)
    _require_non_negative(section, "enhancement_cost", poison.enhancement_cost.total_copper, issues)


def _validate_difficulty(level: str, settings: DifficultySettings, issues: list[Issue]) -> None:
    section = f"difficulty.{level}"
    for field_name in _DIFFICULTY_POSITIVE_FIELDS:
        _require_positive(section, field_name, getattr(settings, field_name), issues)
    _require_non_negative(section, "enemy_loot_multiplier", settings.enemy_loot_multiplier, issues)


def _require_positive(section: str, field_name: str, value: float, issues: list[Issue]) -> None:
    if value <= 0:
        issues.append(
            Issue(
                severity="ERROR",
                code="NON_POSITIVE_VALUE",
                message="Value must be greater than zero.",
                context={"section": section, "field": field_name, "value": f"{value:g}"},
            )
        )


def _require_non_negative(section: str, field_name: str, value: float, issues: list[Issue]) -> None:
    if value < 0:
        issues.append(
            Issue(
                severity="ERROR",
                code="NEGATIVE_VALUE",
                message="Value cannot be negative.",
                context={"section": section, "field": field_name, "value": f"{value:g}"},
            )
        )


def _require_probability(section: str, field_name: str, value: float, issues: list[Issue]) -> None:
    if not 0.0 <= value <= 1.0:
        issues.append(_out_of_range(section, field_name, value, "[0, 1]"))


def _require_positive_mapping(
    section: str,
    field_name: str,
    values: Mapping[str, float],
    issues: list[Issue],
) -> None:
    for key, value in values.items():
        _require_positive(section, f"{field_name}.{key}", value, issues)


def _warn_weak_critical(section: str, field_name: str, value: float, issues: list[Issue]) -> None:
    if value <= 1.0:
        issues.append(
            Issue(
                severity="WARNING",
                code="WEAK_CRITICAL_MULTIPLIER",
                message="Critical multiplier should be greater than 1.0.",
                context={"section": section, "field": field_name, "value": f"{value:g}"},
            )
        )


def _out_of_range(section: str, field_name: str, value: float, expected: str) -> Issue:
    return Issue(
        severity="ERROR",
        code="OUT_OF_RANGE",
        message=f"Value is outside the allowed range {expected}.",
        context={"section": section, "field": field_name, "value": f"{value:g}"},
    )
