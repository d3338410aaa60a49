from __future__ import annotations

import dataclasses

from lom.data.repositories import BalanceConfigRepository
from lom.domain.balance import BalanceConfig, CombatConfig, EconomyConfig, MagicConfig
from lom.services.config_validator import Issue, format_issue, is_valid_config, validate_balance_config


def _codes(config: BalanceConfig, severity: str | None = None) -> list[str]:
    return [
        issue.code
        for issue in validate_balance_config(config)
        if severity is None or issue.severity == severity
    ]


def test_default_config_has_no_issues() -> None:
    assert validate_balance_config(BalanceConfig()) == []


def test_bundled_config_has_no_errors() -> None:
    config = BalanceConfigRepository().load()
    assert _codes(config, "ERROR") == []
    assert is_valid_config(config) is True


def test_negative_multiplier_is_flagged() -> None:
    config = BalanceConfig(combat=CombatConfig(base_damage_multiplier=-1.0))
    issues = validate_balance_config(config)
    assert len(issues) == 1
    assert issues[0].code == "NON_POSITIVE_VALUE"
    assert issues[0].context["section"] == "combat"
    assert issues[0].context["field"] == "base_damage_multiplier"


def test_probability_out_of_range() -> None:
    config = BalanceConfig(combat=CombatConfig(base_critical_chance=1.5))
    assert _codes(config) == ["OUT_OF_RANGE"]


def test_mapping_entries_are_checked() -> None:
    multipliers = dict(CombatConfig().weapon_damage_multipliers, knife=0.0)
    config = BalanceConfig(combat=CombatConfig(weapon_damage_multipliers=multipliers))
    issues = validate_balance_config(config)
    assert [issue.context["field"] for issue in issues] == ["weapon_damage_multipliers.knife"]


def test_sell_above_buy_is_error() -> None:
    config = BalanceConfig(economy=EconomyConfig(shop_buy_price_multiplier=1.0, shop_sell_price_multiplier=1.2))
    assert _codes(config, "ERROR") == ["SELL_EXCEEDS_BUY"]


def test_base_resistance_above_cap_is_error() -> None:
    config = BalanceConfig(magic=MagicConfig(base_elemental_resistance=0.9, max_elemental_resistance=0.5))
    assert _codes(config, "ERROR") == ["RESISTANCE_BASE_EXCEEDS_MAX"]


def test_weak_two_handed_and_critical_are_warnings() -> None:
    multipliers = dict(CombatConfig().weapon_damage_multipliers, great_sword=0.9)
    config = BalanceConfig(
        combat=CombatConfig(weapon_damage_multipliers=multipliers, critical_damage_multiplier=1.0)
    )
    assert _codes(config, "WARNING") == ["WEAK_CRITICAL_MULTIPLIER", "TWO_HANDED_WEAKER"]
    assert _codes(config, "ERROR") == []
    assert is_valid_config(config) is True


def test_difficulty_profiles_are_validated() -> None:
    config = BalanceConfig(hard=dataclasses.replace(BalanceConfig().hard, enemy_health_multiplier=0.0))
    issues = validate_balance_config(config)
    assert [(issue.code, issue.context["section"]) for issue in issues] == [
        ("NON_POSITIVE_VALUE", "difficulty.hard")
    ]
    assert is_valid_config(config) is False


def test_format_issue() -> None:
    issue = Issue(
        severity="ERROR",
        code="NEGATIVE_VALUE",
        message="Value cannot be negative.",
        context={"section": "economy", "field": "starting_gold"},
    )
    assert format_issue(issue) == (
        "[ERROR] NEGATIVE_VALUE: Value cannot be negative. (section=economy field=starting_gold)"
    )
