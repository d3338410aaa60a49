from __future__ import annotations

import pytest

from lom.domain.attributes import AttributeSet
from lom.domain.balance import BalanceConfig, CombatConfig, MagicConfig, PoisonConfig, ProgressionConfig
from lom.domain.currency import Currency


def test_experience_required_grows_geometrically() -> None:
    progression = ProgressionConfig()
    assert progression.experience_required(1) == 0
    assert progression.experience_required(2) == 120
    assert progression.experience_required(3) == 144


def test_experience_required_keeps_growing_past_max_level() -> None:
    progression = ProgressionConfig(max_level=5)
    assert progression.experience_required(5) == 207
    assert progression.experience_required(6) == 249


def test_difficulty_lookup_falls_back_to_normal() -> None:
    config = BalanceConfig()
    assert config.difficulty("hard").permadeath_enabled is True
    assert config.difficulty("easy").player_damage_multiplier == 1.25
    assert config.difficulty("nightmare") is config.normal  # type: ignore[arg-type]


def test_difficulty_scaling_by_kind() -> None:
    easy = BalanceConfig().difficulty("easy")
    assert easy.apply_player_scaling(100, "damage") == pytest.approx(125)
    assert easy.apply_enemy_scaling(100, "health") == pytest.approx(80)
    assert easy.apply_enemy_scaling(100, "mana") == 100


def test_shop_prices_follow_difficulty() -> None:
    config = BalanceConfig()
    economy = config.economy
    assert economy.buy_price(Currency(100), config.normal) == Currency(100)
    assert economy.sell_price(Currency(100), config.normal) == Currency(50)
    assert economy.buy_price(Currency(100), config.easy) == Currency(90)
    assert economy.sell_price(Currency(100), config.easy) == Currency(45)


def test_item_price_combines_rarity_and_category() -> None:
    economy = BalanceConfig().economy
    assert economy.item_price(Currency(100), 2.0, "weapon") == Currency(200)
    assert economy.starting_currency() == Currency.of(silver=50)


def test_luck_modifier_from_charisma() -> None:
    economy = BalanceConfig().economy
    assert economy.luck_modifier(AttributeSet(charisma=14)) == pytest.approx(1.1)
    assert economy.luck_modifier(AttributeSet(charisma=0)) == pytest.approx(0.75)


def test_armor_reduction_is_capped() -> None:
    combat = CombatConfig()
    assert combat.armor_reduction(10) == pytest.approx(0.2)
    assert combat.armor_reduction(100) == 0.8
    assert combat.armor_reduction(-5) == 0.0
    assert combat.weapon_damage_multiplier("great_axe") == 1.5


def test_mana_cost_scales_with_level_and_intelligence() -> None:
    magic = MagicConfig()
    assert magic.calculate_mana_cost(10, 1, 10) == 9
    assert magic.calculate_mana_cost(20, 3, 10) == 27
    assert magic.calculate_mana_cost(1, 1, 90) == 1


def test_mana_regeneration_and_resistance_growth() -> None:
    magic = MagicConfig()
    assert magic.mana_regeneration(AttributeSet(intelligence=14, wisdom=14)) == 3
    assert magic.elemental_resistance_at_level(1) == 0.0
    assert magic.elemental_resistance_at_level(11) == pytest.approx(0.1)
    assert magic.elemental_resistance_at_level(200) == 0.75


def test_poison_tables() -> None:
    poison = PoisonConfig()
    assert poison.damage_for("strong") == 5
    assert poison.damage_for("none") == 0
    assert poison.duration_for("paralysis") == 2
    assert poison.charges_for() == 3
    assert poison.charges_for(3) == 5
    assert poison.resistance_chance(AttributeSet(constitution=14)) == pytest.approx(0.04)


def test_default_multiplier_tables_are_read_only() -> None:
    config = BalanceConfig()
    with pytest.raises(TypeError):
        config.magic.school_power_multipliers["fire"] = 3.0  # type: ignore[index]
    with pytest.raises(TypeError):
        config.economy.category_price_multipliers["weapon"] = 0.1  # type: ignore[index]
    assert config.magic.spell_power_multiplier("fire") == 1.0
