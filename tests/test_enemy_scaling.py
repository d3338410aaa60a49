from __future__ import annotations

import math

import pytest

from lom.core.rng import RNG
from lom.domain.attributes import AttributeSet
from lom.domain.currency import Currency
from lom.domain.defs import BossPhaseDef, EnemyDef, LootDropDef, StatusImmunityDef
from lom.domain.enemy_scaling import (
    enemy_resistance,
    generate_loot,
    get_current_phase,
    get_scaled_stats,
    is_immune_to_status,
)
from lom.domain.resistances import ElementalResistance
from tests.helpers.combat_fixtures import ScriptedRNG


def _enemy(**kwargs) -> EnemyDef:
    params = dict(id="wolf", name="Wolf", base_hp=50)
    params.update(kwargs)
    return EnemyDef(**params)


def test_scaled_hp_at_party_level_five() -> None:
    stats = get_scaled_stats(_enemy(armor_class=1), party_level=5)
    assert stats.hp == 80
    assert stats.armor_class == 3


def test_scaling_combines_level_difficulty_and_enemy_multiplier() -> None:
    enemy = _enemy(
        base_mp=10,
        attributes=AttributeSet(strength=12),
        armor_class=2,
        initiative=9.0,
        experience_reward=25,
        currency_drop=Currency(40),
        difficulty_multiplier=1.25,
    )

    stats = get_scaled_stats(enemy, party_level=3, difficulty_scale=1.2)

    total = 1.3 * 1.25 * 1.2
    assert stats.hp == round(50 * total)
    assert stats.mp == round(10 * total)
    assert stats.experience_reward == round(25 * total)
    assert stats.currency_drop == Currency(round(40 * total))
    assert stats.attributes.strength == round(12 * total)
    assert stats.armor_class == 3
    assert stats.initiative == pytest.approx(9.0 * math.sqrt(total))


def test_non_scaling_enemy_ignores_party_level() -> None:
    stats = get_scaled_stats(_enemy(scales_with_party_level=False), party_level=10)
    assert stats.hp == 50
    assert stats.experience_reward == 0
    assert stats.armor_class == round(9 * 0.5)


def test_generate_loot_rolls_each_entry() -> None:
    enemy = _enemy(
        loot_table=(
            LootDropDef("pelt", 0.6),
            LootDropDef("fang", 0.25, min_quantity=1, max_quantity=3),
            LootDropDef("bone", 0.5),
        )
    )
    rng = ScriptedRNG(draws=[0.5, 0.2, 0.9], ints=[1, 3])

    loot = generate_loot(enemy, rng)

    assert [(drop.item_id, drop.quantity) for drop in loot] == [("pelt", 1), ("fang", 3)]


def test_generate_loot_luck_modifier_widens_chance() -> None:
    enemy = _enemy(loot_table=(LootDropDef("pelt", 0.4),))
    assert generate_loot(enemy, ScriptedRNG(draws=[0.5])) == []
    assert len(generate_loot(enemy, ScriptedRNG(draws=[0.5]), luck_modifier=1.5)) == 1


def test_generate_loot_quantities_stay_in_range() -> None:
    enemy = _enemy(loot_table=(LootDropDef("fang", 1.0, min_quantity=2, max_quantity=4),))
    rng = RNG(3)
    for _ in range(20):
        (drop,) = generate_loot(enemy, rng)
        assert 2 <= drop.quantity <= 4


def test_boss_phase_selects_highest_qualifying_tier() -> None:
    boss = _enemy(
        is_boss=True,
        boss_phases=(
            BossPhaseDef("Vigilant", 1.0),
            BossPhaseDef("Wrathful", 0.6),
            BossPhaseDef("Unbound", 0.3),
        ),
    )

    assert get_current_phase(boss, 1.0).name == "Vigilant"
    assert get_current_phase(boss, 0.75).name == "Wrathful"
    assert get_current_phase(boss, 0.6).name == "Wrathful"
    assert get_current_phase(boss, 0.1).name == "Unbound"


def test_boss_phase_defaults_to_last_phase() -> None:
    boss = _enemy(is_boss=True, boss_phases=(BossPhaseDef("Enraged", 0.5), BossPhaseDef("Desperate", 0.2)))
    assert get_current_phase(boss, 0.1).name == "Desperate"


def test_non_boss_has_no_phase() -> None:
    assert get_current_phase(_enemy(), 0.5) is None
    assert get_current_phase(_enemy(boss_phases=(BossPhaseDef("Only", 0.5),)), 0.5) is None
    assert get_current_phase(_enemy(is_boss=True), 0.5) is None


def test_resistances_and_immunities() -> None:
    enemy = _enemy(
        resistances=(ElementalResistance("poison", 0.5),),
        immunities=(StatusImmunityDef("fear"),),
    )

    assert enemy_resistance(enemy, "poison") == 0.5
    assert enemy_resistance(enemy, "fire") == 0.0
    assert is_immune_to_status(enemy, "fear") is True
    assert is_immune_to_status(enemy, "sleep") is False


def test_resistance_percentage_is_clamped() -> None:
    assert ElementalResistance("fire", 1.5).percentage == 1.0
    assert ElementalResistance("fire", -0.2).percentage == 0.0
