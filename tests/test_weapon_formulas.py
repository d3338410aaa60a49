from __future__ import annotations

from lom.domain.attributes import AttributeRequirements, AttributeSet
from lom.domain.balance import PoisonConfig
from lom.domain.defs import WeaponDef
from lom.domain.enhancement import (
    WeaponEnhancementState,
    apply_poison,
    consume_poison_charge,
    get_poison_damage,
    remove_poison,
)
from lom.domain.weapon_formulas import (
    calculate_damage,
    can_class_use_weapon,
    can_equip_weapon,
    default_handedness,
    get_speed_modifier,
    is_ranged_weapon,
)


def _weapon(weapon_type: str = "sword", base_damage: int = 10, **kwargs) -> WeaponDef:
    return WeaponDef(id=f"test_{weapon_type}", name="Test", weapon_type=weapon_type, base_damage=base_damage, **kwargs)


def test_sword_uses_strength_modifier() -> None:
    assert calculate_damage(_weapon("sword", 10), AttributeSet(strength=16)) == 13


def test_ranged_weapons_use_dexterity_and_staff_uses_intelligence() -> None:
    attributes = AttributeSet(strength=20, dexterity=14, intelligence=18)
    assert calculate_damage(_weapon("bow", 8), attributes) == 10
    assert calculate_damage(_weapon("crossbow", 8), attributes) == 10
    assert calculate_damage(_weapon("staff", 5), attributes) == 9


def test_damage_never_drops_below_one() -> None:
    weak = AttributeSet(strength=0, dexterity=0, intelligence=0)
    for weapon_type in ("knife", "bow", "staff"):
        assert calculate_damage(_weapon(weapon_type, 1), weak) == 1


def test_weapon_handling_tables() -> None:
    assert is_ranged_weapon(_weapon("crossbow")) is True
    assert is_ranged_weapon(_weapon("spear")) is False
    assert get_speed_modifier(_weapon("knife")) == 1.2
    assert get_speed_modifier(_weapon("great_axe")) == 0.7
    assert default_handedness("great_sword") == "two_handed"
    assert default_handedness("mace") == "one_handed"


def test_class_weapon_restrictions() -> None:
    assert can_class_use_weapon("mage", "staff") is True
    assert can_class_use_weapon("mage", "great_axe") is False
    assert can_class_use_weapon("ranger", "bow") is True


def test_can_equip_weapon_checks_requirements_and_class() -> None:
    sword = _weapon("great_sword", 14, requirements=AttributeRequirements(minimum_strength=14))
    assert can_equip_weapon(sword, AttributeSet(strength=14), "warrior") is True
    assert can_equip_weapon(sword, AttributeSet(strength=13), "warrior") is False
    assert can_equip_weapon(sword, AttributeSet(strength=18), "cleric") is False


def test_poison_charges_are_consumed_exactly() -> None:
    weapon = _weapon()
    state = WeaponEnhancementState()
    charges = 3

    assert apply_poison(weapon, state, "strong", charges) is True
    results = [consume_poison_charge(state) for _ in range(charges)]

    assert results == [True, True, True]
    assert state.poison == "none"
    assert state.charges == 0
    assert consume_poison_charge(state) is False


def test_poison_rejected_on_non_enhanceable_weapon() -> None:
    weapon = _weapon("staff", can_be_enhanced=False)
    state = WeaponEnhancementState()

    assert apply_poison(weapon, state, "weak", 3) is False
    assert state.is_enhanced is False
    assert get_poison_damage(weapon, state) == 0


def test_poison_rejects_empty_coating() -> None:
    state = WeaponEnhancementState(poison="weak", charges=2)

    assert apply_poison(_weapon(), state, "strong", 0) is False
    assert apply_poison(_weapon(), state, "none", 3) is False
    assert (state.poison, state.charges) == ("weak", 2)


def test_poison_without_charges_deals_no_damage() -> None:
    state = WeaponEnhancementState(poison="strong", charges=0)

    assert state.is_enhanced is False
    assert get_poison_damage(_weapon(), state) == 0


def test_poison_damage_scales_with_effectiveness() -> None:
    state = WeaponEnhancementState()
    apply_poison(_weapon(), state, "strong", 2)

    assert get_poison_damage(_weapon(), state) == 5
    assert get_poison_damage(_weapon(poison_effectiveness=1.5), state) == 8
    assert get_poison_damage(_weapon(poison_effectiveness=0.5), state) == 2


def test_poison_damage_reads_configured_table() -> None:
    state = WeaponEnhancementState()
    apply_poison(_weapon(), state, "weak", 2)
    config = PoisonConfig(damage={"weak": 4, "strong": 9, "paralysis": 1, "weakness": 1})

    assert get_poison_damage(_weapon(), state, config) == 4


def test_remove_poison_resets_state() -> None:
    state = WeaponEnhancementState()
    apply_poison(_weapon(), state, "paralysis", 5)
    remove_poison(state)

    assert state.poison == "none"
    assert state.charges == 0
    assert consume_poison_charge(state) is False
