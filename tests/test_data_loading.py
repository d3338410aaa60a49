import json
from pathlib import Path

import pytest

from lom.data.errors import DataLoadError, DataValidationError
from lom.data.repositories import (
    ArmorRepository,
    BalanceConfigRepository,
    CharactersRepository,
    EnemiesRepository,
    ShieldsRepository,
    SpellsRepository,
    WeaponsRepository,
)
from lom.domain.currency import Currency


def test_weapons_repo_loads_with_defaults(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "weapons.json",
        {
            "training_sword": {"name": "Training Sword", "weapon_type": "sword", "base_damage": 3},
            "war_bow": {
                "name": "War Bow",
                "weapon_type": "bow",
                "base_damage": 9,
                "requirements": {"dexterity": 13, "allowed_classes": ["ranger"]},
                "value": {"silver": 2, "copper": 5},
            },
        },
    )
    repo = WeaponsRepository(base_path=definitions_dir)

    sword = repo.get("training_sword")
    bow = repo.get("war_bow")
    assert sword.handedness == "one_handed"
    assert sword.critical_chance == 0.05
    assert sword.can_be_enhanced is True
    assert bow.handedness == "two_handed"
    assert bow.requirements.minimum_dexterity == 13
    assert bow.requirements.allowed_classes == ("ranger",)
    assert bow.value == Currency(205)
    assert [weapon.id for weapon in repo.all()] == ["training_sword", "war_bow"]


def test_weapons_repo_get_missing_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "weapons.json",
        {"training_sword": {"name": "Training Sword", "weapon_type": "sword", "base_damage": 3}},
    )
    repo = WeaponsRepository(base_path=definitions_dir)
    with pytest.raises(KeyError):
        repo.get("missing_weapon")


def test_validation_rejects_unknown_field(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "armor.json",
        {
            "bad_armor": {
                "name": "Bad",
                "armor_type": "light",
                "defense_bonus": 1,
                "extra": "nope",
            }
        },
    )
    repo = ArmorRepository(base_path=definitions_dir)
    with pytest.raises(DataValidationError, match="unknown fields"):
        repo.all()


def test_validation_rejects_unknown_choice(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "shields.json",
        {"door": {"name": "Door", "shield_type": "door", "defense_bonus": 2}},
    )
    repo = ShieldsRepository(base_path=definitions_dir)
    with pytest.raises(DataValidationError, match="shield_type"):
        repo.all()


def test_bool_is_not_accepted_as_integer(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "weapons.json",
        {"odd": {"name": "Odd", "weapon_type": "sword", "base_damage": True}},
    )
    with pytest.raises(DataValidationError, match="base_damage"):
        WeaponsRepository(base_path=definitions_dir).all()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    (definitions_dir / "spells.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        SpellsRepository(base_path=definitions_dir).all()


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    with pytest.raises(DataLoadError):
        EnemiesRepository(base_path=definitions_dir).all()


def test_top_level_must_be_object(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "weapons.json", [])
    with pytest.raises(DataValidationError):
        WeaponsRepository(base_path=definitions_dir).all()


def test_spell_level_out_of_range(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "spells.json",
        {
            "meteor": {
                "name": "Meteor",
                "school": "fire",
                "mana_cost": 50,
                "target_type": "all_enemies",
                "level": 6,
                "effects": [{"kind": "damage", "element": "fire", "base_value": 40}],
            }
        },
    )
    with pytest.raises(DataValidationError, match="level"):
        SpellsRepository(base_path=definitions_dir).all()


def test_enemy_rejects_duplicate_resistances(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "enemies.json",
        {
            "slime": {
                "name": "Slime",
                "base_hp": 10,
                "resistances": [
                    {"element": "fire", "percentage": 0.2},
                    {"element": "fire", "percentage": 0.4},
                ],
            }
        },
    )
    with pytest.raises(DataValidationError, match="more than once"):
        EnemiesRepository(base_path=definitions_dir).all()


def test_enemy_loot_quantity_range_is_checked(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "enemies.json",
        {
            "slime": {
                "name": "Slime",
                "base_hp": 10,
                "loot_table": [{"item_id": "goo", "drop_chance": 0.5, "min_quantity": 3, "max_quantity": 1}],
            }
        },
    )
    with pytest.raises(DataValidationError):
        EnemiesRepository(base_path=definitions_dir).all()


def test_boss_phases_are_sorted_by_threshold(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "enemies.json",
        {
            "tyrant": {
                "name": "Tyrant",
                "base_hp": 200,
                "is_boss": True,
                "boss_phases": [
                    {"name": "Last Stand", "hp_threshold": 0.25},
                    {"name": "Opening", "hp_threshold": 1.0},
                    {"name": "Fury", "hp_threshold": 0.5, "damage_multiplier": 1.3},
                ],
            }
        },
    )
    tyrant = EnemiesRepository(base_path=definitions_dir).get("tyrant")
    assert [phase.name for phase in tyrant.boss_phases] == ["Opening", "Fury", "Last Stand"]
    assert tyrant.boss_phases[1].damage_multiplier == 1.3


def test_character_repo_requires_core_fields(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "characters.json",
        {"nobody": {"name": "Nobody", "character_class": "warrior", "base_hp": 10, "base_mp": 0}},
    )
    with pytest.raises(DataValidationError, match="missing fields"):
        CharactersRepository(base_path=definitions_dir).all()


def test_balance_repo_fills_missing_values_from_defaults(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "balance.json",
        {
            "version": "2.0.0",
            "combat": {"base_critical_chance": 0.1, "weapon_damage_multipliers": {"knife": 0.7}},
            "difficulty": {"hard": {"enemy_health_multiplier": 1.5}},
        },
    )
    config = BalanceConfigRepository(definitions_dir).load()

    assert config.version == "2.0.0"
    assert config.combat.base_critical_chance == 0.1
    assert config.combat.critical_damage_multiplier == 1.5
    assert config.combat.weapon_damage_multiplier("knife") == 0.7
    assert config.combat.weapon_damage_multiplier("great_sword") == 1.4
    assert config.hard.enemy_health_multiplier == 1.5
    assert config.hard.permadeath_enabled is True
    assert config.easy.player_damage_multiplier == 1.25


def test_balance_repo_rejects_unknown_keys(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "balance.json", {"combat": {"base_crit_chance": 0.1}})
    with pytest.raises(DataValidationError, match="unknown fields"):
        BalanceConfigRepository(definitions_dir).load()


def test_balance_repo_rejects_unknown_mapping_key(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "balance.json", {"magic": {"school_power_multipliers": {"air": 1.0}}})
    with pytest.raises(DataValidationError):
        BalanceConfigRepository(definitions_dir).load()


def test_balance_repo_rejects_wrong_types(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "balance.json", {"progression": {"max_level": 20.5}})
    with pytest.raises(DataValidationError, match="max_level"):
        BalanceConfigRepository(definitions_dir).load()


def test_balance_repo_mappings_are_read_only(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "balance.json", {"combat": {"weapon_damage_multipliers": {"sword": 1.1}}})
    config = BalanceConfigRepository(definitions_dir).load()

    with pytest.raises(TypeError):
        config.combat.weapon_damage_multipliers["sword"] = 9.0  # type: ignore[index]
    with pytest.raises(TypeError):
        config.poison.damage["weak"] = 50  # type: ignore[index]
    assert config.combat.weapon_damage_multiplier("sword") == 1.1


def test_balance_repo_caches_config(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "balance.json", {})
    repo = BalanceConfigRepository(definitions_dir)
    assert repo.load() is repo.load()


def test_bundled_definitions_load() -> None:
    assert WeaponsRepository().get("iron_sword").base_damage == 10
    assert ArmorRepository().all()
    assert ShieldsRepository().all()
    assert SpellsRepository().get("firebolt").school == "fire"
    warden = EnemiesRepository().get("mist_warden")
    assert [phase.hp_threshold for phase in warden.boss_phases] == [1.0, 0.6, 0.3]
    assert CharactersRepository().get("morwen").spell_ids == ("firebolt", "ember_storm")
    assert BalanceConfigRepository().load().hard.permadeath_enabled is True


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir
