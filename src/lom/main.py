"""Entry-point for the balance walkthrough."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from lom.core.rng import RNG
from lom.core.types import DIFFICULTY_LEVELS
from lom.data.errors import DataError
from lom.data.repositories import (
    ArmorRepository,
    BalanceConfigRepository,
    CharactersRepository,
    EnemiesRepository,
    ShieldsRepository,
    SpellsRepository,
    WeaponsRepository,
)
from lom.domain.balance import BalanceConfig, DifficultySettings
from lom.domain.enemy_scaling import get_scaled_stats
from lom.domain.enhancement import apply_poison
from lom.domain.spell_formulas import get_effective_mana_cost, get_spell_power
from lom.services.combat_service import CombatService
from lom.services.config_validator import format_issue, validate_balance_config
from lom.services.errors import FactoryError
from lom.services.factories import create_character_combatant, create_character_loadout, create_enemy_combatant
from lom.services.spell_service import SpellService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Land of Mist balance walkthrough")
    parser.add_argument("--config", type=Path, default=None, help="Path to a balance.json file (default: bundled)")
    parser.add_argument("--difficulty", choices=DIFFICULTY_LEVELS, default="normal", help="Difficulty profile")
    parser.add_argument("--seed", type=int, default=None, help="Seed for critical, block and loot rolls")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Load and validate the balance configuration, then print the walkthrough."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        balance_repo = BalanceConfigRepository(args.config.parent, filename=args.config.name)
    else:
        balance_repo = BalanceConfigRepository()
    try:
        balance = balance_repo.load()
    except DataError as exc:
        logger.error("Unable to load balance configuration: %s", exc)
        return 1

    issues = validate_balance_config(balance)
    for issue in issues:
        print(format_issue(issue))
    if any(issue.severity == "ERROR" for issue in issues):
        logger.error("Balance configuration rejected with %d issue(s).", len(issues))
        return 1

    difficulty = balance.difficulty(args.difficulty)
    rng = RNG(args.seed)
    print(f"=== Land of Mist Balance Walkthrough ({balance.version}) ===")
    _print_difficulty(args.difficulty, difficulty)
    try:
        _print_combat(balance, difficulty, rng)
        _print_magic(balance, difficulty, rng)
        _print_progression(balance, difficulty)
        _print_economy(balance, difficulty)
        _print_enemy_scaling(difficulty)
    except (DataError, FactoryError) as exc:
        logger.error("Unable to build the walkthrough: %s", exc)
        return 1
    _print_difficulty_table(balance)
    return 0


def _print_difficulty(level: str, difficulty: DifficultySettings) -> None:
    print(f"\nCurrent Difficulty: {level}")
    print(f"Player Damage Multiplier: {difficulty.player_damage_multiplier:g}")
    print(f"Enemy Health Multiplier: {difficulty.enemy_health_multiplier:g}")


def _print_combat(balance: BalanceConfig, difficulty: DifficultySettings, rng: RNG) -> None:
    print("\n--- Combat ---")
    characters = CharactersRepository()
    loadout = create_character_loadout(
        "aldric", characters, WeaponsRepository(), ArmorRepository(), ShieldsRepository()
    )
    attacker = create_character_combatant("aldric", characters, difficulty=difficulty)
    defender = create_enemy_combatant("mist_wolf", EnemiesRepository(), difficulty=difficulty)
    if loadout.weapon is None:
        raise FactoryError("Character 'aldric' has no starting weapon.")

    service = CombatService(balance, difficulty, rng)
    apply_poison(loadout.weapon, loadout.enhancement, "weak", balance.poison.charges_for())
    print(f"Weapon: {loadout.weapon.name} (base damage {loadout.weapon.base_damage})")
    print(f"Total Critical Chance: {service.critical_chance(loadout.weapon):.1%}")
    print(f"Initiative: {attacker.name} {service.initiative(attacker, loadout.armor):.1f}")
    result = service.resolve_weapon_attack(attacker, loadout.weapon, loadout.enhancement, defender)
    flags = " (critical)" if result.critical else ""
    print(
        f"{attacker.name} hits {defender.name} for {result.weapon_damage} + {result.poison_damage} poison{flags}; "
        f"{defender.current_hp}/{defender.max_hp} HP left, {loadout.enhancement.charges} charge(s) remain"
    )


def _print_magic(balance: BalanceConfig, difficulty: DifficultySettings, rng: RNG) -> None:
    print("\n--- Magic ---")
    spells = SpellsRepository()
    caster = create_character_combatant("morwen", CharactersRepository(), difficulty=difficulty)
    target = create_enemy_combatant("mist_wolf", EnemiesRepository(), difficulty=difficulty)
    firebolt = spells.get("firebolt")
    print(f"Spell: {firebolt.name}")
    print(f"Base Mana Cost: {firebolt.mana_cost}")
    print(f"Effective Mana Cost: {get_effective_mana_cost(firebolt, caster.attributes)}")
    print(f"Spell Power: {get_spell_power(firebolt, caster.attributes):.0%}")
    result = SpellService(rng, balance, difficulty).cast(firebolt, caster, [target])
    for outcome in result.outcomes:
        flags = " (critical)" if outcome.critical else ""
        print(f"{firebolt.name} deals {outcome.amount} {outcome.kind} to {outcome.target_name}{flags}")
    print(f"Max Elemental Resistance: {balance.magic.max_elemental_resistance:.1%}")


def _print_progression(balance: BalanceConfig, difficulty: DifficultySettings) -> None:
    print("\n--- Progression ---")
    level = 5
    required = balance.progression.experience_required(level)
    adjusted = round(required / difficulty.player_experience_multiplier)
    print(f"Level {level} Experience Required: {required}")
    print(f"Adjusted Experience Required: {adjusted}")
    print(f"Health per Level: {balance.progression.base_hp_per_level}")
    print(f"Mana per Level: {balance.progression.base_mp_per_level}")


def _print_economy(balance: BalanceConfig, difficulty: DifficultySettings) -> None:
    print("\n--- Economy ---")
    weapon = WeaponsRepository().get("iron_sword")
    print(f"Item: {weapon.name}")
    print(f"Base Value: {weapon.value}")
    print(f"Buy Price: {balance.economy.buy_price(weapon.value, difficulty)}")
    print(f"Sell Price: {balance.economy.sell_price(weapon.value, difficulty)}")
    print(f"Starting Purse: {balance.economy.starting_currency()}")


def _print_enemy_scaling(difficulty: DifficultySettings) -> None:
    print("\n--- Enemy Scaling ---")
    enemy = EnemiesRepository().get("mist_wolf")
    for party_level in (1, 5, 10):
        stats = get_scaled_stats(enemy, party_level)
        health = round(difficulty.apply_enemy_scaling(stats.hp, "health"))
        print(f"{enemy.name} @ party level {party_level}: {health} HP, AC {stats.armor_class}, {stats.currency_drop}")


def _print_difficulty_table(balance: BalanceConfig) -> None:
    print("\n--- Difficulty Profiles ---")
    for level in DIFFICULTY_LEVELS:
        settings = balance.difficulty(level)
        print(f"{level}:")
        print(f"  Player Damage: {settings.player_damage_multiplier:g}x")
        print(f"  Enemy Damage: {settings.enemy_damage_multiplier:g}x")
        print(f"  Experience Gain: {settings.player_experience_multiplier:g}x")
        print(f"  Currency Drops: {settings.currency_drop_multiplier:g}x")


if __name__ == "__main__":
    raise SystemExit(main())
