"""Factory for creating character combatants from definitions."""
from __future__ import annotations

from dataclasses import dataclass, field

from lom.data.repositories import ArmorRepository, CharactersRepository, ShieldsRepository, WeaponsRepository
from lom.domain.balance import DifficultySettings
from lom.domain.character_progression import attributes_at_level, max_hp_at_level, max_mp_at_level
from lom.domain.combatant import Combatant
from lom.domain.defs import ArmorDef, ShieldDef, WeaponDef
from lom.domain.enhancement import WeaponEnhancementState
from lom.services.errors import FactoryError


@dataclass(slots=True)
class CharacterLoadout:
    """Starting equipment for a character; the enhancement state belongs to the weapon."""

    weapon: WeaponDef | None = None
    armor: ArmorDef | None = None
    shield: ShieldDef | None = None
    enhancement: WeaponEnhancementState = field(default_factory=WeaponEnhancementState)


def create_character_combatant(
    character_id: str,
    characters_repo: CharactersRepository,
    *,
    level: int = 1,
    difficulty: DifficultySettings | None = None,
) -> Combatant:
    """Instantiate a playable character at ``level`` with full HP and MP."""
    try:
        character_def = characters_repo.get(character_id)
    except KeyError as exc:
        raise FactoryError(f"Character '{character_id}' not found.") from exc

    level = max(1, level)
    max_hp = max_hp_at_level(character_def, level)
    max_mp = max_mp_at_level(character_def, level)
    if difficulty is not None:
        max_hp = round(difficulty.apply_player_scaling(max_hp, "health"))
        max_mp = round(difficulty.apply_player_scaling(max_mp, "mana"))
    max_hp = max(1, max_hp)
    max_mp = max(0, max_mp)

    return Combatant(
        name=character_def.name,
        attributes=attributes_at_level(character_def, level),
        max_hp=max_hp,
        current_hp=max_hp,
        max_mp=max_mp,
        current_mp=max_mp,
        character_class=character_def.character_class,
        level=level,
        source_id=character_def.id,
    )


def create_character_loadout(
    character_id: str,
    characters_repo: CharactersRepository,
    weapons_repo: WeaponsRepository,
    armor_repo: ArmorRepository,
    shields_repo: ShieldsRepository,
) -> CharacterLoadout:
    """Resolve the starting equipment ids of a character definition."""
    try:
        character_def = characters_repo.get(character_id)
    except KeyError as exc:
        raise FactoryError(f"Character '{character_id}' not found.") from exc

    loadout = CharacterLoadout()
    if character_def.starting_weapon_id is not None:
        try:
            loadout.weapon = weapons_repo.get(character_def.starting_weapon_id)
        except KeyError as exc:
            raise FactoryError(
                f"Weapon '{character_def.starting_weapon_id}' not found for character '{character_id}'."
            ) from exc
    if character_def.starting_armor_id is not None:
        try:
            loadout.armor = armor_repo.get(character_def.starting_armor_id)
        except KeyError as exc:
            raise FactoryError(
                f"Armor '{character_def.starting_armor_id}' not found for character '{character_id}'."
            ) from exc
    if character_def.starting_shield_id is not None:
        try:
            loadout.shield = shields_repo.get(character_def.starting_shield_id)
        except KeyError as exc:
            raise FactoryError(
                f"Shield '{character_def.starting_shield_id}' not found for character '{character_id}'."
            ) from exc
    return loadout
