"""Factory helpers for runtime combatants."""

from .character_factory import CharacterLoadout, create_character_combatant, create_character_loadout
from .enemy_factory import create_enemy_combatant

__all__ = [
    "CharacterLoadout",
    "create_character_combatant",
    "create_character_loadout",
    "create_enemy_combatant",
]
