"""Repository exports."""

from .armor_repo import ArmorRepository
from .balance_repo import BalanceConfigRepository
from .characters_repo import CharactersRepository
from .enemies_repo import EnemiesRepository
from .shields_repo import ShieldsRepository
from .spells_repo import SpellsRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "ArmorRepository",
    "BalanceConfigRepository",
    "CharactersRepository",
    "EnemiesRepository",
    "ShieldsRepository",
    "SpellsRepository",
    "WeaponsRepository",
]
