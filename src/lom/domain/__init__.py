"""Domain exports: records and pure formulas."""

from .attributes import AttributeRequirements, AttributeSet, modifier
from .balance import BalanceConfig, DifficultySettings
from .combatant import Combatant
from .currency import Currency
from .enhancement import WeaponEnhancementState

__all__ = [
    "AttributeRequirements",
    "AttributeSet",
    "BalanceConfig",
    "Combatant",
    "Currency",
    "DifficultySettings",
    "WeaponEnhancementState",
    "modifier",
]
