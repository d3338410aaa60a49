"""Poison enhancement state for a single weapon instance.

Lifecycle: unenhanced -> apply_poison -> enhanced(kind, charges) -> each
attack consumes a charge -> the last charge returns the weapon to unenhanced.
remove_poison resets early.
"""
from __future__ import annotations

from dataclasses import dataclass

from lom.core.types import PoisonType
from lom.domain.balance import PoisonConfig
from lom.domain.defs import WeaponDef

BASE_POISON_DAMAGE = {"weak": 2, "strong": 5, "paralysis": 1, "weakness": 1}


@dataclass(slots=True)
class WeaponEnhancementState:
    """Mutable poison coating owned by exactly one weapon instance."""

    poison: PoisonType = "none"
    charges: int = 0

    @property
    def is_enhanced(self) -> bool:
        return self.poison != "none" and self.charges > 0


def apply_poison(weapon: WeaponDef, state: WeaponEnhancementState, poison: PoisonType, charges: int) -> bool:
    """Coat the weapon.

    Returns False, leaving state untouched, when the weapon cannot be enhanced
    or the coating is ``"none"`` or carries no charges.
    """
    if not weapon.can_be_enhanced or poison == "none" or charges <= 0:
        return False
    state.poison = poison
    state.charges = charges
    return True


def consume_poison_charge(state: WeaponEnhancementState) -> bool:
    """Spend one charge for an attack; False when nothing was applied."""
    if state.poison == "none" or state.charges <= 0:
        return False
    state.charges -= 1
    if state.charges <= 0:
        state.poison = "none"
        state.charges = 0
    return True


def remove_poison(state: WeaponEnhancementState) -> None:
    state.poison = "none"
    state.charges = 0


def get_poison_damage(
    weapon: WeaponDef,
    state: WeaponEnhancementState,
    poison_config: PoisonConfig | None = None,
) -> int:
    """Extra damage from the coating; applied after armor, never reduced by it."""
    if not state.is_enhanced:
        return 0
    if poison_config is not None:
        base = poison_config.damage_for(state.poison)
    else:
        base = BASE_POISON_DAMAGE.get(state.poison, 0)
    return max(0, round(base * weapon.poison_effectiveness))
