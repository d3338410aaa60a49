"""Timed effect ledger for damage/healing over time, buffs and debuffs.

Each combatant owns a list of ``ActiveEffect`` entries. ``tick_status_effects``
runs once per turn for the owner: periodic damage and healing resolve first,
then every remaining duration counts down and expired entries drop out.
Buff and debuff magnitudes are recorded for callers to read through
``total_modifier``; they do not alter derived stats on their own.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Literal, Sequence

from lom.core.types import ElementType

if TYPE_CHECKING:
    from lom.domain.combatant import Combatant

logger = logging.getLogger(__name__)

TimedEffectKind = Literal["buff", "debuff", "damage_over_time", "healing_over_time"]
TIMED_EFFECT_KINDS: tuple[str, ...] = ("buff", "debuff", "damage_over_time", "healing_over_time")


@dataclass(slots=True)
class ActiveEffect:
    """A timed effect currently attached to a combatant."""

    kind: TimedEffectKind
    magnitude: int
    remaining_turns: int
    element: ElementType = "physical"
    source_id: str | None = None
    stackable: bool = False


@dataclass(frozen=True, slots=True)
class EffectTick:
    """What one ledger entry did during a tick."""

    kind: TimedEffectKind
    amount: int
    expired: bool
    source_id: str | None = None


def apply_status_effect(effects: List[ActiveEffect], effect: ActiveEffect) -> bool:
    """
    Attach ``effect`` unless a matching non-stackable entry is already active.

    Entries match on kind, element and source. Returns True when attached.
    Effects with no remaining turns are ignored.
    """

    if effect.remaining_turns <= 0:
        return False
    if not effect.stackable:
        for existing in effects:
            if (
                existing.kind == effect.kind
                and existing.element == effect.element
                and existing.source_id == effect.source_id
            ):
                return False
    effects.append(effect)
    return True


def tick_status_effects(combatant: Combatant) -> list[EffectTick]:
    ticks: list[EffectTick] = []
    for effect in list(combatant.effects):
        amount = 0
        if effect.kind == "damage_over_time":
            before = combatant.current_hp
            combatant.take_damage(effect.magnitude)
            amount = before - combatant.current_hp
        elif effect.kind == "healing_over_time":
            before = combatant.current_hp
            combatant.restore_hp(effect.magnitude)
            amount = combatant.current_hp - before
        effect.remaining_turns -= 1
        expired = effect.remaining_turns <= 0
        if expired:
            combatant.effects.remove(effect)
            logger.debug("%s: %s from %s expired", combatant.name, effect.kind, effect.source_id)
        ticks.append(EffectTick(kind=effect.kind, amount=amount, expired=expired, source_id=effect.source_id))
    return ticks


def total_modifier(effects: Sequence[ActiveEffect], kind: TimedEffectKind) -> int:
    return sum(effect.magnitude for effect in effects if effect.kind == kind)
