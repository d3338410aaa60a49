"""Spell casting service."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from lom.core.rng import RNG
from lom.core.types import EffectKind
from lom.domain.balance import BalanceConfig, DifficultySettings
from lom.domain.combatant import Combatant
from lom.domain.defs import SpellDef, SpellEffectDef
from lom.domain.spell_formulas import (
    SPELL_CRITICAL_MULTIPLIER,
    can_cast,
    get_critical_chance,
    get_effective_mana_cost,
    get_spell_power,
    should_apply_to_target,
)
from lom.domain.status_effects import TIMED_EFFECT_KINDS, ActiveEffect, apply_status_effect

logger = logging.getLogger(__name__)

DEFAULT_EFFECT_DURATION = 3


@dataclass(frozen=True, slots=True)
class SpellEffectOutcome:
    target_name: str
    kind: EffectKind
    amount: int
    critical: bool
    # False when a timed effect was rejected by the ledger
    applied: bool = True


@dataclass(slots=True)
class SpellCastResult:
    spell_id: str
    cast: bool
    mana_spent: int = 0
    outcomes: List[SpellEffectOutcome] = field(default_factory=list)


class SpellService:
    """Resolves spell casts against combatants using an injected RNG and balance table."""

    def __init__(
        self,
        rng: RNG,
        balance: BalanceConfig | None = None,
        difficulty: DifficultySettings | None = None,
    ) -> None:
        self._rng = rng
        self._balance = balance
        self._difficulty = difficulty

    def can_cast(self, spell: SpellDef, caster: Combatant) -> bool:
        return can_cast(spell, caster)

    def cast(self, spell: SpellDef, caster: Combatant, targets: Sequence[Combatant]) -> SpellCastResult:
        """Spend mana and apply every effect of ``spell`` to each eligible target.

        Nothing changes when the caster cannot cast; check ``result.cast``.
        """
        if not can_cast(spell, caster):
            logger.debug("%s cannot cast %s", caster.name, spell.id)
            return SpellCastResult(spell_id=spell.id, cast=False)

        cost = get_effective_mana_cost(spell, caster.attributes)
        caster.restore_mp(-cost)
        result = SpellCastResult(spell_id=spell.id, cast=True, mana_spent=cost)

        base_power = get_spell_power(spell, caster.attributes) * self._power_multiplier(spell)
        crit_chance = get_critical_chance(spell, caster.attributes)
        for target in targets:
            if not should_apply_to_target(spell, target, caster):
                continue
            critical = self._rng.random() < crit_chance
            power = base_power * (self._critical_multiplier() if critical else 1.0)
            for effect in spell.effects:
                result.outcomes.append(self._apply_effect(spell, effect, target, power, critical))

        logger.debug("%s cast %s for %d mana (%d outcomes)", caster.name, spell.id, cost, len(result.outcomes))
        return result

    def _apply_effect(
        self,
        spell: SpellDef,
        effect: SpellEffectDef,
        target: Combatant,
        power: float,
        critical: bool,
    ) -> SpellEffectOutcome:
        magnitude = max(0, round(effect.base_value * power))
        if effect.kind == "damage":
            before = target.current_hp
            target.take_damage(magnitude)
            amount = before - target.current_hp
            return SpellEffectOutcome(target.name, effect.kind, amount, critical)
        if effect.kind == "healing":
            before = target.current_hp
            target.restore_hp(magnitude)
            amount = target.current_hp - before
            return SpellEffectOutcome(target.name, effect.kind, amount, critical)
        if effect.kind in TIMED_EFFECT_KINDS:
            applied = apply_status_effect(
                target.effects,
                ActiveEffect(
                    kind=effect.kind,
                    magnitude=magnitude,
                    remaining_turns=effect.duration or self._default_duration(),
                    element=effect.element,
                    source_id=spell.id,
                    stackable=effect.stackable,
                ),
            )
            if not applied:
                logger.debug("%s already affected by %s from %s", target.name, effect.kind, spell.id)
            return SpellEffectOutcome(target.name, effect.kind, magnitude, critical, applied=applied)
        raise ValueError(f"Unsupported spell effect kind: {effect.kind}")

    def _power_multiplier(self, spell: SpellDef) -> float:
        multiplier = 1.0
        if self._balance is not None:
            multiplier *= self._balance.magic.spell_power_multiplier(spell.school)
        if self._difficulty is not None:
            multiplier *= self._difficulty.magic_damage_multiplier
        return multiplier

    def _critical_multiplier(self) -> float:
        if self._balance is not None:
            return self._balance.magic.spell_critical_multiplier
        return SPELL_CRITICAL_MULTIPLIER

    def _default_duration(self) -> int:
        if self._balance is not None:
            return self._balance.combat.base_status_effect_duration
        return DEFAULT_EFFECT_DURATION
