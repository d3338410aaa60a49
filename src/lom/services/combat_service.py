"""Weapon attack resolution against armored, shielded defenders."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from lom.core.rng import RNG
from lom.core.types import PoisonType
from lom.domain.balance import BalanceConfig, DifficultySettings
from lom.domain.combatant import Combatant
from lom.domain.defense_formulas import (
    armor_effective_defense,
    armor_initiative_penalty,
    shield_can_block_attack,
    shield_counter_attack_damage,
    shield_effective_block_chance,
    shield_effective_counter_chance,
    shield_effective_defense,
)
from lom.domain.defs import ArmorDef, ShieldDef, WeaponDef
from lom.domain.enhancement import WeaponEnhancementState, consume_poison_charge, get_poison_damage
from lom.domain.resistances import clamp01
from lom.domain.weapon_formulas import MIN_WEAPON_DAMAGE, calculate_damage, is_ranged_weapon

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AttackResult:
    performed: bool
    weapon_damage: int = 0
    poison_damage: int = 0
    critical: bool = False
    blocked: bool = False
    defense: int = 0
    armor_reduction: float = 0.0
    counter_damage: int = 0
    poison: PoisonType = "none"

    @property
    def total_damage(self) -> int:
        return self.weapon_damage + self.poison_damage


class CombatService:
    """Applies balance and difficulty multipliers on top of the weapon and defense formulas."""

    def __init__(self, balance: BalanceConfig, difficulty: DifficultySettings, rng: RNG) -> None:
        self._balance = balance
        self._difficulty = difficulty
        self._rng = rng

    def critical_chance(self, weapon: WeaponDef) -> float:
        return clamp01(self._balance.combat.base_critical_chance + weapon.critical_chance)

    def total_defense(self, defender: Combatant, armor: ArmorDef | None, shield: ShieldDef | None) -> int:
        combat = self._balance.combat
        defense = 0
        if armor is not None:
            armor_defense = armor_effective_defense(armor, defender.attributes)
            defense += round(armor_defense * combat.armor_effectiveness_for(armor.armor_type))
        if shield is not None:
            defense += shield_effective_defense(shield, defender.attributes)
        return defense

    def resolve_weapon_attack(
        self,
        attacker: Combatant,
        weapon: WeaponDef,
        enhancement: WeaponEnhancementState | None,
        defender: Combatant,
        armor: ArmorDef | None = None,
        shield: ShieldDef | None = None,
        *,
        attacker_is_player: bool = True,
    ) -> AttackResult:
        """
        Resolve one weapon swing and apply its damage to ``defender``.

        Order: scaled weapon damage, critical roll, armor mitigation, shield
        block roll (with an optional counter-attack), then poison. Armor
        penetration skips armor mitigation. Poison bypasses armor and blocks
        and spends one charge.
        """

        if not attacker.is_alive or not attacker.can_act or not defender.is_alive:
            return AttackResult(performed=False)

        combat = self._balance.combat
        damage = float(calculate_damage(weapon, attacker.attributes))
        damage *= combat.base_damage_multiplier * combat.weapon_damage_multiplier(weapon.weapon_type)
        if attacker_is_player:
            damage = self._difficulty.apply_player_scaling(damage, "damage")
        else:
            damage = self._difficulty.apply_enemy_scaling(damage, "damage")

        critical = self._rng.random() < self.critical_chance(weapon)
        if critical:
            damage *= combat.critical_damage_multiplier

        defense = self.total_defense(defender, armor, shield)
        reduction = 0.0 if weapon.has_armor_penetration else combat.armor_reduction(defense)
        damage *= 1.0 - reduction

        blocked = False
        counter_damage = 0
        if shield is not None and shield_can_block_attack(shield, is_ranged=is_ranged_weapon(weapon), is_magical=False):
            blocked = self._rng.random() < shield_effective_block_chance(shield, defender.attributes)
            if blocked:
                damage *= 1.0 - combat.block_damage_reduction
                counter_chance = shield_effective_counter_chance(shield, defender.attributes)
                if counter_chance > 0 and self._rng.random() < counter_chance:
                    counter_damage = shield_counter_attack_damage(shield, defender.attributes)

        weapon_damage = max(MIN_WEAPON_DAMAGE, round(damage))

        poison: PoisonType = "none"
        poison_damage = 0
        if enhancement is not None and enhancement.is_enhanced:
            poison = enhancement.poison
            base_poison = get_poison_damage(weapon, enhancement, self._balance.poison)
            poison_damage = max(0, round(base_poison * self._difficulty.poison_damage_multiplier))
            consume_poison_charge(enhancement)

        defender.take_damage(weapon_damage + poison_damage)
        if counter_damage:
            attacker.take_damage(counter_damage)

        logger.debug(
            "%s hits %s with %s for %d (+%d poison)%s%s",
            attacker.name,
            defender.name,
            weapon.id,
            weapon_damage,
            poison_damage,
            " critical" if critical else "",
            " blocked" if blocked else "",
        )
        return AttackResult(
            performed=True,
            weapon_damage=weapon_damage,
            poison_damage=poison_damage,
            critical=critical,
            blocked=blocked,
            defense=defense,
            armor_reduction=reduction,
            counter_damage=counter_damage,
            poison=poison,
        )

    def initiative(self, combatant: Combatant, armor: ArmorDef | None = None) -> float:
        """Turn-order score: base plus DEX bonus, reduced by armor weight class."""
        combat = self._balance.combat
        score = combat.base_initiative + combatant.attributes.dexterity_modifier * combat.dexterity_initiative_bonus
        if armor is not None:
            score *= 1.0 - armor_initiative_penalty(armor.armor_type) * combat.armor_initiative_penalty
        return max(0.0, score)
