"""Enemy stat scaling, loot rolls and boss phase selection."""
from __future__ import annotations

import math
from dataclasses import dataclass

from lom.core.rng import RNG
from lom.core.types import ElementType, StatusEffectType
from lom.domain.attributes import AttributeSet
from lom.domain.currency import Currency
from lom.domain.defs import BossPhaseDef, EnemyDef, LootResult
from lom.domain.resistances import resistance_for

# Each party level above 1 adds 15% to HP/MP/rewards. Armor class grows
# additively and initiative with the square root so turn order stays stable.
LEVEL_SCALE_PER_LEVEL = 0.15
ARMOR_CLASS_PER_LEVEL = 0.5


@dataclass(frozen=True, slots=True)
class EnemyStats:
    hp: int
    mp: int
    attributes: AttributeSet
    armor_class: int
    initiative: float
    experience_reward: int
    currency_drop: Currency


def level_scale(enemy: EnemyDef, party_level: int) -> float:
    if not enemy.scales_with_party_level:
        return 1.0
    return 1.0 + (party_level - 1) * LEVEL_SCALE_PER_LEVEL


def get_scaled_stats(enemy: EnemyDef, party_level: int, difficulty_scale: float = 1.0) -> EnemyStats:
    total_scale = level_scale(enemy, party_level) * enemy.difficulty_multiplier * difficulty_scale
    return EnemyStats(
        hp=round(enemy.base_hp * total_scale),
        mp=round(enemy.base_mp * total_scale),
        attributes=enemy.attributes.scaled(total_scale),
        armor_class=enemy.armor_class + round((party_level - 1) * ARMOR_CLASS_PER_LEVEL),
        initiative=enemy.initiative * math.sqrt(max(0.0, total_scale)),
        experience_reward=round(enemy.experience_reward * total_scale),
        currency_drop=enemy.currency_drop.scaled(total_scale),
    )


def generate_loot(enemy: EnemyDef, rng: RNG, luck_modifier: float = 1.0) -> list[LootResult]:
    results: list[LootResult] = []
    for drop in enemy.loot_table:
        if rng.roll(drop.drop_chance * luck_modifier):
            quantity = rng.randint(drop.min_quantity, drop.max_quantity)
            results.append(LootResult(item_id=drop.item_id, quantity=quantity))
    return results


def get_current_phase(enemy: EnemyDef, hp_fraction: float) -> BossPhaseDef | None:
    """Return the highest phase whose threshold the current HP fraction still meets."""
    if not enemy.is_boss or not enemy.boss_phases:
        return None
    for phase in enemy.boss_phases:
        if hp_fraction >= phase.hp_threshold:
            return phase
    return enemy.boss_phases[-1]


def enemy_resistance(enemy: EnemyDef, element: ElementType) -> float:
    return resistance_for(enemy.resistances, element)


def is_immune_to_status(enemy: EnemyDef, status: StatusEffectType) -> bool:
    return any(immunity.status == status for immunity in enemy.immunities)
