"""Enemy definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field

from lom.core.types import (
    ElementType,
    EnemyBehavior,
    EnemyType,
    StatusEffectType,
    TargetType,
)
from lom.domain.attributes import AttributeSet
from lom.domain.currency import Currency
from lom.domain.resistances import ElementalResistance

from .loot_def import LootDropDef
from .spell_def import SpellEffectDef


@dataclass(frozen=True, slots=True)
class EnemyAttackDef:
    name: str
    base_damage: int
    damage_type: ElementType = "physical"
    accuracy: float = 0.9
    critical_chance: float = 0.05
    status_effect: StatusEffectType | None = None
    status_chance: float = 0.0
    description: str = ""


@dataclass(frozen=True, slots=True)
class EnemyAbilityDef:
    name: str
    mana_cost: int = 0
    cooldown_turns: int = 0
    target_type: TargetType = "single_enemy"
    effects: tuple[SpellEffectDef, ...] = ()
    description: str = ""


@dataclass(frozen=True, slots=True)
class StatusImmunityDef:
    """``complete`` immunity blocks the status; partial immunity only resists it."""

    status: StatusEffectType
    complete: bool = True


@dataclass(frozen=True, slots=True)
class BossPhaseDef:
    name: str
    hp_threshold: float
    abilities: tuple[EnemyAbilityDef, ...] = ()
    behavior_patterns: tuple[str, ...] = ()
    damage_multiplier: float = 1.0
    triggers_once: bool = False


@dataclass(frozen=True, slots=True)
class EnemyDef:
    """Enemy stat block plus combat kit, rewards and scaling knobs."""

    id: str
    name: str
    base_hp: int
    base_mp: int = 0
    attributes: AttributeSet = field(default_factory=AttributeSet)
    armor_class: int = 0
    initiative: float = 10.0
    enemy_type: EnemyType = "minion"
    is_boss: bool = False
    description: str = ""
    attacks: tuple[EnemyAttackDef, ...] = ()
    abilities: tuple[EnemyAbilityDef, ...] = ()
    spell_ids: tuple[str, ...] = ()
    resistances: tuple[ElementalResistance, ...] = ()
    immunities: tuple[StatusImmunityDef, ...] = ()
    behavior: EnemyBehavior = "aggressive"
    aggression_level: float = 0.5
    behavior_patterns: tuple[str, ...] = ()
    boss_phases: tuple[BossPhaseDef, ...] = ()  # sorted by hp_threshold, highest first
    loot_table: tuple[LootDropDef, ...] = ()
    experience_reward: int = 0
    currency_drop: Currency = field(default_factory=Currency)
    loot_drop_chance: float = 0.3
    difficulty_multiplier: float = 1.0
    scales_with_party_level: bool = True

    @property
    def has_phased_encounter(self) -> bool:
        return bool(self.boss_phases)
