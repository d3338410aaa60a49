"""Spell cost, power, critical and targeting formulas."""
from __future__ import annotations

from lom.core.types import CharacterClass, SpellSchool
from lom.domain.attributes import AttributeSet
from lom.domain.combatant import Combatant
from lom.domain.defs import SpellDef
from lom.domain.resistances import clamp01

INT_COST_REDUCTION_PER_MODIFIER = 0.05
WIS_COST_REDUCTION_PER_MODIFIER = 0.03
WISDOM_COST_SCHOOLS = frozenset({"water", "earth"})
POWER_PER_SPELL_LEVEL = 0.2
MIN_SPELL_POWER = 0.1
BASE_SPELL_CRITICAL_CHANCE = 0.05
SPELL_CRITICAL_MULTIPLIER = 1.5

_REQUIRED_CLASS = {"fire": "mage", "water": "cleric", "earth": "cleric"}


def get_effective_mana_cost(spell: SpellDef, attributes: AttributeSet) -> int:
    intelligence_reduction = attributes.intelligence_modifier * INT_COST_REDUCTION_PER_MODIFIER
    wisdom_reduction = 0.0
    if spell.school in WISDOM_COST_SCHOOLS:
        wisdom_reduction = attributes.wisdom_modifier * WIS_COST_REDUCTION_PER_MODIFIER
    cost = spell.mana_cost * (1.0 - intelligence_reduction - wisdom_reduction)
    return max(1, round(cost))


def get_spell_power(spell: SpellDef, attributes: AttributeSet) -> float:
    power = 1.0
    if spell.school == "fire":
        power += attributes.intelligence_modifier * 0.1
    elif spell.school == "water":
        power += (attributes.intelligence_modifier + attributes.wisdom_modifier) * 0.05
    elif spell.school == "earth":
        power += attributes.wisdom_modifier * 0.1
        power += attributes.constitution_modifier * 0.05
    power *= 1.0 + (spell.level - 1) * POWER_PER_SPELL_LEVEL
    return max(MIN_SPELL_POWER, power)


def get_critical_chance(spell: SpellDef, attributes: AttributeSet) -> float:
    chance = BASE_SPELL_CRITICAL_CHANCE + attributes.intelligence_modifier * 0.01
    if spell.school == "fire":
        chance += 0.02
    elif spell.school == "earth":
        chance += attributes.wisdom_modifier * 0.005
    return clamp01(chance)


def get_required_class(school: SpellSchool) -> CharacterClass:
    return _REQUIRED_CLASS.get(school, "mage")


def can_cast(spell: SpellDef, caster: Combatant) -> bool:
    """The caster must afford the attribute-adjusted cost that casting will spend."""
    if caster.current_mp < get_effective_mana_cost(spell, caster.attributes):
        return False
    if not caster.is_alive or not caster.can_act:
        return False
    if caster.level < spell.minimum_character_level:
        return False
    return spell.requirements.meets(caster.attributes, caster.character_class)


def should_apply_to_target(spell: SpellDef, target: Combatant, caster: Combatant) -> bool:
    if spell.target_type == "self":
        return target is caster
    if spell.target_type in ("single_ally", "all_allies"):
        return target is not caster and target.is_alive
    if spell.target_type in ("single_enemy", "all_enemies"):
        return target is not caster
    if spell.target_type == "area":
        return target.is_alive
    return False


def describe_spell(spell: SpellDef, attributes: AttributeSet) -> str:
    lines = [
        spell.description,
        "",
        f"School: {spell.school.title()}",
        f"Mana Cost: {get_effective_mana_cost(spell, attributes)}",
        f"Cast Time: {spell.cast_time:g} turns",
        f"Range: {spell.range:g}m",
        f"Spell Power: {get_spell_power(spell, attributes):.0%}",
        f"Critical Chance: {get_critical_chance(spell, attributes):.1%}",
    ]
    return "\n".join(lines)
