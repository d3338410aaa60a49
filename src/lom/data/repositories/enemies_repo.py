"""Enemies repository."""
from __future__ import annotations

from typing import Dict

from lom.core.types import ELEMENT_TYPES, ENEMY_BEHAVIORS, ENEMY_TYPES, STATUS_EFFECT_TYPES, TARGET_TYPES
from lom.data.errors import DataValidationError
from lom.data.repositories.base import RepositoryBase
from lom.domain.defs import (
    BossPhaseDef,
    EnemyAbilityDef,
    EnemyAttackDef,
    EnemyDef,
    LootDropDef,
    StatusImmunityDef,
)


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads and validates enemy definitions, including boss phases and loot tables."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, enemy_data in self._iter_payloads(raw, "enemy"):
            context = f"enemy '{raw_id}'"
            self._assert_exact_fields(
                enemy_data,
                {"name", "base_hp"},
                context,
                optional_fields={
                    "base_mp",
                    "attributes",
                    "armor_class",
                    "initiative",
                    "enemy_type",
                    "is_boss",
                    "description",
                    "attacks",
                    "abilities",
                    "spell_ids",
                    "resistances",
                    "immunities",
                    "behavior",
                    "aggression_level",
                    "behavior_patterns",
                    "boss_phases",
                    "loot_table",
                    "experience_reward",
                    "currency_drop",
                    "loot_drop_chance",
                    "difficulty_multiplier",
                    "scales_with_party_level",
                },
            )
            base_hp = self._require_int(enemy_data["base_hp"], f"{context} base_hp")
            if base_hp < 1:
                raise DataValidationError(f"{context} base_hp must be at least 1.")
            difficulty_multiplier = self._require_number(
                enemy_data.get("difficulty_multiplier", 1.0), f"{context} difficulty_multiplier"
            )
            if difficulty_multiplier <= 0:
                raise DataValidationError(f"{context} difficulty_multiplier must be positive.")
            phases = self._parse_phases(enemy_data.get("boss_phases", []), f"{context} boss_phases")

            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                base_hp=base_hp,
                base_mp=self._require_int(enemy_data.get("base_mp", 0), f"{context} base_mp"),
                attributes=self._parse_attributes(enemy_data.get("attributes", {}), f"{context} attributes"),
                armor_class=self._require_int(enemy_data.get("armor_class", 0), f"{context} armor_class"),
                initiative=self._require_number(enemy_data.get("initiative", 10.0), f"{context} initiative"),
                enemy_type=self._require_choice(
                    enemy_data.get("enemy_type", "minion"), ENEMY_TYPES, f"{context} enemy_type"
                ),
                is_boss=self._require_bool(enemy_data.get("is_boss", False), f"{context} is_boss"),
                description=self._require_str(enemy_data.get("description", ""), f"{context} description"),
                attacks=self._parse_attacks(enemy_data.get("attacks", []), f"{context} attacks"),
                abilities=self._parse_abilities(enemy_data.get("abilities", []), f"{context} abilities"),
                spell_ids=tuple(self._require_str_list(enemy_data.get("spell_ids", []), f"{context} spell_ids")),
                resistances=self._parse_resistances(enemy_data.get("resistances"), f"{context} resistances"),
                immunities=self._parse_immunities(enemy_data.get("immunities", []), f"{context} immunities"),
                behavior=self._require_choice(
                    enemy_data.get("behavior", "aggressive"), ENEMY_BEHAVIORS, f"{context} behavior"
                ),
                aggression_level=self._require_probability(
                    enemy_data.get("aggression_level", 0.5), f"{context} aggression_level"
                ),
                behavior_patterns=tuple(
                    self._require_str_list(enemy_data.get("behavior_patterns", []), f"{context} behavior_patterns")
                ),
                boss_phases=phases,
                loot_table=self._parse_loot_table(enemy_data.get("loot_table", []), f"{context} loot_table"),
                experience_reward=self._require_int(
                    enemy_data.get("experience_reward", 0), f"{context} experience_reward"
                ),
                currency_drop=self._parse_currency(enemy_data.get("currency_drop"), f"{context} currency_drop"),
                loot_drop_chance=self._require_probability(
                    enemy_data.get("loot_drop_chance", 0.3), f"{context} loot_drop_chance"
                ),
                difficulty_multiplier=difficulty_multiplier,
                scales_with_party_level=self._require_bool(
                    enemy_data.get("scales_with_party_level", True), f"{context} scales_with_party_level"
                ),
            )
        return enemies

    def _parse_attacks(self, value: object, context: str) -> tuple[EnemyAttackDef, ...]:
        attacks: list[EnemyAttackDef] = []
        for index, entry in enumerate(self._require_list(value, context)):
            entry_context = f"{context}[{index}]"
            data = self._require_mapping(entry, entry_context)
            self._assert_exact_fields(
                data,
                {"name", "base_damage"},
                entry_context,
                optional_fields={
                    "damage_type",
                    "accuracy",
                    "critical_chance",
                    "status_effect",
                    "status_chance",
                    "description",
                },
            )
            status_effect = data.get("status_effect")
            if status_effect is not None:
                status_effect = self._require_choice(status_effect, STATUS_EFFECT_TYPES, f"{entry_context} status_effect")
            attacks.append(
                EnemyAttackDef(
                    name=self._require_str(data["name"], f"{entry_context} name"),
                    base_damage=self._require_int(data["base_damage"], f"{entry_context} base_damage"),
                    damage_type=self._require_choice(
                        data.get("damage_type", "physical"), ELEMENT_TYPES, f"{entry_context} damage_type"
                    ),
                    accuracy=self._require_probability(data.get("accuracy", 0.9), f"{entry_context} accuracy"),
                    critical_chance=self._require_probability(
                        data.get("critical_chance", 0.05), f"{entry_context} critical_chance"
                    ),
                    status_effect=status_effect,
                    status_chance=self._require_probability(
                        data.get("status_chance", 0.0), f"{entry_context} status_chance"
                    ),
                    description=self._require_str(data.get("description", ""), f"{entry_context} description"),
                )
            )
        return tuple(attacks)

    def _parse_abilities(self, value: object, context: str) -> tuple[EnemyAbilityDef, ...]:
        abilities: list[EnemyAbilityDef] = []
        for index, entry in enumerate(self._require_list(value, context)):
            entry_context = f"{context}[{index}]"
            data = self._require_mapping(entry, entry_context)
            self._assert_exact_fields(
                data,
                {"name"},
                entry_context,
                optional_fields={"mana_cost", "cooldown_turns", "target_type", "effects", "description"},
            )
            abilities.append(
                EnemyAbilityDef(
                    name=self._require_str(data["name"], f"{entry_context} name"),
                    mana_cost=self._require_int(data.get("mana_cost", 0), f"{entry_context} mana_cost"),
                    cooldown_turns=self._require_int(data.get("cooldown_turns", 0), f"{entry_context} cooldown_turns"),
                    target_type=self._require_choice(
                        data.get("target_type", "single_enemy"), TARGET_TYPES, f"{entry_context} target_type"
                    ),
                    effects=self._parse_effects(data.get("effects", []), f"{entry_context} effects"),
                    description=self._require_str(data.get("description", ""), f"{entry_context} description"),
                )
            )
        return tuple(abilities)

    def _parse_immunities(self, value: object, context: str) -> tuple[StatusImmunityDef, ...]:
        immunities: list[StatusImmunityDef] = []
        for index, entry in enumerate(self._require_list(value, context)):
            entry_context = f"{context}[{index}]"
            data = self._require_mapping(entry, entry_context)
            self._assert_exact_fields(data, {"status"}, entry_context, optional_fields={"complete"})
            immunities.append(
                StatusImmunityDef(
                    status=self._require_choice(data["status"], STATUS_EFFECT_TYPES, f"{entry_context} status"),
                    complete=self._require_bool(data.get("complete", True), f"{entry_context} complete"),
                )
            )
        return tuple(immunities)

    def _parse_phases(self, value: object, context: str) -> tuple[BossPhaseDef, ...]:
        phases: list[BossPhaseDef] = []
        for index, entry in enumerate(self._require_list(value, context)):
            entry_context = f"{context}[{index}]"
            data = self._require_mapping(entry, entry_context)
            self._assert_exact_fields(
                data,
                {"name", "hp_threshold"},
                entry_context,
                optional_fields={"abilities", "behavior_patterns", "damage_multiplier", "triggers_once"},
            )
            phases.append(
                BossPhaseDef(
                    name=self._require_str(data["name"], f"{entry_context} name"),
                    hp_threshold=self._require_probability(data["hp_threshold"], f"{entry_context} hp_threshold"),
                    abilities=self._parse_abilities(data.get("abilities", []), f"{entry_context} abilities"),
                    behavior_patterns=tuple(
                        self._require_str_list(data.get("behavior_patterns", []), f"{entry_context} behavior_patterns")
                    ),
                    damage_multiplier=self._require_number(
                        data.get("damage_multiplier", 1.0), f"{entry_context} damage_multiplier"
                    ),
                    triggers_once=self._require_bool(data.get("triggers_once", False), f"{entry_context} triggers_once"),
                )
            )
        phases.sort(key=lambda phase: phase.hp_threshold, reverse=True)
        return tuple(phases)

    def _parse_loot_table(self, value: object, context: str) -> tuple[LootDropDef, ...]:
        drops: list[LootDropDef] = []
        for index, entry in enumerate(self._require_list(value, context)):
            entry_context = f"{context}[{index}]"
            data = self._require_mapping(entry, entry_context)
            self._assert_exact_fields(
                data,
                {"item_id", "drop_chance"},
                entry_context,
                optional_fields={"min_quantity", "max_quantity"},
            )
            min_quantity = self._require_int(data.get("min_quantity", 1), f"{entry_context} min_quantity")
            max_quantity = self._require_int(data.get("max_quantity", min_quantity), f"{entry_context} max_quantity")
            if min_quantity < 1 or max_quantity < min_quantity:
                raise DataValidationError(f"{entry_context} needs 1 <= min_quantity <= max_quantity.")
            drops.append(
                LootDropDef(
                    item_id=self._require_str(data["item_id"], f"{entry_context} item_id"),
                    drop_chance=self._require_probability(data["drop_chance"], f"{entry_context} drop_chance"),
                    min_quantity=min_quantity,
                    max_quantity=max_quantity,
                )
            )
        return tuple(drops)
