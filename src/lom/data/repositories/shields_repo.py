"""Shields repository."""
from __future__ import annotations

from typing import Dict

from lom.core.types import SHIELD_TYPES
from lom.data.errors import DataValidationError
from lom.data.repositories.base import RepositoryBase
from lom.domain.defs import ShieldDef


class ShieldsRepository(RepositoryBase[ShieldDef]):
    """Loads and validates shield definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("shields.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ShieldDef]:
        shields: Dict[str, ShieldDef] = {}
        for raw_id, shield_data in self._iter_payloads(raw, "shield"):
            context = f"shield '{raw_id}'"
            self._assert_exact_fields(
                shield_data,
                {"name", "shield_type", "defense_bonus"},
                context,
                optional_fields={
                    "block_chance",
                    "blocks_ranged_attacks",
                    "resistances",
                    "requirements",
                    "value",
                    "stamina_cost",
                    "counter_attack_chance",
                    "counter_attack_damage",
                    "description",
                },
            )
            defense_bonus = self._require_int(shield_data["defense_bonus"], f"{context} defense_bonus")
            counter_damage = self._require_int(
                shield_data.get("counter_attack_damage", 0), f"{context} counter_attack_damage"
            )
            if defense_bonus < 0 or counter_damage < 0:
                raise DataValidationError(f"{context} defense and counter damage cannot be negative.")

            shields[raw_id] = ShieldDef(
                id=raw_id,
                name=self._require_str(shield_data["name"], f"{context} name"),
                shield_type=self._require_choice(shield_data["shield_type"], SHIELD_TYPES, f"{context} shield_type"),
                defense_bonus=defense_bonus,
                block_chance=self._require_probability(shield_data.get("block_chance", 0.15), f"{context} block_chance"),
                blocks_ranged_attacks=self._require_bool(
                    shield_data.get("blocks_ranged_attacks", False), f"{context} blocks_ranged_attacks"
                ),
                resistances=self._parse_resistances(shield_data.get("resistances"), f"{context} resistances"),
                requirements=self._parse_requirements(shield_data.get("requirements"), f"{context} requirements"),
                value=self._parse_currency(shield_data.get("value"), f"{context} value"),
                stamina_cost=self._require_number(shield_data.get("stamina_cost", 5.0), f"{context} stamina_cost"),
                counter_attack_chance=self._require_probability(
                    shield_data.get("counter_attack_chance", 0.0), f"{context} counter_attack_chance"
                ),
                counter_attack_damage=counter_damage,
                description=self._require_str(shield_data.get("description", ""), f"{context} description"),
            )
        return shields
