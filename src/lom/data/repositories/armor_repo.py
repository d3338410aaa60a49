"""Armor repository."""
from __future__ import annotations

from typing import Dict

from lom.core.types import ARMOR_TYPES
from lom.data.errors import DataValidationError
from lom.data.repositories.base import RepositoryBase
from lom.domain.defs import ArmorDef


class ArmorRepository(RepositoryBase[ArmorDef]):
    """Loads and validates body armor definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("armor.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ArmorDef]:
        armors: Dict[str, ArmorDef] = {}
        for raw_id, armor_data in self._iter_payloads(raw, "armor"):
            context = f"armor '{raw_id}'"
            self._assert_exact_fields(
                armor_data,
                {"name", "armor_type", "defense_bonus"},
                context,
                optional_fields={
                    "movement_penalty",
                    "stealth_penalty",
                    "resistances",
                    "requirements",
                    "value",
                    "description",
                },
            )
            defense_bonus = self._require_int(armor_data["defense_bonus"], f"{context} defense_bonus")
            if defense_bonus < 0:
                raise DataValidationError(f"{context} defense_bonus cannot be negative.")

            armors[raw_id] = ArmorDef(
                id=raw_id,
                name=self._require_str(armor_data["name"], f"{context} name"),
                armor_type=self._require_choice(armor_data["armor_type"], ARMOR_TYPES, f"{context} armor_type"),
                defense_bonus=defense_bonus,
                movement_penalty=self._require_probability(
                    armor_data.get("movement_penalty", 0.0), f"{context} movement_penalty"
                ),
                stealth_penalty=self._require_probability(
                    armor_data.get("stealth_penalty", 0.0), f"{context} stealth_penalty"
                ),
                resistances=self._parse_resistances(armor_data.get("resistances"), f"{context} resistances"),
                requirements=self._parse_requirements(armor_data.get("requirements"), f"{context} requirements"),
                value=self._parse_currency(armor_data.get("value"), f"{context} value"),
                description=self._require_str(armor_data.get("description", ""), f"{context} description"),
            )
        return armors
