"""Weapons repository."""
from __future__ import annotations

from typing import Dict

from lom.core.types import WEAPON_HANDEDNESS, WEAPON_TYPES
from lom.data.errors import DataValidationError
from lom.data.repositories.base import RepositoryBase
from lom.domain.defs import WeaponDef
from lom.domain.weapon_formulas import default_handedness


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads and validates weapon definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("weapons.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        for raw_id, weapon_data in self._iter_payloads(raw, "weapon"):
            context = f"weapon '{raw_id}'"
            self._assert_exact_fields(
                weapon_data,
                {"name", "weapon_type", "base_damage"},
                context,
                optional_fields={
                    "handedness",
                    "critical_chance",
                    "can_be_enhanced",
                    "has_armor_penetration",
                    "poison_effectiveness",
                    "requirements",
                    "value",
                    "description",
                },
            )
            weapon_type = self._require_choice(weapon_data["weapon_type"], WEAPON_TYPES, f"{context} weapon_type")
            base_damage = self._require_int(weapon_data["base_damage"], f"{context} base_damage")
            if base_damage < 1:
                raise DataValidationError(f"{context} base_damage must be at least 1.")
            handedness = weapon_data.get("handedness", default_handedness(weapon_type))
            poison_effectiveness = self._require_number(
                weapon_data.get("poison_effectiveness", 1.0), f"{context} poison_effectiveness"
            )
            if poison_effectiveness < 0:
                raise DataValidationError(f"{context} poison_effectiveness cannot be negative.")

            weapons[raw_id] = WeaponDef(
                id=raw_id,
                name=self._require_str(weapon_data["name"], f"{context} name"),
                weapon_type=weapon_type,
                base_damage=base_damage,
                handedness=self._require_choice(handedness, WEAPON_HANDEDNESS, f"{context} handedness"),
                critical_chance=self._require_probability(
                    weapon_data.get("critical_chance", 0.05), f"{context} critical_chance"
                ),
                can_be_enhanced=self._require_bool(weapon_data.get("can_be_enhanced", True), f"{context} can_be_enhanced"),
                has_armor_penetration=self._require_bool(
                    weapon_data.get("has_armor_penetration", False), f"{context} has_armor_penetration"
                ),
                poison_effectiveness=poison_effectiveness,
                requirements=self._parse_requirements(weapon_data.get("requirements"), f"{context} requirements"),
                value=self._parse_currency(weapon_data.get("value"), f"{context} value"),
                description=self._require_str(weapon_data.get("description", ""), f"{context} description"),
            )
        return weapons
