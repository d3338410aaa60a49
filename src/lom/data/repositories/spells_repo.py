"""Spells repository."""
from __future__ import annotations

from typing import Dict

from lom.core.types import SPELL_SCHOOLS, TARGET_TYPES
from lom.data.errors import DataValidationError
from lom.data.repositories.base import RepositoryBase
from lom.domain.defs import SpellDef
from lom.domain.defs.spell_def import MAX_SPELL_LEVEL, MIN_SPELL_LEVEL


class SpellsRepository(RepositoryBase[SpellDef]):
    """Loads and validates spell definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("spells.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, SpellDef]:
        spells: Dict[str, SpellDef] = {}
        for raw_id, spell_data in self._iter_payloads(raw, "spell"):
            context = f"spell '{raw_id}'"
            self._assert_exact_fields(
                spell_data,
                {"name", "school", "mana_cost", "target_type", "effects"},
                context,
                optional_fields={
                    "requirements",
                    "level",
                    "minimum_character_level",
                    "cast_time",
                    "cooldown_turns",
                    "requires_line_of_sight",
                    "range",
                    "description",
                },
            )
            mana_cost = self._require_int(spell_data["mana_cost"], f"{context} mana_cost")
            if mana_cost < 0:
                raise DataValidationError(f"{context} mana_cost cannot be negative.")
            level = self._require_int(spell_data.get("level", MIN_SPELL_LEVEL), f"{context} level")
            if not MIN_SPELL_LEVEL <= level <= MAX_SPELL_LEVEL:
                raise DataValidationError(f"{context} level must be between {MIN_SPELL_LEVEL} and {MAX_SPELL_LEVEL}.")
            minimum_level = self._require_int(
                spell_data.get("minimum_character_level", 1), f"{context} minimum_character_level"
            )

            spells[raw_id] = SpellDef(
                id=raw_id,
                name=self._require_str(spell_data["name"], f"{context} name"),
                school=self._require_choice(spell_data["school"], SPELL_SCHOOLS, f"{context} school"),
                mana_cost=mana_cost,
                target_type=self._require_choice(spell_data["target_type"], TARGET_TYPES, f"{context} target_type"),
                effects=self._parse_effects(spell_data["effects"], f"{context} effects"),
                requirements=self._parse_requirements(spell_data.get("requirements"), f"{context} requirements"),
                level=level,
                minimum_character_level=max(1, minimum_level),
                cast_time=self._require_number(spell_data.get("cast_time", 1.0), f"{context} cast_time"),
                cooldown_turns=self._require_number(spell_data.get("cooldown_turns", 0.0), f"{context} cooldown_turns"),
                requires_line_of_sight=self._require_bool(
                    spell_data.get("requires_line_of_sight", True), f"{context} requires_line_of_sight"
                ),
                range=self._require_number(spell_data.get("range", 10.0), f"{context} range"),
                description=self._require_str(spell_data.get("description", ""), f"{context} description"),
            )
        return spells
