"""Playable character repository."""
from __future__ import annotations

from typing import Dict

from lom.core.types import CHARACTER_CLASSES
from lom.data.errors import DataValidationError
from lom.data.repositories.base import RepositoryBase
from lom.domain.defs import CharacterDef


class CharactersRepository(RepositoryBase[CharacterDef]):
    """Loads and validates playable character templates."""

    def __init__(self, base_path=None) -> None:
        super().__init__("characters.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CharacterDef]:
        characters: Dict[str, CharacterDef] = {}
        for raw_id, character_data in self._iter_payloads(raw, "character"):
            context = f"character '{raw_id}'"
            self._assert_exact_fields(
                character_data,
                {"name", "character_class", "base_attributes", "base_hp", "base_mp"},
                context,
                optional_fields={
                    "attribute_growth",
                    "hp_per_level",
                    "mp_per_level",
                    "description",
                    "starting_weapon_id",
                    "starting_armor_id",
                    "starting_shield_id",
                    "starting_currency",
                    "spell_ids",
                    "special_abilities",
                },
            )
            base_hp = self._require_int(character_data["base_hp"], f"{context} base_hp")
            base_mp = self._require_int(character_data["base_mp"], f"{context} base_mp")
            if base_hp < 1 or base_mp < 0:
                raise DataValidationError(f"{context} needs base_hp >= 1 and base_mp >= 0.")

            characters[raw_id] = CharacterDef(
                id=raw_id,
                name=self._require_str(character_data["name"], f"{context} name"),
                character_class=self._require_choice(
                    character_data["character_class"], CHARACTER_CLASSES, f"{context} character_class"
                ),
                base_attributes=self._parse_attributes(character_data["base_attributes"], f"{context} base_attributes"),
                base_hp=base_hp,
                base_mp=base_mp,
                attribute_growth=self._parse_attributes(
                    character_data.get("attribute_growth", {}), f"{context} attribute_growth", default=0
                ),
                hp_per_level=self._require_int(character_data.get("hp_per_level", 8), f"{context} hp_per_level"),
                mp_per_level=self._require_int(character_data.get("mp_per_level", 4), f"{context} mp_per_level"),
                description=self._require_str(character_data.get("description", ""), f"{context} description"),
                starting_weapon_id=self._optional_str(
                    character_data.get("starting_weapon_id"), f"{context} starting_weapon_id"
                ),
                starting_armor_id=self._optional_str(
                    character_data.get("starting_armor_id"), f"{context} starting_armor_id"
                ),
                starting_shield_id=self._optional_str(
                    character_data.get("starting_shield_id"), f"{context} starting_shield_id"
                ),
                starting_currency=self._parse_currency(
                    character_data.get("starting_currency"), f"{context} starting_currency"
                ),
                spell_ids=tuple(self._require_str_list(character_data.get("spell_ids", []), f"{context} spell_ids")),
                special_abilities=tuple(
                    self._require_str_list(character_data.get("special_abilities", []), f"{context} special_abilities")
                ),
            )
        return characters
