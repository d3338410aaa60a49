"""Balance configuration repository.

``balance.json`` mirrors the ``BalanceConfig`` record: one object per section
plus a ``difficulty`` object holding the three profiles. Any key may be
omitted and falls back to the record default (difficulty profiles fall back to
their preset), but unknown keys are rejected so typos never pass silently.
"""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Sequence

from lom.core.types import (
    ARMOR_TYPES,
    CHARACTER_CLASSES,
    DIFFICULTY_LEVELS,
    POISON_TYPES,
    SPELL_SCHOOLS,
    WEAPON_TYPES,
)
from lom.data.errors import DataValidationError
from lom.data.repositories.base import RepositoryBase
from lom.domain.balance import (
    ITEM_CATEGORIES,
    BalanceConfig,
    CombatConfig,
    DifficultySettings,
    EconomyConfig,
    MagicConfig,
    PoisonConfig,
    ProgressionConfig,
)
from lom.domain.currency import Currency

logger = logging.getLogger(__name__)

_SECTIONS = {
    "combat": CombatConfig,
    "progression": ProgressionConfig,
    "economy": EconomyConfig,
    "magic": MagicConfig,
    "poison": PoisonConfig,
}

_MAPPING_KEYS: dict[str, Sequence[str]] = {
    "weapon_damage_multipliers": WEAPON_TYPES,
    "armor_effectiveness": ARMOR_TYPES,
    "attribute_growth": CHARACTER_CLASSES,
    "category_price_multipliers": ITEM_CATEGORIES,
    "school_power_multipliers": SPELL_SCHOOLS,
    "damage": tuple(kind for kind in POISON_TYPES if kind != "none"),
    "duration": tuple(kind for kind in POISON_TYPES if kind != "none"),
}

_METADATA_FIELDS = ("version", "last_modified", "description")


class BalanceConfigRepository(RepositoryBase[BalanceConfig]):
    """Loads ``balance.json`` once and caches the parsed ``BalanceConfig``."""

    def __init__(self, base_path: Path | str | None = None, filename: str = "balance.json") -> None:
        super().__init__(filename, base_path)
        self._config: BalanceConfig | None = None

    def load(self) -> BalanceConfig:
        """Return the balance configuration, reading the file on first use."""
        if self._config is None:
            raw = self._load_raw()
            self._config = self.parse(raw, context=self._filename)
            logger.info("Loaded balance configuration %s from %s", self._config.version, self._get_file_path())
        return self._config

    @classmethod
    def parse(cls, raw: dict[str, object], context: str = "balance") -> BalanceConfig:
        """Build a ``BalanceConfig`` from an already-decoded JSON object."""
        cls._assert_exact_fields(
            raw,
            set(),
            context,
            optional_fields={*_METADATA_FIELDS, *_SECTIONS, "difficulty"},
        )
        overrides: dict[str, object] = {}
        for name in _METADATA_FIELDS:
            if name in raw:
                overrides[name] = cls._require_str(raw[name], f"{context} {name}")
        for name, section_type in _SECTIONS.items():
            if name in raw:
                overrides[name] = cls._parse_section(section_type(), raw[name], f"{context} {name}")
        if "difficulty" in raw:
            profiles = cls._require_mapping(raw["difficulty"], f"{context} difficulty")
            cls._assert_exact_fields(profiles, set(), f"{context} difficulty", optional_fields=set(DIFFICULTY_LEVELS))
            defaults = BalanceConfig()
            for level, payload in profiles.items():
                preset: DifficultySettings = getattr(defaults, level)
                overrides[level] = cls._parse_section(preset, payload, f"{context} difficulty {level}")
        return BalanceConfig(**overrides)

    @classmethod
    def _parse_section(cls, defaults: object, value: object, context: str):
        """Return ``defaults`` with every key present in ``value`` replaced."""
        data = cls._require_mapping(value, context)
        known = {item.name for item in dataclasses.fields(defaults)}
        cls._assert_exact_fields(data, set(), context, optional_fields=known)
        changes: dict[str, object] = {}
        for name, raw_value in data.items():
            current = getattr(defaults, name)
            changes[name] = cls._coerce_like(current, raw_value, name, f"{context} {name}")
        return dataclasses.replace(defaults, **changes)

    @classmethod
    def _coerce_like(cls, current: object, value: object, name: str, context: str) -> object:
        if isinstance(current, bool):
            return cls._require_bool(value, context)
        if isinstance(current, int):
            return cls._require_int(value, context)
        if isinstance(current, float):
            return cls._require_number(value, context)
        if isinstance(current, Currency):
            return cls._parse_currency(value, context)
        if isinstance(current, Mapping):
            return cls._parse_mapping(current, value, _MAPPING_KEYS[name], context)
        raise DataValidationError(f"{context} has an unsupported value type.")

    @classmethod
    def _parse_mapping(
        cls,
        current: Mapping[str, object],
        value: object,
        allowed_keys: Sequence[str],
        context: str,
    ) -> Mapping[str, object]:
        data = cls._require_mapping(value, context)
        merged = dict(current)
        for key, entry in data.items():
            cls._require_choice(key, allowed_keys, f"{context} key")
            if isinstance(current.get(key), int):
                merged[key] = cls._require_int(entry, f"{context} {key}")
            else:
                merged[key] = cls._require_number(entry, f"{context} {key}")
        return MappingProxyType(merged)
