"""Base repository implementation for JSON definition data."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Generic, List, Sequence, TypeVar

from lom.core.types import CHARACTER_CLASSES, EFFECT_KINDS, ELEMENT_TYPES
from lom.data import paths
from lom.data.errors import DataValidationError
from lom.data.json_loader import load_json_object
from lom.domain.attributes import NO_REQUIREMENTS, AttributeRequirements, AttributeSet
from lom.domain.currency import Currency
from lom.domain.defs import SpellEffectDef
from lom.domain.resistances import ElementalResistance

T = TypeVar("T")

logger = logging.getLogger(__name__)

_ATTRIBUTE_FIELDS = ("strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma")


class RepositoryBase(Generic[T]):
    """Common caching, loading and field validation for repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        return load_json_object(self._get_file_path())

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)
            logger.debug("Loaded %d definitions from %s", len(self._definitions), self._filename)

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    def _iter_payloads(self, raw: dict[str, object], label: str):
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or not raw_id:
                raise DataValidationError(f"{label.capitalize()} IDs must be non-empty strings.")
            yield raw_id, self._require_mapping(payload, f"{label} '{raw_id}'")

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_number(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        return float(value)

    @staticmethod
    def _require_bool(value: object, context: str) -> bool:
        if not isinstance(value, bool):
            raise DataValidationError(f"{context} must be a boolean.")
        return value

    @staticmethod
    def _require_choice(value: object, allowed: Sequence[str], context: str) -> str:
        if not isinstance(value, str) or value not in allowed:
            raise DataValidationError(f"{context} must be one of {list(allowed)}.")
        return value

    @staticmethod
    def _require_probability(value: object, context: str) -> float:
        number = RepositoryBase._require_number(value, context)
        if not 0.0 <= number <= 1.0:
            raise DataValidationError(f"{context} must be between 0 and 1.")
        return number

    @staticmethod
    def _require_str_list(value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        result: List[str] = []
        for item in value:
            if not isinstance(item, str):
                raise DataValidationError(f"{context} entries must be strings.")
            result.append(item)
        return result

    @staticmethod
    def _require_list(value: object, context: str) -> list[object]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return value

    @staticmethod
    def _optional_str(value: object, context: str) -> str | None:
        if value is None:
            return None
        return RepositoryBase._require_str(value, context)

    @staticmethod
    def _assert_exact_fields(
        payload: dict[str, object],
        expected_keys: set[str],
        context: str,
        *,
        optional_fields: set[str] | None = None,
    ) -> None:
        actual_keys = set(payload.keys())
        optional = optional_fields or set()
        missing = expected_keys - actual_keys
        unknown = actual_keys - expected_keys - optional
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing fields: {sorted(missing)}")
            if unknown:
                msg_parts.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(msg_parts)}).")

    @classmethod
    def _parse_attributes(cls, value: object, context: str, *, default: int = 10) -> AttributeSet:
        data = cls._require_mapping(value, context)
        cls._assert_exact_fields(data, set(), context, optional_fields=set(_ATTRIBUTE_FIELDS))
        scores = {name: cls._require_int(data.get(name, default), f"{context} {name}") for name in _ATTRIBUTE_FIELDS}
        return AttributeSet(**scores)

    @classmethod
    def _parse_requirements(cls, value: object, context: str) -> AttributeRequirements:
        if value is None:
            return NO_REQUIREMENTS
        data = cls._require_mapping(value, context)
        cls._assert_exact_fields(
            data,
            set(),
            context,
            optional_fields={*_ATTRIBUTE_FIELDS, "allowed_classes"},
        )
        minimums = {
            f"minimum_{name}": cls._require_int(data.get(name, 0), f"{context} {name}") for name in _ATTRIBUTE_FIELDS
        }
        allowed = tuple(
            cls._require_choice(entry, CHARACTER_CLASSES, f"{context} allowed_classes")
            for entry in cls._require_str_list(data.get("allowed_classes", []), f"{context} allowed_classes")
        )
        return AttributeRequirements(allowed_classes=allowed, **minimums)

    @classmethod
    def _parse_currency(cls, value: object, context: str) -> Currency:
        if value is None:
            return Currency()
        data = cls._require_mapping(value, context)
        cls._assert_exact_fields(data, set(), context, optional_fields={"gold", "silver", "copper"})
        gold = cls._require_int(data.get("gold", 0), f"{context} gold")
        silver = cls._require_int(data.get("silver", 0), f"{context} silver")
        copper = cls._require_int(data.get("copper", 0), f"{context} copper")
        if min(gold, silver, copper) < 0:
            raise DataValidationError(f"{context} amounts cannot be negative.")
        return Currency.of(gold, silver, copper)

    @classmethod
    def _parse_resistances(cls, value: object, context: str) -> tuple[ElementalResistance, ...]:
        if value is None:
            return ()
        resistances: list[ElementalResistance] = []
        seen: set[str] = set()
        for index, entry in enumerate(cls._require_list(value, context)):
            entry_context = f"{context}[{index}]"
            data = cls._require_mapping(entry, entry_context)
            cls._assert_exact_fields(data, {"element", "percentage"}, entry_context)
            element = cls._require_choice(data["element"], ELEMENT_TYPES, f"{entry_context} element")
            if element in seen:
                raise DataValidationError(f"{context} lists element '{element}' more than once.")
            seen.add(element)
            percentage = cls._require_probability(data["percentage"], f"{entry_context} percentage")
            resistances.append(ElementalResistance(element=element, percentage=percentage))
        return tuple(resistances)

    @classmethod
    def _parse_effects(cls, value: object, context: str) -> tuple[SpellEffectDef, ...]:
        effects: list[SpellEffectDef] = []
        for index, entry in enumerate(cls._require_list(value, context)):
            entry_context = f"{context}[{index}]"
            data = cls._require_mapping(entry, entry_context)
            cls._assert_exact_fields(
                data,
                {"kind"},
                entry_context,
                optional_fields={"element", "base_value", "attribute_scaling", "duration", "stackable"},
            )
            duration = cls._require_int(data.get("duration", 0), f"{entry_context} duration")
            if duration < 0:
                raise DataValidationError(f"{entry_context} duration cannot be negative.")
            effects.append(
                SpellEffectDef(
                    kind=cls._require_choice(data["kind"], EFFECT_KINDS, f"{entry_context} kind"),
                    element=cls._require_choice(data.get("element", "physical"), ELEMENT_TYPES, f"{entry_context} element"),
                    base_value=cls._require_int(data.get("base_value", 0), f"{entry_context} base_value"),
                    attribute_scaling=cls._require_number(
                        data.get("attribute_scaling", 0.0), f"{entry_context} attribute_scaling"
                    ),
                    duration=duration,
                    stackable=cls._require_bool(data.get("stackable", False), f"{entry_context} stackable"),
                )
            )
        return tuple(effects)
