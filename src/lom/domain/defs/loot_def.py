"""Loot table entry structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LootDropDef:
    item_id: str
    drop_chance: float
    min_quantity: int = 1
    max_quantity: int = 1


@dataclass(frozen=True, slots=True)
class LootResult:
    item_id: str
    quantity: int
