"""Runtime combatant state shared by characters and enemies."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from lom.core.types import CharacterClass
from lom.domain.attributes import AttributeSet
from lom.domain.status_effects import ActiveEffect


@dataclass(eq=False, slots=True)
class Combatant:
    """Participant in a battle. Identity comparison distinguishes the caster from targets."""

    name: str
    attributes: AttributeSet
    max_hp: int
    current_hp: int
    max_mp: int = 0
    current_mp: int = 0
    character_class: CharacterClass | None = None
    level: int = 1
    can_act: bool = True
    effects: List[ActiveEffect] = field(default_factory=list)
    source_id: str | None = None  # id of the definition it was built from

    @property
    def is_alive(self) -> bool:
        return self.current_hp > 0

    @property
    def hp_fraction(self) -> float:
        if self.max_hp <= 0:
            return 0.0
        return self.current_hp / self.max_hp

    def take_damage(self, amount: int) -> None:
        if not self.is_alive:
            return
        self.current_hp = max(0, self.current_hp - max(0, amount))

    def restore_hp(self, amount: int) -> None:
        if not self.is_alive:
            return
        self.current_hp = min(self.max_hp, self.current_hp + max(0, amount))

    def restore_mp(self, amount: int) -> None:
        """Change MP by ``amount`` (negative spends), clamped to [0, max_mp]."""
        self.current_mp = min(self.max_mp, max(0, self.current_mp + amount))
