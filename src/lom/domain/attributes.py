"""D&D-style attribute sets and equipment/spell requirements."""
from __future__ import annotations

from dataclasses import dataclass

from lom.core.types import CharacterClass

BASELINE_SCORE = 10


def modifier(score: int) -> int:
    """Return the attribute modifier for ``score``.

    Floor division keeps scores below the baseline rounding toward negative
    infinity: a score of 7 yields -2, not -1.
    """
    return (score - BASELINE_SCORE) // 2


@dataclass(frozen=True, slots=True)
class AttributeSet:
    """Six-stat character sheet. Never mutated; derive new sets instead."""

    strength: int = BASELINE_SCORE
    dexterity: int = BASELINE_SCORE
    constitution: int = BASELINE_SCORE
    intelligence: int = BASELINE_SCORE
    wisdom: int = BASELINE_SCORE
    charisma: int = BASELINE_SCORE

    @property
    def strength_modifier(self) -> int:
        return modifier(self.strength)

    @property
    def dexterity_modifier(self) -> int:
        return modifier(self.dexterity)

    @property
    def constitution_modifier(self) -> int:
        return modifier(self.constitution)

    @property
    def intelligence_modifier(self) -> int:
        return modifier(self.intelligence)

    @property
    def wisdom_modifier(self) -> int:
        return modifier(self.wisdom)

    @property
    def charisma_modifier(self) -> int:
        return modifier(self.charisma)

    def at_level(self, growth: AttributeSet, level: int) -> AttributeSet:
        """Return ``self + growth * (level - 1)``; levels below 1 count as 1."""
        bonus_levels = max(1, level) - 1
        return AttributeSet(
            strength=self.strength + growth.strength * bonus_levels,
            dexterity=self.dexterity + growth.dexterity * bonus_levels,
            constitution=self.constitution + growth.constitution * bonus_levels,
            intelligence=self.intelligence + growth.intelligence * bonus_levels,
            wisdom=self.wisdom + growth.wisdom * bonus_levels,
            charisma=self.charisma + growth.charisma * bonus_levels,
        )

    def scaled(self, factor: float) -> AttributeSet:
        """Return every score multiplied by ``factor`` and rounded."""
        return AttributeSet(
            strength=round(self.strength * factor),
            dexterity=round(self.dexterity * factor),
            constitution=round(self.constitution * factor),
            intelligence=round(self.intelligence * factor),
            wisdom=round(self.wisdom * factor),
            charisma=round(self.charisma * factor),
        )


ZERO_GROWTH = AttributeSet(0, 0, 0, 0, 0, 0)


@dataclass(frozen=True, slots=True)
class AttributeRequirements:
    """Minimum scores plus an optional class whitelist (empty means any class)."""

    minimum_strength: int = 0
    minimum_dexterity: int = 0
    minimum_constitution: int = 0
    minimum_intelligence: int = 0
    minimum_wisdom: int = 0
    minimum_charisma: int = 0
    allowed_classes: tuple[CharacterClass, ...] = ()

    def meets(self, attributes: AttributeSet, character_class: CharacterClass | None = None) -> bool:
        if attributes.strength < self.minimum_strength:
            return False
        if attributes.dexterity < self.minimum_dexterity:
            return False
        if attributes.constitution < self.minimum_constitution:
            return False
        if attributes.intelligence < self.minimum_intelligence:
            return False
        if attributes.wisdom < self.minimum_wisdom:
            return False
        if attributes.charisma < self.minimum_charisma:
            return False
        if self.allowed_classes and character_class not in self.allowed_classes:
            return False
        return True


NO_REQUIREMENTS = AttributeRequirements()
