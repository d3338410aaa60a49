"""Domain definition exports."""

from .armor_def import ArmorDef
from .character_def import CharacterDef
from .enemy_def import BossPhaseDef, EnemyAbilityDef, EnemyAttackDef, EnemyDef, StatusImmunityDef
from .loot_def import LootDropDef, LootResult
from .shield_def import ShieldDef
from .spell_def import SpellDef, SpellEffectDef
from .weapon_def import WeaponDef

__all__ = [
    "ArmorDef",
    "BossPhaseDef",
    "CharacterDef",
    "EnemyAbilityDef",
    "EnemyAttackDef",
    "EnemyDef",
    "LootDropDef",
    "LootResult",
    "ShieldDef",
    "SpellDef",
    "SpellEffectDef",
    "StatusImmunityDef",
    "WeaponDef",
]
