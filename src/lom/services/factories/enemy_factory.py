"""Factory for creating enemy combatants from definitions."""
from __future__ import annotations

from lom.data.repositories import EnemiesRepository
from lom.domain.balance import DifficultySettings
from lom.domain.combatant import Combatant
from lom.domain.enemy_scaling import get_scaled_stats
from lom.services.errors import FactoryError


def create_enemy_combatant(
    enemy_id: str,
    enemies_repo: EnemiesRepository,
    party_level: int = 1,
    difficulty: DifficultySettings | None = None,
) -> Combatant:
    """Instantiate an enemy scaled to the party level and difficulty health multiplier."""
    try:
        enemy_def = enemies_repo.get(enemy_id)
    except KeyError as exc:
        raise FactoryError(f"Enemy '{enemy_id}' not found.") from exc

    stats = get_scaled_stats(enemy_def, max(1, party_level))
    max_hp = stats.hp
    if difficulty is not None:
        max_hp = round(difficulty.apply_enemy_scaling(max_hp, "health"))
    max_hp = max(1, max_hp)

    return Combatant(
        name=enemy_def.name,
        attributes=stats.attributes,
        max_hp=max_hp,
        current_hp=max_hp,
        max_mp=stats.mp,
        current_mp=stats.mp,
        level=max(1, party_level),
        source_id=enemy_def.id,
    )
