"""
Janken - Enemy registry.

Owns the falling enemy hands and the optional preview marker. Enemies are
kept by stable id in spawn order, so removals never disturb each other.
"""
import itertools
from typing import Dict, Iterable, List, Optional

from janken import config
from janken.logging import get_logger
from janken.models import Enemy, HandType, Side

log = get_logger('enemies')


class EnemyRegistry:
    """Collection of active enemies plus a single non-colliding preview slot.

    Examples:
        >>> registry = EnemyRegistry()
        >>> enemy = registry.spawn(HandType.ROCK, Side.LEFT, speed=100.0)
        >>> registry.advance(1.0)
        []
        >>> registry.get(enemy.id).position
        530.0
    """

    def __init__(
        self,
        spawn_position: float = config.SPAWN_POSITION,
        despawn_position: float = config.PLAYER_BAND_POSITION - config.DESPAWN_MARGIN,
        preview_position: float = config.PREVIEW_POSITION,
    ):
        """Initialize the registry.

        Args:
            spawn_position: Where new enemies appear
            despawn_position: Enemies falling strictly below this are removed
            preview_position: Where the preview marker is shown
        """
        self.spawn_position = spawn_position
        self.despawn_position = despawn_position
        self.preview_position = preview_position

        self._enemies: Dict[int, Enemy] = {}  # insertion order == spawn order
        self._preview: Optional[Enemy] = None
        self._ids = itertools.count(1)

    def spawn(self, hand_type: HandType, side: Side, speed: float) -> Enemy:
        """Create an enemy at the spawn boundary.

        Args:
            hand_type: Hand the enemy shows
            side: Side it falls toward
            speed: Fall speed in units/second

        Returns:
            The new enemy
        """
        enemy = Enemy(
            id=next(self._ids),
            hand_type=hand_type,
            side=side,
            position=self.spawn_position,
            speed=speed,
        )
        self._enemies[enemy.id] = enemy
        log.debug("Spawned %s", enemy)
        return enemy

    def advance(self, dt: float) -> List[Enemy]:
        """Move every enemy down and drop those past the despawn boundary.

        Dropping an enemy here has no other effect; it simply disappears.
        The preview marker does not move.

        Args:
            dt: Elapsed time in seconds

        Returns:
            Enemies removed because they fell past the boundary
        """
        despawned: List[Enemy] = []
        for enemy_id, enemy in list(self._enemies.items()):
            moved = enemy.advanced(dt)
            if moved.position < self.despawn_position:
                del self._enemies[enemy_id]
                despawned.append(moved)
                log.debug("Despawned %s", moved)
            else:
                self._enemies[enemy_id] = moved
        return despawned

    def remove(self, enemy_id: int) -> Optional[Enemy]:
        """Remove an enemy by id.

        Returns:
            The removed enemy, or None if the id is unknown
        """
        return self._enemies.pop(enemy_id, None)

    def remove_many(self, enemy_ids: Iterable[int]) -> List[Enemy]:
        """Remove several enemies by id, ignoring unknown ids."""
        removed = []
        for enemy_id in enemy_ids:
            enemy = self.remove(enemy_id)
            if enemy is not None:
                removed.append(enemy)
        return removed

    def get(self, enemy_id: int) -> Optional[Enemy]:
        return self._enemies.get(enemy_id)

    def all(self) -> List[Enemy]:
        """Live enemies in spawn order, followed by the preview marker if set."""
        enemies = list(self._enemies.values())
        if self._preview is not None:
            enemies.append(self._preview)
        return enemies

    def clear(self) -> None:
        """Remove every enemy and the preview marker."""
        self._enemies.clear()
        self._preview = None

    # Preview marker

    @property
    def preview(self) -> Optional[Enemy]:
        return self._preview

    def set_preview(self, hand_type: HandType, side: Side) -> Enemy:
        """Create or replace the preview marker for the next spawn."""
        self._preview = Enemy(
            id=next(self._ids),
            hand_type=hand_type,
            side=side,
            position=self.preview_position,
            is_preview=True,
        )
        return self._preview

    def clear_preview(self) -> None:
        self._preview = None

    def consume_preview(self, speed: float) -> Optional[Enemy]:
        """Turn the preview into a real enemy and clear the slot.

        Args:
            speed: Fall speed for the spawned enemy

        Returns:
            The spawned enemy, or None when no preview was set
        """
        preview = self._preview
        if preview is None:
            return None
        self._preview = None
        return self.spawn(preview.hand_type, preview.side, speed)

    def __len__(self) -> int:
        return len(self._enemies)

    def __contains__(self, enemy_id: int) -> bool:
        return enemy_id in self._enemies
