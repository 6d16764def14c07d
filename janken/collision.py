"""
Janken - Collision resolver.

Finds enemies that reached the player band and judges them against the
hand the player currently shows on that side. The resolver only reports;
the session applies outcomes and removes the matched enemies by id.
"""
from typing import Iterable

from janken import config
from janken.judgement import judge
from janken.models import CollisionReport, CollisionResult, Enemy, HandPair


class CollisionResolver:
    """Band proximity check plus rock-paper-scissors judgement."""

    def __init__(
        self,
        threshold: float = config.COLLISION_THRESHOLD,
        player_band_position: float = config.PLAYER_BAND_POSITION,
    ):
        """Initialize the resolver.

        Args:
            threshold: Enemies closer than this (strictly) to the band collide
            player_band_position: Position of the player band on the vertical axis
        """
        self.threshold = threshold
        self.player_band_position = player_band_position

    def in_range(self, enemy: Enemy) -> bool:
        """True when the enemy is strictly within the threshold of the band."""
        return abs(enemy.position - self.player_band_position) < self.threshold

    def resolve(self, hands: HandPair, enemies: Iterable[Enemy]) -> CollisionReport:
        """Judge every enemy in the band against the player's current hands.

        Preview markers never collide. A side with no detected hand produces
        no judgement even when an enemy is in range. Each enemy yields at
        most one result; several enemies on one side may all collide in the
        same tick.

        Args:
            hands: Player hands sampled for this tick
            enemies: Registry snapshot

        Returns:
            CollisionReport with results in registry order
        """
        results = []
        for enemy in enemies:
            if enemy.is_preview:
                continue
            player_hand = hands.for_side(enemy.side)
            if player_hand is None or not self.in_range(enemy):
                continue
            results.append(CollisionResult(
                enemy_id=enemy.id,
                side=enemy.side,
                outcome=judge(player_hand, enemy.hand_type),
                player_hand=player_hand,
                enemy_hand=enemy.hand_type,
            ))
        return CollisionReport(results=results)
