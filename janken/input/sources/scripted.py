"""
Scripted hand sources for tests, replays and the headless runner.
"""

import random
from typing import List, Optional, Sequence

from janken.enemies import EnemyRegistry
from janken.input.sources.base import PlayerHandSource
from janken.judgement import winning_hand
from janken.models import Enemy, HandPair, HandType, Side

HAND_TYPES: List[HandType] = [HandType.ROCK, HandType.SCISSORS, HandType.PAPER]


class FixedHandSource(PlayerHandSource):
    """Shows the same hands until told otherwise."""

    def __init__(self, left: Optional[HandType] = None, right: Optional[HandType] = None):
        self._hands = HandPair(left=left, right=right)

    def set_hands(self, left: Optional[HandType] = None, right: Optional[HandType] = None) -> None:
        self._hands = HandPair(left=left, right=right)

    def left_hand(self) -> Optional[HandType]:
        return self._hands.left

    def right_hand(self) -> Optional[HandType]:
        return self._hands.right


class ScriptedHandSource(PlayerHandSource):
    """Plays back one HandPair per update.

    Before the first update no hand is shown. When the script runs out the
    source either loops or keeps showing the last frame.

    Args:
        frames: Hands to show, one per update
        loop: Restart from the first frame after the last one
    """

    def __init__(self, frames: Sequence[HandPair], loop: bool = False):
        self._frames = list(frames)
        self._loop = loop
        self._index = -1
        self._current = HandPair()

    def update(self, dt: float) -> None:
        if not self._frames:
            return
        self._index += 1
        if self._index >= len(self._frames):
            if not self._loop:
                self._index = len(self._frames) - 1
                return
            self._index = 0
        self._current = self._frames[self._index]

    def left_hand(self) -> Optional[HandType]:
        return self._current.left

    def right_hand(self) -> Optional[HandType]:
        return self._current.right


class CounterHandSource(PlayerHandSource):
    """Bot that answers the nearest enemy on each side.

    With probability ``accuracy`` it shows the hand that beats the lowest
    enemy on a side; otherwise it shows a random hand. Sides with no enemy
    keep their previous hand.

    Args:
        registry: Registry to watch
        accuracy: Chance of picking the winning hand, 0.0 to 1.0
        rng: Random source; seed it for reproducible runs
    """

    def __init__(
        self,
        registry: EnemyRegistry,
        accuracy: float = 1.0,
        rng: Optional[random.Random] = None,
    ):
        if not 0.0 <= accuracy <= 1.0:
            raise ValueError(f"accuracy must be between 0 and 1, got {accuracy}")
        self.registry = registry
        self.accuracy = accuracy
        self.rng = rng if rng is not None else random.Random()
        self._hands = {Side.LEFT: HandType.ROCK, Side.RIGHT: HandType.ROCK}

    def _nearest(self, side: Side) -> Optional[Enemy]:
        candidates = [e for e in self.registry.all() if e.side == side and not e.is_preview]
        if not candidates:
            return None
        return min(candidates, key=lambda e: e.position)

    def update(self, dt: float) -> None:
        for side in (Side.LEFT, Side.RIGHT):
            enemy = self._nearest(side)
            if enemy is None:
                continue
            if self.rng.random() < self.accuracy:
                self._hands[side] = winning_hand(enemy.hand_type)
            else:
                self._hands[side] = self.rng.choice(HAND_TYPES)

    def left_hand(self) -> Optional[HandType]:
        return self._hands[Side.LEFT]

    def right_hand(self) -> Optional[HandType]:
        return self._hands[Side.RIGHT]
