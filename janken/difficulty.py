"""
Janken - Difficulty curve.

Maps the number of defeated enemies to a difficulty configuration and
picks the hands for the next spawn. Level lookups are pure; the only
randomness is the injected ``random.Random`` used for hand generation.
"""
import random
from typing import List, Optional

from janken import config
from janken.models import DifficultyConfig, DifficultyTable, HandPair, HandType, Side

HAND_TYPES: List[HandType] = [HandType.ROCK, HandType.SCISSORS, HandType.PAPER]


class DifficultyCurve:
    """Level progression driven by defeated count, with extrapolation past the table."""

    def __init__(
        self,
        table: Optional[DifficultyTable] = None,
        defeats_per_level: int = config.DEFEATS_PER_LEVEL,
        base_speed: float = config.ENEMY_BASE_SPEED,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the curve.

        Args:
            table: Difficulty table (default: config.DIFFICULTY_TABLE)
            defeats_per_level: Wins needed per level
            base_speed: Enemy fall speed at multiplier 1.0 (units/second)
            rng: Random source for hand generation; seed it for replays
        """
        if defeats_per_level < 1:
            raise ValueError(f"defeats_per_level must be at least 1, got {defeats_per_level}")

        self.table = table if table is not None else config.DIFFICULTY_TABLE
        self.defeats_per_level = defeats_per_level
        self.base_speed = base_speed
        self.rng = rng if rng is not None else random.Random()

    def level_for(self, defeated_count: int) -> int:
        """Level for a defeated count: one level per ``defeats_per_level`` wins."""
        return max(0, defeated_count) // self.defeats_per_level + 1

    def config_for(self, defeated_count: int) -> DifficultyConfig:
        """Difficulty configuration for a defeated count.

        Levels inside the table return the entry as-is. Past the table, the
        last entry's pattern is kept while speed rises and the spawn
        interval shrinks down to the table's minimum.

        Args:
            defeated_count: Enemies defeated this session

        Returns:
            DifficultyConfig for the derived level
        """
        level = self.level_for(defeated_count)
        if level <= self.table.max_level:
            return self.table.levels[level - 1]

        last = self.table.levels[-1]
        extra_levels = level - last.level
        return last.model_copy(update={
            'level': level,
            'speed_multiplier': last.speed_multiplier + extra_levels * self.table.extra_speed_per_level,
            'spawn_interval': max(
                self.table.min_spawn_interval,
                last.spawn_interval - extra_levels * self.table.interval_step_per_level,
            ),
        })

    def speed_for(self, difficulty: DifficultyConfig) -> float:
        """Fall speed in units/second for a configuration."""
        return self.base_speed * difficulty.speed_multiplier

    def generate_next_hands(self, difficulty: DifficultyConfig) -> HandPair:
        """Pick the hands for the next spawn.

        - one side only: random side, random hand
        - both sides with random_hands: half the time two independent hands
        - otherwise: the same random hand on both sides

        Args:
            difficulty: Configuration that decides the spawn pattern

        Returns:
            HandPair with one or two hands set
        """
        if not difficulty.both_hands:
            side = Side.LEFT if self.rng.random() < 0.5 else Side.RIGHT
            hand = self.rng.choice(HAND_TYPES)
            if side == Side.LEFT:
                return HandPair(left=hand)
            return HandPair(right=hand)

        left = self.rng.choice(HAND_TYPES)
        if difficulty.random_hands and self.rng.random() < 0.5:
            return HandPair(left=left, right=self.rng.choice(HAND_TYPES))
        return HandPair(left=left, right=left)
