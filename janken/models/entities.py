"""
Janken simulation data models.

These models describe falling enemies, player hand snapshots, collision
results and the per-tick snapshot handed to renderers.
"""

from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .enums import HandType, Side, Phase, Outcome


class Enemy(BaseModel):
    """Immutable enemy hand state.

    Position lives on a single logical vertical axis. Enemies spawn high
    and fall toward the player band; ``advanced`` returns the moved copy.

    Attributes:
        id: Stable identifier, unique for the registry's lifetime
        hand_type: Hand the enemy shows
        side: Side it falls toward
        position: Current position on the vertical axis
        speed: Fall speed in units per second
        is_preview: True for the non-colliding preview marker

    Examples:
        >>> enemy = Enemy(id=1, hand_type=HandType.ROCK, side=Side.LEFT,
        ...               position=630.0, speed=100.0)
        >>> enemy.advanced(0.5).position
        580.0
    """
    id: int
    hand_type: HandType
    side: Side
    position: float
    speed: float = 0.0
    is_preview: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator('speed')
    @classmethod
    def validate_speed(cls, v: float) -> float:
        """Validate speed is non-negative."""
        if v < 0:
            raise ValueError(f'Speed must be non-negative, got {v}')
        return v

    def advanced(self, dt: float) -> 'Enemy':
        """Return a copy moved ``speed * dt`` toward the player band."""
        return self.model_copy(update={'position': self.position - self.speed * dt})

    def __str__(self) -> str:
        """String representation for debugging."""
        kind = "preview" if self.is_preview else "enemy"
        return (f"{kind}#{self.id}({self.hand_type.value}, {self.side.value}, "
                f"y={self.position:.1f}, v={self.speed:.1f})")


class HandPair(BaseModel):
    """One hand per side, either of which may be missing.

    Used both for the player's per-tick snapshot and for the hands the
    difficulty curve picks for the next spawn.
    """
    left: Optional[HandType] = None
    right: Optional[HandType] = None

    model_config = ConfigDict(frozen=True)

    def for_side(self, side: Side) -> Optional[HandType]:
        """Hand shown on ``side``, or None."""
        return self.left if side == Side.LEFT else self.right

    def items(self) -> Iterator[Tuple[Side, HandType]]:
        """Iterate (side, hand) for the sides that have a hand, left first."""
        if self.left is not None:
            yield Side.LEFT, self.left
        if self.right is not None:
            yield Side.RIGHT, self.right

    @property
    def is_empty(self) -> bool:
        return self.left is None and self.right is None


class CollisionResult(BaseModel):
    """Judgement produced when an enemy reaches the player band."""
    enemy_id: int
    side: Side
    outcome: Outcome
    player_hand: HandType
    enemy_hand: HandType

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return (f"{self.outcome.value}: {self.player_hand.value} vs "
                f"{self.enemy_hand.value} ({self.side.value}, enemy #{self.enemy_id})")


class CollisionReport(BaseModel):
    """All judgements for one tick, in registry order."""
    results: List[CollisionResult] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def matched_ids(self) -> List[int]:
        """Ids of the enemies that produced a result and must be removed."""
        return [result.enemy_id for result in self.results]

    def __len__(self) -> int:
        return len(self.results)


class GameStateSnapshot(BaseModel):
    """Read-only copy of the scalar game state."""
    phase: Phase
    score: int = Field(ge=0)
    lives: int = Field(ge=0)
    defeated_count: int = Field(ge=0)
    difficulty_level: int = Field(ge=1)

    model_config = ConfigDict(frozen=True)


class FrameSnapshot(BaseModel):
    """Everything a renderer needs after a tick.

    Attributes:
        phase: Session phase after the tick
        score: Current score
        lives: Remaining lives
        defeated_count: Enemies beaten this session
        difficulty_level: Level derived from defeated_count
        enemies: Live enemies in spawn order, then the preview marker if any
        results: Judgements made during this tick
        spawned: Enemies created during this tick
        despawned: Enemies that fell past the despawn boundary this tick
    """
    phase: Phase
    score: int
    lives: int
    defeated_count: int
    difficulty_level: int
    enemies: List[Enemy] = Field(default_factory=list)
    results: List[CollisionResult] = Field(default_factory=list)
    spawned: List[Enemy] = Field(default_factory=list)
    despawned: List[Enemy] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
