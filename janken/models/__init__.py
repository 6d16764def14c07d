"""
Data models for the Janken session simulation.

This package provides the enums and Pydantic models shared by the core:
- Enums: HandType, Side, Phase, Outcome, GameEventType
- Difficulty: DifficultyConfig, DifficultyTable
- Entities: Enemy, HandPair, CollisionResult, CollisionReport and snapshots

Usage:
    >>> from janken.models import HandType, Side, Enemy
    >>> from janken.models.difficulty import DifficultyTable
"""

from .enums import (
    HandType,
    Side,
    Phase,
    Outcome,
    GameEventType,
)

from .difficulty import (
    DifficultyConfig,
    DifficultyTable,
)

from .entities import (
    Enemy,
    HandPair,
    CollisionResult,
    CollisionReport,
    GameStateSnapshot,
    FrameSnapshot,
)

__all__ = [
    # Enums
    "HandType",
    "Side",
    "Phase",
    "Outcome",
    "GameEventType",
    # Difficulty
    "DifficultyConfig",
    "DifficultyTable",
    # Entities
    "Enemy",
    "HandPair",
    "CollisionResult",
    "CollisionReport",
    "GameStateSnapshot",
    "FrameSnapshot",
]
