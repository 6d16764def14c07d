"""
Janken - rock-paper-scissors reflex game core.

Enemy hands fall toward the player's band on two sides; the player answers
each one with a hand of their own. This package is the simulation only:
rendering, audio and camera hand tracking live in the host, which drives a
GameSession with ``tick(dt)`` and draws the returned FrameSnapshot.

    from janken import GameSession
    from janken.input import CounterHandSource

    session = GameSession(rng=random.Random(7))
    session.hand_source = CounterHandSource(session.registry)
    session.start()
"""

from janken.collision import CollisionResolver
from janken.config import GameRules
from janken.difficulty import DifficultyCurve
from janken.enemies import EnemyRegistry
from janken.events import GameStateEvent, ReentrantMutationError
from janken.game_state import GameState
from janken.high_score import HighScoreStore, InMemoryHighScoreStore, JsonHighScoreStore
from janken.judgement import judge, winning_hand
from janken.models import (
    CollisionReport,
    CollisionResult,
    DifficultyConfig,
    DifficultyTable,
    Enemy,
    FrameSnapshot,
    GameEventType,
    GameStateSnapshot,
    HandPair,
    HandType,
    Outcome,
    Phase,
    Side,
)
from janken.session import GameSession
from janken.table_loader import DifficultyTableLoader

__version__ = '0.1.0'

__all__ = [
    'GameSession',
    'GameState',
    'GameRules',
    'DifficultyCurve',
    'DifficultyTableLoader',
    'EnemyRegistry',
    'CollisionResolver',
    'HighScoreStore',
    'InMemoryHighScoreStore',
    'JsonHighScoreStore',
    'GameStateEvent',
    'ReentrantMutationError',
    'judge',
    'winning_hand',
    'CollisionReport',
    'CollisionResult',
    'DifficultyConfig',
    'DifficultyTable',
    'Enemy',
    'FrameSnapshot',
    'GameEventType',
    'GameStateSnapshot',
    'HandPair',
    'HandType',
    'Outcome',
    'Phase',
    'Side',
]
