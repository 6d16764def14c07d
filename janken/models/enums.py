"""
Janken enumerations.

These enums define the hands, sides, phases and outcomes used throughout
the session simulation.
"""

from enum import Enum


class HandType(str, Enum):
    """The three hands a player or an enemy can show.

    Attributes:
        ROCK: Closed fist, beats scissors
        SCISSORS: Two fingers, beats paper
        PAPER: Open palm, beats rock
    """
    ROCK = "rock"
    SCISSORS = "scissors"
    PAPER = "paper"


class Side(str, Enum):
    """Player slot an enemy falls toward.

    Attributes:
        LEFT: The player's left hand
        RIGHT: The player's right hand
    """
    LEFT = "left"
    RIGHT = "right"


class Phase(str, Enum):
    """Session phases.

    Transitions are not restricted, but the session only issues
    TITLE -> PLAYING, PLAYING -> GAME_OVER and GAME_OVER -> TITLE.

    Attributes:
        TITLE: Title screen, nothing simulated
        READY: Countdown before play (host driven)
        PLAYING: Active simulation
        GAME_OVER: Lives exhausted, waiting to return to title
    """
    TITLE = "title"
    READY = "ready"
    PLAYING = "playing"
    GAME_OVER = "gameover"


class Outcome(str, Enum):
    """Result of judging a player hand against an enemy hand."""
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class GameEventType(str, Enum):
    """Event types published by GameState.

    Each type has its own listener list; there is no catch-all bus.
    """
    PHASE_CHANGE = "phase-change"
    SCORE_CHANGE = "score-change"
    LIVES_CHANGE = "lives-change"
    GAME_OVER = "game-over"
