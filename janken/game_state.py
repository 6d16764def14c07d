"""Phase, score, lives and defeated-count tracking for a Janken session.

GameState is mutated only through its own methods. Every change that the
UI cares about is published to listeners registered for that event type:

    state = GameState(initial_lives=3)
    state.on(GameEventType.GAME_OVER, lambda event: print(event.data["score"]))
    state.lose_life(3)   # prints the score once

Delivery is synchronous and in registration order. Listeners must treat
the state as read-only: calling a mutator from inside a listener raises
ReentrantMutationError.
"""
from typing import Dict, List

from janken import config
from janken.events import GameStateEvent, GameStateListener, ReentrantMutationError
from janken.models import GameEventType, GameStateSnapshot, Phase


class GameState:
    """Scalar game state with per-type event listeners."""

    def __init__(
        self,
        initial_lives: int = config.INITIAL_LIVES,
        defeats_per_level: int = config.DEFEATS_PER_LEVEL,
    ):
        if initial_lives < 1:
            raise ValueError(f"initial_lives must be at least 1, got {initial_lives}")
        if defeats_per_level < 1:
            raise ValueError(f"defeats_per_level must be at least 1, got {defeats_per_level}")

        self._max_lives = initial_lives
        self._defeats_per_level = defeats_per_level

        self._phase = Phase.TITLE
        self._score = config.INITIAL_SCORE
        self._lives = initial_lives
        self._defeated_count = 0

        self._listeners: Dict[GameEventType, List[GameStateListener]] = {
            event_type: [] for event_type in GameEventType
        }
        self._delivering = 0

    # Listeners

    def on(self, event_type: GameEventType, callback: GameStateListener) -> None:
        """Register a listener; registering the same callback twice is a no-op."""
        listeners = self._listeners[GameEventType(event_type)]
        if callback not in listeners:
            listeners.append(callback)

    def off(self, event_type: GameEventType, callback: GameStateListener) -> None:
        """Unregister a listener; unknown callbacks are ignored."""
        listeners = self._listeners[GameEventType(event_type)]
        if callback in listeners:
            listeners.remove(callback)

    def _emit(self, event_type: GameEventType, data=None) -> None:
        event = GameStateEvent(type=event_type, data=data)
        self._delivering += 1
        try:
            for callback in list(self._listeners[event_type]):
                callback(event)
        finally:
            self._delivering -= 1

    def _ensure_not_delivering(self, operation: str) -> None:
        if self._delivering:
            raise ReentrantMutationError(
                f"GameState.{operation}() called from inside an event listener"
            )

    # Read access

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def max_lives(self) -> int:
        return self._max_lives

    @property
    def defeated_count(self) -> int:
        return self._defeated_count

    @property
    def defeats_per_level(self) -> int:
        return self._defeats_per_level

    @property
    def difficulty_level(self) -> int:
        """Always derived from the defeated count."""
        return self._defeated_count // self._defeats_per_level + 1

    @property
    def is_game_over(self) -> bool:
        return self._lives == 0

    def snapshot(self) -> GameStateSnapshot:
        return GameStateSnapshot(
            phase=self._phase,
            score=self._score,
            lives=self._lives,
            defeated_count=self._defeated_count,
            difficulty_level=self.difficulty_level,
        )

    # Mutators

    def set_phase(self, phase: Phase) -> None:
        """Change phase; emits PHASE_CHANGE only when the phase actually changes."""
        self._ensure_not_delivering('set_phase')
        phase = Phase(phase)
        if phase != self._phase:
            self._phase = phase
            self._emit(GameEventType.PHASE_CHANGE, phase)

    def add_score(self, points: int) -> None:
        """Add points to the score.

        Raises:
            ValueError: If points is negative (score never decreases)
        """
        self._ensure_not_delivering('add_score')
        if points < 0:
            raise ValueError(f"Points must be non-negative, got {points}")
        self._score += points
        self._emit(GameEventType.SCORE_CHANGE, self._score)

    def reset_score(self) -> None:
        self._ensure_not_delivering('reset_score')
        self._score = config.INITIAL_SCORE
        self._emit(GameEventType.SCORE_CHANGE, self._score)

    def lose_life(self, amount: int = 1) -> None:
        """Remove lives, clamping at zero.

        Emits LIVES_CHANGE, then GAME_OVER carrying the current score if
        this call took lives from above zero to zero. Calls made while lives
        are already zero never emit GAME_OVER again.
        """
        self._ensure_not_delivering('lose_life')
        if amount < 0:
            raise ValueError(f"Life loss must be non-negative, got {amount}")
        was_alive = self._lives > 0
        self._lives = max(0, self._lives - amount)
        self._emit(GameEventType.LIVES_CHANGE, self._lives)

        if was_alive and self._lives == 0:
            self._emit(GameEventType.GAME_OVER, {"score": self._score})

    def reset_lives(self) -> None:
        self._ensure_not_delivering('reset_lives')
        self._lives = self._max_lives
        self._emit(GameEventType.LIVES_CHANGE, self._lives)

    def increment_defeated_count(self) -> None:
        self._ensure_not_delivering('increment_defeated_count')
        self._defeated_count += 1

    def reset_defeated_count(self) -> None:
        self._ensure_not_delivering('reset_defeated_count')
        self._defeated_count = 0

    def reset(self) -> None:
        """Start-of-game reset: score 0, defeated 0, lives full. Phase is untouched."""
        self._ensure_not_delivering('reset')
        self._score = config.INITIAL_SCORE
        self._lives = self._max_lives
        self._defeated_count = 0

        self._emit(GameEventType.SCORE_CHANGE, self._score)
        self._emit(GameEventType.LIVES_CHANGE, self._lives)

    def __repr__(self) -> str:
        return (f"GameState(phase={self._phase.value}, score={self._score}, "
                f"lives={self._lives}/{self._max_lives}, defeated={self._defeated_count}, "
                f"level={self.difficulty_level})")
