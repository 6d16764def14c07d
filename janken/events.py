"""
Janken Event Types

Defines the payload GameState hands to its listeners. Events are delivered
synchronously, per event type, in registration order. Listeners receive an
immutable event and must not call back into GameState mutators.
"""

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from janken.models.enums import GameEventType


class GameStateEvent(BaseModel):
    """
    Notification published by GameState.

    Payloads by type:
    - PHASE_CHANGE: the new Phase
    - SCORE_CHANGE: the new score
    - LIVES_CHANGE: the new lives value
    - GAME_OVER: {"score": final score}
    """
    type: GameEventType = Field(..., description="Which state changed")
    data: Any = Field(default=None, description="Type-specific payload")

    model_config = ConfigDict(frozen=True)


GameStateListener = Callable[[GameStateEvent], None]


class ReentrantMutationError(RuntimeError):
    """Raised when a listener tries to mutate GameState during delivery."""
    pass
