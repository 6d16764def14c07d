"""
Player hand sources.

PlayerHandSource is the interface the session samples each tick. The
keyboard source needs pygame; import it from
``janken.input.sources.keyboard`` when a display loop is available.
"""
from janken.input.sources.base import PlayerHandSource
from janken.input.sources.gesture import GestureHandSource, GESTURE_MAPPING
from janken.input.sources.scripted import (
    FixedHandSource,
    ScriptedHandSource,
    CounterHandSource,
)

__all__ = [
    'PlayerHandSource',
    'GestureHandSource',
    'GESTURE_MAPPING',
    'FixedHandSource',
    'ScriptedHandSource',
    'CounterHandSource',
]
