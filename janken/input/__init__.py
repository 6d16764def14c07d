"""
Player input for Janken.

Re-exports the hand source interface and the camera-free sources.
"""
from janken.input.sources import (
    PlayerHandSource,
    GestureHandSource,
    FixedHandSource,
    ScriptedHandSource,
    CounterHandSource,
)

__all__ = [
    'PlayerHandSource',
    'GestureHandSource',
    'FixedHandSource',
    'ScriptedHandSource',
    'CounterHandSource',
]
