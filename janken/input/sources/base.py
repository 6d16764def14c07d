"""
Base Hand Source - Abstract interface for player hand backends.

The session samples one source once per tick. Keyboard debugging, gesture
recognition and scripted bots all implement this interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from janken.models import HandPair, HandType


class PlayerHandSource(ABC):
    """Abstract base class for player hand sources.

    ``None`` on a side means no hand is detected there; the session makes
    no judgement for that side even when an enemy is in the band.
    """

    @abstractmethod
    def left_hand(self) -> Optional[HandType]:
        """Hand currently shown on the left, or None."""
        pass

    @abstractmethod
    def right_hand(self) -> Optional[HandType]:
        """Hand currently shown on the right, or None."""
        pass

    def update(self, dt: float) -> None:
        """Advance the source before it is sampled.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    def snapshot(self) -> HandPair:
        """Sample both sides at once."""
        return HandPair(left=self.left_hand(), right=self.right_hand())
