"""
Keyboard hand source for debugging without a camera.

Keys 1/2/3 set the left hand to rock/scissors/paper, keys 4/5/6 set the
right hand. Both hands start as rock and keep their last value.
"""

from typing import Dict, Optional, Tuple

import pygame

from janken.input.sources.base import PlayerHandSource
from janken.logging import get_logger
from janken.models import HandType, Side

log = get_logger('keyboard')

KEY_BINDINGS: Dict[int, Tuple[Side, HandType]] = {
    pygame.K_1: (Side.LEFT, HandType.ROCK),
    pygame.K_2: (Side.LEFT, HandType.SCISSORS),
    pygame.K_3: (Side.LEFT, HandType.PAPER),
    pygame.K_4: (Side.RIGHT, HandType.ROCK),
    pygame.K_5: (Side.RIGHT, HandType.SCISSORS),
    pygame.K_6: (Side.RIGHT, HandType.PAPER),
}


class KeyboardHandSource(PlayerHandSource):
    """Keyboard-driven hand source using pygame events.

    Examples:
        >>> source = KeyboardHandSource()
        >>> source.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_3))
        True
        >>> source.left_hand()
        <HandType.PAPER: 'paper'>
    """

    def __init__(
        self,
        left: Optional[HandType] = HandType.ROCK,
        right: Optional[HandType] = HandType.ROCK,
        bindings: Optional[Dict[int, Tuple[Side, HandType]]] = None,
    ):
        """Initialize the keyboard source.

        Args:
            left: Starting left hand
            right: Starting right hand
            bindings: Key code -> (side, hand) map (default: KEY_BINDINGS)
        """
        self._hands: Dict[Side, Optional[HandType]] = {Side.LEFT: left, Side.RIGHT: right}
        self._bindings = bindings if bindings is not None else KEY_BINDINGS

    def left_hand(self) -> Optional[HandType]:
        return self._hands[Side.LEFT]

    def right_hand(self) -> Optional[HandType]:
        return self._hands[Side.RIGHT]

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply a single pygame event.

        Returns:
            True if the event was a bound key press and changed a hand
        """
        if event.type != pygame.KEYDOWN:
            return False

        binding = self._bindings.get(event.key)
        if binding is None:
            return False

        side, hand = binding
        self._hands[side] = hand
        log.debug("%s hand -> %s", side.value, hand.value)
        return True

    def update(self, dt: float) -> None:
        """Process pending pygame events.

        Bound key presses are consumed; everything else is re-posted so the
        host loop still sees QUIT and other keys.

        Args:
            dt: Delta time in seconds since last update (unused)
        """
        for event in pygame.event.get():
            if not self.handle_event(event):
                pygame.event.post(event)
