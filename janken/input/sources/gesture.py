"""
Gesture hand source.

Adapts the output of an external gesture recognizer (label plus handedness
per detected hand) to player hands. Recognition itself happens elsewhere;
this source only maps labels and handles the camera mirror.
"""

from typing import Dict, Iterable, Optional, Tuple

from janken.input.sources.base import PlayerHandSource
from janken.logging import get_logger
from janken.models import HandType, Side

log = get_logger('gesture')

GESTURE_MAPPING: Dict[str, HandType] = {
    'Closed_Fist': HandType.ROCK,
    'Victory': HandType.SCISSORS,
    'Open_Palm': HandType.PAPER,
}


class GestureHandSource(PlayerHandSource):
    """Hand source fed with recognizer detections once per camera frame.

    A front camera shows a mirror image, so by default a hand the recognizer
    labels "Left" is the player's right hand and vice versa.

    Examples:
        >>> source = GestureHandSource()
        >>> source.update_from_gestures([('Victory', 'Left')])
        >>> source.right_hand()
        <HandType.SCISSORS: 'scissors'>
        >>> source.left_hand() is None
        True
    """

    def __init__(self, mirrored: bool = True, mapping: Optional[Dict[str, HandType]] = None):
        self.mirrored = mirrored
        self._mapping = mapping if mapping is not None else GESTURE_MAPPING
        self._hands: Dict[Side, Optional[HandType]] = {Side.LEFT: None, Side.RIGHT: None}

    def left_hand(self) -> Optional[HandType]:
        return self._hands[Side.LEFT]

    def right_hand(self) -> Optional[HandType]:
        return self._hands[Side.RIGHT]

    def _side_for(self, handedness: str) -> Optional[Side]:
        label = handedness.strip().lower()
        if label not in ('left', 'right'):
            return None
        side = Side(label)
        if self.mirrored:
            side = Side.RIGHT if side == Side.LEFT else Side.LEFT
        return side

    def update_from_gestures(self, detections: Iterable[Tuple[str, str]]) -> None:
        """Replace the current hands with one frame of detections.

        Sides without a recognised gesture become None. Unknown gesture
        labels and handedness values are ignored.

        Args:
            detections: (gesture label, handedness label) per detected hand
        """
        self._hands = {Side.LEFT: None, Side.RIGHT: None}
        for gesture, handedness in detections:
            hand = self._mapping.get(gesture)
            side = self._side_for(handedness)
            if hand is None or side is None:
                log.trace("Ignoring detection %s/%s", gesture, handedness)
                continue
            self._hands[side] = hand

    def clear(self) -> None:
        """Forget the last frame, e.g. when the recognizer loses tracking."""
        self._hands = {Side.LEFT: None, Side.RIGHT: None}
