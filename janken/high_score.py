"""
High score persistence.

The session only needs two calls at game over: read the stored best score
and offer a new one. Stores write only when the offered score beats the
stored value.

Usage:
    store = JsonHighScoreStore("~/.local/share/janken/high_score.json")
    if store.save_high_score(session.state.score):
        print("New record!")
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from janken import config
from janken.logging import get_logger

log = get_logger('high_score')


class HighScoreStore(ABC):
    """Read/write contract for the persisted high score."""

    @abstractmethod
    def get_high_score(self) -> int:
        """Stored high score, 0 when nothing has been saved."""
        pass

    @abstractmethod
    def save_high_score(self, score: int) -> bool:
        """Store ``score`` if it beats the current high score.

        Returns:
            True if a new record was written
        """
        pass


class InMemoryHighScoreStore(HighScoreStore):
    """Process-local store, used by tests and when no file is configured."""

    def __init__(self, initial: int = 0):
        self._high_score = initial

    def get_high_score(self) -> int:
        return self._high_score

    def save_high_score(self, score: int) -> bool:
        if score > self._high_score:
            self._high_score = score
            return True
        return False


class JsonHighScoreStore(HighScoreStore):
    """
    Keyed high score stored in a small JSON document.

    The file holds a JSON object; the score lives under ``key`` so several
    values can share the file. Other keys are preserved on write.

    Args:
        path: JSON file location (parent directories are created on write)
        key: Key holding the high score
    """

    def __init__(
        self,
        path: Union[str, Path] = config.HIGH_SCORE_FILE,
        key: str = config.HIGH_SCORE_KEY,
    ):
        self.path = Path(path).expanduser()
        self.key = key

    def _load(self) -> Dict[str, Any]:
        """Load the stored document, empty when missing or unreadable."""
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            log.warning("Ignoring corrupt or unreadable high score file %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            log.warning("Ignoring high score file %s: expected an object", self.path)
            return {}
        return data

    def get_high_score(self) -> int:
        value = self._load().get(self.key, 0)
        try:
            return int(value)
        except (TypeError, ValueError):
            log.warning("Ignoring non-numeric high score %r in %s", value, self.path)
            return 0

    def save_high_score(self, score: int) -> bool:
        data = self._load()
        current = data.get(self.key, 0)
        try:
            current = int(current)
        except (TypeError, ValueError):
            current = 0

        if score <= current:
            return False

        data[self.key] = score
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

        log.info("New high score %d saved to %s", score, self.path)
        return True
