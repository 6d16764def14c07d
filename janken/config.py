"""
Janken - Configuration loader.

Values are read once at import time from the environment, after loading an
optional ``.env`` file that sits next to this module. Nothing here changes
at runtime; sessions receive a ``GameRules`` instance built from these
constants, or an explicit one.
"""
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from janken.models.difficulty import DifficultyConfig, DifficultyTable

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Game rules
INITIAL_LIVES = _get_int('INITIAL_LIVES', 3)
INITIAL_SCORE = 0
SCORE_PER_WIN = _get_int('SCORE_PER_WIN', 10)
LIFE_LOSS_ON_LOSE = _get_int('LIFE_LOSS_ON_LOSE', 3)
LIFE_LOSS_ON_DRAW = _get_int('LIFE_LOSS_ON_DRAW', 1)
DEFEATS_PER_LEVEL = _get_int('DEFEATS_PER_LEVEL', 5)  # level up every N wins

# Vertical axis (logical units, player band at the bottom)
PLAYER_BAND_POSITION = _get_float('PLAYER_BAND_POSITION', 0.0)
SPAWN_POSITION = _get_float('SPAWN_POSITION', 630.0)
PREVIEW_POSITION = _get_float('PREVIEW_POSITION', 500.0)
COLLISION_THRESHOLD = _get_float('COLLISION_THRESHOLD', 50.0)
DESPAWN_MARGIN = _get_float('DESPAWN_MARGIN', 100.0)  # below the band

# Enemy movement
ENEMY_BASE_SPEED = _get_float('ENEMY_BASE_SPEED', 100.0)  # units/second

# Telegraph the next spawn with a preview marker
PREVIEW_ENABLED = _get_bool('PREVIEW_ENABLED', False)

# High score persistence
HIGH_SCORE_KEY = 'janken_high_score'
HIGH_SCORE_FILE = os.getenv(
    'HIGH_SCORE_FILE',
    str(Path.home() / '.local' / 'share' / 'janken' / 'high_score.json'),
)

# Difficulty progression: one entry per level, every DEFEATS_PER_LEVEL wins.
# Levels past the table keep level 6's pattern and keep getting faster.
DIFFICULTY_LEVELS: List[DifficultyConfig] = [
    DifficultyConfig(level=1, speed_multiplier=1.0, spawn_interval=3.0,
                     both_hands=False, random_hands=False),  # one side only
    DifficultyConfig(level=2, speed_multiplier=1.2, spawn_interval=2.5,
                     both_hands=True, random_hands=False),   # both sides, same hand
    DifficultyConfig(level=3, speed_multiplier=1.5, spawn_interval=2.0,
                     both_hands=True, random_hands=True),    # sometimes different hands
    DifficultyConfig(level=4, speed_multiplier=1.8, spawn_interval=1.5,
                     both_hands=True, random_hands=True),
    DifficultyConfig(level=5, speed_multiplier=2.2, spawn_interval=1.2,
                     both_hands=True, random_hands=True),
    DifficultyConfig(level=6, speed_multiplier=2.5, spawn_interval=1.0,
                     both_hands=True, random_hands=True),
]

DIFFICULTY_TABLE = DifficultyTable(
    name='classic',
    description='Default progression: one hand, then both, then mixed hands',
    levels=DIFFICULTY_LEVELS,
    extra_speed_per_level=0.3,
    interval_step_per_level=0.1,
    min_spawn_interval=0.5,
)


class GameRules(BaseModel):
    """
    Load-time game rules for one session.

    Defaults come from the environment-backed constants above. Tests and
    hosts can pass explicit values instead.
    """
    model_config = {"frozen": True}

    initial_lives: int = Field(default=INITIAL_LIVES, ge=1)
    score_per_win: int = Field(default=SCORE_PER_WIN, ge=0)
    life_loss_on_lose: int = Field(default=LIFE_LOSS_ON_LOSE, ge=0)
    life_loss_on_draw: int = Field(default=LIFE_LOSS_ON_DRAW, ge=0)
    defeats_per_level: int = Field(default=DEFEATS_PER_LEVEL, ge=1)
    collision_threshold: float = Field(default=COLLISION_THRESHOLD, gt=0.0)
    despawn_margin: float = Field(default=DESPAWN_MARGIN, ge=0.0)
    enemy_base_speed: float = Field(default=ENEMY_BASE_SPEED, gt=0.0)
    player_band_position: float = Field(default=PLAYER_BAND_POSITION)
    spawn_position: float = Field(default=SPAWN_POSITION)
    preview_position: float = Field(default=PREVIEW_POSITION)
    preview_enabled: bool = Field(default=PREVIEW_ENABLED)

    @model_validator(mode='after')
    def validate_axis(self) -> 'GameRules':
        """Enemies must start above the band so they can fall into it."""
        if self.spawn_position <= self.player_band_position:
            raise ValueError(
                f"spawn_position ({self.spawn_position}) must be above "
                f"player_band_position ({self.player_band_position})"
            )
        return self

    @property
    def despawn_position(self) -> float:
        """Position below which enemies are removed unconditionally."""
        return self.player_band_position - self.despawn_margin
