"""
Pydantic v2 models for difficulty configuration.

These models validate the difficulty table, whether it comes from the
built-in defaults or from a YAML file, and describe the immutable
configuration handed out by the difficulty curve for each level.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class DifficultyConfig(BaseModel):
    """
    Spawn behaviour for a single difficulty level.

    Instances are immutable; the curve builds a new one when it
    extrapolates past the end of the table.
    """
    model_config = {"frozen": True}

    level: int = Field(
        description="Level number (1-based)",
        ge=1
    )
    speed_multiplier: float = Field(
        description="Multiplier applied to the enemy base speed",
        gt=0.0
    )
    spawn_interval: float = Field(
        description="Seconds between spawns",
        gt=0.0
    )
    both_hands: bool = Field(
        default=False,
        description="Spawn on both sides at once"
    )
    random_hands: bool = Field(
        default=False,
        description="When spawning on both sides, sometimes use different hands"
    )


class DifficultyTable(BaseModel):
    """
    Ordered difficulty table plus the rules for extrapolating past its end.

    Levels beyond the last entry keep the last entry's spawn pattern, get
    faster by ``extra_speed_per_level`` per level and spawn more often by
    ``interval_step_per_level`` per level, never below ``min_spawn_interval``.
    """
    model_config = {"frozen": True}

    name: str = Field(
        default="classic",
        description="Identifier of the table"
    )
    description: str = Field(
        default="",
        description="Human-readable description"
    )
    levels: List[DifficultyConfig] = Field(
        description="Level entries, numbered 1..N in order",
        min_length=1
    )
    extra_speed_per_level: float = Field(
        default=0.3,
        description="Speed multiplier added per level past the table",
        ge=0.0
    )
    interval_step_per_level: float = Field(
        default=0.1,
        description="Seconds removed from the spawn interval per level past the table",
        ge=0.0
    )
    min_spawn_interval: float = Field(
        default=0.5,
        description="Lower bound for extrapolated spawn intervals",
        gt=0.0
    )

    @field_validator("levels")
    @classmethod
    def validate_levels(cls, v: List[DifficultyConfig]) -> List[DifficultyConfig]:
        """Ensure levels are listed in order starting from 1."""
        level_numbers = [entry.level for entry in v]
        expected = list(range(1, len(v) + 1))

        if level_numbers != expected:
            raise ValueError(
                f"Levels must be sequential starting from 1. "
                f"Expected {expected}, got {level_numbers}"
            )

        return v

    @property
    def max_level(self) -> int:
        """Highest level defined by the table."""
        return len(self.levels)
