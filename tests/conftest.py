"""Pytest fixtures shared by the Janken tests."""
import random

import pytest

from janken import logging as jlog
from janken.config import GameRules
from janken.high_score import InMemoryHighScoreStore
from janken.session import GameSession


@pytest.fixture(autouse=True)
def restore_logging_config(monkeypatch):
    """Undo any configure_logging() call or sink registration a test makes."""
    monkeypatch.setitem(jlog._settings, 'level', jlog._settings['level'])
    monkeypatch.setitem(jlog._settings, 'module_levels', dict(jlog._settings['module_levels']))
    monkeypatch.setitem(jlog._settings, 'modules', dict(jlog._settings['modules']))
    monkeypatch.setitem(jlog._settings, 'log_dir', jlog._settings['log_dir'])
    monkeypatch.setattr(jlog, '_sinks', {})
    yield


@pytest.fixture
def rules():
    """Default rules spelled out, independent of any .env file."""
    return GameRules(
        initial_lives=3,
        score_per_win=10,
        life_loss_on_lose=3,
        life_loss_on_draw=1,
        defeats_per_level=5,
        collision_threshold=50.0,
        despawn_margin=100.0,
        enemy_base_speed=100.0,
        player_band_position=0.0,
        spawn_position=630.0,
        preview_position=500.0,
        preview_enabled=False,
    )


@pytest.fixture
def high_scores():
    return InMemoryHighScoreStore()


@pytest.fixture
def session(rules, high_scores):
    """Seeded session that has not been started yet."""
    return GameSession(rules=rules, high_scores=high_scores, rng=random.Random(1234))
