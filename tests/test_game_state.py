"""
Game State Tests

Score, lives, defeated count, phase and the per-type listener lists.

Run with: pytest tests/test_game_state.py -v
"""

from unittest.mock import Mock

import pytest

from janken.events import ReentrantMutationError
from janken.game_state import GameState
from janken.models import GameEventType, GameStateSnapshot, Phase


@pytest.fixture
def state():
    return GameState(initial_lives=3, defeats_per_level=5)


def record(state, *event_types):
    """Collect (type, data) for the given event types in delivery order."""
    events = []
    for event_type in event_types:
        state.on(event_type, lambda event: events.append((event.type, event.data)))
    return events


class TestInitialState:
    def test_defaults(self, state):
        assert state.phase == Phase.TITLE
        assert state.score == 0
        assert state.lives == 3
        assert state.max_lives == 3
        assert state.defeated_count == 0
        assert state.difficulty_level == 1
        assert not state.is_game_over

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            GameState(initial_lives=0)
        with pytest.raises(ValueError):
            GameState(defeats_per_level=0)


class TestScore:
    def test_add_score_emits_new_total(self, state):
        events = record(state, GameEventType.SCORE_CHANGE)
        state.add_score(10)
        state.add_score(10)
        assert state.score == 20
        assert events == [(GameEventType.SCORE_CHANGE, 10), (GameEventType.SCORE_CHANGE, 20)]

    def test_negative_points_rejected(self, state):
        with pytest.raises(ValueError):
            state.add_score(-5)
        assert state.score == 0

    def test_zero_points_allowed(self, state):
        state.add_score(0)
        assert state.score == 0

    def test_reset_score(self, state):
        state.add_score(30)
        state.reset_score()
        assert state.score == 0


class TestLives:
    def test_lose_life_emits_lives_change(self, state):
        events = record(state, GameEventType.LIVES_CHANGE)
        state.lose_life()
        assert state.lives == 2
        assert events == [(GameEventType.LIVES_CHANGE, 2)]

    def test_lives_clamp_at_zero(self, state):
        state.lose_life(10)
        assert state.lives == 0
        assert state.is_game_over

    def test_game_over_emitted_once_with_score(self, state):
        state.add_score(40)
        events = record(state, GameEventType.LIVES_CHANGE, GameEventType.GAME_OVER)

        state.lose_life(3)
        assert events == [
            (GameEventType.LIVES_CHANGE, 0),
            (GameEventType.GAME_OVER, {"score": 40}),
        ]

        state.lose_life(1)
        assert events[-1] == (GameEventType.LIVES_CHANGE, 0)
        assert [t for t, _ in events].count(GameEventType.GAME_OVER) == 1

    def test_game_over_not_emitted_above_zero(self, state):
        listener = Mock()
        state.on(GameEventType.GAME_OVER, listener)
        state.lose_life(1)
        state.lose_life(1)
        listener.assert_not_called()
        state.lose_life(1)
        listener.assert_called_once()

    def test_negative_loss_rejected(self, state):
        with pytest.raises(ValueError):
            state.lose_life(-1)

    def test_reset_lives(self, state):
        state.lose_life(2)
        state.reset_lives()
        assert state.lives == 3


class TestDefeatedCount:
    def test_level_derived_from_defeated_count(self, state):
        for _ in range(4):
            state.increment_defeated_count()
        assert state.difficulty_level == 1
        state.increment_defeated_count()
        assert state.difficulty_level == 2

    def test_reset_defeated_count(self, state):
        state.increment_defeated_count()
        state.reset_defeated_count()
        assert state.defeated_count == 0
        assert state.difficulty_level == 1


class TestPhase:
    def test_set_phase_emits_on_change(self, state):
        events = record(state, GameEventType.PHASE_CHANGE)
        state.set_phase(Phase.PLAYING)
        assert state.phase == Phase.PLAYING
        assert events == [(GameEventType.PHASE_CHANGE, Phase.PLAYING)]

    def test_same_phase_is_silent(self, state):
        events = record(state, GameEventType.PHASE_CHANGE)
        state.set_phase(Phase.TITLE)
        assert events == []

    def test_phase_accepts_string_value(self, state):
        state.set_phase("gameover")
        assert state.phase == Phase.GAME_OVER


class TestReset:
    def test_reset_restores_start_values(self, state):
        state.set_phase(Phase.PLAYING)
        state.add_score(50)
        state.lose_life(2)
        for _ in range(7):
            state.increment_defeated_count()

        state.reset()

        assert (state.score, state.lives, state.defeated_count, state.difficulty_level) == (0, 3, 0, 1)
        assert state.phase == Phase.PLAYING

    def test_reset_emits_score_then_lives(self, state):
        events = record(state, GameEventType.SCORE_CHANGE, GameEventType.LIVES_CHANGE)
        state.reset()
        assert events == [(GameEventType.SCORE_CHANGE, 0), (GameEventType.LIVES_CHANGE, 3)]

    def test_snapshot(self, state):
        state.add_score(10)
        snap = state.snapshot()
        assert snap == GameStateSnapshot(
            phase=Phase.TITLE, score=10, lives=3, defeated_count=0, difficulty_level=1,
        )


class TestListeners:
    def test_listeners_called_in_registration_order(self, state):
        calls = []
        state.on(GameEventType.SCORE_CHANGE, lambda e: calls.append('first'))
        state.on(GameEventType.SCORE_CHANGE, lambda e: calls.append('second'))
        state.add_score(1)
        assert calls == ['first', 'second']

    def test_listeners_only_receive_their_type(self, state):
        listener = Mock()
        state.on(GameEventType.LIVES_CHANGE, listener)
        state.add_score(10)
        listener.assert_not_called()

    def test_duplicate_registration_is_ignored(self, state):
        listener = Mock()
        state.on(GameEventType.SCORE_CHANGE, listener)
        state.on(GameEventType.SCORE_CHANGE, listener)
        state.add_score(1)
        assert listener.call_count == 1

    def test_off(self, state):
        listener = Mock()
        state.on(GameEventType.SCORE_CHANGE, listener)
        state.off(GameEventType.SCORE_CHANGE, listener)
        state.add_score(1)
        listener.assert_not_called()

    def test_off_unknown_listener_is_noop(self, state):
        state.off(GameEventType.SCORE_CHANGE, Mock())

    def test_listener_can_read_state(self, state):
        seen = []
        state.on(GameEventType.SCORE_CHANGE, lambda e: seen.append(state.snapshot().score))
        state.add_score(10)
        assert seen == [10]

    def test_mutation_from_listener_raises(self, state):
        state.on(GameEventType.SCORE_CHANGE, lambda e: state.lose_life(1))
        with pytest.raises(ReentrantMutationError):
            state.add_score(10)
        assert state.lives == 3

    def test_state_usable_after_reentrant_error(self, state):
        def bad_listener(event):
            state.add_score(1)

        state.on(GameEventType.LIVES_CHANGE, bad_listener)
        with pytest.raises(ReentrantMutationError):
            state.lose_life(1)

        state.off(GameEventType.LIVES_CHANGE, bad_listener)
        state.add_score(5)
        assert state.score == 5
