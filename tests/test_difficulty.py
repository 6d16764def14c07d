"""
Difficulty Curve Tests

Level derivation, table lookup, extrapolation past the table and hand
generation for the next spawn.

Run with: pytest tests/test_difficulty.py -v
"""

import random
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from janken import config
from janken.difficulty import DifficultyCurve
from janken.models import DifficultyConfig, DifficultyTable, HandPair, HandType, Side


@pytest.fixture
def curve():
    return DifficultyCurve(rng=random.Random(42))


class TestLevels:
    """Level is defeated // 5 + 1."""

    @pytest.mark.parametrize("defeated", [0, 1, 2, 3, 4])
    def test_first_five_defeats_are_level_one(self, curve, defeated):
        assert curve.level_for(defeated) == 1

    @pytest.mark.parametrize("defeated", [5, 6, 7, 8, 9])
    def test_next_five_are_level_two(self, curve, defeated):
        assert curve.level_for(defeated) == 2

    def test_level_past_table(self, curve):
        assert curve.level_for(35) == 8

    def test_custom_defeats_per_level(self):
        curve = DifficultyCurve(defeats_per_level=2)
        assert curve.level_for(3) == 2
        assert curve.level_for(4) == 3

    def test_defeats_per_level_must_be_positive(self):
        with pytest.raises(ValueError):
            DifficultyCurve(defeats_per_level=0)


class TestConfigFor:
    """Table lookup and extrapolation."""

    def test_table_levels_returned_as_is(self, curve):
        for index, entry in enumerate(config.DIFFICULTY_LEVELS):
            assert curve.config_for(index * 5) == entry

    def test_level_one(self, curve):
        cfg = curve.config_for(0)
        assert cfg.level == 1
        assert cfg.speed_multiplier == 1.0
        assert cfg.spawn_interval == 3.0
        assert not cfg.both_hands

    def test_level_two(self, curve):
        cfg = curve.config_for(5)
        assert cfg.level == 2
        assert cfg.speed_multiplier == pytest.approx(1.2)
        assert cfg.spawn_interval == pytest.approx(2.5)
        assert cfg.both_hands
        assert not cfg.random_hands

    def test_extrapolated_level_eight(self, curve):
        """Two levels past the table: +0.6 speed, -0.2s interval."""
        cfg = curve.config_for(35)
        assert cfg.level == 8
        assert cfg.speed_multiplier == pytest.approx(3.1)
        assert cfg.spawn_interval == pytest.approx(0.8)
        assert cfg.both_hands
        assert cfg.random_hands

    def test_interval_clamped_to_minimum(self, curve):
        for defeated in (50, 100, 500):
            assert curve.config_for(defeated).spawn_interval == pytest.approx(0.5)

    def test_speed_keeps_growing(self, curve):
        speeds = [curve.config_for(level * 5).speed_multiplier for level in range(6, 20)]
        assert speeds == sorted(speeds)
        assert len(set(speeds)) == len(speeds)

    def test_extrapolated_config_is_new_object(self, curve):
        cfg = curve.config_for(35)
        assert cfg is not config.DIFFICULTY_LEVELS[-1]
        assert config.DIFFICULTY_LEVELS[-1].level == 6

    def test_speed_for(self, curve):
        assert curve.speed_for(curve.config_for(0)) == pytest.approx(100.0)
        assert curve.speed_for(curve.config_for(5)) == pytest.approx(120.0)

    def test_custom_table(self):
        table = DifficultyTable(
            name='short',
            levels=[DifficultyConfig(level=1, speed_multiplier=2.0, spawn_interval=1.0)],
            extra_speed_per_level=1.0,
            interval_step_per_level=0.25,
            min_spawn_interval=0.5,
        )
        curve = DifficultyCurve(table=table, base_speed=50.0)
        cfg = curve.config_for(10)
        assert cfg.level == 3
        assert cfg.speed_multiplier == pytest.approx(4.0)
        assert cfg.spawn_interval == pytest.approx(0.5)
        assert curve.speed_for(cfg) == pytest.approx(200.0)


class TestTableValidation:
    """DifficultyTable refuses malformed level lists."""

    def test_levels_must_be_sequential(self):
        with pytest.raises(ValidationError):
            DifficultyTable(levels=[
                DifficultyConfig(level=1, speed_multiplier=1.0, spawn_interval=1.0),
                DifficultyConfig(level=3, speed_multiplier=1.0, spawn_interval=1.0),
            ])

    def test_levels_required(self):
        with pytest.raises(ValidationError):
            DifficultyTable(levels=[])

    def test_spawn_interval_positive(self):
        with pytest.raises(ValidationError):
            DifficultyConfig(level=1, speed_multiplier=1.0, spawn_interval=0.0)


class TestGenerateNextHands:
    """Spawn patterns per configuration."""

    def test_single_side_without_both_hands(self, curve):
        cfg = curve.config_for(0)
        for _ in range(100):
            hands = curve.generate_next_hands(cfg)
            assert len(list(hands.items())) == 1

    def test_both_sides_same_hand(self, curve):
        cfg = curve.config_for(5)
        for _ in range(100):
            hands = curve.generate_next_hands(cfg)
            assert hands.left is not None
            assert hands.left == hands.right

    def test_random_hands_mixes_patterns(self, curve):
        cfg = curve.config_for(10)
        pairs = [curve.generate_next_hands(cfg) for _ in range(200)]
        assert all(p.left is not None and p.right is not None for p in pairs)
        assert any(p.left == p.right for p in pairs)
        assert any(p.left != p.right for p in pairs)

    def test_side_choice_uses_rng(self):
        rng = Mock()
        rng.random.return_value = 0.2
        rng.choice.return_value = HandType.PAPER
        curve = DifficultyCurve(rng=rng)

        assert curve.generate_next_hands(curve.config_for(0)) == HandPair(left=HandType.PAPER)

        rng.random.return_value = 0.7
        assert curve.generate_next_hands(curve.config_for(0)) == HandPair(right=HandType.PAPER)

    def test_independent_hands_when_coin_flip_hits(self):
        rng = Mock()
        rng.random.return_value = 0.1
        rng.choice.side_effect = [HandType.ROCK, HandType.SCISSORS]
        curve = DifficultyCurve(rng=rng)

        hands = curve.generate_next_hands(curve.config_for(10))
        assert hands == HandPair(left=HandType.ROCK, right=HandType.SCISSORS)

    def test_same_hand_when_coin_flip_misses(self):
        rng = Mock()
        rng.random.return_value = 0.9
        rng.choice.return_value = HandType.ROCK
        curve = DifficultyCurve(rng=rng)

        hands = curve.generate_next_hands(curve.config_for(10))
        assert hands == HandPair(left=HandType.ROCK, right=HandType.ROCK)
        assert rng.choice.call_count == 1

    def test_same_seed_same_sequence(self):
        a = DifficultyCurve(rng=random.Random(7))
        b = DifficultyCurve(rng=random.Random(7))
        for defeated in (0, 5, 10, 40):
            cfg = a.config_for(defeated)
            assert [a.generate_next_hands(cfg) for _ in range(20)] == \
                   [b.generate_next_hands(cfg) for _ in range(20)]

    def test_items_order_left_first(self):
        hands = HandPair(left=HandType.ROCK, right=HandType.PAPER)
        assert list(hands.items()) == [(Side.LEFT, HandType.ROCK), (Side.RIGHT, HandType.PAPER)]
