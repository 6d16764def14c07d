"""
Judgement Tests

Run with: pytest tests/test_judgement.py -v
"""

import itertools

import pytest

from janken.judgement import judge, winning_hand
from janken.models import HandType, Outcome

ROCK, SCISSORS, PAPER = HandType.ROCK, HandType.SCISSORS, HandType.PAPER


class TestJudge:
    """The full rock-paper-scissors table from the player's side."""

    @pytest.mark.parametrize("player,enemy,expected", [
        (ROCK, ROCK, Outcome.DRAW),
        (ROCK, SCISSORS, Outcome.WIN),
        (ROCK, PAPER, Outcome.LOSE),
        (SCISSORS, ROCK, Outcome.LOSE),
        (SCISSORS, SCISSORS, Outcome.DRAW),
        (SCISSORS, PAPER, Outcome.WIN),
        (PAPER, ROCK, Outcome.WIN),
        (PAPER, SCISSORS, Outcome.LOSE),
        (PAPER, PAPER, Outcome.DRAW),
    ])
    def test_pair(self, player, enemy, expected):
        assert judge(player, enemy) == expected

    def test_win_and_lose_are_mirrored(self):
        """Swapping the hands turns a win into a loss."""
        for a, b in itertools.permutations(HandType, 2):
            assert (judge(a, b) == Outcome.WIN) == (judge(b, a) == Outcome.LOSE)

    def test_each_hand_wins_exactly_once(self):
        for hand in HandType:
            wins = [enemy for enemy in HandType if judge(hand, enemy) == Outcome.WIN]
            assert len(wins) == 1


class TestWinningHand:
    """winning_hand() is the inverse lookup used by the bot."""

    @pytest.mark.parametrize("against,expected", [
        (ROCK, PAPER),
        (SCISSORS, ROCK),
        (PAPER, SCISSORS),
    ])
    def test_winning_hand(self, against, expected):
        assert winning_hand(against) == expected
        assert judge(expected, against) == Outcome.WIN
