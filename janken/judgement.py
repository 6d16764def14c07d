"""
Rock-paper-scissors judgement.

Rock beats scissors, scissors beats paper, paper beats rock.
"""
from typing import Dict

from janken.models import HandType, Outcome

# hand -> the hand it beats
BEATS: Dict[HandType, HandType] = {
    HandType.ROCK: HandType.SCISSORS,
    HandType.SCISSORS: HandType.PAPER,
    HandType.PAPER: HandType.ROCK,
}

# hand -> the hand that beats it
BEATEN_BY: Dict[HandType, HandType] = {loser: winner for winner, loser in BEATS.items()}


def judge(player: HandType, enemy: HandType) -> Outcome:
    """Judge the player's hand against an enemy hand.

    Args:
        player: Hand the player shows
        enemy: Hand the enemy shows

    Returns:
        Outcome from the player's point of view

    Examples:
        >>> judge(HandType.ROCK, HandType.SCISSORS)
        <Outcome.WIN: 'win'>
        >>> judge(HandType.PAPER, HandType.PAPER)
        <Outcome.DRAW: 'draw'>
    """
    if player == enemy:
        return Outcome.DRAW
    if BEATS[player] == enemy:
        return Outcome.WIN
    return Outcome.LOSE


def winning_hand(against: HandType) -> HandType:
    """Hand that beats ``against``."""
    return BEATEN_BY[against]
