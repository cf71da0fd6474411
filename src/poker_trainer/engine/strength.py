"""Additive hand-strength heuristic.

This is not a hand ranker. Hole cards earn points for rank, pairs,
suitedness, connectedness and broadway values; once a flop is out the
score is nudged for pairing the board and for overcards on it. The result
is clamped to 0-100.
"""

from typing import Sequence

from poker_trainer.models.card import Card

PAIR_BONUS = 25
PREMIUM_PAIR_BONUS = 15
PREMIUM_PAIR_MIN = 10
SUITED_BONUS = 8
CONNECTOR_BONUS = 6
BROADWAY_BONUS = 10
BROADWAY_MIN = 10
BOARD_PAIR_BONUS = 20
HIGH_BOARD_MIN = 11
HIGH_BOARD_PENALTY = 10


def calculate_hand_strength(player_cards: Sequence[Card],
                            community_cards: Sequence[Card] = ()) -> int:
    """Score hole cards against the revealed board.

    Args:
        player_cards: The two hole cards.
        community_cards: 0, 3, 4 or 5 revealed board cards.

    Returns:
        Strength between 0 and 100.
    """
    if len(player_cards) < 2:
        return 0

    high, low = sorted((c.value for c in player_cards), reverse=True)
    strength = high * 2 + low

    if high == low:
        strength += PAIR_BONUS
        if high >= PREMIUM_PAIR_MIN:
            strength += PREMIUM_PAIR_BONUS

    if player_cards[0].suit == player_cards[1].suit:
        strength += SUITED_BONUS

    # Raw rank distance: A-2 is not a connector.
    if high - low == 1:
        strength += CONNECTOR_BONUS

    if high >= BROADWAY_MIN and low >= BROADWAY_MIN:
        strength += BROADWAY_BONUS

    if len(community_cards) >= 3:
        board_values = {c.value for c in community_cards}

        if high in board_values or low in board_values:
            strength += BOARD_PAIR_BONUS

        if max(board_values) >= HIGH_BOARD_MIN and high < HIGH_BOARD_MIN:
            strength -= HIGH_BOARD_PENALTY

    return min(100, max(0, strength))
