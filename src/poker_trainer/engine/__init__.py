"""Decision-evaluation core."""

from poker_trainer.engine.deck import Deck, create_deck, shuffle_deck
from poker_trainer.engine.strength import calculate_hand_strength
from poker_trainer.engine.evaluator import (
    calculate_pot_odds, estimate_win_probability, evaluate_hand,
)
from poker_trainer.engine.grader import grade_decision

__all__ = [
    "Deck", "create_deck", "shuffle_deck",
    "calculate_hand_strength",
    "calculate_pot_odds", "estimate_win_probability", "evaluate_hand",
    "grade_decision",
]
