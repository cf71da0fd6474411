"""Poker decision trainer: deal a spot, find the best action, grade yours."""

from poker_trainer.engine.deck import create_deck, shuffle_deck
from poker_trainer.engine.evaluator import evaluate_hand
from poker_trainer.engine.grader import grade_decision
from poker_trainer.training.scenario import deal_new_hand
from poker_trainer.formatters.text import phase_description, position_description

__all__ = [
    "create_deck", "shuffle_deck",
    "deal_new_hand",
    "evaluate_hand",
    "grade_decision",
    "phase_description", "position_description",
]
