"""Data models for the poker trainer."""

from poker_trainer.models.card import Card, Rank, Suit
from poker_trainer.models.action import ActionType, Phase
from poker_trainer.models.position import Position
from poker_trainer.models.game import Blinds, VillainAction, GameState
from poker_trainer.models.evaluation import Grade, HandEvaluation, DecisionResult
from poker_trainer.models.stats import TrainingStats

__all__ = [
    "Card", "Rank", "Suit",
    "ActionType", "Phase",
    "Position",
    "Blinds", "VillainAction", "GameState",
    "Grade", "HandEvaluation", "DecisionResult",
    "TrainingStats",
]
