"""Evaluation and grading result models."""

from dataclasses import dataclass
from enum import Enum

from poker_trainer.models.action import ActionType


class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    B_PLUS = "B+"
    B = "B"
    C_PLUS = "C+"
    C = "C"
    D = "D"
    F = "F"


@dataclass(frozen=True)
class HandEvaluation:
    """The computed best play for a spot."""
    hand_strength: float    # 0-100
    pot_odds: float         # 0-1, break-even win probability for a call
    expected_value: float   # of calling, in chips
    correct_action: ActionType
    confidence: float       # 0-100
    reasoning: str
    win_probability: float = 0.0


@dataclass(frozen=True)
class DecisionResult:
    """Verdict on a submitted action."""
    correct: bool
    user_action: ActionType
    correct_action: ActionType
    expected_value: float
    explanation: str
    hand_strength: float
    pot_odds: float
    grade: Grade
