"""Running statistics across graded decisions."""

from dataclasses import dataclass, field
from typing import Dict

from poker_trainer.models.evaluation import DecisionResult, Grade

XP_CORRECT = 10
XP_INCORRECT = 5
XP_PER_LEVEL = 100


@dataclass
class TrainingStats:
    """Aggregate of a player's graded decisions."""
    total_hands: int = 0
    correct_decisions: int = 0
    average_ev: float = 0.0
    streak: int = 0
    best_streak: int = 0
    experience: int = 0
    grade_distribution: Dict[Grade, int] = field(default_factory=dict)

    @property
    def accuracy(self) -> float:
        return self.correct_decisions / self.total_hands * 100 if self.total_hands else 0.0

    @property
    def level(self) -> int:
        return self.experience // XP_PER_LEVEL + 1

    def record(self, result: DecisionResult) -> None:
        """Fold one graded decision into the totals."""
        previous = self.total_hands
        self.total_hands += 1
        self.average_ev = (self.average_ev * previous + result.expected_value) / self.total_hands

        if result.correct:
            self.correct_decisions += 1
            self.streak += 1
            self.experience += XP_CORRECT
        else:
            self.streak = 0
            self.experience += XP_INCORRECT
        self.best_streak = max(self.best_streak, self.streak)

        self.grade_distribution[result.grade] = self.grade_distribution.get(result.grade, 0) + 1

    def summary_dict(self) -> Dict[str, float]:
        return {
            "Hands": self.total_hands,
            "Correct": self.correct_decisions,
            "Accuracy%": self.accuracy,
            "Avg EV": self.average_ev,
            "Streak": self.streak,
            "Best Streak": self.best_streak,
            "Level": self.level,
            "XP": self.experience,
        }
