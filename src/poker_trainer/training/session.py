"""Interactive training session manager."""

import logging
import random
from typing import Optional, Union

from poker_trainer.engine.evaluator import evaluate_hand
from poker_trainer.engine.grader import grade_decision
from poker_trainer.models.action import ActionType
from poker_trainer.models.evaluation import DecisionResult, HandEvaluation
from poker_trainer.models.game import GameState
from poker_trainer.models.stats import TrainingStats
from poker_trainer.training.scenario import ScenarioGenerator

logger = logging.getLogger(__name__)


class TrainingSession:
    """Deal spots one at a time, grade answers and keep running stats.

    Workflow:
    1. ``deal()`` a spot and show it to the player
    2. ``submit()`` the player's action
    3. Read the returned verdict; ``stats`` is updated in place
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 stats: Optional[TrainingStats] = None):
        self.generator = ScenarioGenerator(rng)
        self.stats = stats or TrainingStats()
        self.current: Optional[GameState] = None
        self.last_evaluation: Optional[HandEvaluation] = None

    def deal(self) -> GameState:
        """Deal a new spot, discarding any unanswered one."""
        self.current = self.generator.deal()
        self.last_evaluation = None
        return self.current

    def submit(self, action: Union[ActionType, str]) -> DecisionResult:
        """Grade an action for the current spot and record it.

        Raises:
            RuntimeError: If no spot has been dealt.
            ValueError: If the action is not fold, call or raise.
        """
        if self.current is None:
            raise RuntimeError("No hand dealt. Call deal() first.")
        if not isinstance(action, ActionType):
            action = ActionType.parse(action)

        evaluation = evaluate_hand(self.current)
        result = grade_decision(action, evaluation)
        self.stats.record(result)
        logger.debug("hand %s graded %s; accuracy now %.1f%%",
                     self.current.id, result.grade.value, self.stats.accuracy)

        self.last_evaluation = evaluation
        self.current = None
        return result

    @property
    def current_accuracy(self) -> float:
        return self.stats.accuracy
