"""Grade a submitted action against the evaluated best action."""

import logging
from typing import Dict, Tuple

from poker_trainer.models.action import ActionType
from poker_trainer.models.evaluation import DecisionResult, Grade, HandEvaluation

logger = logging.getLogger(__name__)

# Correct answers: first threshold the confidence reaches wins.
CORRECT_GRADES: Tuple[Tuple[float, Grade], ...] = (
    (90, Grade.A_PLUS),
    (80, Grade.A),
    (70, Grade.B_PLUS),
    (0, Grade.B),
)

# Wrong answers by ordinal distance: (threshold, grade below it, grade at or above it).
WRONG_GRADES: Dict[int, Tuple[float, Grade, Grade]] = {
    1: (70, Grade.C_PLUS, Grade.C),
    2: (80, Grade.D, Grade.F),
}


def lookup_grade(correct: bool, distance: int, confidence: float) -> Grade:
    """Tabulated rubric for a (correctness, distance, confidence) triple."""
    if correct:
        for threshold, grade in CORRECT_GRADES:
            if confidence >= threshold:
                return grade
        return Grade.B

    row = WRONG_GRADES.get(distance)
    if row is None:
        return Grade.F
    threshold, below, at_or_above = row
    return below if confidence < threshold else at_or_above


def grade_decision(user_action: ActionType, evaluation: HandEvaluation) -> DecisionResult:
    """Compare ``user_action`` to the evaluation's best action.

    ``user_action`` may also be given as 'fold', 'call' or 'raise'.
    """
    user_action = ActionType(user_action)
    correct_action = evaluation.correct_action
    correct = user_action == correct_action
    distance = abs(user_action.ordinal - correct_action.ordinal)
    grade = lookup_grade(correct, distance, evaluation.confidence)

    logger.debug("graded %s vs %s (confidence %.1f): %s",
                 user_action.value, correct_action.value, evaluation.confidence, grade.value)

    return DecisionResult(
        correct=correct,
        user_action=user_action,
        correct_action=correct_action,
        expected_value=evaluation.expected_value,
        explanation=evaluation.reasoning,
        hand_strength=evaluation.hand_strength,
        pot_odds=evaluation.pot_odds,
        grade=grade,
    )
