"""Tests for decision grading."""

import pytest

from poker_trainer.models.action import ActionType
from poker_trainer.models.evaluation import DecisionResult, Grade, HandEvaluation
from poker_trainer.engine.grader import grade_decision, lookup_grade


def _make_evaluation(correct_action=ActionType.CALL, confidence=85.0):
    return HandEvaluation(
        hand_strength=55,
        pot_odds=0.3,
        expected_value=4.5,
        correct_action=correct_action,
        confidence=confidence,
        reasoning="Because.",
    )


class TestCorrectDecisions:

    def test_call_confidence_85(self):
        result = grade_decision(ActionType.CALL, _make_evaluation())
        assert result.correct is True
        assert result.grade == Grade.A

    @pytest.mark.parametrize("confidence,grade", [
        (95, Grade.A_PLUS),
        (90, Grade.A_PLUS),
        (89.9, Grade.A),
        (80, Grade.A),
        (79.9, Grade.B_PLUS),
        (70, Grade.B_PLUS),
        (69.9, Grade.B),
        (60, Grade.B),
    ])
    def test_confidence_buckets(self, confidence, grade):
        evaluation = _make_evaluation(ActionType.FOLD, confidence)
        assert grade_decision(ActionType.FOLD, evaluation).grade == grade


class TestWrongDecisions:

    def test_raise_instead_of_call(self):
        result = grade_decision(ActionType.RAISE, _make_evaluation())
        assert result.correct is False
        assert result.grade == Grade.C

    def test_fold_instead_of_call(self):
        result = grade_decision(ActionType.FOLD, _make_evaluation())
        assert result.grade == Grade.C

    def test_one_step_low_confidence(self):
        evaluation = _make_evaluation(ActionType.FOLD, 65)
        assert grade_decision(ActionType.CALL, evaluation).grade == Grade.C_PLUS

    def test_one_step_at_threshold(self):
        evaluation = _make_evaluation(ActionType.FOLD, 70)
        assert grade_decision(ActionType.CALL, evaluation).grade == Grade.C

    def test_two_steps(self):
        assert grade_decision(ActionType.RAISE, _make_evaluation(ActionType.FOLD, 79)).grade == Grade.D
        assert grade_decision(ActionType.RAISE, _make_evaluation(ActionType.FOLD, 80)).grade == Grade.F
        assert grade_decision(ActionType.FOLD, _make_evaluation(ActionType.RAISE, 95)).grade == Grade.F
        assert grade_decision(ActionType.FOLD, _make_evaluation(ActionType.RAISE, 60)).grade == Grade.D

    def test_unknown_distance_fails(self):
        assert lookup_grade(False, 3, 50) == Grade.F


class TestGradeDecision:

    def test_copies_evaluation_fields(self):
        evaluation = _make_evaluation()
        result = grade_decision(ActionType.FOLD, evaluation)
        assert isinstance(result, DecisionResult)
        assert result.user_action == ActionType.FOLD
        assert result.correct_action == ActionType.CALL
        assert result.expected_value == 4.5
        assert result.explanation == "Because."
        assert result.hand_strength == 55
        assert result.pot_odds == 0.3

    def test_accepts_action_string(self):
        result = grade_decision("call", _make_evaluation())
        assert result.user_action == ActionType.CALL
        assert result.correct is True

    def test_rejects_unknown_action(self):
        with pytest.raises(ValueError):
            grade_decision("check", _make_evaluation())

    def test_pure(self):
        evaluation = _make_evaluation(ActionType.RAISE, 72.5)
        assert grade_decision(ActionType.CALL, evaluation) == grade_decision(ActionType.CALL, evaluation)
