"""Outcome evaluator: pot odds, win probability, EV and the best action."""

import logging
from dataclasses import dataclass
from typing import Callable, Tuple

from poker_trainer.models.action import ActionType
from poker_trainer.models.evaluation import HandEvaluation
from poker_trainer.models.game import GameState
from poker_trainer.engine.strength import calculate_hand_strength

logger = logging.getLogger(__name__)

MIN_WIN_PROBABILITY = 0.05
MAX_WIN_PROBABILITY = 0.95

FOLD_MARGIN = 0.1
RAISE_MARGIN = 0.15
RAISE_MIN_STRENGTH = 60
MAX_CONFIDENCE = 95
MIN_CALL_CONFIDENCE = 60


def calculate_pot_odds(pot_size: float, bet_to_call: float) -> float:
    """Share of the final pot the call represents; 0.0 for an empty pot."""
    total = pot_size + bet_to_call
    if total == 0:
        return 0.0
    return bet_to_call / total


def estimate_win_probability(hand_strength: float, board_cards: int) -> float:
    """Map a strength score to a win probability.

    The earlier the street, the more the score is pulled toward the middle.
    The result never leaves [0.05, 0.95].
    """
    win_prob = hand_strength / 100

    if board_cards == 0:
        win_prob = win_prob * 0.8 + 0.1
    elif board_cards == 3:
        win_prob = win_prob * 0.9 + 0.05
    elif board_cards >= 4:
        win_prob = win_prob * 0.95

    return min(MAX_WIN_PROBABILITY, max(MIN_WIN_PROBABILITY, win_prob))


def expected_value(win_probability: float, pot_size: float, bet_to_call: float) -> float:
    return win_probability * pot_size - (1 - win_probability) * bet_to_call


@dataclass(frozen=True)
class ActionRule:
    """One row of the decision table.

    ``applies`` takes (win_probability, pot_odds, hand_strength);
    ``confidence`` and ``explain`` take (win_probability, pot_odds).
    """
    action: ActionType
    applies: Callable[[float, float, float], bool]
    confidence: Callable[[float, float], float]
    explain: Callable[[float, float], str]


def _fold_reason(win: float, odds: float) -> str:
    return ("Your hand is too weak against the opponent's likely range. "
            f"You need to win {odds * 100:.1f}% of the time to break even, "
            f"but you only win about {win * 100:.1f}% of the time.")


def _raise_reason(win: float, odds: float) -> str:
    return ("You have a strong hand with good equity. Raising for value will "
            "make money against weaker hands that might call.")


def _call_reason(win: float, odds: float) -> str:
    return ("Your hand has decent equity against the opponent's range. "
            "The pot odds make calling profitable.")


# Evaluated top to bottom; the last row always applies.
ACTION_RULES: Tuple[ActionRule, ...] = (
    ActionRule(
        action=ActionType.FOLD,
        applies=lambda win, odds, strength: win < odds - FOLD_MARGIN,
        confidence=lambda win, odds: min(MAX_CONFIDENCE, (odds - win) * 200),
        explain=_fold_reason,
    ),
    ActionRule(
        action=ActionType.RAISE,
        applies=lambda win, odds, strength: (win > odds + RAISE_MARGIN
                                             and strength > RAISE_MIN_STRENGTH),
        confidence=lambda win, odds: min(MAX_CONFIDENCE, (win - odds) * 150),
        explain=_raise_reason,
    ),
    ActionRule(
        action=ActionType.CALL,
        applies=lambda win, odds, strength: True,
        confidence=lambda win, odds: max(MIN_CALL_CONFIDENCE, 100 - abs(win - odds) * 200),
        explain=_call_reason,
    ),
)


def select_rule(win_probability: float, pot_odds: float,
                hand_strength: float) -> ActionRule:
    """Return the first rule whose predicate holds."""
    for rule in ACTION_RULES:
        if rule.applies(win_probability, pot_odds, hand_strength):
            return rule
    raise AssertionError("decision table has no catch-all row")


def evaluate_hand(state: GameState) -> HandEvaluation:
    """Compute the best action for a dealt spot. Deterministic."""
    hand_strength = calculate_hand_strength(state.player_cards, state.community_cards)
    pot_odds = calculate_pot_odds(state.pot_size, state.bet_to_call)
    win_probability = estimate_win_probability(hand_strength, len(state.community_cards))
    ev = expected_value(win_probability, state.pot_size, state.bet_to_call)

    rule = select_rule(win_probability, pot_odds, hand_strength)
    logger.debug("hand %s: strength=%s odds=%.3f win=%.3f -> %s",
                 state.id, hand_strength, pot_odds, win_probability, rule.action.value)

    return HandEvaluation(
        hand_strength=hand_strength,
        pot_odds=pot_odds,
        expected_value=ev,
        correct_action=rule.action,
        confidence=rule.confidence(win_probability, pot_odds),
        reasoning=rule.explain(win_probability, pot_odds),
        win_probability=win_probability,
    )
