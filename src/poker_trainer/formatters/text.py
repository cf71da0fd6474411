"""Plain text formatting for terminal output."""

from typing import Callable, List, Union

from poker_trainer.models.action import Phase
from poker_trainer.models.card import Card
from poker_trainer.models.evaluation import DecisionResult, HandEvaluation
from poker_trainer.models.game import GameState
from poker_trainer.models.position import Position

PHASE_DESCRIPTIONS = {
    Phase.PREFLOP: "Before the flop",
    Phase.FLOP: "After the flop",
    Phase.TURN: "After the turn",
    Phase.RIVER: "After the river",
}

POSITION_DESCRIPTIONS = {
    Position.BUTTON: "Button (best position)",
    Position.SMALL_BLIND: "Small Blind",
    Position.BIG_BLIND: "Big Blind",
    Position.UNDER_THE_GUN: "Under the Gun (early)",
    Position.MIDDLE: "Middle Position",
    Position.CUTOFF: "Cutoff (late position)",
}


def phase_description(phase: Union[Phase, str]) -> str:
    """Describe a phase; unknown strings come back unchanged."""
    try:
        return PHASE_DESCRIPTIONS[Phase(phase)]
    except ValueError:
        return str(phase)


def position_description(position: Union[Position, str]) -> str:
    """Describe a position; unknown strings come back unchanged."""
    try:
        return POSITION_DESCRIPTIONS[Position(position)]
    except ValueError:
        return str(position)


def format_card(card: Card) -> str:
    return str(card)


class TextFormatter:
    """Format trainer data as plain text for terminal display."""

    def scenario_lines(self, state: GameState,
                       render: Callable[[Card], str] = str) -> List[str]:
        """Describe the spot the player has to act in, one line per fact.

        ``render`` turns each card into text.
        """
        hole = " ".join(render(c) for c in state.player_cards)
        board = " ".join(render(c) for c in state.community_cards)

        lines = []
        lines.append(f"Position: {position_description(state.position)}  |  "
                     f"Blinds: ${state.blinds.small}/${state.blinds.big}  |  "
                     f"Stack: ${state.stack_size}")
        lines.append(f"Phase: {phase_description(state.phase)}")
        lines.append(f"Your cards: {hole}")
        if board:
            lines.append(f"Board: {board}")
        lines.append("")
        lines.append(f"Pot: ${state.pot_size}")
        lines.append(f"Villain {state.villain_verb} ${state.villain_bet_size} "
                     f"({state.villain_action})")
        lines.append(f"To call: ${state.bet_to_call}")
        return lines

    def format_scenario(self, state: GameState) -> str:
        return "\n".join(self.scenario_lines(state))

    def format_evaluation(self, evaluation: HandEvaluation) -> str:
        lines = [
            f"Best action: {evaluation.correct_action.value.upper()} "
            f"(confidence {evaluation.confidence:.0f}%)",
            f"Hand strength: {evaluation.hand_strength:.0f}%",
            f"Pot odds: {evaluation.pot_odds * 100:.1f}%",
            f"Win probability: {evaluation.win_probability * 100:.1f}%",
            f"Expected value: ${evaluation.expected_value:.2f}",
            "",
            evaluation.reasoning,
        ]
        return "\n".join(lines)

    def format_result(self, result: DecisionResult) -> str:
        """Format a graded decision."""
        verdict = "Correct!" if result.correct else "Not Quite"
        lines = [
            f"{verdict}  Grade: {result.grade.value}",
            f"You chose: {result.user_action.value.upper()}",
            f"Best choice: {result.correct_action.value.upper()}",
            f"Hand strength: {result.hand_strength:.0f}%",
            f"Expected value: ${result.expected_value:.2f}",
            "",
            result.explanation,
        ]
        return "\n".join(lines)
