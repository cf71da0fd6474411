"""Rich table formatting for terminal output."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from poker_trainer.models.card import Card
from poker_trainer.models.evaluation import DecisionResult, Grade, HandEvaluation
from poker_trainer.models.game import GameState
from poker_trainer.models.stats import TrainingStats
from poker_trainer.formatters.text import TextFormatter

GRADE_STYLES = {
    Grade.A_PLUS: "bold green",
    Grade.A: "green",
    Grade.B_PLUS: "cyan",
    Grade.B: "cyan",
    Grade.C_PLUS: "yellow",
    Grade.C: "yellow",
    Grade.D: "red",
    Grade.F: "bold red",
}


def card_markup(card: Card) -> str:
    """Rich markup for a card, red suits in red."""
    if card.suit.color == "red":
        return f"[red]{card}[/red]"
    return str(card)


class TableFormatter:
    """Format trainer data as Rich panels and tables."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.text = TextFormatter()

    def print_scenario(self, state: GameState, title: str = "Situation") -> None:
        lines = self.text.scenario_lines(state, render=card_markup)
        self.console.print(Panel("\n".join(lines), title=title))

    def print_evaluation(self, evaluation: HandEvaluation) -> None:
        self.console.print(Panel(self.text.format_evaluation(evaluation), title="Analysis"))

    def print_result(self, result: DecisionResult) -> None:
        style = GRADE_STYLES[result.grade]
        border = "green" if result.correct else "red"
        title = f"[{style}]{result.grade.value}[/{style}]"
        self.console.print(Panel(self.text.format_result(result), title=title,
                                 border_style=border))

    def print_stats(self, stats: TrainingStats) -> None:
        """Print running training stats as a Rich table."""
        table = Table(title="Training Stats")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="green")

        d = stats.summary_dict()
        table.add_row("Hands", str(d["Hands"]))
        table.add_row("Correct", str(d["Correct"]))
        table.add_row("Accuracy", f"{d['Accuracy%']:.1f}%")
        table.add_row("Avg EV", f"${d['Avg EV']:+.2f}")
        table.add_row("Streak", str(d["Streak"]))
        table.add_row("Best Streak", str(d["Best Streak"]))
        table.add_row("Level", str(d["Level"]))
        table.add_row("XP", str(d["XP"]))
        self.console.print(table)

        if stats.grade_distribution:
            grades = Table(title="Grades")
            grades.add_column("Grade")
            grades.add_column("Count", justify="right")
            for grade in Grade:
                count = stats.grade_distribution.get(grade, 0)
                if count:
                    style = GRADE_STYLES[grade]
                    grades.add_row(f"[{style}]{grade.value}[/{style}]", str(count))
            self.console.print(grades)
