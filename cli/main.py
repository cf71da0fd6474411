"""Poker Trainer CLI — Typer-based command line interface."""

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="poker-trainer",
    help="Texas Hold'em decision trainer",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    from poker_trainer import config
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _get_rng(seed: Optional[int]) -> random.Random:
    from poker_trainer import config
    if seed is None:
        seed = config.DEFAULT_SEED
    return random.Random(seed)


@app.command()
def train(
    count: Optional[int] = typer.Option(None, "--count", "-n",
                                        help="Number of hands to play"),
    seed: Optional[int] = typer.Option(None, "--seed",
                                       help="Seed for a repeatable drill"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Start an interactive decision drill."""
    from poker_trainer import config
    from poker_trainer.formatters.table import TableFormatter
    from poker_trainer.training.session import TrainingSession

    _setup_logging(verbose)
    total = count or config.DEFAULT_TRAINING_COUNT
    session = TrainingSession(rng=_get_rng(seed))
    fmt = TableFormatter(console)

    for i in range(1, total + 1):
        state = session.deal()
        console.print(f"\n[bold cyan]===  Hand {i}/{total}  ===[/bold cyan]\n")
        fmt.print_scenario(state)

        console.print("\n[bold]Your action:[/bold] "
                      "[cyan]f[/cyan]old, [cyan]c[/cyan]all, [cyan]r[/cyan]aise  "
                      "[dim](q to quit)[/dim]")

        while True:
            choice = typer.prompt("\nYour choice")
            if choice.strip().lower() == "q":
                break
            try:
                result = session.submit(choice)
            except ValueError as e:
                console.print(f"[red]{e}[/red]")
                continue
            fmt.print_result(result)
            break

        if session.current is not None:
            console.print("\n[dim]Training session ended.[/dim]")
            break

    if session.stats.total_hands:
        console.print()
        fmt.print_stats(session.stats)


@app.command()
def deal(
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the deal"),
    reveal: bool = typer.Option(False, "--reveal", help="Also show the best action"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Deal one random spot."""
    from poker_trainer.engine.evaluator import evaluate_hand
    from poker_trainer.formatters.table import TableFormatter
    from poker_trainer.training.scenario import deal_new_hand

    _setup_logging(verbose)
    state = deal_new_hand(_get_rng(seed))
    fmt = TableFormatter(console)
    fmt.print_scenario(state, title=f"Hand {state.id}")
    if reveal:
        fmt.print_evaluation(evaluate_hand(state))


@app.command()
def evaluate(
    hole: str = typer.Argument(..., help="Hole cards, e.g. 'As Kd'"),
    board: str = typer.Option("", "--board", "-b", help="Board cards, e.g. 'Qh 7c 2d'"),
    pot: int = typer.Option(..., "--pot", "-p", help="Pot size before the bet"),
    bet: int = typer.Option(..., "--bet", help="Amount to call"),
    action: Optional[str] = typer.Option(None, "--action", "-a",
                                         help="Grade this action (fold|call|raise)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Evaluate a hand-entered spot and optionally grade an action."""
    from poker_trainer import config
    from poker_trainer.engine.evaluator import evaluate_hand
    from poker_trainer.engine.grader import grade_decision
    from poker_trainer.formatters.table import TableFormatter
    from poker_trainer.models import ActionType, Blinds, Card, GameState, Phase, Position

    _setup_logging(verbose)
    try:
        player_cards = Card.parse_many(hole)
        community_cards = Card.parse_many(board)
        user_action = ActionType.parse(action) if action else None
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if len(player_cards) != 2:
        console.print(f"[red]Expected 2 hole cards, got {len(player_cards)}.[/red]")
        raise typer.Exit(1)

    phases = {p.community_count: p for p in Phase}
    if len(community_cards) not in phases:
        console.print(f"[red]A board has 0, 3, 4 or 5 cards, got {len(community_cards)}.[/red]")
        raise typer.Exit(1)

    all_cards = player_cards + community_cards
    if len(set(all_cards)) != len(all_cards):
        console.print("[red]Duplicate card in hand or board.[/red]")
        raise typer.Exit(1)

    state = GameState(
        id="manual",
        player_cards=tuple(player_cards),
        community_cards=tuple(community_cards),
        position=Position.BUTTON,
        stack_size=config.STACK_SIZE,
        blinds=Blinds(config.SMALL_BLIND, config.BIG_BLIND),
        pot_size=pot,
        bet_to_call=bet,
        phase=phases[len(community_cards)],
        villain_action="opponent bets",
        villain_bet_size=bet,
    )

    evaluation = evaluate_hand(state)
    fmt = TableFormatter(console)
    fmt.print_evaluation(evaluation)

    if user_action is not None:
        fmt.print_result(grade_decision(user_action, evaluation))


if __name__ == "__main__":
    app()
