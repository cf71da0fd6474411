"""Dealt betting situation models."""

from dataclasses import dataclass
from typing import Tuple

from poker_trainer.models.card import Card
from poker_trainer.models.action import Phase
from poker_trainer.models.position import Position


@dataclass(frozen=True)
class Blinds:
    small: int
    big: int

    @property
    def total(self) -> int:
        return self.small + self.big


@dataclass(frozen=True)
class VillainAction:
    """An opponent action template; the multiplier scales the pot into a bet."""
    verb: str         # e.g. "raises to", shown before the amount
    multiplier: float
    description: str  # e.g. "opponent raises"


@dataclass(frozen=True)
class GameState:
    """A single decision spot: hero's cards, the board, and a bet to face."""
    id: str
    player_cards: Tuple[Card, Card]
    community_cards: Tuple[Card, ...]
    position: Position
    stack_size: int
    blinds: Blinds
    pot_size: int
    bet_to_call: int
    phase: Phase
    villain_action: str
    villain_bet_size: int
    villain_verb: str = "bets"

    @property
    def all_cards(self) -> Tuple[Card, ...]:
        return tuple(self.player_cards) + tuple(self.community_cards)

    @property
    def hole_cards_str(self) -> str:
        return " ".join(str(c) for c in self.player_cards)

    @property
    def board_str(self) -> str:
        return " ".join(str(c) for c in self.community_cards)
