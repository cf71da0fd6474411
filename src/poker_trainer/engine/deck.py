"""Deck construction, shuffling and dealing."""

import random
from typing import List, Optional, Sequence

from poker_trainer.models.card import Card, Rank, Suit


def ordered_deck() -> List[Card]:
    """All 52 cards in canonical order: suits outer, ranks inner."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle_deck(cards: Sequence[Card],
                 rng: Optional[random.Random] = None) -> List[Card]:
    """Return a uniformly shuffled copy of ``cards`` (Fisher-Yates).

    The input is left untouched.
    """
    rng = rng or random.Random()
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Build a full 52-card deck and shuffle it."""
    return shuffle_deck(ordered_deck(), rng)


class Deck:
    """A shuffled 52-card deck consumed from the top."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.cards: List[Card] = create_deck(rng)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > len(self.cards):
            raise ValueError(f"Not enough cards in deck. Need {count}, have {len(self.cards)}")

        dealt = self.cards[:count]
        self.cards = self.cards[count:]
        return dealt

    def __len__(self) -> int:
        return len(self.cards)
