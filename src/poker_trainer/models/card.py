"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum
from typing import List


class Suit(str, Enum):
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "h": cls.HEARTS, "hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "clubs": cls.CLUBS, "♣": cls.CLUBS,
            "s": cls.SPADES, "spades": cls.SPADES, "♠": cls.SPADES,
        }
        key = s if s in mapping else s.lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"hearts": "♥", "diamonds": "♦", "clubs": "♣", "spades": "♠"}[self.value]

    @property
    def color(self) -> str:
        return "red" if self in (Suit.HEARTS, Suit.DIAMONDS) else "black"


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        values = {
            "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8,
            "9": 9, "10": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
        }
        return values[self.value]

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        for r in cls:
            if r.value == c.upper():
                return r
        if c.upper() == "T":
            return cls.TEN
        raise ValueError(f"Unknown rank: {c}")


@dataclass(frozen=True)
class Card:
    """A single playing card."""
    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '10c' or 'K♠'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    @classmethod
    def parse_many(cls, s: str) -> List["Card"]:
        """Parse space or comma separated cards, e.g. 'Ah Kd 10c'."""
        return [cls.parse(tok) for tok in s.replace(",", " ").split()]

    @property
    def value(self) -> int:
        return self.rank.numeric_value

    def __repr__(self) -> str:
        return f"Card({self.rank.value}{self.suit.value[0]})"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.symbol}"
