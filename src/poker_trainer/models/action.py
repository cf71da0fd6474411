"""Phase and action models."""

from enum import Enum


class Phase(str, Enum):
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"

    @property
    def community_count(self) -> int:
        """Number of community cards revealed in this phase."""
        return {"preflop": 0, "flop": 3, "turn": 4, "river": 5}[self.value]


class ActionType(str, Enum):
    FOLD = "fold"
    CALL = "call"
    RAISE = "raise"

    @property
    def ordinal(self) -> int:
        """Passive-to-aggressive ordering used when grading mistakes."""
        return {"fold": 0, "call": 1, "raise": 2}[self.value]

    @classmethod
    def parse(cls, s: str) -> "ActionType":
        """Accept 'fold'/'call'/'raise' or their first letter, any case."""
        key = s.strip().lower()
        for a in cls:
            if key in (a.value, a.value[0]):
                return a
        raise ValueError(f"Unknown action: {s}")
