"""Table position model."""

from enum import Enum


class Position(str, Enum):
    BUTTON = "Button"
    SMALL_BLIND = "Small Blind"
    BIG_BLIND = "Big Blind"
    UNDER_THE_GUN = "Under the Gun"
    MIDDLE = "Middle Position"
    CUTOFF = "Cutoff"
