"""Interactive training mode."""

from poker_trainer.training.scenario import ScenarioGenerator, deal_new_hand
from poker_trainer.training.session import TrainingSession

__all__ = ["ScenarioGenerator", "deal_new_hand", "TrainingSession"]
