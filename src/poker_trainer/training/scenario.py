"""Scenario generator: deal random decision spots."""

import logging
import random
from typing import List, Optional

from poker_trainer import config
from poker_trainer.engine.deck import Deck
from poker_trainer.models.action import Phase
from poker_trainer.models.game import Blinds, GameState, VillainAction
from poker_trainer.models.position import Position

logger = logging.getLogger(__name__)

VILLAIN_ACTIONS = (
    VillainAction("raises to", 3, "opponent raises"),
    VillainAction("bets", 0.7, "opponent bets"),
    VillainAction("goes all-in for", 1, "opponent goes all-in"),
    VillainAction("raises to", 2.5, "opponent raises big"),
)

# Extra chips on top of the blinds, inclusive.
POT_EXTRA_MIN = 5
POT_EXTRA_MAX = 24
BET_NOISE_MAX = 4


class ScenarioGenerator:
    """Deal fresh training spots.

    Every spot comes from its own shuffled deck, so hole cards and board
    never share a card. Pass a seeded ``random.Random`` for repeatable
    output; by default each generator gets its own OS-seeded source.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.blinds = Blinds(config.SMALL_BLIND, config.BIG_BLIND)

    def deal(self) -> GameState:
        """Deal one spot."""
        rng = self.rng
        deck = Deck(rng)
        player_cards = tuple(deck.deal(2))
        position = rng.choice(list(Position))

        phase = rng.choice(list(Phase))
        community_cards = tuple(deck.deal(phase.community_count))

        villain = rng.choice(VILLAIN_ACTIONS)
        pot_size = self.blinds.total + rng.randint(POT_EXTRA_MIN, POT_EXTRA_MAX)
        bet_to_call = int(pot_size * villain.multiplier) + rng.randint(0, BET_NOISE_MAX)

        state = GameState(
            id=f"{rng.getrandbits(32):08x}",
            player_cards=player_cards,
            community_cards=community_cards,
            position=position,
            stack_size=config.STACK_SIZE,
            blinds=self.blinds,
            pot_size=pot_size,
            bet_to_call=bet_to_call,
            phase=phase,
            villain_action=villain.description,
            villain_bet_size=bet_to_call,
            villain_verb=villain.verb,
        )
        logger.debug("dealt %s: %s | %s | %s pot=%d bet=%d",
                     state.id, state.hole_cards_str, state.board_str or "-",
                     phase.value, pot_size, bet_to_call)
        return state

    def generate(self, count: int = 10) -> List[GameState]:
        """Deal ``count`` independent spots."""
        return [self.deal() for _ in range(count)]


def deal_new_hand(rng: Optional[random.Random] = None) -> GameState:
    """Deal a single random spot."""
    return ScenarioGenerator(rng).deal()
