"""Decide whether the hero won a hand and what that was worth."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hero_pnl.models.action import ActionKind
from hero_pnl.models.hand import Player, RawHandHistory

logger = logging.getLogger(__name__)


class Resolution(str, Enum):
    """Which piece of evidence settled the outcome, most reliable first."""
    DISTRIBUTION = "distribution"
    HERO_FOLDED = "hero_folded"
    SINGLE_SURVIVOR = "single_survivor"
    # Best-effort guess: hero called last, so assume a lost showdown
    LAST_ACTION_CALL = "last_action_call"
    RECORDED_FALLBACK = "recorded_fallback"
    NO_HERO = "no_hero"

    @property
    def is_heuristic(self) -> bool:
        return self in (Resolution.LAST_ACTION_CALL, Resolution.RECORDED_FALLBACK)


@dataclass(frozen=True)
class Outcome:
    resolution: Resolution
    pnl: float
    is_winner: Optional[bool] = None
    winner_count: int = 0


def calculate_hero_pnl(pot_amount: float, hero_contribution: float,
                       is_winner: bool, winning_players: int = 1) -> float:
    """Hero profit or loss given the pot, what hero put in and the result.

    Split pots are divided equally between the winners; side pots and odd
    chips are not modeled.
    """
    # "+ 0.0" collapses -0.0 to 0.0
    if not is_winner:
        return -hero_contribution + 0.0

    if winning_players > 1:
        hero_share = pot_amount / winning_players
        return hero_share - hero_contribution + 0.0

    return pot_amount - hero_contribution + 0.0


class OutcomeResolver:
    """Resolve the hero's result, falling back through weaker evidence.

    Order: the pot distribution, a hero fold, the hero being the only player
    who never folded, the hero calling as their last action on the final
    street (a guess at a lost showdown), and finally the result already
    recorded on the pot.
    """

    def resolve(self, hand: RawHandHistory, hero: Player,
                total_contribution: float) -> Outcome:
        pot = hand.pot

        if pot.distribution:
            winners = [s.player_name for s in pot.distribution if s.amount > 0]
            is_winner = hero.name in winners
            pnl = calculate_hero_pnl(pot.amount, total_contribution,
                                     is_winner, len(winners))
            logger.debug("Resolved from distribution: winners=%s", winners)
            return Outcome(Resolution.DISTRIBUTION, pnl, is_winner, len(winners))

        if any(a.player_name == hero.name and a.kind == ActionKind.FOLD
               for a in hand.all_actions()):
            return Outcome(Resolution.HERO_FOLDED, -total_contribution, False)

        active = hand.active_players
        if len(active) == 1 and active[0].is_hero:
            return Outcome(Resolution.SINGLE_SURVIVOR,
                           pot.amount - total_contribution, True, 1)

        if self._hero_called_last(hand, hero):
            logger.debug("Hero called last on the final street; assuming a loss")
            return Outcome(Resolution.LAST_ACTION_CALL, -total_contribution, False)

        logger.debug("Outcome undetermined; using recorded hero_pnl=%s",
                     pot.hero_pnl)
        return Outcome(Resolution.RECORDED_FALLBACK, pot.hero_pnl)

    def _hero_called_last(self, hand: RawHandHistory, hero: Player) -> bool:
        if not hand.streets:
            return False
        hero_actions = hand.streets[-1].actions_by(hero.name)
        return bool(hero_actions) and hero_actions[-1].kind == ActionKind.CALL
