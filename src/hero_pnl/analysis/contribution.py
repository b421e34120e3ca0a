"""Reconstruct how many chips the hero committed, street by street."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from hero_pnl.models.action import ActionKind, Street

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeroContribution:
    """Hero's total commitment plus the amount committed on each street."""
    total: float = 0.0
    # (street name, amount) pairs in the order streets were first seen
    streets: Tuple[Tuple[str, float], ...] = ()

    @property
    def by_street(self) -> Dict[str, float]:
        return dict(self.streets)


class ContributionAccumulator:
    """Walk the streets of a hand and sum the hero's commitment.

    Each street is sized independently: the highest bet seen on one street
    never carries over to the next. Posts and bets add their amount, a raise
    sets the hero's street total to the raise amount, and a call tops the
    hero up to the highest bet on the street.
    """

    def accumulate(self, streets: Iterable[Street],
                   hero_name: str) -> HeroContribution:
        total = 0.0
        by_street: Dict[str, float] = {}

        for street in streets:
            committed = self._street_contribution(street, hero_name)
            total += committed
            by_street[street.name] = by_street.get(street.name, 0.0) + committed

        return HeroContribution(total=total, streets=tuple(by_street.items()))

    def _street_contribution(self, street: Street, hero_name: str) -> float:
        """Chips the hero put in on a single street."""
        highest_bet = 0.0
        for action in street.actions:
            if action.kind.is_aggressive:
                highest_bet = max(highest_bet, action.amount)

        committed = 0.0
        for action in street.actions:
            if action.player_name != hero_name:
                if action.kind.is_aggressive:
                    highest_bet = max(highest_bet, action.amount)
                continue

            kind = action.kind
            if kind.is_post or kind == ActionKind.BET:
                committed += action.amount
            elif kind == ActionKind.RAISE:
                # Raise amount is the new street total, not an increment
                committed = action.amount
            elif kind == ActionKind.CALL:
                owed = highest_bet - committed
                if owed > 0:
                    committed += owed
            elif kind == ActionKind.UNKNOWN:
                logger.debug("Ignoring unclassified action by %s on %s",
                             hero_name, street.name)

        return committed
