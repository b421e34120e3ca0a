"""Hero profit and loss for a single hand record."""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from hero_pnl.models.hand import RawHandHistory
from hero_pnl.analysis.contribution import ContributionAccumulator, HeroContribution
from hero_pnl.analysis.outcome import (
    Outcome, OutcomeResolver, Resolution, calculate_hero_pnl,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PnLBreakdown:
    """Everything that went into a hand's result, for display and auditing."""
    hero_name: Optional[str]
    contribution: HeroContribution = field(default_factory=HeroContribution)
    resolution: Resolution = Resolution.NO_HERO
    is_winner: Optional[bool] = None
    winner_count: int = 0
    pnl: float = 0.0

    @property
    def is_estimate(self) -> bool:
        return self.resolution.is_heuristic


def _normalize(value: float, fallback: float) -> float:
    """Replace non-finite results and collapse -0.0 to 0.0."""
    if not math.isfinite(value):
        value = fallback if math.isfinite(fallback) else 0.0
    return value + 0.0


class PnLCalculator:
    """Compute the hero's profit or loss for one hand.

    Stateless: every call works on its own local accumulators, so one
    instance may be shared freely between threads. Never raises for odd
    records; a hand without a hero is worth 0.0.
    """

    def __init__(self, accumulator: Optional[ContributionAccumulator] = None,
                 resolver: Optional[OutcomeResolver] = None):
        self.accumulator = accumulator or ContributionAccumulator()
        self.resolver = resolver or OutcomeResolver()

    def calculate(self, hand: RawHandHistory) -> float:
        return self.explain(hand).pnl

    def explain(self, hand: RawHandHistory) -> PnLBreakdown:
        """Return the result together with how it was reached."""
        hero = hand.hero
        if hero is None:
            logger.debug("No hero in hand; result is 0")
            return PnLBreakdown(hero_name=None)

        contribution = self.accumulator.accumulate(hand.streets, hero.name)
        outcome: Outcome = self.resolver.resolve(hand, hero, contribution.total)
        pnl = _normalize(outcome.pnl, hand.pot.hero_pnl)

        logger.debug("Hero %s contributed %.2f, resolved by %s: %.2f",
                     hero.name, contribution.total, outcome.resolution.value, pnl)

        return PnLBreakdown(
            hero_name=hero.name,
            contribution=contribution,
            resolution=outcome.resolution,
            is_winner=outcome.is_winner,
            winner_count=outcome.winner_count,
            pnl=pnl,
        )


_default_calculator = PnLCalculator()


def calculate_hand_history_pnl(hand: RawHandHistory) -> float:
    """Hero profit or loss for a full hand record.

    Results settled by ``Resolution.LAST_ACTION_CALL`` are a best-effort
    guess; use ``PnLCalculator.explain`` to tell them apart.
    """
    return _default_calculator.calculate(hand)


__all__ = [
    "PnLBreakdown", "PnLCalculator",
    "calculate_hand_history_pnl", "calculate_hero_pnl",
]
