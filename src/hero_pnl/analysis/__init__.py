"""Contribution, outcome and PnL calculation."""

from hero_pnl.analysis.contribution import ContributionAccumulator, HeroContribution
from hero_pnl.analysis.outcome import Outcome, OutcomeResolver, Resolution
from hero_pnl.analysis.calculator import (
    PnLBreakdown, PnLCalculator, calculate_hand_history_pnl, calculate_hero_pnl,
)
from hero_pnl.analysis.distribution import derive_distribution, street_pot_contribution

__all__ = [
    "ContributionAccumulator", "HeroContribution",
    "Outcome", "OutcomeResolver", "Resolution",
    "PnLBreakdown", "PnLCalculator",
    "calculate_hand_history_pnl", "calculate_hero_pnl",
    "derive_distribution", "street_pot_contribution",
]
