"""Hero PnL - profit and loss of a single poker hand from the hero's seat."""

from hero_pnl.analysis.calculator import (
    PnLCalculator,
    calculate_hand_history_pnl,
    calculate_hero_pnl,
)

__version__ = "0.1.0"

__all__ = [
    "PnLCalculator",
    "calculate_hand_history_pnl",
    "calculate_hero_pnl",
]
