"""Plain text formatting for terminal output."""

from typing import Optional

from hero_pnl import config
from hero_pnl.models.hand import RawHandHistory
from hero_pnl.analysis.calculator import PnLBreakdown
from hero_pnl.analysis.distribution import derive_distribution


def format_money(amount: float, signed: bool = False) -> str:
    """Render an amount with the configured currency symbol and precision."""
    sign = ""
    if amount < 0:
        sign = "-"
    elif signed and amount > 0:
        sign = "+"
    return f"{sign}{config.CURRENCY_SYMBOL}{abs(amount):,.{config.DECIMALS}f}"


class TextFormatter:
    """Format PnL results as plain text for terminal display."""

    def format_result(self, label: str, breakdown: PnLBreakdown) -> str:
        """One line: label, result and a marker when the result is a guess."""
        if breakdown.hero_name is None:
            return f"{label}: {format_money(0.0)} (no hero)"
        line = f"{label}: {format_money(breakdown.pnl, signed=True)}"
        if breakdown.is_estimate:
            line += f" (estimate: {breakdown.resolution.value})"
        return line

    def format_breakdown(self, breakdown: PnLBreakdown,
                         hand: Optional[RawHandHistory] = None) -> str:
        """Format the full calculation for one hand."""
        lines = []
        if breakdown.hero_name is None:
            lines.append("=== No hero in hand ===")
            lines.append(f"Result: {format_money(0.0)}")
            return "\n".join(lines)

        lines.append(f"=== Hero: {breakdown.hero_name} ===")
        if hand is not None:
            lines.append(f"Matchup: {hand.summary()}")
            lines.append(f"Pot: {format_money(hand.pot.amount)}")

        for street, amount in breakdown.contribution.by_street.items():
            lines.append(f"  [{street.upper()}] {format_money(amount)}")
        lines.append(f"Contributed: {format_money(breakdown.contribution.total)}")

        lines.append(f"Resolved by: {breakdown.resolution.value}")
        if breakdown.winner_count > 1 and breakdown.is_winner:
            lines.append(f"Split {breakdown.winner_count} ways")
        if hand is not None and not hand.pot.distribution:
            for share in derive_distribution(hand):
                lines.append(f"Winner: {share.player_name} ({share.hand})")

        lines.append(f"Result: {format_money(breakdown.pnl, signed=True)}")
        return "\n".join(lines)
