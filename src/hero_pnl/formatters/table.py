"""Rich table formatting for terminal output."""

from typing import List, Tuple

from rich.console import Console
from rich.table import Table

from hero_pnl.models.hand import RawHandHistory
from hero_pnl.analysis.calculator import PnLBreakdown
from hero_pnl.analysis.distribution import derive_distribution
from hero_pnl.formatters.text import format_money


def _pnl_style(amount: float) -> str:
    if amount > 0:
        return "green"
    if amount < 0:
        return "red"
    return "white"


class TableFormatter:
    """Format PnL results as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_results(self, rows: List[Tuple[str, PnLBreakdown]]) -> None:
        """Print one row per hand: source, hero, resolution and result."""
        table = Table(title="Hero PnL")
        table.add_column("Hand", style="cyan")
        table.add_column("Hero")
        table.add_column("Resolved by")
        table.add_column("PnL", justify="right")

        for label, b in rows:
            resolution = b.resolution.value
            if b.is_estimate:
                resolution += " [dim](estimate)[/dim]"
            table.add_row(
                label,
                b.hero_name or "[dim]-[/dim]",
                resolution,
                f"[{_pnl_style(b.pnl)}]{format_money(b.pnl, signed=True)}[/]",
            )

        self.console.print(table)

    def print_breakdown(self, breakdown: PnLBreakdown,
                        hand: RawHandHistory) -> None:
        """Print per-street contributions and how the outcome was resolved."""
        if breakdown.hero_name is None:
            self.console.print("[yellow]No hero in hand; result is 0.[/yellow]")
            return

        table = Table(title=f"{breakdown.hero_name}: {hand.summary()}")
        table.add_column("Street", style="cyan")
        table.add_column("Contributed", justify="right")

        for street, amount in breakdown.contribution.by_street.items():
            table.add_row(street, format_money(amount))
        table.add_row("[bold]Total[/bold]",
                      f"[bold]{format_money(breakdown.contribution.total)}[/bold]")
        self.console.print(table)

        self.console.print(f"Pot: {format_money(hand.pot.amount)}")
        self.console.print(f"Resolved by: [cyan]{breakdown.resolution.value}[/cyan]")
        if breakdown.is_estimate:
            self.console.print("[yellow]Result is an estimate.[/yellow]")
        if not hand.pot.distribution:
            for share in derive_distribution(hand):
                self.console.print(f"Winner: {share.player_name} ({share.hand})")

        style = _pnl_style(breakdown.pnl)
        self.console.print(
            f"Result: [{style}]{format_money(breakdown.pnl, signed=True)}[/{style}]")
