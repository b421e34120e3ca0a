"""Hero PnL CLI - Typer-based command line interface."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from hero_pnl import config

app = typer.Typer(
    name="hero-pnl",
    help="Hero profit and loss for recorded poker hands",
    no_args_is_help=True,
)
console = Console()


def _load(file: Path, hero: Optional[str]):
    from hero_pnl.parser import HandFormatError, load_hand, with_hero

    try:
        hand = load_hand(file)
        if hero:
            hand = with_hero(hand, hero)
    except (HandFormatError, OSError) as e:
        console.print(f"[red]Error reading {file.name}:[/red] {escape(str(e))}",
                      soft_wrap=True)
        raise typer.Exit(1)
    return hand


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v",
                                 help="Log how each result was resolved"),
):
    """Configure logging for every command."""
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@app.command()
def pnl(
    files: List[Path] = typer.Argument(..., help="Hand record JSON files",
                                       exists=True, readable=True, dir_okay=False),
    hero: Optional[str] = typer.Option(None, "--hero", "-H",
                                       help="Player name to treat as hero"),
):
    """Print the hero's profit or loss for each hand."""
    from hero_pnl.analysis.calculator import PnLCalculator
    from hero_pnl.formatters.table import TableFormatter
    from hero_pnl.formatters.text import TextFormatter

    calc = PnLCalculator()
    rows = [(file.name, calc.explain(_load(file, hero))) for file in files]

    if len(rows) == 1:
        console.print(TextFormatter().format_result(*rows[0]),
                      highlight=False, markup=False)
    else:
        TableFormatter(console).print_results(rows)


@app.command()
def explain(
    file: Path = typer.Argument(..., help="Hand record JSON file",
                                exists=True, readable=True, dir_okay=False),
    hero: Optional[str] = typer.Option(None, "--hero", "-H",
                                       help="Player name to treat as hero"),
    plain: bool = typer.Option(False, "--plain", help="Plain text instead of a table"),
):
    """Show per-street contributions and how the result was resolved."""
    from hero_pnl.analysis.calculator import PnLCalculator
    from hero_pnl.formatters.table import TableFormatter
    from hero_pnl.formatters.text import TextFormatter

    hand = _load(file, hero)
    breakdown = PnLCalculator().explain(hand)

    if plain:
        console.print(TextFormatter().format_breakdown(breakdown, hand),
                      highlight=False, markup=False)
    else:
        TableFormatter(console).print_breakdown(breakdown, hand)


if __name__ == "__main__":
    app()
