"""Output formatters."""

from hero_pnl.formatters.text import TextFormatter, format_money
from hero_pnl.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter", "format_money"]
