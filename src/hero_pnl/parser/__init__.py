"""Loading hand records into RawHandHistory."""

from hero_pnl.parser.hand_parser import (
    HandFormatError, HandParser, classify_action,
    load_hand, parse_hand, parse_json, with_hero,
)

__all__ = [
    "HandFormatError", "HandParser", "classify_action",
    "load_hand", "parse_hand", "parse_json", "with_hero",
]
