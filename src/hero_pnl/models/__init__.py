"""Data models for hero PnL."""

from hero_pnl.models.action import ActionKind, Action, Street
from hero_pnl.models.hand import (
    Player, GameInfo, PotShare, Pot, RawHandHistory
)

__all__ = [
    "ActionKind", "Action", "Street",
    "Player", "GameInfo", "PotShare", "Pot", "RawHandHistory",
]
