"""Action and Street models."""

from enum import Enum
from dataclasses import dataclass
from typing import Tuple


class ActionKind(str, Enum):
    POST_SMALL_BLIND = "post_small_blind"
    POST_BIG_BLIND = "post_big_blind"
    POST_ANTE = "post_ante"
    BET = "bet"
    RAISE = "raise"
    CALL = "call"
    FOLD = "fold"
    CHECK = "check"
    # Labels the loader could not classify. The engine ignores them.
    UNKNOWN = "unknown"

    @property
    def is_post(self) -> bool:
        return self in (ActionKind.POST_SMALL_BLIND, ActionKind.POST_BIG_BLIND,
                        ActionKind.POST_ANTE)

    @property
    def is_aggressive(self) -> bool:
        return self in (ActionKind.BET, ActionKind.RAISE)


@dataclass(frozen=True)
class Action:
    """A single player action on a street."""
    player_name: str
    kind: ActionKind
    amount: float = 0.0
    cards: Tuple[str, ...] = ()

    def __str__(self) -> str:
        if self.kind in (ActionKind.FOLD, ActionKind.CHECK):
            return f"{self.player_name} {self.kind.value}s"
        if self.kind.is_post:
            label = self.kind.value.replace("post_", "").replace("_", " ")
            return f"{self.player_name} posts {label} ${self.amount:.2f}"
        return f"{self.player_name} {self.kind.value}s ${self.amount:.2f}"


@dataclass(frozen=True)
class Street:
    """One betting round: its name, board cards dealt and ordered actions."""
    name: str
    actions: Tuple[Action, ...] = ()
    cards: Tuple[str, ...] = ()

    def actions_by(self, player_name: str) -> Tuple[Action, ...]:
        return tuple(a for a in self.actions if a.player_name == player_name)
