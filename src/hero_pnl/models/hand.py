"""RawHandHistory - the immutable record of a single played hand."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from hero_pnl.models.action import Action, ActionKind, Street


@dataclass(frozen=True)
class Player:
    name: str
    is_hero: bool = False
    seat: int = 0
    stack: float = 0.0
    position: Optional[str] = None
    cards: Tuple[str, ...] = ()
    final_hand: Optional[str] = None
    final_cards: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GameInfo:
    table_size: int = 0
    small_blind: float = 0.0
    big_blind: float = 0.0
    ante: Optional[float] = None
    straddle: Optional[float] = None
    dealer_seat: int = 0


@dataclass(frozen=True)
class PotShare:
    """Chips a player collected from the pot at hand resolution."""
    player_name: str
    amount: float
    hand: str = ""
    cards: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Pot:
    amount: float = 0.0
    # None when the record carries no distribution at all
    distribution: Optional[Tuple[PotShare, ...]] = None
    # Previously recorded hero result, used only as a last resort
    hero_pnl: float = 0.0


@dataclass(frozen=True)
class RawHandHistory:
    """Complete record of a single poker hand."""

    players: Tuple[Player, ...] = ()
    streets: Tuple[Street, ...] = ()
    pot: Pot = field(default_factory=Pot)
    game_info: Optional[GameInfo] = None
    showdown: Optional[bool] = None

    @property
    def hero(self) -> Optional[Player]:
        for p in self.players:
            if p.is_hero:
                return p
        return None

    def all_actions(self) -> Tuple[Action, ...]:
        return tuple(a for s in self.streets for a in s.actions)

    @property
    def folded_players(self) -> FrozenSet[str]:
        return frozenset(a.player_name for a in self.all_actions()
                         if a.kind == ActionKind.FOLD)

    @property
    def active_players(self) -> Tuple[Player, ...]:
        folded = self.folded_players
        return tuple(p for p in self.players if p.name not in folded)

    @property
    def board(self) -> Tuple[str, ...]:
        return tuple(c for s in self.streets for c in s.cards)

    def summary(self) -> str:
        """Short 'AsKc vs QdJd' description of the hero's matchup.

        Opponent cards come from the first opponent who won chips with shown
        cards, then from any opponent with shown final cards. Unknown holdings
        render as '??'.
        """
        hero = self.hero
        if hero is None or not hero.cards:
            return "Hand vs ??"
        hero_cards = "".join(hero.cards)

        if self.showdown:
            for share in self.pot.distribution or ():
                if share.player_name != hero.name and share.amount > 0 and share.cards:
                    return f"{hero_cards} vs {''.join(share.cards)}"
            for p in self.players:
                if not p.is_hero and p.final_cards:
                    return f"{hero_cards} vs {''.join(p.final_cards)}"

        return f"{hero_cards} vs ??"
