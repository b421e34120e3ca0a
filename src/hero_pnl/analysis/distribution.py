"""Pot bookkeeping helpers that work from the actions alone."""

from typing import Dict, Tuple

from hero_pnl.models.action import ActionKind, Street
from hero_pnl.models.hand import PotShare, RawHandHistory


def derive_distribution(hand: RawHandHistory) -> Tuple[PotShare, ...]:
    """Award the pot to the last player standing when everyone else folded.

    Returns an empty tuple when more than one player is still in the hand.
    """
    remaining = hand.active_players
    if len(remaining) != 1:
        return ()
    winner = remaining[0]
    return (PotShare(player_name=winner.name, amount=hand.pot.amount,
                     hand="Winner by fold", cards=winner.cards),)


def street_pot_contribution(street: Street) -> float:
    """Net chips all players put in on one street.

    A post, bet or raise sets that player's total for the street; a call
    matches the largest total so far.
    """
    totals: Dict[str, float] = {}
    for action in street.actions:
        if action.kind.is_post or action.kind.is_aggressive:
            totals[action.player_name] = action.amount
        elif action.kind == ActionKind.CALL:
            totals[action.player_name] = max(totals.values(), default=0.0)
    return sum(totals.values())
