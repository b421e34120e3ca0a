"""Build RawHandHistory records from their JSON representation."""

import dataclasses
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from hero_pnl.models.action import Action, ActionKind, Street
from hero_pnl.models.hand import GameInfo, Player, Pot, PotShare, RawHandHistory
from hero_pnl.parser import patterns

logger = logging.getLogger(__name__)

_LABEL_PATTERNS = [
    (patterns.POST_SMALL_BLIND, ActionKind.POST_SMALL_BLIND),
    (patterns.POST_BIG_BLIND, ActionKind.POST_BIG_BLIND),
    (patterns.POST_ANTE, ActionKind.POST_ANTE),
    (patterns.BET, ActionKind.BET),
    (patterns.RAISE, ActionKind.RAISE),
    (patterns.CALL, ActionKind.CALL),
    (patterns.FOLD, ActionKind.FOLD),
    (patterns.CHECK, ActionKind.CHECK),
]


class HandFormatError(ValueError):
    """Raised when a hand record is structurally invalid."""


def classify_action(label: str) -> ActionKind:
    """Map an action label such as 'posts big blind' or 'raises' to a kind.

    Unrecognized labels map to ActionKind.UNKNOWN.
    """
    text = " ".join(str(label).split())
    for pattern, kind in _LABEL_PATTERNS:
        if pattern.match(text):
            return kind
    logger.warning("Unrecognized action label %r; treating as unknown", label)
    return ActionKind.UNKNOWN


def _parse_amount(value: Any, where: str) -> float:
    """Parse a chip amount, accepting numbers and strings with commas."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise HandFormatError(f"{where}: amount must be a number, got {value!r}")
    try:
        amount = float(value.replace(",", "")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise HandFormatError(f"{where}: amount must be a number, got {value!r}")
    if not math.isfinite(amount) or amount < 0:
        raise HandFormatError(f"{where}: amount must be finite and non-negative, got {value!r}")
    return amount


def _parse_int(value: Any, where: str) -> int:
    """Parse a whole number such as a seat or table size; missing means 0."""
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise HandFormatError(f"{where}: must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise HandFormatError(f"{where}: must be an integer, got {value!r}")


def _list(value: Any, where: str) -> List[Any]:
    """Return a JSON array field, treating a missing value as empty."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise HandFormatError(f"{where}: must be a list, got {type(value).__name__}")
    return value


def _cards(value: Any, where: str) -> Tuple[str, ...]:
    return tuple(str(c) for c in _list(value, where))


def _require(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise HandFormatError(f"{where}: missing '{key}'")
    return data[key]


class HandParser:
    """Parse hand records in the snake_case JSON shape into RawHandHistory.

    Action labels are normalized to ActionKind here so the calculator only
    ever sees the closed set of kinds.
    """

    def parse_file(self, filepath: Union[str, Path]) -> RawHandHistory:
        """Parse a JSON file holding one hand record."""
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise HandFormatError(f"File is not valid UTF-8: {e}") from e
        return self.parse_text(text)

    def parse_text(self, text: str) -> RawHandHistory:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise HandFormatError(f"Invalid JSON: {e}") from e
        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> RawHandHistory:
        # Records are sometimes wrapped as {"raw": {...}}
        if isinstance(data, dict) and "raw" in data and "players" not in data:
            data = data["raw"]
        if not isinstance(data, dict):
            raise HandFormatError("Hand record must be a JSON object")

        players = self._parse_players(_require(data, "players", "hand"))
        streets = tuple(self._parse_street(s, i)
                        for i, s in enumerate(_list(data.get("streets"), "hand.streets")))
        pot = self._parse_pot(data.get("pot") or {})

        game_info = None
        if data.get("game_info"):
            game_info = self._parse_game_info(data["game_info"])

        showdown = data.get("showdown")
        return RawHandHistory(
            players=players,
            streets=streets,
            pot=pot,
            game_info=game_info,
            showdown=bool(showdown) if showdown is not None else None,
        )

    def _parse_players(self, raw_players: List[Dict[str, Any]]) -> Tuple[Player, ...]:
        if not isinstance(raw_players, list):
            raise HandFormatError("hand: 'players' must be a list")

        players = []
        seen = set()
        for i, p in enumerate(raw_players):
            where = f"players[{i}]"
            name = str(_require(p, "name", where))
            if name in seen:
                raise HandFormatError(f"{where}: duplicate player name {name!r}")
            seen.add(name)
            players.append(Player(
                name=name,
                is_hero=bool(p.get("is_hero", False)),
                seat=_parse_int(p.get("seat"), f"{where}.seat"),
                stack=_parse_amount(p.get("stack"), f"{where}.stack"),
                position=p.get("position"),
                cards=_cards(p.get("cards"), f"{where}.cards"),
                final_hand=p.get("final_hand"),
                final_cards=_cards(p.get("final_cards"), f"{where}.final_cards"),
            ))

        heroes = [p.name for p in players if p.is_hero]
        if len(heroes) > 1:
            raise HandFormatError(f"hand: more than one hero flagged: {heroes}")
        return tuple(players)

    def _parse_street(self, raw: Dict[str, Any], index: int) -> Street:
        where = f"streets[{index}]"
        name = str(_require(raw, "name", where))
        actions = []
        for j, a in enumerate(_list(raw.get("actions"), f"{where}.actions")):
            action_where = f"{where}.actions[{j}]"
            actions.append(Action(
                player_name=str(_require(a, "player_name", action_where)),
                kind=classify_action(_require(a, "action", action_where)),
                amount=_parse_amount(a.get("amount"), f"{action_where}.amount"),
                cards=_cards(a.get("cards"), f"{action_where}.cards"),
            ))
        return Street(name=name, actions=tuple(actions), cards=_cards(raw.get("cards"), f"{where}.cards"))

    def _parse_pot(self, raw: Dict[str, Any]) -> Pot:
        if not isinstance(raw, dict):
            raise HandFormatError("hand: 'pot' must be an object")

        distribution: Optional[Tuple[PotShare, ...]] = None
        if raw.get("distribution") is not None:
            distribution = tuple(
                PotShare(
                    player_name=str(_require(d, "player_name", f"pot.distribution[{i}]")),
                    amount=_parse_amount(d.get("amount"), f"pot.distribution[{i}].amount"),
                    hand=str(d.get("hand") or ""),
                    cards=_cards(d.get("cards"), f"pot.distribution[{i}].cards"),
                )
                for i, d in enumerate(_list(raw["distribution"], "pot.distribution"))
            )

        hero_pnl = raw.get("hero_pnl") or 0.0
        try:
            hero_pnl = float(hero_pnl)
        except (TypeError, ValueError):
            raise HandFormatError(f"pot.hero_pnl: must be a number, got {hero_pnl!r}")
        if not math.isfinite(hero_pnl):
            raise HandFormatError("pot.hero_pnl: must be finite")

        return Pot(
            amount=_parse_amount(raw.get("amount"), "pot.amount"),
            distribution=distribution,
            hero_pnl=hero_pnl,
        )

    def _parse_game_info(self, raw: Dict[str, Any]) -> GameInfo:
        if not isinstance(raw, dict):
            raise HandFormatError("hand: 'game_info' must be an object")
        ante = raw.get("ante")
        straddle = raw.get("straddle")
        return GameInfo(
            table_size=_parse_int(raw.get("table_size"), "game_info.table_size"),
            small_blind=_parse_amount(raw.get("small_blind"), "game_info.small_blind"),
            big_blind=_parse_amount(raw.get("big_blind"), "game_info.big_blind"),
            ante=_parse_amount(ante, "game_info.ante") if ante is not None else None,
            straddle=_parse_amount(straddle, "game_info.straddle") if straddle is not None else None,
            dealer_seat=_parse_int(raw.get("dealer_seat"), "game_info.dealer_seat"),
        )


def load_hand(filepath: Union[str, Path]) -> RawHandHistory:
    return HandParser().parse_file(filepath)


def parse_hand(data: Dict[str, Any]) -> RawHandHistory:
    return HandParser().parse_dict(data)


def parse_json(text: str) -> RawHandHistory:
    return HandParser().parse_text(text)


def with_hero(hand: RawHandHistory, name: str) -> RawHandHistory:
    """Return a copy of the hand with ``name`` flagged as the only hero."""
    if not any(p.name == name for p in hand.players):
        raise HandFormatError(f"No player named {name!r} in hand")
    players = tuple(dataclasses.replace(p, is_hero=(p.name == name))
                    for p in hand.players)
    return dataclasses.replace(hand, players=players)
