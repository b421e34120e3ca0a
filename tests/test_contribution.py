"""Tests for the hero contribution accumulator."""

import pytest

from hero_pnl.models.action import Action, ActionKind, Street
from hero_pnl.analysis.contribution import ContributionAccumulator


def _street(name, *actions):
    return Street(name=name, actions=tuple(Action(p, k, amt) for p, k, amt in actions))


@pytest.fixture
def acc():
    return ContributionAccumulator()


class TestPostsAndBets:
    def test_blinds_and_ante_add_directly(self, acc):
        street = _street("preflop",
                         ("Hero", ActionKind.POST_ANTE, 0.5),
                         ("Hero", ActionKind.POST_BIG_BLIND, 2.0))
        result = acc.accumulate([street], "Hero")
        assert result.total == 2.5

    def test_small_blind(self, acc):
        street = _street("preflop", ("Hero", ActionKind.POST_SMALL_BLIND, 1.0))
        assert acc.accumulate([street], "Hero").total == 1.0

    def test_bet_is_incremental(self, acc):
        street = _street("flop",
                         ("Hero", ActionKind.BET, 10.0),
                         ("Villain", ActionKind.CALL, 10.0))
        assert acc.accumulate([street], "Hero").by_street == {"flop": 10.0}

    def test_fold_and_check_add_nothing(self, acc):
        street = _street("flop",
                         ("Hero", ActionKind.CHECK, 0.0),
                         ("Villain", ActionKind.BET, 10.0),
                         ("Hero", ActionKind.FOLD, 0.0))
        assert acc.accumulate([street], "Hero").total == 0.0

    def test_unknown_kind_ignored(self, acc):
        street = _street("flop",
                         ("Hero", ActionKind.UNKNOWN, 500.0),
                         ("Hero", ActionKind.BET, 5.0))
        assert acc.accumulate([street], "Hero").total == 5.0

    def test_opponent_actions_not_counted(self, acc):
        street = _street("preflop",
                         ("Villain", ActionKind.POST_BIG_BLIND, 2.0),
                         ("Villain", ActionKind.RAISE, 8.0))
        assert acc.accumulate([street], "Hero").total == 0.0


class TestRaise:
    def test_raise_sets_street_total(self, acc):
        """Raise amount replaces the street commitment rather than adding to it."""
        street = _street("flop",
                         ("Hero", ActionKind.BET, 10.0),
                         ("Villain", ActionKind.RAISE, 25.0),
                         ("Hero", ActionKind.RAISE, 40.0))
        result = acc.accumulate([street], "Hero")
        assert result.by_street["flop"] == 40.0
        assert result.total == 40.0

    def test_raise_over_blind_replaces_blind(self, acc):
        street = _street("preflop",
                         ("Hero", ActionKind.POST_BIG_BLIND, 2.0),
                         ("Villain", ActionKind.RAISE, 6.0),
                         ("Hero", ActionKind.RAISE, 18.0))
        assert acc.accumulate([street], "Hero").total == 18.0


class TestCall:
    def test_call_tops_up_to_highest_bet(self, acc):
        street = _street("preflop",
                         ("Hero", ActionKind.POST_BIG_BLIND, 5.0),
                         ("Villain", ActionKind.RAISE, 20.0),
                         ("Hero", ActionKind.CALL, 15.0))
        assert acc.accumulate([street], "Hero").total == 20.0

    def test_call_after_matching_adds_nothing(self, acc):
        street = _street("flop",
                         ("Hero", ActionKind.BET, 50.0),
                         ("Villain", ActionKind.CALL, 50.0),
                         ("Hero", ActionKind.CALL, 50.0))
        assert acc.accumulate([street], "Hero").total == 50.0

    def test_call_sized_against_street_maximum(self, acc):
        # Highest bet on the street is known before hero's actions are scanned
        street = _street("turn",
                         ("Villain1", ActionKind.BET, 10.0),
                         ("Hero", ActionKind.CALL, 10.0),
                         ("Villain2", ActionKind.RAISE, 30.0),
                         ("Villain1", ActionKind.FOLD, 0.0))
        assert acc.accumulate([street], "Hero").total == 30.0

    def test_call_with_no_bet_is_free(self, acc):
        street = _street("flop", ("Hero", ActionKind.CALL, 0.0))
        assert acc.accumulate([street], "Hero").total == 0.0


class TestStreets:
    def test_highest_bet_resets_each_street(self, acc):
        streets = [
            _street("preflop",
                    ("Villain", ActionKind.RAISE, 20.0),
                    ("Hero", ActionKind.CALL, 20.0)),
            _street("flop",
                    ("Villain", ActionKind.BET, 5.0),
                    ("Hero", ActionKind.CALL, 5.0)),
        ]
        result = acc.accumulate(streets, "Hero")
        assert result.by_street == {"preflop": 20.0, "flop": 5.0}
        assert result.total == 25.0

    def test_total_is_non_decreasing(self, acc):
        streets = [
            _street("preflop", ("Hero", ActionKind.POST_BIG_BLIND, 2.0)),
            _street("flop", ("Hero", ActionKind.CHECK, 0.0)),
            _street("turn", ("Hero", ActionKind.BET, 8.0)),
        ]
        running = 0.0
        for i in range(1, len(streets) + 1):
            total = acc.accumulate(streets[:i], "Hero").total
            assert total >= running
            running = total

    def test_no_streets(self, acc):
        result = acc.accumulate([], "Hero")
        assert result.total == 0.0
        assert result.by_street == {}

    def test_streets_sharing_a_name_are_summed(self, acc):
        streets = [
            _street("preflop", ("Hero", ActionKind.POST_BIG_BLIND, 2.0)),
            _street("flop", ("Hero", ActionKind.BET, 6.0)),
            _street("preflop", ("Villain", ActionKind.BET, 3.0), ("Hero", ActionKind.CALL, 3.0)),
        ]
        result = acc.accumulate(streets, "Hero")
        assert result.by_street == {"preflop": 5.0, "flop": 6.0}
        assert list(result.by_street) == ["preflop", "flop"]
        assert result.total == 11.0

    def test_result_is_hashable(self, acc):
        street = _street("flop", ("Hero", ActionKind.BET, 4.0))
        first = acc.accumulate([street], "Hero")
        second = acc.accumulate([street], "Hero")
        assert hash(first) == hash(second)
        assert first.streets == (("flop", 4.0),)
