"""Tests for mean score ranking.

Invariants:
1. Groups iterate in strictly descending mean score
2. Player ids within a group are in ascending lexical order
3. Every player lands in exactly one group
"""

import random

from rankboard.aggregation.scores import aggregate
from rankboard.models.domain import ScoreAccumulator
from rankboard.models.types import LogRecord
from rankboard.ranking.ranker import rank


def make_records(pairs) -> list[LogRecord]:
    """Build LogRecords from (player_id, score) pairs."""
    return [LogRecord(player_id=player_id, score=score) for player_id, score in pairs]


def _acc(player_id: str, total: int, count: int) -> ScoreAccumulator:
    return ScoreAccumulator(player_id=player_id, sum=total, count=count)


class TestRank:
    """Tests for rank()."""

    def test_scenario_groups(self, scenario_pairs):
        """B alone at 20, A and C tied at 15."""
        groups = rank(aggregate(make_records(scenario_pairs)))
        assert list(groups.items()) == [(20, ["B"]), (15, ["A", "C"])]

    def test_empty(self):
        """No players, no groups."""
        assert rank({}) == {}

    def test_keys_descending(self):
        """Iteration order is descending mean score."""
        accumulators = {f"p{i}": _acc(f"p{i}", i * 7, 1) for i in range(30)}
        keys = list(rank(accumulators))
        assert keys == sorted(keys, reverse=True)
        assert len(keys) == 30

    def test_ties_sorted_lexically(self):
        """Tied ids are sorted regardless of insertion order."""
        accumulators = {
            pid: _acc(pid, 50, 1) for pid in ["zeta", "Alpha", "alpha", "beta", "10", "9"]
        }
        groups = rank(accumulators)
        assert groups == {50: ["10", "9", "Alpha", "alpha", "beta", "zeta"]}

    def test_tie_order_independent_of_input_order(self):
        """Shuffling accumulator insertion order does not change output."""
        pids = [f"player{i:04d}" for i in range(50)]
        baseline = rank({pid: _acc(pid, (i % 5) * 10, 1) for i, pid in enumerate(pids)})

        shuffled = list(enumerate(pids))
        random.Random(11).shuffle(shuffled)
        other = rank({pid: _acc(pid, (i % 5) * 10, 1) for i, pid in shuffled})

        assert list(other.items()) == list(baseline.items())

    def test_each_player_in_one_group(self):
        """Groups partition the player set."""
        accumulators = {f"p{i}": _acc(f"p{i}", i % 4, 1) for i in range(20)}
        groups = rank(accumulators)
        members = [pid for ids in groups.values() for pid in ids]
        assert sorted(members) == sorted(accumulators)

    def test_rounding_policy_changes_grouping(self):
        """2.5 joins 3 under half_up and 2 under half_even."""
        accumulators = {
            "half": _acc("half", 5, 2),
            "three": _acc("three", 3, 1),
            "two": _acc("two", 2, 1),
        }
        assert rank(accumulators, rounding="half_up") == {3: ["half", "three"], 2: ["two"]}
        assert rank(accumulators, rounding="half_even") == {3: ["three"], 2: ["half", "two"]}
