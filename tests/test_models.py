"""Tests for pydantic and domain models.

Tests validate:
1. Model creation with valid data
2. Model validation rejects invalid scores
3. Models are immutable
4. ScoreAccumulator arithmetic and overflow
"""

import pytest
from pydantic import ValidationError

from rankboard.config import U64_MAX
from rankboard.core.errors import ScoreOverflowError
from rankboard.models.domain import ScoreAccumulator
from rankboard.models.types import LeaderboardResponse, LogRecord, RankedEntry


class TestLogRecord:
    """Test LogRecord model."""

    def test_valid_record(self):
        """Valid input should create model."""
        record = LogRecord(player_id="player0001", score=1200)
        assert record.player_id == "player0001"
        assert record.score == 1200

    def test_numeric_string_score_is_parsed(self):
        """Decimal text scores are converted to int."""
        record = LogRecord(player_id="p", score="42")
        assert record.score == 42

    def test_zero_score_allowed(self):
        """Zero is a valid unsigned score."""
        assert LogRecord(player_id="p", score="0").score == 0

    def test_u64_max_allowed(self):
        """Largest u64 value is accepted."""
        assert LogRecord(player_id="p", score=str(U64_MAX)).score == U64_MAX

    def test_above_u64_rejected(self):
        """Scores beyond u64 are rejected."""
        with pytest.raises(ValidationError):
            LogRecord(player_id="p", score=str(U64_MAX + 1))

    def test_negative_score_rejected(self):
        """Negative scores are rejected."""
        with pytest.raises(ValidationError):
            LogRecord(player_id="p", score=-1)
        with pytest.raises(ValidationError):
            LogRecord(player_id="p", score="-1")

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "10.0", " 10", "+5", "1e3"])
    def test_non_integer_text_rejected(self, raw):
        """Only plain unsigned decimals are accepted as text."""
        with pytest.raises(ValidationError):
            LogRecord(player_id="p", score=raw)

    def test_boolean_score_rejected(self):
        """Booleans are not scores."""
        with pytest.raises(ValidationError):
            LogRecord(player_id="p", score=True)

    def test_record_is_frozen(self):
        """LogRecord cannot be mutated."""
        record = LogRecord(player_id="p", score=1)
        with pytest.raises(ValidationError):
            record.score = 2


class TestRankedEntry:
    """Test RankedEntry model."""

    def test_valid_entry(self):
        """Valid entry should create model."""
        entry = RankedEntry(rank=1, player_id="B", mean_score=20)
        assert entry.rank == 1
        assert entry.mean_score == 20

    def test_rank_must_be_positive(self):
        """Rank starts at 1."""
        with pytest.raises(ValidationError):
            RankedEntry(rank=0, player_id="B", mean_score=20)

    def test_entries_compare_by_value(self):
        """Equal fields produce equal entries."""
        assert RankedEntry(rank=2, player_id="A", mean_score=15) == RankedEntry(
            rank=2, player_id="A", mean_score=15
        )


class TestLeaderboardResponse:
    """Test LeaderboardResponse model."""

    def test_rounding_literal_enforced(self):
        """Unknown rounding policy is rejected."""
        with pytest.raises(ValidationError):
            LeaderboardResponse(entries=[], player_count=0, limit=10, rounding="floor")

    def test_serializes_entries(self):
        """Entries dump as plain dicts."""
        response = LeaderboardResponse(
            entries=[RankedEntry(rank=1, player_id="B", mean_score=20)],
            player_count=1,
            limit=10,
            rounding="half_up",
        )
        assert response.model_dump()["entries"] == [
            {"rank": 1, "player_id": "B", "mean_score": 20}
        ]


class TestScoreAccumulator:
    """Test ScoreAccumulator domain model."""

    def test_starts_empty(self):
        """New accumulator has zero sum and count."""
        acc = ScoreAccumulator(player_id="A")
        assert acc.sum == 0
        assert acc.count == 0

    def test_add_updates_sum_and_count(self):
        """add() folds a score in."""
        acc = ScoreAccumulator(player_id="A")
        acc.add(10)
        acc.add(20)
        assert acc.sum == 30
        assert acc.count == 2

    def test_mean_uses_rounding_policy(self):
        """mean() rounds 2.5 according to the policy."""
        acc = ScoreAccumulator(player_id="A")
        acc.add(2)
        acc.add(3)
        assert acc.mean("half_up") == 3
        assert acc.mean("half_even") == 2

    def test_overflow_raises(self):
        """Sum beyond u64 raises ScoreOverflowError and leaves state intact."""
        acc = ScoreAccumulator(player_id="A")
        acc.add(U64_MAX)
        with pytest.raises(ScoreOverflowError) as exc_info:
            acc.add(1)
        assert exc_info.value.player_id == "A"
        assert acc.sum == U64_MAX
        assert acc.count == 1
