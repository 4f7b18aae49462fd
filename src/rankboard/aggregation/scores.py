"""Per-player score aggregation.

Folds a stream of play records into running (sum, count) totals.
Domain logic is pure - decoding happens in the csv_log adapter.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rankboard.models.domain import ScoreAccumulator
from rankboard.models.types import LogRecord

logger = logging.getLogger(__name__)


def aggregate(records: Iterable[LogRecord]) -> dict[str, ScoreAccumulator]:
    """Group records by player and accumulate their scores.

    The records iterable may be lazy; any error it raises (for example a
    DecodeError on a malformed row) propagates and the partial totals are
    discarded.

    Args:
        records: Decoded play records in any order.

    Returns:
        Mapping of player_id to its accumulator. Iteration order is
        first-seen order and carries no meaning.

    Raises:
        ScoreOverflowError: If a player's total leaves the u64 range.
    """
    accumulators: dict[str, ScoreAccumulator] = {}
    record_count = 0

    for record in records:
        accumulator = accumulators.get(record.player_id)
        if accumulator is None:
            accumulator = ScoreAccumulator(player_id=record.player_id)
            accumulators[record.player_id] = accumulator
        accumulator.add(record.score)
        record_count += 1

    logger.debug(f"Aggregated {record_count} records into {len(accumulators)} players")
    return accumulators
