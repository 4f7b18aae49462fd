"""Leaderboard pipeline.

Composes the stages: read -> aggregate -> rank -> emit -> render -> write.

The table is rendered to a string before anything is written, so a failure
in any stage leaves the output stream untouched (not even the header).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from rankboard.adapter.csv_log import LogReader, format_rows, write_text
from rankboard.aggregation.scores import aggregate
from rankboard.config import LeaderboardConfig
from rankboard.models.types import LogRecord, RankedEntry
from rankboard.ranking.emitter import emit, render_rows
from rankboard.ranking.ranker import rank

logger = logging.getLogger(__name__)


@dataclass
class LeaderboardResult:
    """Outcome of one pipeline run.

    Attributes:
        entries: Emitted leaderboard rows in rank order.
        player_count: Number of distinct players in the input.
    """

    entries: list[RankedEntry]
    player_count: int

    def to_csv(self) -> str:
        """Render the entries as the output CSV table, header included."""
        return format_rows(render_rows(self.entries))


def build_leaderboard(
    records: Iterable[LogRecord],
    config: LeaderboardConfig | None = None,
) -> LeaderboardResult:
    """Compute the leaderboard from decoded records.

    Args:
        records: Play records, possibly lazy.
        config: Limit and rounding settings. Defaults to LeaderboardConfig().

    Returns:
        LeaderboardResult with the emitted entries.
    """
    if config is None:
        config = LeaderboardConfig()

    accumulators = aggregate(records)
    groups = rank(accumulators, rounding=config.rounding)
    entries = emit(groups, limit=config.limit)

    logger.info(
        f"Leaderboard: {len(accumulators)} players, {len(groups)} distinct scores, "
        f"{len(entries)} entries emitted (limit={config.limit}, rounding={config.rounding})"
    )
    return LeaderboardResult(entries=entries, player_count=len(accumulators))


def run(
    log_path: Path | str,
    output: TextIO,
    config: LeaderboardConfig | None = None,
) -> LeaderboardResult:
    """Read a CSV play log and write the leaderboard table to output.

    Args:
        log_path: Path to the CSV play log.
        output: Text stream receiving the table.
        config: Limit and rounding settings.

    Returns:
        LeaderboardResult that was written.

    Raises:
        InputAccessError: If the log cannot be opened.
        DecodeError: On the first malformed row.
        ScoreOverflowError: If a player's total leaves the u64 range.
        EncodeError: If a row cannot be serialized.
        OutputWriteError: If writing to output fails.
    """
    logger.info(f"Reading play log from {log_path}")

    with LogReader(log_path) as reader:
        result = build_leaderboard(reader.iter_records(), config)

    write_text(result.to_csv(), output)
    return result
