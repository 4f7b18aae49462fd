"""Leaderboard emission.

Walks ranked score groups, assigns standard competition ranks ("1224"
ranking) and stops at the soft limit without splitting a tie group.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from rankboard.config import DEFAULT_LIMIT, OUTPUT_COLUMNS
from rankboard.models.types import RankedEntry


def emit(
    groups: Mapping[int, Sequence[str]],
    limit: int = DEFAULT_LIMIT,
) -> list[RankedEntry]:
    """Build leaderboard entries from ranked groups.

    Every member of a group shares the group's starting rank. The next
    group's rank skips ahead by the group size. Emission stops after the
    first complete group that brings the row count to at least limit, so
    a tie straddling the boundary is emitted whole.

    Args:
        groups: Mean score -> player ids, iterated in descending score
            order with ids already sorted (as returned by rank()).
        limit: Soft limit on the number of entries.

    Returns:
        Entries in emission order.
    """
    entries: list[RankedEntry] = []
    current_rank = 1

    for mean_score, player_ids in groups.items():
        for player_id in player_ids:
            entries.append(
                RankedEntry(rank=current_rank, player_id=player_id, mean_score=mean_score)
            )
        current_rank += len(player_ids)

        if len(entries) >= limit:
            break

    return entries


def render_rows(entries: Iterable[RankedEntry]) -> list[list[str]]:
    """Render entries as a table with a header row.

    The header is always present, even when entries is empty.
    """
    rows = [list(OUTPUT_COLUMNS)]
    for entry in entries:
        rows.append([str(entry.rank), entry.player_id, str(entry.mean_score)])
    return rows
