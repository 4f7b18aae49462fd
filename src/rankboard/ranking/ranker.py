"""Mean score ranking.

Turns per-player accumulators into groups of players sharing a rounded
mean score, ordered for emission.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from rankboard.config import DEFAULT_ROUNDING, Rounding
from rankboard.models.domain import ScoreAccumulator

logger = logging.getLogger(__name__)

# mean_score -> player_ids; iteration order is descending mean_score
RankedGroups = dict[int, list[str]]


def rank(
    accumulators: Mapping[str, ScoreAccumulator],
    rounding: Rounding = DEFAULT_ROUNDING,
) -> RankedGroups:
    """Group players by rounded mean score.

    Args:
        accumulators: Per-player totals from aggregate(). Every accumulator
            has count >= 1.
        rounding: Rounding policy for the mean.

    Returns:
        Dict keyed by mean score in descending order. Each value lists the
        tied player ids in ascending lexical order.
    """
    groups: dict[int, list[str]] = {}
    for player_id, accumulator in accumulators.items():
        groups.setdefault(accumulator.mean(rounding), []).append(player_id)

    ranked: RankedGroups = {
        mean_score: sorted(groups[mean_score])
        for mean_score in sorted(groups, reverse=True)
    }

    logger.debug(f"Ranked {len(accumulators)} players into {len(ranked)} score groups")
    return ranked
