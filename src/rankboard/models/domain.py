"""Domain models for rankboard.

Plain dataclasses holding mutable per-player state during aggregation.
"""

from __future__ import annotations

from dataclasses import dataclass

from rankboard.config import U64_MAX, Rounding
from rankboard.core.errors import ScoreOverflowError
from rankboard.core.rounding import round_mean


@dataclass
class ScoreAccumulator:
    """Running score total for a single player."""

    player_id: str
    sum: int = 0
    count: int = 0

    def add(self, score: int) -> None:
        """Fold one score into the running total.

        Raises:
            ScoreOverflowError: If the total leaves the u64 range.
        """
        total = self.sum + score
        if total > U64_MAX:
            raise ScoreOverflowError(self.player_id, total)
        self.sum = total
        self.count += 1

    def mean(self, rounding: Rounding = "half_up") -> int:
        return round_mean(self.sum, self.count, rounding)
