"""Error taxonomy for leaderboard runs.

Every failure is fatal for the whole run: errors propagate to the caller
(CLI or API layer) and no partial ranking is produced.
"""

from __future__ import annotations

from pathlib import Path


class LeaderboardError(Exception):
    """Base class for all leaderboard failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputAccessError(LeaderboardError):
    """Input file does not exist or cannot be opened."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Cannot read input file {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class DecodeError(LeaderboardError):
    """A CSV record cannot be decoded into a LogRecord."""

    def __init__(self, line: int, reason: str):
        super().__init__(f"Failed to decode record {line}: {reason}")
        self.line = line
        self.reason = reason


class EncodeError(LeaderboardError):
    """A ranking row cannot be serialized."""


class OutputWriteError(LeaderboardError):
    """The rendered table cannot be written to the output stream."""


class ScoreOverflowError(LeaderboardError):
    """A player's score total left the unsigned 64-bit range."""

    def __init__(self, player_id: str, total: int):
        super().__init__(f"Score total for player {player_id!r} overflows u64: {total}")
        self.player_id = player_id
        self.total = total


class ConfigError(LeaderboardError):
    """An environment setting has an invalid value."""
