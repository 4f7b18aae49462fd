"""Runtime configuration.

Fixed format constants live here alongside the tunable settings. Tunables
are read from the environment:

- RANKBOARD_LIMIT: soft limit on emitted rows (default 10)
- RANKBOARD_ROUNDING: mean rounding policy, "half_up" or "half_even"
- RANKBOARD_LOG_LEVEL: log level for the CLI (default WARNING)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, cast

from rankboard.core.errors import ConfigError

# Input columns
PLAYER_ID_COLUMN = "player_id"
SCORE_COLUMN = "score"

# Output table
OUTPUT_COLUMNS = ("rank", "player_id", "mean_score")

# Largest value of an unsigned 64-bit integer
U64_MAX = 2**64 - 1

Rounding = Literal["half_up", "half_even"]
ROUNDING_POLICIES: tuple[Rounding, ...] = ("half_up", "half_even")

DEFAULT_LIMIT = 10
DEFAULT_ROUNDING: Rounding = "half_up"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class LeaderboardConfig:
    """Settings for one leaderboard run.

    Attributes:
        limit: Soft limit on emitted rows; tie groups are never split.
        rounding: Rounding policy for mean scores.
        log_level: Name of the logging level.
    """

    limit: int = DEFAULT_LIMIT
    rounding: Rounding = DEFAULT_ROUNDING
    log_level: str = DEFAULT_LOG_LEVEL


def parse_limit(raw: str) -> int:
    try:
        limit = int(raw)
    except ValueError as e:
        raise ConfigError(f"RANKBOARD_LIMIT must be an integer, got {raw!r}") from e
    if limit < 1:
        raise ConfigError(f"RANKBOARD_LIMIT must be >= 1, got {limit}")
    return limit


def parse_rounding(raw: str) -> Rounding:
    value = raw.strip().lower()
    if value not in ROUNDING_POLICIES:
        raise ConfigError(
            f"RANKBOARD_ROUNDING must be one of {', '.join(ROUNDING_POLICIES)}, got {raw!r}"
        )
    return cast(Rounding, value)


def parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"RANKBOARD_LOG_LEVEL is not a logging level: {raw!r}")
    return level


def load_config(environ: Mapping[str, str] | None = None) -> LeaderboardConfig:
    """Build configuration from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        LeaderboardConfig with defaults for unset variables.

    Raises:
        ConfigError: If a variable is set to an invalid value.
    """
    if environ is None:
        environ = os.environ

    return LeaderboardConfig(
        limit=parse_limit(environ.get("RANKBOARD_LIMIT", str(DEFAULT_LIMIT))),
        rounding=parse_rounding(environ.get("RANKBOARD_ROUNDING", DEFAULT_ROUNDING)),
        log_level=parse_log_level(environ.get("RANKBOARD_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
