"""Pydantic models for rankboard.

LogRecord is the decoded input unit, RankedEntry the output unit.
Both are immutable once built.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rankboard.config import U64_MAX, Rounding


class LogRecord(BaseModel):
    """One play event from the input log.

    Only player_id and score are kept; other columns such as
    create_timestamp are dropped by the reader.
    """

    model_config = ConfigDict(frozen=True)

    player_id: str
    score: int = Field(ge=0, le=U64_MAX)

    @field_validator("score", mode="before")
    @classmethod
    def check_score_text(cls, value: object) -> object:
        # Text scores must be plain unsigned decimals ("+5", " 5", "5.0" are rejected)
        if isinstance(value, str):
            if not (value.isascii() and value.isdigit()):
                raise ValueError(f"score must be an unsigned integer, got {value!r}")
            return int(value)
        if isinstance(value, bool):
            raise ValueError("score must be an unsigned integer, got a boolean")
        return value


class RankedEntry(BaseModel):
    """One row of the leaderboard."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(ge=1)
    player_id: str
    mean_score: int = Field(ge=0)


class LeaderboardResponse(BaseModel):
    """Leaderboard payload for API response."""

    entries: list[RankedEntry]
    player_count: int
    limit: int
    rounding: Rounding
