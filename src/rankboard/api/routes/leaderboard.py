"""Leaderboard API endpoint.

POST /api/leaderboard - Rank players from a CSV play log sent as the body
"""

from __future__ import annotations

import dataclasses
import io
from typing import Literal

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from rankboard.adapter.csv_log import iter_log_records
from rankboard.api.app import get_config
from rankboard.config import LeaderboardConfig
from rankboard.core.errors import DecodeError, LeaderboardError, ScoreOverflowError
from rankboard.models.types import LeaderboardResponse
from rankboard.pipeline import build_leaderboard

router = APIRouter()


@router.post("/leaderboard", response_model=LeaderboardResponse)
def create_leaderboard(
    body: bytes = Body(default=b"", media_type="text/csv"),
    limit: int | None = Query(default=None, ge=1),
    output_format: Literal["json", "csv"] = Query(default="json", alias="format"),
    config: LeaderboardConfig = Depends(get_config),
):
    """Compute the leaderboard for the uploaded play log.

    Args:
        body: CSV play log (UTF-8), sent as text/csv.
        limit: Soft row limit overriding the configured one.
        output_format: "json" for a LeaderboardResponse, "csv" for the CLI table.
        config: Settings (injected).

    Returns:
        LeaderboardResponse, or text/csv when format is "csv".

    Raises:
        HTTPException: 422 if the log cannot be decoded, 400 on other
            leaderboard errors.
    """
    if limit is not None:
        config = dataclasses.replace(config, limit=limit)

    try:
        text = body.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=422, detail=f"Body is not valid UTF-8: {e.reason}") from e

    try:
        result = build_leaderboard(iter_log_records(io.StringIO(text, newline="")), config)
        if output_format == "csv":
            return PlainTextResponse(result.to_csv(), media_type="text/csv")
    except (DecodeError, ScoreOverflowError) as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    except LeaderboardError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    return LeaderboardResponse(
        entries=result.entries,
        player_count=result.player_count,
        limit=config.limit,
        rounding=config.rounding,
    )
