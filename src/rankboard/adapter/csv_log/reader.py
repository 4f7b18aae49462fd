"""CSV play log decoding.

Adapter for reading play records from CSV. Handles:
- File open/close and resource cleanup
- Header validation (player_id and score columns required)
- Row decoding into LogRecord, aborting on the first bad row

Extra columns (create_timestamp in the usual log format) are ignored.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO

from pydantic import ValidationError

from rankboard.config import PLAYER_ID_COLUMN, SCORE_COLUMN
from rankboard.core.errors import DecodeError, InputAccessError
from rankboard.models.types import LogRecord


def _format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into a single line."""
    parts = []
    for detail in error.errors():
        field = ".".join(str(loc) for loc in detail["loc"]) or "record"
        parts.append(f"{field}: {detail['msg']}")
    return "; ".join(parts)


def _decode_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    """Decode raw log lines as UTF-8, one physical line at a time.

    A leading BOM on the first line is dropped so the first header name
    matches.

    Raises:
        DecodeError: On undecodable bytes, with the physical line number.
    """
    for number, raw in enumerate(raw_lines, start=1):
        encoding = "utf-8-sig" if number == 1 else "utf-8"
        try:
            yield raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(number, f"invalid UTF-8: {e.reason}") from e


def iter_log_records(lines: Iterable[str]) -> Iterator[LogRecord]:
    """Decode CSV text lines into LogRecords, lazily.

    The first non-blank row is the header. Blank lines are skipped. Every
    data row must have as many fields as the header.

    Args:
        lines: CSV text, one line per item (an open text file works).

    Yields:
        LogRecord per data row, in input order.

    Raises:
        DecodeError: On a missing required column, a field count mismatch,
            an invalid score or malformed CSV.
    """
    reader = csv.reader(lines, strict=True)
    header: list[str] | None = None
    player_idx = score_idx = 0

    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            raise DecodeError(reader.line_num, f"malformed CSV: {e}") from e

        if not row:
            continue

        if header is None:
            header = row
            missing = [c for c in (PLAYER_ID_COLUMN, SCORE_COLUMN) if c not in header]
            if missing:
                raise DecodeError(
                    reader.line_num, f"header is missing column(s): {', '.join(missing)}"
                )
            player_idx = header.index(PLAYER_ID_COLUMN)
            score_idx = header.index(SCORE_COLUMN)
            continue

        if len(row) != len(header):
            raise DecodeError(
                reader.line_num,
                f"expected {len(header)} fields, found {len(row)}",
            )

        try:
            yield LogRecord(player_id=row[player_idx], score=row[score_idx])
        except ValidationError as e:
            raise DecodeError(reader.line_num, _format_validation_error(e)) from e


class LogReader:
    """Play log file reader with record iteration.

    Usage:
        with LogReader(path) as reader:
            for record in reader.iter_records():
                process(record)
    """

    def __init__(self, log_path: Path | str):
        """Initialize log reader.

        Args:
            log_path: Path to CSV play log.
        """
        self._path = Path(log_path)
        self._file: IO[bytes] | None = None

    def __enter__(self) -> "LogReader":
        """Open log file."""
        self._open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close log file."""
        self._close()

    def _open(self) -> None:
        """Open the underlying file.

        Raises:
            InputAccessError: If the path is missing, a directory or unreadable.
        """
        try:
            self._file = open(self._path, "rb")
        except FileNotFoundError as e:
            raise InputAccessError(self._path, "file not found") from e
        except IsADirectoryError as e:
            raise InputAccessError(self._path, "is a directory") from e
        except PermissionError as e:
            raise InputAccessError(self._path, "permission denied") from e
        except OSError as e:
            raise InputAccessError(self._path, e.strerror or str(e)) from e

    def _close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    @property
    def path(self) -> Path:
        return self._path

    def iter_records(self) -> Iterator[LogRecord]:
        """Iterate decoded records.

        Raises:
            RuntimeError: If called outside the context manager.
            DecodeError: On the first malformed row.
        """
        if self._file is None:
            raise RuntimeError("LogReader not opened - use as context manager")
        return iter_log_records(_decode_lines(self._file))
