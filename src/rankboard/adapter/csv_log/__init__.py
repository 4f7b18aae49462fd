"""CSV adapters for play logs and ranking tables.

- reader: CSV play log -> LogRecord iteration
- writer: rendered ranking rows -> CSV text
"""

from rankboard.adapter.csv_log.reader import LogReader, iter_log_records
from rankboard.adapter.csv_log.writer import format_rows, write_text

__all__ = [
    "LogReader",
    "format_rows",
    "iter_log_records",
    "write_text",
]
