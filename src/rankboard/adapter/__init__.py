"""Adapter module for IO boundaries.

Adapters wrap file formats behind domain-focused interfaces.
Business logic should use adapters rather than touching CSV directly.

Structure:
- adapter/csv_log/   - play log decoding, ranking table encoding
"""

# Re-export commonly used items for convenience
from rankboard.adapter.csv_log import LogReader, format_rows, iter_log_records, write_text

__all__ = [
    "LogReader",
    "format_rows",
    "iter_log_records",
    "write_text",
]
