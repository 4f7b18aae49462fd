"""CSV ranking table encoding.

Serializes rendered rows with minimal quoting: fields containing the
delimiter, a quote or a line break are quoted and quotes are doubled.
Lines end with a bare newline.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Sequence
from typing import TextIO

from rankboard.core.errors import EncodeError, OutputWriteError


def format_rows(rows: Iterable[Sequence[str]]) -> str:
    """Encode rows as CSV text.

    Raises:
        EncodeError: If a row cannot be serialized.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    for row in rows:
        try:
            writer.writerow(row)
        except csv.Error as e:
            raise EncodeError(f"Failed to encode row {row!r}: {e}") from e
    return buffer.getvalue()


def write_text(text: str, stream: TextIO) -> None:
    """Write already-encoded text to stream in one call and flush.

    Raises:
        EncodeError: If the stream encoding cannot represent the text.
        OutputWriteError: If the stream rejects the write.
    """
    try:
        stream.write(text)
        stream.flush()
    except UnicodeEncodeError as e:
        encoding = getattr(stream, "encoding", None) or "output"
        raise EncodeError(f"Failed to encode output as {encoding}: {e.reason}") from e
    except OSError as e:
        raise OutputWriteError(f"Failed to write output: {e}") from e
