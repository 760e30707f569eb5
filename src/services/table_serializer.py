"""Serialize joined rows to CSV bytes."""

import csv
import io
from typing import Iterable, Sequence

from src.config import HEADER_ROW

# Minimal quoting: a cell is quoted (inner quotes doubled) only when it holds
# a comma, a double quote, CR or LF. Both line-break characters are in the
# terminator, so the writer quotes either one.
LINE_TERMINATOR = "\r\n"


def serialize_table(rows: Iterable[Sequence], header: Sequence[str] = HEADER_ROW) -> bytes:
    """Header first, then one CRLF-terminated line per row, UTF-8 encoded."""
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, lineterminator=LINE_TERMINATOR, quoting=csv.QUOTE_MINIMAL)
    writer.writerow([_cell(v) for v in header])
    for row in rows:
        writer.writerow([_cell(v) for v in row])
    return buffer.getvalue().encode("utf-8")


def _cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
