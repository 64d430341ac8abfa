"""
Pipe-delimited row formatting.

Flow: Row (typed values) -> format_value per declared column type -> line

Every line is the rendered values joined by ``|`` with one more ``|`` before
the LF terminator. Nulls render as empty fields; there is no quoting or
escaping.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..nulls import is_null
from ..tables import Column, ColumnType
from ..types.date import Date, julian_to_iso
from ..types.decimal import Decimal

DELIMITER = "|"
LINE_TERMINATOR = "\n"


# =============================================================================
# Value Helpers
# =============================================================================

def fmt_bool(val: bool) -> str:
    """Booleans render as Y or N."""
    return "Y" if val else "N"


def fmt_decimal(val: Decimal | int, digits: int | None) -> str:
    """Fixed-point text, truncated to ``digits`` fractional digits."""
    if not isinstance(val, Decimal):
        val = Decimal.from_integer(int(val))
    return val.format(digits)


def fmt_date(val: Date | int) -> str:
    """Calendar dates render as YYYY-MM-DD; an int is read as a julian day."""
    if isinstance(val, Date):
        return val.isoformat()
    return julian_to_iso(int(val))


def fmt_text(val: Any, width: int | None) -> str:
    text = str(val)
    if width is not None and len(text) > width:
        return text[:width]
    return text


def format_value(val: Any, column: Column) -> str:
    """Render one value according to its column type."""
    if val is None:
        return ""
    kind = column.type
    if kind is ColumnType.IDENTIFIER:
        # -1 marks a missing surrogate key
        return "" if val == -1 else str(int(val))
    if kind is ColumnType.BOOLEAN:
        return fmt_bool(val)
    if kind is ColumnType.DECIMAL:
        return fmt_decimal(val, column.precision)
    if kind is ColumnType.DATE:
        return fmt_date(val)
    if kind is ColumnType.JULIAN:
        return str(val.to_julian_days() if isinstance(val, Date) else int(val))
    if kind is ColumnType.INTEGER:
        return str(int(val))
    return fmt_text(val, column.precision)


def format_row(row, columns: Sequence[Column]) -> str:
    """
    Render a row as one output line.

    Args:
        row: Row with typed values and a null bitmap
        columns: Output columns of the row's table, in order

    Returns:
        Line ending in ``|\\n``
    """
    if len(row.values) != len(columns):
        raise ValueError(
            f"Row for '{row.table}' has {len(row.values)} values, expected {len(columns)}"
        )
    fields = [
        "" if is_null(row.null_bitmap, i) else format_value(val, column)
        for i, (val, column) in enumerate(zip(row.values, columns))
    ]
    return DELIMITER.join(fields) + DELIMITER + LINE_TERMINATOR
