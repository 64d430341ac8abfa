"""Row formatting and table file output."""

from .formatter import DELIMITER, format_row, format_value
from .writer import TableWriter

__all__ = [
    "DELIMITER",
    "TableWriter",
    "format_row",
    "format_value",
]
