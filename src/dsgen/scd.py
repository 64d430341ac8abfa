"""
Type 2 history for call_center, web_page and web_site.

Rows come in blocks of six that hold three business keys: one key with a
single open-ended version, one with two versions split at the middle of the
data period, and one with three versions split at its thirds. Each table
shifts its dates back by six days per table number so tables do not share
change dates.

Within a row, a per-row flag word decides which columns carry over from the
previous version: bit i belongs to the i-th changeable column, and an odd
bit keeps the old value unless the row starts a new business key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .business_key import make_business_key
from .types.date import JULIAN_DATA_END_DATE, JULIAN_DATA_START_DATE

ONE_HALF_DATE = JULIAN_DATA_START_DATE + (JULIAN_DATA_END_DATE - JULIAN_DATA_START_DATE) // 2
ONE_THIRD_PERIOD = (JULIAN_DATA_END_DATE - JULIAN_DATA_START_DATE) // 3
ONE_THIRD_DATE = JULIAN_DATA_START_DATE + ONE_THIRD_PERIOD
TWO_THIRDS_DATE = ONE_THIRD_DATE + ONE_THIRD_PERIOD

ROWS_PER_BLOCK = 6


@dataclass(frozen=True)
class ScdKey:
    """
    Business key and validity window of one history row.

    Attributes:
        business_key: 16-character key shared by every version
        start_date: Julian day the version starts
        end_date: Julian day the version ends, or -1 while it is current
        is_new_key: True on the first version of a business key
    """

    business_key: str
    start_date: int
    end_date: int
    is_new_key: bool


def compute_scd_key(table_number: int, row_number: int) -> ScdKey:
    """Key and dates for a row of the history table with a given number."""
    shift = table_number * 6
    start = JULIAN_DATA_START_DATE - shift
    position = row_number % ROWS_PER_BLOCK

    if position == 1:
        key = ScdKey(make_business_key(row_number), start, -1, True)
    elif position == 2:
        key = ScdKey(make_business_key(row_number), start, ONE_HALF_DATE - shift, True)
    elif position == 3:
        key = ScdKey(make_business_key(row_number - 1), ONE_HALF_DATE - shift + 1, -1, False)
    elif position == 4:
        key = ScdKey(make_business_key(row_number), start, ONE_THIRD_DATE - shift, True)
    elif position == 5:
        key = ScdKey(
            make_business_key(row_number - 1),
            ONE_THIRD_DATE - shift + 1,
            TWO_THIRDS_DATE - shift,
            False,
        )
    else:
        key = ScdKey(make_business_key(row_number - 2), TWO_THIRDS_DATE - shift + 1, -1, False)

    if key.end_date > JULIAN_DATA_END_DATE:
        return ScdKey(key.business_key, key.start_date, -1, key.is_new_key)
    return key


def should_change(flags: int, is_new_key: bool) -> bool:
    return flags % 2 == 0 or is_new_key


def block_start(row_number: int) -> int:
    """First row of the six-row block containing ``row_number``."""
    return row_number - (row_number - 1) % ROWS_PER_BLOCK


class FieldChanges:
    """
    Walks the change flags of one history row, lowest bit first.

    Attributes:
        flags: Remaining flag bits
        is_new_key: Row starts a new business key, so every field changes
        previous: Values of the previous row by field name, None on the
            first row generated
    """

    def __init__(self, flags: int, is_new_key: bool, previous: Mapping[str, Any] | None) -> None:
        self.flags = flags
        self.is_new_key = is_new_key
        self.previous = previous

    def pick(self, field_name: str, new_value: Any) -> Any:
        """Return the new value or the previous row's, then move to the next bit."""
        value = new_value
        if self.previous is not None and not should_change(self.flags, self.is_new_key):
            value = self.previous[field_name]
        self.flags >>= 1
        return value

    def skip(self, count: int = 1) -> None:
        """Move past bits of fields that always take their new value."""
        self.flags >>= count
