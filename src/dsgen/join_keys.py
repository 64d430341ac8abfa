"""
Foreign keys from one generated table into another.

A join key is drawn from the referencing column's own stream, so it is as
reproducible as any other value. Keys into date_dim are julian days in the
sales years; keys into history tables pick a business key id and come back
as -1 when that id has no row at the current scale.
"""

from __future__ import annotations

from .random.stream import RngStream
from .random.values import uniform_int, uniform_key
from .tables import get_table
from .types.date import DATE_MAXIMUM, DATE_MINIMUM, JULIAN_DATA_END_DATE, TODAYS_DATE, Date, is_leap_year


def date_join_key(stream: RngStream) -> int:
    """
    Julian day of a random date in the sales years.

    Two draws: the year, then the day of that year. Days after the reference
    "today" come back as -1.
    """
    year = uniform_int(DATE_MINIMUM.year, DATE_MAXIMUM.year, stream)
    day = uniform_int(0, 365 if is_leap_year(year) else 364, stream)
    julian = Date(year, 1, 1).to_julian_days() + day
    return -1 if julian > TODAYS_DATE.to_julian_days() else julian


def table_join_key(table: str, stream: RngStream, scale: float, join_count: int = 1) -> int:
    """
    Surrogate key of a random row of another table (one draw).

    Args:
        table: Referenced table
        stream: Stream of the referencing column
        scale: Scale factor
        join_count: Julian day the reference is made on; history tables
            give -1 past the end of the data period

    Returns:
        Key in [1, row count], or -1 for no row
    """
    spec = get_table(table)
    if spec.name == "date_dim":
        return date_join_key(stream)
    if not spec.keeps_history:
        return uniform_key(1, spec.row_count(scale), stream)
    if join_count > JULIAN_DATA_END_DATE:
        return -1
    key = uniform_key(1, spec.id_count(scale), stream)
    return -1 if key > spec.row_count(scale) else key
