"""
Null bitmaps.

A row is eligible for nulls with probability null_basis_points / 10000.
An eligible row gets a random bitmap with the table's not-null columns
cleared; column ``i`` is null when bit ``i`` is set. Both draws always
happen, eligible or not, so the stream advances the same way every row.
"""

from __future__ import annotations

from .random.stream import MODULUS, RngStream
from .random.values import uniform_int, uniform_key
from .tables import TableSpec


def create_null_bitmap(table: TableSpec, stream: RngStream) -> int:
    """Draw the null bitmap for one row of a table."""
    threshold = uniform_int(0, 9999, stream)
    bitmap = uniform_key(1, MODULUS, stream)
    if threshold < table.null_basis_points:
        return bitmap & ~table.not_null_bitmap
    return 0


def is_null(null_bitmap: int, position: int) -> bool:
    """True when the column at ``position`` is null under the bitmap."""
    return (null_bitmap >> position) & 1 == 1
