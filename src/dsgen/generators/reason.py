"""
reason generator: one row per return reason, descriptions in distribution order.

The row count grows slowly with scale; past the end of the list the
descriptions start over from the first reason.
"""

from __future__ import annotations

from ..business_key import make_business_key
from ..nulls import create_null_bitmap
from .base import GenerationContext, Row, register


@register("reason")
class ReasonGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.reasons = context.distributions.require("return_reasons", "reason")
        self._nulls = context.stream("r_nulls")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._nulls)
        values = (
            row_number,
            make_business_key(row_number),
            self.reasons.value_at_mod("reason", row_number - 1),
        )
        return Row(self.table.name, values, null_bitmap)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
