"""income_band generator: twenty fixed bands read from the income_band distribution."""

from __future__ import annotations

from ..nulls import create_null_bitmap
from .base import GenerationContext, Row, register


@register("income_band")
class IncomeBandGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.bands = context.distributions.require("income_band", "lower_bound", "upper_bound")
        self._nulls = context.stream("ib_nulls")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._nulls)
        values = (
            row_number,
            self.bands.value_at("lower_bound", row_number - 1),
            self.bands.value_at("upper_bound", row_number - 1),
        )
        return Row(self.table.name, values, null_bitmap)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
