"""
household_demographics generator.

Rows enumerate every combination of income band, buy potential, dependant
count and vehicle count. The row number is read as a mixed-radix number with
income band as the fastest-moving digit, so row 1 is band 2 and the band
wraps to 1 on every twentieth row.
"""

from __future__ import annotations

from ..nulls import create_null_bitmap
from .base import GenerationContext, Row, register


@register("household_demographics")
class HouseholdDemographicsGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        store = context.distributions
        self.income_bands = store.require("income_band", "lower_bound")
        self.buy_potential = store.require("buy_potential", "buy_potential")
        self.dep_count = store.require("dep_count", "dep_count")
        self.vehicle_count = store.require("vehicle_count", "vehicle_count")
        self._nulls = context.stream("hd_nulls")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._nulls)

        index = row_number
        income_band_sk = index % self.income_bands.size + 1
        index //= self.income_bands.size
        buy_potential = self.buy_potential.value_at_mod("buy_potential", index)
        index //= self.buy_potential.size
        dep_count = self.dep_count.value_at_mod("dep_count", index)
        index //= self.dep_count.size
        vehicle_count = self.vehicle_count.value_at_mod("vehicle_count", index)

        values = (row_number, income_band_sk, buy_potential, dep_count, vehicle_count)
        return Row(self.table.name, values, null_bitmap)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
