"""
ship_mode generator.

Type and code walk their distributions as a two-digit mixed-radix number of
the row number (type fastest); the carrier is positional. The contract is the
only random value: 1-20 alphanumeric characters from a stream that always
spends 21 draws per row.
"""

from __future__ import annotations

from ..business_key import make_business_key
from ..nulls import create_null_bitmap
from ..random.values import ALPHA_NUMERIC, random_charset
from .base import GenerationContext, Row, register

CONTRACT_MIN_LENGTH = 1
CONTRACT_MAX_LENGTH = 20


@register("ship_mode")
class ShipModeGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        store = context.distributions
        self.types = store.require("ship_mode_type", "type")
        self.codes = store.require("ship_mode_code", "code")
        self.carriers = store.require("ship_mode_carrier", "carrier")
        self._nulls = context.stream("sm_nulls")
        self._contract = context.stream("sm_contract")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._nulls)

        index = row_number
        ship_type = self.types.value_at_mod("type", index)
        index //= self.types.size
        code = self.codes.value_at_mod("code", index)

        values = (
            row_number,
            make_business_key(row_number),
            ship_type,
            code,
            self.carriers.value_at("carrier", row_number - 1),
            random_charset(ALPHA_NUMERIC, CONTRACT_MIN_LENGTH, CONTRACT_MAX_LENGTH, self._contract),
        )
        return Row(self.table.name, values, null_bitmap)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
