"""
warehouse generator.

A warehouse is a short generated name, a floor area and an address. The
address comes from the dedicated address stream; the per-part address
streams are owned by the table but never drawn.
"""

from __future__ import annotations

from ..address import AddressGenerator
from ..business_key import make_business_key
from ..nulls import create_null_bitmap
from ..random.values import uniform_int
from ..text import TextGenerator
from .base import GenerationContext, Row, register

NAME_MIN_LENGTH = 10
NAME_MAX_LENGTH = 20
MIN_SQ_FT = 50_000
MAX_SQ_FT = 1_000_000


@register("warehouse")
class WarehouseGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.text = TextGenerator(context.distributions)
        self.addresses = AddressGenerator(context.distributions)
        self._nulls = context.stream("w_nulls")
        self._name = context.stream("w_warehouse_name")
        self._sq_ft = context.stream("w_warehouse_sq_ft")
        self._address = context.stream("w_warehouse_address")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._nulls)
        name = self.text.random_text(NAME_MIN_LENGTH, NAME_MAX_LENGTH, self._name)
        sq_ft = uniform_int(MIN_SQ_FT, MAX_SQ_FT, self._sq_ft)
        address = self.addresses.make_address(self.table, self.context.scale, self._address)

        values = (
            row_number,
            make_business_key(row_number),
            name,
            sq_ft,
            *address.as_columns(),
        )
        return Row(self.table.name, values, null_bitmap)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
