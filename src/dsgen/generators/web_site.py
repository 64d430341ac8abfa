"""
web_site generator.

Type 2 history like call_center. The open and close dates and the site name
belong to the business key; everything else may change between versions.
A new address is drawn on every row, but only its street number, zip code
and GMT offset follow the change flags; the remaining address parts spend
their flag bits and always take the new draw.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from ..address import AddressGenerator
from ..join_keys import date_join_key
from ..nulls import create_null_bitmap
from ..random.values import uniform_int
from ..scd import FieldChanges, block_start, compute_scd_key
from ..tables import table_number
from ..text import TextGenerator, full_name
from ..types.decimal import ZERO, Decimal
from .base import GenerationContext, Row, register

WEB_CLASS = "Unknown"
MARKET_TEXT_MIN_LENGTH = 20
MARKET_CLASS_MAX_LENGTH = 50
MARKET_DESC_MAX_LENGTH = 100
COMPANY_NAME_MAX_LENGTH = 100
MAX_TAX_PERCENTAGE = Decimal.parse("0.12")


@register("web_site")
class WebSiteGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.table_number = table_number(self.table.name)
        store = context.distributions
        self.first_names = store.require("first_names", "name")
        self.last_names = store.require("last_names", "name")
        self.text = TextGenerator(store)
        self.addresses = AddressGenerator(store)
        self._previous: dict[str, Any] | None = None

    def _stream(self, name: str):
        return self.context.stream(f"web_{name}")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._stream("nulls"))
        key = compute_scd_key(self.table_number, row_number)

        if key.is_new_key or self._previous is None:
            open_date = date_join_key(self._stream("open_date"))
            close_date = date_join_key(self._stream("close_date"))
            # A site cannot close after its version ends; open-ended versions never close
            if close_date > key.end_date:
                close_date = -1
            name = f"site_{row_number // 6}"
        else:
            open_date = self._previous["open_date"]
            close_date = self._previous["close_date"]
            name = self._previous["name"]

        changes = FieldChanges(self._stream("scd").next(), key.is_new_key, self._previous)

        manager = changes.pick(
            "manager", full_name(self.first_names, self.last_names, self._stream("manager"))
        )
        market_id = changes.pick("market_id", uniform_int(1, 6, self._stream("market_id")))
        market_class = changes.pick(
            "market_class",
            self.text.random_text(MARKET_TEXT_MIN_LENGTH, MARKET_CLASS_MAX_LENGTH, self._stream("market_class")),
        )
        market_desc = changes.pick(
            "market_desc",
            self.text.random_text(MARKET_TEXT_MIN_LENGTH, MARKET_DESC_MAX_LENGTH, self._stream("market_desc")),
        )
        market_manager = changes.pick(
            "market_manager",
            full_name(self.first_names, self.last_names, self._stream("market_manager")),
        )
        company_id = changes.pick("company_id", uniform_int(1, 6, self._stream("company_id")))
        company_name = changes.pick("company_name", self.text.word(company_id, COMPANY_NAME_MAX_LENGTH))

        address = self.addresses.make_address(self.table, self.context.scale, self._stream("address"))
        changes.skip(2)  # city, county
        gmt_offset = changes.pick("gmt_offset", address.gmt_offset)
        changes.skip(4)  # state, street type, both street names
        street_number = changes.pick("street_number", address.street_number)
        zip_code = changes.pick("zip", address.zip)
        address = replace(address, street_number=street_number, zip=zip_code, gmt_offset=gmt_offset)

        tax_percentage = changes.pick(
            "tax_percentage", self._stream("tax_percentage").next_decimal(ZERO, MAX_TAX_PERCENTAGE)
        )

        self._previous = {
            "open_date": open_date,
            "close_date": close_date,
            "name": name,
            "manager": manager,
            "market_id": market_id,
            "market_class": market_class,
            "market_desc": market_desc,
            "market_manager": market_manager,
            "company_id": company_id,
            "company_name": company_name,
            "gmt_offset": address.gmt_offset,
            "street_number": address.street_number,
            "zip": address.zip,
            "tax_percentage": tax_percentage,
        }

        values = (
            row_number,
            key.business_key,
            key.start_date,
            None if key.end_date == -1 else key.end_date,
            name,
            open_date,
            close_date,
            WEB_CLASS,
            manager,
            market_id,
            market_class,
            market_desc,
            market_manager,
            company_id,
            company_name,
            *address.as_columns(),
            tax_percentage,
        )
        return Row(self.table.name, values, null_bitmap)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        """Seek to the start of the row's version block and replay up to ``start_row``."""
        first = block_start(start_row)
        self.context.skip_rows(first)
        self._previous = None
        for number in range(first, start_row):
            self.generate_row(number)
            self.context.consume_remaining_seeds()
