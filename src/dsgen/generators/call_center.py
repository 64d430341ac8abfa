"""
call_center generator.

call_center keeps type 2 history: every business key has one to three
versions (see scd.compute_scd_key). The open date, name and address are
fixed per business key and only drawn on its first version. Every other
attribute is drawn on every row and then either kept or replaced by the
previous version's value, as the row's change flags decide.

Class and hours always take the new value but still spend a flag bit.
"""

from __future__ import annotations

import math
from typing import Any

from ..address import AddressGenerator
from ..nulls import create_null_bitmap
from ..random.values import uniform_int
from ..scd import FieldChanges, block_start, compute_scd_key
from ..tables import table_number
from ..text import TextGenerator, full_name
from ..types.date import JULIAN_DATA_START_DATE
from ..types.decimal import ZERO, Decimal
from .base import GenerationContext, Row, register

OPEN_DATE_BASE = JULIAN_DATA_START_DATE - 23
MAX_EMPLOYEES_UNSCALED = 7
MIN_SQ_FT_PER_EMPLOYEE = 100
MAX_SQ_FT_PER_EMPLOYEE = 700
MARKET_CLASS_MAX_LENGTH = 50
MARKET_DESC_MAX_LENGTH = 100
MARKET_TEXT_MIN_LENGTH = 20
DIVISION_NAME_MAX_LENGTH = 50
COMPANY_NAME_MAX_LENGTH = 10
MAX_TAX_PERCENTAGE = Decimal.parse("0.12")


@register("call_center")
class CallCenterGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.table_number = table_number(self.table.name)
        store = context.distributions
        self.call_centers = store.require("call_centers", "name")
        self.classes = store.require("call_center_classes", "class")
        self.hours = store.require("call_center_hours", "hours")
        self.first_names = store.require("first_names", "name")
        self.last_names = store.require("last_names", "name")
        self.text = TextGenerator(store)
        self.addresses = AddressGenerator(store)
        self._previous: dict[str, Any] | None = None

    def _stream(self, name: str):
        return self.context.stream(f"cc_{name}")

    def generate_row(self, row_number: int) -> Row:
        # Drawn to keep the null stream aligned; call centers carry no nulls
        create_null_bitmap(self.table, self._stream("nulls"))
        scale = self.context.scale
        key = compute_scd_key(self.table_number, row_number)

        if key.is_new_key or self._previous is None:
            open_date = OPEN_DATE_BASE - uniform_int(-365, 0, self._stream("open_date_id"))
            count = self.call_centers.size
            name = self.call_centers.value_at("name", row_number % count)
            if row_number // count > 0:
                name = f"{name}_{row_number // count}"
            address = self.addresses.make_address(self.table, scale, self._stream("address"))
        else:
            open_date = self._previous["open_date"]
            name = self._previous["name"]
            address = self._previous["address"]

        changes = FieldChanges(self._stream("scd").next(), key.is_new_key, self._previous)

        cc_class = self.classes.pick_random("class", self._stream("class"))
        changes.skip()
        max_employees = MAX_EMPLOYEES_UNSCALED * math.ceil(scale) * math.ceil(scale)
        employees = changes.pick("employees", uniform_int(1, max_employees, self._stream("employees")))
        sq_ft = changes.pick(
            "sq_ft",
            uniform_int(MIN_SQ_FT_PER_EMPLOYEE, MAX_SQ_FT_PER_EMPLOYEE, self._stream("sq_ft")) * employees,
        )
        hours = self.hours.pick_random("hours", self._stream("hours"))
        changes.skip()
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
        # Company and division share a stream
        company = changes.pick("company", uniform_int(1, 6, self._stream("company")))
        division = changes.pick("division", uniform_int(1, 6, self._stream("company")))
        division_name = changes.pick("division_name", self.text.word(division, DIVISION_NAME_MAX_LENGTH))
        company_name = changes.pick("company_name", self.text.word(company, COMPANY_NAME_MAX_LENGTH))
        tax_percentage = changes.pick(
            "tax_percentage", self._stream("tax_percentage").next_decimal(ZERO, MAX_TAX_PERCENTAGE)
        )

        self._previous = {
            "open_date": open_date,
            "name": name,
            "address": address,
            "employees": employees,
            "sq_ft": sq_ft,
            "manager": manager,
            "market_id": market_id,
            "market_class": market_class,
            "market_desc": market_desc,
            "market_manager": market_manager,
            "company": company,
            "division": division,
            "division_name": division_name,
            "company_name": company_name,
            "tax_percentage": tax_percentage,
        }

        values = (
            row_number,
            key.business_key,
            key.start_date,
            None if key.end_date == -1 else key.end_date,
            -1,
            open_date,
            name,
            cc_class,
            employees,
            sq_ft,
            hours,
            manager,
            market_id,
            market_class,
            market_desc,
            market_manager,
            division,
            division_name,
            company,
            company_name,
            *address.as_columns(),
            tax_percentage,
        )
        return Row(self.table.name, values)

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
