"""
web_page generator.

Type 2 history without key-fixed attributes: every column is drawn on every
row and the change flags decide which ones keep the previous version's
value. The customer key only reaches the output for autogenerated pages,
but the drawn key is remembered either way.
"""

from __future__ import annotations

from typing import Any

from ..join_keys import date_join_key, table_join_key
from ..nulls import create_null_bitmap
from ..random.values import uniform_int
from ..scd import FieldChanges, block_start, compute_scd_key
from ..tables import table_number
from ..text import WEB_PAGE_URL
from ..types.date import TODAYS_DATE
from .base import GenerationContext, Row, register

AUTOGEN_PERCENT = 30
MAX_DAYS_SINCE_ACCESS = 100


@register("web_page")
class WebPageGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.table_number = table_number(self.table.name)
        self.page_uses = context.distributions.require("web_page_use", "use")
        self._previous: dict[str, Any] | None = None

    def _stream(self, name: str):
        return self.context.stream(f"wp_{name}")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._stream("nulls"))
        key = compute_scd_key(self.table_number, row_number)
        changes = FieldChanges(self._stream("scd").next(), key.is_new_key, self._previous)

        creation_date = changes.pick("creation_date", date_join_key(self._stream("creation_date_sk")))
        access_date = changes.pick(
            "access_date",
            TODAYS_DATE.to_julian_days() - uniform_int(0, MAX_DAYS_SINCE_ACCESS, self._stream("access_date_sk")),
        )
        autogen = changes.pick("autogen", uniform_int(0, 99, self._stream("autogen_flag")) < AUTOGEN_PERCENT)
        customer = changes.pick(
            "customer", table_join_key("customer", self._stream("customer_sk"), self.context.scale)
        )
        changes.skip()  # url
        page_type = self.page_uses.pick_random("use", self._stream("type"))
        changes.skip()
        link_count = changes.pick("link_count", uniform_int(2, 25, self._stream("link_count")))
        image_count = changes.pick("image_count", uniform_int(1, 7, self._stream("image_count")))
        max_ad_count = changes.pick("max_ad_count", uniform_int(0, 4, self._stream("max_ad_count")))
        char_count = changes.pick(
            "char_count",
            uniform_int(
                link_count * 125 + image_count * 50,
                link_count * 300 + image_count * 150,
                self._stream("char_count"),
            ),
        )

        self._previous = {
            "creation_date": creation_date,
            "access_date": access_date,
            "autogen": autogen,
            "customer": customer,
            "link_count": link_count,
            "image_count": image_count,
            "max_ad_count": max_ad_count,
            "char_count": char_count,
        }

        values = (
            row_number,
            key.business_key,
            key.start_date,
            None if key.end_date == -1 else key.end_date,
            creation_date,
            access_date,
            autogen,
            customer if autogen else -1,
            WEB_PAGE_URL,
            page_type,
            char_count,
            link_count,
            image_count,
            max_ad_count,
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
