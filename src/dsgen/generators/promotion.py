"""
promotion generator.

A promotion runs for up to 60 days starting near the data period, promotes
a random item and advertises on a set of channels read from one 9-bit draw.
Only the lowest bit of that draw reaches the output: the remaining channel
flags are read after a left shift, so they always come out as N.
"""

from __future__ import annotations

from ..business_key import make_business_key
from ..join_keys import table_join_key
from ..nulls import create_null_bitmap
from ..random.values import uniform_int
from ..text import TextGenerator
from ..types.date import JULIAN_DATE_MINIMUM
from ..types.decimal import Decimal
from .base import GenerationContext, Row, register

PROMO_START_MIN = -720
PROMO_START_MAX = 100
PROMO_LENGTH_MIN = 1
PROMO_LENGTH_MAX = 60
PROMO_NAME_LENGTH = 5
PROMO_DETAIL_MIN_LENGTH = 20
PROMO_DETAIL_MAX_LENGTH = 60
PROMO_COST = Decimal.parse("1000.00")
PROMO_RESPONSE_TARGET = 1
PROMO_PURPOSE = "Unknown"


@register("promotion")
class PromotionGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.text = TextGenerator(context.distributions)
        self._nulls = context.stream("p_nulls")
        self._start_date = context.stream("p_start_date_id")
        self._end_date = context.stream("p_end_date_id")
        self._item = context.stream("p_item_sk")
        self._channels = context.stream("p_channel_dmail")
        self._details = context.stream("p_channel_details")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._nulls)

        start_date = JULIAN_DATE_MINIMUM + uniform_int(PROMO_START_MIN, PROMO_START_MAX, self._start_date)
        end_date = start_date + uniform_int(PROMO_LENGTH_MIN, PROMO_LENGTH_MAX, self._end_date)
        item_sk = table_join_key("item", self._item, self.context.scale)

        flags = uniform_int(0, 511, self._channels)
        channels = [flags & 1 == 1]
        # email, catalog, tv, radio, press, event, demo, then discount_active
        for _ in range(8):
            flags <<= 1
            channels.append(flags & 1 == 1)
        details = self.text.random_text(PROMO_DETAIL_MIN_LENGTH, PROMO_DETAIL_MAX_LENGTH, self._details)

        values = (
            row_number,
            make_business_key(row_number),
            start_date,
            end_date,
            item_sk,
            PROMO_COST,
            PROMO_RESPONSE_TARGET,
            self.text.word(row_number, PROMO_NAME_LENGTH),
            *channels[:8],
            details,
            PROMO_PURPOSE,
            channels[8],
        )
        return Row(self.table.name, values, null_bitmap)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
