"""
time_dim generator: one row per second of the day.

Row n is second n - 1 after midnight. Shift, sub shift, am/pm and meal come
from the hours distribution, indexed by hour. No values are random.
"""

from __future__ import annotations

from ..business_key import make_business_key
from .base import GenerationContext, Row, register


@register("time_dim")
class TimeDimGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.hours = context.distributions.require(
            "hours", "am_pm", "shift", "sub_shift", "meal"
        )

    def generate_row(self, row_number: int) -> Row:
        seconds = row_number - 1
        minutes, second = divmod(seconds, 60)
        hours, minute = divmod(minutes, 60)
        hour = hours % 24

        values = (
            seconds,
            make_business_key(row_number),
            seconds,
            hour,
            minute,
            second,
            self.hours.value_at("am_pm", hour),
            self.hours.value_at("shift", hour),
            self.hours.value_at("sub_shift", hour),
            self.hours.value_at("meal", hour),
        )
        return Row(self.table.name, values)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
