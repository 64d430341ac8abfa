"""
date_dim generator.

One row per day from 1900-01-02 (row 1) through 2100-01-01 (row 73049).
Row n is julian day n + julian(1900-01-01); every field is derived from the
date alone, so the generator draws nothing.

Several fields reproduce the legacy formulas exactly:
- d_quarter_seq divides the month (not month - 1) by 3, so March lands in
  the following quarter
- d_weekend is set for day-of-week 5 and 6
- d_current_day compares the julian key with the reference day of month
- d_following_holiday on January 1st reads entry 365 or 366 depending on
  whether the previous year is divisible by 4
- d_last_dom uses the julian - day + days-before-month identity
"""

from __future__ import annotations

from ..business_key import make_business_key
from ..types.date import DATE_DIM_BASE, Date, is_leap_year
from .base import GenerationContext, Row, register


@register("date_dim")
class DateDimGenerator:
    """Generates date_dim rows from the calendar distribution."""

    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        self.calendar = context.distributions.require("calendar", "quarter", "holiday")
        self.weekday_names = context.distributions.require("weekday_names", "name")
        self._base_julian = DATE_DIM_BASE.to_julian_days()

    def _holiday(self, day_index: int) -> bool:
        # Calendar entries are addressed by 1-based day index
        return self.calendar.value_at("holiday", day_index - 1) != 0

    def generate_row(self, row_number: int) -> Row:
        ctx = self.context
        date_sk = row_number + self._base_julian
        date = Date.from_julian_days(date_sk)

        year, month, day = date.year, date.month, date.day
        dow = date.day_of_week
        day_index = date.day_index

        week_seq = (row_number + 6) // 7
        month_seq = (year - 1900) * 12 + month - 1
        quarter_seq = (year - 1900) * 4 + month // 3 + 1
        qoy = self.calendar.value_at("quarter", day_index - 1)

        if day_index == 1:
            following_holiday = self._holiday(366 if is_leap_year(year - 1) else 365)
        else:
            following_holiday = self._holiday(day_index - 1)

        current_year = year == ctx.today.year

        values = (
            date_sk,
            make_business_key(date_sk),
            date,
            month_seq,
            week_seq,
            quarter_seq,
            year,
            dow,
            month,
            day,
            qoy,
            year,
            quarter_seq,
            week_seq,
            self.weekday_names.value_at("name", dow),
            f"{year}Q{qoy}",
            self._holiday(day_index),
            dow in (5, 6),
            following_holiday,
            date.first_day_of_month().to_julian_days(),
            date.last_day_of_month().to_julian_days(),
            date.same_day_last_year().to_julian_days(),
            date.same_day_last_quarter().to_julian_days(),
            date_sk == ctx.today.day,
            current_year and week_seq == ctx.current_week,
            current_year and month == ctx.today.month,
            current_year and qoy == ctx.current_quarter,
            current_year,
        )
        return Row(self.table.name, values)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
