"""Value types shared by the generators: calendar dates and fixed-point decimals."""

from .date import (
    CURRENT_QUARTER,
    CURRENT_WEEK,
    TODAYS_DATE,
    WEEKDAY_NAMES,
    Date,
    days_through_first_of_month,
    is_leap_year,
    julian_to_iso,
)
from .decimal import Decimal

__all__ = [
    "CURRENT_QUARTER",
    "CURRENT_WEEK",
    "TODAYS_DATE",
    "WEEKDAY_NAMES",
    "Date",
    "Decimal",
    "days_through_first_of_month",
    "is_leap_year",
    "julian_to_iso",
]
