"""
Calendar arithmetic for the date dimension, bugs included.

The generated data treats every year divisible by 4 as a leap year, derives
the day of week from a doomsday variant that inherits that rule, and computes
"last day of month" with an identity that only holds because of it. These
rules are reproduced exactly; they are not errors and are not logged.

Provides:
- Date: year/month/day value with julian day conversion
- is_leap_year, days_through_first_of_month: shared calendar tables
- Reference constants (data window, fixed "today")
"""

from __future__ import annotations

from dataclasses import dataclass

WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Days before the first of each month, indexed by month (index 0 unused)
MONTH_DAYS = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
MONTH_DAYS_LEAP_YEAR = (0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)

_CENTURY_ANCHORS = (3, 2, 0, 5)
_KNOWN_DOOMSDAYS = (0, 3, 0, 0, 4, 9, 6, 11, 8, 5, 10, 7, 12)

# Days before year 1 in the julian day epoch
_JULIAN_EPOCH_OFFSET = 1721118


def is_leap_year(year: int) -> bool:
    """Leap test used throughout the generated data: divisible by 4, nothing else."""
    return year % 4 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(month: int, year: int) -> int:
    if month in (1, 3, 5, 7, 8, 10, 12):
        return 31
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise ValueError(f"Invalid month {month}")


def days_through_first_of_month(month: int, year: int) -> int:
    table = MONTH_DAYS_LEAP_YEAR if is_leap_year(year) else MONTH_DAYS
    return table[month]


@dataclass(frozen=True, order=True)
class Date:
    """
    Calendar date without validation beyond what the generator needs.

    Attributes:
        year: Four digit year
        month: Month 1-12
        day: Day of month 1-31
    """

    year: int
    month: int
    day: int

    @classmethod
    def validated(cls, year: int, month: int, day: int) -> "Date":
        """Build a date, checking ranges against the generator's own calendar."""
        if year <= 0:
            raise ValueError("Year must be a positive value")
        if not 1 <= month <= 12:
            raise ValueError("Month must be a number between 1 and 12 (inclusive)")
        if not 1 <= day <= days_in_month(month, year):
            raise ValueError(f"Day {day} out of range for {year}-{month:02d}")
        return cls(year, month, day)

    @classmethod
    def from_julian_days(cls, julian_days: int) -> "Date":
        """Convert a julian day number to a Gregorian date."""
        l = julian_days + 68569
        n = (4 * l) // 146097
        l = l - (146097 * n + 3) // 4
        i = (4000 * (l + 1)) // 1461001
        l = l - (1461 * i) // 4 + 31
        j = (80 * l) // 2447
        day = l - (2447 * j) // 80
        l = j // 11
        month = j + 2 - 12 * l
        year = 100 * (n - 49) + i + l
        return cls(year, month, day)

    def to_julian_days(self) -> int:
        """Convert to a julian day number (March-based year, Gregorian rules)."""
        month, year = self.month, self.year
        if month <= 2:
            month += 12
            year -= 1
        return (
            self.day
            + (153 * month - 457) // 5
            + 365 * year
            + year // 4
            - year // 100
            + year // 400
            + _JULIAN_EPOCH_OFFSET
            + 1
        )

    # =========================================================================
    # Derived calendar values
    # =========================================================================

    @property
    def day_index(self) -> int:
        """1-based day of year under the divisible-by-4 leap rule."""
        return days_through_first_of_month(self.month, self.year) + self.day

    @property
    def day_of_week(self) -> int:
        """Day of week, 0 = Sunday, via the doomsday rule with the leap defect."""
        known = list(_KNOWN_DOOMSDAYS)
        if is_leap_year(self.year):
            known[1] = 4
            known[2] = 1

        century_anchor = _CENTURY_ANCHORS[(self.year // 100 - 15) % 4]
        q, r = divmod(self.year % 100, 12)
        doomsday = (century_anchor + q + r + r // 4) % 7

        result = self.day - known[self.month]
        while result < 0:
            result += 7
        while result > 6:
            result -= 7
        return (result + doomsday) % 7

    def first_day_of_month(self) -> "Date":
        return Date(self.year, self.month, 1)

    def last_day_of_month(self) -> "Date":
        # Legacy identity: julian - day + days before this month
        julian_days = (
            self.to_julian_days() - self.day + days_through_first_of_month(self.month, self.year)
        )
        return Date.from_julian_days(julian_days)

    def same_day_last_year(self) -> "Date":
        day = self.day
        if is_leap_year(self.year) and self.month == 2 and self.day == 29:
            day = 28
        return Date(self.year - 1, self.month, day)

    def same_day_last_quarter(self) -> "Date":
        """Same offset from the start of the previous quarter."""
        quarter = (self.month - 1) // 3
        start_of_quarter = Date(self.year, quarter * 3 + 1, 1).to_julian_days()
        distance = self.to_julian_days() - start_of_quarter

        if quarter > 0:
            previous = Date(self.year, (quarter - 1) * 3 + 1, 1)
        else:
            previous = Date(self.year - 1, 10, 1)
        return Date.from_julian_days(previous.to_julian_days() + distance)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


def julian_to_iso(julian_days: int) -> str:
    return Date.from_julian_days(julian_days).isoformat()


# =============================================================================
# Reference constants
# =============================================================================

TODAYS_DATE = Date(2003, 1, 8)
CURRENT_QUARTER = 1
CURRENT_WEEK = 2

DATE_MINIMUM = Date(1998, 1, 1)
DATE_MAXIMUM = Date(2002, 12, 31)
JULIAN_DATE_MINIMUM = 2450815
JULIAN_DATE_MAXIMUM = 2452640
JULIAN_DATA_START_DATE = 2450815
JULIAN_DATA_END_DATE = 2453005

# Date dimension window: row 1 is the day after 1900-01-01
DATE_DIM_BASE = Date(1900, 1, 1)
DATE_DIM_FIRST = Date(1900, 1, 2)
DATE_DIM_LAST = Date(2100, 1, 1)
