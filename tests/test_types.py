"""
Tests for calendar dates, fixed-point decimals, business keys and null bitmaps.
"""

from dataclasses import replace

import pytest

from dsgen.business_key import make_business_key
from dsgen.nulls import create_null_bitmap, is_null
from dsgen.random import RngStream
from dsgen.tables import REASON
from dsgen.types import Date, Decimal, days_through_first_of_month, is_leap_year, julian_to_iso


class TestJulianConversion:
    """Tests for julian day numbers."""

    def test_date_dim_base(self):
        assert Date(1900, 1, 1).to_julian_days() == 2415021

    def test_data_window(self):
        assert Date(1998, 1, 1).to_julian_days() == 2450815
        assert Date(2002, 12, 31).to_julian_days() == 2452640

    @pytest.mark.parametrize(
        "date",
        [Date(1900, 1, 2), Date(1900, 3, 1), Date(2000, 2, 29), Date(2003, 1, 8), Date(2100, 1, 1)],
    )
    def test_round_trip(self, date):
        assert Date.from_julian_days(date.to_julian_days()) == date

    def test_julian_to_iso(self):
        assert julian_to_iso(2415022) == "1900-01-02"


class TestLegacyCalendar:
    """The generated data uses a divisible-by-4 leap rule and its consequences."""

    def test_leap_rule_ignores_centuries(self):
        assert is_leap_year(1900)
        assert is_leap_year(2000)
        assert is_leap_year(2100)
        assert not is_leap_year(2001)

    def test_day_index_in_1900_counts_february_29(self):
        assert Date(1900, 3, 1).day_index == 61
        assert Date(1901, 3, 1).day_index == 60

    def test_day_of_week_1900(self):
        """1900-01-02 is reported as Monday."""
        assert Date(1900, 1, 2).day_of_week == 1

    def test_day_of_week_outside_affected_years(self):
        assert Date(2001, 1, 1).day_of_week == 1
        assert Date(2003, 1, 8).day_of_week == 3

    def test_last_day_of_month_identity(self):
        """julian - day + days-before-month, not the real month end."""
        date = Date(2001, 3, 15)
        expected = date.to_julian_days() - 15 + days_through_first_of_month(3, 2001)
        assert date.last_day_of_month().to_julian_days() == expected

    def test_last_day_of_month_in_january(self):
        assert Date(1900, 1, 2).last_day_of_month().to_julian_days() == 2415020

    def test_same_day_last_year_on_february_29(self):
        assert Date(2004, 2, 29).same_day_last_year() == Date(2003, 2, 28)

    def test_same_day_last_quarter(self):
        assert Date(2001, 5, 15).same_day_last_quarter() == Date(2001, 2, 14)
        assert Date(1900, 1, 2).same_day_last_quarter().to_julian_days() == 2414930

    def test_validated_rejects_bad_day(self):
        with pytest.raises(ValueError):
            Date.validated(2001, 2, 30)
        assert Date.validated(1900, 2, 29) == Date(1900, 2, 29)

    def test_isoformat(self):
        assert str(Date(1900, 1, 2)) == "1900-01-02"


class TestDecimal:
    """Tests for fixed-point decimals."""

    def test_format_truncates(self):
        assert Decimal(12349, 3).format(2) == "12.34"

    def test_format_truncates_negative(self):
        assert Decimal(-12349, 3).format(2) == "-12.34"

    def test_format_pads(self):
        assert Decimal(5, 0).format(2) == "5.00"
        assert Decimal(7, 2).format() == "0.07"

    def test_format_negative_zero(self):
        assert Decimal(-1, 3).format(2) == "0.00"

    def test_parse(self):
        assert Decimal.parse("123.45") == Decimal(12345, 2)
        assert Decimal.parse("7") == Decimal(7, 0)

    def test_negative_precision_rejected(self):
        with pytest.raises(ValueError):
            Decimal(1, -1)


class TestBusinessKey:
    """Tests for make_business_key."""

    def test_key_one(self):
        assert make_business_key(1) == "AAAAAAAABAAAAAAA"

    def test_first_date_key(self):
        assert make_business_key(2415022) == "AAAAAAAAOKJNECAA"

    def test_high_word(self):
        assert make_business_key(2**32) == "BAAAAAAAAAAAAAAA"

    def test_length(self):
        assert len(make_business_key(2**64 - 1)) == 16


class TestNullBitmap:
    """Tests for create_null_bitmap."""

    def test_basis_zero_never_nulls_but_draws_twice(self):
        table = replace(REASON, null_basis_points=0)
        stream = RngStream(251, 2)
        for _ in range(100):
            assert create_null_bitmap(table, stream) == 0
        assert stream.seeds_used == 200

    def test_full_basis_clears_not_null_columns(self):
        table = replace(REASON, null_basis_points=10000)
        stream = RngStream(251, 2)
        for _ in range(100):
            bitmap = create_null_bitmap(table, stream)
            assert bitmap & table.not_null_bitmap == 0

    def test_full_basis_uses_second_draw(self):
        table = replace(REASON, null_basis_points=10000)
        twin = RngStream(251, 2)
        twin.next()
        expected = (twin.next() % 2147483647 + 1) & ~table.not_null_bitmap
        assert create_null_bitmap(table, RngStream(251, 2)) == expected

    def test_is_null(self):
        assert is_null(0b100, 2)
        assert not is_null(0b100, 1)
