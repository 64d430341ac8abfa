"""
Tests for scale resolution and the table catalog.
"""

import math

import pytest

from dsgen.errors import InvalidScaleError, UnsupportedTableError
from dsgen.scaling import (
    DEFINED_SCALES,
    ScalingInfo,
    ScalingModel,
    pseudo_table_count,
    validate_scale,
)
from dsgen.tables import INVENTORY_WEEKS, TABLES, get_table, id_count, row_count

# Row counts at scale factor 1
SF1_ROW_COUNTS = {
    "call_center": 6,
    "catalog_page": 11718,
    "customer": 100000,
    "customer_address": 50000,
    "customer_demographics": 1920800,
    "date_dim": 73049,
    "household_demographics": 7200,
    "income_band": 20,
    "inventory": 11745000,
    "item": 18000,
    "promotion": 300,
    "reason": 35,
    "ship_mode": 20,
    "store": 12,
    "time_dim": 86400,
    "warehouse": 5,
    "web_page": 60,
    "web_site": 30,
}


class TestValidateScale:
    """Tests for scale factor validation."""

    @pytest.mark.parametrize("scale", [0, -1, -0.5, math.nan, 100001, "abc", None])
    def test_invalid_scales(self, scale):
        with pytest.raises(InvalidScaleError):
            validate_scale(scale)

    @pytest.mark.parametrize("scale", [0.001, 1, 2.5, 100000])
    def test_valid_scales(self, scale):
        assert validate_scale(scale) == float(scale)

    def test_row_count_rejects_invalid_scale(self):
        with pytest.raises(InvalidScaleError):
            row_count("date_dim", 0)


class TestScalingModels:
    """Tests for ScalingInfo interpolation."""

    call_center = ScalingInfo(0, ScalingModel.LOGARITHMIC, (0, 3, 12, 15, 18, 21, 24, 27, 30, 30))
    store_sales = ScalingInfo(4, ScalingModel.LINEAR, (0, 24, 240, 2400, 7200, 24000, 72000, 240000, 720000, 2400000))
    catalog_page = ScalingInfo(0, ScalingModel.STATIC, (0, 11718, 12000, 20400, 26000, 30000, 36000, 40000, 46000, 50000))

    def test_exact_defined_scales(self):
        for scale, count in zip(DEFINED_SCALES[1:], self.call_center.counts[1:]):
            assert self.call_center.row_count_for_scale(scale) == count

    def test_logarithmic_interpolation(self):
        """Halfway between 1 and 10 adds half the bracket's delta to the SF1 count."""
        assert self.call_center.row_count_for_scale(5.5) == 7

    def test_logarithmic_uses_scale_one_base_in_higher_brackets(self):
        """The base stays at the SF1 count even between 10 and 100."""
        assert self.call_center.row_count_for_scale(55) == 3 + int(0.5 * 3)

    def test_logarithmic_below_one(self):
        assert self.call_center.row_count_for_scale(0.5) == 1

    def test_logarithmic_never_zero(self):
        assert self.call_center.row_count_for_scale(0.01) == 1

    def test_linear_below_one_rounds(self):
        assert self.store_sales.row_count_for_scale(0.5) == 12
        assert self.store_sales.row_count_for_scale(0.001) == 1

    def test_linear_greedy_decomposition(self):
        assert self.store_sales.row_count_for_scale(2) == 48
        assert self.store_sales.row_count_for_scale(15) == 240 + 5 * 24
        assert self.store_sales.row_count_for_scale(310) == 7200 + 240

    def test_static_between_defined_scales(self):
        assert self.catalog_page.row_count_for_scale(1.5) == 11718

    def test_multiplier(self):
        assert self.store_sales.scaled_count(1) == 240000

    def test_scale_above_maximum(self):
        with pytest.raises(InvalidScaleError):
            self.call_center.row_count_for_scale(100001)

    def test_wrong_number_of_counts(self):
        with pytest.raises(ValueError):
            ScalingInfo(0, ScalingModel.STATIC, (0, 1))

    def test_negative_count(self):
        with pytest.raises(ValueError):
            ScalingInfo(0, ScalingModel.STATIC, (0, -1) + (1,) * 8)

    def test_pseudo_tables(self):
        assert pseudo_table_count("active_cities", 1) == 2
        assert pseudo_table_count("concurrent_web_sites", 10) == 3


class TestTableCatalog:
    """Tests for per-table row and key counts."""

    def test_catalog_has_every_table(self):
        assert len(TABLES) == 24

    @pytest.mark.parametrize("table,expected", sorted(SF1_ROW_COUNTS.items()))
    def test_sf1_row_counts(self, table, expected):
        assert row_count(table, 1) == expected

    @pytest.mark.parametrize("table", ["date_dim", "time_dim", "income_band", "ship_mode"])
    def test_fixed_tables_do_not_scale(self, table):
        assert row_count(table, 1000) == SF1_ROW_COUNTS[table]

    def test_history_tables_double_rows(self):
        """call_center at 5.5 resolves to 7 business keys, stored twice."""
        assert row_count("call_center", 5.5) == 14

    def test_id_count_collapses_history(self):
        assert id_count("item", 1) == 9000
        assert id_count("call_center", 1) == 3
        assert id_count("web_site", 1) == 15

    def test_id_count_remainder_rule(self):
        """Remainders 0-5 map to 0, 1, 2, 2, 3, 3 extra keys."""
        spec = get_table("call_center")
        assert spec.id_count(1) == 3
        assert spec.id_count(5.5) == (14 // 6) * 3 + 2

    def test_id_count_equals_row_count_without_history(self):
        assert id_count("reason", 1) == row_count("reason", 1)

    def test_fact_tables_use_lines_per_order(self):
        assert row_count("store_sales", 1) == 24 * 10**4 * 12
        assert row_count("catalog_sales", 1) == 16 * 10**4 * 9
        assert row_count("web_sales", 1) == 6 * 10**4 * 12

    def test_returns_are_ten_percent_of_sales(self):
        assert row_count("store_returns", 1) == row_count("store_sales", 1) // 10
        assert row_count("web_returns", 10) == row_count("web_sales", 10) // 10

    def test_inventory_is_items_by_warehouses_by_weeks(self):
        assert INVENTORY_WEEKS == 261
        assert row_count("inventory", 10) == id_count("item", 10) * row_count("warehouse", 10) * 261

    def test_unknown_table(self):
        with pytest.raises(UnsupportedTableError):
            get_table("no_such_table")

    def test_column_index(self):
        spec = get_table("date_dim")
        assert spec.column_index("d_date_sk") == 0
        assert spec.column_index("d_current_year") == 27
        with pytest.raises(KeyError):
            spec.column_index("missing")
