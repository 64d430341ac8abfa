"""
Table catalog: output schemas, stream columns, null rules and row counts.

Every benchmark table is described by a TableSpec. Tables that have a row
generator also carry:
- columns: output columns in file order, with the type that drives formatting
- generator_columns: the random streams the generator owns, each with a
  fixed global column number (its seed) and a per-row draw budget

Stream identities are static: they never depend on run order, chunking, or
which other tables are generated.

Usage:
    spec = get_table("date_dim")
    get_table("cc").name      # "call_center"
    spec.row_count(1.0)       # 73049
    row_count("item", 10)     # scale-aware, history tables doubled
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .errors import UnsupportedTableError
from .scaling import ScalingInfo, ScalingModel, validate_scale
from .types.date import JULIAN_DATE_MAXIMUM, JULIAN_DATE_MINIMUM

L = ScalingModel.LOGARITHMIC
S = ScalingModel.STATIC
N = ScalingModel.LINEAR


class ColumnType(Enum):
    """Declared column types; each renders differently in the output file."""

    IDENTIFIER = "identifier"
    INTEGER = "integer"
    DECIMAL = "decimal"
    CHAR = "char"
    VARCHAR = "varchar"
    DATE = "date"
    JULIAN = "julian"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Column:
    """Output column; ``precision`` is the width for text or fractional digits for decimals."""

    name: str
    type: ColumnType
    precision: int | None = None


@dataclass(frozen=True)
class GeneratorColumn:
    """A random stream owned by a table's generator."""

    name: str
    global_column_number: int
    seeds_per_row: int


@dataclass(frozen=True)
class TableSpec:
    """
    Static description of one table.

    Attributes:
        name: Table name, also the output file stem
        abbreviation: Short name accepted wherever a table name is
        scaling: Row count per scale factor
        keeps_history: Type-2 history table (row count doubled, ids halved)
        is_small: Few rows; addresses draw from the first active places only
        null_basis_points: Chance in 1/10000 that a row gets a null bitmap
        not_null_bitmap: Columns that may never be null
        columns: Output columns (generated tables only)
        generator_columns: Streams, the nulls stream last
        lines_per_order: Average fan-out when the scaling counts orders
        parent: Table whose row count this one derives from
        parent_percent: Share of the parent's rows, in percent
        formula: Custom row count formula of the scale factor
    """

    name: str
    abbreviation: str
    scaling: ScalingInfo
    keeps_history: bool = False
    is_small: bool = False
    null_basis_points: int = 0
    not_null_bitmap: int = 0
    columns: tuple[Column, ...] = ()
    generator_columns: tuple[GeneratorColumn, ...] = ()
    lines_per_order: int = 1
    parent: str | None = None
    parent_percent: int = 100
    formula: Callable[[float], int] | None = field(default=None, compare=False)

    def row_count(self, scale: float) -> int:
        """Number of rows at a scale factor."""
        scale = validate_scale(scale)
        if self.formula is not None:
            return self.formula(scale)
        if self.parent is not None:
            return get_table(self.parent).row_count(scale) * self.parent_percent // 100
        count = self.scaling.scaled_count(scale) * self.lines_per_order
        if self.keeps_history:
            count *= 2
        return count

    def id_count(self, scale: float) -> int:
        """Number of distinct business keys; history tables share keys across rows."""
        count = self.row_count(scale)
        if not self.keeps_history:
            return count
        unique = (count // 6) * 3
        return unique + (0, 1, 2, 2, 3, 3)[count % 6]

    def column_index(self, name: str) -> int:
        for i, column in enumerate(self.columns):
            if column.name == name:
                return i
        raise KeyError(f"{self.name} has no column '{name}'")


def _cols(*specs) -> tuple[Column, ...]:
    return tuple(Column(*spec) for spec in specs)


def _streams(first: int, *specs: tuple[str, int]) -> tuple[GeneratorColumn, ...]:
    """Generator columns numbered consecutively from ``first``."""
    return tuple(
        GeneratorColumn(name, first + i, seeds) for i, (name, seeds) in enumerate(specs)
    )


def _address_columns(prefix: str) -> tuple[tuple, ...]:
    """Address columns shared by call_center, warehouse and web_site, in output order."""
    return (
        (f"{prefix}_street_number", C.CHAR, 10),
        (f"{prefix}_street_name", C.VARCHAR, 60),
        (f"{prefix}_street_type", C.CHAR, 15),
        (f"{prefix}_suite_number", C.CHAR, 10),
        (f"{prefix}_city", C.VARCHAR, 60),
        (f"{prefix}_county", C.VARCHAR, 30),
        (f"{prefix}_state", C.CHAR, 2),
        (f"{prefix}_zip", C.CHAR, 10),
        (f"{prefix}_country", C.VARCHAR, 20),
        (f"{prefix}_gmt_offset", C.INTEGER),
    )


# =============================================================================
# Generated tables
# =============================================================================

C = ColumnType

DATE_DIM = TableSpec(
    name="date_dim",
    abbreviation="date",
    scaling=ScalingInfo(0, S, (0,) + (73049,) * 9),
    not_null_bitmap=0x03,
    columns=_cols(
        ("d_date_sk", C.IDENTIFIER),
        ("d_date_id", C.CHAR, 16),
        ("d_date", C.DATE),
        ("d_month_seq", C.INTEGER),
        ("d_week_seq", C.INTEGER),
        ("d_quarter_seq", C.INTEGER),
        ("d_year", C.INTEGER),
        ("d_dow", C.INTEGER),
        ("d_moy", C.INTEGER),
        ("d_dom", C.INTEGER),
        ("d_qoy", C.INTEGER),
        ("d_fy_year", C.INTEGER),
        ("d_fy_quarter_seq", C.INTEGER),
        ("d_fy_week_seq", C.INTEGER),
        ("d_day_name", C.CHAR, 9),
        ("d_quarter_name", C.CHAR, 6),
        ("d_holiday", C.BOOLEAN),
        ("d_weekend", C.BOOLEAN),
        ("d_following_holiday", C.BOOLEAN),
        ("d_first_dom", C.JULIAN),
        ("d_last_dom", C.JULIAN),
        ("d_same_day_ly", C.JULIAN),
        ("d_same_day_lq", C.JULIAN),
        ("d_current_day", C.BOOLEAN),
        ("d_current_week", C.BOOLEAN),
        ("d_current_month", C.BOOLEAN),
        ("d_current_quarter", C.BOOLEAN),
        ("d_current_year", C.BOOLEAN),
    ),
    generator_columns=_streams(
        159,
        *[(name, 0) for name in (
            "d_date_sk", "d_date_id", "d_date", "d_month_seq", "d_week_seq",
            "d_quarter_seq", "d_year", "d_dow", "d_moy", "d_dom", "d_qoy",
            "d_fy_year", "d_fy_quarter_seq", "d_fy_week_seq", "d_day_name",
            "d_quarter_name", "d_holiday", "d_weekend", "d_following_holiday",
            "d_first_dom", "d_last_dom", "d_same_day_ly", "d_same_day_lq",
            "d_current_day", "d_current_week", "d_current_month",
            "d_current_quarter", "d_current_year",
        )],
        ("d_nulls", 2),
    ),
)

HOUSEHOLD_DEMOGRAPHICS = TableSpec(
    name="household_demographics",
    abbreviation="hd",
    scaling=ScalingInfo(0, S, (0,) + (7200,) * 9),
    not_null_bitmap=0x01,
    columns=_cols(
        ("hd_demo_sk", C.IDENTIFIER),
        ("hd_income_band_sk", C.IDENTIFIER),
        ("hd_buy_potential", C.CHAR, 15),
        ("hd_dep_count", C.INTEGER),
        ("hd_vehicle_count", C.INTEGER),
    ),
    generator_columns=_streams(
        188,
        ("hd_demo_sk", 1),
        ("hd_income_band_id", 1),
        ("hd_buy_potential", 1),
        ("hd_dep_count", 1),
        ("hd_vehicle_count", 1),
        ("hd_nulls", 2),
    ),
)

INCOME_BAND = TableSpec(
    name="income_band",
    abbreviation="ib",
    scaling=ScalingInfo(0, S, (0,) + (20,) * 9),
    is_small=True,
    not_null_bitmap=0x01,
    columns=_cols(
        ("ib_income_band_sk", C.IDENTIFIER),
        ("ib_lower_bound", C.INTEGER),
        ("ib_upper_bound", C.INTEGER),
    ),
    generator_columns=_streams(
        194,
        ("ib_income_band_id", 1),
        ("ib_lower_bound", 1),
        ("ib_upper_bound", 1),
        ("ib_nulls", 2),
    ),
)

REASON = TableSpec(
    name="reason",
    abbreviation="r",
    scaling=ScalingInfo(0, L, (0, 35, 45, 55, 60, 65, 67, 70, 72, 75)),
    is_small=True,
    null_basis_points=100,
    not_null_bitmap=0x03,
    columns=_cols(
        ("r_reason_sk", C.IDENTIFIER),
        ("r_reason_id", C.CHAR, 16),
        ("r_reason_desc", C.CHAR, 100),
    ),
    generator_columns=_streams(
        248,
        ("r_reason_sk", 1),
        ("r_reason_id", 1),
        ("r_reason_description", 1),
        ("r_nulls", 2),
    ),
)

SHIP_MODE = TableSpec(
    name="ship_mode",
    abbreviation="sm",
    scaling=ScalingInfo(0, S, (0,) + (20,) * 9),
    is_small=True,
    null_basis_points=100,
    not_null_bitmap=0x03,
    columns=_cols(
        ("sm_ship_mode_sk", C.IDENTIFIER),
        ("sm_ship_mode_id", C.CHAR, 16),
        ("sm_type", C.CHAR, 30),
        ("sm_code", C.CHAR, 10),
        ("sm_carrier", C.CHAR, 20),
        ("sm_contract", C.CHAR, 20),
    ),
    generator_columns=_streams(
        252,
        ("sm_ship_mode_sk", 1),
        ("sm_ship_mode_id", 1),
        ("sm_type", 1),
        ("sm_code", 1),
        ("sm_contract", 21),
        ("sm_carrier", 1),
        ("sm_nulls", 2),
    ),
)

TIME_DIM = TableSpec(
    name="time_dim",
    abbreviation="t",
    scaling=ScalingInfo(0, S, (0,) + (86400,) * 9),
    not_null_bitmap=0x03,
    columns=_cols(
        ("t_time_sk", C.IDENTIFIER),
        ("t_time_id", C.CHAR, 16),
        ("t_time", C.INTEGER),
        ("t_hour", C.INTEGER),
        ("t_minute", C.INTEGER),
        ("t_second", C.INTEGER),
        ("t_am_pm", C.CHAR, 2),
        ("t_shift", C.CHAR, 20),
        ("t_sub_shift", C.CHAR, 20),
        ("t_meal_time", C.CHAR, 20),
    ),
    generator_columns=_streams(
        340,
        ("t_time_sk", 1),
        ("t_time_id", 1),
        ("t_time", 1),
        ("t_hour", 1),
        ("t_minute", 1),
        ("t_second", 1),
        ("t_am_pm", 1),
        ("t_shift", 1),
        ("t_sub_shift", 1),
        ("t_meal_time", 1),
        ("t_nulls", 1),
    ),
)


CALL_CENTER = TableSpec(
    name="call_center",
    abbreviation="cc",
    scaling=ScalingInfo(0, L, (0, 3, 12, 15, 18, 21, 24, 27, 30, 30)),
    keeps_history=True,
    is_small=True,
    null_basis_points=100,
    not_null_bitmap=0x0B,
    columns=_cols(
        ("cc_call_center_sk", C.IDENTIFIER),
        ("cc_call_center_id", C.CHAR, 16),
        ("cc_rec_start_date", C.DATE),
        ("cc_rec_end_date", C.DATE),
        ("cc_closed_date_sk", C.IDENTIFIER),
        ("cc_open_date_sk", C.IDENTIFIER),
        ("cc_name", C.VARCHAR, 50),
        ("cc_class", C.VARCHAR, 50),
        ("cc_employees", C.INTEGER),
        ("cc_sq_ft", C.INTEGER),
        ("cc_hours", C.CHAR, 20),
        ("cc_manager", C.VARCHAR, 40),
        ("cc_mkt_id", C.INTEGER),
        ("cc_mkt_class", C.CHAR, 50),
        ("cc_mkt_desc", C.VARCHAR, 100),
        ("cc_market_manager", C.VARCHAR, 40),
        ("cc_division", C.INTEGER),
        ("cc_division_name", C.VARCHAR, 50),
        ("cc_company", C.INTEGER),
        ("cc_company_name", C.CHAR, 50),
        *_address_columns("cc"),
        ("cc_tax_percentage", C.DECIMAL, 2),
    ),
    generator_columns=_streams(
        1,
        ("cc_call_center_sk", 0),
        ("cc_call_center_id", 15),
        ("cc_rec_start_date_id", 10),
        ("cc_rec_end_date_id", 1),
        ("cc_closed_date_id", 4),
        ("cc_open_date_id", 10),
        ("cc_name", 0),
        ("cc_class", 2),
        ("cc_employees", 1),
        ("cc_sq_ft", 1),
        ("cc_hours", 1),
        ("cc_manager", 2),
        ("cc_market_id", 1),
        ("cc_market_class", 50),
        ("cc_market_desc", 50),
        ("cc_market_manager", 2),
        ("cc_division", 2),
        ("cc_division_name", 2),
        ("cc_company", 2),
        ("cc_company_name", 2),
        *[(f"cc_{part}", 0) for part in (
            "street_number", "street_name", "street_type", "suite_number", "city",
            "county", "state", "zip", "country", "gmt_offset",
        )],
        ("cc_address", 15),
        ("cc_tax_percentage", 1),
        ("cc_scd", 1),
        ("cc_nulls", 2),
    ),
)

CUSTOMER_DEMOGRAPHICS = TableSpec(
    name="customer_demographics",
    abbreviation="cd",
    scaling=ScalingInfo(2, S, (0,) + (19208,) * 9),
    not_null_bitmap=0x01,
    columns=_cols(
        ("cd_demo_sk", C.IDENTIFIER),
        ("cd_gender", C.CHAR, 1),
        ("cd_marital_status", C.CHAR, 1),
        ("cd_education_status", C.CHAR, 20),
        ("cd_purchase_estimate", C.INTEGER),
        ("cd_credit_rating", C.CHAR, 10),
        ("cd_dep_count", C.INTEGER),
        ("cd_dep_employed_count", C.INTEGER),
        ("cd_dep_college_count", C.INTEGER),
    ),
    generator_columns=_streams(
        149,
        ("cd_demo_sk", 1),
        ("cd_gender", 1),
        ("cd_marital_status", 1),
        ("cd_education_status", 1),
        ("cd_purchase_estimate", 1),
        ("cd_credit_rating", 1),
        ("cd_dep_count", 1),
        ("cd_dep_employed_count", 1),
        ("cd_dep_college_count", 1),
        ("cd_nulls", 2),
    ),
)

PROMOTION = TableSpec(
    name="promotion",
    abbreviation="p",
    scaling=ScalingInfo(0, L, (0, 300, 500, 1000, 1300, 1500, 1800, 2000, 2300, 2500)),
    null_basis_points=200,
    not_null_bitmap=0x03,
    columns=_cols(
        ("p_promo_sk", C.IDENTIFIER),
        ("p_promo_id", C.CHAR, 16),
        ("p_start_date_sk", C.IDENTIFIER),
        ("p_end_date_sk", C.IDENTIFIER),
        ("p_item_sk", C.IDENTIFIER),
        ("p_cost", C.DECIMAL, 2),
        ("p_response_target", C.INTEGER),
        ("p_promo_name", C.CHAR, 50),
        ("p_channel_dmail", C.BOOLEAN),
        ("p_channel_email", C.BOOLEAN),
        ("p_channel_catalog", C.BOOLEAN),
        ("p_channel_tv", C.BOOLEAN),
        ("p_channel_radio", C.BOOLEAN),
        ("p_channel_press", C.BOOLEAN),
        ("p_channel_event", C.BOOLEAN),
        ("p_channel_demo", C.BOOLEAN),
        ("p_channel_details", C.VARCHAR, 100),
        ("p_purpose", C.CHAR, 15),
        ("p_discount_active", C.BOOLEAN),
    ),
    generator_columns=_streams(
        228,
        ("p_promo_sk", 1),
        ("p_promo_id", 1),
        ("p_start_date_id", 1),
        ("p_end_date_id", 1),
        ("p_item_sk", 1),
        ("p_cost", 1),
        ("p_response_target", 1),
        ("p_promo_name", 1),
        ("p_channel_dmail", 1),
        ("p_channel_email", 1),
        ("p_channel_catalog", 1),
        ("p_channel_tv", 1),
        ("p_channel_radio", 1),
        ("p_channel_press", 1),
        ("p_channel_event", 1),
        ("p_channel_demo", 1),
        ("p_channel_details", 100),
        ("p_purpose", 1),
        ("p_discount_active", 1),
        ("p_nulls", 2),
    ),
)

WAREHOUSE = TableSpec(
    name="warehouse",
    abbreviation="w",
    scaling=ScalingInfo(0, L, (0, 5, 10, 15, 17, 20, 22, 25, 27, 30)),
    is_small=True,
    null_basis_points=100,
    not_null_bitmap=0x03,
    columns=_cols(
        ("w_warehouse_sk", C.IDENTIFIER),
        ("w_warehouse_id", C.CHAR, 16),
        ("w_warehouse_name", C.VARCHAR, 20),
        ("w_warehouse_sq_ft", C.INTEGER),
        *_address_columns("w"),
    ),
    generator_columns=_streams(
        351,
        ("w_warehouse_sk", 1),
        ("w_warehouse_id", 1),
        ("w_warehouse_name", 80),
        ("w_warehouse_sq_ft", 1),
        ("w_street_number", 1),
        ("w_street_name", 1),
        ("w_street_type", 1),
        ("w_suite_number", 1),
        ("w_city", 1),
        ("w_county", 1),
        ("w_state", 1),
        ("w_zip", 1),
        ("w_country", 1),
        ("w_gmt_offset", 1),
        ("w_nulls", 2),
        ("w_warehouse_address", 7),
    ),
)

WEB_PAGE = TableSpec(
    name="web_page",
    abbreviation="wp",
    scaling=ScalingInfo(0, L, (0, 30, 100, 1020, 1302, 1500, 1800, 2001, 2301, 2502)),
    keeps_history=True,
    null_basis_points=250,
    not_null_bitmap=0x03,
    columns=_cols(
        ("wp_web_page_sk", C.IDENTIFIER),
        ("wp_web_page_id", C.CHAR, 16),
        ("wp_rec_start_date", C.DATE),
        ("wp_rec_end_date", C.DATE),
        ("wp_creation_date_sk", C.IDENTIFIER),
        ("wp_access_date_sk", C.IDENTIFIER),
        ("wp_autogen_flag", C.BOOLEAN),
        ("wp_customer_sk", C.IDENTIFIER),
        ("wp_url", C.VARCHAR, 100),
        ("wp_type", C.CHAR, 50),
        ("wp_char_count", C.INTEGER),
        ("wp_link_count", C.INTEGER),
        ("wp_image_count", C.INTEGER),
        ("wp_max_ad_count", C.INTEGER),
    ),
    generator_columns=_streams(
        367,
        ("wp_web_page_sk", 1),
        ("wp_web_page_id", 1),
        ("wp_rec_start_date_id", 1),
        ("wp_rec_end_date_id", 1),
        ("wp_creation_date_sk", 2),
        ("wp_access_date_sk", 1),
        ("wp_autogen_flag", 1),
        ("wp_customer_sk", 1),
        ("wp_url", 1),
        ("wp_type", 1),
        ("wp_char_count", 1),
        ("wp_link_count", 1),
        ("wp_image_count", 1),
        ("wp_max_ad_count", 1),
        ("wp_nulls", 2),
        ("wp_scd", 1),
    ),
)

WEB_SITE = TableSpec(
    name="web_site",
    abbreviation="web",
    scaling=ScalingInfo(0, L, (0, 15, 21, 12, 21, 27, 33, 39, 42, 48)),
    keeps_history=True,
    is_small=True,
    null_basis_points=100,
    not_null_bitmap=0x0B,
    columns=_cols(
        ("web_site_sk", C.IDENTIFIER),
        ("web_site_id", C.CHAR, 16),
        ("web_rec_start_date", C.DATE),
        ("web_rec_end_date", C.DATE),
        ("web_name", C.VARCHAR, 50),
        ("web_open_date_sk", C.IDENTIFIER),
        ("web_close_date_sk", C.IDENTIFIER),
        ("web_class", C.VARCHAR, 50),
        ("web_manager", C.VARCHAR, 40),
        ("web_mkt_id", C.INTEGER),
        ("web_mkt_class", C.VARCHAR, 50),
        ("web_mkt_desc", C.VARCHAR, 100),
        ("web_market_manager", C.VARCHAR, 40),
        ("web_company_id", C.INTEGER),
        ("web_company_name", C.CHAR, 50),
        *_address_columns("web"),
        ("web_tax_percentage", C.DECIMAL, 2),
    ),
    generator_columns=_streams(
        447,
        ("web_site_sk", 1),
        ("web_site_id", 1),
        ("web_rec_start_date_id", 1),
        ("web_rec_end_date_id", 1),
        ("web_name", 1),
        # Date join keys take two draws: the year, then the day
        ("web_open_date", 2),
        ("web_close_date", 2),
        ("web_class", 1),
        ("web_manager", 2),
        ("web_market_id", 1),
        ("web_market_class", 20),
        ("web_market_desc", 100),
        ("web_market_manager", 2),
        ("web_company_id", 1),
        ("web_company_name", 1),
        ("web_street_number", 1),
        ("web_street_name", 1),
        ("web_street_type", 1),
        ("web_suite_number", 1),
        ("web_city", 1),
        ("web_county", 1),
        ("web_state", 1),
        ("web_zip", 1),
        ("web_country", 1),
        ("web_gmt_offset", 1),
        ("web_tax_percentage", 1),
        ("web_nulls", 2),
        ("web_address", 7),
        ("web_scd", 70),
    ),
)


# =============================================================================
# Scaled tables without a row generator
# =============================================================================

# Weekly snapshots across the sales window
INVENTORY_WEEKS = (JULIAN_DATE_MAXIMUM - JULIAN_DATE_MINIMUM) // 7 + 1

ITEM = TableSpec("item", "i", ScalingInfo(3, L, (0, 9, 51, 102, 132, 150, 180, 201, 231, 251)), keeps_history=True)
STORE_SALES = TableSpec(
    "store_sales", "ss",
    ScalingInfo(4, N, (0, 24, 240, 2400, 7200, 24000, 72000, 240000, 720000, 2400000)),
    lines_per_order=12,
)
CATALOG_SALES = TableSpec(
    "catalog_sales", "cs",
    ScalingInfo(4, N, (0, 16, 160, 1600, 4800, 16000, 48000, 160000, 480000, 1600000)),
    lines_per_order=9,
)
WEB_SALES = TableSpec(
    "web_sales", "ws",
    ScalingInfo(4, N, (0, 6, 60, 600, 1800, 6000, 18000, 60000, 180000, 600000)),
    lines_per_order=12,
)


def _inventory_row_count(scale: float) -> int:
    return ITEM.id_count(scale) * WAREHOUSE.row_count(scale) * INVENTORY_WEEKS


TABLES: dict[str, TableSpec] = {
    spec.name: spec
    for spec in (
        CALL_CENTER,
        TableSpec("catalog_page", "cp", ScalingInfo(0, S, (0, 11718, 12000, 20400, 26000, 30000, 36000, 40000, 46000, 50000))),
        TableSpec("catalog_returns", "cr", CATALOG_SALES.scaling, parent="catalog_sales", parent_percent=10),
        CATALOG_SALES,
        TableSpec("customer", "c", ScalingInfo(3, L, (0, 100, 500, 2000, 5000, 12000, 30000, 65000, 80000, 100000))),
        TableSpec("customer_address", "ca", ScalingInfo(3, L, (0, 50, 250, 1000, 2500, 6000, 15000, 32500, 40000, 50000))),
        CUSTOMER_DEMOGRAPHICS,
        DATE_DIM,
        HOUSEHOLD_DEMOGRAPHICS,
        INCOME_BAND,
        TableSpec("inventory", "inv", ScalingInfo(0, S, (0,) * 10), formula=_inventory_row_count),
        ITEM,
        PROMOTION,
        REASON,
        SHIP_MODE,
        TableSpec(
            "store", "s", ScalingInfo(0, L, (0, 6, 51, 201, 402, 501, 675, 750, 852, 951)),
            keeps_history=True, is_small=True,
        ),
        TableSpec("store_returns", "sr", STORE_SALES.scaling, parent="store_sales", parent_percent=10),
        STORE_SALES,
        TIME_DIM,
        WAREHOUSE,
        WEB_PAGE,
        TableSpec("web_returns", "wr", WEB_SALES.scaling, parent="web_sales", parent_percent=10),
        WEB_SALES,
        WEB_SITE,
    )
}


# Abbreviation -> table name
ABBREVIATIONS: dict[str, str] = {spec.abbreviation: spec.name for spec in TABLES.values()}


def get_table(name: str) -> TableSpec:
    """
    Look up a table by name or abbreviation, e.g. "call_center" or "cc".

    Raises:
        UnsupportedTableError: If the name is not a benchmark table
    """
    spec = TABLES.get(name) or TABLES.get(ABBREVIATIONS.get(name, ""))
    if spec is None:
        raise UnsupportedTableError(name, sorted(TABLES))
    return spec


def table_number(name: str) -> int:
    """Position of a table in name order; history tables shift their dates by it."""
    return sorted(TABLES).index(get_table(name).name)


def row_count(table: str | TableSpec, scale: float) -> int:
    """Row count of a table at a scale factor."""
    spec = get_table(table) if isinstance(table, str) else table
    return spec.row_count(scale)


def id_count(table: str | TableSpec, scale: float) -> int:
    """Distinct business keys of a table at a scale factor."""
    spec = get_table(table) if isinstance(table, str) else table
    return spec.id_count(scale)
