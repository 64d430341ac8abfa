"""
Street addresses for call centers, warehouses and web sites.

Every address costs seven draws from its stream, in this order: street
number, two street names, street type, suite, city and county. Small tables
take their city and county by uniform index over the first few entries so
that a handful of rows share a handful of places; larger tables pick them by
weight. The zip code is a hash of the city name under the county's leading
digit.

Usage:
    addresses = AddressGenerator(store)
    address = addresses.make_address(get_table("warehouse"), scale, stream)
    address.zip_code   # "31904"
"""

from __future__ import annotations

from dataclasses import dataclass

from .distributions import DistributionStore
from .random.stream import RngStream
from .random.values import uniform_int
from .scaling import ACTIVE_CITIES, ACTIVE_COUNTIES
from .tables import TableSpec

COUNTRY = "United States"


@dataclass(frozen=True)
class Address:
    """One generated address; ``zip`` is numeric, ``zip_code`` its 5-digit text."""

    street_number: int
    street_name1: str
    street_name2: str
    street_type: str
    suite_number: str
    city: str
    county: str
    state: str
    zip: int
    gmt_offset: int
    country: str = COUNTRY

    @property
    def street_name(self) -> str:
        # The separator stays even when the second name is empty
        return f"{self.street_name1} {self.street_name2}"

    @property
    def zip_code(self) -> str:
        return f"{self.zip:05d}"

    def as_columns(self) -> tuple:
        """The ten address columns shared by every table that has an address."""
        return (
            self.street_number,
            self.street_name,
            self.street_type,
            self.suite_number,
            self.city,
            self.county,
            self.state,
            self.zip_code,
            self.country,
            self.gmt_offset,
        )


def compute_city_hash(name: str) -> int:
    """Four-digit hash of a city name; the low digits of its zip code."""
    result = 0
    value = 0
    for char in name:
        value = value * 26 + ord(char) - ord("A")
        if value > 1_000_000:
            value %= 10_000
            result += value
            value = 0
    value %= 1000
    result += value
    return result % 10_000


def suite_number(draw: int) -> str:
    """Odd draws give a numbered suite, even draws a lettered one."""
    if draw % 2 == 1:
        return f"Suite {(draw // 2) * 10}"
    return f"Suite {chr((draw // 2) % 25 + ord('A'))}"


class AddressGenerator:
    """Builds addresses from the location distributions of a store."""

    def __init__(self, store: DistributionStore) -> None:
        self.street_names = store.require("street_names", "street_name")
        self.street_types = store.require("street_types", "street_type")
        self.cities = store.require("cities", "city")
        self.counties = store.require("fips_county", "county", "state", "zip_prefix", "gmt_offset")

    def make_address(self, table: TableSpec, scale: float, stream: RngStream) -> Address:
        """
        Draw one address for a row of a table.

        Args:
            table: Table the address belongs to; small tables restrict the
                city and county choice to their row count
            scale: Scale factor, which sets how many places are active
            stream: The table's address stream

        Returns:
            Address with a zip code derived from its city and county
        """
        street_number = uniform_int(1, 1000, stream)
        street_name1 = self.street_names.pick_random("street_name", stream, "default")
        street_name2 = self.street_names.pick_random("street_name", stream, "half_empty")
        street_type = self.street_types.pick_random("street_type", stream)
        suite = suite_number(uniform_int(1, 100, stream))

        if table.is_small:
            rows = table.row_count(scale)
            cities = min(ACTIVE_CITIES.row_count_for_scale(scale), rows)
            city = self.cities.value_at("city", uniform_int(0, cities - 1, stream))
            counties = min(ACTIVE_COUNTIES.row_count_for_scale(scale), rows)
            region = uniform_int(0, counties - 1, stream)
        else:
            city = self.cities.pick_random("city", stream, "unified_step_function")
            region = self.counties.pick_random_index(stream, "uniform")

        zip_prefix = self.counties.value_at("zip_prefix", region)
        zip_code = compute_city_hash(city)
        if zip_prefix == 0 and zip_code < 9400:
            zip_code += 600
        zip_code += zip_prefix * 10_000

        return Address(
            street_number=street_number,
            street_name1=street_name1,
            street_name2=street_name2,
            street_type=street_type,
            suite_number=suite,
            city=city,
            county=self.counties.value_at("county", region),
            state=self.counties.value_at("state", region),
            zip=zip_code,
            gmt_offset=self.counties.value_at("gmt_offset", region),
        )
