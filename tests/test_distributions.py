"""
Tests for distribution resources.

Tests parsing and validation, positional lookups, weighted selection and the
bundled YAML resources.
"""

import numpy as np
import pytest

from dsgen.distributions import (
    BUILTIN_DISTRIBUTIONS,
    DistributionStore,
    default_store,
    load_distribution,
    parse_distribution,
)
from dsgen.errors import DistributionError, DistributionLookupError
from dsgen.random import RngStream


def make_raw(weights, values=None, weight_sets=("w",)):
    """Build a raw distribution document with one field and given weights."""
    if values is None:
        values = [f"v{i}" for i in range(len(weights))]
    return {
        "name": "sample",
        "fields": ["value"],
        "weight_sets": list(weight_sets),
        "entries": [
            {"values": [v], "weights": w if isinstance(w, list) else [w]}
            for v, w in zip(values, weights)
        ],
    }


@pytest.fixture
def store():
    """Store with every bundled distribution."""
    return default_store()


class TestParseDistribution:
    """Tests for parse_distribution validation."""

    def test_cumulative_weights(self):
        dist = parse_distribution(make_raw([2, 0, 3]), "sample")
        assert dist.cumulative["w"].dtype == np.int64
        assert list(dist.cumulative["w"]) == [2, 2, 5]
        assert dist.total_weight() == 5
        assert dist.pick_index(2) == 2
        assert dist.size == 3

    def test_missing_key(self):
        raw = make_raw([1])
        del raw["weight_sets"]
        with pytest.raises(DistributionError, match="missing keys"):
            parse_distribution(raw, "sample")

    def test_not_a_mapping(self):
        with pytest.raises(DistributionError):
            parse_distribution(["a", "b"], "sample")

    def test_wrong_value_arity(self):
        raw = make_raw([1, 1])
        raw["entries"][1]["values"] = ["a", "b"]
        with pytest.raises(DistributionError, match="entry 1"):
            parse_distribution(raw, "sample")

    def test_wrong_weight_arity(self):
        raw = make_raw([1, [1, 2]])
        with pytest.raises(DistributionError, match="wrong number of weights"):
            parse_distribution(raw, "sample")

    def test_negative_weight(self):
        with pytest.raises(DistributionError, match="negative"):
            parse_distribution(make_raw([1, -1]), "sample")

    def test_non_integer_weight(self):
        with pytest.raises(DistributionError, match="not an integer"):
            parse_distribution(make_raw([1, 0.5]), "sample")

    def test_zero_total_weight(self):
        with pytest.raises(DistributionError, match="zero total weight"):
            parse_distribution(make_raw([0, 0]), "sample")

    def test_empty_entries(self):
        raw = make_raw([])
        with pytest.raises(DistributionError, match="no entries"):
            parse_distribution(raw, "sample")

    def test_cumulative_arrays_are_read_only(self):
        dist = parse_distribution(make_raw([1, 2]), "sample")
        with pytest.raises(ValueError):
            dist.cumulative["w"][0] = 10


class TestWeightedSelection:
    """Tests for pick and pick_random."""

    def test_pick_uses_right_open_intervals(self):
        """Entry i owns draws in [cum[i-1], cum[i])."""
        dist = parse_distribution(make_raw([2, 0, 3]), "sample")
        assert [dist.pick("value", draw) for draw in range(5)] == ["v0", "v0", "v2", "v2", "v2"]

    def test_zero_weight_entry_never_picked(self):
        dist = parse_distribution(make_raw([0, 1, 0, 1, 0]), "sample")
        picked = {dist.pick_index(draw) for draw in range(100)}
        assert picked == {1, 3}

    def test_pick_reduces_draw_modulo_total(self):
        dist = parse_distribution(make_raw([2, 0, 3]), "sample")
        assert dist.pick("value", 5) == "v0"
        assert dist.pick("value", 7) == "v2"

    def test_named_weight_set(self):
        raw = make_raw([[1, 0], [0, 1]], weight_sets=("first", "second"))
        dist = parse_distribution(raw, "sample")
        assert dist.pick("value", 0, weight_set="first") == "v0"
        assert dist.pick("value", 0, weight_set="second") == "v1"

    def test_unknown_weight_set(self):
        dist = parse_distribution(make_raw([1]), "sample")
        with pytest.raises(DistributionLookupError):
            dist.pick("value", 0, weight_set="missing")

    def test_pick_random_draws_from_one_to_total(self):
        """pick_random draws uniform_int(1, total) and selects at draw - 1."""
        dist = parse_distribution(make_raw([2, 0, 3]), "sample")
        twin = RngStream(9, 1)
        stream = RngStream(9, 1)
        for _ in range(50):
            draw = twin.next_uniform_int(1, 5)
            assert dist.pick_random_index(stream) == dist.pick_index(draw - 1)
        assert stream.seeds_used == 50


class TestPositionalLookup:
    """Tests for value_at and store lookups."""

    def test_value_at_out_of_range(self):
        dist = parse_distribution(make_raw([1, 1]), "sample")
        with pytest.raises(DistributionLookupError) as exc_info:
            dist.value_at("value", 2)
        assert exc_info.value.index == 2

    def test_value_at_negative_index(self):
        dist = parse_distribution(make_raw([1, 1]), "sample")
        with pytest.raises(DistributionLookupError):
            dist.value_at("value", -1)

    def test_value_at_mod_wraps(self):
        dist = parse_distribution(make_raw([1, 1, 1]), "sample")
        assert dist.value_at_mod("value", 4) == "v1"

    def test_unknown_field(self):
        dist = parse_distribution(make_raw([1]), "sample")
        with pytest.raises(DistributionLookupError) as exc_info:
            dist.value_at("missing", 0)
        assert exc_info.value.field == "missing"

    def test_store_require_checks_fields(self, store):
        calendar = store.require("calendar", "quarter", "holiday")
        assert calendar.name == "calendar"
        with pytest.raises(DistributionLookupError):
            store.require("calendar", "no_such_field")

    def test_store_unknown_distribution(self, store):
        with pytest.raises(DistributionLookupError):
            store.get("no_such_distribution")

    def test_store_lookup(self, store):
        assert store.lookup("weekday_names", "name", 1) == "Monday"
        assert store.lookup("ship_mode_type", "type", 0) == "REGULAR"


class TestBundledResources:
    """Tests for the YAML files shipped with the package."""

    def test_all_builtin_resources_load(self, store):
        assert store.names() == sorted(BUILTIN_DISTRIBUTIONS)
        for name in BUILTIN_DISTRIBUTIONS:
            assert name in store

    def test_calendar_is_leap_layout(self, store):
        calendar = store.get("calendar")
        assert calendar.size == 366
        assert calendar.value_at("month_name", 59) == "February"
        assert calendar.value_at("day_of_month", 59) == 29

    def test_calendar_quarters(self, store):
        calendar = store.get("calendar")
        assert calendar.value_at("quarter", 0) == 1
        assert calendar.value_at("quarter", 91) == 2
        assert calendar.value_at("quarter", 365) == 4

    def test_january_first_is_a_holiday(self, store):
        calendar = store.get("calendar")
        assert calendar.value_at("holiday", 0) == 1
        assert calendar.value_at("holiday", 1) == 0

    def test_hours(self, store):
        hours = store.get("hours")
        assert hours.size == 24
        assert hours.value_at("am_pm", 11) == "AM"
        assert hours.value_at("am_pm", 12) == "PM"

    def test_fixed_sizes(self, store):
        assert store.get("income_band").size == 20
        assert store.get("return_reasons").size == 35
        assert store.get("ship_mode_type").size == 6
        assert store.get("ship_mode_code").size == 3
        assert store.get("ship_mode_carrier").size == 20
        assert store.get("buy_potential").size == 6
        assert store.get("dep_count").size == 10
        assert store.get("vehicle_count").size == 6

    def test_missing_resource(self, tmp_path):
        with pytest.raises(DistributionError, match="not found"):
            load_distribution("calendar", tmp_path)

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / "broken.yaml").write_text("name: broken\nfields: [a\n")
        with pytest.raises(DistributionError, match="invalid YAML"):
            load_distribution("broken", tmp_path)

    def test_name_must_match_file(self, tmp_path):
        (tmp_path / "alias.yaml").write_text(
            "name: other\nfields: [a]\nweight_sets: [w]\nentries:\n  - {values: [1], weights: [1]}\n"
        )
        with pytest.raises(DistributionError, match="declares name"):
            load_distribution("alias", tmp_path)

    def test_store_loads_eagerly(self, tmp_path):
        """A broken resource fails the store constructor, not a later lookup."""
        with pytest.raises(DistributionError):
            DistributionStore(names=("calendar",), data_dir=tmp_path)
