"""
Weighted distribution resources.

Distributions ship with the package as YAML files under ``data/`` and are
loaded once per process. Each file lists entries of field values plus one
integer weight per weight set; weights are stored cumulatively so selection
is an integer interval search, never a floating point probability.

Provides:
- Distribution: immutable values and cumulative weights for one resource
- DistributionStore: name -> Distribution mapping with checked lookups
- load_distribution / default_store: cached loaders

Usage:
    store = default_store()
    calendar = store.require("calendar", "quarter", "holiday")
    quarter = calendar.value_at("quarter", day_index - 1)
    reason = store.pick("return_reasons", "reason", draw, weight_set="catalog")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

import numpy as np
import yaml

from ..errors import DistributionError, DistributionLookupError
from ..random.stream import RngStream

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

REQUIRED_KEYS = ("name", "fields", "weight_sets", "entries")

# Every distribution the generators use; the default store loads all of them
BUILTIN_DISTRIBUTIONS = (
    "adjectives",
    "adverbs",
    "articles",
    "auxiliaries",
    "buy_potential",
    "calendar",
    "call_center_classes",
    "call_center_hours",
    "call_centers",
    "cities",
    "credit_ratings",
    "dep_count",
    "education",
    "fips_county",
    "first_names",
    "genders",
    "hours",
    "income_band",
    "last_names",
    "marital_statuses",
    "nouns",
    "prepositions",
    "purchase_band",
    "return_reasons",
    "sentences",
    "ship_mode_carrier",
    "ship_mode_code",
    "ship_mode_type",
    "street_names",
    "street_types",
    "syllables",
    "terminators",
    "vehicle_count",
    "verbs",
    "web_page_use",
    "weekday_names",
)


@dataclass(frozen=True)
class Distribution:
    """
    Values and cumulative weights of one distribution resource.

    Attributes:
        name: Distribution name
        fields: Value field names, in file order
        weight_sets: Weight set names, in file order
        values: field name -> tuple of values, one per entry
        cumulative: weight set name -> int64 array of cumulative weights
    """

    name: str
    fields: tuple[str, ...]
    weight_sets: tuple[str, ...]
    values: dict[str, tuple[Any, ...]] = field(repr=False)
    cumulative: dict[str, np.ndarray] = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.values[self.fields[0]])

    def _field_values(self, field_name: str) -> tuple[Any, ...]:
        try:
            return self.values[field_name]
        except KeyError:
            raise DistributionLookupError(self.name, field_name) from None

    def _weights(self, weight_set: str | None) -> np.ndarray:
        key = self.weight_sets[0] if weight_set is None else weight_set
        try:
            return self.cumulative[key]
        except KeyError:
            raise DistributionLookupError(self.name, key) from None

    # =========================================================================
    # Positional access
    # =========================================================================

    def value_at(self, field_name: str, index: int) -> Any:
        """
        Value of a field at a 0-based entry index.

        Raises:
            DistributionLookupError: Unknown field or index out of range
        """
        values = self._field_values(field_name)
        if not 0 <= index < len(values):
            raise DistributionLookupError(self.name, field_name, index)
        return values[index]

    def value_at_mod(self, field_name: str, index: int) -> Any:
        """Value at ``index % size``; used for mixed-radix walks."""
        values = self._field_values(field_name)
        return values[index % len(values)]

    def total_weight(self, weight_set: str | None = None) -> int:
        return int(self._weights(weight_set)[-1])

    # =========================================================================
    # Weighted selection
    # =========================================================================

    def pick_index(self, draw: int, weight_set: str | None = None) -> int:
        """
        Index of the entry whose cumulative interval contains the draw.

        The draw is reduced modulo the total weight; the first entry whose
        cumulative weight is strictly greater than the reduced draw wins, so
        zero-weight entries are never selected.
        """
        cumulative = self._weights(weight_set)
        reduced = draw % int(cumulative[-1])
        return int(np.searchsorted(cumulative, reduced, side="right"))

    def pick(self, field_name: str, draw: int, weight_set: str | None = None) -> Any:
        values = self._field_values(field_name)
        return values[self.pick_index(draw, weight_set)]

    def pick_random_index(self, stream: RngStream, weight_set: str | None = None) -> int:
        """Draw ``uniform_int(1, total)`` from the stream and select by weight."""
        total = self.total_weight(weight_set)
        return self.pick_index(stream.next_uniform_int(1, total) - 1, weight_set)

    def pick_random(self, field_name: str, stream: RngStream, weight_set: str | None = None) -> Any:
        values = self._field_values(field_name)
        return values[self.pick_random_index(stream, weight_set)]


# =============================================================================
# Parsing
# =============================================================================


def parse_distribution(raw: Any, source: str) -> Distribution:
    """
    Validate a loaded YAML document and build a Distribution.

    Args:
        raw: Result of yaml.safe_load
        source: Name used in error messages

    Raises:
        DistributionError: If any key, arity or weight is invalid
    """
    if not isinstance(raw, dict):
        raise DistributionError(source, "document is not a mapping")
    missing = [key for key in REQUIRED_KEYS if key not in raw]
    if missing:
        raise DistributionError(source, f"missing keys {missing}")

    name = raw["name"]
    fields = tuple(raw["fields"] or ())
    weight_sets = tuple(raw["weight_sets"] or ())
    entries = raw["entries"] or []
    if not fields:
        raise DistributionError(name, "no value fields declared")
    if not weight_sets:
        raise DistributionError(name, "no weight sets declared")
    if not entries:
        raise DistributionError(name, "no entries")

    columns: list[list[Any]] = [[] for _ in fields]
    weights = np.zeros((len(entries), len(weight_sets)), dtype=np.int64)
    for row, entry in enumerate(entries):
        values = entry.get("values") if isinstance(entry, dict) else None
        entry_weights = entry.get("weights") if isinstance(entry, dict) else None
        if values is None or len(values) != len(fields):
            raise DistributionError(
                name, f"entry {row} has {0 if values is None else len(values)} values, expected {len(fields)}"
            )
        if entry_weights is None or len(entry_weights) != len(weight_sets):
            raise DistributionError(name, f"entry {row} has wrong number of weights")
        for col, value in enumerate(values):
            columns[col].append(value)
        for col, weight in enumerate(entry_weights):
            if isinstance(weight, bool) or not isinstance(weight, int):
                raise DistributionError(name, f"entry {row} weight {weight!r} is not an integer")
            if weight < 0:
                raise DistributionError(name, f"entry {row} has negative weight {weight}")
            weights[row, col] = weight

    cumulative = {}
    for col, set_name in enumerate(weight_sets):
        running = np.cumsum(weights[:, col])
        if running[-1] <= 0:
            raise DistributionError(name, f"weight set '{set_name}' has zero total weight")
        running.setflags(write=False)
        cumulative[set_name] = running

    return Distribution(
        name=name,
        fields=fields,
        weight_sets=weight_sets,
        values={f: tuple(col) for f, col in zip(fields, columns)},
        cumulative=cumulative,
    )


@lru_cache(maxsize=None)
def load_distribution(name: str, data_dir: Path = DATA_DIR) -> Distribution:
    """
    Load and validate one distribution resource (cached per process).

    Raises:
        DistributionError: If the file is missing, unreadable or malformed
    """
    path = Path(data_dir) / f"{name}.yaml"
    if not path.exists():
        raise DistributionError(name, f"resource not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DistributionError(name, f"invalid YAML: {e}") from e

    dist = parse_distribution(raw, name)
    if dist.name != name:
        raise DistributionError(name, f"file declares name '{dist.name}'")
    logger.debug("Loaded distribution '%s' entries=%d", name, dist.size)
    return dist


class DistributionStore:
    """
    Read-only mapping of loaded distributions with checked lookups.

    Loading is eager: constructing a store loads every requested resource,
    so a broken resource stops generation before any row is produced.
    """

    def __init__(self, names: Iterable[str] = BUILTIN_DISTRIBUTIONS, data_dir: Path = DATA_DIR) -> None:
        self._distributions = {name: load_distribution(name, data_dir) for name in names}

    def __contains__(self, name: str) -> bool:
        return name in self._distributions

    def names(self) -> list[str]:
        return sorted(self._distributions)

    def get(self, name: str) -> Distribution:
        try:
            return self._distributions[name]
        except KeyError:
            raise DistributionLookupError(name) from None

    def require(self, name: str, *fields: str) -> Distribution:
        """
        Return a distribution after checking that it has every named field.

        Generators call this in their constructor so an invalid
        (name, field) pair fails before generation starts.
        """
        dist = self.get(name)
        for field_name in fields:
            if field_name not in dist.values:
                raise DistributionLookupError(name, field_name)
        return dist

    def lookup(self, name: str, field_name: str, index: int) -> Any:
        """Positional lookup (0-based)."""
        return self.get(name).value_at(field_name, index)

    def pick(self, name: str, field_name: str, draw: int, weight_set: str | None = None) -> Any:
        """Weighted selection for a raw draw."""
        return self.get(name).pick(field_name, draw, weight_set)


@lru_cache(maxsize=1)
def default_store() -> DistributionStore:
    """Store with every built-in distribution, shared by all contexts."""
    store = DistributionStore()
    logger.info("Loaded %d distributions", len(store.names()))
    return store
