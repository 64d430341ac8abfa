"""
Shared pieces for table row generators.

This module provides:
- GenerationContext: explicit state handed to a generator (stream set,
  scale, distributions, reference "today")
- Row: one generated row as typed values plus its null bitmap
- TableRowGenerator: the capability every table generator implements
- register / create_generator: name-to-constructor registry

Design Principles:
- A context owns its streams; contexts are never shared between tables
  or between chunks
- Generators hold no module-level state, so any chunk can be produced in
  any process by building a fresh context and skipping to its first row
- Generators are independent classes registered by table name; there is no
  shared base class
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, runtime_checkable

from ..distributions import DistributionStore, default_store
from ..errors import UnsupportedTableError
from ..random.stream import RngStream
from ..scaling import validate_scale
from ..tables import TableSpec, get_table
from ..types.date import CURRENT_QUARTER, CURRENT_WEEK, TODAYS_DATE, Date

logger = logging.getLogger(__name__)


@dataclass
class GenerationContext:
    """
    Everything a generator reads while producing rows.

    Attributes:
        table: Table being generated
        scale: Validated scale factor
        distributions: Loaded, read-only distribution store
        today: Fixed reference date for the "current" flags
        current_quarter: Reference quarter for the "current" flags
        current_week: Reference week sequence for the "current" flags
        streams: Column name -> stream, one per generator column
    """

    # ==========================================================================
    # Inputs
    # ==========================================================================
    table: TableSpec
    scale: float
    distributions: DistributionStore
    today: Date = TODAYS_DATE
    current_quarter: int = CURRENT_QUARTER
    current_week: int = CURRENT_WEEK

    # ==========================================================================
    # Stream set (built from the table's generator columns)
    # ==========================================================================
    streams: dict[str, RngStream] = field(default_factory=dict)

    def __post_init__(self):
        self.scale = validate_scale(self.scale)
        if not self.streams:
            self.streams = {
                column.name: RngStream(
                    column.global_column_number,
                    column.seeds_per_row,
                    label=f"{self.table.name}.{column.name}",
                )
                for column in self.table.generator_columns
            }

    @classmethod
    def create(
        cls,
        table: str | TableSpec,
        scale: float,
        distributions: DistributionStore | None = None,
    ) -> "GenerationContext":
        """Build a context with fresh streams for a table."""
        spec = get_table(table) if isinstance(table, str) else table
        return cls(
            table=spec,
            scale=scale,
            distributions=distributions if distributions is not None else default_store(),
        )

    def stream(self, column_name: str) -> RngStream:
        try:
            return self.streams[column_name]
        except KeyError:
            raise KeyError(f"{self.table.name} has no stream '{column_name}'") from None

    def skip_rows(self, start_row: int) -> None:
        """Position every stream at the state it has when row ``start_row`` begins."""
        for stream in self.streams.values():
            stream.skip_rows(start_row - 1)

    def consume_remaining_seeds(self) -> None:
        """Close the current row on every stream."""
        for stream in self.streams.values():
            stream.consume_remaining()


@dataclass(frozen=True)
class Row:
    """
    One generated row.

    Attributes:
        table: Table name
        values: Typed values in output column order
        null_bitmap: Bit ``i`` set means column ``i`` renders as null
    """

    table: str
    values: tuple[Any, ...]
    null_bitmap: int = 0


@runtime_checkable
class TableRowGenerator(Protocol):
    """Capability implemented by every table generator."""

    table: TableSpec

    def generate_row(self, row_number: int) -> Row:
        """Produce the row with a 1-based row number."""
        ...

    def consume_remaining_seeds(self) -> None:
        """Close the row just generated so every stream stays row-aligned."""
        ...

    def skip_rows(self, start_row: int) -> None:
        """Seek all streams so the next row generated is ``start_row``."""
        ...


# =============================================================================
# Registry
# =============================================================================

GeneratorFactory = Callable[[GenerationContext], TableRowGenerator]

_REGISTRY: dict[str, GeneratorFactory] = {}


def register(table_name: str) -> Callable[[GeneratorFactory], GeneratorFactory]:
    """Class decorator adding a generator to the registry under a table name."""

    def decorator(factory: GeneratorFactory) -> GeneratorFactory:
        if table_name in _REGISTRY:
            raise ValueError(f"Generator for '{table_name}' already registered")
        _REGISTRY[table_name] = factory
        return factory

    return decorator


def registered_tables() -> list[str]:
    """Names of tables that have a row generator."""
    return sorted(_REGISTRY)


def create_generator(table_name: str, context: GenerationContext) -> TableRowGenerator:
    """
    Build the generator registered for a table.

    Raises:
        UnsupportedTableError: If no generator is registered for the table
    """
    factory = _REGISTRY.get(table_name)
    if factory is None:
        raise UnsupportedTableError(table_name, registered_tables())
    if context.table.name != table_name:
        raise ValueError(f"Context is for '{context.table.name}', not '{table_name}'")
    logger.debug("Created generator for '%s'", table_name)
    return factory(context)
