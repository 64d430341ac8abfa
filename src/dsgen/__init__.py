"""
dsgen: deterministic TPC-DS style synthetic data generation.

Every value comes from a seekable random stream bound to a fixed column
number, so a table generated in one pass or in any number of parallel
chunks is byte-identical.
"""

__version__ = "0.1.0"

from .business_key import make_business_key
from .config import GenerationConfig, load_config
from .distributions import Distribution, DistributionStore, default_store
from .errors import (
    ChunkGenerationError,
    ConfigError,
    DistributionError,
    DistributionLookupError,
    DsgenError,
    InvalidScaleError,
    OutputError,
    StreamOverflowError,
    UnsupportedTableError,
)
from .generators import (
    GenerationContext,
    Row,
    TableRowGenerator,
    create_generator,
    registered_tables,
)
from .output import TableWriter, format_row
from .random import RngStream
from .runner import ChunkTask, TableResult, generate_range, generate_table, plan_chunks
from .scaling import ScalingInfo, ScalingModel, validate_scale
from .tables import TABLES, TableSpec, get_table, id_count, row_count
from .types import Date, Decimal

__all__ = [
    "__version__",
    # Streams
    "RngStream",
    # Distributions
    "Distribution",
    "DistributionStore",
    "default_store",
    # Scaling and tables
    "ScalingInfo",
    "ScalingModel",
    "TABLES",
    "TableSpec",
    "get_table",
    "id_count",
    "row_count",
    "validate_scale",
    # Generation
    "ChunkTask",
    "GenerationContext",
    "Row",
    "TableResult",
    "TableRowGenerator",
    "create_generator",
    "generate_range",
    "generate_table",
    "plan_chunks",
    "registered_tables",
    # Output
    "TableWriter",
    "format_row",
    # Values
    "Date",
    "Decimal",
    "make_business_key",
    # Config
    "GenerationConfig",
    "load_config",
    # Errors
    "ChunkGenerationError",
    "ConfigError",
    "DistributionError",
    "DistributionLookupError",
    "DsgenError",
    "InvalidScaleError",
    "OutputError",
    "StreamOverflowError",
    "UnsupportedTableError",
]
