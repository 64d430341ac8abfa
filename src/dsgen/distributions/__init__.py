"""Weighted value distributions embedded as package data."""

from .loader import (
    BUILTIN_DISTRIBUTIONS,
    DATA_DIR,
    Distribution,
    DistributionStore,
    default_store,
    load_distribution,
    parse_distribution,
)

__all__ = [
    "BUILTIN_DISTRIBUTIONS",
    "DATA_DIR",
    "Distribution",
    "DistributionStore",
    "default_store",
    "load_distribution",
    "parse_distribution",
]
