"""Seekable random streams and the value helpers built on them."""

from .stream import MODULUS, MULTIPLIER, RngStream, initial_seed_for
from .values import (
    ALPHA_NUMERIC,
    DIGITS,
    consume_remaining_seeds,
    random_charset,
    uniform_int,
    uniform_key,
)

__all__ = [
    "ALPHA_NUMERIC",
    "DIGITS",
    "MODULUS",
    "MULTIPLIER",
    "RngStream",
    "consume_remaining_seeds",
    "initial_seed_for",
    "random_charset",
    "uniform_int",
    "uniform_key",
]
