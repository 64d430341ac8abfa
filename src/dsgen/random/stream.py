"""
RngStream - seekable Lehmer random number stream.

One stream exists per generator column. Its seed is a pure function of the
column's global column number, so every run draws the same sequence no
matter how the rows are split across chunks or workers.

The recurrence is the minimal standard generator (multiplier 16807, modulus
2^31 - 1), evaluated with Schrage's decomposition so intermediate products
stay within 32 bits exactly like the legacy generator. Seeking uses modular
exponentiation, which lands on the same state as the equivalent number of
sequential draws.

Usage:
    stream = RngStream(global_column_number=256, seeds_per_row=21)
    value = stream.next_uniform_int(1, 20)

    # Jump a fresh stream to the state it would have at row 1001
    stream.skip_rows(1000)
"""

from __future__ import annotations

from ..errors import StreamOverflowError
from ..types.decimal import Decimal

MULTIPLIER = 16807
MODULUS = 2147483647
QUOTIENT = 127773  # MODULUS // MULTIPLIER
REMAINDER = 2836  # MODULUS % MULTIPLIER

SEED_BASE = 19620718
SEED_STRIDE = MODULUS // 799

# Seeks are bounded by the signed 64-bit range of the legacy generator
MAX_SEEK_STEPS = 2**63 - 1


def initial_seed_for(global_column_number: int) -> int:
    """Return the starting seed for a stream bound to a global column number."""
    return SEED_BASE + global_column_number * SEED_STRIDE


class RngStream:
    """
    Deterministic pseudo-random integer stream for one generator column.

    Attributes:
        label: Column label used in error messages
        global_column_number: Column number the seed is derived from
        seeds_per_row: Number of draws the column owns in every row
        initial_seed: Seed before any draw
        seed: Current state; below MODULUS once anything has been drawn
        seeds_used: Draws taken since the last row boundary
    """

    __slots__ = (
        "label",
        "global_column_number",
        "seeds_per_row",
        "initial_seed",
        "seed",
        "seeds_used",
    )

    def __init__(self, global_column_number: int, seeds_per_row: int, label: str = "") -> None:
        self.label = label or f"column_{global_column_number}"
        self.global_column_number = global_column_number
        self.seeds_per_row = seeds_per_row
        self.initial_seed = initial_seed_for(global_column_number)
        self.seed = self.initial_seed
        self.seeds_used = 0

    def __repr__(self) -> str:
        return f"RngStream({self.label!r}, seed={self.seed}, seeds_used={self.seeds_used})"

    # =========================================================================
    # Raw draws
    # =========================================================================

    def next(self) -> int:
        """
        Advance one step and return the new state.

        Returns:
            Pseudo-random integer in [1, MODULUS)
        """
        div, mod = divmod(self.seed, QUOTIENT)
        seed = MULTIPLIER * mod - div * REMAINDER
        if seed < 0:
            seed += MODULUS
        self.seed = seed
        self.seeds_used += 1
        return seed

    def next_uniform_int(self, low: int, high: int) -> int:
        """
        Map the next draw onto [low, high] by modulo reduction.

        The legacy mapping is kept as is: it is slightly biased toward low
        values and must not be replaced by rejection sampling.
        """
        return self.next() % (high - low + 1) + low

    def next_decimal(self, low: Decimal, high: Decimal, scale: int | None = None) -> Decimal:
        """
        Draw a fixed-point decimal between two bounds.

        Args:
            low: Lower bound
            high: Upper bound
            scale: Fractional digits of the result; defaults to the smaller
                precision of the two bounds

        Returns:
            Decimal whose unscaled number lies in [low.number, high.number]
        """
        precision = min(low.precision, high.precision) if scale is None else scale
        number = self.next() % (high.number - low.number + 1) + low.number
        return Decimal(number, precision)

    # =========================================================================
    # Positioning
    # =========================================================================

    def seek(self, steps: int) -> None:
        """
        Advance the stream by a number of draws in O(log steps).

        Args:
            steps: Number of draws to skip

        Raises:
            StreamOverflowError: If steps is negative or exceeds 64-bit range
        """
        if steps < 0 or steps > MAX_SEEK_STEPS:
            raise StreamOverflowError(self.label, steps)
        self.seed = self.seed * pow(MULTIPLIER, steps, MODULUS) % MODULUS
        self.seeds_used += steps

    def skip_rows(self, rows: int) -> None:
        """
        Position the stream at the start of row ``rows + 1``.

        The position is absolute: it is computed from the initial seed, not
        from wherever the stream currently is.
        """
        steps = rows * self.seeds_per_row
        if steps < 0 or steps > MAX_SEEK_STEPS:
            raise StreamOverflowError(self.label, steps)
        if steps == 0:
            # Columns past 791 start above MODULUS; zero steps keeps that seed as is
            self.seed = self.initial_seed
        else:
            self.seed = self.initial_seed * pow(MULTIPLIER, steps, MODULUS) % MODULUS
        self.seeds_used = 0

    def consume_remaining(self) -> None:
        """Burn the row's unused draws so every row costs ``seeds_per_row``."""
        while self.seeds_used < self.seeds_per_row:
            self.next_uniform_int(1, 100)
        self.seeds_used = 0

    def reset(self) -> None:
        """Return to the initial seed."""
        self.seed = self.initial_seed
        self.seeds_used = 0
