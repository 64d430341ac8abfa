"""
Scale factor to row count resolution.

A ScalingInfo holds one row count per defined scale factor plus the model
used between them. Resolution is a pure function: no randomness, no I/O.
Invalid scale factors are rejected here, before any row is generated.

Usage:
    info = ScalingInfo(0, ScalingModel.LOGARITHMIC, (0, 3, 12, 15, 18, 21, 24, 27, 30, 30))
    info.row_count_for_scale(1.0)    # 3
    info.row_count_for_scale(2.0)    # 4
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidScaleError

DEFINED_SCALES = (0.0, 1.0, 10.0, 100.0, 300.0, 1000.0, 3000.0, 10000.0, 30000.0, 100000.0)
MAX_SCALE = DEFINED_SCALES[-1]


class ScalingModel(Enum):
    """How counts behave between defined scales."""

    STATIC = "static"
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


def validate_scale(scale: float) -> float:
    """
    Check a scale factor and return it as a float.

    Raises:
        InvalidScaleError: If scale is NaN, not positive, or above 100000
    """
    try:
        value = float(scale)
    except (TypeError, ValueError):
        raise InvalidScaleError(scale, "not a number") from None
    if math.isnan(value):
        raise InvalidScaleError(scale, "not a number")
    if value <= 0:
        raise InvalidScaleError(scale, "must be greater than 0")
    if value > MAX_SCALE:
        raise InvalidScaleError(scale, f"must not exceed {MAX_SCALE:g}")
    return value


def _scale_key(scale: float) -> int:
    # Scales are matched on thousandths
    return int(scale * 1000)


@dataclass(frozen=True)
class ScalingInfo:
    """
    Row counts at each defined scale and the model used between them.

    Attributes:
        multiplier: Power of ten applied to every count
        model: Interpolation model
        counts: One count per entry of DEFINED_SCALES
    """

    multiplier: int
    model: ScalingModel
    counts: tuple[int, ...]

    def __post_init__(self):
        if self.multiplier < 0:
            raise ValueError("multiplier must be >= 0")
        if len(self.counts) != len(DEFINED_SCALES):
            raise ValueError(f"expected {len(DEFINED_SCALES)} counts, got {len(self.counts)}")
        if any(c < 0 for c in self.counts):
            raise ValueError("row counts cannot be negative")

    def _count_at(self, scale: float) -> int | None:
        key = _scale_key(scale)
        for defined, count in zip(DEFINED_SCALES, self.counts):
            if _scale_key(defined) == key:
                return count
        return None

    def row_count_for_scale(self, scale: float) -> int:
        """Count before the multiplier is applied."""
        if scale > MAX_SCALE:
            raise InvalidScaleError(scale, f"must not exceed {MAX_SCALE:g}")

        exact = self._count_at(scale)
        if exact is not None:
            return exact
        if self.model is ScalingModel.STATIC:
            return self.counts[1]
        if self.model is ScalingModel.LINEAR:
            return self._linear(scale)
        return self._logarithmic(scale)

    def _logarithmic(self, scale: float) -> int:
        slot = next(i for i, defined in enumerate(DEFINED_SCALES) if scale <= defined)
        low, high = DEFINED_SCALES[slot - 1], DEFINED_SCALES[slot]
        delta = self.counts[slot] - self.counts[slot - 1]
        offset = (scale - low) / (high - low)
        # The base is always the scale-0 or scale-1 count, not the lower bracket
        base = self.counts[0] if scale < 1.0 else self.counts[1]
        count = int(offset * delta) + base
        return count or 1

    def _linear(self, scale: float) -> int:
        if scale < 1.0:
            count = round(scale * self.counts[1])
            return count or 1
        count = 0
        remaining = scale
        for i in range(len(DEFINED_SCALES) - 1, 0, -1):
            while remaining >= DEFINED_SCALES[i]:
                count += self.counts[i]
                remaining -= DEFINED_SCALES[i]
        return count

    def scaled_count(self, scale: float) -> int:
        """Count with the power-of-ten multiplier applied."""
        return self.row_count_for_scale(scale) * 10**self.multiplier


# =============================================================================
# Pseudo tables (scale-dependent cardinalities with no table of their own)
# =============================================================================

CONCURRENT_WEB_SITES = ScalingInfo(0, ScalingModel.LOGARITHMIC, (0, 2, 3, 4, 5, 5, 5, 5, 5, 5))
ACTIVE_CITIES = ScalingInfo(0, ScalingModel.LOGARITHMIC, (0, 2, 6, 18, 30, 54, 90, 165, 270, 495))
ACTIVE_COUNTIES = ScalingInfo(0, ScalingModel.LOGARITHMIC, (0, 1, 3, 9, 15, 27, 45, 81, 135, 245))
ACTIVE_STATES = ScalingInfo(0, ScalingModel.LOGARITHMIC, (0, 1, 2, 5, 8, 14, 23, 41, 50, 50))

PSEUDO_TABLES: dict[str, ScalingInfo] = {
    "concurrent_web_sites": CONCURRENT_WEB_SITES,
    "active_cities": ACTIVE_CITIES,
    "active_counties": ACTIVE_COUNTIES,
    "active_states": ACTIVE_STATES,
}


def pseudo_table_count(name: str, scale: float) -> int:
    """Cardinality of a pseudo table at a validated scale."""
    return PSEUDO_TABLES[name].row_count_for_scale(validate_scale(scale))
