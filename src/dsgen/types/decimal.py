"""
Fixed-point decimal values stored as an unscaled integer and a precision.

Formatting truncates toward zero with integer arithmetic; a value is never
rounded on output.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Decimal:
    """
    Fixed-point decimal, e.g. Decimal(12349, 3) is 12.349.

    Attributes:
        number: Unscaled integer value
        precision: Number of fractional digits
    """

    number: int
    precision: int

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")

    @classmethod
    def parse(cls, text: str) -> "Decimal":
        """Parse ``"123.45"`` into Decimal(12345, 2)."""
        text = text.strip()
        if "." in text:
            whole, fraction = text.split(".", 1)
            return cls(int(whole + fraction), len(fraction))
        return cls(int(text), 0)

    @classmethod
    def from_integer(cls, value: int) -> "Decimal":
        return cls(value, 0)

    def format(self, digits: int | None = None) -> str:
        """
        Render with a fixed number of fractional digits.

        Extra digits are cut off, never rounded: Decimal(12349, 3).format(2)
        gives ``"12.34"``.

        Args:
            digits: Fractional digits to show; defaults to the precision

        Returns:
            Decimal text without exponent
        """
        if digits is None:
            digits = self.precision
        magnitude = abs(self.number)
        if digits < self.precision:
            magnitude //= 10 ** (self.precision - digits)
        elif digits > self.precision:
            magnitude *= 10 ** (digits - self.precision)
        sign = "-" if self.number < 0 and magnitude != 0 else ""
        if digits == 0:
            return f"{sign}{magnitude}"
        whole, fraction = divmod(magnitude, 10**digits)
        return f"{sign}{whole}.{fraction:0{digits}d}"

    def __str__(self) -> str:
        return self.format()


ZERO = Decimal(0, 2)
