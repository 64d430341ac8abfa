"""
Value helpers that turn raw stream draws into column values.

Each helper consumes draws from exactly one stream in a fixed order. The
number of draws per call is part of the output contract: random_charset
always draws ``max_length`` characters even when it keeps fewer.
"""

from __future__ import annotations

from .stream import RngStream

ALPHA_NUMERIC = "abcdefghijklmnopqrstuvxyzABCDEFGHIJKLMNOPQRSTUVXYZ0123456789"
DIGITS = "0123456789"


def uniform_int(low: int, high: int, stream: RngStream) -> int:
    """Uniform integer in [low, high] using the legacy modulo mapping."""
    return stream.next_uniform_int(low, high)


def _int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def uniform_key(low: int, high: int, stream: RngStream) -> int:
    """
    Uniform key in [low, high] computed in 32-bit arithmetic.

    The width and the lower bound are wrapped to signed 32 bits before the
    modulo, so a range wider than 2^31 folds the same way the legacy
    generator folds it. The remainder keeps the sign of the draw.
    """
    draw = _int32(stream.next())
    width = _int32(high - low + 1)
    return _int32(draw % abs(width) + _int32(low))


def random_charset(charset: str, min_length: int, max_length: int, stream: RngStream) -> str:
    """
    Random string drawn from a character set.

    Args:
        charset: Characters to draw from
        min_length: Shortest allowed length
        max_length: Longest allowed length
        stream: Stream to draw from

    Returns:
        String of a length drawn from [min_length, max_length]
    """
    length = uniform_int(min_length, max_length, stream)
    chars = []
    for i in range(max_length):
        index = uniform_int(0, len(charset) - 1, stream)
        if i < length:
            chars.append(charset[index])
    return "".join(chars)


def consume_remaining_seeds(streams) -> None:
    """Close out a row on every stream of a generator."""
    for stream in streams:
        stream.consume_remaining()
