"""
Business keys: 16-character surrogate identifiers.

A key encodes a 64-bit number as two 8-character words (high word first).
Each word is written low nibble first through the alphabet A-P, so
make_business_key(1) is "AAAAAAAABAAAAAAA".
"""

from __future__ import annotations

KEY_ALPHABET = "ABCDEFGHIJKLMNOP"


def _word(value: int) -> str:
    chars = []
    for _ in range(8):
        chars.append(KEY_ALPHABET[value & 0xF])
        value >>= 4
    return "".join(chars)


def make_business_key(number: int) -> str:
    """Encode a non-negative key number as a 16-character business key."""
    number &= 0xFFFFFFFFFFFFFFFF
    return _word(number >> 32) + _word(number & 0xFFFFFFFF)
