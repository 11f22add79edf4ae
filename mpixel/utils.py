"""Small numeric helpers and library configuration."""

from __future__ import annotations

import os

__all__ = [
    "BITS_PER_BYTE",
    "LOG_LEVEL",
    "clamp",
    "in_range",
    "log2",
    "bswap16",
    "bswap32",
    "bswap64",
]

BITS_PER_BYTE = 8


def _default_log_level() -> int:
    try:
        return int(os.environ.get("MPIXEL_LOG_LEVEL", "3"))
    except ValueError:
        return 3


#: 0 silences everything, 1 errors, 2 warnings, 3 info, 4 debug.
LOG_LEVEL = _default_log_level()


def clamp(n, low, high):
    """Bound n between low and high."""
    if n < low:
        return low
    if n > high:
        return high
    return n


def in_range(n, low, high) -> bool:
    """Whether low <= n <= high."""
    return low <= n <= high


def log2(x: int) -> int:
    """Integer base-2 logarithm rounded down, or -1 when x is below 1."""
    if x < 1:
        return -1
    return int(x).bit_length() - 1


def bswap16(u: int) -> int:
    """Swap the bytes of a 16-bit value."""
    return int.from_bytes((u & 0xFFFF).to_bytes(2, "little"), "big")


def bswap32(u: int) -> int:
    """Swap the bytes of a 32-bit value."""
    return int.from_bytes((u & 0xFFFFFFFF).to_bytes(4, "little"), "big")


def bswap64(u: int) -> int:
    """Swap the bytes of a 64-bit value."""
    return int.from_bytes((u & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "little"), "big")