"""Parsing of the command line arguments of the image processing pipeline."""

from __future__ import annotations

import math
import re
import struct
from enum import IntEnum
from typing import Iterable, Sequence

from mpixel.formats import PixelFormat, fourcc
from mpixel.utils import clamp, in_range

__all__ = [
    "ArgumentError",
    "CorrectionType",
    "CORRECTION_SCALE_BITS",
    "COMMANDS",
    "PROG",
    "split_commands",
    "parse_width_height",
    "parse_width",
    "parse_kernel_size",
    "parse_debayer_size",
    "parse_palette",
    "parse_black_level",
    "parse_white_balance",
    "parse_gamma",
    "parse_color_matrix",
    "usage",
]

#: Fixed-point scaling applied to white balance levels and color matrix coefficients.
CORRECTION_SCALE_BITS = 10

PROG = "mpixel"

#: Command names with their usage line, in the order they are listed.
COMMANDS: dict[str, str] = {
    # File I/O operations
    "read": "read <file> [<width> <format>] ! ...",
    "write": "... ! write <file>",
    # Conversion operations
    "convert": "... ! convert <format> ! ...",
    "debayer": "... ! debayer <size> ! ...",
    # Color palette operations
    "palette": "... ! palette <bit_depth> <optimization_cycles> ! ...",
    "palettize": "... ! palettize ! ...",
    "depalettize": "... ! depalettize ! ...",
    # Transformation operations
    "correction": "... ! correction <type> <level1> [<level2>] ! ...",
    "kernel": "... ! kernel <type> <size> ! ...",
    # Size-related operations
    "resize": "... ! resize <type> <width>x<height> ! ...",
    # Compression operations
    "qoi_encode": "... ! qoi_encode ! ...",
    "jpeg_encode": "... ! jpeg_encode <quality> ! ...",
}

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF
_INT16_MIN = -0x8000
_INT16_MAX = 0x7FFF
_UINT64_WRAP = 1 << 64

_INT_RE = re.compile(r"\s*([+-]?)(\d+)")
_FLOAT_RE = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ArgumentError(ValueError):
    """Raised when a command line argument is malformed or out of range."""


class CorrectionType(IntEnum):
    """Image corrections that can be applied."""

    BLACK_LEVEL = 0
    WHITE_BALANCE = 1
    GAMMA = 2
    COLOR_MATRIX = 3


def _parse_uint(arg: str) -> tuple[int, str]:
    """Parse a leading base-10 integer; return it with the unparsed remainder.

    Without any digit the value is 0 and the whole text remains. A negative
    number wraps around like an unsigned 64-bit conversion.
    """
    match = _INT_RE.match(arg)
    if match is None:
        return 0, arg
    value = int(match.group(2))
    if match.group(1) == "-" and value:
        value = _UINT64_WRAP - value
    return value, arg[match.end():]


def _parse_float(arg: str) -> tuple[float, str]:
    """Parse a leading single-precision float; return it with the remainder."""
    match = _FLOAT_RE.match(arg)
    if match is None:
        return 0.0, arg
    value = float(match.group(0))
    if math.isfinite(value):
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            value = math.copysign(math.inf, value)
    return value, arg[match.end():]


def _scaled(arg: str, scale: float) -> tuple[int | None, str]:
    """Multiply a leading float by scale and truncate toward zero.

    Returns None for the value when the result is not a finite number.
    """
    value, rest = _parse_float(arg)
    product = value * scale
    if not math.isfinite(product):
        return None, rest
    return int(product), rest


def split_commands(argv: Iterable[str]) -> list[list[str]]:
    """Split arguments into commands separated by "!".

    A trailing "!" is ignored; an empty command elsewhere raises ArgumentError.
    """
    args = list(argv)
    commands: list[list[str]] = []
    current: list[str] = []
    for position, arg in enumerate(args):
        if arg != "!":
            current.append(arg)
            continue
        if not current:
            raise ArgumentError("Unknown command '!'")
        commands.append(current)
        current = []
        if position == len(args) - 1:
            return commands
    if current:
        commands.append(current)
    return commands


def parse_width_height(arg: str) -> tuple[int, int]:
    """Parse a "<width>x<height>" size."""
    width, rest = _parse_uint(arg)
    if not rest.startswith("x") or width > _UINT16_MAX:
        raise ArgumentError(f"Invalid width in <width>x<height> parameter '{rest}'")
    height, rest = _parse_uint(rest[1:])
    if rest != "" or height > _UINT16_MAX:
        raise ArgumentError(f"Invalid height in <width>x<height> parameter '{rest}'")
    return width, height


def parse_width(arg: str) -> int:
    """Parse a non-zero width in pixels; text after the number is ignored."""
    width, rest = _parse_uint(arg)
    if width == 0 or width > _UINT16_MAX:
        raise ArgumentError(f"Invalid width in <width> parameter '{rest}'")
    return width


def parse_kernel_size(arg: str) -> int:
    """Parse a kernel size, which must be 3 or 5."""
    size, rest = _parse_uint(arg)
    if rest != "" or size not in (3, 5):
        raise ArgumentError(f"Invalid kernel size {arg}, must be 3 or 5")
    return size


def parse_debayer_size(arg: str) -> int:
    """Parse a debayer window size, which must be 1, 2 or 3."""
    size, rest = _parse_uint(arg)
    if rest != "" or size not in (1, 2, 3):
        raise ArgumentError(f"Invalid debayer size '{arg}', must be 1, 2 or 3")
    return size


def parse_palette(bit_depth: str, cycles: str) -> tuple[PixelFormat, int]:
    """Parse a palette bit depth (1 to 8) and a number of optimization cycles (up to 1000).

    Returns the indexed pixel format matching the bit depth, and the cycle count.
    """
    depth, rest = _parse_uint(bit_depth)
    if rest != "" or not in_range(depth, 1, 8):
        raise ArgumentError(f"Invalid color bit depth '{bit_depth}' (min=1, max=8)")
    count, rest = _parse_uint(cycles)
    if rest != "" or count > 1000:
        raise ArgumentError(f"Invalid number of optimization cycles '{cycles}'")
    return PixelFormat(fourcc("P", "L", "T", chr(ord("0") + depth))), count


def parse_black_level(arg: str) -> int:
    """Parse a black level offset from 0 to 255."""
    level, rest = _parse_uint(arg)
    if arg == "" or rest != "" or level > _UINT8_MAX:
        raise ArgumentError(f"Invalid black level value '{arg}'")
    return level


def _parse_balance_level(arg: str, channel: str) -> int:
    level, rest = _scaled(arg, 1 << CORRECTION_SCALE_BITS)
    if arg == "" or rest != "" or level is None or not in_range(level, 0, _UINT16_MAX):
        raise ArgumentError(f"Invalid {channel} level value '{arg}'")
    return level


def parse_white_balance(red: str, blue: str) -> tuple[int, int]:
    """Parse red and blue gains, returned as fixed-point levels where 1024 means 1.0."""
    return _parse_balance_level(red, "red"), _parse_balance_level(blue, "blue")


def parse_gamma(arg: str) -> int:
    """Parse a gamma from 0.0 to 1.0, returned as a level from 17 to 255."""
    level, rest = _scaled(arg, 255)
    if arg == "" or rest != "" or level is None or not in_range(level, 0, 255):
        raise ArgumentError(f"Invalid gamma value '{arg}' (min=0.0, max=1.0)")
    return clamp(level, 17, 255)


def parse_color_matrix(args: Sequence[str]) -> tuple[int, ...]:
    """Parse the 9 coefficients of a 3x3 color matrix as fixed-point values."""
    if len(args) != 9:
        raise ArgumentError(f"Expected 9 color matrix coefficients, got {len(args)}")
    levels = []
    for arg in args:
        level, rest = _scaled(arg, 1 << CORRECTION_SCALE_BITS)
        if (
            arg == ""
            or rest != ""
            or level is None
            or not in_range(level, _INT16_MIN, _INT16_MAX)
        ):
            raise ArgumentError(f"Invalid CCM coefficient '{arg}'")
        levels.append(level)
    return tuple(levels)


def usage() -> str:
    """Text listing the usage of every command."""
    lines = ["Available commands:"]
    lines.extend(f" {PROG} [-v] {text}" for text in COMMANDS.values())
    return "\n".join(lines) + "\n"