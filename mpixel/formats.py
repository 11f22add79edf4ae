"""Pixel format codes and their average number of bits per pixel."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "PixelFormat",
    "fourcc",
    "fourcc_to_str",
    "bits_per_pixel",
    "register_bits_per_pixel",
]


def _char_code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if not 0 <= c <= 0xFF:
        raise ValueError(f"character code out of range: {c}")
    return c


def fourcc(a: str | int, b: str | int, c: str | int, d: str | int) -> int:
    """Pack four characters into a little-endian 32-bit four character code."""
    return (
        _char_code(a)
        | (_char_code(b) << 8)
        | (_char_code(c) << 16)
        | (_char_code(d) << 24)
    )


def fourcc_to_str(value: int) -> str:
    """Return the four characters making up a four character code."""
    value = int(value) & 0xFFFFFFFF
    return "".join(chr((value >> shift) & 0xFF) for shift in (0, 8, 16, 24))


class PixelFormat(IntEnum):
    """Pixel formats known to the library, valued by their four character code."""

    # RGB formats
    RGB332 = fourcc("R", "G", "B", "1")
    RGB565 = fourcc("R", "G", "B", "P")
    RGB565X = fourcc("R", "G", "B", "R")
    RGB24 = fourcc("R", "G", "B", "3")
    XRGB32 = fourcc("B", "X", "2", "4")

    # YUV formats
    YUV12 = fourcc("Y", "U", "V", "C")
    YUV24 = fourcc("Y", "U", "V", "3")
    YUYV = fourcc("Y", "U", "Y", "V")

    # Luma-only formats
    GREY = fourcc("G", "R", "E", "Y")

    # Bayer formats
    SBGGR8 = fourcc("B", "A", "8", "1")
    BGGR8 = fourcc("B", "G", "G", "R")
    SGBRG8 = fourcc("G", "B", "R", "G")
    SGRBG8 = fourcc("G", "R", "B", "G")
    SRGGB8 = fourcc("R", "G", "G", "B")

    # Indexed color formats
    PALETTE1 = fourcc("P", "L", "T", "1")
    PALETTE2 = fourcc("P", "L", "T", "2")
    PALETTE3 = fourcc("P", "L", "T", "3")
    PALETTE4 = fourcc("P", "L", "T", "4")
    PALETTE5 = fourcc("P", "L", "T", "5")
    PALETTE6 = fourcc("P", "L", "T", "6")
    PALETTE7 = fourcc("P", "L", "T", "7")
    PALETTE8 = fourcc("P", "L", "T", "8")

    # Compressed formats
    JPEG = fourcc("J", "P", "E", "G")
    QOI = fourcc("Q", "O", "I", "F")

    def __str__(self) -> str:
        return fourcc_to_str(self.value)


_BITS_PER_PIXEL: dict[int, int] = {
    PixelFormat.RGB332: 8,
    PixelFormat.RGB565: 16,
    PixelFormat.RGB565X: 16,
    PixelFormat.RGB24: 24,
    PixelFormat.YUV12: 12,
    PixelFormat.YUV24: 24,
    PixelFormat.YUYV: 16,
    PixelFormat.GREY: 8,
    PixelFormat.BGGR8: 8,
    PixelFormat.SRGGB8: 8,
    PixelFormat.SBGGR8: 8,
    PixelFormat.SGBRG8: 8,
    PixelFormat.SGRBG8: 8,
    PixelFormat.PALETTE1: 1,
    PixelFormat.PALETTE2: 2,
    PixelFormat.PALETTE3: 4,
    PixelFormat.PALETTE4: 4,
    PixelFormat.PALETTE5: 8,
    PixelFormat.PALETTE6: 8,
    PixelFormat.PALETTE7: 8,
    PixelFormat.PALETTE8: 8,
    PixelFormat.JPEG: 0,
    PixelFormat.QOI: 0,
}

_custom_bits_per_pixel: dict[int, int] = {}


def register_bits_per_pixel(value: int, bits: int) -> None:
    """Declare the average bits per pixel of an application-specific format."""
    value = int(value)
    if value in _BITS_PER_PIXEL:
        raise ValueError(f"format {fourcc_to_str(value)!r} is built in")
    if not 0 <= bits <= 0xFF:
        raise ValueError(f"bits per pixel out of range: {bits}")
    _custom_bits_per_pixel[value] = bits


def bits_per_pixel(value: int) -> int:
    """Return the average number of bits per pixel; 0 for compressed formats.

    Formats not built in are looked up among those added with
    register_bits_per_pixel(); an unknown format raises ValueError.
    """
    value = int(value)
    try:
        return _BITS_PER_PIXEL[value]
    except KeyError:
        pass
    try:
        return _custom_bits_per_pixel[value]
    except KeyError:
        raise ValueError(f"unknown pixel format {fourcc_to_str(value)!r}") from None