"""Kernel and resize types, and lookup of values by name."""

from __future__ import annotations

from enum import Enum, EnumMeta, IntEnum
from typing import Any, Iterable, Mapping

__all__ = ["KernelType", "ResizeType", "lookup_value"]


class KernelType(IntEnum):
    """Kernel operations that can be applied to an image."""

    IDENTITY = 0
    EDGE_DETECT = 1
    GAUSSIAN_BLUR = 2
    SHARPEN = 3
    DENOISE = 4


class ResizeType(IntEnum):
    """Scaling strategies used while resizing an image."""

    SUBSAMPLING = 0
    BINNING = 1


def _entries(table: Any) -> Iterable[tuple[str, Any]]:
    if isinstance(table, EnumMeta):
        return table.__members__.items()
    if isinstance(table, Mapping):
        return table.items()
    return table


def lookup_value(
    table: Mapping[str, Any] | Iterable[tuple[str, Any]] | type[Enum], name: str
) -> Any:
    """Return the value paired with ``name`` in the table; the first match wins.

    The table is a mapping, an iterable of (name, value) pairs or an enum class.
    An unknown name raises ValueError listing the names available.
    """
    entries = list(_entries(table))
    for entry_name, value in entries:
        if entry_name == name:
            return value
    available = ", ".join(entry_name for entry_name, _ in entries)
    raise ValueError(f"Unrecognized argument '{name}', available: {available}")