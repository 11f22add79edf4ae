"""Host services: timing, console logging and camera exposure control."""

from __future__ import annotations

import sys
import time
from typing import Any

from mpixel import utils

__all__ = [
    "uptime_us",
    "init_exposure",
    "set_exposure",
    "log_error",
    "log_warning",
    "log_info",
    "log_debug",
]

_DEFAULT_EXPOSURE = 0
_MAX_EXPOSURE = 1

# Last exposure level applied to each device, keyed by device identity.
_exposures: dict[int, int] = {}


def uptime_us() -> int:
    """Monotonic uptime in microseconds, wrapping at 32 bits."""
    return (time.monotonic_ns() // 1000) & 0xFFFFFFFF


def init_exposure(dev: Any) -> tuple[int, int]:
    """Reset a device to its default exposure and return the default and maximum levels."""
    _exposures[id(dev)] = _DEFAULT_EXPOSURE
    return _DEFAULT_EXPOSURE, _MAX_EXPOSURE


def set_exposure(dev: Any, value: int) -> None:
    """Record the exposure level of a device; the host has no sensor to drive."""
    _exposures[id(dev)] = int(value)


def _log(level: int, tag: str, message: str, args: tuple) -> None:
    if utils.LOG_LEVEL < level:
        return
    text = message % args if args else message
    caller = sys._getframe(2).f_code.co_name
    sys.stderr.write(f"{tag}: {caller}: {text}\n")


def log_error(message: str, *args: Any) -> None:
    """Print an error message to the console."""
    _log(1, "ERR", message, args)


def log_warning(message: str, *args: Any) -> None:
    """Print a warning message to the console."""
    _log(2, "WRN", message, args)


def log_info(message: str, *args: Any) -> None:
    """Print an informational message to the console."""
    _log(3, "INF", message, args)


def log_debug(message: str, *args: Any) -> None:
    """Print a debug message to the console."""
    _log(4, "DBG", message, args)