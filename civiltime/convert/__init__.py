"""Unix epoch conversion utilities.

This module provides functional wrappers for converting DateTime values
to and from unix timestamps at second, millisecond, microsecond and
nanosecond resolution.

Examples:
    >>> from civiltime import DateTime
    >>> from civiltime.convert import to_unix_millis, from_unix_millis

    >>> dt = DateTime.literal("2024-06-17T12:59:51.250Z")
    >>> from_unix_millis(to_unix_millis(dt)) == dt
    True
"""

from __future__ import annotations

from civiltime.convert.epoch import (
    from_unix_micros,
    from_unix_millis,
    from_unix_nanos,
    from_unix_seconds,
    to_unix_micros,
    to_unix_millis,
    to_unix_nanos,
    to_unix_seconds,
)

__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_micros",
    "from_unix_micros",
    "to_unix_nanos",
    "from_unix_nanos",
]
