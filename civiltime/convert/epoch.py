"""Epoch conversion utilities for date-times.

This module provides functions for converting between DateTime values and
unix timestamps in seconds, milliseconds, microseconds and nanoseconds.

Functions:
    to_unix_seconds: Convert a DateTime to whole unix seconds.
    from_unix_seconds: Create a DateTime from unix seconds.
    to_unix_millis: Convert a DateTime to whole unix milliseconds.
    from_unix_millis: Create a DateTime from unix milliseconds.
    to_unix_micros: Convert a DateTime to whole unix microseconds.
    from_unix_micros: Create a DateTime from unix microseconds.
    to_unix_nanos: Convert a DateTime to unix nanoseconds.
    from_unix_nanos: Create a DateTime from unix nanoseconds.

The unix epoch is 1970-01-01T00:00:00Z. Conversions to coarser units round
down, so instants before the epoch map to the earlier whole unit.

Examples:
    >>> from civiltime.convert import to_unix_seconds, from_unix_seconds

    >>> to_unix_seconds(from_unix_seconds(1_718_629_191))
    1718629191

    >>> from_unix_seconds(0).to_string()
    '1970-01-01T00:00:00Z'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from civiltime.core.datetime import DateTime
    from civiltime.units.offset import Offset


def _at_offset(dt: DateTime, offset: Offset | None) -> DateTime:
    return dt if offset is None else dt.to_offset(offset)


def to_unix_seconds(dt: DateTime) -> int:
    """Convert a DateTime to a unix timestamp in whole seconds.

    Examples:
        >>> from civiltime import DateTime
        >>> to_unix_seconds(DateTime.literal("1970-01-01T01:00:00+01:00"))
        0
    """
    return dt.to_unix_utc()


def from_unix_seconds(seconds: int, *, offset: Offset | None = None) -> DateTime:
    """Create a DateTime from unix seconds.

    Args:
        seconds: Seconds since 1970-01-01T00:00:00Z.
        offset: Offset to display the result at. Defaults to UTC.

    Examples:
        >>> from civiltime.units.offset import Offset
        >>> from_unix_seconds(0, offset=Offset(60)).to_string()
        '1970-01-01T01:00:00+01:00'
    """
    from civiltime.core.datetime import DateTime

    return _at_offset(DateTime.from_unix_utc(seconds), offset)


def to_unix_millis(dt: DateTime) -> int:
    """Convert a DateTime to a unix timestamp in whole milliseconds."""
    return dt.to_unix_milli_utc()


def from_unix_millis(millis: int, *, offset: Offset | None = None) -> DateTime:
    """Create a DateTime from unix milliseconds.

    Examples:
        >>> from_unix_millis(1_500).to_string()
        '1970-01-01T00:00:01.500Z'
    """
    from civiltime.core.datetime import DateTime

    return _at_offset(DateTime.from_unix_milli_utc(millis), offset)


def to_unix_micros(dt: DateTime) -> int:
    """Convert a DateTime to a unix timestamp in whole microseconds."""
    return dt.to_unix_micro_utc()


def from_unix_micros(micros: int, *, offset: Offset | None = None) -> DateTime:
    """Create a DateTime from unix microseconds."""
    from civiltime.core.datetime import DateTime

    return _at_offset(DateTime.from_unix_micro_utc(micros), offset)


def to_unix_nanos(dt: DateTime) -> int:
    """Convert a DateTime to a unix timestamp in nanoseconds (exact)."""
    return dt.to_unix_nano_utc()


def from_unix_nanos(nanos: int, *, offset: Offset | None = None) -> DateTime:
    """Create a DateTime from unix nanoseconds.

    Examples:
        >>> from_unix_nanos(-1).to_string()
        '1969-12-31T23:59:59.999999999Z'
    """
    from civiltime.core.datetime import DateTime

    return _at_offset(DateTime.from_unix_nano_utc(nanos), offset)


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
