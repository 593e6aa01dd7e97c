"""TimeUnit enumeration for exact time units.

This module provides the TimeUnit enum representing the fixed-length
time units from nanoseconds to weeks that a Duration can be expressed in.
Months and years have no fixed length and are handled by calendar
arithmetic on Date instead.
"""

from __future__ import annotations

from enum import Enum

from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_PER_WEEK,
)


class TimeUnit(Enum):
    """Fixed-length time units for duration conversions.

    Examples:
        >>> TimeUnit.HOUR.to_nanoseconds()
        3600000000000

        >>> TimeUnit.MILLISECOND.to_nanoseconds()
        1000000
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"

    def to_nanoseconds(self) -> int:
        """Return the number of nanoseconds in one unit."""
        return _NANOS_PER_UNIT[self]

    def plural(self) -> str:
        """Return the English plural of the unit name."""
        return f"{self.value}s"


_NANOS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.NANOSECOND: 1,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MINUTE: NANOS_PER_MINUTE,
    TimeUnit.HOUR: NANOS_PER_HOUR,
    TimeUnit.DAY: NANOS_PER_DAY,
    TimeUnit.WEEK: NANOS_PER_WEEK,
}


__all__ = ["TimeUnit"]
