"""Period class representing the span between two instants.

This module provides the Period class: a closed range [start, end] of
DateTime values. Unlike Duration, a Period remembers where it starts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)

if TYPE_CHECKING:
    from civiltime.core.datetime import DateTime
    from civiltime.core.duration import Duration

_UNITS: tuple[tuple[str, int], ...] = (
    ("day", NANOS_PER_DAY),
    ("hour", NANOS_PER_HOUR),
    ("minute", NANOS_PER_MINUTE),
    ("second", NANOS_PER_SECOND),
)


class Period:
    """The span of time between two instants, endpoints included.

    The endpoints are ordered on construction: if end is earlier than
    start they are swapped, so start <= end always holds.

    Attributes:
        start: The earlier endpoint.
        end: The later endpoint.

    Examples:
        >>> from civiltime.core.datetime import DateTime
        >>> a = DateTime.literal("2024-06-03T00:00:00Z")
        >>> b = DateTime.literal("2024-06-05T06:30:00Z")
        >>> p = Period(b, a)
        >>> p.start == a
        True
        >>> p.as_days()
        2
        >>> p.to_string()
        '2 days, 6 hours, 30 minutes'
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: DateTime, end: DateTime) -> None:
        if end.is_earlier(start):
            start, end = end, start
        self._start: DateTime = start
        self._end: DateTime = end

    @property
    def start(self) -> DateTime:
        """Return the earlier endpoint."""
        return self._start

    @property
    def end(self) -> DateTime:
        """Return the later endpoint."""
        return self._end

    @property
    def duration(self) -> Duration:
        """Return the non-negative length of the period."""
        return self._end.difference(self._start)

    def as_days(self) -> int:
        """Return the number of whole days in the period."""
        return self.duration.as_days()

    def contains(self, dt: DateTime) -> bool:
        """Return True if dt lies within the period, endpoints included."""
        return self._start.is_earlier_or_equal(dt) and dt.is_earlier_or_equal(self._end)

    def __contains__(self, dt: object) -> bool:
        from civiltime.core.datetime import DateTime

        if not isinstance(dt, DateTime):
            return False
        return self.contains(dt)

    def to_string(self) -> str:
        """Describe the length of the period in days, hours, minutes, seconds.

        Zero components are omitted; a zero-length period is "0 seconds".
        Sub-second remainders are dropped.
        """
        remaining = self.duration.as_nanoseconds()
        parts = []
        for name, size in _UNITS:
            count, remaining = divmod(remaining, size)
            if count:
                parts.append(f"{count} {name}" + ("" if count == 1 else "s"))
        return ", ".join(parts) if parts else "0 seconds"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Period({self._start.to_string()!r}, {self._end.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["Period"]
