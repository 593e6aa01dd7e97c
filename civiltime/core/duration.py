"""Duration class representing elapsed time.

This module provides the Duration class for representing exact spans of
time with nanosecond precision. A Duration has no calendar meaning: a day
is always 86,400 seconds and there are no months or years.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_PER_WEEK,
)
from civiltime.units.timeunit import TimeUnit


def _truncating_div(value: int, divisor: int) -> int:
    """Divide rounding toward zero, so -1.5 units become -1."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


class Duration:
    """A signed span of time with nanosecond precision.

    Duration stores a single signed count of nanoseconds of arbitrary
    magnitude. All constructor arguments are additive.

    Examples:
        >>> d = Duration(hours=1, minutes=30)
        >>> d.as_minutes()
        90

        >>> Duration.from_hours(25).as_days()
        1

        >>> (Duration(seconds=30) + Duration(seconds=45)).as_seconds()
        75
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        *,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero.

        Examples:
            >>> Duration(days=1)
            Duration(nanoseconds=86400000000000)

            >>> Duration(milliseconds=1500).as_seconds_fractional()
            1.5
        """
        self._nanos: int = (
            days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls()

    @classmethod
    def of(cls, amount: int, unit: TimeUnit) -> Duration:
        """Create a Duration of amount units.

        Examples:
            >>> Duration.of(3, TimeUnit.WEEK).as_days()
            21
        """
        return cls(nanoseconds=amount * unit.to_nanoseconds())

    @classmethod
    def from_weeks(cls, weeks: int) -> Duration:
        """Create a Duration from a number of weeks."""
        return cls(nanoseconds=weeks * NANOS_PER_WEEK)

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration from a number of days."""
        return cls(days=days)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours."""
        return cls(hours=hours)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls(minutes=minutes)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        """Create a Duration from a number of seconds."""
        return cls(seconds=seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        """Create a Duration from a number of milliseconds."""
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Duration:
        """Create a Duration from a number of microseconds."""
        return cls(microseconds=microseconds)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create a Duration from a number of nanoseconds."""
        return cls(nanoseconds=nanoseconds)

    # Unit conversions

    def as_unit(self, unit: TimeUnit) -> int:
        """Return the number of whole units in this duration.

        The result is truncated toward zero, so a negative duration of
        one and a half days is -1 day.

        Examples:
            >>> Duration(hours=-36).as_unit(TimeUnit.DAY)
            -1
        """
        return _truncating_div(self._nanos, unit.to_nanoseconds())

    def as_weeks(self) -> int:
        """Return the number of whole weeks."""
        return self.as_unit(TimeUnit.WEEK)

    def as_days(self) -> int:
        """Return the number of whole days."""
        return self.as_unit(TimeUnit.DAY)

    def as_hours(self) -> int:
        """Return the number of whole hours."""
        return self.as_unit(TimeUnit.HOUR)

    def as_minutes(self) -> int:
        """Return the number of whole minutes."""
        return self.as_unit(TimeUnit.MINUTE)

    def as_seconds(self) -> int:
        """Return the number of whole seconds."""
        return self.as_unit(TimeUnit.SECOND)

    def as_milliseconds(self) -> int:
        """Return the number of whole milliseconds."""
        return self.as_unit(TimeUnit.MILLISECOND)

    def as_microseconds(self) -> int:
        """Return the number of whole microseconds."""
        return self.as_unit(TimeUnit.MICROSECOND)

    def as_nanoseconds(self) -> int:
        """Return the duration in nanoseconds (exact)."""
        return self._nanos

    def as_seconds_fractional(self) -> float:
        """Return the duration in seconds as a float.

        Floats carry about 15 significant digits, so long durations lose
        their low nanoseconds. as_nanoseconds() is exact.
        """
        return self._nanos / NANOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        """Return True if this is a negative duration."""
        return self._nanos < 0

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length duration."""
        return self._nanos == 0

    def increase(self, other: Duration) -> Duration:
        """Return this duration lengthened by other."""
        return self + other

    def decrease(self, other: Duration) -> Duration:
        """Return this duration shortened by other."""
        return self - other

    def to_string(self) -> str:
        """Return a human-readable representation.

        Examples:
            >>> Duration(days=1, hours=2, minutes=3, seconds=4).to_string()
            '1 day, 2:03:04'

            >>> Duration(seconds=-90).to_string()
            '-0:01:30'

            >>> Duration(days=3, milliseconds=500).to_string()
            '3 days, 0:00:00.5'
        """
        sign = "-" if self._nanos < 0 else ""
        days, remainder = divmod(abs(self._nanos), NANOS_PER_DAY)
        hours, remainder = divmod(remainder, NANOS_PER_HOUR)
        minutes, remainder = divmod(remainder, NANOS_PER_MINUTE)
        secs, nanos = divmod(remainder, NANOS_PER_SECOND)

        time_str = f"{hours}:{minutes:02d}:{secs:02d}"
        if nanos > 0:
            time_str += f".{nanos:09d}".rstrip("0")

        if days == 0:
            return f"{sign}{time_str}"
        unit = "day" if days == 1 else "days"
        return f"{sign}{days} {unit}, {time_str}"

    # Arithmetic

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos + other._nanos)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos - other._nanos)

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by an integer.

        Examples:
            >>> (Duration(seconds=30) * 3).as_seconds()
            90
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration(nanoseconds=self._nanos * other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Duration:
        """Divide a duration by an integer (floor division).

        Raises:
            ZeroDivisionError: If other is zero.
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("integer division or modulo by zero")
        return Duration(nanoseconds=self._nanos // other)

    def __neg__(self) -> Duration:
        return Duration(nanoseconds=-self._nanos)

    def __pos__(self) -> Duration:
        return Duration(nanoseconds=self._nanos)

    def __abs__(self) -> Duration:
        return Duration(nanoseconds=abs(self._nanos))

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Duration(nanoseconds={self._nanos})"

    def __str__(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return self._nanos != 0


__all__ = ["Duration"]
