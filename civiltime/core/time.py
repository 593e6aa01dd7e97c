"""Wall-clock time of day.

Time holds an hour, minute, second and nanosecond with no date or offset
attached, and knows how to read itself out of unix timestamps.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from civiltime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from civiltime._internal.validation import validate_time
from civiltime.errors import CivilTimeError, Component, InvalidFormatError

if TYPE_CHECKING:
    from civiltime.core.duration import Duration

_EXTENDED_PATTERN = re.compile(
    r"(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?", re.ASCII
)
_COMPACT_PATTERN = re.compile(
    r"(\d{2})(\d{2})(\d{2})(?:\.(\d{1,9}))?", re.ASCII
)


class Time:
    """A wall-clock reading between 00:00:00 and 23:59:59.999999999.

    Leap seconds are not modeled, so second 60 never occurs. The value
    is kept as one count of nanoseconds after midnight. Its precision
    tier is implied by trailing zero digits, and the to_*_precision
    methods truncate to a tier.

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour
        14

        >>> t = Time(12, 0, 0, 123_456_789)
        >>> t.to_milli_precision().nanosecond
        123000000
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Raises:
            OutOfBoundsError: If any component is not an integer or is
                out of range.

        Examples:
            >>> Time(14, 30, 45)
            Time(14, 30, 45, 0)

            >>> Time(12, 0, 60)
            Traceback (most recent call last):
            ...
            civiltime.errors.OutOfBoundsError: second must be between 0 and 59, got 60
        """
        validate_time(hour, minute, second, nanosecond)
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> Time:
        """Wrap a nanosecond count already known to lie in [0, NANOS_PER_DAY)."""
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def midnight(cls) -> Time:
        """Return a Time representing midnight (00:00:00)."""
        return cls._from_nanos(0)

    @classmethod
    def noon(cls) -> Time:
        """Return a Time representing noon (12:00:00)."""
        return cls._from_nanos(12 * NANOS_PER_HOUR)

    @classmethod
    def from_string(cls, s: str) -> Time:
        """Parse a time of day.

        Accepted forms are hh:mm:ss, hh:mm:ss.f, hh:mm and the compact
        hhmmss or hhmmss.f, where the fraction has 1 to 9 digits.

        Raises:
            InvalidFormatError: If the text is not a time.
            OutOfBoundsError: If a component is out of range.

        Examples:
            >>> Time.from_string("14:30:45.123")
            Time(14, 30, 45, 123000000)

            >>> Time.from_string("143045")
            Time(14, 30, 45, 0)
        """
        match = _EXTENDED_PATTERN.fullmatch(s) or _COMPACT_PATTERN.fullmatch(s)
        if not match:
            raise InvalidFormatError(f"invalid time format: {s!r}", Component.TIME)

        hour_str, minute_str, second_str, frac_str = match.groups()
        return cls(
            int(hour_str),
            int(minute_str),
            int(second_str) if second_str else 0,
            _parse_fractional_seconds(frac_str) if frac_str else 0,
        )

    @classmethod
    def literal(cls, s: str) -> Time:
        """Parse a time known to be valid, such as a constant.

        Raises:
            ValueError: If the text is not a valid time.
        """
        try:
            return cls.from_string(s)
        except CivilTimeError as exc:
            raise ValueError(f"invalid time literal {s!r}: {exc}") from exc

    # Construction from unix time

    @classmethod
    def from_unix_nano_utc(cls, nanos: int) -> Time:
        """Return the UTC time of day of a unix timestamp in nanoseconds.

        Examples:
            >>> Time.from_unix_nano_utc(-1)
            Time(23, 59, 59, 999999999)
        """
        return cls._from_nanos(nanos % NANOS_PER_DAY)

    @classmethod
    def from_unix_micro_utc(cls, micros: int) -> Time:
        """Return the UTC time of day of a unix timestamp in microseconds."""
        return cls.from_unix_nano_utc(micros * NANOS_PER_MICROSECOND)

    @classmethod
    def from_unix_milli_utc(cls, millis: int) -> Time:
        """Return the UTC time of day of a unix timestamp in milliseconds."""
        return cls.from_unix_nano_utc(millis * NANOS_PER_MILLISECOND)

    @classmethod
    def from_unix_utc(cls, seconds: int) -> Time:
        """Return the UTC time of day of a unix timestamp in seconds."""
        return cls.from_unix_nano_utc(seconds * NANOS_PER_SECOND)

    @classmethod
    def from_duration(cls, duration: Duration) -> Time:
        """Return the time of day a duration after midnight, wrapping."""
        return cls._from_nanos(duration.as_nanoseconds() % NANOS_PER_DAY)

    # Components

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the milliseconds within the second (0-999)."""
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        """Return the microseconds within the second (0-999999)."""
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Return the nanoseconds within the second (0-999999999)."""
        return self._nanos % NANOS_PER_SECOND

    # Conversion

    def to_nanoseconds(self) -> int:
        """Return the total nanoseconds since midnight."""
        return self._nanos

    def to_duration(self) -> Duration:
        """Return the time elapsed since midnight as a Duration."""
        from civiltime.core.duration import Duration

        return Duration(nanoseconds=self._nanos)

    # Precision

    def _truncate(self, unit: int) -> Time:
        return Time._from_nanos(self._nanos // unit * unit)

    def to_second_precision(self) -> Time:
        """Return this time with the fraction of a second dropped."""
        return self._truncate(NANOS_PER_SECOND)

    def to_milli_precision(self) -> Time:
        """Return this time truncated to whole milliseconds."""
        return self._truncate(NANOS_PER_MILLISECOND)

    def to_micro_precision(self) -> Time:
        """Return this time truncated to whole microseconds."""
        return self._truncate(NANOS_PER_MICROSECOND)

    def to_nano_precision(self) -> Time:
        """Return this time at full nanosecond precision (unchanged)."""
        return self._truncate(1)

    def left_in_day(self) -> Time:
        """Return the time remaining until the next midnight.

        Leap seconds are not accounted for. Midnight itself has a full
        day left, which cannot be represented as a Time and maps to
        midnight.

        Examples:
            >>> Time(23, 0, 0).left_in_day()
            Time(1, 0, 0, 0)
            >>> Time(13, 59, 59, 500_000_000).left_in_day()
            Time(10, 0, 0, 500000000)
        """
        return Time._from_nanos((NANOS_PER_DAY - self._nanos) % NANOS_PER_DAY)

    # Arithmetic

    def add(self, duration: Duration) -> Time:
        """Return this time moved forward by duration, wrapping at midnight.

        Examples:
            >>> from civiltime.core.duration import Duration
            >>> Time(23, 30).add(Duration(hours=1))
            Time(0, 30, 0, 0)
        """
        return Time._from_nanos((self._nanos + duration.as_nanoseconds()) % NANOS_PER_DAY)

    def subtract(self, duration: Duration) -> Time:
        """Return this time moved back by duration, wrapping at midnight."""
        return Time._from_nanos((self._nanos - duration.as_nanoseconds()) % NANOS_PER_DAY)

    def difference(self, other: Time) -> Duration:
        """Return the signed duration from other to this time."""
        from civiltime.core.duration import Duration

        return Duration(nanoseconds=self._nanos - other._nanos)

    def compare(self, other: Time) -> int:
        """Compare two times.

        Returns:
            -1 if this time is earlier, 0 if equal, 1 if later.
        """
        return (self._nanos > other._nanos) - (self._nanos < other._nanos)

    def replace(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
    ) -> Time:
        """Return a new Time with specified components replaced.

        Raises:
            OutOfBoundsError: If any component is out of range.
        """
        return Time(
            hour if hour is not None else self.hour,
            minute if minute is not None else self.minute,
            second if second is not None else self.second,
            nanosecond if nanosecond is not None else self.nanosecond,
        )

    # Formatting

    def fraction_string(self) -> str:
        """Return the fraction of a second padded to its precision tier.

        The fraction has 3, 6 or 9 digits depending on whether the value
        has milli, micro or nano precision, and is empty at second
        precision.

        Examples:
            >>> Time(0, 0, 0, 9_000_000).fraction_string()
            '.009'
            >>> Time(0, 0, 0, 14_920_000).fraction_string()
            '.014920'
            >>> Time(0, 0, 0).fraction_string()
            ''
        """
        nanos = self.nanosecond
        if nanos == 0:
            return ""
        if nanos % NANOS_PER_MILLISECOND == 0:
            return f".{nanos // NANOS_PER_MILLISECOND:03d}"
        if nanos % NANOS_PER_MICROSECOND == 0:
            return f".{nanos // NANOS_PER_MICROSECOND:06d}"
        return f".{nanos:09d}"

    def to_string(self) -> str:
        """Return the time as hh:mm:ss with an optional fraction.

        Examples:
            >>> Time(14, 30, 45).to_string()
            '14:30:45'
            >>> Time(14, 30, 45, 123_456_789).to_string()
            '14:30:45.123456789'
        """
        return (
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f"{self.fraction_string()}"
        )

    # Operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second}, {self.nanosecond})"

    def __str__(self) -> str:
        return self.to_string()

    def __bool__(self) -> bool:
        """Times are always truthy, even midnight."""
        return True


def _parse_fractional_seconds(frac_str: str) -> int:
    """Parse a 1-9 digit fractional seconds string to nanoseconds.

    Examples:
        >>> _parse_fractional_seconds("1")
        100000000
        >>> _parse_fractional_seconds("009")
        9000000
    """
    return int(frac_str.ljust(9, "0"))


__all__ = ["Time"]
