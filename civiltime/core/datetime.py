"""DateTime class combining a date, a time of day and a UTC offset.

This module provides the DateTime class for representing instants in time
with nanosecond precision, displayed at a fixed UTC offset.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, overload

from civiltime._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from civiltime.core.date import Date
from civiltime.core.naive_datetime import NaiveDateTime, split_date_time
from civiltime.core.time import Time
from civiltime.errors import CivilTimeError, Component, InvalidFormatError
from civiltime.units.offset import Offset

if TYPE_CHECKING:
    from civiltime.clock import Clock
    from civiltime.core.conversion import UncertainConversion
    from civiltime.core.duration import Duration
    from civiltime.core.period import Period
    from civiltime.units.month import Month

_LOG: logging.Logger = logging.getLogger(__name__)


class DateTime:
    """A wall-clock reading at a fixed UTC offset.

    DateTime identifies a single instant. The offset only decides how the
    instant is displayed: two DateTimes are equal, hash alike and compare
    by the instant they denote, whatever their offsets.

    Attributes:
        date: The calendar date at the offset.
        time: The time of day at the offset.
        offset: The UTC offset.

    Examples:
        >>> dt = DateTime.literal("2024-06-03T09:02:01-04:00")
        >>> dt.to_utc().to_string()
        '2024-06-03T13:02:01Z'

        >>> dt == DateTime.literal("2024-06-03T13:02:01Z")
        True

        >>> DateTime.from_unix_utc(1_718_629_191).to_string()
        '2024-06-17T12:59:51Z'
    """

    __slots__ = ("_naive", "_offset")

    def __init__(self, date: Date, time: Time, offset: Offset) -> None:
        self._naive: NaiveDateTime = NaiveDateTime(date, time)
        self._offset: Offset = offset

    @classmethod
    def _from_naive(cls, naive: NaiveDateTime, offset: Offset) -> DateTime:
        instance = object.__new__(cls)
        instance._naive = naive
        instance._offset = offset
        return instance

    @classmethod
    def of(
        cls,
        year: int,
        month: int | Month,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        offset: Offset | None = None,
    ) -> DateTime:
        """Create a DateTime from component parts.

        The offset defaults to UTC.

        Raises:
            OutOfBoundsError: If any component is out of range.

        Examples:
            >>> DateTime.of(2024, 6, 3, 9, 2, 1).to_string()
            '2024-06-03T09:02:01Z'
        """
        return cls._from_naive(
            NaiveDateTime.of(year, month, day, hour, minute, second, nanosecond),
            offset if offset is not None else Offset.utc(),
        )

    @classmethod
    def from_string(cls, s: str) -> DateTime:
        """Parse a date-time with a UTC offset.

        The date and the time are separated by "T", "t" or a space. A date
        on its own means midnight UTC. Otherwise the time must end with "Z"
        or a signed offset.

        Raises:
            InvalidFormatError: If the text is malformed or the offset is
                missing. The error's component names the failing part.
            OutOfBoundsError: If a component is out of range.

        Examples:
            >>> DateTime.from_string("20240613T230400.009+00:00").to_string()
            '2024-06-13T23:04:00.009Z'

            >>> DateTime.from_string("2024-06-13 10:00")
            Traceback (most recent call last):
            ...
            civiltime.errors.InvalidFormatError: missing UTC offset in '2024-06-13 10:00'
        """
        date_part, rest = split_date_time(s)
        if rest is None:
            return cls(Date.from_string(date_part), Time.midnight(), Offset.utc())

        if rest.endswith(("Z", "z")):
            time_part, offset_part = rest[:-1], rest[-1:]
        else:
            index = max(rest.rfind("+"), rest.rfind("-"))
            if index <= 0:
                raise InvalidFormatError(
                    f"missing UTC offset in {s!r}", Component.DATETIME
                )
            time_part, offset_part = rest[:index], rest[index:]

        date = Date.from_string(date_part)
        time = Time.from_string(time_part)
        offset = Offset.from_string(offset_part)
        return cls(date, time, offset)

    @classmethod
    def literal(cls, s: str) -> DateTime:
        """Parse a date-time known to be valid, such as a constant.

        Raises:
            ValueError: If the text is not a valid date-time.
        """
        try:
            return cls.from_string(s)
        except CivilTimeError as exc:
            raise ValueError(f"invalid date-time literal {s!r}: {exc}") from exc

    @classmethod
    def parse(cls, text: str, pattern: str) -> DateTime:
        """Parse text laid out according to a format pattern.

        The pattern must give the year, month, day and an offset.

        Raises:
            InvalidFormatError: If the text does not match the pattern or
                the pattern lacks a required field.
            OutOfBoundsError: If a component is out of range.

        Examples:
            >>> DateTime.parse("2024/06/03 09:02 -0400", "YYYY/MM/DD HH:mm ZZ").to_string()
            '2024-06-03T09:02:00-04:00'
        """
        from civiltime.format.pattern import parse_pattern

        fields = parse_pattern(text, pattern, Component.DATETIME)
        if fields.year is None or fields.month is None or fields.day is None:
            raise InvalidFormatError(
                f"pattern must include year, month and day: {pattern!r}",
                Component.DATETIME,
            )
        if fields.offset is None:
            raise InvalidFormatError(
                f"pattern must include an offset: {pattern!r}", Component.DATETIME
            )
        return cls.of(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.nanosecond,
            offset=fields.offset,
        )

    # Construction from unix time

    @classmethod
    def from_unix_nano_utc(cls, nanos: int) -> DateTime:
        """Create a UTC DateTime from nanoseconds since the unix epoch."""
        return cls._from_naive(NaiveDateTime._from_nanos(nanos), Offset.utc())

    @classmethod
    def from_unix_micro_utc(cls, micros: int) -> DateTime:
        """Create a UTC DateTime from microseconds since the unix epoch."""
        return cls.from_unix_nano_utc(micros * NANOS_PER_MICROSECOND)

    @classmethod
    def from_unix_milli_utc(cls, millis: int) -> DateTime:
        """Create a UTC DateTime from milliseconds since the unix epoch."""
        return cls.from_unix_nano_utc(millis * NANOS_PER_MILLISECOND)

    @classmethod
    def from_unix_utc(cls, seconds: int) -> DateTime:
        """Create a UTC DateTime from seconds since the unix epoch.

        Examples:
            >>> DateTime.from_unix_utc(0).to_string()
            '1970-01-01T00:00:00Z'
        """
        return cls.from_unix_nano_utc(seconds * NANOS_PER_SECOND)

    # Current time

    @classmethod
    def now_utc(cls, clock: Clock | None = None) -> DateTime:
        """Return the current instant at offset UTC."""
        from civiltime.clock import resolve_clock

        return cls.from_unix_nano_utc(resolve_clock(clock).now_utc_nanos())

    @classmethod
    def now_local(cls, clock: Clock | None = None) -> DateTime:
        """Return the current instant at the host's current offset."""
        from civiltime.clock import resolve_clock

        clock = resolve_clock(clock)
        return cls.from_unix_nano_utc(clock.now_utc_nanos()).to_offset(
            clock.local_offset()
        )

    # Components

    @property
    def naive(self) -> NaiveDateTime:
        """Return the wall-clock reading without the offset."""
        return self._naive

    @property
    def date(self) -> Date:
        return self._naive.date

    @property
    def time(self) -> Time:
        return self._naive.time

    @property
    def offset(self) -> Offset:
        return self._offset

    @property
    def year(self) -> int:
        return self._naive.year

    @property
    def month(self) -> Month:
        return self._naive.month

    @property
    def day(self) -> int:
        return self._naive.day

    @property
    def hour(self) -> int:
        return self._naive.hour

    @property
    def minute(self) -> int:
        return self._naive.minute

    @property
    def second(self) -> int:
        return self._naive.second

    @property
    def nanosecond(self) -> int:
        return self._naive.nanosecond

    def drop_offset(self) -> NaiveDateTime:
        """Return the wall-clock reading, discarding the offset."""
        return self._naive

    # Unix time

    def to_unix_nano_utc(self) -> int:
        """Return nanoseconds since the unix epoch."""
        return self._naive._to_nanos() - self._offset.minutes * NANOS_PER_MINUTE

    def to_unix_micro_utc(self) -> int:
        """Return whole microseconds since the unix epoch, rounded down."""
        return self.to_unix_nano_utc() // NANOS_PER_MICROSECOND

    def to_unix_milli_utc(self) -> int:
        """Return whole milliseconds since the unix epoch, rounded down."""
        return self.to_unix_nano_utc() // NANOS_PER_MILLISECOND

    def to_unix_utc(self) -> int:
        """Return whole seconds since the unix epoch, rounded down.

        Examples:
            >>> DateTime.literal("2024-06-17T12:59:51Z").to_unix_utc()
            1718629191
        """
        return self.to_unix_nano_utc() // NANOS_PER_SECOND

    # Offset conversion

    def to_utc(self) -> DateTime:
        """Return the same instant displayed at UTC."""
        return self.to_offset(Offset.utc())

    def to_offset(self, offset: Offset) -> DateTime:
        """Return the same instant displayed at another offset.

        Examples:
            >>> dt = DateTime.literal("2024-06-03T23:30:00Z")
            >>> dt.to_offset(Offset.from_hours(5, 30)).to_string()
            '2024-06-04T05:00:00+05:30'
        """
        nanos = self.to_unix_nano_utc() + offset.minutes * NANOS_PER_MINUTE
        return DateTime._from_naive(NaiveDateTime._from_nanos(nanos), offset)

    def to_local(self, clock: Clock | None = None) -> UncertainConversion[DateTime]:
        """Convert to the host's current offset.

        The result is Precise when the host's offset equals this value's
        offset, or when the converted date is the host's current local
        date. Otherwise the host's offset may have been different at that
        instant and the result is Imprecise.
        """
        from civiltime.clock import resolve_clock
        from civiltime.core.conversion import Imprecise, Precise

        clock = resolve_clock(clock)
        host_offset = clock.local_offset()
        if host_offset == self._offset:
            return Precise(self)

        converted = self.to_offset(host_offset)
        if converted.date == Date.current_local(clock):
            return Precise(converted)

        _LOG.debug(
            "Imprecise local conversion of %s at host offset %s",
            self.to_string(),
            host_offset,
        )
        return Imprecise(converted)

    def to_local_time(self, clock: Clock | None = None) -> UncertainConversion[Time]:
        """Return the time of day at the host's current offset."""
        return self.to_local(clock).map(lambda dt: dt.time)

    def to_local_date(self, clock: Clock | None = None) -> UncertainConversion[Date]:
        """Return the calendar date at the host's current offset."""
        return self.to_local(clock).map(lambda dt: dt.date)

    # Comparison

    def compare(self, other: DateTime) -> int:
        """Compare the instants of two date-times.

        Returns:
            -1 if this instant is earlier, 0 if equal, 1 if later.
        """
        mine = self.to_unix_nano_utc()
        theirs = other.to_unix_nano_utc()
        return (mine > theirs) - (mine < theirs)

    def is_earlier(self, other: DateTime) -> bool:
        return self.compare(other) < 0

    def is_earlier_or_equal(self, other: DateTime) -> bool:
        return self.compare(other) <= 0

    def is_later(self, other: DateTime) -> bool:
        return self.compare(other) > 0

    def is_later_or_equal(self, other: DateTime) -> bool:
        return self.compare(other) >= 0

    def is_equal(self, other: DateTime) -> bool:
        """Return True if both denote the same instant."""
        return self.compare(other) == 0

    # Arithmetic

    def add(self, duration: Duration) -> DateTime:
        """Return this date-time moved forward by duration, same offset."""
        return DateTime._from_naive(self._naive.add(duration), self._offset)

    def subtract(self, duration: Duration) -> DateTime:
        """Return this date-time moved back by duration, same offset."""
        return DateTime._from_naive(self._naive.subtract(duration), self._offset)

    def difference(self, other: DateTime) -> Duration:
        """Return the signed duration from other to this instant.

        Examples:
            >>> a = DateTime.literal("2024-06-03T12:00:00+02:00")
            >>> b = DateTime.literal("2024-06-03T09:00:00Z")
            >>> a.difference(b).as_hours()
            1
        """
        from civiltime.core.duration import Duration

        return Duration(
            nanoseconds=self.to_unix_nano_utc() - other.to_unix_nano_utc()
        )

    def as_period(self, other: DateTime) -> Period:
        """Return the period between this instant and other."""
        from civiltime.core.period import Period

        return Period(self, other)

    def add_months(self, months: int) -> DateTime:
        """Add calendar months to the wall-clock reading, same offset."""
        return DateTime._from_naive(self._naive.add_months(months), self._offset)

    def add_years(self, years: int) -> DateTime:
        """Add calendar years to the wall-clock reading, same offset."""
        return DateTime._from_naive(self._naive.add_years(years), self._offset)

    # Precision

    def to_second_precision(self) -> DateTime:
        return DateTime._from_naive(self._naive.to_second_precision(), self._offset)

    def to_milli_precision(self) -> DateTime:
        return DateTime._from_naive(self._naive.to_milli_precision(), self._offset)

    def to_micro_precision(self) -> DateTime:
        return DateTime._from_naive(self._naive.to_micro_precision(), self._offset)

    def to_nano_precision(self) -> DateTime:
        return DateTime._from_naive(self._naive.to_nano_precision(), self._offset)

    # Formatting

    def to_string(self) -> str:
        """Return the date-time as YYYY-MM-DDThh:mm:ss[.fraction] and offset.

        A zero offset is written "Z".

        Examples:
            >>> DateTime.literal("2024-06-03T09:02:01.5-04:00").to_string()
            '2024-06-03T09:02:01.500-04:00'
        """
        suffix = "Z" if self._offset.is_utc else self._offset.to_string()
        return f"{self._naive.to_string()}{suffix}"

    def format(self, pattern: str) -> str:
        """Render through a format pattern.

        Examples:
            >>> dt = DateTime.literal("2024-06-03T09:02:01-04:00")
            >>> dt.format("YY YYYY M MM MMM MMMM D DD d dd ddd")
            '24 2024 6 06 Jun June 3 03 1 Mo Mon'
        """
        from civiltime.format.pattern import format_pattern

        return format_pattern(
            pattern, self.date, self.time, self._offset, Component.DATETIME
        )

    # Operators

    def __add__(self, other: object) -> DateTime:
        from civiltime.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    @overload
    def __sub__(self, other: Duration) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Duration: ...

    def __sub__(self, other: object) -> DateTime | Duration:
        from civiltime.core.duration import Duration

        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, DateTime):
            return self.difference(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.to_unix_nano_utc() == other.to_unix_nano_utc()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self.to_unix_nano_utc())

    def __repr__(self) -> str:
        return f"DateTime({self._naive.date!r}, {self._naive.time!r}, {self._offset!r})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["DateTime"]
