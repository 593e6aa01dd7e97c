"""NaiveDateTime class combining a date and a time of day.

This module provides the NaiveDateTime class: a wall-clock reading with
no UTC offset attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from civiltime._internal.constants import NANOS_PER_DAY, NANOS_PER_MINUTE
from civiltime.core.date import Date
from civiltime.core.time import Time
from civiltime.errors import CivilTimeError, Component, InvalidFormatError

if TYPE_CHECKING:
    from civiltime.core.datetime import DateTime
    from civiltime.core.duration import Duration
    from civiltime.units.month import Month
    from civiltime.units.offset import Offset


def split_date_time(text: str) -> tuple[str, str | None]:
    """Split date-time text into its date part and its time part.

    The split happens at the first "T" or "t". Without one, the text is
    split at its last space so that space-separated dates still parse.
    Text with neither is a date only, and the time part is None.

    Examples:
        >>> split_date_time("2024-06-03T10:00")
        ('2024-06-03', '10:00')
        >>> split_date_time("2024 06 03 10:00")
        ('2024 06 03', '10:00')
        >>> split_date_time("2024 06 03")
        ('2024 06 03', None)
    """
    for index, char in enumerate(text):
        if char in "Tt":
            return text[:index], text[index + 1 :]
    head, sep, tail = text.rpartition(" ")
    if sep and not _is_date_text(text):
        return head, tail
    return text, None


def _is_date_text(text: str) -> bool:
    """Return True if text reads as a date on its own."""
    try:
        Date.from_string(text)
    except InvalidFormatError:
        return False
    return True


class NaiveDateTime:
    """A calendar date and a time of day without a UTC offset.

    A NaiveDateTime is what a wall clock and a calendar on the wall show.
    It does not identify an instant until an offset is attached with
    set_offset().

    Examples:
        >>> ndt = NaiveDateTime.of(2024, 6, 3, 9, 2, 1)
        >>> ndt.to_string()
        '2024-06-03T09:02:01'

        >>> NaiveDateTime.literal("2024-06-03 23:30").add_months(1)
        NaiveDateTime(Date(2024, 7, 3), Time(23, 30, 0, 0))
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: Time) -> None:
        self._date: Date = date
        self._time: Time = time

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
    ) -> NaiveDateTime:
        """Create a NaiveDateTime from its component parts.

        Raises:
            OutOfBoundsError: If any component is out of range.
        """
        return cls(Date(year, month, day), Time(hour, minute, second, nanosecond))

    @classmethod
    def _from_nanos(cls, nanos: int) -> NaiveDateTime:
        """Create a NaiveDateTime from nanoseconds since 1970-01-01T00:00."""
        days, time_nanos = divmod(nanos, NANOS_PER_DAY)
        return cls(Date._from_days(days), Time._from_nanos(time_nanos))

    def _to_nanos(self) -> int:
        """Return nanoseconds since 1970-01-01T00:00 on the same wall clock."""
        return self._date.to_unix_days() * NANOS_PER_DAY + self._time.to_nanoseconds()

    @classmethod
    def from_string(cls, s: str) -> NaiveDateTime:
        """Parse a date-time without an offset.

        The date and time are separated by "T", "t" or a space. A date on
        its own means midnight.

        Raises:
            InvalidFormatError: If the text is malformed or carries an
                offset.
            OutOfBoundsError: If a component is out of range.

        Examples:
            >>> NaiveDateTime.from_string("20240613T230400.009")
            NaiveDateTime(Date(2024, 6, 13), Time(23, 4, 0, 9000000))
            >>> NaiveDateTime.from_string("2024-06-13")
            NaiveDateTime(Date(2024, 6, 13), Time(0, 0, 0, 0))
        """
        date_part, time_part = split_date_time(s)
        if time_part is None:
            return cls(Date.from_string(date_part), Time.midnight())
        if time_part.endswith(("Z", "z")) or "+" in time_part or "-" in time_part:
            raise InvalidFormatError(
                f"naive date-time must not carry an offset: {s!r}",
                Component.NAIVE_DATETIME,
            )
        return cls(Date.from_string(date_part), Time.from_string(time_part))

    @classmethod
    def literal(cls, s: str) -> NaiveDateTime:
        """Parse a date-time known to be valid.

        Raises:
            ValueError: If the text is not a valid naive date-time.
        """
        try:
            return cls.from_string(s)
        except CivilTimeError as exc:
            raise ValueError(f"invalid naive date-time literal {s!r}: {exc}") from exc

    @classmethod
    def parse(cls, text: str, pattern: str) -> NaiveDateTime:
        """Parse text laid out according to a format pattern.

        The pattern must give the year, month and day and must not use
        offset tokens. Time fields default to zero.

        Raises:
            InvalidFormatError: If the text does not match the pattern.
            OutOfBoundsError: If a component is out of range.

        Examples:
            >>> NaiveDateTime.parse("03 Jun 2024 1:02 pm", "DD MMM YYYY h:mm a")
            NaiveDateTime(Date(2024, 6, 3), Time(13, 2, 0, 0))
        """
        from civiltime.format.pattern import parse_pattern

        fields = parse_pattern(text, pattern, Component.NAIVE_DATETIME)
        if fields.offset is not None:
            raise InvalidFormatError(
                f"naive date-time pattern must not contain an offset: {pattern!r}",
                Component.NAIVE_DATETIME,
            )
        if fields.year is None or fields.month is None or fields.day is None:
            raise InvalidFormatError(
                f"pattern must include year, month and day: {pattern!r}",
                Component.NAIVE_DATETIME,
            )
        return cls.of(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.nanosecond,
        )

    # Components

    @property
    def date(self) -> Date:
        """Return the date part."""
        return self._date

    @property
    def time(self) -> Time:
        """Return the time-of-day part."""
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> Month:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    # Offsets

    def set_offset(self, offset: Offset) -> DateTime:
        """Attach an offset, keeping the wall-clock reading.

        Examples:
            >>> from civiltime.units.offset import Offset
            >>> NaiveDateTime.of(2024, 6, 3, 9).set_offset(Offset(-240)).to_string()
            '2024-06-03T09:00:00-04:00'
        """
        from civiltime.core.datetime import DateTime

        return DateTime(self._date, self._time, offset)

    def as_utc(self) -> DateTime:
        """Interpret this wall-clock reading as UTC."""
        from civiltime.units.offset import Offset

        return self.set_offset(Offset.utc())

    def _shift_minutes(self, minutes: int) -> NaiveDateTime:
        return NaiveDateTime._from_nanos(self._to_nanos() + minutes * NANOS_PER_MINUTE)

    # Arithmetic

    def add(self, duration: Duration) -> NaiveDateTime:
        """Return this date-time moved forward by duration.

        Overflowing times of day carry into the date.

        Examples:
            >>> from civiltime.core.duration import Duration
            >>> NaiveDateTime.of(2023, 12, 31, 23, 30).add(Duration(hours=1))
            NaiveDateTime(Date(2024, 1, 1), Time(0, 30, 0, 0))
        """
        return NaiveDateTime._from_nanos(self._to_nanos() + duration.as_nanoseconds())

    def subtract(self, duration: Duration) -> NaiveDateTime:
        """Return this date-time moved back by duration."""
        return NaiveDateTime._from_nanos(self._to_nanos() - duration.as_nanoseconds())

    def difference(self, other: NaiveDateTime) -> Duration:
        """Return the signed duration from other to this date-time."""
        from civiltime.core.duration import Duration

        return Duration(nanoseconds=self._to_nanos() - other._to_nanos())

    def add_months(self, months: int) -> NaiveDateTime:
        """Add calendar months, clamping the day to the target month."""
        return NaiveDateTime(self._date.add_months(months), self._time)

    def subtract_months(self, months: int) -> NaiveDateTime:
        """Subtract calendar months, clamping the day to the target month."""
        return NaiveDateTime(self._date.subtract_months(months), self._time)

    def add_years(self, years: int) -> NaiveDateTime:
        """Add calendar years; February 29 becomes February 28 if needed."""
        return NaiveDateTime(self._date.add_years(years), self._time)

    def subtract_years(self, years: int) -> NaiveDateTime:
        """Subtract calendar years; February 29 becomes February 28 if needed."""
        return NaiveDateTime(self._date.subtract_years(years), self._time)

    def compare(self, other: NaiveDateTime) -> int:
        """Compare two date-times lexicographically by date then time.

        Returns:
            -1 if this date-time is earlier, 0 if equal, 1 if later.
        """
        result = self._date.compare(other._date)
        if result != 0:
            return result
        return self._time.compare(other._time)

    # Precision

    def to_second_precision(self) -> NaiveDateTime:
        return NaiveDateTime(self._date, self._time.to_second_precision())

    def to_milli_precision(self) -> NaiveDateTime:
        return NaiveDateTime(self._date, self._time.to_milli_precision())

    def to_micro_precision(self) -> NaiveDateTime:
        return NaiveDateTime(self._date, self._time.to_micro_precision())

    def to_nano_precision(self) -> NaiveDateTime:
        return NaiveDateTime(self._date, self._time.to_nano_precision())

    # Formatting

    def to_string(self) -> str:
        """Return the date-time as YYYY-MM-DDThh:mm:ss[.fraction]."""
        return f"{self._date.to_string()}T{self._time.to_string()}"

    def format(self, pattern: str) -> str:
        """Render through a format pattern.

        Raises:
            InvalidFormatError: If the pattern uses an offset token.

        Examples:
            >>> NaiveDateTime.of(2024, 6, 3, 9, 2, 1).format("dddd D MMMM, HH:mm")
            'Monday 3 June, 09:02'
        """
        from civiltime.format.pattern import format_pattern

        return format_pattern(
            pattern, self._date, self._time, None, Component.NAIVE_DATETIME
        )

    # Operators

    def __add__(self, other: object) -> NaiveDateTime:
        from civiltime.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> NaiveDateTime | Duration:
        from civiltime.core.duration import Duration

        if isinstance(other, Duration):
            return self.subtract(other)
        if isinstance(other, NaiveDateTime):
            return self.difference(other)
        return NotImplemented

    def _key(self) -> tuple[int, int]:
        return (self._date.to_unix_days(), self._time.to_nanoseconds())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"NaiveDateTime({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["NaiveDateTime", "split_date_time"]
