"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates in
the proleptic Gregorian calendar, with exact conversion to and from
unix timestamps for any year.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, overload

from civiltime._internal.calendar import (
    civil_to_days,
    day_of_year,
    days_in_month,
    days_to_civil,
    days_to_weekday,
)
from civiltime._internal.constants import NANOS_PER_DAY, SECONDS_PER_DAY
from civiltime._internal.validation import validate_day, validate_month
from civiltime.errors import CivilTimeError, Component, InvalidFormatError
from civiltime.units.month import Month
from civiltime.units.weekday import Weekday
from civiltime.units.year import is_leap_year

if TYPE_CHECKING:
    from civiltime.clock import Clock
    from civiltime.core.duration import Duration

# Same separator between all three fields: "2024-06-03", "2024/6/3", "2024 06 03"
_SEPARATED_PATTERN = re.compile(
    r"(-?\d{1,4})([-/._ ])(\d{1,2})\2(\d{1,2})", re.ASCII
)
# No separator: "20240603"
_COMPACT_PATTERN = re.compile(
    r"(-?\d{4})(\d{2})(\d{2})", re.ASCII
)


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    A year, month and day triple checked against month lengths. Leap
    rules apply to every year, including those before 1582, and year 0
    is 1 BCE.

    Attributes:
        year: The year (can be zero or negative).
        month: The month as a Month member.
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 6, 3)
        >>> d.month
        <Month.JUNE: 6>
        >>> d.day_of_week
        <Weekday.MONDAY: 1>

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int | Month, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            OutOfBoundsError: If a component is not an integer or the
                month or day is out of range.

        Examples:
            >>> Date(2024, Month.JANUARY, 15)
            Date(2024, 1, 15)

            >>> Date(2024, 2, 30)
            Traceback (most recent call last):
            ...
            civiltime.errors.OutOfBoundsError: day must be between 1 and 29 for 2024-02, got 30
        """
        month_number = month.value if isinstance(month, Month) else month
        validate_month(month_number)
        validate_day(year, month_number, day)

        self._year: int = year
        self._month: int = month_number
        self._day: int = day

    @classmethod
    def _from_days(cls, days: int) -> Date:
        """Create a Date from days since 1970-01-01 without validation."""
        instance = object.__new__(cls)
        instance._year, instance._month, instance._day = days_to_civil(days)
        return instance

    # Construction from text

    @classmethod
    def from_string(cls, s: str) -> Date:
        """Parse a date in year-month-day order.

        Accepted forms:
            - YYYY-MM-DD with "-", "/", ".", "_" or a space as separator
              (1-4 digit year, 1-2 digit month and day)
            - YYYYMMDD with no separator

        Raises:
            InvalidFormatError: If the text is not a date.
            OutOfBoundsError: If the date does not exist.

        Examples:
            >>> Date.from_string("2024-06-03")
            Date(2024, 6, 3)

            >>> Date.from_string("2024/6/3")
            Date(2024, 6, 3)

            >>> Date.from_string("20240603")
            Date(2024, 6, 3)
        """
        match = _SEPARATED_PATTERN.fullmatch(s)
        if match:
            year_str, _, month_str, day_str = match.groups()
        else:
            match = _COMPACT_PATTERN.fullmatch(s)
            if not match:
                raise InvalidFormatError(
                    f"invalid date format: {s!r}. Expected YYYY-MM-DD or YYYYMMDD",
                    Component.DATE,
                )
            year_str, month_str, day_str = match.groups()

        return cls(int(year_str), int(month_str), int(day_str))

    @classmethod
    def literal(cls, s: str) -> Date:
        """Parse a date known to be valid, such as a constant.

        Raises:
            ValueError: If the text is not a valid date.
        """
        try:
            return cls.from_string(s)
        except CivilTimeError as exc:
            raise ValueError(f"invalid date literal {s!r}: {exc}") from exc

    # Construction from unix time

    @classmethod
    def from_unix_days(cls, days: int) -> Date:
        """Create a Date from a count of days since 1970-01-01.

        Examples:
            >>> Date.from_unix_days(0)
            Date(1970, 1, 1)
            >>> Date.from_unix_days(-1)
            Date(1969, 12, 31)
        """
        return cls._from_days(days)

    @classmethod
    def from_unix_utc(cls, seconds: int) -> Date:
        """Return the UTC calendar date containing a unix timestamp.

        Examples:
            >>> Date.from_unix_utc(1_718_629_191)
            Date(2024, 6, 17)
            >>> Date.from_unix_utc(-1)
            Date(1969, 12, 31)
        """
        return cls._from_days(seconds // SECONDS_PER_DAY)

    @classmethod
    def current_utc(cls, clock: Clock | None = None) -> Date:
        """Return the current date in UTC."""
        from civiltime.clock import resolve_clock

        return cls._from_days(resolve_clock(clock).now_utc_nanos() // NANOS_PER_DAY)

    @classmethod
    def current_local(cls, clock: Clock | None = None) -> Date:
        """Return the current date at the host's current UTC offset."""
        from civiltime.clock import resolve_clock

        clock = resolve_clock(clock)
        offset = clock.local_offset()
        local_nanos = clock.now_utc_nanos() + offset.to_duration().as_nanoseconds()
        return cls._from_days(local_nanos // NANOS_PER_DAY)

    # Components

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month component as a Month."""
        return Month(self._month)

    @property
    def month_number(self) -> int:
        """Return the month component as 1-12."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._day

    @property
    def day_of_week(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> Date(2024, 6, 3).day_of_week
            <Weekday.MONDAY: 1>
            >>> Date(2024, 6, 9).day_of_week
            <Weekday.SUNDAY: 7>
        """
        return Weekday(self.day_of_week_number)

    @property
    def day_of_week_number(self) -> int:
        """Return the ISO weekday number (1=Monday, 7=Sunday)."""
        return days_to_weekday(self.to_unix_days())

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
            >>> Date(2023, 12, 31).day_of_year
            365
        """
        return day_of_year(self._year, self._month, self._day)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self._year)

    # Conversion

    def to_unix_days(self) -> int:
        """Return the number of days since 1970-01-01."""
        return civil_to_days(self._year, self._month, self._day)

    def to_unix_utc(self) -> int:
        """Return the unix timestamp of midnight UTC on this date.

        Examples:
            >>> Date(1970, 1, 2).to_unix_utc()
            86400
        """
        return self.to_unix_days() * SECONDS_PER_DAY

    def to_string(self) -> str:
        """Return the date as YYYY-MM-DD.

        Negative years render with a leading minus sign.

        Examples:
            >>> Date(2024, 6, 3).to_string()
            '2024-06-03'
            >>> Date(-44, 3, 15).to_string()
            '-0044-03-15'
        """
        if self._year >= 0:
            return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"
        return f"{self._year:05d}-{self._month:02d}-{self._day:02d}"

    # Calendar arithmetic

    def replace(
        self,
        year: int | None = None,
        month: int | Month | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Raises:
            OutOfBoundsError: If the resulting date is invalid.
        """
        return Date(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Examples:
            >>> Date(2024, 2, 28).add_days(2)
            Date(2024, 3, 1)
        """
        return Date._from_days(self.to_unix_days() + days)

    def subtract_days(self, days: int) -> Date:
        """Return a new Date the given number of days earlier."""
        return self.add_days(-days)

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the day does not exist in the target month, it is clamped to
        the last day of that month.

        Examples:
            >>> Date(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            Date(2024, 2, 29)

            >>> Date(2024, 3, 31).add_months(-13)
            Date(2023, 2, 28)
        """
        total_months = self._year * 12 + (self._month - 1) + months
        new_year, month_index = divmod(total_months, 12)
        new_month = month_index + 1
        new_day = min(self._day, days_in_month(new_year, new_month))
        return Date(new_year, new_month, new_day)

    def subtract_months(self, months: int) -> Date:
        """Return a new Date the given number of months earlier, clamping."""
        return self.add_months(-months)

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        February 29 becomes February 28 in a non-leap target year.

        Examples:
            >>> Date(2024, 2, 29).add_years(1)
            Date(2025, 2, 28)
        """
        return self.add_months(years * 12)

    def subtract_years(self, years: int) -> Date:
        """Return a new Date the given number of years earlier, clamping."""
        return self.add_years(-years)

    def first_of_month(self) -> Date:
        """Return the first day of this date's month."""
        return Date(self._year, self._month, 1)

    def last_of_month(self) -> Date:
        """Return the last day of this date's month."""
        return Date(self._year, self._month, days_in_month(self._year, self._month))

    def days_apart(self, other: Date) -> int:
        """Return the number of days from this date to other.

        Examples:
            >>> Date(2024, 1, 1).days_apart(Date(2024, 3, 1))
            60
        """
        return other.to_unix_days() - self.to_unix_days()

    def compare(self, other: Date) -> int:
        """Compare two dates.

        Returns:
            -1 if this date is earlier, 0 if equal, 1 if later.
        """
        mine = self._key()
        theirs = other._key()
        return (mine > theirs) - (mine < theirs)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    # Operators

    @overload
    def __add__(self, other: Duration) -> Date: ...

    @overload
    def __add__(self, other: object) -> Date: ...

    def __add__(self, other: object) -> Date:
        """Add the whole days of a Duration to this date.

        Examples:
            >>> from civiltime.core.duration import Duration
            >>> Date(2024, 1, 15) + Duration(days=10)
            Date(2024, 1, 25)
        """
        from civiltime.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other.as_days())

    @overload
    def __sub__(self, other: Duration) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> Duration: ...

    @overload
    def __sub__(self, other: object) -> Date | Duration: ...

    def __sub__(self, other: object) -> Date | Duration:
        """Subtract a Duration or Date from this date.

        Examples:
            >>> Date(2024, 1, 25) - Date(2024, 1, 15)
            Duration(nanoseconds=864000000000000)
        """
        from civiltime.core.duration import Duration

        if isinstance(other, Duration):
            return self.add_days(-other.as_days())
        if isinstance(other, Date):
            return Duration(days=other.days_apart(self))
        return NotImplemented  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["Date"]
