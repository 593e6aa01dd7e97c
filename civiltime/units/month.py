"""Month enumeration for the Gregorian calendar.

This module provides the Month enum, whose values are the month
ordinals 1-12, together with English names and month lengths.
"""

from __future__ import annotations

from enum import Enum

from civiltime.errors import Component, InvalidFormatError, OutOfBoundsError


class Month(Enum):
    """A month of the Gregorian calendar.

    Examples:
        >>> Month.JUNE.ordinal
        6
        >>> Month.JUNE.to_short_string()
        'Jun'
        >>> Month.FEBRUARY.days(2024)
        29
        >>> Month.from_ordinal(12)
        <Month.DECEMBER: 12>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Month:
        """Return the month for an ordinal 1-12.

        Raises:
            OutOfBoundsError: If ordinal is outside 1-12.
        """
        if not 1 <= ordinal <= 12:
            raise OutOfBoundsError(
                f"month must be between 1 and 12, got {ordinal}", Component.MONTH
            )
        return cls(ordinal)

    @classmethod
    def from_string(cls, name: str) -> Month:
        """Parse a short ("Jun") or long ("June") English month name.

        Matching is case-insensitive.

        Raises:
            InvalidFormatError: If name is not a month name.

        Examples:
            >>> Month.from_string("sep")
            <Month.SEPTEMBER: 9>
        """
        key = name.strip().lower()
        for month in cls:
            if key in (month.to_short_string().lower(), month.to_long_string().lower()):
                return month
        raise InvalidFormatError(f"invalid month name: {name!r}", Component.MONTH)

    @property
    def ordinal(self) -> int:
        """Return the month number (1-12)."""
        return self.value

    def days(self, year: int) -> int:
        """Return the number of days in this month of the given year."""
        from civiltime._internal.calendar import days_in_month

        return days_in_month(year, self.value)

    def to_short_string(self) -> str:
        """Return the three-letter English abbreviation, e.g. "Jun"."""
        return self.name[:3].capitalize()

    def to_long_string(self) -> str:
        """Return the full English name, e.g. "June"."""
        return self.name.capitalize()

    def next(self) -> Month:
        """Return the following month, wrapping December to January."""
        return Month(self.value % 12 + 1)

    def previous(self) -> Month:
        """Return the preceding month, wrapping January to December."""
        return Month((self.value - 2) % 12 + 1)


__all__ = ["Month"]
