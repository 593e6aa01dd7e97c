"""Year rules of the proleptic Gregorian calendar.

Years are plain integers in astronomical numbering: year 0 exists and is
1 BCE, year -1 is 2 BCE, and so on. The Gregorian leap rule is applied to
every year, including those before 1582.
"""

from __future__ import annotations


def is_leap_year(year: int) -> bool:
    """Return True if February of the given year has 29 days.

    Every fourth year is a leap year, except century years that are not
    a multiple of 400.

    Examples:
        >>> [is_leap_year(y) for y in (1900, 2000, 2023, 2024, 0)]
        [False, True, False, True, True]
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 366 for a leap year and 365 otherwise."""
    return 366 if is_leap_year(year) else 365


__all__ = ["is_leap_year", "days_in_year"]
