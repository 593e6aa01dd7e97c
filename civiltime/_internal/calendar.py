"""Calendar utilities for civiltime.

This module provides internal functions for calendar calculations:
conversion between (year, month, day) and a count of days since the
unix epoch (1970-01-01), month lengths and weekday numbers.

The day-count conversions work on 400-year eras so that they are exact
for any integer year without lookup tables. The era arithmetic relies on
Python's floor division, which rounds toward negative infinity for
dates before year 0.

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_400_YEARS,
    UNIX_EPOCH_SHIFT_DAYS,
)
from civiltime.units.year import days_in_year, is_leap_year


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def civil_to_days(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01.

    The computation shifts the year to start on March 1 so that the leap
    day falls at the end of the shifted year.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        Days since the unix epoch (negative before 1970).

    Examples:
        >>> civil_to_days(1970, 1, 1)
        0
        >>> civil_to_days(2000, 3, 1)
        11017
        >>> civil_to_days(1969, 12, 31)
        -1
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400  # [0, 399]
    shifted_month = month - 3 if month > 2 else month + 9  # March = 0
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1  # [0, 365]
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )  # [0, 146096]
    return era * DAYS_PER_400_YEARS + day_of_era - UNIX_EPOCH_SHIFT_DAYS


def days_to_civil(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day.

    This is the exact inverse of civil_to_days().

    Args:
        days: Days since the unix epoch.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> days_to_civil(0)
        (1970, 1, 1)
        >>> days_to_civil(11017)
        (2000, 3, 1)
    """
    z = days + UNIX_EPOCH_SHIFT_DAYS
    era = z // DAYS_PER_400_YEARS
    day_of_era = z - era * DAYS_PER_400_YEARS  # [0, 146096]
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365  # [0, 399]
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )  # [0, 365]
    shifted_month = (5 * day_of_year + 2) // 153  # [0, 11]
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return (year, month, day)


def days_to_weekday(days: int) -> int:
    """Convert days since 1970-01-01 to an ISO weekday number.

    Args:
        days: Days since the unix epoch.

    Returns:
        Weekday number (1=Monday, 7=Sunday).
    """
    # 1970-01-01 was a Thursday (ISO 4)
    return (days + 3) % 7 + 1


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal of a date within its year."""
    return civil_to_days(year, month, day) - civil_to_days(year, 1, 1) + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "civil_to_days",
    "days_to_civil",
    "days_to_weekday",
    "day_of_year",
]
