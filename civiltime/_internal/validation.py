"""Validation utilities for civiltime.

Range checks shared by the value-type constructors and parsers. Every
check raises OutOfBoundsError tagged with the component being built.

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    MAX_OFFSET_MINUTES,
    MIN_OFFSET_MINUTES,
    NANOS_PER_SECOND,
)
from civiltime.errors import Component, OutOfBoundsError


def validate_integer(name: str, value: int, component: Component) -> None:
    """Validate that a component is an int and not a bool.

    Raises:
        OutOfBoundsError: If value is any other type.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfBoundsError(
            f"{name} must be an integer, got {type(value).__name__}",
            component,
        )


def validate_range(
    name: str,
    value: int,
    min_val: int,
    max_val: int,
    component: Component,
) -> None:
    """Validate that an integer lies within [min_val, max_val].

    Raises:
        OutOfBoundsError: If value is outside the range.
    """
    validate_integer(name, value, component)
    if value < min_val or value > max_val:
        raise OutOfBoundsError(
            f"{name} must be between {min_val} and {max_val}, got {value}",
            component,
        )


def validate_month(month: int, component: Component = Component.DATE) -> None:
    """Validate that a month is within 1-12.

    Raises:
        OutOfBoundsError: If month is outside 1-12.
    """
    validate_range("month", month, 1, 12, component)


def validate_day(
    year: int,
    month: int,
    day: int,
    component: Component = Component.DATE,
) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        OutOfBoundsError: If day is invalid for the month.
    """
    validate_integer("year", year, component)
    validate_integer("day", day, component)

    from civiltime._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise OutOfBoundsError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}",
            component,
        )


def validate_time(
    hour: int,
    minute: int,
    second: int,
    nanosecond: int,
    component: Component = Component.TIME,
) -> None:
    """Validate the fields of a time of day.

    Leap seconds are not modeled, so second 60 is rejected.

    Raises:
        OutOfBoundsError: If any field is out of range.
    """
    validate_range("hour", hour, 0, 23, component)
    validate_range("minute", minute, 0, 59, component)
    validate_range("second", second, 0, 59, component)
    validate_range("nanosecond", nanosecond, 0, NANOS_PER_SECOND - 1, component)


def validate_offset_minutes(
    minutes: int,
    component: Component = Component.OFFSET,
) -> None:
    """Validate that a UTC offset lies within -12:00..+14:00.

    Raises:
        OutOfBoundsError: If the offset is outside the supported range.
    """
    validate_integer("offset minutes", minutes, component)
    if minutes < MIN_OFFSET_MINUTES or minutes > MAX_OFFSET_MINUTES:
        raise OutOfBoundsError(
            f"offset must be between -12:00 and +14:00, got {minutes} minutes",
            component,
        )


__all__ = [
    "validate_integer",
    "validate_range",
    "validate_month",
    "validate_day",
    "validate_time",
    "validate_offset_minutes",
]
