"""Calendar units and enumerations.

This module provides:
    - Month: The twelve months of the Gregorian calendar
    - Weekday: ISO days of the week (Monday is 1)
    - TimeUnit: Fixed-length time units (NANOSECOND through WEEK)
    - Offset: Fixed UTC offset in minutes
    - is_leap_year, days_in_year: Year rules of the proleptic Gregorian calendar
"""

from __future__ import annotations

from civiltime.units.month import Month
from civiltime.units.offset import Offset
from civiltime.units.timeunit import TimeUnit
from civiltime.units.weekday import Weekday
from civiltime.units.year import days_in_year, is_leap_year

__all__: list[str] = [
    "Month",
    "Offset",
    "TimeUnit",
    "Weekday",
    "days_in_year",
    "is_leap_year",
]
