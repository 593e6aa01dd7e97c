"""civiltime: civil calendar dates and times with fixed UTC offsets.

civiltime models wall-clock dates and times in the proleptic Gregorian
calendar with nanosecond precision. Instants carry a fixed UTC offset;
there is no timezone database. Host clock access goes through a Clock
that callers can replace.

Core Types:
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, nanosecond)
    NaiveDateTime: Date and time without an offset
    DateTime: Date and time at a fixed UTC offset
    Duration: Elapsed time with nanosecond precision
    Period: Span between two DateTime values

Units:
    Month, Weekday: Calendar enumerations
    TimeUnit: Fixed-length units (NANOSECOND through WEEK)
    Offset: UTC offset in minutes (-12:00 to +14:00)

Clocks:
    Clock: Protocol for reading the current instant and host offset
    SystemClock: Reads the host
    FixedClock: Always reports the same instant and offset

Exceptions:
    CivilTimeError: Base exception, carries the failing Component
    InvalidFormatError: Text does not match the grammar
    OutOfBoundsError: Value violates a range invariant

Example:
    >>> from civiltime import DateTime, Duration
    >>> dt = DateTime.literal("2024-06-03T09:02:01-04:00")
    >>> (dt + Duration.from_hours(1)).to_string()
    '2024-06-03T10:02:01-04:00'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from civiltime.core.conversion import Imprecise, Precise, UncertainConversion
from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.core.duration import Duration
from civiltime.core.naive_datetime import NaiveDateTime
from civiltime.core.period import Period
from civiltime.core.time import Time

# Units
from civiltime.units.month import Month
from civiltime.units.offset import Offset
from civiltime.units.timeunit import TimeUnit
from civiltime.units.weekday import Weekday
from civiltime.units.year import days_in_year, is_leap_year

# Clocks
from civiltime.clock import Clock, FixedClock, SystemClock

# Exceptions
from civiltime.errors import (
    CivilTimeError,
    Component,
    InvalidFormatError,
    OutOfBoundsError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Duration",
    "NaiveDateTime",
    "Period",
    "Time",
    "Precise",
    "Imprecise",
    "UncertainConversion",
    # Units
    "Month",
    "Offset",
    "TimeUnit",
    "Weekday",
    "days_in_year",
    "is_leap_year",
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    # Exceptions
    "CivilTimeError",
    "Component",
    "InvalidFormatError",
    "OutOfBoundsError",
]
