"""Core civil-time types.

This module provides the fundamental value types:
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with nanosecond precision
    - NaiveDateTime: Date and time without a UTC offset
    - DateTime: Date and time at a fixed UTC offset
    - Duration: Elapsed time with nanosecond precision
    - Period: Span between two DateTime values [start, end]
    - Precise, Imprecise: Results of conversions into host local time
"""

from __future__ import annotations

from civiltime.core.conversion import Imprecise, Precise, UncertainConversion
from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.core.duration import Duration
from civiltime.core.naive_datetime import NaiveDateTime
from civiltime.core.period import Period
from civiltime.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Duration",
    "Imprecise",
    "NaiveDateTime",
    "Period",
    "Precise",
    "Time",
    "UncertainConversion",
]
