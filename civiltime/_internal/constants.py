"""Internal constants for civiltime.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000
NANOS_PER_WEEK: int = 7 * NANOS_PER_DAY

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MILLIS_PER_SECOND: int = 1_000
MICROS_PER_SECOND: int = 1_000_000

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days from 0000-03-01 to 1970-01-01 in the proleptic Gregorian calendar
UNIX_EPOCH_SHIFT_DAYS: int = 719_468

# Days in a full 400-year Gregorian cycle
DAYS_PER_400_YEARS: int = 146_097

# UTC offset limits in minutes (-12:00 to +14:00 inclusive)
MIN_OFFSET_MINUTES: int = -12 * 60
MAX_OFFSET_MINUTES: int = 14 * 60


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "NANOS_PER_WEEK",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MILLIS_PER_SECOND",
    "MICROS_PER_SECOND",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_SHIFT_DAYS",
    "DAYS_PER_400_YEARS",
    "MIN_OFFSET_MINUTES",
    "MAX_OFFSET_MINUTES",
]
