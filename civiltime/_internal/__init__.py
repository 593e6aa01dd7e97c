"""Internal utilities for civiltime.

This module contains private implementation details:
    - Constants and magic numbers
    - Calendar day-count algorithms
    - Range validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.validation import (
    validate_day,
    validate_integer,
    validate_month,
    validate_offset_minutes,
    validate_range,
    validate_time,
)

__all__: list[str] = [
    "validate_day",
    "validate_integer",
    "validate_month",
    "validate_offset_minutes",
    "validate_range",
    "validate_time",
]
