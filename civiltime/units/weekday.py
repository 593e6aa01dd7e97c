"""Weekday enumeration.

Weekday values follow the ISO 8601 numbering, Monday = 1 through
Sunday = 7.
"""

from __future__ import annotations

from enum import Enum


class Weekday(Enum):
    """A day of the week.

    Examples:
        >>> Weekday.MONDAY.number
        1
        >>> Weekday.SUNDAY.to_short_string()
        'Sun'
        >>> Weekday.WEDNESDAY.to_min_string()
        'We'
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def number(self) -> int:
        """Return the ISO weekday number (1=Monday, 7=Sunday)."""
        return self.value

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self.value >= 6

    def to_min_string(self) -> str:
        """Return the two-letter English abbreviation, e.g. "Mo"."""
        return self.name[:2].capitalize()

    def to_short_string(self) -> str:
        """Return the three-letter English abbreviation, e.g. "Mon"."""
        return self.name[:3].capitalize()

    def to_long_string(self) -> str:
        """Return the full English name, e.g. "Monday"."""
        return self.name.capitalize()


__all__ = ["Weekday"]
