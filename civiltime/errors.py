"""civiltime exception hierarchy.

All civiltime-specific exceptions inherit from CivilTimeError and carry
the Component whose parser or constructor rejected the input.
"""

from __future__ import annotations

from enum import Enum


class Component(Enum):
    """The value type that rejected an input."""

    DATE = "date"
    TIME = "time"
    OFFSET = "offset"
    NAIVE_DATETIME = "naive datetime"
    DATETIME = "datetime"
    MONTH = "month"
    DURATION = "duration"


class CivilTimeError(Exception):
    """Base exception for all civiltime errors.

    Attributes:
        component: The component that failed.
    """

    def __init__(self, message: str, component: Component) -> None:
        super().__init__(message)
        self.component = component


class InvalidFormatError(CivilTimeError):
    """Text does not match any recognized grammar for the component.

    Examples:
        - "2024-Jun-03" as a date
        - "12.30.00" as a time
        - "+5" as an offset
    """

    pass


class OutOfBoundsError(CivilTimeError):
    """A value matched the grammar but violates the component's invariant.

    Examples:
        - February 30
        - Hour 24 or second 60
        - An offset beyond +14:00
    """

    pass


__all__ = [
    "Component",
    "CivilTimeError",
    "InvalidFormatError",
    "OutOfBoundsError",
]
