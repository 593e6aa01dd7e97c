"""Results of conversions that depend on host state.

A conversion into the host's local time is only exact when the host's
current offset also applied at the converted instant. Without a timezone
database that cannot be known in general, so such conversions return a
Precise or Imprecise wrapper and let the caller decide.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Precise(Generic[T]):
    """A conversion result known to be exact.

    Examples:
        >>> Precise(3).map(lambda v: v + 1)
        Precise(value=4)
    """

    value: T

    @property
    def is_precise(self) -> bool:
        return True

    def accept_imprecision(self) -> T:
        """Return the wrapped value."""
        return self.value

    def map(self, fn: Callable[[T], U]) -> Precise[U]:
        """Transform the value, keeping the precision tag."""
        return Precise(fn(self.value))


@dataclass(frozen=True)
class Imprecise(Generic[T]):
    """A conversion result that may be off by the host's offset change.

    Examples:
        >>> Imprecise("x").is_precise
        False
    """

    value: T

    @property
    def is_precise(self) -> bool:
        return False

    def accept_imprecision(self) -> T:
        """Return the wrapped value, accepting that it may be inexact."""
        return self.value

    def map(self, fn: Callable[[T], U]) -> Imprecise[U]:
        """Transform the value, keeping the precision tag."""
        return Imprecise(fn(self.value))


UncertainConversion = Union[Precise[T], Imprecise[T]]


__all__ = ["Precise", "Imprecise", "UncertainConversion"]
