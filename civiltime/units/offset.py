"""UTC offset representation.

This module provides the Offset class for fixed UTC offsets. There is
no IANA timezone database support: an offset is only a signed number of
minutes east of UTC.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from civiltime._internal.constants import NANOS_PER_MINUTE
from civiltime._internal.validation import validate_offset_minutes
from civiltime.errors import (
    CivilTimeError,
    Component,
    InvalidFormatError,
    OutOfBoundsError,
)

if TYPE_CHECKING:
    from civiltime.clock import Clock
    from civiltime.core.duration import Duration

_OFFSET_PATTERN = re.compile(r"([+-])(\d{2})(?::?(\d{2}))?", re.ASCII)


class Offset:
    """A fixed offset from UTC in minutes.

    Positive values are east of UTC (ahead in time) and negative values
    are west of UTC (behind in time). Offsets are bounded to the range
    -12:00 to +14:00.

    A zero offset written as "-00:00" keeps its negative sign when
    rendered, following the RFC 3339 convention for an unknown local
    offset. The sign does not take part in equality or arithmetic.

    Examples:
        >>> Offset.from_string("+05:30").minutes
        330

        >>> Offset(-240).to_string()
        '-04:00'

        >>> Offset.utc().is_utc
        True
    """

    __slots__ = ("_minutes", "_negative")

    _utc_instance: ClassVar[Offset | None] = None

    def __init__(self, minutes: int, *, negative_zero: bool = False) -> None:
        """Create an Offset of the given number of minutes.

        Args:
            minutes: Minutes east of UTC.
            negative_zero: Render a zero offset as "-00:00".

        Raises:
            OutOfBoundsError: If minutes is not an integer or is outside
                -720..840.
        """
        validate_offset_minutes(minutes)
        self._minutes: int = minutes
        self._negative: bool = minutes < 0 or (minutes == 0 and negative_zero)

    @classmethod
    def utc(cls) -> Offset:
        """Return the zero offset.

        All calls return the same instance.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Offset:
        """Create an Offset from hours and minutes.

        The sign of hours applies to the minutes as well.

        Examples:
            >>> Offset.from_hours(-3, 30).minutes
            -210
        """
        if minutes < 0 or minutes > 59:
            raise OutOfBoundsError(
                f"offset minutes must be 0-59, got {minutes}", Component.OFFSET
            )
        if hours < 0:
            return cls(hours * 60 - minutes)
        return cls(hours * 60 + minutes)

    @classmethod
    def from_string(cls, s: str) -> Offset:
        """Parse an offset string.

        Supported formats:
            - "Z" or "z": UTC
            - "+HH:MM" or "-HH:MM"
            - "+HHMM" or "-HHMM"
            - "+HH" or "-HH"

        Raises:
            InvalidFormatError: If the string is not an offset.
            OutOfBoundsError: If the offset is outside -12:00..+14:00
                or the minutes exceed 59.

        Examples:
            >>> Offset.from_string("-0500").minutes
            -300
        """
        if s in ("Z", "z"):
            return cls.utc()

        match = _OFFSET_PATTERN.fullmatch(s)
        if not match:
            raise InvalidFormatError(f"invalid UTC offset: {s!r}", Component.OFFSET)

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise OutOfBoundsError(
                f"offset minutes must be 0-59, got {minutes} in {s!r}",
                Component.OFFSET,
            )

        total = hours * 60 + minutes
        if sign_str == "-":
            return cls(-total, negative_zero=True)
        return cls(total)

    @classmethod
    def literal(cls, s: str) -> Offset:
        """Parse an offset known to be valid.

        Raises:
            ValueError: If the string is not a valid offset.
        """
        try:
            return cls.from_string(s)
        except CivilTimeError as exc:
            raise ValueError(f"invalid offset literal {s!r}: {exc}") from exc

    @classmethod
    def local(cls, clock: Clock | None = None) -> Offset:
        """Return the host's current UTC offset.

        The clock is queried on every call; the result is never cached.
        """
        from civiltime.clock import resolve_clock

        return resolve_clock(clock).local_offset()

    @property
    def minutes(self) -> int:
        """Return the offset in minutes east of UTC."""
        return self._minutes

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._minutes == 0

    @property
    def is_negative(self) -> bool:
        """Return True if the offset renders with a minus sign."""
        return self._negative

    def to_duration(self) -> Duration:
        """Return the offset as a signed Duration.

        Examples:
            >>> Offset(-90).to_duration().as_minutes()
            -90
        """
        from civiltime.core.duration import Duration

        return Duration(nanoseconds=self._minutes * NANOS_PER_MINUTE)

    def _parts(self) -> tuple[str, int, int]:
        sign = "-" if self._negative else "+"
        hours, minutes = divmod(abs(self._minutes), 60)
        return sign, hours, minutes

    def to_string(self) -> str:
        """Return the offset as "+HH:MM" or "-HH:MM".

        Zero renders as "+00:00" (or "-00:00" when parsed that way);
        substituting "Z" is left to the caller.
        """
        sign, hours, minutes = self._parts()
        return f"{sign}{hours:02d}:{minutes:02d}"

    def to_compact_string(self) -> str:
        """Return the offset as "+HHMM" or "-HHMM"."""
        sign, hours, minutes = self._parts()
        return f"{sign}{hours:02d}{minutes:02d}"

    def to_short_string(self) -> str:
        """Return the shortest form: "Z", "+HH" or "+HH:MM".

        Examples:
            >>> Offset(0).to_short_string()
            'Z'
            >>> Offset(-240).to_short_string()
            '-04'
            >>> Offset(330).to_short_string()
            '+05:30'
        """
        if self.is_utc:
            return "Z"
        full = self.to_string()
        if full.endswith(":00"):
            return full[:-3]
        return full

    def __eq__(self, other: object) -> bool:
        """Two offsets are equal when their minutes are equal."""
        if not isinstance(other, Offset):
            return NotImplemented
        return self._minutes == other._minutes

    def __hash__(self) -> int:
        return hash(self._minutes)

    def __repr__(self) -> str:
        return f"Offset({self.to_string()})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["Offset"]
