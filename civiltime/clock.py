"""Host clock access.

The library never reads the host clock or timezone implicitly. Every
operation that depends on "now" or on the host's UTC offset takes a
Clock, and falls back to a fresh SystemClock when none is given.

Clock implementations:
    SystemClock: Reads the host wall clock and current UTC offset.
    FixedClock: Returns a fixed instant and offset, for tests.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import time as _time
from dataclasses import dataclass, field
from typing import Protocol

from civiltime._internal.constants import SECONDS_PER_MINUTE
from civiltime.units.offset import Offset

_LOG: logging.Logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Source of the current instant and the host's UTC offset."""

    def now_utc_nanos(self) -> int:
        """Return nanoseconds since 1970-01-01T00:00:00Z."""
        ...

    def local_offset(self) -> Offset:
        """Return the UTC offset currently in effect on the host."""
        ...


class SystemClock:
    """Clock backed by the host operating system.

    SystemClock holds no state; both methods query the host on every
    call, so it is safe to share between threads.
    """

    __slots__ = ()

    def now_utc_nanos(self) -> int:
        nanos = _time.time_ns()
        _LOG.debug("Host clock read: %d ns since epoch", nanos)
        return nanos

    def local_offset(self) -> Offset:
        utc_offset = _datetime.datetime.now().astimezone().utcoffset()
        seconds = int(utc_offset.total_seconds()) if utc_offset is not None else 0
        minutes = seconds // SECONDS_PER_MINUTE
        _LOG.debug("Host UTC offset read: %d minutes", minutes)
        return Offset(minutes)

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock that always reports the same instant and offset.

    Attributes:
        utc_nanos: Nanoseconds since the unix epoch to report as "now".
        offset: The UTC offset to report as the host's local offset.

    Examples:
        >>> clock = FixedClock(0, Offset(120))
        >>> clock.now_utc_nanos()
        0
        >>> clock.local_offset().minutes
        120
    """

    utc_nanos: int
    offset: Offset = field(default_factory=Offset.utc)

    def now_utc_nanos(self) -> int:
        return self.utc_nanos

    def local_offset(self) -> Offset:
        return self.offset


def resolve_clock(clock: Clock | None) -> Clock:
    """Return the given clock, or a SystemClock when clock is None."""
    return clock if clock is not None else SystemClock()


__all__ = ["Clock", "SystemClock", "FixedClock", "resolve_clock"]
