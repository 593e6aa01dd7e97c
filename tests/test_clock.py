"""Tests for the clock providers."""

from __future__ import annotations

import logging
import time

import pytest

from civiltime.clock import FixedClock, SystemClock, resolve_clock
from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.units.offset import Offset


class TestFixedClock:
    """Tests for the deterministic clock."""

    def test_reports_fixed_values(self, tokyo_clock: FixedClock) -> None:
        """The same instant and offset every time."""
        assert tokyo_clock.now_utc_nanos() == tokyo_clock.now_utc_nanos()
        assert tokyo_clock.local_offset() == Offset(540)

    def test_default_offset_is_utc(self) -> None:
        """The offset defaults to UTC."""
        assert FixedClock(0).local_offset().is_utc


class TestSystemClock:
    """Tests for the host clock."""

    def test_now_is_close_to_host_time(self) -> None:
        """now_utc_nanos tracks time.time_ns."""
        before = time.time_ns()
        now = SystemClock().now_utc_nanos()
        after = time.time_ns()
        assert before <= now <= after

    def test_local_offset_is_an_offset(self) -> None:
        """The host offset is representable."""
        assert isinstance(SystemClock().local_offset(), Offset)

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Host queries are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="civiltime"):
            SystemClock().local_offset()
        assert any(r.name == "civiltime.clock" for r in caplog.records)

    def test_now_utc_uses_system_clock_by_default(self) -> None:
        """Omitting the clock reads the host."""
        before = DateTime.from_unix_nano_utc(time.time_ns())
        now = DateTime.now_utc()
        assert now.is_later_or_equal(before)
        assert now.offset.is_utc

    def test_current_utc_date(self) -> None:
        """current_utc reads the host when no clock is given."""
        today = Date.from_unix_utc(time.time_ns() // 1_000_000_000)
        assert today.days_apart(Date.current_utc()) in (0, 1)


class TestResolveClock:
    """Tests for resolve_clock."""

    def test_none_gives_system_clock(self) -> None:
        """None means a fresh SystemClock."""
        assert isinstance(resolve_clock(None), SystemClock)

    def test_clock_passes_through(self, utc_clock: FixedClock) -> None:
        """A given clock is returned as is."""
        assert resolve_clock(utc_clock) is utc_clock
