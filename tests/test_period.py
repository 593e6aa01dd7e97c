"""Tests for the Period class."""

from __future__ import annotations

import pytest

from civiltime.core.datetime import DateTime
from civiltime.core.duration import Duration
from civiltime.core.period import Period


@pytest.fixture
def june() -> Period:
    """2024-06-03T00:00Z through 2024-06-05T06:30Z."""
    return Period(
        DateTime.literal("2024-06-03T00:00:00Z"),
        DateTime.literal("2024-06-05T06:30:00Z"),
    )


class TestPeriod:
    """Tests for Period construction and queries."""

    def test_endpoints_swapped(self) -> None:
        """Reversed endpoints are put in order."""
        a = DateTime.literal("2024-06-03T00:00:00Z")
        b = DateTime.literal("2024-06-01T00:00:00Z")
        period = Period(a, b)
        assert period.start == b
        assert period.end == a
        assert period == Period(b, a)

    def test_duration(self, june: Period) -> None:
        """The duration is never negative."""
        assert june.duration == Duration(days=2, hours=6, minutes=30)
        assert june.as_days() == 2

    def test_ordering_uses_instants(self) -> None:
        """Offsets do not affect which endpoint is first."""
        early = DateTime.literal("2024-06-03T10:00:00+05:00")  # 05:00Z
        late = DateTime.literal("2024-06-03T06:00:00Z")
        period = Period(late, early)
        assert period.start is early
        assert period.duration == Duration(hours=1)

    def test_contains_inclusive(self, june: Period) -> None:
        """Both endpoints are contained."""
        assert june.contains(june.start)
        assert june.contains(june.end)
        assert june.contains(DateTime.literal("2024-06-04T12:00:00+02:00"))
        assert not june.contains(DateTime.literal("2024-06-02T23:59:59Z"))
        assert DateTime.literal("2024-06-04T00:00:00Z") in june
        assert "2024-06-04" not in june

    @pytest.mark.parametrize(
        "end,expected",
        [
            ("2024-06-03T00:00:00Z", "0 seconds"),
            ("2024-06-03T00:00:01Z", "1 second"),
            ("2024-06-04T01:01:01Z", "1 day, 1 hour, 1 minute, 1 second"),
            ("2024-06-05T06:30:00Z", "2 days, 6 hours, 30 minutes"),
            ("2024-06-03T00:00:00.5Z", "0 seconds"),
        ],
    )
    def test_to_string(self, end: str, expected: str) -> None:
        """Length broken down into days, hours, minutes and seconds."""
        period = Period(DateTime.literal("2024-06-03T00:00:00Z"), DateTime.literal(end))
        assert period.to_string() == expected
        assert str(period) == expected

    def test_hash(self, june: Period) -> None:
        """Equal periods hash alike."""
        other = Period(june.end.to_offset(june.end.offset), june.start)
        assert hash(other) == hash(june)
