"""Tests for Duration class.

These tests verify the Duration implementation, including construction,
unit conversion, arithmetic, and comparison operations.
"""

from __future__ import annotations

import pytest


class TestDurationConstruction:
    """Tests for Duration construction."""

    def test_default_construction_is_zero(self) -> None:
        """Default Duration() creates a zero duration."""
        from civiltime.core import Duration

        d = Duration()
        assert d.is_zero
        assert d == Duration.zero()
        assert not d

    def test_arguments_are_additive(self) -> None:
        """All keyword arguments add up."""
        from civiltime.core import Duration

        d = Duration(days=1, hours=1, minutes=1, seconds=1, milliseconds=1, microseconds=1, nanoseconds=1)
        assert d.as_nanoseconds() == 90_061_001_001_001

    def test_mixed_signs(self) -> None:
        """Negative components subtract."""
        from civiltime.core import Duration

        assert Duration(hours=1, minutes=-30) == Duration(minutes=30)

    def test_named_constructors(self) -> None:
        """from_* constructors agree with keyword construction."""
        from civiltime.core import Duration

        assert Duration.from_weeks(1) == Duration(days=7)
        assert Duration.from_days(2) == Duration(hours=48)
        assert Duration.from_hours(1) == Duration(minutes=60)
        assert Duration.from_minutes(1) == Duration(seconds=60)
        assert Duration.from_seconds(1) == Duration(milliseconds=1000)
        assert Duration.from_milliseconds(1) == Duration(microseconds=1000)
        assert Duration.from_microseconds(1) == Duration(nanoseconds=1000)
        assert Duration.from_nanoseconds(7).as_nanoseconds() == 7

    def test_of_unit(self) -> None:
        """of() multiplies by the unit length."""
        from civiltime.core import Duration
        from civiltime.units.timeunit import TimeUnit

        assert Duration.of(3, TimeUnit.WEEK).as_days() == 21
        assert Duration.of(-2, TimeUnit.MILLISECOND).as_microseconds() == -2000

    def test_arbitrary_magnitude(self) -> None:
        """Durations are not bounded."""
        from civiltime.core import Duration

        d = Duration(days=10**12)
        assert d.as_days() == 10**12


class TestDurationConversion:
    """Tests for unit conversions."""

    def test_truncates_toward_zero(self) -> None:
        """Partial units are dropped toward zero for both signs."""
        from civiltime.core import Duration

        assert Duration(hours=36).as_days() == 1
        assert Duration(hours=-36).as_days() == -1
        assert Duration(seconds=-90).as_minutes() == -1
        assert Duration(nanoseconds=-1).as_seconds() == 0

    def test_all_units(self) -> None:
        """Each as_* method reports whole units."""
        from civiltime.core import Duration

        d = Duration(days=15)
        assert d.as_weeks() == 2
        assert d.as_days() == 15
        assert d.as_hours() == 360
        assert d.as_minutes() == 21_600
        assert d.as_seconds() == 1_296_000
        assert d.as_milliseconds() == 1_296_000_000
        assert d.as_microseconds() == 1_296_000_000_000

    def test_as_seconds_fractional(self) -> None:
        """Fractional seconds as a float."""
        from civiltime.core import Duration

        assert Duration(milliseconds=1500).as_seconds_fractional() == 1.5


class TestDurationArithmetic:
    """Tests for Duration arithmetic."""

    def test_add_and_subtract(self) -> None:
        """Addition and subtraction of durations."""
        from civiltime.core import Duration

        a = Duration(seconds=30)
        b = Duration(seconds=45)
        assert (a + b).as_seconds() == 75
        assert (a - b).as_seconds() == -15
        assert a.increase(b) == a + b
        assert a.decrease(b) == a - b

    def test_sum(self) -> None:
        """sum() works through __radd__."""
        from civiltime.core import Duration

        total = sum([Duration(minutes=1), Duration(minutes=2)])
        assert total == Duration(minutes=3)

    def test_multiply_and_divide(self) -> None:
        """Scalar multiplication and floor division."""
        from civiltime.core import Duration

        assert Duration(seconds=30) * 3 == Duration(seconds=90)
        assert 3 * Duration(seconds=30) == Duration(seconds=90)
        assert Duration(seconds=90) // 2 == Duration(seconds=45)

    def test_divide_by_zero(self) -> None:
        """Dividing by zero raises ZeroDivisionError."""
        from civiltime.core import Duration

        with pytest.raises(ZeroDivisionError):
            Duration(seconds=1) // 0

    def test_multiply_by_float_unsupported(self) -> None:
        """Only integers scale a duration."""
        from civiltime.core import Duration

        with pytest.raises(TypeError):
            Duration(seconds=1) * 1.5  # type: ignore[operator]

    def test_unary(self) -> None:
        """Negation, plus and abs."""
        from civiltime.core import Duration

        d = Duration(minutes=-5)
        assert -d == Duration(minutes=5)
        assert +d == d
        assert abs(d) == Duration(minutes=5)
        assert d.is_negative
        assert not abs(d).is_negative

    def test_add_foreign_type(self) -> None:
        """Adding a non-duration raises TypeError."""
        from civiltime.core import Duration

        with pytest.raises(TypeError):
            Duration(seconds=1) + 1  # type: ignore[operator]


class TestDurationComparison:
    """Tests for Duration comparisons."""

    def test_ordering(self) -> None:
        """Durations order by length."""
        from civiltime.core import Duration

        assert Duration(seconds=-1) < Duration.zero() < Duration(nanoseconds=1)
        assert Duration(minutes=1) >= Duration(seconds=60)
        assert Duration(minutes=1) <= Duration(seconds=60)

    def test_hash(self) -> None:
        """Equal durations hash alike."""
        from civiltime.core import Duration

        assert hash(Duration(hours=1)) == hash(Duration(minutes=60))


class TestDurationString:
    """Tests for Duration string forms."""

    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({}, "0:00:00"),
            ({"days": 1, "hours": 2, "minutes": 3, "seconds": 4}, "1 day, 2:03:04"),
            ({"days": 1, "hours": 2, "minutes": 3, "seconds": 4, "milliseconds": 500}, "1 day, 2:03:04.5"),
            ({"seconds": -90}, "-0:01:30"),
            ({"days": 3}, "3 days, 0:00:00"),
        ],
    )
    def test_to_string(self, kwargs: dict[str, int], expected: str) -> None:
        """Human-readable forms."""
        from civiltime.core import Duration

        assert Duration(**kwargs).to_string() == expected
        assert str(Duration(**kwargs)) == expected

    def test_repr(self) -> None:
        """repr shows the nanosecond count."""
        from civiltime.core import Duration

        assert repr(Duration(seconds=1)) == "Duration(nanoseconds=1000000000)"
