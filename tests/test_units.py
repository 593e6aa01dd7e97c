"""Tests for the calendar units: years, months, weekdays and time units."""

from __future__ import annotations

import pytest

from civiltime.errors import Component, InvalidFormatError, OutOfBoundsError
from civiltime.units.month import Month
from civiltime.units.timeunit import TimeUnit
from civiltime.units.weekday import Weekday
from civiltime.units.year import days_in_year, is_leap_year


class TestYear:
    """Tests for leap year rules."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (1900, False),
            (2000, True),
            (2023, False),
            (2024, True),
            (2100, False),
            (2400, True),
            (0, True),
            (-4, True),
            (-100, False),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Century years are leap only when divisible by 400."""
        assert is_leap_year(year) is expected

    def test_days_in_year(self) -> None:
        """Leap years have 366 days."""
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365
        assert days_in_year(1900) == 365


class TestMonth:
    """Tests for the Month enum."""

    def test_exactly_twelve_members(self) -> None:
        """There are twelve months numbered 1-12."""
        assert [m.ordinal for m in Month] == list(range(1, 13))

    def test_from_ordinal(self) -> None:
        """Ordinals map to members."""
        assert Month.from_ordinal(6) is Month.JUNE

    @pytest.mark.parametrize("ordinal", [0, 13, -1])
    def test_from_ordinal_out_of_range(self, ordinal: int) -> None:
        """Ordinals outside 1-12 are rejected."""
        with pytest.raises(OutOfBoundsError) as exc_info:
            Month.from_ordinal(ordinal)
        assert exc_info.value.component is Component.MONTH

    def test_days(self) -> None:
        """February depends on the year."""
        assert Month.FEBRUARY.days(2024) == 29
        assert Month.FEBRUARY.days(2023) == 28
        assert Month.APRIL.days(2023) == 30
        assert Month.DECEMBER.days(2023) == 31

    def test_names(self) -> None:
        """Short and long English names."""
        assert Month.JUNE.to_short_string() == "Jun"
        assert Month.JUNE.to_long_string() == "June"
        assert Month.SEPTEMBER.to_short_string() == "Sep"

    @pytest.mark.parametrize("name", ["jun", "June", "JUNE", " Jun "])
    def test_from_string(self, name: str) -> None:
        """Names parse case-insensitively."""
        assert Month.from_string(name) is Month.JUNE

    def test_from_string_invalid(self) -> None:
        """Unknown names are a format error."""
        with pytest.raises(InvalidFormatError):
            Month.from_string("Juno")

    def test_next_and_previous_wrap(self) -> None:
        """next() and previous() wrap around the year."""
        assert Month.DECEMBER.next() is Month.JANUARY
        assert Month.JANUARY.previous() is Month.DECEMBER
        assert Month.JUNE.next() is Month.JULY


class TestWeekday:
    """Tests for the Weekday enum."""

    def test_iso_numbers(self) -> None:
        """Monday is 1 and Sunday is 7."""
        assert Weekday.MONDAY.number == 1
        assert Weekday.SUNDAY.number == 7

    def test_names(self) -> None:
        """Two-letter, three-letter and long names."""
        assert Weekday.MONDAY.to_min_string() == "Mo"
        assert Weekday.MONDAY.to_short_string() == "Mon"
        assert Weekday.MONDAY.to_long_string() == "Monday"

    def test_is_weekend(self) -> None:
        """Saturday and Sunday are the weekend."""
        assert Weekday.SATURDAY.is_weekend
        assert Weekday.SUNDAY.is_weekend
        assert not Weekday.FRIDAY.is_weekend


class TestTimeUnit:
    """Tests for the TimeUnit enum."""

    def test_to_nanoseconds(self) -> None:
        """Each unit knows its length."""
        assert TimeUnit.NANOSECOND.to_nanoseconds() == 1
        assert TimeUnit.SECOND.to_nanoseconds() == 1_000_000_000
        assert TimeUnit.WEEK.to_nanoseconds() == 7 * 86_400 * 1_000_000_000

    def test_plural(self) -> None:
        """Plural names append an s."""
        assert TimeUnit.HOUR.plural() == "hours"
