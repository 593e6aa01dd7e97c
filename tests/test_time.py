"""Tests for the Time class."""

from __future__ import annotations

import pytest

from civiltime.core.duration import Duration
from civiltime.core.time import Time
from civiltime.errors import Component, InvalidFormatError, OutOfBoundsError


class TestTimeConstruction:
    """Tests for Time construction and validation."""

    def test_components(self) -> None:
        """Components read back, with sub-second views."""
        t = Time(14, 30, 45, 123_456_789)
        assert (t.hour, t.minute, t.second) == (14, 30, 45)
        assert t.millisecond == 123
        assert t.microsecond == 123_456
        assert t.nanosecond == 123_456_789

    def test_defaults(self) -> None:
        """All arguments default to zero."""
        assert Time() == Time.midnight()
        assert Time(12) == Time.noon()

    @pytest.mark.parametrize(
        "args",
        [(24, 0, 0), (-1, 0, 0), (0, 60, 0), (0, 0, 60), (0, 0, 0, 1_000_000_000), (0, 0, 0, -1)],
    )
    def test_out_of_range(self, args: tuple[int, ...]) -> None:
        """Hour 24, second 60 and out-of-range fractions are rejected."""
        with pytest.raises(OutOfBoundsError) as exc_info:
            Time(*args)
        assert exc_info.value.component is Component.TIME

    @pytest.mark.parametrize("args", [(1.5,), (12, 30.0), (12, 0, True), (0, 0, 0, 0.5)])
    def test_non_integer_components(self, args: tuple[object, ...]) -> None:
        """Floats and bools are rejected at construction."""
        with pytest.raises(OutOfBoundsError, match="must be an integer") as exc_info:
            Time(*args)  # type: ignore[arg-type]
        assert exc_info.value.component is Component.TIME

    def test_midnight_is_truthy(self) -> None:
        """Midnight is a value, not a false one."""
        assert bool(Time.midnight())


class TestTimeParsing:
    """Tests for Time.from_string."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("14:30:45", Time(14, 30, 45)),
            ("14:30", Time(14, 30)),
            ("14:30:45.1", Time(14, 30, 45, 100_000_000)),
            ("14:30:45.009", Time(14, 30, 45, 9_000_000)),
            ("14:30:45.123456789", Time(14, 30, 45, 123_456_789)),
            ("143045", Time(14, 30, 45)),
            ("143045.5", Time(14, 30, 45, 500_000_000)),
            ("00:00:00", Time.midnight()),
        ],
    )
    def test_valid(self, text: str, expected: Time) -> None:
        """Extended and compact forms; fractions pad to nanoseconds."""
        assert Time.from_string(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "14", "1430", "14:30:45.", "14:30:45.1234567890", "14-30-45", "2:30:00", "14:30:45Z"],
    )
    def test_invalid_format(self, text: str) -> None:
        """Malformed text is a format error tagged TIME."""
        with pytest.raises(InvalidFormatError) as exc_info:
            Time.from_string(text)
        assert exc_info.value.component is Component.TIME

    @pytest.mark.parametrize("text", ["12:00:00\n", "120000\n", "12:00\n", "\uff11\uff12:00:00"])
    def test_trailing_newline_and_non_ascii_digits(self, text: str) -> None:
        """Only the whole text counts, and only ASCII digits are digits."""
        with pytest.raises(InvalidFormatError) as exc_info:
            Time.from_string(text)
        assert exc_info.value.component is Component.TIME

    @pytest.mark.parametrize("text", ["24:00:00", "23:60:00", "23:59:60"])
    def test_out_of_bounds(self, text: str) -> None:
        """Well-formed but impossible times are out of bounds."""
        with pytest.raises(OutOfBoundsError):
            Time.from_string(text)

    def test_literal(self) -> None:
        """literal() converts failures to ValueError."""
        assert Time.literal("09:02:01") == Time(9, 2, 1)
        with pytest.raises(ValueError):
            Time.literal("9:2:1")


class TestTimeUnix:
    """Tests for time-of-day extraction from unix timestamps."""

    def test_from_unix_utc(self) -> None:
        """Seconds map to the UTC time of day."""
        assert Time.from_unix_utc(1_718_629_191) == Time(12, 59, 51)

    def test_negative_instants(self) -> None:
        """Floor modulo keeps pre-epoch times before midnight."""
        assert Time.from_unix_utc(-1) == Time(23, 59, 59)
        assert Time.from_unix_milli_utc(-1) == Time(23, 59, 59, 999_000_000)
        assert Time.from_unix_micro_utc(-1) == Time(23, 59, 59, 999_999_000)
        assert Time.from_unix_nano_utc(-1) == Time(23, 59, 59, 999_999_999)

    def test_to_nanoseconds_and_duration(self) -> None:
        """Time since midnight."""
        t = Time(1, 0, 0, 5)
        assert t.to_nanoseconds() == 3_600_000_000_005
        assert t.to_duration() == Duration(hours=1, nanoseconds=5)


class TestTimePrecision:
    """Tests for precision truncation."""

    def test_truncation_floors(self) -> None:
        """Each tier drops the finer digits."""
        t = Time(12, 0, 0, 123_456_789)
        assert t.to_second_precision() == Time(12, 0, 0)
        assert t.to_milli_precision() == Time(12, 0, 0, 123_000_000)
        assert t.to_micro_precision() == Time(12, 0, 0, 123_456_000)
        assert t.to_nano_precision() == t

    @pytest.mark.parametrize(
        "method",
        ["to_second_precision", "to_milli_precision", "to_micro_precision", "to_nano_precision"],
    )
    def test_idempotent(self, method: str) -> None:
        """Truncating twice equals truncating once."""
        t = Time(23, 59, 59, 999_999_999)
        once = getattr(t, method)()
        assert getattr(once, method)() == once


class TestTimeArithmetic:
    """Tests for Time arithmetic."""

    def test_left_in_day(self) -> None:
        """Time remaining until midnight."""
        assert Time(23, 0, 0).left_in_day() == Time(1, 0, 0)
        assert Time(13, 59, 59, 500_000_000).left_in_day() == Time(10, 0, 0, 500_000_000)
        assert Time.midnight().left_in_day() == Time.midnight()

    def test_add_wraps(self) -> None:
        """Adding past midnight wraps around."""
        assert Time(23, 30).add(Duration(hours=1)) == Time(0, 30)
        assert Time(12).add(Duration(days=3, minutes=1)) == Time(12, 1)

    def test_subtract_wraps(self) -> None:
        """Subtracting before midnight wraps around."""
        assert Time(0, 30).subtract(Duration(hours=1)) == Time(23, 30)
        assert Time(1).subtract(Duration(hours=-1)) == Time(2)

    def test_difference(self) -> None:
        """Signed difference between two times."""
        assert Time(14).difference(Time(12, 30)) == Duration(minutes=90)
        assert Time(12, 30).difference(Time(14)) == Duration(minutes=-90)

    def test_replace(self) -> None:
        """Components can be replaced."""
        assert Time(14, 30).replace(minute=0) == Time(14, 0)
        with pytest.raises(OutOfBoundsError):
            Time(14, 30).replace(hour=24)


class TestTimeComparison:
    """Tests for Time ordering."""

    def test_compare(self) -> None:
        """compare() returns -1, 0 or 1."""
        assert Time(1).compare(Time(2)) == -1
        assert Time(2).compare(Time(1)) == 1
        assert Time(1).compare(Time(1)) == 0

    def test_operators(self) -> None:
        """Rich comparisons are nanosecond order."""
        assert Time(0, 0, 0, 1) > Time.midnight()
        assert Time(23, 59, 59) < Time(23, 59, 59, 1)
        assert hash(Time(1)) == hash(Time.from_string("01:00"))


class TestTimeString:
    """Tests for Time string forms."""

    @pytest.mark.parametrize(
        "nanosecond,expected",
        [
            (0, "09:02:01"),
            (9_000_000, "09:02:01.009"),
            (500_000_000, "09:02:01.500"),
            (14_920_000, "09:02:01.014920"),
            (14_920_202, "09:02:01.014920202"),
            (1, "09:02:01.000000001"),
        ],
    )
    def test_fraction_tiers(self, nanosecond: int, expected: str) -> None:
        """The fraction is padded to 3, 6 or 9 digits."""
        assert Time(9, 2, 1, nanosecond).to_string() == expected

    def test_round_trip(self) -> None:
        """to_string output parses back to the same time."""
        t = Time(23, 4, 0, 9_000_000)
        assert Time.from_string(t.to_string()) == t

    def test_repr(self) -> None:
        """repr is constructor-like."""
        assert repr(Time(14, 30, 45)) == "Time(14, 30, 45, 0)"
