"""Pattern-based formatting and parsing.

This module renders date-times through a small token language and parses
text back through the same tokens. Patterns are scanned left to right by
a single regular expression; the longest token wins at each position.

Supported Tokens:
    [text] - Literal text, brackets removed
    YYYY   - Year, at least 4 digits (-0044 for negative years)
    YY     - Last two digits of the year
    MMMM   - Long month name (June)
    MMM    - Short month name (Jun)
    MM     - 2-digit month (01-12)
    M      - Month (1-12)
    DD     - 2-digit day (01-31)
    D      - Day (1-31)
    dddd   - Long weekday name (Monday)
    ddd    - Short weekday name (Mon)
    dd     - Two-letter weekday name (Mo)
    d      - ISO weekday number (1-7, Monday is 1)
    HH, H  - 24-hour hour, 2-digit or plain
    hh, h  - 12-hour hour, 2-digit or plain
    mm, m  - Minute, 2-digit or plain
    ss, s  - Second, 2-digit or plain
    SSS    - Milliseconds (3 digits)
    SSSS   - Microseconds (6 digits)
    SSSSS  - Nanoseconds (9 digits)
    Z      - Offset as +HH:MM
    ZZ     - Offset as +HHMM
    z      - Offset as Z, +HH or +HH:MM
    A, a   - AM/PM, am/pm

Any other character is copied through unchanged.

Examples:
    >>> from civiltime import DateTime
    >>> dt = DateTime.literal("2024-06-03T13:02:01-04:00")
    >>> dt.format("YYYY-MM-DD h:mm a")
    '2024-06-03 1:02 pm'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from civiltime._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
)
from civiltime.errors import Component, InvalidFormatError, OutOfBoundsError
from civiltime.units.month import Month
from civiltime.units.weekday import Weekday

if TYPE_CHECKING:
    from civiltime.core.date import Date
    from civiltime.core.time import Time
    from civiltime.units.offset import Offset

_TOKEN_PATTERN = re.compile(
    r"\[([^\]]*)\]|YYYY|YY|MMMM|MMM|MM|M|DD|D|dddd|ddd|dd|d|HH|H|hh|h"
    r"|mm|m|ss|s|SSSSS|SSSS|SSS|ZZ|Z|z|A|a|.",
    re.DOTALL,
)

_OFFSET_TOKENS = frozenset({"Z", "ZZ", "z"})

_MONTH_LONG = "|".join(m.to_long_string() for m in Month)
_MONTH_SHORT = "|".join(m.to_short_string() for m in Month)
_WEEKDAY_LONG = "|".join(w.to_long_string() for w in Weekday)
_WEEKDAY_SHORT = "|".join(w.to_short_string() for w in Weekday)
_WEEKDAY_MIN = "|".join(w.to_min_string() for w in Weekday)

# One capturing group per token; names are matched case-insensitively.
_PARSE_PATTERNS: dict[str, str] = {
    "YYYY": r"(-?\d{4,})",
    "YY": r"(\d{2})",
    "MMMM": rf"((?i:{_MONTH_LONG}))",
    "MMM": rf"((?i:{_MONTH_SHORT}))",
    "MM": r"(\d{2})",
    "M": r"(\d{1,2})",
    "DD": r"(\d{2})",
    "D": r"(\d{1,2})",
    "dddd": rf"((?i:{_WEEKDAY_LONG}))",
    "ddd": rf"((?i:{_WEEKDAY_SHORT}))",
    "dd": rf"((?i:{_WEEKDAY_MIN}))",
    "d": r"([1-7])",
    "HH": r"(\d{2})",
    "H": r"(\d{1,2})",
    "hh": r"(\d{2})",
    "h": r"(\d{1,2})",
    "mm": r"(\d{2})",
    "m": r"(\d{1,2})",
    "ss": r"(\d{2})",
    "s": r"(\d{1,2})",
    "SSS": r"(\d{3})",
    "SSSS": r"(\d{6})",
    "SSSSS": r"(\d{9})",
    "ZZ": r"([+-]\d{4})",
    "Z": r"([+-]\d{2}:\d{2})",
    "z": r"([Zz]|[+-]\d{2}(?::\d{2})?)",
    "A": r"(AM|PM)",
    "a": r"(am|pm)",
}


def tokenize(pattern: str) -> list[tuple[str, str | None]]:
    """Split a pattern into (token, literal) pairs.

    A bracketed literal yields ("[", text). A recognized directive yields
    (directive, None). Any other character yields (character, character).

    Examples:
        >>> tokenize("YYYY[y]")
        [('YYYY', None), ('[', 'y')]
    """
    tokens: list[tuple[str, str | None]] = []
    for match in _TOKEN_PATTERN.finditer(pattern):
        token = match.group(0)
        if match.group(1) is not None:
            tokens.append(("[", match.group(1)))
        elif token in _PARSE_PATTERNS:
            tokens.append((token, None))
        else:
            tokens.append((token, token))
    return tokens


def format_pattern(
    pattern: str,
    date: Date,
    time: Time,
    offset: Offset | None,
    component: Component,
) -> str:
    """Render a date, time and optional offset through a pattern.

    Args:
        pattern: The token pattern.
        date: The calendar date to render.
        time: The time of day to render.
        offset: The UTC offset, or None for naive values.
        component: Component reported when the pattern is rejected.

    Raises:
        InvalidFormatError: If the pattern uses an offset token and no
            offset is available.
    """
    parts = []
    for token, literal in tokenize(pattern):
        if literal is not None:
            parts.append(literal)
        else:
            parts.append(_format_token(token, date, time, offset, component))
    return "".join(parts)


def _format_token(
    token: str,
    date: Date,
    time: Time,
    offset: Offset | None,
    component: Component,
) -> str:
    """Format a single directive."""
    if token in _OFFSET_TOKENS:
        if offset is None:
            raise InvalidFormatError(
                f"format token {token!r} requires an offset", component
            )
        if token == "Z":
            return offset.to_string()
        if token == "ZZ":
            return offset.to_compact_string()
        return offset.to_short_string()

    year = date.year
    hour = time.hour
    twelve_hour = hour - 12 if hour > 12 else hour

    if token == "YYYY":
        return f"{year:04d}" if year >= 0 else f"{year:05d}"
    if token == "YY":
        return f"{abs(year) % 100:02d}"
    if token == "MMMM":
        return date.month.to_long_string()
    if token == "MMM":
        return date.month.to_short_string()
    if token == "MM":
        return f"{date.month_number:02d}"
    if token == "M":
        return str(date.month_number)
    if token == "DD":
        return f"{date.day:02d}"
    if token == "D":
        return str(date.day)
    if token == "dddd":
        return date.day_of_week.to_long_string()
    if token == "ddd":
        return date.day_of_week.to_short_string()
    if token == "dd":
        return date.day_of_week.to_min_string()
    if token == "d":
        return str(date.day_of_week_number)
    if token == "HH":
        return f"{hour:02d}"
    if token == "H":
        return str(hour)
    if token == "hh":
        return f"{twelve_hour:02d}"
    if token == "h":
        return str(twelve_hour)
    if token == "mm":
        return f"{time.minute:02d}"
    if token == "m":
        return str(time.minute)
    if token == "ss":
        return f"{time.second:02d}"
    if token == "s":
        return str(time.second)
    if token == "SSS":
        return f"{time.millisecond:03d}"
    if token == "SSSS":
        return f"{time.microsecond:06d}"
    if token == "SSSSS":
        return f"{time.nanosecond:09d}"
    if token == "A":
        return "PM" if hour >= 12 else "AM"
    # token == "a"
    return "pm" if hour >= 12 else "am"


@dataclass(frozen=True)
class ParsedFields:
    """Fields recovered from text by parse_pattern.

    Fields the pattern did not mention are None, except the time fields,
    which default to zero.
    """

    year: int | None
    month: int | None
    day: int | None
    hour: int
    minute: int
    second: int
    nanosecond: int
    offset: Offset | None


def parse_pattern(text: str, pattern: str, component: Component) -> ParsedFields:
    """Parse text laid out according to a pattern.

    Weekday tokens are matched but their value is not checked against the
    date. A field given by more than one token must agree everywhere.

    Raises:
        InvalidFormatError: If the text does not match the pattern or a
            field is given inconsistent values.
        OutOfBoundsError: If the pattern uses an offset token and the
            offset is out of range.

    Examples:
        >>> from civiltime.errors import Component
        >>> fields = parse_pattern("03/06/2024", "DD/MM/YYYY", Component.DATE)
        >>> (fields.year, fields.month, fields.day)
        (2024, 6, 3)
    """
    from civiltime.units.offset import Offset

    tokens = tokenize(pattern)
    regex_parts = []
    directives = []
    for token, literal in tokens:
        if literal is not None:
            regex_parts.append(re.escape(literal))
        else:
            regex_parts.append(_PARSE_PATTERNS[token])
            directives.append(token)

    match = re.fullmatch("".join(regex_parts), text, re.ASCII)
    if not match:
        raise InvalidFormatError(
            f"{text!r} does not match pattern {pattern!r}", component
        )

    values: dict[str, Any] = {}

    def assign(field: str, value: int | str | Offset) -> None:
        if field in values and values[field] != value:
            raise InvalidFormatError(
                f"conflicting values for {field} in {text!r}", component
            )
        values[field] = value

    for token, raw in zip(directives, match.groups()):
        if token == "YYYY":
            assign("year", int(raw))
        elif token == "YY":
            assign("year", 2000 + int(raw))
        elif token in ("MMMM", "MMM"):
            assign("month", Month.from_string(raw).ordinal)
        elif token in ("MM", "M"):
            assign("month", int(raw))
        elif token in ("DD", "D"):
            assign("day", int(raw))
        elif token in ("HH", "H"):
            assign("hour", int(raw))
        elif token in ("hh", "h"):
            assign("hour12", int(raw))
        elif token in ("mm", "m"):
            assign("minute", int(raw))
        elif token in ("ss", "s"):
            assign("second", int(raw))
        elif token == "SSS":
            assign("nanosecond", int(raw) * NANOS_PER_MILLISECOND)
        elif token == "SSSS":
            assign("nanosecond", int(raw) * NANOS_PER_MICROSECOND)
        elif token == "SSSSS":
            assign("nanosecond", int(raw))
        elif token in _OFFSET_TOKENS:
            assign("offset", Offset.from_string(raw))
        elif token in ("A", "a"):
            assign("meridiem", raw.lower())
        # weekday tokens carry no field

    meridiem = values.get("meridiem")
    hour12 = values.get("hour12")
    if hour12 is not None:
        if hour12 > 12:
            raise OutOfBoundsError(
                f"12-hour clock hour must be between 0 and 12, got {hour12}",
                component,
            )
        if meridiem == "pm" and hour12 < 12:
            hour12 += 12
        elif meridiem == "am" and hour12 == 12:
            hour12 = 0
        assign("hour", hour12)
    elif meridiem is not None and "hour" in values:
        # a 24-hour reading must fall in the half of the day it names
        assign("meridiem", "pm" if values["hour"] >= 12 else "am")

    return ParsedFields(
        year=values.get("year"),
        month=values.get("month"),
        day=values.get("day"),
        hour=values.get("hour", 0),
        minute=values.get("minute", 0),
        second=values.get("second", 0),
        nanosecond=values.get("nanosecond", 0),
        offset=values.get("offset"),
    )


__all__ = ["ParsedFields", "tokenize", "format_pattern", "parse_pattern"]
