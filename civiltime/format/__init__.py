"""Pattern formatting and parsing.

This module provides the token-pattern engine behind DateTime.format,
NaiveDateTime.format and their parse counterparts.

Functions:
    format_pattern: Render a date, time and offset through a pattern.
    parse_pattern: Recover date, time and offset fields from text.
    tokenize: Split a pattern into directives and literal text.

Examples:
    >>> from civiltime import DateTime
    >>> DateTime.literal("2024-06-03T09:02:01Z").format("D MMM YYYY [at] HH:mm z")
    '3 Jun 2024 at 09:02 Z'
"""

from __future__ import annotations

from civiltime.format.pattern import (
    ParsedFields,
    format_pattern,
    parse_pattern,
    tokenize,
)

__all__: list[str] = [
    "ParsedFields",
    "format_pattern",
    "parse_pattern",
    "tokenize",
]
