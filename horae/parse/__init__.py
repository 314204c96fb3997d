"""Normalization of date inputs into Instants.

This module turns the loosely-typed values a storefront passes around
(API timestamps, ISO strings, datetimes, epoch milliseconds) into
Instants.

Public API:
    to_date: Normalize any date input, returning None when it is not a date.
    parse_date: Like to_date, but wrapped in a ParseResult.
    is_valid_date: True if the input normalizes to an Instant.
    parse_text: Parse a string, raising ParseError on failure.
    ParseResult: Outcome of parse_date.

Supported text formats:
    - "2025-12-04" (ISO date, local midnight)
    - "2025-12" and "2025" (ISO year-month and year)
    - "2025-12-04T14:30", "2025-12-04 14:30:00.250" (local wall time)
    - "2025-12-04T14:30:00Z", "2025-12-04T15:30:00+01:00" (exact instant)
    - "2025/12/04", "12/04/2025 2:30 PM" (slash, month first when ambiguous)
    - "Dec 4, 2025", "Thursday, December 4, 2025 2:30 PM"
    - "4 Dec 2025", "4 dic 2025", "4 de diciembre de 2025, 14:30"
    - "Thu, 04 Dec 2025 14:30:00 GMT" (RFC 2822)

Examples:
    >>> to_date("2025-12-04").to_iso_date()
    '2025-12-04'
    >>> to_date("not a date") is None
    True
    >>> parse_date("2025-02-30").error
    'Invalid date format'
"""

from __future__ import annotations

import datetime as _datetime
import logging
import math
from dataclasses import dataclass
from typing import Union

from horae.core.instant import Instant
from horae.errors import HoraeError, ParseError
from horae.parse._formats import FormatKind
from horae.parse._patterns import detect_format

logger = logging.getLogger(__name__)

# Anything the public API accepts where a date is expected
DateInput = Union[Instant, _datetime.datetime, _datetime.date, str, int, float]

INVALID_DATE_FORMAT = "Invalid date format"


@dataclass(frozen=True)
class ParseResult:
    """Result of parse_date.

    Attributes:
        instant: The parsed Instant, or None when the input is not a date.
        valid: True if instant is not None.
        error: "Invalid date format" when invalid, otherwise None.

    Examples:
        >>> result = parse_date("2025-12-04T14:30:00Z")
        >>> result.valid, result.error
        (True, None)
    """

    instant: Instant | None
    valid: bool
    error: str | None = None


def parse_text(text: str) -> Instant:
    """Parse a date/time string into an Instant.

    Text without a zone designator is read as local wall-clock time;
    date-only text is local midnight.

    Raises:
        ParseError: If no format matches or the matched values do not
            name a real date and time.
    """
    match = detect_format(text)
    if match is None:
        raise ParseError(f"cannot determine format for: {text!r}")

    c = match.components
    try:
        if c["offset_minutes"] is None:
            return Instant.from_local(
                c["year"], c["month"], c["day"],
                c["hour"], c["minute"], c["second"], c["millisecond"],
            )
        return Instant.from_utc(
            c["year"], c["month"], c["day"],
            c["hour"], c["minute"], c["second"], c["millisecond"],
            offset_minutes=c["offset_minutes"],
        )
    except HoraeError as e:
        raise ParseError(f"{text!r} is outside the supported range: {e}") from e


def to_date(value: DateInput | None) -> Instant | None:
    """Normalize a date input into an Instant.

    Args:
        value: An Instant (returned as is), a datetime (naive = local
            time), a date (local midnight), epoch milliseconds as int or
            float (floats truncate toward zero), or text.

    Returns:
        The Instant, or None if the value is not a valid date. Never raises.

    Examples:
        >>> to_date(0).to_iso_string()
        '1970-01-01T00:00:00.000Z'
        >>> to_date(float("nan")) is None
        True
        >>> to_date(True) is None
        True
    """
    if isinstance(value, Instant):
        return value
    try:
        if isinstance(value, _datetime.datetime):
            return Instant.from_datetime(value)
        if isinstance(value, _datetime.date):
            return Instant.from_date(value)
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return Instant.from_epoch_ms(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                return None
            return Instant.from_epoch_ms(int(value))
        if isinstance(value, str):
            return parse_text(value)
    except HoraeError as e:
        logger.debug("not a date: %r (%s)", value, e)
        return None
    return None


def parse_date(value: DateInput | None) -> ParseResult:
    """Normalize a date input, reporting success as a ParseResult.

    Examples:
        >>> parse_date("December 4, 2025").valid
        True
        >>> parse_date(None)
        ParseResult(instant=None, valid=False, error='Invalid date format')
    """
    instant = to_date(value)
    if instant is None:
        return ParseResult(instant=None, valid=False, error=INVALID_DATE_FORMAT)
    return ParseResult(instant=instant, valid=True)


def is_valid_date(value: DateInput | None) -> bool:
    """Return True if value normalizes to an Instant."""
    return to_date(value) is not None


__all__ = [
    "DateInput",
    "FormatKind",
    "ParseResult",
    "INVALID_DATE_FORMAT",
    "parse_text",
    "to_date",
    "parse_date",
    "is_valid_date",
]
