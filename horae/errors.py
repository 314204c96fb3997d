"""Horae exception hierarchy.

All Horae-specific exceptions inherit from HoraeError.

Public functions that accept a date input never let these escape for
bad input: they degrade to an absent value instead. The exceptions are
raised by the lower-level constructors and by caller errors such as an
unknown option value.
"""

from __future__ import annotations


class HoraeError(Exception):
    """Base exception for all Horae errors."""

    pass


class ValidationError(HoraeError):
    """Invalid input values.

    Raised when a temporal value or an option is out of range or invalid.

    Examples:
        - Month value outside 1-12 in a parsed string
        - Unknown granularity or format preset name
        - A Duration field that is not an integer
    """

    pass


class RangeError(ValidationError):
    """Instant outside the supported range.

    Raised when a calculation produces an instant that cannot be
    represented in the host's local calendar (years 1-9999).
    """

    pass


class ParseError(HoraeError):
    """Failed to parse string representation.

    Raised when a string cannot be parsed as an instant.

    Examples:
        - Unrecognized date format
        - Unknown month name
        - Malformed UTC offset
    """

    pass


__all__ = [
    "HoraeError",
    "ValidationError",
    "RangeError",
    "ParseError",
]
