"""Relative-time units and rendering modes."""

from __future__ import annotations

from enum import Enum


class RelativeTimeUnit(Enum):
    """Units a relative-time phrase can be expressed in."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


class RelativeTimeStyle(Enum):
    """Length of the rendered unit name.

    LONG: "3 hours ago", SHORT: "3 hr. ago", NARROW: "3h ago".
    """

    LONG = "long"
    SHORT = "short"
    NARROW = "narrow"


class NumericMode(Enum):
    """Whether relative phrases always use a number.

    ALWAYS: "1 day ago"; AUTO: "yesterday" where the locale has a phrase.
    """

    ALWAYS = "always"
    AUTO = "auto"


__all__ = [
    "RelativeTimeUnit",
    "RelativeTimeStyle",
    "NumericMode",
]
