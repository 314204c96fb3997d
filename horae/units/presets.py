"""Named presets for ranges and absolute formatting."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from horae.errors import ValidationError

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], value: E | str, what: str) -> E:
    """Resolve an enum member from itself or its string value.

    Raises:
        ValidationError: If value names no member.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"unknown {what}: {value!r}") from None


class RangePreset(Enum):
    """Named date ranges resolved against the current instant."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "thisWeek"
    LAST_WEEK = "lastWeek"
    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    THIS_YEAR = "thisYear"
    LAST_YEAR = "lastYear"


class Inclusivity(Enum):
    """Which ends of an interval count as inside it.

    A square bracket includes the endpoint, a parenthesis excludes it.
    """

    INCLUSIVE = "[]"
    EXCLUSIVE = "()"
    START_INCLUSIVE = "[)"
    END_INCLUSIVE = "(]"

    @property
    def includes_start(self) -> bool:
        return self.value[0] == "["

    @property
    def includes_end(self) -> bool:
        return self.value[1] == "]"


class DateFormatPreset(Enum):
    """Presets for formatting the date part of an instant."""

    SHORT = "short"  # 04/12/2025
    MEDIUM = "medium"  # 4 dic 2025
    LONG = "long"  # 4 de diciembre de 2025
    FULL = "full"  # jueves, 4 de diciembre de 2025
    ISO = "iso"  # 2025-12-04


class TimeFormatPreset(Enum):
    """Presets for formatting the time part of an instant."""

    SHORT = "short"  # 14:30
    MEDIUM = "medium"  # 14:30:00
    LONG = "long"  # 14:30:00 CET


class DateTimeFormatPreset(Enum):
    """Presets for formatting date and time together."""

    SHORT = "short"  # 04/12/2025, 14:30
    MEDIUM = "medium"  # 4 dic 2025, 14:30
    LONG = "long"  # 4 de diciembre de 2025, 14:30:00
    FULL = "full"  # jueves, 4 de diciembre de 2025, 14:30:00 CET
    ISO = "iso"  # 2025-12-04T13:30:00.000Z


__all__ = [
    "parse_enum",
    "RangePreset",
    "Inclusivity",
    "DateFormatPreset",
    "TimeFormatPreset",
    "DateTimeFormatPreset",
]
