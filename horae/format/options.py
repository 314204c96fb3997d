"""Field selections for absolute date/time formatting.

FormatOptions names which calendar fields a formatter renders and at what
width, using the Intl vocabulary ("numeric", "2-digit", "long", "short",
"narrow").
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, Optional

from horae.errors import ValidationError

NUMERIC_WIDTHS = ("numeric", "2-digit")
TEXT_WIDTHS = ("long", "short", "narrow")

_ALLOWED: dict[str, tuple[str, ...]] = {
    "weekday": TEXT_WIDTHS,
    "year": NUMERIC_WIDTHS,
    "month": NUMERIC_WIDTHS + TEXT_WIDTHS,
    "day": NUMERIC_WIDTHS,
    "hour": NUMERIC_WIDTHS,
    "minute": NUMERIC_WIDTHS,
    "second": NUMERIC_WIDTHS,
    "time_zone_name": ("short", "long"),
}

DATE_FIELDS = ("weekday", "year", "month", "day")
TIME_FIELDS = ("hour", "minute", "second", "fractional_second_digits", "time_zone_name")


@dataclass(frozen=True)
class FormatOptions:
    """Which fields to render, and how.

    Attributes:
        weekday: "long" (jueves), "short" (jue) or "narrow" (J).
        year: "numeric" (2025) or "2-digit" (25).
        month: "numeric", "2-digit", "long", "short" or "narrow".
        day: "numeric" or "2-digit".
        hour: "numeric" or "2-digit".
        minute: "numeric" or "2-digit".
        second: "numeric" or "2-digit".
        fractional_second_digits: 1-3 digits of the second's fraction.
        time_zone_name: "short" for the abbreviation (CET), "long" for the
            full localized name.
        hour12: Force a 12-hour (True) or 24-hour (False) clock. None uses
            the locale's convention.

    Raises:
        ValidationError: If a field is given a value outside its vocabulary.

    Examples:
        >>> FormatOptions(day="numeric", month="short").cache_key()
        '{"month":"short","day":"numeric"}'
    """

    weekday: Optional[str] = None
    year: Optional[str] = None
    month: Optional[str] = None
    day: Optional[str] = None
    hour: Optional[str] = None
    minute: Optional[str] = None
    second: Optional[str] = None
    fractional_second_digits: Optional[int] = None
    time_zone_name: Optional[str] = None
    hour12: Optional[bool] = None

    def __post_init__(self) -> None:
        for name, allowed in _ALLOWED.items():
            value = getattr(self, name)
            if value is not None and value not in allowed:
                raise ValidationError(
                    f"{name} must be one of {', '.join(allowed)}; got {value!r}"
                )
        digits = self.fractional_second_digits
        if digits is not None and (
            isinstance(digits, bool) or not isinstance(digits, int) or not 1 <= digits <= 3
        ):
            raise ValidationError(
                f"fractional_second_digits must be 1-3, got {digits!r}"
            )
        if self.hour12 is not None and not isinstance(self.hour12, bool):
            raise ValidationError(f"hour12 must be a bool, got {self.hour12!r}")

    @classmethod
    def from_fields(cls, **fields: Any) -> FormatOptions:
        """Build options from keyword fields.

        Raises:
            ValidationError: If a keyword names no field.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(fields) - known)
        if unknown:
            raise ValidationError(f"unknown format option(s): {', '.join(unknown)}")
        return cls(**fields)

    def as_dict(self) -> dict[str, Any]:
        """Return the selected fields, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }

    def cache_key(self) -> str:
        """Serialize the selected fields for use in a formatter cache key."""
        return json.dumps(self.as_dict(), separators=(",", ":"))

    def merged(self, other: FormatOptions | None = None, **fields: Any) -> FormatOptions:
        """Return options with other's (then fields') selections laid over these."""
        overrides = other.as_dict() if other is not None else {}
        overrides.update({k: v for k, v in fields.items() if v is not None})
        if not overrides:
            return self
        return FormatOptions.from_fields(**{**self.as_dict(), **overrides})

    @property
    def has_date(self) -> bool:
        return any(getattr(self, name) is not None for name in DATE_FIELDS)

    @property
    def has_time(self) -> bool:
        return any(getattr(self, name) is not None for name in TIME_FIELDS)

    def with_defaults(self) -> FormatOptions:
        """Return these options, or a numeric date if nothing is selected."""
        if self.has_date or self.has_time:
            return self
        return dataclasses.replace(self, year="numeric", month="numeric", day="numeric")


__all__ = [
    "FormatOptions",
    "NUMERIC_WIDTHS",
    "TEXT_WIDTHS",
]
