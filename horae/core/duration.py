"""Duration: a calendar-aware amount of time.

A Duration is a bag of independent signed integer fields. It is not
normalized: {months: 1} and {days: 30} are different durations, because
applying them to an instant sets different calendar fields.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping, Union

from horae.errors import ValidationError

#: Field names in the order they are applied to an instant.
DURATION_FIELDS: tuple[str, ...] = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
)


@dataclass(frozen=True)
class Duration:
    """A set of signed calendar and clock offsets.

    Fields are applied in declaration order (years first, milliseconds
    last) so that month-length rollovers resolve the same way every time.

    Attributes:
        years: Years to add to the calendar year.
        months: Months to add to the calendar month.
        weeks: Weeks (7 calendar days each).
        days: Calendar days.
        hours: Wall-clock hours.
        minutes: Wall-clock minutes.
        seconds: Wall-clock seconds.
        milliseconds: Milliseconds.

    Examples:
        >>> Duration(months=1, days=15).items()
        [('months', 1), ('days', 15)]

        >>> -Duration(hours=2)
        Duration(years=0, months=0, weeks=0, days=0, hours=-2, minutes=0, seconds=0, milliseconds=0)
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"{f.name} must be an int, got {type(value).__name__}"
                )

    @classmethod
    def coerce(cls, value: DurationLike | None = None, **kwargs: int) -> Duration:
        """Build a Duration from a Duration, a mapping, or keyword arguments.

        Raises:
            ValidationError: On unknown field names or non-integer values.

        Examples:
            >>> Duration.coerce({"days": 7}) == Duration(days=7)
            True
            >>> Duration.coerce(hours=-2) == Duration(hours=-2)
            True
        """
        if isinstance(value, Duration) and not kwargs:
            return value

        merged: dict[str, int] = {}
        if isinstance(value, Duration):
            merged.update(value.as_dict())
        elif value is not None:
            if not isinstance(value, Mapping):
                raise ValidationError(
                    f"expected Duration or mapping, got {type(value).__name__}"
                )
            merged.update(value)
        merged.update(kwargs)

        unknown = sorted(set(merged) - set(DURATION_FIELDS))
        if unknown:
            raise ValidationError(f"unknown duration fields: {', '.join(unknown)}")
        return cls(**merged)

    def items(self) -> list[tuple[str, int]]:
        """Return the non-zero fields in application order."""
        return [
            (name, getattr(self, name))
            for name in DURATION_FIELDS
            if getattr(self, name)
        ]

    def as_dict(self) -> dict[str, int]:
        """Return all fields as a dictionary."""
        return {name: getattr(self, name) for name in DURATION_FIELDS}

    @property
    def is_zero(self) -> bool:
        """True if every field is zero."""
        return not self.items()

    def __neg__(self) -> Duration:
        return Duration(**{name: -value for name, value in self.as_dict().items()})

    def __bool__(self) -> bool:
        return not self.is_zero


DurationLike = Union[Duration, Mapping[str, int]]


__all__ = [
    "DURATION_FIELDS",
    "Duration",
    "DurationLike",
]
