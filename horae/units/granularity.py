"""Calendar granularities and duration units.

This module provides:
    - Granularity: the resolution at which instants are truncated before
      they are compared (year .. millisecond)
    - DurationUnit: the unit a difference between instants is expressed in
"""

from __future__ import annotations

from enum import Enum

from horae._internal.constants import (
    MS_PER_AVERAGE_MONTH,
    MS_PER_AVERAGE_YEAR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MS_PER_WEEK,
)
from horae.errors import ValidationError


class Granularity(Enum):
    """Calendar unit used to truncate instants before comparison.

    Examples:
        >>> Granularity.parse("day")
        <Granularity.DAY: 'day'>

        >>> Granularity.parse(Granularity.WEEK) is Granularity.WEEK
        True
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @classmethod
    def parse(cls, value: Granularity | str) -> Granularity:
        """Resolve a Granularity from itself or its string value.

        Raises:
            ValidationError: If value names no granularity.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"unknown granularity: {value!r}") from None


class DurationUnit(Enum):
    """Unit for expressing the difference between two instants.

    Note:
        MONTHS and YEARS have no fixed length. Their divisors are the
        average month (30.44 days) and the average Julian year
        (365.25 days), so differences in those units are approximate.

    Examples:
        >>> DurationUnit.HOURS.to_milliseconds()
        3600000

        >>> DurationUnit.parse("day")
        <DurationUnit.DAYS: 'days'>
    """

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"

    def to_milliseconds(self) -> float:
        """Return the length of one unit in milliseconds."""
        return _UNIT_MS[self]

    @classmethod
    def parse(cls, value: DurationUnit | str) -> DurationUnit:
        """Resolve a DurationUnit from itself, its plural or its singular name.

        Raises:
            ValidationError: If value names no unit.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value if value.endswith("s") else value + "s"
            try:
                return cls(name)
            except ValueError:
                pass
        raise ValidationError(f"unknown duration unit: {value!r}")


_UNIT_MS: dict[DurationUnit, float] = {
    DurationUnit.MILLISECONDS: 1,
    DurationUnit.SECONDS: MS_PER_SECOND,
    DurationUnit.MINUTES: MS_PER_MINUTE,
    DurationUnit.HOURS: MS_PER_HOUR,
    DurationUnit.DAYS: MS_PER_DAY,
    DurationUnit.WEEKS: MS_PER_WEEK,
    DurationUnit.MONTHS: MS_PER_AVERAGE_MONTH,
    DurationUnit.YEARS: MS_PER_AVERAGE_YEAR,
}


__all__ = ["Granularity", "DurationUnit"]
