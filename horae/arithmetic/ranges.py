"""Named date ranges resolved against the current instant.

Examples:
    >>> clock = FixedClock(Instant.from_local(2025, 12, 4, 14, 30))
    >>> r = get_range("thisWeek", clock=clock)
    >>> r.start.to_iso_date(), r.end.to_iso_date()
    ('2025-12-01', '2025-12-07')
    >>> get_range("lastMonth", clock=clock).start.to_iso_date()
    '2025-11-01'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from horae._internal.constants import DEFAULT_WEEK_STARTS_ON
from horae.arithmetic.boundaries import saturate, truncate, validate_week_start
from horae.arithmetic.comparisons import is_between
from horae.arithmetic.ops import apply_duration
from horae.core.clock import resolve_clock
from horae.core.duration import Duration
from horae.core.instant import Instant
from horae.errors import RangeError, ValidationError
from horae.units.granularity import Granularity
from horae.units.presets import Inclusivity, RangePreset, parse_enum

if TYPE_CHECKING:
    from horae.core.clock import Clock
    from horae.parse import DateInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateRange:
    """A closed interval of instants.

    Attributes:
        start: First instant in the range.
        end: Last instant in the range.

    Membership (``date in range``) is tested at day granularity with both
    ends included.
    """

    start: Instant
    end: Instant

    def __contains__(self, value: object) -> bool:
        return is_in_range(value, self)  # type: ignore[arg-type]

    def __iter__(self):
        yield self.start
        yield self.end


# Preset -> (granularity of the period, offset from now before resolving)
_PRESETS: dict[RangePreset, tuple[Granularity, Duration]] = {
    RangePreset.TODAY: (Granularity.DAY, Duration()),
    RangePreset.YESTERDAY: (Granularity.DAY, Duration(days=-1)),
    RangePreset.THIS_WEEK: (Granularity.WEEK, Duration()),
    RangePreset.LAST_WEEK: (Granularity.WEEK, Duration(weeks=-1)),
    RangePreset.THIS_MONTH: (Granularity.MONTH, Duration()),
    RangePreset.LAST_MONTH: (Granularity.MONTH, Duration(months=-1)),
    RangePreset.THIS_YEAR: (Granularity.YEAR, Duration()),
    RangePreset.LAST_YEAR: (Granularity.YEAR, Duration(years=-1)),
}


def get_range(
    preset: RangePreset | str,
    *,
    clock: Clock | None = None,
    week_starts_on: int = DEFAULT_WEEK_STARTS_ON,
) -> DateRange | None:
    """Resolve a named range against the current instant.

    The last* presets first step back one unit from now, then take the
    boundaries of the period containing that instant. lastMonth on
    March 31 therefore resolves through March 3 (Feb 31 overflows) and
    yields March, not February.

    Args:
        preset: One of today, yesterday, thisWeek, lastWeek, thisMonth,
            lastMonth, thisYear, lastYear.
        clock: Clock to read now from. Defaults to the process clock.
        week_starts_on: First day of the week for the week presets.

    Returns:
        The DateRange, or None if preset is unknown.

    Raises:
        ValidationError: If week_starts_on is not 0-6.
    """
    validate_week_start(week_starts_on)
    try:
        preset = parse_enum(RangePreset, preset, "range preset")
    except ValidationError as e:
        logger.debug("get_range: %s", e)
        return None

    granularity, offset = _PRESETS[preset]
    now = resolve_clock(clock).now()
    try:
        anchor = apply_duration(now, offset)
        return DateRange(
            start=truncate(anchor, granularity, week_starts_on),
            end=saturate(anchor, granularity, week_starts_on),
        )
    except RangeError as e:
        logger.debug("get_range(%s) is out of range: %s", preset.value, e)
        return None


def is_in_range(
    value: DateInput | None,
    date_range: DateRange,
    granularity: Granularity | str = Granularity.DAY,
) -> bool:
    """Test whether value lies in date_range, both ends included.

    Examples:
        >>> r = DateRange(Instant.from_local(2025, 12, 1), Instant.from_local(2025, 12, 7))
        >>> is_in_range("2025-12-07T22:00", r)
        True
        >>> is_in_range("2025-12-07T22:00", r, "millisecond")
        False
    """
    return is_between(
        value, date_range.start, date_range.end, granularity, Inclusivity.INCLUSIVE
    )


__all__ = [
    "DateRange",
    "get_range",
    "is_in_range",
]
