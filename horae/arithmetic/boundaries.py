"""Start and end of calendar periods.

start_of() truncates an instant to the first millisecond of its year,
month, week, day, hour, minute or second; end_of() saturates it to the
last millisecond. Both read the calendar in the host's local time zone.

Examples:
    >>> start_of("2025-12-04T14:30:00", "month").to_iso_date()
    '2025-12-01'
    >>> end_of("2024-02-10", "month").to_iso_date()
    '2024-02-29'
    >>> start_of("2025-12-04", "week").to_iso_date()  # Monday
    '2025-12-01'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from horae._internal.constants import DEFAULT_WEEK_STARTS_ON
from horae.core.instant import Instant
from horae.errors import RangeError, ValidationError
from horae.parse import to_date
from horae.units.granularity import Granularity

if TYPE_CHECKING:
    from horae.parse import DateInput

logger = logging.getLogger(__name__)


def validate_week_start(week_starts_on: int) -> int:
    """Check week_starts_on is 0-6.

    Raises:
        ValidationError: If it is not.
    """
    if (
        isinstance(week_starts_on, bool)
        or not isinstance(week_starts_on, int)
        or not 0 <= week_starts_on <= 6
    ):
        raise ValidationError(
            f"week_starts_on must be 0-6 (0=Sunday), got {week_starts_on!r}"
        )
    return week_starts_on


def _days_since_week_start(instant: Instant, week_starts_on: int) -> int:
    dow = instant.day_of_week
    return (7 if dow < week_starts_on else 0) + dow - week_starts_on


def truncate(
    instant: Instant,
    granularity: Granularity,
    week_starts_on: int = DEFAULT_WEEK_STARTS_ON,
) -> Instant:
    """Return the first millisecond of the period containing instant.

    Raises:
        RangeError: If the period start falls outside years 1-9999.
    """
    y, m, d = instant.year, instant.month, instant.day

    if granularity is Granularity.YEAR:
        return Instant.from_local(y, 1, 1)
    if granularity is Granularity.MONTH:
        return Instant.from_local(y, m, 1)
    if granularity is Granularity.WEEK:
        back = _days_since_week_start(instant, week_starts_on)
        return Instant.from_local(y, m, d - back)
    if granularity is Granularity.DAY:
        return Instant.from_local(y, m, d)
    if granularity is Granularity.HOUR:
        return Instant.from_local(y, m, d, instant.hour)
    if granularity is Granularity.MINUTE:
        return Instant.from_local(y, m, d, instant.hour, instant.minute)
    if granularity is Granularity.SECOND:
        return Instant.from_local(
            y, m, d, instant.hour, instant.minute, instant.second
        )
    return instant


def saturate(
    instant: Instant,
    granularity: Granularity,
    week_starts_on: int = DEFAULT_WEEK_STARTS_ON,
) -> Instant:
    """Return the last millisecond of the period containing instant.

    Raises:
        RangeError: If the period end falls outside years 1-9999.
    """
    y, m, d = instant.year, instant.month, instant.day

    if granularity is Granularity.YEAR:
        return Instant.from_local(y, 12, 31, 23, 59, 59, 999)
    if granularity is Granularity.MONTH:
        # Day 0 of the next month is the last day of this one
        return Instant.from_local(y, m + 1, 0, 23, 59, 59, 999)
    if granularity is Granularity.WEEK:
        start = truncate(instant, Granularity.WEEK, week_starts_on)
        return Instant.from_local(
            start.year, start.month, start.day + 6, 23, 59, 59, 999
        )
    if granularity is Granularity.DAY:
        return Instant.from_local(y, m, d, 23, 59, 59, 999)
    if granularity is Granularity.HOUR:
        return Instant.from_local(y, m, d, instant.hour, 59, 59, 999)
    if granularity is Granularity.MINUTE:
        return Instant.from_local(y, m, d, instant.hour, instant.minute, 59, 999)
    if granularity is Granularity.SECOND:
        return Instant.from_local(
            y, m, d, instant.hour, instant.minute, instant.second, 999
        )
    return instant


def start_of(
    value: DateInput | None,
    granularity: Granularity | str,
    week_starts_on: int = DEFAULT_WEEK_STARTS_ON,
) -> Instant | None:
    """Return the start of the period containing value.

    Args:
        value: The date to truncate.
        granularity: Period to truncate to ("year" .. "millisecond").
        week_starts_on: First day of the week for "week" (0=Sunday,
            1=Monday).

    Returns:
        The first millisecond of the period, or None if value is not a date.

    Raises:
        ValidationError: If granularity or week_starts_on is invalid.
    """
    unit = Granularity.parse(granularity)
    validate_week_start(week_starts_on)
    instant = to_date(value)
    if instant is None:
        return None
    try:
        return truncate(instant, unit, week_starts_on)
    except RangeError as e:
        logger.debug("start_of(%r, %s) is out of range: %s", value, unit.value, e)
        return None


def end_of(
    value: DateInput | None,
    granularity: Granularity | str,
    week_starts_on: int = DEFAULT_WEEK_STARTS_ON,
) -> Instant | None:
    """Return the end of the period containing value.

    Args:
        value: The date to saturate.
        granularity: Period to saturate to ("year" .. "millisecond").
        week_starts_on: First day of the week for "week" (0=Sunday,
            1=Monday).

    Returns:
        The last millisecond of the period, or None if value is not a date.

    Raises:
        ValidationError: If granularity or week_starts_on is invalid.

    Examples:
        >>> end_of("2025-12-04T14:30:00", "day").to_datetime().strftime("%H:%M:%S")
        '23:59:59'
    """
    unit = Granularity.parse(granularity)
    validate_week_start(week_starts_on)
    instant = to_date(value)
    if instant is None:
        return None
    try:
        return saturate(instant, unit, week_starts_on)
    except RangeError as e:
        logger.debug("end_of(%r, %s) is out of range: %s", value, unit.value, e)
        return None


__all__ = [
    "validate_week_start",
    "truncate",
    "saturate",
    "start_of",
    "end_of",
]
