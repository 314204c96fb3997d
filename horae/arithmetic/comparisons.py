"""Comparison operations for date inputs.

Both operands are truncated to the requested granularity before their
epoch milliseconds are compared, so is_same(a, b, "day") asks whether a
and b fall on the same local calendar day.

Comparison Rules:
    - Any operand that is not a date makes the comparison False
    - Truncation uses start_of() with weeks starting on Monday
    - now-relative checks read the current instant from a Clock

Supported Operations:
    - is_same, is_before, is_after: pairwise comparison
    - is_between: interval membership with bracket inclusivity
    - is_today, is_yesterday, is_tomorrow: day-granularity checks against now
    - is_past, is_future: millisecond-granularity checks against now
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from horae.arithmetic.boundaries import truncate
from horae.arithmetic.ops import add
from horae.core.clock import resolve_clock
from horae.errors import RangeError
from horae.parse import to_date
from horae.units.granularity import Granularity
from horae.units.presets import Inclusivity, parse_enum

if TYPE_CHECKING:
    from horae.core.clock import Clock
    from horae.core.instant import Instant
    from horae.parse import DateInput


def _truncated_ms(value: DateInput | None, granularity: Granularity) -> int | None:
    """Normalize value and truncate it, returning epoch ms or None."""
    instant = to_date(value)
    if instant is None:
        return None
    try:
        return truncate(instant, granularity).to_epoch_ms()
    except RangeError:
        return None


def is_same(
    left: DateInput | None,
    right: DateInput | None,
    granularity: Granularity | str = Granularity.MILLISECOND,
) -> bool:
    """Test whether two dates fall in the same period.

    Examples:
        >>> is_same("2025-12-04T09:00", "2025-12-04T18:00", "day")
        True
        >>> is_same("2025-12-04T09:00", "2025-12-04T18:00")
        False
    """
    unit = Granularity.parse(granularity)
    a = _truncated_ms(left, unit)
    b = _truncated_ms(right, unit)
    if a is None or b is None:
        return False
    return a == b


def is_before(
    left: DateInput | None,
    right: DateInput | None,
    granularity: Granularity | str = Granularity.MILLISECOND,
) -> bool:
    """Test whether left's period starts before right's.

    Examples:
        >>> is_before("2025-12-03", "2025-12-04")
        True
        >>> is_before("2025-12-04T09:00", "2025-12-04T18:00", "day")
        False
    """
    unit = Granularity.parse(granularity)
    a = _truncated_ms(left, unit)
    b = _truncated_ms(right, unit)
    if a is None or b is None:
        return False
    return a < b


def is_after(
    left: DateInput | None,
    right: DateInput | None,
    granularity: Granularity | str = Granularity.MILLISECOND,
) -> bool:
    """Test whether left's period starts after right's."""
    unit = Granularity.parse(granularity)
    a = _truncated_ms(left, unit)
    b = _truncated_ms(right, unit)
    if a is None or b is None:
        return False
    return a > b


def is_between(
    value: DateInput | None,
    start: DateInput | None,
    end: DateInput | None,
    granularity: Granularity | str = Granularity.MILLISECOND,
    inclusivity: Inclusivity | str = Inclusivity.INCLUSIVE,
) -> bool:
    """Test whether value lies between start and end.

    Args:
        value: The date to test.
        start: Interval start.
        end: Interval end.
        granularity: Truncation applied to all three dates.
        inclusivity: "[]" includes both ends, "()" excludes both, "[)"
            includes only the start, "(]" only the end.

    Raises:
        ValidationError: If granularity or inclusivity is invalid.

    Examples:
        >>> is_between("2025-12-04", "2025-12-01", "2025-12-04")
        True
        >>> is_between("2025-12-04", "2025-12-01", "2025-12-04", inclusivity="[)")
        False
    """
    unit = Granularity.parse(granularity)
    bounds = parse_enum(Inclusivity, inclusivity, "inclusivity")
    d = _truncated_ms(value, unit)
    s = _truncated_ms(start, unit)
    e = _truncated_ms(end, unit)
    if d is None or s is None or e is None:
        return False

    after_start = d >= s if bounds.includes_start else d > s
    before_end = d <= e if bounds.includes_end else d < e
    return after_start and before_end


def _now(clock: Clock | None) -> Instant:
    return resolve_clock(clock).now()


def is_today(value: DateInput | None, *, clock: Clock | None = None) -> bool:
    """Test whether value falls on the current local day."""
    return is_same(value, _now(clock), Granularity.DAY)


def is_yesterday(value: DateInput | None, *, clock: Clock | None = None) -> bool:
    """Test whether value falls on the local day before today."""
    yesterday = add(_now(clock), days=-1)
    return is_same(value, yesterday, Granularity.DAY)


def is_tomorrow(value: DateInput | None, *, clock: Clock | None = None) -> bool:
    """Test whether value falls on the local day after today."""
    tomorrow = add(_now(clock), days=1)
    return is_same(value, tomorrow, Granularity.DAY)


def is_past(value: DateInput | None, *, clock: Clock | None = None) -> bool:
    """Test whether value is strictly before now."""
    return is_before(value, _now(clock))


def is_future(value: DateInput | None, *, clock: Clock | None = None) -> bool:
    """Test whether value is strictly after now."""
    return is_after(value, _now(clock))


__all__ = [
    "is_same",
    "is_before",
    "is_after",
    "is_between",
    "is_today",
    "is_yesterday",
    "is_tomorrow",
    "is_past",
    "is_future",
]
