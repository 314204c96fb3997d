"""Calendar arithmetic on date inputs.

Durations are applied one field at a time, largest first, by re-setting
the corresponding local calendar field and letting it overflow. A month
that does not have the resulting day rolls forward rather than clamping:

    add("2024-01-31", months=1)  -> 2024-03-02  (Feb 31 = Mar 2)
    add("2024-02-29", years=1)   -> 2025-03-01  (Feb 29, 2025 = Mar 1)
    add("2025-03-31", months=-1) -> 2025-03-03

Hours and smaller are also applied to local wall-clock fields, so adding
24 hours across a DST change moves the wall clock by exactly 24 hours.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from horae.core.duration import Duration
from horae.errors import RangeError, ValidationError
from horae.parse import to_date
from horae.units.granularity import DurationUnit

if TYPE_CHECKING:
    from horae.core.duration import DurationLike
    from horae.core.instant import Instant
    from horae.parse import DateInput

logger = logging.getLogger(__name__)

# Field -> step that moves an Instant by n units of that field
_STEPS: dict[str, Callable[[Instant, int], Instant]] = {
    "years": lambda i, n: i.with_fields(year=i.year + n),
    "months": lambda i, n: i.with_fields(month=i.month + n),
    "weeks": lambda i, n: i.with_fields(day=i.day + 7 * n),
    "days": lambda i, n: i.with_fields(day=i.day + n),
    "hours": lambda i, n: i.with_fields(hour=i.hour + n),
    "minutes": lambda i, n: i.with_fields(minute=i.minute + n),
    "seconds": lambda i, n: i.with_fields(second=i.second + n),
    "milliseconds": lambda i, n: i.with_fields(millisecond=i.millisecond + n),
}


def apply_duration(instant: Instant, duration: Duration) -> Instant:
    """Apply every non-zero field of duration to instant, in field order.

    Raises:
        RangeError: If an intermediate result leaves years 1-9999.
    """
    for name, amount in duration.items():
        instant = _STEPS[name](instant, amount)
    return instant


def add(
    value: DateInput | None,
    duration: DurationLike | None = None,
    /,
    **fields: int,
) -> Instant | None:
    """Add a duration to a date input.

    Args:
        value: The date to add to.
        duration: A Duration or a mapping of field names to integers.
        **fields: Duration fields given as keywords (merged with duration).

    Returns:
        The shifted Instant, or None if value is not a date or the result
        falls outside the supported range.

    Raises:
        ValidationError: If the duration names an unknown field or a
            non-integer amount.

    Examples:
        >>> add("2024-01-31", months=1).to_iso_date()
        '2024-03-02'
        >>> add("2025-12-04", {"days": -4}).to_iso_date()
        '2025-11-30'
        >>> add("garbage", days=1) is None
        True
    """
    delta = Duration.coerce(duration, **fields)
    instant = to_date(value)
    if instant is None:
        return None
    try:
        return apply_duration(instant, delta)
    except RangeError as e:
        logger.debug("add(%r, %r) is out of range: %s", value, delta, e)
        return None


def subtract(
    value: DateInput | None,
    duration: DurationLike | None = None,
    /,
    **fields: int,
) -> Instant | None:
    """Subtract a duration from a date input.

    Every field is negated and the result delegated to add().

    Examples:
        >>> subtract("2025-03-01", days=1).to_iso_date()
        '2025-02-28'
    """
    return add(value, -Duration.coerce(duration, **fields))


def diff(
    start: DateInput | None,
    end: DateInput | None,
    unit: DurationUnit | str = DurationUnit.MILLISECONDS,
) -> float | None:
    """Return end - start expressed in unit.

    Months and years use average lengths (30.44 and 365.25 days), so
    those results are approximations, not calendar month counts.

    Args:
        start: The earlier date.
        end: The later date.
        unit: Unit for the result (plural or singular name).

    Returns:
        The signed difference as a float, or None if either input is not
        a date or unit is unknown.

    Examples:
        >>> diff("2025-12-04T10:00:00Z", "2025-12-04T12:30:00Z", "hours")
        2.5
        >>> diff("2025-12-04", "2025-12-01", "days")
        -3.0
    """
    try:
        unit = DurationUnit.parse(unit)
    except ValidationError as e:
        logger.debug("diff: %s", e)
        return None

    a = to_date(start)
    b = to_date(end)
    if a is None or b is None:
        return None
    return (b.to_epoch_ms() - a.to_epoch_ms()) / unit.to_milliseconds()


__all__ = [
    "apply_duration",
    "add",
    "subtract",
    "diff",
]
