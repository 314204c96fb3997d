"""Automatic unit selection for relative time.

Examples:
    >>> select_unit(-60_000)
    RelativeUnit(unit=<RelativeTimeUnit.MINUTE: 'minute'>, value=-1)
    >>> select_unit(90_000)
    RelativeUnit(unit=<RelativeTimeUnit.MINUTE: 'minute'>, value=2)
    >>> select_unit(400)
    RelativeUnit(unit=<RelativeTimeUnit.SECOND: 'second'>, value=0)
"""

from __future__ import annotations

from typing import NamedTuple

from horae._internal.constants import (
    MS_PER_AVERAGE_MONTH,
    MS_PER_AVERAGE_YEAR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    MS_PER_WEEK,
)
from horae._internal.numbers import round_half_up
from horae.units.relative import RelativeTimeUnit

# Largest unit first; a delta uses the first unit it reaches
THRESHOLDS: tuple[tuple[RelativeTimeUnit, float], ...] = (
    (RelativeTimeUnit.YEAR, MS_PER_AVERAGE_YEAR),
    (RelativeTimeUnit.MONTH, MS_PER_AVERAGE_MONTH),
    (RelativeTimeUnit.WEEK, MS_PER_WEEK),
    (RelativeTimeUnit.DAY, MS_PER_DAY),
    (RelativeTimeUnit.HOUR, MS_PER_HOUR),
    (RelativeTimeUnit.MINUTE, MS_PER_MINUTE),
    (RelativeTimeUnit.SECOND, MS_PER_SECOND),
)


class RelativeUnit(NamedTuple):
    """A signed amount of one relative-time unit."""

    unit: RelativeTimeUnit
    value: int


def select_unit(delta_ms: float) -> RelativeUnit:
    """Pick the largest unit the delta reaches and round to it.

    Rounding is half-up, so 1.5 minutes is 2 minutes and -1.5 minutes is
    -1 minute. Deltas under a second are expressed in seconds and round
    to 0 or +-1.

    Args:
        delta_ms: Signed difference in milliseconds (negative = past).
    """
    magnitude = abs(delta_ms)
    for unit, threshold in THRESHOLDS:
        if magnitude >= threshold:
            return RelativeUnit(unit, round_half_up(delta_ms / threshold))
    return RelativeUnit(RelativeTimeUnit.SECOND, round_half_up(delta_ms / MS_PER_SECOND))


__all__ = [
    "THRESHOLDS",
    "RelativeUnit",
    "select_unit",
]
