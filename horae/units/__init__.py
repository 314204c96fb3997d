"""Temporal units and enumerations.

This module provides:
    - Granularity: Truncation unit for comparisons (YEAR .. MILLISECOND)
    - DurationUnit: Unit for differences between instants
    - RangePreset: Named ranges (today, thisWeek, lastMonth, ...)
    - Inclusivity: Interval bracket notation ("[]", "()", "[)", "(]")
    - DateFormatPreset, TimeFormatPreset, DateTimeFormatPreset
    - RelativeTimeUnit, RelativeTimeStyle, NumericMode
"""

from __future__ import annotations

from horae.units.granularity import DurationUnit, Granularity
from horae.units.presets import (
    DateFormatPreset,
    DateTimeFormatPreset,
    Inclusivity,
    RangePreset,
    TimeFormatPreset,
)
from horae.units.relative import NumericMode, RelativeTimeStyle, RelativeTimeUnit

__all__: list[str] = [
    "Granularity",
    "DurationUnit",
    "RangePreset",
    "Inclusivity",
    "DateFormatPreset",
    "TimeFormatPreset",
    "DateTimeFormatPreset",
    "RelativeTimeUnit",
    "RelativeTimeStyle",
    "NumericMode",
]
