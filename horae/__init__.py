"""Horae: date and time helpers for a storefront.

Horae parses loosely typed date inputs, does calendar math on the host's
local time, and renders dates for people in Spanish (the default) and
English. Invalid inputs never raise: they come back as None, False or an
empty string. Caller mistakes such as an unknown unit or preset raise
ValidationError.

Core Types:
    Instant: A millisecond-precision point in time, viewed in local time
    Duration: Field-wise calendar duration (years .. milliseconds)
    Clock: Source of "now"; FixedClock pins it for tests
    DateRange: Resolved start/end pair for a named range preset

Parsing:
    to_date, parse_date, is_valid_date

Math and comparisons:
    add, subtract, diff, start_of, end_of, is_same, is_before, is_after,
    is_between, is_today, is_yesterday, is_tomorrow, is_past, is_future,
    get_range, is_in_range

Formatting:
    format_date, format_time, format_datetime, format_custom,
    format_for_display, format_event_time, format_range

Relative time:
    time_ago, time_from, time_until, time_since, smart_time_ago,
    format_duration

Getters:
    get_day_of_week, get_week_number, get_quarter, is_leap_year,
    get_days_in_month

Exceptions:
    HoraeError: Base exception
    ValidationError: Invalid caller-supplied value
    RangeError: Result outside the supported calendar range
    ParseError: Text that is not a recognized date

Example:
    >>> import horae
    >>> horae.format_date(horae.add("2025-12-04", days=3), "long")
    '7 de diciembre de 2025'
    >>> horae.get_quarter("2025-12-04")
    4
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from horae.core import (
    Clock,
    Duration,
    FixedClock,
    Instant,
    SystemClock,
    get_default_clock,
    reset_default_clock,
    set_default_clock,
)

# Units and presets
from horae.units import (
    DateFormatPreset,
    DateTimeFormatPreset,
    DurationUnit,
    Granularity,
    Inclusivity,
    NumericMode,
    RangePreset,
    RelativeTimeStyle,
    RelativeTimeUnit,
    TimeFormatPreset,
)

# Exceptions
from horae.errors import HoraeError, ParseError, RangeError, ValidationError

# Parsing
from horae.parse import (
    INVALID_DATE_FORMAT,
    DateInput,
    ParseResult,
    is_valid_date,
    parse_date,
    to_date,
)

# Math, boundaries, comparisons and ranges
from horae.arithmetic import (
    DateRange,
    add,
    diff,
    end_of,
    get_range,
    is_after,
    is_before,
    is_between,
    is_future,
    is_in_range,
    is_past,
    is_same,
    is_today,
    is_tomorrow,
    is_yesterday,
    start_of,
    subtract,
)

# Getters
from horae.getters import (
    get_day_of_week,
    get_days_in_month,
    get_quarter,
    get_week_number,
    is_leap_year,
)

# Locales
from horae.locale import DEFAULT_LOCALE, Locale

# Absolute formatting
from horae.format import (
    FormatOptions,
    format_custom,
    format_date,
    format_datetime,
    format_event_time,
    format_for_display,
    format_range,
    format_time,
)

# Relative time
from horae.relative import (
    RelativeTimeOptions,
    format_duration,
    smart_time_ago,
    time_ago,
    time_from,
    time_since,
    time_until,
)

from horae._internal.cache import reset_formatter_caches

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "Duration",
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_default_clock",
    "set_default_clock",
    "reset_default_clock",
    # Units and presets
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
    # Exceptions
    "HoraeError",
    "ValidationError",
    "RangeError",
    "ParseError",
    # Parsing
    "DateInput",
    "ParseResult",
    "INVALID_DATE_FORMAT",
    "to_date",
    "parse_date",
    "is_valid_date",
    # Math and comparisons
    "add",
    "subtract",
    "diff",
    "start_of",
    "end_of",
    "is_same",
    "is_before",
    "is_after",
    "is_between",
    "is_today",
    "is_yesterday",
    "is_tomorrow",
    "is_past",
    "is_future",
    "DateRange",
    "get_range",
    "is_in_range",
    # Getters
    "get_day_of_week",
    "get_week_number",
    "get_quarter",
    "is_leap_year",
    "get_days_in_month",
    # Locales
    "Locale",
    "DEFAULT_LOCALE",
    # Absolute formatting
    "FormatOptions",
    "format_date",
    "format_time",
    "format_datetime",
    "format_custom",
    "format_for_display",
    "format_event_time",
    "format_range",
    # Relative time
    "RelativeTimeOptions",
    "time_ago",
    "time_from",
    "time_until",
    "time_since",
    "smart_time_ago",
    "format_duration",
    # Caches
    "reset_formatter_caches",
]
