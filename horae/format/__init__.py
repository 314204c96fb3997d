"""Locale-aware absolute formatting.

This module provides:
    - FormatOptions: field selections in the Intl vocabulary
    - DateTimeFormatter: compiled, reusable formatter for a locale and options
    - get_formatter: cached DateTimeFormatter lookup
    - format_date, format_time, format_datetime: preset formatting
    - format_custom: formatting with arbitrary options
    - format_for_display, format_event_time, format_range: compact display helpers

Examples:
    >>> from horae.format import format_date, format_time
    >>> format_date("2025-12-04", "long")
    '4 de diciembre de 2025'
    >>> format_time("2025-12-04T14:30:00", "short", "en")
    '02:30 PM'
"""

from __future__ import annotations

from horae.format.datetime_format import DateTimeFormatter, compile_pattern
from horae.format.options import FormatOptions
from horae.format.presets import (
    DATE_PRESETS,
    DATETIME_PRESETS,
    TIME_PRESETS,
    format_custom,
    format_date,
    format_datetime,
    format_event_time,
    format_for_display,
    format_range,
    format_time,
    get_formatter,
)

__all__: list[str] = [
    "FormatOptions",
    "DateTimeFormatter",
    "compile_pattern",
    "get_formatter",
    "DATE_PRESETS",
    "TIME_PRESETS",
    "DATETIME_PRESETS",
    "format_date",
    "format_time",
    "format_datetime",
    "format_custom",
    "format_for_display",
    "format_event_time",
    "format_range",
]
