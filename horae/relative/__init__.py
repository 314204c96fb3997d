"""Relative time: "hace 2 horas", "in 3 days", "ayer".

This module provides:
    - select_unit: pick the largest unit a millisecond delta reaches
    - RelativeTimeFormatter / QuantityFormatter: cached locale renderers
    - time_ago, time_from: signed phrases relative to now or a base date
    - time_until, time_since: bare quantities with ended / coming-soon words
    - smart_time_ago: relative within a week, short date beyond
    - format_duration: a millisecond length in its largest unit
"""

from __future__ import annotations

from horae.relative.formatter import (
    QuantityFormatter,
    RelativeTimeFormatter,
    RelativeTimeOptions,
    get_quantity_formatter,
    get_relative_formatter,
)
from horae.relative.functions import (
    format_duration,
    smart_time_ago,
    time_ago,
    time_from,
    time_since,
    time_until,
)
from horae.relative.units import THRESHOLDS, RelativeUnit, select_unit

__all__: list[str] = [
    "THRESHOLDS",
    "RelativeUnit",
    "select_unit",
    "RelativeTimeOptions",
    "RelativeTimeFormatter",
    "QuantityFormatter",
    "get_relative_formatter",
    "get_quantity_formatter",
    "time_ago",
    "time_from",
    "time_until",
    "time_since",
    "smart_time_ago",
    "format_duration",
]
