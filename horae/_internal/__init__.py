"""Internal utilities for Horae.

This module contains private implementation details:
    - Calendar arithmetic (ordinals, leap years, ISO weeks)
    - Constants and magic numbers
    - Numeric helpers for the formatters
    - The bounded formatter cache

Note: This module is not part of the public API.
"""

from __future__ import annotations

from horae._internal.cache import (
    FormatterCache,
    get_formatter_cache,
    get_relative_formatter_cache,
    reset_formatter_caches,
)
from horae._internal.calendar import (
    days_in_month,
    is_leap_year,
    validate_date,
)

__all__: list[str] = [
    "FormatterCache",
    "get_formatter_cache",
    "get_relative_formatter_cache",
    "reset_formatter_caches",
    "days_in_month",
    "is_leap_year",
    "validate_date",
]
