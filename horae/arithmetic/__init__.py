"""Arithmetic, boundary, comparison and range operations on date inputs.

This module provides:
    - add, subtract, diff: calendar arithmetic
    - start_of, end_of: period boundaries
    - is_same, is_before, is_after, is_between and the now-relative checks
    - DateRange, get_range, is_in_range: named ranges
"""

from __future__ import annotations

from horae.arithmetic.boundaries import end_of, start_of
from horae.arithmetic.comparisons import (
    is_after,
    is_before,
    is_between,
    is_future,
    is_past,
    is_same,
    is_today,
    is_tomorrow,
    is_yesterday,
)
from horae.arithmetic.ops import add, diff, subtract
from horae.arithmetic.ranges import DateRange, get_range, is_in_range

__all__: list[str] = [
    # Arithmetic
    "add",
    "subtract",
    "diff",
    # Boundaries
    "start_of",
    "end_of",
    # Comparisons
    "is_same",
    "is_before",
    "is_after",
    "is_between",
    "is_today",
    "is_yesterday",
    "is_tomorrow",
    "is_past",
    "is_future",
    # Ranges
    "DateRange",
    "get_range",
    "is_in_range",
]
