"""Core temporal types.

This module provides the fundamental temporal types:
    - Instant: Immutable point in time with millisecond resolution
    - Duration: Calendar-aware set of offsets (years .. milliseconds)
    - Clock: Source of the current instant (SystemClock, FixedClock)
"""

from __future__ import annotations

from horae.core.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_default_clock,
    reset_default_clock,
    set_default_clock,
)
from horae.core.duration import Duration
from horae.core.instant import Instant

__all__: list[str] = [
    "Instant",
    "Duration",
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_default_clock",
    "set_default_clock",
    "reset_default_clock",
]
