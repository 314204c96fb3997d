"""Clock abstraction for "now"-relative operations.

Every function that compares against the current time (is_today,
get_range, time_ago, ...) reads it from a Clock. Production code uses
the process default, a SystemClock; tests install a FixedClock so their
results do not depend on when they run.

Usage:
    # Production: uses the wall clock
    is_today(order.created_at)

    # Testing: freeze time for one call
    clock = FixedClock(Instant.from_local(2025, 12, 4, 12, 0))
    is_today(order.created_at, clock=clock)

    # Testing: freeze time process-wide
    set_default_clock(clock)
    ...
    reset_default_clock()
"""

from __future__ import annotations

import threading
import time
from typing import Protocol, runtime_checkable

from horae.core.instant import Instant


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current instant."""

    def now(self) -> Instant:
        ...


class SystemClock:
    """Clock backed by the host's wall clock."""

    def now(self) -> Instant:
        return Instant(time.time_ns() // 1_000_000)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock frozen at a given instant, for deterministic tests.

    Examples:
        >>> clock = FixedClock(Instant.from_epoch_ms(0))
        >>> clock.advance(1500).now().to_epoch_ms()
        1500
    """

    def __init__(self, instant: Instant) -> None:
        self._instant = instant

    def now(self) -> Instant:
        return self._instant

    def set(self, instant: Instant) -> FixedClock:
        """Move the clock to instant."""
        self._instant = instant
        return self

    def advance(self, milliseconds: int) -> FixedClock:
        """Move the clock forward (or backward, if negative) by milliseconds."""
        self._instant = Instant(self._instant.to_epoch_ms() + milliseconds)
        return self

    def __repr__(self) -> str:
        return f"FixedClock({self._instant!r})"


_default_lock = threading.Lock()
_default_clock: Clock | None = None


def get_default_clock() -> Clock:
    """Return the process default clock (a SystemClock unless replaced)."""
    global _default_clock
    with _default_lock:
        if _default_clock is None:
            _default_clock = SystemClock()
        return _default_clock


def set_default_clock(clock: Clock) -> None:
    """Replace the process default clock (for testing)."""
    global _default_clock
    with _default_lock:
        _default_clock = clock


def reset_default_clock() -> None:
    """Restore the wall-clock default."""
    global _default_clock
    with _default_lock:
        _default_clock = None


def resolve_clock(clock: Clock | None) -> Clock:
    """Return clock, or the process default when clock is None."""
    return clock if clock is not None else get_default_clock()


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_default_clock",
    "set_default_clock",
    "reset_default_clock",
    "resolve_clock",
]
