"""Tests for clocks and the process default clock."""

from __future__ import annotations

import time

from horae import (
    Clock,
    FixedClock,
    Instant,
    SystemClock,
    get_default_clock,
    is_today,
    reset_default_clock,
    set_default_clock,
)


class TestFixedClock:
    """Tests for FixedClock."""

    def test_now_is_frozen(self, now: Instant) -> None:
        clock = FixedClock(now)
        assert clock.now() == now
        assert clock.now() == now

    def test_advance(self) -> None:
        clock = FixedClock(Instant(0))
        assert clock.advance(1_500).now() == Instant(1_500)
        assert clock.advance(-500).now() == Instant(1_000)

    def test_set(self, now: Instant) -> None:
        clock = FixedClock(Instant(0))
        clock.set(now)
        assert clock.now() == now

    def test_satisfies_protocol(self, clock: FixedClock) -> None:
        assert isinstance(clock, Clock)
        assert isinstance(SystemClock(), Clock)


class TestSystemClock:
    """Tests for SystemClock."""

    def test_tracks_wall_clock(self) -> None:
        before = time.time_ns() // 1_000_000
        now = SystemClock().now().to_epoch_ms()
        after = time.time_ns() // 1_000_000
        assert before <= now <= after


class TestDefaultClock:
    """Tests for the process default clock."""

    def test_default_is_system_clock(self) -> None:
        assert isinstance(get_default_clock(), SystemClock)

    def test_set_default_clock(self, clock: FixedClock, now: Instant) -> None:
        set_default_clock(clock)
        assert Instant.now() == now
        assert is_today("2025-12-04T08:00")
        assert not is_today("2025-12-05T08:00")

    def test_reset_default_clock(self, clock: FixedClock) -> None:
        set_default_clock(clock)
        reset_default_clock()
        assert isinstance(get_default_clock(), SystemClock)

    def test_explicit_clock_wins(self, clock: FixedClock, now: Instant) -> None:
        set_default_clock(FixedClock(Instant(0)))
        assert Instant.now(clock) == now
        assert is_today("2025-12-04", clock=clock)
