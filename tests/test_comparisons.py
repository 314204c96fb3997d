"""Tests for comparison operations."""

from __future__ import annotations

import pytest

from horae import (
    FixedClock,
    Inclusivity,
    Instant,
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
from horae.errors import ValidationError


class TestIsSame:
    """Tests for is_same()."""

    def test_default_granularity_is_millisecond(self) -> None:
        assert is_same("2025-12-04T09:00", "2025-12-04T09:00:00.000")
        assert not is_same("2025-12-04T09:00", "2025-12-04T09:00:00.001")

    @pytest.mark.parametrize(
        ("left", "right", "granularity", "expected"),
        [
            ("2025-12-04T09:00", "2025-12-04T18:00", "day", True),
            ("2025-12-04T23:59", "2025-12-05T00:00", "day", False),
            ("2025-12-01", "2025-12-31", "month", True),
            ("2025-01-01", "2025-12-31", "year", True),
            ("2025-12-01", "2025-12-07", "week", True),
            ("2025-11-30", "2025-12-01", "week", False),
            ("2025-12-04T09:10", "2025-12-04T09:50", "hour", True),
        ],
    )
    def test_granularities(
        self, left: str, right: str, granularity: str, expected: bool
    ) -> None:
        assert is_same(left, right, granularity) is expected

    def test_mixed_input_types(self) -> None:
        """An ISO string with a zone and epoch ms name the same instant."""
        assert is_same("2025-12-04T14:30:00Z", 1_764_858_600_000)

    def test_invalid_input(self) -> None:
        assert is_same("garbage", "2025-12-04", "day") is False
        assert is_same(None, None) is False

    def test_unknown_granularity_raises(self) -> None:
        with pytest.raises(ValidationError):
            is_same("2025-12-04", "2025-12-04", "fortnight")


class TestIsBeforeAfter:
    """Tests for is_before() and is_after()."""

    def test_before(self) -> None:
        assert is_before("2025-12-03", "2025-12-04")
        assert not is_before("2025-12-04", "2025-12-03")

    def test_after(self) -> None:
        assert is_after("2025-12-04", "2025-12-03")
        assert not is_after("2025-12-03", "2025-12-04")

    def test_same_period_is_neither(self) -> None:
        assert not is_before("2025-12-04T09:00", "2025-12-04T18:00", "day")
        assert not is_after("2025-12-04T18:00", "2025-12-04T09:00", "day")

    def test_invalid_input(self) -> None:
        assert is_before("garbage", "2025-12-04") is False
        assert is_after("2025-12-04", "garbage") is False


class TestIsBetween:
    """Tests for is_between() bracket semantics."""

    START = "2025-12-01"
    END = "2025-12-04"

    @pytest.mark.parametrize(
        ("inclusivity", "at_start", "at_end"),
        [
            ("[]", True, True),
            ("()", False, False),
            ("[)", True, False),
            ("(]", False, True),
        ],
    )
    def test_endpoints(self, inclusivity: str, at_start: bool, at_end: bool) -> None:
        assert is_between(self.START, self.START, self.END, inclusivity=inclusivity) is at_start
        assert is_between(self.END, self.START, self.END, inclusivity=inclusivity) is at_end

    def test_interior_always_inside(self) -> None:
        for bounds in Inclusivity:
            assert is_between("2025-12-02", self.START, self.END, inclusivity=bounds)

    def test_outside(self) -> None:
        assert not is_between("2025-11-30", self.START, self.END)
        assert not is_between("2025-12-05", self.START, self.END)

    def test_day_granularity(self) -> None:
        assert is_between("2025-12-04T22:00", self.START, self.END, "day")
        assert not is_between("2025-12-04T22:00", self.START, self.END)

    def test_invalid_input(self) -> None:
        assert is_between("garbage", self.START, self.END) is False
        assert is_between("2025-12-02", None, self.END) is False

    def test_unknown_inclusivity_raises(self) -> None:
        with pytest.raises(ValidationError, match="unknown inclusivity"):
            is_between("2025-12-02", self.START, self.END, inclusivity="[[")


class TestNowRelative:
    """Tests for checks against the current instant."""

    def test_today(self, clock: FixedClock) -> None:
        assert is_today("2025-12-04T00:00", clock=clock)
        assert is_today("2025-12-04T23:59:59.999", clock=clock)
        assert not is_today("2025-12-05T00:00", clock=clock)

    def test_yesterday(self, clock: FixedClock) -> None:
        assert is_yesterday("2025-12-03T23:59", clock=clock)
        assert not is_yesterday("2025-12-04T00:00", clock=clock)

    def test_tomorrow(self, clock: FixedClock) -> None:
        assert is_tomorrow("2025-12-05T00:00", clock=clock)
        assert not is_tomorrow("2025-12-06", clock=clock)

    def test_yesterday_across_month(self) -> None:
        clock = FixedClock(Instant.from_local(2025, 12, 1, 8))
        assert is_yesterday("2025-11-30", clock=clock)

    def test_past_and_future(self, clock: FixedClock) -> None:
        assert is_past("2025-12-04T11:59:59.999", clock=clock)
        assert is_future("2025-12-04T12:00:00.001", clock=clock)

    def test_now_is_neither_past_nor_future(self, clock: FixedClock) -> None:
        assert not is_past("2025-12-04T12:00", clock=clock)
        assert not is_future("2025-12-04T12:00", clock=clock)

    def test_invalid_input(self, clock: FixedClock) -> None:
        assert is_today("garbage", clock=clock) is False
        assert is_past(None, clock=clock) is False
        assert is_future(float("nan"), clock=clock) is False
