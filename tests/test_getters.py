"""Tests for calendar field getters."""

from __future__ import annotations

import datetime

import pytest

from horae import (
    get_day_of_week,
    get_days_in_month,
    get_quarter,
    get_week_number,
    is_leap_year,
)


class TestGetDayOfWeek:
    """Tests for get_day_of_week()."""

    def test_weekdays(self) -> None:
        assert get_day_of_week("2025-12-04") == 4
        assert get_day_of_week("2025-12-07") == 0
        assert get_day_of_week("2025-12-06") == 6

    def test_reads_local_calendar(self) -> None:
        """23:30Z on Thursday is 00:30 Friday in CET."""
        assert get_day_of_week("2025-12-04T23:30:00Z") == 5

    def test_invalid(self) -> None:
        assert get_day_of_week("garbage") is None


class TestGetWeekNumber:
    """Tests for get_week_number()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2025-12-04", 49),
            ("2025-01-01", 1),
            ("2021-01-01", 53),
            ("2024-12-30", 1),
            ("2026-12-31", 53),
        ],
    )
    def test_iso_weeks(self, text: str, expected: int) -> None:
        assert get_week_number(text) == expected

    def test_matches_isocalendar_for_a_year(self) -> None:
        day = datetime.date(2025, 1, 1)
        while day.year == 2025:
            assert get_week_number(day) == day.isocalendar()[1]
            day += datetime.timedelta(days=1)

    def test_invalid(self) -> None:
        assert get_week_number(None) is None


class TestGetQuarter:
    """Tests for get_quarter()."""

    @pytest.mark.parametrize(
        ("month", "expected"),
        [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (9, 3), (10, 4), (12, 4)],
    )
    def test_quarters(self, month: int, expected: int) -> None:
        assert get_quarter(datetime.date(2025, month, 15)) == expected

    def test_invalid(self) -> None:
        assert get_quarter("garbage") is None


class TestLeapYearAndMonthLength:
    """Tests for is_leap_year() and get_days_in_month()."""

    def test_is_leap_year(self) -> None:
        assert is_leap_year(2000)
        assert is_leap_year(2024)
        assert not is_leap_year(1900)
        assert not is_leap_year(2025)

    def test_days_in_month(self) -> None:
        assert get_days_in_month("2024-02-10") == 29
        assert get_days_in_month("2025-02-10") == 28
        assert get_days_in_month("2025-04-30") == 30
        assert get_days_in_month("2025-12-04") == 31

    def test_days_in_month_invalid(self) -> None:
        assert get_days_in_month("2025-02-30") is None
