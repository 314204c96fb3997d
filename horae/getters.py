"""Calendar field getters for date inputs.

All getters read the host's local calendar and return None when the
input is not a date.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from horae._internal import calendar
from horae.parse import to_date

if TYPE_CHECKING:
    from horae.parse import DateInput


def get_day_of_week(value: DateInput | None) -> int | None:
    """Return the day of the week (0=Sunday, 6=Saturday).

    Examples:
        >>> get_day_of_week("2025-12-04")  # Thursday
        4
    """
    instant = to_date(value)
    return instant.day_of_week if instant is not None else None


def get_week_number(value: DateInput | None) -> int | None:
    """Return the ISO 8601 week number (1-53).

    Weeks start on Monday and week 1 is the week containing the year's
    first Thursday, so early January can belong to week 52 or 53 of the
    previous year.

    Examples:
        >>> get_week_number("2025-12-04")
        49
        >>> get_week_number("2021-01-01")
        53
    """
    instant = to_date(value)
    if instant is None:
        return None
    return calendar.iso_week_number(instant.year, instant.month, instant.day)


def get_quarter(value: DateInput | None) -> int | None:
    """Return the quarter of the year (1-4).

    Examples:
        >>> get_quarter("2025-12-04")
        4
    """
    instant = to_date(value)
    if instant is None:
        return None
    return (instant.month - 1) // 3 + 1


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the Gregorian calendar.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
        (True, False, True)
    """
    return calendar.is_leap_year(year)


def get_days_in_month(value: DateInput | None) -> int | None:
    """Return the number of days in the month containing value.

    Examples:
        >>> get_days_in_month("2024-02-10")
        29
    """
    instant = to_date(value)
    if instant is None:
        return None
    return calendar.days_in_month(instant.year, instant.month)


__all__ = [
    "get_day_of_week",
    "get_week_number",
    "get_quarter",
    "is_leap_year",
    "get_days_in_month",
]
