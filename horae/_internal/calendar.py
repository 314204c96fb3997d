"""Calendar utilities for Horae.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, ordinal day numbers and ISO week
numbering.

Ordinal 1 is 0001-01-01, matching datetime.date.toordinal().

This module is not part of the public API.
"""

from __future__ import annotations

from horae._internal.constants import DAYS_IN_MONTH, MAX_YEAR, MIN_YEAR
from horae.errors import ValidationError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year.

    Month 13 becomes January of the next year, month 0 becomes December
    of the previous year.

    Examples:
        >>> normalize_month(2024, 13)
        (2025, 1)
        >>> normalize_month(2024, 0)
        (2023, 12)
    """
    carry, month_index = divmod(month - 1, 12)
    return year + carry, month_index + 1


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The day is not range checked, so day 0 is the last day of the
    previous month and day 32 spills into the next month. This is what
    the overflow normalization in Instant.from_local relies on.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day, possibly outside the month.

    Returns:
        The ordinal day number.
    """
    y = year - 1
    # Python's // floors toward negative infinity, which is what we need
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Raises:
        ValueError: If ordinal is before 0001-01-01.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # December 31 of the previous leap year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def day_of_week(ordinal: int) -> int:
    """Return the day of week for an ordinal (0=Sunday, 6=Saturday).

    Ordinal 1 (0001-01-01) was a Monday.
    """
    return ordinal % 7


def iso_week_number(year: int, month: int, day: int) -> int:
    """Return the ISO 8601 week number of a calendar date.

    The date is shifted to the Thursday of its week; the week number is
    the index of that Thursday's week within the Thursday's own year.

    Examples:
        >>> iso_week_number(2025, 12, 4)
        49
        >>> iso_week_number(2021, 1, 1)  # belongs to 2020-W53
        53
        >>> iso_week_number(2024, 12, 30)  # belongs to 2025-W01
        1
    """
    ordinal = ymd_to_ordinal(year, month, day)
    iso_day = day_of_week(ordinal) or 7
    thursday = ordinal + 4 - iso_day
    thursday_year = ordinal_to_ymd(thursday)[0]
    year_start = ymd_to_ordinal(thursday_year, 1, 1)
    return (thursday - year_start) // 7 + 1


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        ValidationError: If the date is invalid.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, millisecond: int) -> None:
    """Validate wall-clock time components.

    Raises:
        ValidationError: If any component is out of range.
    """
    for name, value, upper in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("millisecond", millisecond, 999),
    ):
        if value < 0 or value > upper:
            raise ValidationError(
                f"{name} must be between 0 and {upper}, got {value}"
            )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "normalize_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "day_of_week",
    "iso_week_number",
    "validate_date",
    "validate_time",
]
