"""Numeric helpers shared by the formatters.

This module is not part of the public API.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded toward +infinity.

    Python's round() uses banker's rounding (round(2.5) == 2); relative
    time magnitudes round halves up instead, so 1.5 minutes is 2 minutes
    and -1.5 minutes is -1 minute.

    Examples:
        >>> round_half_up(1.5)
        2
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-1.5)
        -1
    """
    return math.floor(value + 0.5)


def group_digits(value: int, group_symbol: str, min_grouping_digits: int = 1) -> str:
    """Render an integer with thousands grouping.

    Grouping only applies once the integer part has at least
    ``3 + min_grouping_digits`` digits, so Spanish (minimum grouping of 2)
    renders 1000 as "1000" but 10000 as "10.000".

    Examples:
        >>> group_digits(1234567, ",")
        '1,234,567'
        >>> group_digits(1000, ".", 2)
        '1000'
        >>> group_digits(10000, ".", 2)
        '10.000'
    """
    digits = str(abs(value))
    sign = "-" if value < 0 else ""
    if len(digits) < 3 + min_grouping_digits:
        return sign + digits

    groups = []
    while len(digits) > 3:
        groups.append(digits[-3:])
        digits = digits[:-3]
    groups.append(digits)
    return sign + group_symbol.join(reversed(groups))


__all__ = [
    "round_half_up",
    "group_digits",
]
