"""Internal constants for Horae.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000
MS_PER_WEEK: int = 7 * MS_PER_DAY

# Average calendar unit lengths, used where an exact length does not exist
DAYS_PER_AVERAGE_MONTH: float = 30.44
DAYS_PER_AVERAGE_YEAR: float = 365.25
MS_PER_AVERAGE_MONTH: float = DAYS_PER_AVERAGE_MONTH * MS_PER_DAY
MS_PER_AVERAGE_YEAR: float = DAYS_PER_AVERAGE_YEAR * MS_PER_DAY

# Year limits (local calendar, bounded by the host datetime implementation)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal (days since 0001-01-01, which is ordinal 1) of 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719_163

# Week start used by week boundaries (0 = Sunday, 1 = Monday)
DEFAULT_WEEK_STARTS_ON: int = 1

# Maximum number of formatter instances kept per cache
DEFAULT_CACHE_SIZE: int = 256


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MS_PER_WEEK",
    "DAYS_PER_AVERAGE_MONTH",
    "DAYS_PER_AVERAGE_YEAR",
    "MS_PER_AVERAGE_MONTH",
    "MS_PER_AVERAGE_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "DEFAULT_WEEK_STARTS_ON",
    "DEFAULT_CACHE_SIZE",
]
