"""Internal constants for isocal.

These constants define the calendar tables and cycle lengths used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Gregorian cycle lengths, in days
DAYS_IN_YEAR: int = 365
DAYS_IN_4_YEARS: int = 4 * DAYS_IN_YEAR + 1  # 1461
DAYS_IN_100_YEARS: int = 25 * DAYS_IN_4_YEARS - 1  # 36524
DAYS_IN_400_YEARS: int = 4 * DAYS_IN_100_YEARS + 1  # 146097

DAYS_IN_WEEK: int = 7

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

# Days before the first of each month (non-leap year), 1-indexed
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Ordinal day 1 is 0001-01-01, which was a Monday (ISO weekday 1)
EPOCH_ORDINAL: int = 1
EPOCH_WEEKDAY: int = 1

# ISO 8601: week 1 is the week containing January 4th
ISO_WEEK_ANCHOR_DAY: int = 4
THURSDAY: int = 4


__all__ = [
    "DAYS_IN_YEAR",
    "DAYS_IN_4_YEARS",
    "DAYS_IN_100_YEARS",
    "DAYS_IN_400_YEARS",
    "DAYS_IN_WEEK",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "EPOCH_ORDINAL",
    "EPOCH_WEEKDAY",
    "ISO_WEEK_ANCHOR_DAY",
    "THURSDAY",
]
