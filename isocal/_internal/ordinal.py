"""Ordinal day arithmetic for isocal.

The ordinal day number counts days in the proleptic Gregorian
calendar, where ordinal 1 = 0001-01-01 and ordinal 0 = 0000-12-31.
Every other representation converts through it.

Both directions are closed form. Python's floor division and
``divmod`` round toward negative infinity, so the same formulas hold
for year 0 and negative (BCE) years.

This module is not part of the public API.
"""

from __future__ import annotations

from isocal._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_100_YEARS,
    DAYS_IN_400_YEARS,
    DAYS_IN_4_YEARS,
    DAYS_IN_MONTH,
    DAYS_IN_YEAR,
)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_before_year(year: int) -> int:
    """Return the number of days before January 1 of ``year``.

    Counted from 0001-01-01, so the result is 0 for year 1 and
    negative for years before it.
    """
    y = year - 1
    return y * DAYS_IN_YEAR + y // 4 - y // 100 + y // 400


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in ``year`` before the first of ``month``.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and _is_leap(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    The inputs must already form a valid date.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(0, 12, 31)
        0
        >>> ymd_to_ordinal(2024, 1, 15)
        738900
    """
    return days_before_year(year) + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Exact inverse of ``ymd_to_ordinal`` for every integer.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n400, n = divmod(ordinal - 1, DAYS_IN_400_YEARS)
    n100, n = divmod(n, DAYS_IN_100_YEARS)
    n4, n = divmod(n, DAYS_IN_4_YEARS)
    n1, n = divmod(n, DAYS_IN_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year that closes a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    leap = n1 == 3 and (n4 != 24 or n100 == 3)

    # (n + 50) >> 5 is the month of day n, or the month after it
    month = (n + 50) >> 5
    preceding = DAYS_BEFORE_MONTH[month] + (1 if month > 2 and leap else 0)
    if preceding > n:
        month -= 1
        preceding -= DAYS_IN_MONTH[month] + (1 if month == 2 and leap else 0)

    return (year, month, n - preceding + 1)


__all__ = [
    "days_before_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
]
