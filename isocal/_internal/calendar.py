"""Gregorian calendar utilities for isocal.

This module provides internal functions for proleptic Gregorian
calendar queries: leap years, month and year lengths, day of week
and day of year. Day counting is delegated to the ordinal layer.

This module is not part of the public API.
"""

from __future__ import annotations

from isocal._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_IN_WEEK,
    EPOCH_ORDINAL,
    EPOCH_WEEKDAY,
)
from isocal._internal.ordinal import (
    days_before_month,
    days_before_year,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from isocal._internal.validation import check_range, validate_month
from isocal.errors import Field


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

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
        OutOfRangeError: If month is not in 1-12.
    """
    validate_month(month)

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def validate(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    The month is checked first so that the day bound is meaningful.

    Args:
        year: The year. Every integer year is accepted.
        month: The month to validate.
        day: The day to validate.

    Raises:
        OutOfRangeError: If the month or the day is invalid; the
            error's ``field`` says which.
    """
    max_day = days_in_month(year, month)
    check_range(Field.DAY, day, 1, max_day, context=f"{year}-{month:02d}")


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the ISO weekday (1=Monday, 7=Sunday) of an ordinal day."""
    return (ordinal - EPOCH_ORDINAL + EPOCH_WEEKDAY - 1) % DAYS_IN_WEEK + 1


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the ISO weekday of a valid date.

    Examples:
        >>> day_of_week(2024, 1, 15)  # Monday
        1
        >>> day_of_week(2024, 1, 21)  # Sunday
        7
    """
    return ordinal_to_weekday(ymd_to_ordinal(year, month, day))


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year of a valid date.

    Examples:
        >>> day_of_year(2024, 12, 31)  # Leap year
        366
        >>> day_of_year(2023, 12, 31)
        365
    """
    return days_before_month(year, month) + day


def year_day_to_ymd(year: int, yday: int) -> tuple[int, int, int]:
    """Convert a year and 1-based day of year to year, month, day.

    Args:
        year: The year.
        yday: Day of the year (1-365, or 1-366 in leap years).

    Returns:
        Tuple of (year, month, day).

    Raises:
        OutOfRangeError: If yday is outside the year.
    """
    check_range(Field.DAY_OF_YEAR, yday, 1, days_in_year(year), context=str(year))
    return ordinal_to_ymd(days_before_year(year) + yday)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "validate",
    "ordinal_to_weekday",
    "day_of_week",
    "day_of_year",
    "year_day_to_ymd",
]
