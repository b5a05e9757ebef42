"""Calendar query functions.

Public, type-checked forms of the calendar queries:
    - is_leap_year, days_in_month, days_in_year: year and month lengths
    - day_of_week, day_of_year: positions of a CalendarDate
    - iso_weeks_in_year: 52 or 53 ISO weeks

Examples:
    >>> from isocal import CalendarDate
    >>> is_leap_year(1900)
    False
    >>> day_of_week(CalendarDate(2020, 12, 31))  # Thursday
    4
    >>> iso_weeks_in_year(2015)
    53
"""

from __future__ import annotations

from isocal._internal import calendar as _calendar
from isocal._internal import isoweek as _isoweek
from isocal._internal.validation import require_int
from isocal.core.date import CalendarDate


def _require_date(date: object) -> CalendarDate:
    if not isinstance(date, CalendarDate):
        raise TypeError(f"expected CalendarDate, got {type(date).__name__}")
    return date


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year in the proleptic Gregorian calendar.

    Raises:
        TypeError: If year is not an int.
    """
    return _calendar.is_leap_year(require_int("year", year))


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Raises:
        TypeError: If year or month is not an int.
        OutOfRangeError: If month is not in 1-12.
    """
    return _calendar.days_in_month(require_int("year", year), require_int("month", month))


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return _calendar.days_in_year(require_int("year", year))


def day_of_week(date: CalendarDate) -> int:
    """Return the ISO weekday of ``date`` (1=Monday, 7=Sunday)."""
    return _require_date(date).day_of_week


def day_of_year(date: CalendarDate) -> int:
    """Return the 1-based day of the year of ``date`` (1-366)."""
    return _require_date(date).day_of_year


def iso_weeks_in_year(iso_year: int) -> int:
    """Return the number of ISO weeks in ``iso_year`` (52 or 53).

    Raises:
        TypeError: If iso_year is not an int.
    """
    return _isoweek.iso_weeks_in_year(require_int("iso_year", iso_year))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_week",
    "day_of_year",
    "iso_weeks_in_year",
]
