"""Ordinal day conversion functions.

Functions:
    to_ordinal: Convert a CalendarDate to an OrdinalDay.
    from_ordinal: Convert an OrdinalDay (or int) to a CalendarDate.

Ordinal day 1 is 0001-01-01 in the proleptic Gregorian calendar.

Examples:
    >>> from isocal import CalendarDate
    >>> to_ordinal(CalendarDate(1, 1, 1))
    OrdinalDay(1)
    >>> from_ordinal(to_ordinal(CalendarDate(2024, 2, 29)))
    CalendarDate(2024, 2, 29)
"""

from __future__ import annotations

from isocal.core.date import CalendarDate
from isocal.core.ordinal_day import OrdinalDay


def to_ordinal(date: CalendarDate) -> OrdinalDay:
    """Convert a CalendarDate to its OrdinalDay.

    Args:
        date: The date to convert.

    Returns:
        The OrdinalDay naming the same day.

    Raises:
        TypeError: If date is not a CalendarDate.
    """
    if not isinstance(date, CalendarDate):
        raise TypeError(f"expected CalendarDate, got {type(date).__name__}")
    return date.to_ordinal_day()


def from_ordinal(ordinal: OrdinalDay | int) -> CalendarDate:
    """Convert an OrdinalDay (or a plain day number) to a CalendarDate.

    Args:
        ordinal: The day to convert.

    Returns:
        The CalendarDate naming the same day.

    Raises:
        TypeError: If ordinal is neither an OrdinalDay nor an int.
    """
    if isinstance(ordinal, OrdinalDay):
        return ordinal.to_calendar_date()
    return CalendarDate.from_ordinal(ordinal)


__all__ = ["to_ordinal", "from_ordinal"]
