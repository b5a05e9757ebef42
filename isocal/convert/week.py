"""ISO week-date conversion functions.

Functions:
    calendar_to_week_date: Convert a CalendarDate to a WeekDate.
    week_date_to_calendar: Convert a WeekDate to a CalendarDate.

Both are total over valid inputs and are exact inverses.
"""

from __future__ import annotations

from isocal.core.date import CalendarDate
from isocal.core.week_date import WeekDate


def calendar_to_week_date(date: CalendarDate) -> WeekDate:
    """Convert a CalendarDate to its ISO week date.

    Examples:
        >>> calendar_to_week_date(CalendarDate(2005, 1, 1))
        WeekDate(2004, 53, 6)

    Raises:
        TypeError: If date is not a CalendarDate.
    """
    if not isinstance(date, CalendarDate):
        raise TypeError(f"expected CalendarDate, got {type(date).__name__}")
    return date.to_week_date()


def week_date_to_calendar(week_date: WeekDate) -> CalendarDate:
    """Convert an ISO week date to its CalendarDate.

    Examples:
        >>> week_date_to_calendar(WeekDate(2016, 1, 1))
        CalendarDate(2016, 1, 4)

    Raises:
        TypeError: If week_date is not a WeekDate.
    """
    if not isinstance(week_date, WeekDate):
        raise TypeError(f"expected WeekDate, got {type(week_date).__name__}")
    return week_date.to_calendar_date()


__all__ = ["calendar_to_week_date", "week_date_to_calendar"]
