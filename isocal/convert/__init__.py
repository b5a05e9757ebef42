"""Date conversion functions.

This module provides function forms of the conversions between the
three date representations:
    - Calendar date <-> ordinal day
    - Calendar date <-> ISO week date

Examples:
    >>> from isocal import CalendarDate
    >>> from isocal.convert import calendar_to_week_date, week_date_to_calendar

    >>> w = calendar_to_week_date(CalendarDate(2018, 12, 31))
    >>> w
    WeekDate(2019, 1, 1)
    >>> week_date_to_calendar(w)
    CalendarDate(2018, 12, 31)
"""

from __future__ import annotations

from isocal.convert.ordinal import from_ordinal, to_ordinal
from isocal.convert.week import calendar_to_week_date, week_date_to_calendar

__all__ = [
    # Ordinal
    "to_ordinal",
    "from_ordinal",
    # Week date
    "calendar_to_week_date",
    "week_date_to_calendar",
]
