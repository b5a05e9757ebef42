"""Core date value types.

This module provides the fundamental date types:
    - CalendarDate: Date in the proleptic Gregorian calendar
    - WeekDate: ISO 8601 week date (ISO year, week, weekday)
    - OrdinalDay: Signed day count, 1 = 0001-01-01
    - YearMonth: A month of a specific year
"""

from __future__ import annotations

from isocal.core.date import CalendarDate
from isocal.core.ordinal_day import OrdinalDay
from isocal.core.week_date import WeekDate
from isocal.core.year_month import YearMonth, months_of_year

__all__: list[str] = [
    "CalendarDate",
    "OrdinalDay",
    "WeekDate",
    "YearMonth",
    "months_of_year",
]
