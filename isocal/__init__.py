"""isocal: exact Gregorian, ISO week-date and ordinal-day conversion.

isocal maps between three representations of the same day in the
proleptic Gregorian calendar, with no year limits and in constant
time per conversion.

Core Types:
    CalendarDate: Calendar date (year, month, day)
    WeekDate: ISO 8601 week date (ISO year, week, weekday)
    OrdinalDay: Signed day count, 1 = 0001-01-01
    YearMonth: A month of a specific year, iterable by day

Units:
    Month: JANUARY=1 .. DECEMBER=12
    Weekday: MONDAY=1 .. SUNDAY=7

Query Functions:
    is_leap_year, days_in_month, days_in_year,
    day_of_week, day_of_year, iso_weeks_in_year

Conversion Functions:
    to_ordinal, from_ordinal, calendar_to_week_date, week_date_to_calendar

Exceptions:
    IsocalError: Base exception
    OutOfRangeError: A date field is outside its valid range

Example:
    >>> from isocal import CalendarDate, WeekDate
    >>> CalendarDate(2018, 12, 31).to_week_date()
    WeekDate(2019, 1, 1)
    >>> WeekDate(2020, 53, 4).to_calendar_date()
    CalendarDate(2020, 12, 31)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from isocal.core.date import CalendarDate
from isocal.core.ordinal_day import OrdinalDay
from isocal.core.week_date import WeekDate
from isocal.core.year_month import YearMonth, months_of_year

# Units
from isocal.units.month import Month
from isocal.units.weekday import Weekday

# Exceptions
from isocal.errors import Field, IsocalError, OutOfRangeError

# Query functions
from isocal.calendar import (
    day_of_week,
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year,
    iso_weeks_in_year,
)

# Conversion functions
from isocal.convert import (
    calendar_to_week_date,
    from_ordinal,
    to_ordinal,
    week_date_to_calendar,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "OrdinalDay",
    "WeekDate",
    "YearMonth",
    "months_of_year",
    # Units
    "Month",
    "Weekday",
    # Exceptions
    "Field",
    "IsocalError",
    "OutOfRangeError",
    # Query functions
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_week",
    "day_of_year",
    "iso_weeks_in_year",
    # Conversion functions
    "to_ordinal",
    "from_ordinal",
    "calendar_to_week_date",
    "week_date_to_calendar",
]
