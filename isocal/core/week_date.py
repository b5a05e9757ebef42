"""WeekDate class representing an ISO 8601 week date.

This module provides the WeekDate class: an ISO week-numbering year,
a week number and an ISO weekday.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isocal._internal.constants import DAYS_IN_WEEK
from isocal._internal.isoweek import (
    iso_weeks_in_year,
    ordinal_to_week_date,
    validate_week_date,
    week_date_to_ordinal,
)
from isocal._internal.validation import require_int
from isocal.units.weekday import Weekday

if TYPE_CHECKING:
    from isocal.core.date import CalendarDate
    from isocal.core.ordinal_day import OrdinalDay


class WeekDate:
    """A date in the ISO 8601 week-date calendar.

    Weeks run Monday to Sunday and week 1 of an ISO year is the week
    containing January 4th. An ISO year has 52 or 53 weeks, and its
    first and last days may lie in the neighbouring calendar years.

    Internal representation is the ordinal day number, shared with
    CalendarDate, so the two convert without re-validation.

    Attributes:
        iso_year: The ISO week-numbering year.
        week: The week of the ISO year (1-52 or 1-53).
        weekday: The ISO weekday (1=Monday, 7=Sunday).

    Examples:
        >>> WeekDate(2020, 53, 4).to_calendar_date()
        CalendarDate(2020, 12, 31)

        >>> WeekDate(2009, 1, 1).to_calendar_date()
        CalendarDate(2008, 12, 29)

        >>> WeekDate(2021, 53, 1)  # 2021 has 52 ISO weeks
        Traceback (most recent call last):
        ...
        isocal.errors.OutOfRangeError: week must be between 1 and 52 for ISO year 2021, got 53
    """

    __slots__ = ("_days",)

    def __init__(self, iso_year: int, week: int, weekday: int) -> None:
        """Create a WeekDate.

        Args:
            iso_year: The ISO week-numbering year. Any integer.
            week: The week number (1 to 52 or 53, depending on the year).
            weekday: The ISO weekday (1=Monday, 7=Sunday).

        Raises:
            TypeError: If any component is not an int.
            OutOfRangeError: If the week or weekday is out of range.
        """
        iso_year = require_int("iso_year", iso_year)
        week = require_int("week", week)
        weekday = require_int("weekday", weekday)
        validate_week_date(iso_year, week, weekday)

        self._days = week_date_to_ordinal(iso_year, week, weekday)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> WeekDate:
        """Create a WeekDate from an ordinal day number.

        Examples:
            >>> WeekDate.from_ordinal(1)
            WeekDate(1, 1, 1)
        """
        week_date = cls.__new__(cls)
        week_date._days = require_int("ordinal", ordinal)
        return week_date

    @classmethod
    def from_calendar_date(cls, date: CalendarDate) -> WeekDate:
        """Create the WeekDate naming the same day as ``date``."""
        return cls.from_ordinal(date.to_ordinal())

    @property
    def iso_year(self) -> int:
        """Return the ISO week-numbering year."""
        iso_year, _, _ = ordinal_to_week_date(self._days)
        return iso_year

    @property
    def week(self) -> int:
        """Return the week number."""
        _, week, _ = ordinal_to_week_date(self._days)
        return week

    @property
    def weekday(self) -> Weekday:
        """Return the ISO weekday."""
        _, _, weekday = ordinal_to_week_date(self._days)
        return Weekday(weekday)

    @property
    def weeks_in_year(self) -> int:
        """Return the number of ISO weeks in this date's ISO year."""
        return iso_weeks_in_year(self.iso_year)

    def add_weeks(self, weeks: int) -> WeekDate:
        """Return the same weekday ``weeks`` weeks later (or earlier).

        Examples:
            >>> WeekDate(2020, 53, 5).add_weeks(1)
            WeekDate(2021, 1, 5)
        """
        offset = require_int("weeks", weeks) * DAYS_IN_WEEK
        return WeekDate.from_ordinal(self._days + offset)

    def to_ordinal(self) -> int:
        """Return the ordinal day number for this week date."""
        return self._days

    def to_ordinal_day(self) -> OrdinalDay:
        """Return this week date as an OrdinalDay."""
        from isocal.core.ordinal_day import OrdinalDay

        return OrdinalDay(self._days)

    def to_calendar_date(self) -> CalendarDate:
        """Return the calendar date for this week date.

        Examples:
            >>> WeekDate(2004, 53, 6).to_calendar_date()
            CalendarDate(2005, 1, 1)
        """
        from isocal.core.date import CalendarDate

        return CalendarDate.from_ordinal(self._days)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(("WeekDate", self._days))

    def __repr__(self) -> str:
        """Return a string like 'WeekDate(2020, 53, 4)'."""
        iso_year, week, weekday = ordinal_to_week_date(self._days)
        return f"WeekDate({iso_year}, {week}, {weekday})"

    def __str__(self) -> str:
        """Return a string like '2020-W53-4'."""
        iso_year, week, weekday = ordinal_to_week_date(self._days)
        if iso_year >= 0:
            return f"{iso_year:04d}-W{week:02d}-{weekday}"
        return f"{iso_year:05d}-W{week:02d}-{weekday}"


__all__ = ["WeekDate"]
