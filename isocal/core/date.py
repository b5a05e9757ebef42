"""CalendarDate class representing a calendar date.

This module provides the CalendarDate class for representing dates
in the proleptic Gregorian calendar, including year 0 and BCE years.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isocal._internal.calendar import (
    day_of_year,
    days_in_month,
    is_leap_year,
    ordinal_to_weekday,
    validate,
    year_day_to_ymd,
)
from isocal._internal.isoweek import ordinal_to_week_date
from isocal._internal.ordinal import ordinal_to_ymd, ymd_to_ordinal
from isocal._internal.validation import require_int
from isocal.units.weekday import Weekday

if TYPE_CHECKING:
    from isocal.core.ordinal_day import OrdinalDay
    from isocal.core.week_date import WeekDate
    from isocal.core.year_month import YearMonth


class CalendarDate:
    """A calendar date in the proleptic Gregorian calendar.

    CalendarDate represents a specific calendar day with year, month,
    and day components. The Gregorian rules are extended to dates before
    their adoption in 1582, and years use astronomical numbering, where
    year 0 exists and equals 1 BCE.

    Internal representation is the ordinal day number, so comparison
    and day arithmetic are plain integer operations.

    Attributes:
        year: The year (can be 0 or negative).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CalendarDate(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> CalendarDate(2024, 2, 29)  # Valid leap year date
        CalendarDate(2024, 2, 29)

        >>> CalendarDate(2018, 12, 31).to_week_date()
        WeekDate(2019, 1, 1)
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Args:
            year: The year. Any integer; year 0 = 1 BCE.
            month: The month (1-12).
            day: The day of the month.

        Raises:
            TypeError: If any component is not an int.
            OutOfRangeError: If the month or day is out of range.

        Examples:
            >>> CalendarDate(2021, 2, 29)  # 2021 is not a leap year
            Traceback (most recent call last):
            ...
            isocal.errors.OutOfRangeError: day must be between 1 and 28 for 2021-02, got 29
        """
        year = require_int("year", year)
        month = require_int("month", month)
        day = require_int("day", day)
        validate(year, month, day)

        self._days = ymd_to_ordinal(year, month, day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CalendarDate:
        """Create a CalendarDate from an ordinal day number.

        Every integer names a date, so this never fails for an int.

        Args:
            ordinal: The ordinal day number (1 = 0001-01-01).

        Returns:
            The corresponding CalendarDate.

        Examples:
            >>> CalendarDate.from_ordinal(1)
            CalendarDate(1, 1, 1)

            >>> CalendarDate.from_ordinal(738900)
            CalendarDate(2024, 1, 15)
        """
        date = cls.__new__(cls)
        date._days = require_int("ordinal", ordinal)
        return date

    @classmethod
    def from_year_day(cls, year: int, day_of_year: int) -> CalendarDate:
        """Create a CalendarDate from a year and a 1-based day of the year.

        Args:
            year: The year.
            day_of_year: Day of the year (1-365, or 1-366 in leap years).

        Returns:
            The corresponding CalendarDate.

        Raises:
            OutOfRangeError: If day_of_year is outside the year.

        Examples:
            >>> CalendarDate.from_year_day(2015, 256)
            CalendarDate(2015, 9, 13)
            >>> CalendarDate.from_year_day(2016, 268)  # Leap year
            CalendarDate(2016, 9, 24)
        """
        year = require_int("year", year)
        day_of_year = require_int("day_of_year", day_of_year)
        y, m, d = year_day_to_ymd(year, day_of_year)
        return cls.from_ordinal(ymd_to_ordinal(y, m, d))

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = ordinal_to_ymd(self._days)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = ordinal_to_ymd(self._days)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = ordinal_to_ymd(self._days)
        return day

    @property
    def day_of_week(self) -> int:
        """Return the ISO day of the week.

        Returns:
            Day of week (1=Monday, 7=Sunday).

        Examples:
            >>> CalendarDate(2024, 1, 15).day_of_week  # Monday
            1
            >>> CalendarDate(2024, 1, 21).day_of_week  # Sunday
            7
        """
        return ordinal_to_weekday(self._days)

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week as a Weekday."""
        return Weekday(ordinal_to_weekday(self._days))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year.

        Returns:
            Day of year (1-366).

        Examples:
            >>> CalendarDate(2024, 12, 31).day_of_year  # Leap year
            366
            >>> CalendarDate(2023, 12, 31).day_of_year
            365
        """
        return day_of_year(*ordinal_to_ymd(self._days))

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        year, month, _ = ordinal_to_ymd(self._days)
        return days_in_month(year, month)

    @property
    def iso_year(self) -> int:
        """Return the ISO week-numbering year.

        Differs from ``year`` for some days in late December and early
        January.

        Examples:
            >>> CalendarDate(2005, 1, 1).iso_year
            2004
        """
        iso_year, _, _ = ordinal_to_week_date(self._days)
        return iso_year

    @property
    def iso_week(self) -> int:
        """Return the ISO week number (1-53)."""
        _, week, _ = ordinal_to_week_date(self._days)
        return week

    def year_month(self) -> YearMonth:
        """Return the YearMonth containing this date."""
        from isocal.core.year_month import YearMonth

        year, month, _ = ordinal_to_ymd(self._days)
        return YearMonth(year, month)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> CalendarDate:
        """Return a new CalendarDate with specified components replaced.

        Any unspecified components retain their current values.

        Raises:
            OutOfRangeError: If the resulting date is invalid.

        Examples:
            >>> CalendarDate(2024, 1, 15).replace(month=6)
            CalendarDate(2024, 6, 15)
        """
        y, m, d = ordinal_to_ymd(self._days)
        new_year = year if year is not None else y
        new_month = month if month is not None else m
        new_day = day if day is not None else d
        return CalendarDate(new_year, new_month, new_day)

    def add_days(self, days: int) -> CalendarDate:
        """Return a new CalendarDate offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new CalendarDate offset by the specified days.

        Examples:
            >>> CalendarDate(2024, 1, 15).add_days(10)
            CalendarDate(2024, 1, 25)

            >>> CalendarDate(2024, 1, 15).add_days(-20)
            CalendarDate(2023, 12, 26)
        """
        return CalendarDate.from_ordinal(self._days + require_int("days", days))

    def to_ordinal(self) -> int:
        """Return the ordinal day number for this date.

        Examples:
            >>> CalendarDate(1, 1, 1).to_ordinal()
            1
            >>> CalendarDate(2024, 1, 15).to_ordinal()
            738900
        """
        return self._days

    def to_ordinal_day(self) -> OrdinalDay:
        """Return this date as an OrdinalDay."""
        from isocal.core.ordinal_day import OrdinalDay

        return OrdinalDay(self._days)

    def to_week_date(self) -> WeekDate:
        """Return the ISO week date for this date.

        Late-December dates may fall in week 1 of the next ISO year, and
        early-January dates in the last week of the previous one.

        Examples:
            >>> CalendarDate(2005, 1, 1).to_week_date()
            WeekDate(2004, 53, 6)
        """
        from isocal.core.week_date import WeekDate

        return WeekDate.from_ordinal(self._days)

    def __sub__(self, other: object) -> int:
        """Return the signed number of days between two dates.

        Examples:
            >>> CalendarDate(2024, 3, 1) - CalendarDate(2024, 2, 1)
            29
        """
        if not isinstance(other, CalendarDate):
            return NotImplemented  # type: ignore[return-value]
        return self._days - other._days

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> CalendarDate(2024, 1, 15) == CalendarDate(2024, 1, 15)
            True
        """
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        """Return a hash based on the ordinal day number."""
        return hash(self._days)

    def __repr__(self) -> str:
        """Return a string like 'CalendarDate(2024, 1, 15)'."""
        year, month, day = ordinal_to_ymd(self._days)
        return f"CalendarDate({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return a string like '2024-01-15' (or '-0044-03-15' for BCE)."""
        year, month, day = ordinal_to_ymd(self._days)
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"{year:05d}-{month:02d}-{day:02d}"


__all__ = ["CalendarDate"]
