"""OrdinalDay class representing a day on a continuous day count.

This module provides the OrdinalDay class, the neutral interchange
value between calendar dates and ISO week dates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isocal._internal.calendar import ordinal_to_weekday
from isocal._internal.validation import require_int
from isocal.units.weekday import Weekday

if TYPE_CHECKING:
    from isocal.core.date import CalendarDate
    from isocal.core.week_date import WeekDate


class OrdinalDay:
    """A signed count of days in the proleptic Gregorian calendar.

    Ordinal 1 is 0001-01-01 (a Monday), ordinal 0 is 0000-12-31, and
    earlier days are negative. Every integer is a valid OrdinalDay, so
    construction only fails on a non-integer argument.

    Ordering and differencing OrdinalDays is the authoritative way to
    order or difference any two dates.

    Attributes:
        value: The day number.

    Examples:
        >>> OrdinalDay(1).to_calendar_date()
        CalendarDate(1, 1, 1)
        >>> OrdinalDay(738900) - OrdinalDay(738886)
        14
        >>> OrdinalDay(738886) + 7
        OrdinalDay(738893)
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        """Create an OrdinalDay.

        Args:
            value: The day number.

        Raises:
            TypeError: If value is not an int.
        """
        self._value = require_int("value", value)

    @classmethod
    def from_calendar_date(cls, date: CalendarDate) -> OrdinalDay:
        """Return the OrdinalDay of a CalendarDate."""
        return cls(date.to_ordinal())

    @classmethod
    def from_week_date(cls, week_date: WeekDate) -> OrdinalDay:
        """Return the OrdinalDay of a WeekDate."""
        return cls(week_date.to_ordinal())

    @property
    def value(self) -> int:
        """Return the day number."""
        return self._value

    @property
    def weekday(self) -> Weekday:
        """Return the ISO weekday of this day."""
        return Weekday(ordinal_to_weekday(self._value))

    def to_calendar_date(self) -> CalendarDate:
        """Convert to a CalendarDate.

        Returns:
            The calendar date for this day. Never fails.

        Examples:
            >>> OrdinalDay(0).to_calendar_date()
            CalendarDate(0, 12, 31)
        """
        from isocal.core.date import CalendarDate

        return CalendarDate.from_ordinal(self._value)

    def to_week_date(self) -> WeekDate:
        """Convert to a WeekDate.

        Returns:
            The ISO week date for this day. Never fails.
        """
        from isocal.core.week_date import WeekDate

        return WeekDate.from_ordinal(self._value)

    def __int__(self) -> int:
        return self._value

    def __add__(self, other: object) -> OrdinalDay:
        """Return the day ``other`` days later."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return OrdinalDay(self._value + other)

    __radd__ = __add__

    def __sub__(self, other: object) -> OrdinalDay | int:
        """Subtract a day count or another OrdinalDay.

        Subtracting an int returns an earlier OrdinalDay; subtracting an
        OrdinalDay returns the signed number of days between them.
        """
        if isinstance(other, OrdinalDay):
            return self._value - other._value
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return OrdinalDay(self._value - other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrdinalDay):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OrdinalDay):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OrdinalDay):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OrdinalDay):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OrdinalDay):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(("OrdinalDay", self._value))

    def __repr__(self) -> str:
        return f"OrdinalDay({self._value})"


__all__ = ["OrdinalDay"]
