"""YearMonth class and month/day iteration.

This module provides:
    - YearMonth: A month of a specific year, able to list its days
    - months_of_year: Iterate over a span of months in a year

Spans are half-open, like ``range``: ``start`` is included and
``stop`` is not.
"""

from __future__ import annotations

from collections.abc import Iterator

from isocal._internal.calendar import days_in_month
from isocal._internal.ordinal import ymd_to_ordinal
from isocal._internal.validation import check_range, require_int, validate_month
from isocal.core.date import CalendarDate
from isocal.errors import Field
from isocal.units.month import Month


class YearMonth:
    """A month of a particular year.

    Examples:
        >>> ym = YearMonth(2000, 2)
        >>> ym.day_count
        29
        >>> [d.day for d in ym.days(27)]
        [27, 28, 29]
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        """Create a YearMonth.

        Raises:
            TypeError: If year or month is not an int.
            OutOfRangeError: If month is outside 1-12.
        """
        year = require_int("year", year)
        month = require_int("month", month)
        validate_month(month)

        self._year = year
        self._month = month

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month as a Month member."""
        return Month(self._month)

    @property
    def day_count(self) -> int:
        """Return the number of days in this month."""
        return days_in_month(self._year, self._month)

    def day(self, day: int) -> CalendarDate:
        """Return the CalendarDate for ``day`` of this month.

        Raises:
            OutOfRangeError: If day is not in this month.
        """
        return CalendarDate(self._year, self._month, day)

    def days(self, start: int = 1, stop: int | None = None) -> Iterator[CalendarDate]:
        """Iterate over the days ``start <= day < stop`` of this month.

        Args:
            start: First day to yield.
            stop: Day to stop before. Defaults to the end of the month.

        Returns:
            An iterator of CalendarDate, one per day in the span.

        Raises:
            OutOfRangeError: If start or stop lies outside the month.

        Examples:
            >>> [str(d) for d in YearMonth(2008, 3).days(10, 13)]
            ['2008-03-10', '2008-03-11', '2008-03-12']
        """
        end = self.day_count + 1
        start = require_int("start", start)
        stop = end if stop is None else require_int("stop", stop)
        context = f"{self._year}-{self._month:02d}"
        check_range(Field.DAY, start, 1, end, context=context)
        check_range(Field.DAY, stop, 1, end, context=context)

        first = ymd_to_ordinal(self._year, self._month, 1)
        return (CalendarDate.from_ordinal(first + day - 1) for day in range(start, stop))

    def __iter__(self) -> Iterator[CalendarDate]:
        return self.days()

    def __len__(self) -> int:
        return self.day_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) == (other._year, other._month)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) < (other._year, other._month)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) <= (other._year, other._month)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) > (other._year, other._month)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self._year, self._month) >= (other._year, other._month)

    def __hash__(self) -> int:
        return hash(("YearMonth", self._year, self._month))

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"


def months_of_year(year: int, start: int = 1, stop: int = 13) -> Iterator[YearMonth]:
    """Iterate over the months ``start <= month < stop`` of ``year``.

    Args:
        year: The year.
        start: First month to yield.
        stop: Month to stop before; 13 runs through December.

    Returns:
        An iterator of YearMonth, one per month in the span.

    Raises:
        OutOfRangeError: If start or stop is outside 1-13.

    Examples:
        >>> len(list(months_of_year(1999, Month.APRIL, Month.JUNE)))
        2
        >>> sum(len(m) for m in months_of_year(2000))
        366
    """
    year = require_int("year", year)
    start = require_int("start", start)
    stop = require_int("stop", stop)
    check_range(Field.MONTH, start, 1, 13)
    check_range(Field.MONTH, stop, 1, 13)

    return (YearMonth(year, month) for month in range(start, stop))


__all__ = ["YearMonth", "months_of_year"]
