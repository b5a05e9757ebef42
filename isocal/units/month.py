"""Month enumeration.

This module provides the Month enum, numbered from January = 1 so
that its members can be passed anywhere a month integer is expected.
"""

from __future__ import annotations

from enum import IntEnum

from isocal._internal.calendar import days_in_month
from isocal._internal.validation import require_int, validate_month


class Month(IntEnum):
    """A month of the year, January = 1 through December = 12.

    Examples:
        >>> Month.FEBRUARY.days_in(2024)
        29
        >>> Month(3)
        <Month.MARCH: 3>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> Month:
        """Return the Month for ``number``.

        Unlike ``Month(number)``, an out-of-range number raises
        OutOfRangeError rather than a bare ValueError.

        Raises:
            TypeError: If number is not an int.
            OutOfRangeError: If number is outside 1-12.

        Examples:
            >>> Month.from_number(12)
            <Month.DECEMBER: 12>
        """
        number = require_int("month", number)
        validate_month(number)
        return cls(number)

    def days_in(self, year: int) -> int:
        """Return the number of days this month has in ``year``."""
        return days_in_month(year, self.value)


__all__ = ["Month"]
