"""Weekday enumeration.

This module provides the Weekday enum using ISO 8601 numbering,
Monday = 1 through Sunday = 7.
"""

from __future__ import annotations

from enum import IntEnum

from isocal._internal.validation import require_int, validate_weekday


class Weekday(IntEnum):
    """A day of the week in ISO 8601 numbering.

    Examples:
        >>> Weekday.THURSDAY
        <Weekday.THURSDAY: 4>
        >>> Weekday(7).is_weekend
        True
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_number(cls, number: int) -> Weekday:
        """Return the Weekday for an ISO weekday number.

        Raises:
            TypeError: If number is not an int.
            OutOfRangeError: If number is outside 1-7.
        """
        number = require_int("weekday", number)
        validate_weekday(number)
        return cls(number)

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= Weekday.SATURDAY


__all__ = ["Weekday"]
