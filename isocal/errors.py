"""isocal exception hierarchy.

All isocal-specific exceptions inherit from IsocalError.
"""

from __future__ import annotations

from enum import Enum


class Field(Enum):
    """The date field that failed validation."""

    MONTH = "month"
    DAY = "day"
    DAY_OF_YEAR = "day_of_year"
    WEEK = "week"
    WEEKDAY = "weekday"


class IsocalError(Exception):
    """Base exception for all isocal errors."""

    pass


class OutOfRangeError(IsocalError, ValueError):
    """A date field is outside its valid range.

    Raised when a value is constructed from integer fields that do not
    name a real date. The offending field and its inclusive bounds are
    kept on the exception so callers can report them in their own terms.

    Attributes:
        field: Which field failed.
        value: The rejected value.
        minimum: Smallest accepted value (inclusive).
        maximum: Largest accepted value (inclusive).

    Examples:
        - Month value outside 1-12
        - Day 29 in February of a common year
        - Week 53 in a year with 52 ISO weeks
    """

    def __init__(
        self,
        field: Field,
        value: int,
        minimum: int,
        maximum: int,
        context: str | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum

        message = f"{field.value} must be between {minimum} and {maximum}"
        if context:
            message += f" for {context}"
        message += f", got {value}"
        super().__init__(message)


__all__ = [
    "Field",
    "IsocalError",
    "OutOfRangeError",
]
