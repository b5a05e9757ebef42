"""Validation utilities for isocal.

This module provides the checks run once when a date value is
constructed. Conversions between already-valid values never call
back into here.

This module is not part of the public API.
"""

from __future__ import annotations

from isocal.errors import Field, OutOfRangeError


def require_int(name: str, value: object) -> int:
    """Return ``value`` if it is an integer, otherwise raise TypeError.

    ``bool`` is rejected even though it subclasses ``int``. Integer
    enums such as Month and Weekday are accepted and returned as
    plain ints.

    Args:
        name: Parameter name used in the error message.
        value: The value to check.

    Returns:
        The value as a plain int.

    Raises:
        TypeError: If value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return int(value)


def check_range(
    field: Field,
    value: int,
    minimum: int,
    maximum: int,
    context: str | None = None,
) -> None:
    """Raise OutOfRangeError unless ``minimum <= value <= maximum``."""
    if value < minimum or value > maximum:
        raise OutOfRangeError(field, value, minimum, maximum, context)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        OutOfRangeError: If month is outside 1-12.
    """
    check_range(Field.MONTH, month, 1, 12)


def validate_weekday(weekday: int) -> None:
    """Validate that an ISO weekday is within 1-7.

    Args:
        weekday: The weekday to validate (1=Monday, 7=Sunday).

    Raises:
        OutOfRangeError: If weekday is outside 1-7.
    """
    check_range(Field.WEEKDAY, weekday, 1, 7)


__all__ = [
    "require_int",
    "check_range",
    "validate_month",
    "validate_weekday",
]
