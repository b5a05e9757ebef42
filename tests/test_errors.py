"""Tests for the isocal exception hierarchy and conversion functions."""

from __future__ import annotations

import pytest

from isocal import (
    CalendarDate,
    Field,
    IsocalError,
    OrdinalDay,
    OutOfRangeError,
    WeekDate,
    calendar_to_week_date,
    from_ordinal,
    to_ordinal,
    week_date_to_calendar,
)


class TestOutOfRangeError:
    """Tests for OutOfRangeError."""

    def test_hierarchy(self) -> None:
        """Test that OutOfRangeError is an IsocalError and a ValueError."""
        assert issubclass(OutOfRangeError, IsocalError)
        assert issubclass(OutOfRangeError, ValueError)

    def test_attributes(self) -> None:
        """Test that the field and bounds are kept."""
        err = OutOfRangeError(Field.WEEK, 53, 1, 52, context="ISO year 2021")
        assert err.field is Field.WEEK
        assert err.value == 53
        assert err.minimum == 1
        assert err.maximum == 52

    def test_message(self) -> None:
        """Test message with and without context."""
        assert str(OutOfRangeError(Field.MONTH, 13, 1, 12)) == (
            "month must be between 1 and 12, got 13"
        )
        assert str(OutOfRangeError(Field.DAY, 29, 1, 28, context="2021-02")) == (
            "day must be between 1 and 28 for 2021-02, got 29"
        )

    def test_catch_as_value_error(self) -> None:
        """Test that callers can catch ValueError."""
        with pytest.raises(ValueError):
            CalendarDate(2021, 2, 29)

    def test_catch_as_base(self) -> None:
        """Test that callers can catch IsocalError."""
        with pytest.raises(IsocalError):
            WeekDate(2021, 53, 1)


class TestConvertFunctions:
    """Tests for the function forms of the conversions."""

    def test_to_and_from_ordinal(self) -> None:
        """Test to_ordinal and from_ordinal."""
        d = CalendarDate(2024, 2, 29)
        o = to_ordinal(d)
        assert isinstance(o, OrdinalDay)
        assert from_ordinal(o) == d
        assert from_ordinal(o.value) == d

    def test_week_conversions(self) -> None:
        """Test calendar_to_week_date and week_date_to_calendar."""
        w = calendar_to_week_date(CalendarDate(2005, 1, 1))
        assert w == WeekDate(2004, 53, 6)
        assert week_date_to_calendar(w) == CalendarDate(2005, 1, 1)

    def test_type_errors(self) -> None:
        """Test that wrong argument types raise TypeError."""
        with pytest.raises(TypeError, match="expected CalendarDate"):
            to_ordinal(WeekDate(2020, 1, 1))  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="expected CalendarDate"):
            calendar_to_week_date(OrdinalDay(1))  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="expected WeekDate"):
            week_date_to_calendar(CalendarDate(2020, 1, 1))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            from_ordinal("1")  # type: ignore[arg-type]
