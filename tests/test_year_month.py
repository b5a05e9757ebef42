"""Tests for YearMonth and month/day iteration."""

from __future__ import annotations

import pytest

from isocal import CalendarDate, Field, Month, OutOfRangeError, YearMonth, months_of_year


class TestMonthsOfYear:
    """Tests for months_of_year()."""

    def test_full_year(self) -> None:
        """Test iterating every month."""
        months = list(months_of_year(2013))
        assert months == [YearMonth(2013, m) for m in range(1, 13)]

    def test_from(self) -> None:
        """Test starting part way through the year."""
        months = list(months_of_year(2013, Month.JULY))
        assert [m.month for m in months] == [
            Month.JULY,
            Month.AUGUST,
            Month.SEPTEMBER,
            Month.OCTOBER,
            Month.NOVEMBER,
            Month.DECEMBER,
        ]

    def test_to(self) -> None:
        """Test stopping before a month."""
        months = list(months_of_year(2013, stop=Month.JULY))
        assert len(months) == 6
        assert months[-1].month is Month.JUNE

    def test_range(self) -> None:
        """Test a half-open span."""
        months = list(months_of_year(2013, Month.APRIL, Month.JULY))
        assert [m.month for m in months] == [Month.APRIL, Month.MAY, Month.JUNE]

    def test_empty(self) -> None:
        """Test an empty span."""
        assert list(months_of_year(2013, Month.AUGUST, Month.AUGUST)) == []

    def test_invalid_bounds(self) -> None:
        """Test that bounds outside 1-13 are rejected immediately."""
        with pytest.raises(OutOfRangeError) as exc:
            months_of_year(2013, 0)
        assert exc.value.field is Field.MONTH
        with pytest.raises(OutOfRangeError):
            months_of_year(2013, 1, 14)


class TestYearMonthDays:
    """Tests for YearMonth.days() and friends."""

    def test_february(self) -> None:
        """Test February in a common year."""
        days = list(YearMonth(2013, Month.FEBRUARY).days())
        assert days == [CalendarDate(2013, 2, d) for d in range(1, 29)]

    def test_february_leap_year(self) -> None:
        """Test February in a leap year."""
        days = list(YearMonth(2000, Month.FEBRUARY))
        assert days == [CalendarDate(2000, 2, d) for d in range(1, 30)]

    def test_span(self) -> None:
        """Test a half-open span of days."""
        days = list(YearMonth(2008, Month.MARCH).days(10, 20))
        assert days == [CalendarDate(2008, 3, d) for d in range(10, 20)]

    def test_single_day(self) -> None:
        """Test YearMonth.day()."""
        assert YearMonth(1066, Month.OCTOBER).day(14) == CalendarDate(1066, 10, 14)
        with pytest.raises(OutOfRangeError):
            YearMonth(2013, Month.FEBRUARY).day(29)

    def test_invalid_span(self) -> None:
        """Test that spans past the month end are rejected immediately."""
        with pytest.raises(OutOfRangeError) as exc:
            YearMonth(2013, Month.FEBRUARY).days(1, 30)
        assert exc.value.field is Field.DAY
        with pytest.raises(OutOfRangeError):
            YearMonth(2013, Month.FEBRUARY).days(0)

    def test_entire_year(self) -> None:
        """Test counting the days of whole years."""
        assert sum(1 for m in months_of_year(1999) for _ in m) == 365
        assert sum(1 for m in months_of_year(2000) for _ in m) == 366

    def test_days_are_consecutive(self) -> None:
        """Test that iterated days of a year are consecutive."""
        days = [d for m in months_of_year(2024) for d in m]
        for earlier, later in zip(days, days[1:]):
            assert later - earlier == 1


class TestYearMonth:
    """Tests for YearMonth construction and value behaviour."""

    def test_fields(self) -> None:
        """Test field access."""
        ym = YearMonth(2024, 2)
        assert ym.year == 2024
        assert ym.month is Month.FEBRUARY
        assert ym.day_count == 29
        assert len(ym) == 29

    def test_invalid_month(self) -> None:
        """Test that month 13 is rejected."""
        with pytest.raises(OutOfRangeError, match="month must be between 1 and 12"):
            YearMonth(2024, 13)

    def test_equality_ordering_hash(self) -> None:
        """Test equality, ordering and hashing."""
        assert YearMonth(2024, 2) == YearMonth(2024, Month.FEBRUARY)
        assert YearMonth(2023, 12) < YearMonth(2024, 1)
        assert YearMonth(2023, 12) <= YearMonth(2024, 1)
        assert YearMonth(2024, 1) <= YearMonth(2024, 1)
        assert YearMonth(2024, 1) > YearMonth(2023, 12)
        assert YearMonth(2024, 1) >= YearMonth(2024, 1)
        assert not YearMonth(2024, 2) <= YearMonth(2024, 1)
        assert max(YearMonth(2023, 12), YearMonth(2024, 1), YearMonth(-5, 6)) == YearMonth(
            2024, 1
        )
        assert sorted([YearMonth(2024, 3), YearMonth(2023, 11), YearMonth(2024, 1)]) == [
            YearMonth(2023, 11),
            YearMonth(2024, 1),
            YearMonth(2024, 3),
        ]
        assert len({YearMonth(2024, 2), YearMonth(2024, 2)}) == 1

    def test_ordering_with_other_types(self) -> None:
        """Test that ordering against a non-YearMonth raises TypeError."""
        with pytest.raises(TypeError):
            YearMonth(2024, 1) <= CalendarDate(2024, 1, 1)  # type: ignore[operator]
        with pytest.raises(TypeError):
            YearMonth(2024, 1) >= 202401  # type: ignore[operator]

    def test_repr(self) -> None:
        """Test repr."""
        assert repr(YearMonth(2024, 2)) == "YearMonth(2024, 2)"
