"""ISO 8601 week-date arithmetic for isocal.

An ISO week runs Monday (1) to Sunday (7). Week 1 of an ISO year is
the week containing January 4th, which is the same as the week
containing the year's first Thursday. A week belongs to the ISO year
in which its Thursday falls, so the last days of December can belong
to week 1 of the next ISO year, and the first days of January to the
last week of the previous one.

All functions here work on plain ints and route through the ordinal
day number.

This module is not part of the public API.
"""

from __future__ import annotations

from isocal._internal.calendar import ordinal_to_weekday
from isocal._internal.constants import DAYS_IN_WEEK, ISO_WEEK_ANCHOR_DAY, THURSDAY
from isocal._internal.ordinal import days_before_year, ordinal_to_ymd, ymd_to_ordinal
from isocal._internal.validation import check_range, validate_weekday
from isocal.errors import Field


def iso_week_one_monday(iso_year: int) -> int:
    """Return the ordinal of the Monday that starts week 1 of ``iso_year``.

    Examples:
        >>> from isocal._internal.ordinal import ordinal_to_ymd
        >>> ordinal_to_ymd(iso_week_one_monday(2009))
        (2008, 12, 29)
    """
    anchor = ymd_to_ordinal(iso_year, 1, ISO_WEEK_ANCHOR_DAY)
    return anchor - (ordinal_to_weekday(anchor) - 1)


def iso_weeks_in_year(iso_year: int) -> int:
    """Return the number of ISO weeks in ``iso_year`` (52 or 53).

    Counted as the distance between consecutive week-1 Mondays, so it
    follows directly from the January 4th rule. A year comes out with
    53 weeks exactly when January 1st is a Thursday, or when it is a
    leap year and January 1st is a Wednesday.

    Examples:
        >>> iso_weeks_in_year(2020)
        53
        >>> iso_weeks_in_year(2021)
        52
    """
    span = iso_week_one_monday(iso_year + 1) - iso_week_one_monday(iso_year)
    return span // DAYS_IN_WEEK


def validate_week_date(iso_year: int, week: int, weekday: int) -> None:
    """Validate that iso_year, week, weekday form a valid ISO week date.

    Args:
        iso_year: The ISO week-numbering year. Every integer is accepted.
        week: The week to validate.
        weekday: The weekday to validate (1=Monday, 7=Sunday).

    Raises:
        OutOfRangeError: If week or weekday is invalid.
    """
    validate_weekday(weekday)
    check_range(
        Field.WEEK, week, 1, iso_weeks_in_year(iso_year), context=f"ISO year {iso_year}"
    )


def week_date_to_ordinal(iso_year: int, week: int, weekday: int) -> int:
    """Convert a valid ISO week date to an ordinal day number."""
    return (
        iso_week_one_monday(iso_year)
        + (week - 1) * DAYS_IN_WEEK
        + (weekday - 1)
    )


def ordinal_to_week_date(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to (iso_year, week, weekday).

    The Thursday of the same ISO week decides the ISO year; the week
    number is how many whole weeks that Thursday lies after January 1st
    of its own year, plus one.

    Examples:
        >>> from isocal._internal.ordinal import ymd_to_ordinal
        >>> ordinal_to_week_date(ymd_to_ordinal(2018, 12, 31))
        (2019, 1, 1)
        >>> ordinal_to_week_date(ymd_to_ordinal(2005, 1, 1))
        (2004, 53, 6)
    """
    weekday = ordinal_to_weekday(ordinal)
    thursday = ordinal + (THURSDAY - weekday)
    iso_year, _, _ = ordinal_to_ymd(thursday)
    week = (thursday - days_before_year(iso_year) - 1) // DAYS_IN_WEEK + 1
    return (iso_year, week, weekday)


def week_date_to_ymd(iso_year: int, week: int, weekday: int) -> tuple[int, int, int]:
    """Convert a valid ISO week date to (year, month, day).

    Examples:
        >>> week_date_to_ymd(2020, 53, 4)
        (2020, 12, 31)
    """
    return ordinal_to_ymd(week_date_to_ordinal(iso_year, week, weekday))


def ymd_to_week_date(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Convert a valid (year, month, day) to (iso_year, week, weekday).

    Examples:
        >>> ymd_to_week_date(2016, 1, 4)
        (2016, 1, 1)
    """
    return ordinal_to_week_date(ymd_to_ordinal(year, month, day))


__all__ = [
    "iso_week_one_monday",
    "iso_weeks_in_year",
    "validate_week_date",
    "week_date_to_ordinal",
    "ordinal_to_week_date",
    "week_date_to_ymd",
    "ymd_to_week_date",
]
