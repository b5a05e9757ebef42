"""Tests for isocal package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_isocal() -> None:
    """Import isocal package succeeds."""
    import isocal

    assert hasattr(isocal, "__version__")
    assert isocal.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import isocal.core submodule succeeds."""
    from isocal import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import isocal.units submodule succeeds."""
    from isocal import units

    assert hasattr(units, "__all__")


def test_import_convert_module() -> None:
    """Import isocal.convert submodule succeeds."""
    from isocal import convert

    assert hasattr(convert, "__all__")


def test_public_names_resolve() -> None:
    """Every name in isocal.__all__ is an attribute of the package."""
    import isocal

    for name in isocal.__all__:
        assert hasattr(isocal, name), name


def test_internal_layers_importable() -> None:
    """The private arithmetic layers import on their own."""
    from isocal._internal import calendar, isoweek, ordinal

    assert ordinal.ymd_to_ordinal(1, 1, 1) == 1
    assert calendar.is_leap_year(2000)
    assert isoweek.iso_weeks_in_year(2020) == 53


def test_internal_reexports() -> None:
    """isocal._internal re-exports exactly the validation helpers."""
    from isocal import _internal
    from isocal._internal import validation

    assert sorted(_internal.__all__) == sorted(validation.__all__)
    for name in _internal.__all__:
        assert getattr(_internal, name) is getattr(validation, name)


def test_value_type_properties_documented() -> None:
    """Every public property of the value types has a docstring."""
    from isocal import CalendarDate, OrdinalDay, WeekDate, YearMonth

    for cls in (CalendarDate, WeekDate, OrdinalDay, YearMonth):
        for name, attr in vars(cls).items():
            if isinstance(attr, property) and not name.startswith("_"):
                assert attr.__doc__, f"{cls.__name__}.{name}"


def test_day_iterators_are_iterators() -> None:
    """YearMonth.days() and months_of_year() return Iterator objects."""
    from collections.abc import Iterator

    from isocal import YearMonth, months_of_year

    assert isinstance(YearMonth(2024, 2).days(), Iterator)
    assert isinstance(months_of_year(2024), Iterator)
