"""
tests/calendar/test_exceptions.py

Covers:
  - Exception hierarchy (CalendarError base, builtin bases)
  - Attributes and messages carried by each exception
  - Top-level package re-exports
"""

import pytest

import activecal
from activecal.calendar import (
    CalendarError,
    DuplicateYearError,
    InvalidArgumentError,
    InvalidRangeError,
    UnspecifiedMonthError,
)


class TestHierarchy:

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidArgumentError("day", 0),
            InvalidRangeError(5, 1),
            UnspecifiedMonthError(2024, 3),
            DuplicateYearError(2024),
        ],
    )
    def test_all_are_calendar_errors(self, exc):
        assert isinstance(exc, CalendarError)

    def test_value_errors(self):
        assert isinstance(InvalidArgumentError("day", 0), ValueError)
        assert isinstance(InvalidRangeError(5, 1), ValueError)

    def test_unspecified_month_is_lookup_error(self):
        assert isinstance(UnspecifiedMonthError(2024, 3), LookupError)


class TestMessages:

    def test_invalid_argument(self):
        err = InvalidArgumentError("month index", 12, "expected 0..11")
        assert err.name == "month index"
        assert err.value == 12
        assert str(err) == "Invalid month index: 12 (expected 0..11)"

    def test_invalid_argument_without_detail(self):
        assert str(InvalidArgumentError("day", 0)) == "Invalid day: 0"

    def test_invalid_range(self):
        err = InvalidRangeError(10, 5)
        assert "10" in str(err) and "5" in str(err)

    def test_unspecified_month(self):
        err = UnspecifiedMonthError(2024, 3)
        assert "month index 3" in str(err)
        assert "2024" in str(err)

    def test_duplicate_year(self):
        err = DuplicateYearError(2021)
        assert err.year == 2021
        assert "2021" in str(err)


class TestPackageExports:

    def test_top_level_names(self):
        for name in activecal.__all__:
            assert hasattr(activecal, name)

    def test_same_objects(self):
        from activecal.calendar import CalendarBuilder

        assert activecal.CalendarBuilder is CalendarBuilder
        assert activecal.MonthIndex.DECEMBER == 11
