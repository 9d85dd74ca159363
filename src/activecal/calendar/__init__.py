# src/activecal/calendar/__init__.py
"""
activecal.calendar
~~~~~~~~~~~~~~~~~~

Per-year active/inactive day calendars.  Each month is a single integer
bitmask: bit ``k`` set means day ``k + 1`` is active.  Month indices are
0-based (January = 0).

Basic usage::

    from activecal.calendar import CalendarBuilder, MonthIndex

    builder = (
        CalendarBuilder()
        .init_year_weekends_inactive(2024)
        .set_day_inactive(2024, MonthIndex.DECEMBER, 25)
    )
    cal = builder.build(2024)
    cal.is_active(MonthIndex.DECEMBER, 24)     # → True
    cal.is_active(MonthIndex.DECEMBER, 25)     # → False

Snapshots round-trip through JSON::

    text = builder.dumps()                     # '{"2024":[...12 masks...]}'
    same = CalendarBuilder.loads(text)

Public API
----------
Calendar               One year of month bitmasks.
CalendarBuilder        Fluent, year-ordered collection of calendars.
MonthIndex, Polarity   Enumerations used by the mask helpers.
days_in_month, day_mask, all_active_mask, weekend_days
                       Mask arithmetic.
CalendarError          Base exception for all calendar-related errors.
"""

from __future__ import annotations

from activecal.calendar._exceptions import (
    CalendarError,
    DuplicateYearError,
    InvalidArgumentError,
    InvalidRangeError,
    UnspecifiedMonthError,
)
from activecal.calendar.builder import CalendarBuilder
from activecal.calendar.calendar import Calendar
from activecal.calendar.masks import (
    MonthIndex,
    Polarity,
    all_active_mask,
    day_mask,
    days_in_month,
    weekend_days,
)

__all__ = [
    "Calendar",
    "CalendarBuilder",
    "CalendarError",
    "DuplicateYearError",
    "InvalidArgumentError",
    "InvalidRangeError",
    "MonthIndex",
    "Polarity",
    "UnspecifiedMonthError",
    "all_active_mask",
    "day_mask",
    "days_in_month",
    "weekend_days",
]
