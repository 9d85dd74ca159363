"""
activecal
~~~~~~~~~

Business-day style calendars encoded as one bitmask per month.
See :mod:`activecal.calendar` for usage.
"""

from __future__ import annotations

from activecal.calendar import (
    Calendar,
    CalendarBuilder,
    CalendarError,
    DuplicateYearError,
    InvalidArgumentError,
    InvalidRangeError,
    MonthIndex,
    Polarity,
    UnspecifiedMonthError,
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
