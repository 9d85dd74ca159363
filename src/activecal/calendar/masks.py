"""
Month bitmask arithmetic.

A month's active days are encoded in a single integer: bit ``k`` (0-indexed)
set means calendar day ``k + 1`` is active.  Month indices are 0-based
(January = 0).
"""

from __future__ import annotations

import calendar
from datetime import date
from enum import Enum, IntEnum

import numpy as np

from ._exceptions import InvalidArgumentError

MONTHS_PER_YEAR: int = 12
DEFAULT_WEEKMASK: str = "1111100"


class Polarity(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class MonthIndex(IntEnum):
    JANUARY = 0
    FEBRUARY = 1
    MARCH = 2
    APRIL = 3
    MAY = 4
    JUNE = 5
    JULY = 6
    AUGUST = 7
    SEPTEMBER = 8
    OCTOBER = 9
    NOVEMBER = 10
    DECEMBER = 11


def check_month_index(month_index: int) -> int:
    if isinstance(month_index, bool) or not isinstance(month_index, (int, np.integer)):
        raise InvalidArgumentError("month index", month_index, "expected an integer")
    if month_index < 0 or month_index >= MONTHS_PER_YEAR:
        raise InvalidArgumentError("month index", month_index, "expected 0..11")
    return int(month_index)


def days_in_month(year: int, month_index: int) -> int:
    """Number of days in the 0-based ``month_index`` of ``year``."""
    month_index = check_month_index(month_index)
    return calendar.monthrange(year, month_index + 1)[1]


def check_day(year: int, month_index: int, day: int) -> int:
    n_days = days_in_month(year, month_index)
    if isinstance(day, bool) or not isinstance(day, (int, np.integer)):
        raise InvalidArgumentError("day", day, "expected an integer")
    if day < 1 or day > n_days:
        raise InvalidArgumentError("day", day, f"expected 1..{n_days}")
    return int(day)


def all_active_mask(year: int, month_index: int) -> int:
    return (1 << days_in_month(year, month_index)) - 1


def day_mask(
    year: int,
    month_index: int,
    day: int,
    polarity: Polarity = Polarity.ACTIVE,
) -> int:
    """
    Bitmask isolating ``day`` within the month.

    ACTIVE   -> only bit ``day - 1`` set (OR it in to activate the day).
    INACTIVE -> every in-month bit set except ``day - 1`` (AND it in to
                deactivate the day while keeping the others).
    """
    day = check_day(year, month_index, day)
    bit = 1 << (day - 1)
    if polarity is Polarity.ACTIVE:
        return bit
    return all_active_mask(year, month_index) ^ bit


def apply_day_mask(current: int | None, mask: int, polarity: Polarity) -> int:
    # An unset month takes the mask as is.
    if current is None:
        return mask
    if polarity is Polarity.ACTIVE:
        return current | mask
    return current & mask


def weekend_days(
    year: int,
    month_index: int,
    weekmask: str = DEFAULT_WEEKMASK,
) -> list[int]:
    """1-based days of the month that ``weekmask`` marks as non-working."""
    n_days = days_in_month(year, month_index)
    try:
        first = np.datetime64(date(year, month_index + 1, 1), "D")
    except ValueError as exc:
        raise InvalidArgumentError("year", year, str(exc)) from exc
    days = first + np.arange(n_days)
    off = ~np.is_busday(days, weekmask=weekmask)
    return [int(i) + 1 for i in np.flatnonzero(off)]
