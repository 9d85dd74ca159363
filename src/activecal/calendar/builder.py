from __future__ import annotations

import json
import threading
from datetime import date
from typing import Any, Iterator, Mapping

import numpy as np
from loguru import logger

from ._exceptions import DuplicateYearError, InvalidArgumentError, InvalidRangeError
from .calendar import Calendar, MonthMasks
from .masks import (
    DEFAULT_WEEKMASK,
    MONTHS_PER_YEAR,
    Polarity,
    all_active_mask,
    apply_day_mask,
    check_month_index,
    day_mask,
    weekend_days,
)


class CalendarBuilder:
    """
    Fluent builder over a set of per-year calendars.

    Calendars are unique by year and always kept in ascending year order.
    Every mutating method returns the builder so calls can be chained::

        builder = (
            CalendarBuilder()
            .init_year_weekends_inactive(2024)
            .set_day_inactive(2024, MonthIndex.DECEMBER, 25)
        )
    """

    _DEFAULT_WEEKMASK: str = DEFAULT_WEEKMASK

    def __init__(self, weekmask: str | None = None) -> None:
        weekmask = self._DEFAULT_WEEKMASK if weekmask is None else weekmask
        try:
            np.busdaycalendar(weekmask=weekmask)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("weekmask", weekmask, str(exc)) from exc
        self._weekmask: str = weekmask
        self._calendars: list[Calendar] = []
        self._lock = threading.RLock()

    # ── lookup ───────────────────────────────────────────────────────────

    def _find(self, year: int) -> Calendar | None:
        for cal in self._calendars:
            if cal.year == year:
                return cal
        return None

    def _insert(self, calendar: Calendar) -> None:
        self._calendars.append(calendar)
        self._calendars.sort(key=lambda c: c.year)

    def get_or_create(self, year: int) -> Calendar:
        with self._lock:
            cal = self._find(int(year))
            if cal is None:
                cal = Calendar(year)
                self._insert(cal)
                logger.debug(f"Created calendar for {cal.year}")
            return cal

    def add_year_calendar(self, year: int) -> CalendarBuilder:
        self.get_or_create(year)
        return self

    def load(self, calendar: Calendar) -> CalendarBuilder:
        with self._lock:
            if self._find(calendar.year) is not None:
                raise DuplicateYearError(calendar.year)
            self._insert(calendar)
            logger.debug(f"Loaded calendar for {calendar.year}")
        return self

    def load_from_snapshot(self, snapshot: Mapping[Any, Any] | None) -> CalendarBuilder:
        calendars = Calendar.from_json(snapshot)
        with self._lock:
            # nothing is inserted unless every year is new
            for cal in calendars:
                if self._find(cal.year) is not None:
                    raise DuplicateYearError(cal.year)
            for cal in calendars:
                self.load(cal)
        return self

    # ── year initialisers ────────────────────────────────────────────────

    def init_year_all_inactive(self, year: int) -> CalendarBuilder:
        with self._lock:
            cal = self.get_or_create(year)
            for m in range(MONTHS_PER_YEAR):
                cal.active_days[m] = 0
        return self

    def init_year_all_active(self, year: int) -> CalendarBuilder:
        with self._lock:
            cal = self.get_or_create(year)
            for m in range(MONTHS_PER_YEAR):
                cal.active_days[m] = all_active_mask(cal.year, m)
        return self

    def init_year_weekends_inactive(self, year: int) -> CalendarBuilder:
        with self._lock:
            for m in range(MONTHS_PER_YEAR):
                self.init_month_weekends_inactive(year, m)
        return self

    # ── month initialisers ───────────────────────────────────────────────

    def init_month_all_inactive(self, year: int, month_index: int) -> CalendarBuilder:
        month_index = check_month_index(month_index)
        with self._lock:
            self.get_or_create(year).active_days[month_index] = 0
        return self

    def init_month_all_active(self, year: int, month_index: int) -> CalendarBuilder:
        month_index = check_month_index(month_index)
        with self._lock:
            cal = self.get_or_create(year)
            cal.active_days[month_index] = all_active_mask(cal.year, month_index)
        return self

    def init_month_weekends_inactive(self, year: int, month_index: int) -> CalendarBuilder:
        month_index = check_month_index(month_index)
        year = int(year)
        mask = all_active_mask(year, month_index)
        for day in weekend_days(year, month_index, self._weekmask):
            mask ^= 1 << (day - 1)
        with self._lock:
            self.get_or_create(year).active_days[month_index] = mask
        return self

    # ── single days ──────────────────────────────────────────────────────

    def set_day_active(self, year: int, month_index: int, day: int) -> CalendarBuilder:
        return self._set_day(year, month_index, day, Polarity.ACTIVE)

    def set_day_inactive(self, year: int, month_index: int, day: int) -> CalendarBuilder:
        return self._set_day(year, month_index, day, Polarity.INACTIVE)

    def _set_day(
        self, year: int, month_index: int, day: int, polarity: Polarity
    ) -> CalendarBuilder:
        year = int(year)
        # validates month_index and day before the calendar is created
        mask = day_mask(year, month_index, day, polarity)
        with self._lock:
            cal = self.get_or_create(year)
            cal.active_days[month_index] = apply_day_mask(
                cal.active_days[month_index], mask, polarity
            )
        return self

    def set_day_active_from_date(self, value: date) -> CalendarBuilder:
        return self.set_day_active(value.year, value.month - 1, value.day)

    def set_day_inactive_from_date(self, value: date) -> CalendarBuilder:
        return self.set_day_inactive(value.year, value.month - 1, value.day)

    # ── ranges ───────────────────────────────────────────────────────────

    def set_range_active(
        self, year: int, month_index: int, start: int, end: int
    ) -> CalendarBuilder:
        return self._set_range(year, month_index, start, end, Polarity.ACTIVE)

    def set_range_inactive(
        self, year: int, month_index: int, start: int, end: int
    ) -> CalendarBuilder:
        return self._set_range(year, month_index, start, end, Polarity.INACTIVE)

    def _set_range(
        self, year: int, month_index: int, start: int, end: int, polarity: Polarity
    ) -> CalendarBuilder:
        if start > end:
            raise InvalidRangeError(start, end)
        with self._lock:
            for day in range(start, end + 1):
                self._set_day(year, month_index, day, polarity)
        return self

    # ── build ────────────────────────────────────────────────────────────

    def build_all(self) -> list[Calendar]:
        with self._lock:
            return list(self._calendars)

    def build(self, year: int) -> Calendar:
        return self.get_or_create(year)

    # ── JSON ─────────────────────────────────────────────────────────────

    def to_json(self) -> dict[int, MonthMasks]:
        snapshot: dict[int, MonthMasks] = {}
        with self._lock:
            for cal in self._calendars:
                snapshot.update(cal.to_json())
        return snapshot

    def dumps(self, **kwargs: Any) -> str:
        kwargs.setdefault("separators", (",", ":"))
        return json.dumps(self.to_json(), **kwargs)

    @classmethod
    def loads(cls, text: str | bytes, weekmask: str | None = None) -> CalendarBuilder:
        return cls(weekmask=weekmask).load_from_snapshot(json.loads(text))

    # ── properties / dunder ──────────────────────────────────────────────

    @property
    def weekmask(self) -> str:
        return self._weekmask

    @property
    def years(self) -> list[int]:
        with self._lock:
            return [cal.year for cal in self._calendars]

    def __len__(self) -> int:
        return len(self._calendars)

    def __contains__(self, year: object) -> bool:
        with self._lock:
            return any(cal.year == year for cal in self._calendars)

    def __iter__(self) -> Iterator[Calendar]:
        return iter(self.build_all())

    def __repr__(self) -> str:
        return f"CalendarBuilder(years={self.years}, weekmask={self._weekmask!r})"
