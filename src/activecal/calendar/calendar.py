from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Sequence

from loguru import logger

from ._exceptions import InvalidArgumentError, UnspecifiedMonthError
from .masks import (
    MONTHS_PER_YEAR,
    Polarity,
    apply_day_mask,
    check_month_index,
    day_mask,
)

MonthMasks = list[int | None]


class Calendar:
    """
    One year of active days: twelve month bitmasks, January first.

    A slot of ``None`` means no policy has been defined for that month yet;
    ``0`` means every day of the month is inactive.
    """

    def __init__(
        self,
        year: int | str,
        active_days: Sequence[int | None] | None = None,
    ) -> None:
        self._year: int = int(year)
        if active_days is None:
            self.active_days: MonthMasks = [None] * MONTHS_PER_YEAR
        else:
            self.active_days = list(active_days)
            if len(self.active_days) != MONTHS_PER_YEAR:
                raise InvalidArgumentError(
                    "active days", active_days, f"expected {MONTHS_PER_YEAR} month masks"
                )

    @property
    def year(self) -> int:
        return self._year

    # ── mutation ─────────────────────────────────────────────────────────

    def set_day_active(self, month_index: int, day: int) -> Calendar:
        return self._apply(month_index, day, Polarity.ACTIVE)

    def set_day_inactive(self, month_index: int, day: int) -> Calendar:
        return self._apply(month_index, day, Polarity.INACTIVE)

    def _apply(self, month_index: int, day: int, polarity: Polarity) -> Calendar:
        mask = day_mask(self._year, month_index, day, polarity)
        self.active_days[month_index] = apply_day_mask(
            self.active_days[month_index], mask, polarity
        )
        return self

    # ── queries ──────────────────────────────────────────────────────────

    def is_active(self, month_index: int, day: int) -> bool:
        month_index = check_month_index(month_index)
        month = self.active_days[month_index]
        if month is None:
            raise UnspecifiedMonthError(self._year, month_index)
        return (day_mask(self._year, month_index, day) & month) != 0

    def is_active_date(self, value: date) -> bool:
        if value.year != self._year:
            raise InvalidArgumentError(
                "date", value, f"calendar covers {self._year} only"
            )
        return self.is_active(value.month - 1, value.day)

    # ── serialization ────────────────────────────────────────────────────

    def to_json(self) -> dict[int, MonthMasks]:
        return {self._year: list(self.active_days)}

    @classmethod
    def from_json(cls, data: Mapping[Any, Any] | None) -> list[Calendar]:
        """
        Parse a ``{year: [12 month masks]}`` snapshot.

        Entries that cannot be parsed, or that repeat a year already seen in
        the same snapshot (``"2022"`` and ``2022``), are logged and skipped so
        that one bad year does not discard the rest of the snapshot.  Mask
        values are taken as they are; bit ranges are not checked.
        """
        calendars: list[Calendar] = []
        if not data:
            return calendars
        seen: set[int] = set()
        for key, months in data.items():
            try:
                year = int(key)
                if year in seen:
                    raise ValueError(f"year {year} appears more than once")
                calendars.append(cls(year, _parse_months(months)))
                seen.add(year)
            except (TypeError, ValueError) as exc:
                logger.warning(f"Skipping calendar snapshot entry {key!r}: {exc}")
        return calendars

    # ── dunder ───────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self._year == other._year and self.active_days == other.active_days

    def __repr__(self) -> str:
        defined = sum(m is not None for m in self.active_days)
        return f"Calendar(year={self._year}, defined_months={defined})"


def _parse_months(months: Any) -> MonthMasks:
    if isinstance(months, (str, bytes)) or not isinstance(months, Sequence):
        raise TypeError(f"expected a list of month masks, got {type(months).__name__}")
    if len(months) != MONTHS_PER_YEAR:
        raise ValueError(f"expected {MONTHS_PER_YEAR} month masks, got {len(months)}")
    for m in months:
        if m is not None and (isinstance(m, bool) or not isinstance(m, int)):
            raise TypeError(f"month mask must be an integer or null, got {m!r}")
    return list(months)
