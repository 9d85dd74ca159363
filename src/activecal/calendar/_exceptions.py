from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidArgumentError(CalendarError, ValueError):
    """Raised when a month index, day or weekmask is out of bounds."""

    def __init__(self, name: str, value: object, detail: str = "") -> None:
        self.name = name
        self.value = value
        msg = f"Invalid {name}: {value!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class InvalidRangeError(CalendarError, ValueError):
    """Raised when a day range starts after it ends."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Start day {start} must not be after end day {end}")


class UnspecifiedMonthError(CalendarError, LookupError):
    """Raised when querying a month that has no active-day mask."""

    def __init__(self, year: int, month_index: int) -> None:
        self.year = year
        self.month_index = month_index
        super().__init__(
            f"Unspecified active days for month index {month_index} of {year}"
        )


class DuplicateYearError(CalendarError):
    """Raised when loading a calendar for a year the builder already owns."""

    def __init__(self, year: int) -> None:
        self.year = year
        super().__init__(f"A calendar for year {year} is already loaded")
