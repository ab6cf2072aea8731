"""Calendar enums shared by the extractor, the matchers, and the CLI.

Month and weekday numbering is fixed here so callers never depend on a
calendar library's field constants or on locale week-start settings.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class CalendarField(StrEnum):
    """Calendar fields that can be extracted from an instant."""

    YEAR = "year"
    MONTH = "month"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_WEEK = "day_of_week"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def label(self) -> str:
        """Human-readable name used in diagnostics."""
        return FIELD_LABELS[self]

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive ``(low, high)`` range of valid values."""
        return FIELD_BOUNDS[self]


FIELD_LABELS: dict[CalendarField, str] = {
    CalendarField.YEAR: "year",
    CalendarField.MONTH: "month",
    CalendarField.DAY_OF_MONTH: "day of the month",
    CalendarField.DAY_OF_WEEK: "day of the week",
    CalendarField.HOUR: "hour",
    CalendarField.MINUTE: "minute",
    CalendarField.SECOND: "second",
}

FIELD_BOUNDS: dict[CalendarField, tuple[int, int]] = {
    CalendarField.YEAR: (1, 9999),
    CalendarField.MONTH: (1, 12),
    CalendarField.DAY_OF_MONTH: (1, 31),
    CalendarField.DAY_OF_WEEK: (1, 7),
    CalendarField.HOUR: (0, 23),
    CalendarField.MINUTE: (0, 59),
    CalendarField.SECOND: (0, 59),
}

MILLISECOND_BOUNDS = (0, 999)


class Months(IntEnum):
    """Months of the year, numbered 1-12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def display(self) -> str:
        return self.name.capitalize()


class Weekdays(IntEnum):
    """Days of the week using ISO numbering (Monday=1 .. Sunday=7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def display(self) -> str:
        return self.name.capitalize()


class TimeUnit(StrEnum):
    """Units for tolerance windows and instant differences."""

    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    def to_millis(self, amount: int) -> int:
        """Convert *amount* of this unit to milliseconds.

        Sub-millisecond units truncate toward zero.
        """
        if self is TimeUnit.NANOSECONDS:
            return _truncating_div(amount, 1_000_000)
        if self is TimeUnit.MICROSECONDS:
            return _truncating_div(amount, 1_000)
        return amount * _MILLIS_PER_UNIT[self]

    def from_millis(self, millis: int) -> int:
        """Express *millis* in this unit, truncating toward zero."""
        if self is TimeUnit.NANOSECONDS:
            return millis * 1_000_000
        if self is TimeUnit.MICROSECONDS:
            return millis * 1_000
        return _truncating_div(millis, _MILLIS_PER_UNIT[self])


_MILLIS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.MILLISECONDS: 1,
    TimeUnit.SECONDS: 1_000,
    TimeUnit.MINUTES: 60_000,
    TimeUnit.HOURS: 3_600_000,
    TimeUnit.DAYS: 86_400_000,
}


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient
