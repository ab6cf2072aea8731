"""Reference values supplied to matchers instead of a full date/time.

Both types validate on construction and are immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from datematch.domain.errors import FieldRangeError, ToleranceError
from datematch.domain.fields import validate_field_value
from datematch.domain.instants import wall_clock_to_millis
from datematch.domain.types import MILLISECOND_BOUNDS, CalendarField, Months, TimeUnit


@dataclass(frozen=True)
class PartialDateTime:
    """Explicit calendar field values, resolved to an instant per zone.

    Finer fields left out default to zero, so ``PartialDateTime(2012, 5, 12)``
    is the start of 12 May 2012.
    """

    year: int
    month: Months
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def __post_init__(self) -> None:
        validate_field_value(CalendarField.YEAR, self.year)
        month = validate_field_value(CalendarField.MONTH, self.month)
        object.__setattr__(self, "month", Months(month))
        validate_field_value(CalendarField.DAY_OF_MONTH, self.day)
        validate_field_value(CalendarField.HOUR, self.hour)
        validate_field_value(CalendarField.MINUTE, self.minute)
        validate_field_value(CalendarField.SECOND, self.second)
        low, high = MILLISECOND_BOUNDS
        ms = self.millisecond
        if isinstance(ms, bool) or not isinstance(ms, int) or not low <= ms <= high:
            raise FieldRangeError("millisecond", ms, low, high)

    def resolve(self, zone: tzinfo | None = None) -> int:
        """Epoch milliseconds of this wall-clock value in *zone*."""
        return wall_clock_to_millis(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
            zone=zone,
        )


@dataclass(frozen=True)
class Tolerance:
    """Inclusive symmetric window of ``magnitude`` units around an instant.

    A zero magnitude requires an exact instant match.
    """

    magnitude: int
    unit: TimeUnit

    def __post_init__(self) -> None:
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise ToleranceError(f"Tolerance must be an integer, got {self.magnitude!r}")
        if self.magnitude < 0:
            raise ToleranceError(f"Tolerance must not be negative, got {self.magnitude}")
        try:
            unit = TimeUnit(self.unit.lower() if isinstance(self.unit, str) else self.unit)
        except ValueError as exc:
            choices = ", ".join(u.value for u in TimeUnit)
            raise ToleranceError(f"Unknown time unit {self.unit!r} (expected one of {choices})") from exc
        object.__setattr__(self, "unit", unit)

    @property
    def millis(self) -> int:
        return self.unit.to_millis(self.magnitude)

    def __str__(self) -> str:
        return f"{self.magnitude} {self.unit.value}"
