"""Calendar field extraction.

Pure functions over epoch-millisecond instants. Each call converts the
instant into a fresh zone-local datetime, so no calendar state is shared
between calls or threads.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo

from datematch.domain.errors import FieldRangeError
from datematch.domain.instants import from_epoch_millis
from datematch.domain.types import CalendarField, Months, Weekdays


def _read(moment: datetime, field: CalendarField) -> int:
    if field is CalendarField.YEAR:
        return moment.year
    if field is CalendarField.MONTH:
        return moment.month
    if field is CalendarField.DAY_OF_MONTH:
        return moment.day
    if field is CalendarField.DAY_OF_WEEK:
        return moment.isoweekday()
    if field is CalendarField.HOUR:
        return moment.hour
    if field is CalendarField.MINUTE:
        return moment.minute
    return moment.second


def extract_field(millis: int, field: CalendarField, zone: tzinfo | None = None) -> int:
    """Read one calendar *field* of the instant *millis* as seen in *zone*.

    MONTH is 1-based and DAY_OF_WEEK uses ISO numbering (Monday=1), whatever
    the host locale's first day of the week.
    """
    return _read(from_epoch_millis(millis, zone), CalendarField(field))


def extract_fields(
    millis: int,
    fields: Iterable[CalendarField],
    zone: tzinfo | None = None,
) -> tuple[int, ...]:
    """Read several fields from a single zone conversion."""
    moment = from_epoch_millis(millis, zone)
    return tuple(_read(moment, CalendarField(f)) for f in fields)


def validate_field_value(field: CalendarField, value: object) -> int:
    """Return *value* as an ``int`` if it is valid for *field*.

    Raises:
        FieldRangeError: *value* is not an integer or is out of range.
    """
    field = CalendarField(field)
    low, high = field.bounds
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise FieldRangeError(field.label, value, low, high)
    return int(value)


def render_field_value(field: CalendarField, value: int) -> str:
    """Render a field value for diagnostics (month and weekday by name)."""
    if field is CalendarField.MONTH:
        return Months(value).display
    if field is CalendarField.DAY_OF_WEEK:
        return Weekdays(value).display
    return str(value)
