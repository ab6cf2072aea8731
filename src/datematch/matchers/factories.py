"""Factory functions — the public way to build date matchers.

Each family accepts either a full reference value or explicit calendar
fields, mirroring the usual assertion style::

    assert_that(shipped, before(2012, Months.MAY, 12))
    assert_that(shipped, same_weekday(Weekdays.MONDAY))
    assert_that(shipped, within(5, TimeUnit.MINUTES, ordered))

Every factory takes a keyword-only ``tz`` (a ``tzinfo`` or IANA name). When
omitted, the zone of the enclosing ``use_timezone`` block is used, falling
back to system local time. Argument errors are raised here, never during
evaluation.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import TypeVar

from datematch.domain.errors import DateRangeError, InvalidReferenceError
from datematch.domain.fields import extract_fields
from datematch.domain.instants import ensure_representable, to_epoch_millis
from datematch.domain.references import PartialDateTime, Tolerance
from datematch.domain.types import CalendarField, Months, TimeUnit, Weekdays
from datematch.domain.zones import resolve_zone
from datematch.matchers.instant import InstantMatcher, Relation
from datematch.matchers.same_field import DAY_FIELDS, SameFieldMatcher
from datematch.matchers.within import WithinMatcher

logger = logging.getLogger(__name__)

Reference = datetime | date | PartialDateTime
Zone = tzinfo | str | None


def _reference_millis(
    value: Reference | int,
    month: Months | int | None,
    day: int | None,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    zone: tzinfo | None,
    *,
    allow_epoch: bool = False,
) -> int:
    """Resolve a reference given either as a value or as calendar fields."""
    try:
        millis = _resolve(value, month, day, hour, minute, second, millisecond, zone, allow_epoch)
    except OverflowError as exc:
        raise DateRangeError(value) from exc
    return ensure_representable(millis, zone)


def _resolve(
    value: Reference | int,
    month: Months | int | None,
    day: int | None,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    zone: tzinfo | None,
    allow_epoch: bool,
) -> int:
    if month is not None:
        if day is None:
            raise InvalidReferenceError("day is required when month is given")
        partial = PartialDateTime(
            value,  # type: ignore[arg-type]
            month,  # type: ignore[arg-type]
            day,
            hour,
            minute,
            second,
            millisecond,
        )
        return partial.resolve(zone)
    if isinstance(value, PartialDateTime):
        return value.resolve(zone)
    if isinstance(value, (datetime, date)):
        return to_epoch_millis(value, zone)
    if allow_epoch and isinstance(value, int) and not isinstance(value, bool):
        return value
    raise InvalidReferenceError(f"Expected a date or datetime reference, got {value!r}")


def _is_reference(value: object) -> bool:
    return isinstance(value, (datetime, date, PartialDateTime))


_M = TypeVar("_M", InstantMatcher, SameFieldMatcher, WithinMatcher)


def _created(matcher: _M) -> _M:
    logger.debug("Created matcher: %s", matcher.describe())
    return matcher


# --- Ordering ---


def after(
    reference: Reference | int,
    month: Months | int | None = None,
    day: int | None = None,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    tz: Zone = None,
) -> InstantMatcher:
    """Match dates strictly after the reference.

    ``after(date)`` or ``after(2012, Months.MAY, 12[, hour, minute, second])``.
    Field references start at millisecond zero, so ``after(2012, Months.MAY,
    12)`` accepts 12 May 2012 00:00:00.001 onwards.
    """
    zone = resolve_zone(tz)
    millis = _reference_millis(reference, month, day, hour, minute, second, 0, zone)
    return _created(InstantMatcher(Relation.AFTER, millis, zone))


def before(
    reference: Reference | int,
    month: Months | int | None = None,
    day: int | None = None,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    tz: Zone = None,
) -> InstantMatcher:
    """Match dates strictly before the reference.

    ``before(2012, Months.MAY, 12)`` means before the start of that day.
    """
    zone = resolve_zone(tz)
    millis = _reference_millis(reference, month, day, hour, minute, second, 0, zone)
    return _created(InstantMatcher(Relation.BEFORE, millis, zone))


def same_instant(
    reference: Reference | int,
    month: Months | int | None = None,
    day: int | None = None,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    *,
    tz: Zone = None,
) -> InstantMatcher:
    """Match dates on exactly the reference instant, to the millisecond.

    The reference may also be an epoch-millisecond ``int``.
    """
    zone = resolve_zone(tz)
    millis = _reference_millis(
        reference, month, day, hour, minute, second, millisecond, zone, allow_epoch=True
    )
    return _created(InstantMatcher(Relation.SAME_INSTANT, millis, zone))


def within(
    period: int,
    unit: TimeUnit | str,
    reference: Reference | int,
    month: Months | int | None = None,
    day: int | None = None,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    *,
    tz: Zone = None,
) -> WithinMatcher:
    """Match dates no further than *period* *unit* from the reference.

    The window is inclusive at both ends. A zero period requires the exact
    instant; a negative period raises ``ToleranceError``.
    """
    tolerance = Tolerance(period, unit)  # type: ignore[arg-type]
    zone = resolve_zone(tz)
    millis = _reference_millis(reference, month, day, hour, minute, second, millisecond, zone)
    return _created(WithinMatcher(tolerance, millis, zone))


# --- Calendar fields ---


def same_date_part(reference: Reference, field: CalendarField | str, *, tz: Zone = None) -> SameFieldMatcher:
    """Match dates sharing one calendar *field* with the reference."""
    zone = resolve_zone(tz)
    millis = _reference_millis(reference, None, None, 0, 0, 0, 0, zone)
    return _created(SameFieldMatcher.from_reference((CalendarField(field),), millis, zone))


def _same_field(
    field: CalendarField,
    value: Reference | int,
    zone: Zone,
) -> SameFieldMatcher:
    resolved = resolve_zone(zone)
    if _is_reference(value):
        millis = _reference_millis(value, None, None, 0, 0, 0, 0, resolved)  # type: ignore[arg-type]
        return _created(SameFieldMatcher.from_reference((field,), millis, resolved))
    return _created(SameFieldMatcher((field,), (value,), resolved))  # type: ignore[arg-type]


def same_day(
    reference: Reference | int,
    month: Months | int | None = None,
    day: int | None = None,
    *,
    tz: Zone = None,
) -> SameFieldMatcher:
    """Match dates on the same calendar day (year, month, and day of month)."""
    zone = resolve_zone(tz)
    millis = _reference_millis(reference, month, day, 0, 0, 0, 0, zone)
    if month is None:
        return _created(SameFieldMatcher.from_reference(DAY_FIELDS, millis, zone, name="day"))
    expected = extract_fields(millis, DAY_FIELDS, zone)
    return _created(SameFieldMatcher(DAY_FIELDS, expected, zone, name="day"))


def same_day_of_month(reference: Reference | int, *, tz: Zone = None) -> SameFieldMatcher:
    """Match dates on the same day of the month (1-31), in any month or year."""
    return _same_field(CalendarField.DAY_OF_MONTH, reference, tz)


def same_weekday(reference: Reference | Weekdays | int, *, tz: Zone = None) -> SameFieldMatcher:
    """Match dates on the same day of the week (ISO numbering, Monday=1)."""
    return _same_field(CalendarField.DAY_OF_WEEK, reference, tz)


def same_hour(reference: Reference | int, *, tz: Zone = None) -> SameFieldMatcher:
    """Match dates in the same hour of the day (0-23)."""
    return _same_field(CalendarField.HOUR, reference, tz)


def same_minute(reference: Reference | int, *, tz: Zone = None) -> SameFieldMatcher:
    """Match dates in the same minute of the hour (0-59)."""
    return _same_field(CalendarField.MINUTE, reference, tz)


def same_second(reference: Reference | int, *, tz: Zone = None) -> SameFieldMatcher:
    """Match dates in the same second of the minute (0-59)."""
    return _same_field(CalendarField.SECOND, reference, tz)


def same_month(reference: Reference | Months | int, *, tz: Zone = None) -> SameFieldMatcher:
    """Match dates in the same month, in any year."""
    return _same_field(CalendarField.MONTH, reference, tz)


def same_year(reference: Reference | int, *, tz: Zone = None) -> SameFieldMatcher:
    """Match dates in the same year."""
    return _same_field(CalendarField.YEAR, reference, tz)
