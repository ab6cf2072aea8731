"""Conversion between date/time values and epoch-millisecond instants.

Instants are plain ``int`` milliseconds since 1970-01-01T00:00:00Z. Every
comparison happens on instants; calendar views are rebuilt from them on
demand and never cached.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo

from datematch.domain.errors import DateRangeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)

# dd MMM yyyy HH:mm:ss SSS'ms' Z
_DIAGNOSTIC_FORMAT = "%d %b %Y %H:%M:%S"


def is_temporal(value: object) -> bool:
    """Whether *value* can be converted to an instant."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (datetime, date, int))


def to_epoch_millis(value: datetime | date | int, zone: tzinfo | None = None) -> int:
    """Convert *value* to epoch milliseconds.

    Naive datetimes and plain dates are wall-clock values in *zone*
    (system local time when *zone* is None). Sub-millisecond precision is
    truncated.
    """
    if isinstance(value, bool) or not isinstance(value, (datetime, date, int)):
        raise TypeError(f"Cannot convert {type(value).__name__} to an instant")
    if isinstance(value, int):
        return value
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    return (_attach_zone(value, zone) - EPOCH) // ONE_MILLISECOND


def from_epoch_millis(millis: int, zone: tzinfo | None = None) -> datetime:
    """Build an aware datetime for *millis* in *zone* (local when None).

    A new object is returned on every call.
    """
    return (EPOCH + timedelta(milliseconds=millis)).astimezone(zone)


def wall_clock_to_millis(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    zone: tzinfo | None = None,
) -> int:
    """Resolve wall-clock fields in *zone* to an instant.

    Day values past the end of the month roll into the following month.
    """
    first = datetime(year, month, 1, hour, minute, second, millisecond * 1000)
    return to_epoch_millis(first + timedelta(days=day - 1), zone)


def format_instant(millis: int, zone: tzinfo | None = None) -> str:
    """Diagnostic rendering, e.g. ``12 May 2012 10:00:00 000ms +0000``."""
    moment = from_epoch_millis(millis, zone)
    ms = moment.microsecond // 1000
    return f"{moment.strftime(_DIAGNOSTIC_FORMAT)} {ms:03d}ms {moment.strftime('%z')}"


def _attach_zone(value: datetime, zone: tzinfo | None) -> datetime:
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    if zone is None:
        # astimezone() on a naive datetime assumes system local time
        return value.replace(tzinfo=None).astimezone()
    return value.replace(tzinfo=zone)


def ensure_representable(millis: int, zone: tzinfo | None = None) -> int:
    """Return *millis* if it maps to a calendar date in *zone*.

    Raises:
        DateRangeError: the instant falls outside years 1-9999 once
            converted, so it could never be rendered or have fields read.
    """
    try:
        from_epoch_millis(millis, zone)
    except OverflowError as exc:
        raise DateRangeError(millis) from exc
    return millis
