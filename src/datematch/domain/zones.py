"""Timezone resolution for matcher construction.

A matcher reads its zone once, when it is built. The zone comes from the
``tz=`` argument if given, otherwise from the innermost ``use_timezone``
block, otherwise the system local zone (represented as ``None``).
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datematch.domain.errors import UnknownTimezoneError

_default_zone: ContextVar[tzinfo | None] = ContextVar("_default_zone", default=None)


def zone_from_name(name: str) -> tzinfo:
    """Look up an IANA zone name such as ``"Europe/London"``."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownTimezoneError(name) from exc


def current_zone() -> tzinfo | None:
    """The zone set by the innermost active ``use_timezone`` block."""
    return _default_zone.get()


def resolve_zone(tz: tzinfo | str | None = None) -> tzinfo | None:
    """Pick the zone for a new matcher: explicit argument first, then context."""
    if isinstance(tz, str):
        return zone_from_name(tz)
    if tz is not None:
        return tz
    return _default_zone.get()


@contextmanager
def use_timezone(tz: tzinfo | str | None) -> Generator[tzinfo | None]:
    """Build every matcher inside the block against *tz*.

    Usage::

        with use_timezone("America/New_York"):
            matcher = same_day(2012, Months.MAY, 12)
    """
    zone = zone_from_name(tz) if isinstance(tz, str) else tz
    token = _default_zone.set(zone)
    try:
        yield zone
    finally:
        _default_zone.reset(token)
