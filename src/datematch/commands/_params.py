"""Click parameter types for date arguments."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import click


class DateTimeParam(click.ParamType):
    """An ISO-8601 date (``2012-05-12``) or date-time (``2012-05-12T10:00:00.250``).

    Date-only values become midnight. Values without an offset are wall-clock
    times in the zone selected with ``--tz``.
    """

    name = "datetime"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> datetime:
        if isinstance(value, datetime):
            return value
        text = str(value).strip()
        try:
            if "T" not in text and " " not in text and len(text) <= 10:
                parsed = date.fromisoformat(text)
                return datetime(parsed.year, parsed.month, parsed.day)
            return datetime.fromisoformat(text)
        except ValueError:
            self.fail(f"{value!r} is not an ISO-8601 date or date-time", param, ctx)


DATETIME = DateTimeParam()
