"""Command: show the calendar fields the matchers read from a date."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from datematch.commands._base import DatematchCommand
from datematch.commands._params import DATETIME
from datematch.domain.fields import extract_fields, render_field_value
from datematch.domain.errors import DateRangeError
from datematch.domain.instants import ensure_representable, format_instant, to_epoch_millis
from datematch.domain.types import CalendarField

if TYPE_CHECKING:
    from datematch.commands._context import AppContext


@click.command(
    cls=DatematchCommand,
    examples=(
        "fields 2013-01-07T09:30:00",
        "--tz Asia/Tokyo fields 2013-01-06T23:30:00Z",
        "--json fields 2012-05-12",
    ),
)
@click.argument("value", type=DATETIME)
@click.pass_obj
def fields(app: AppContext, value: datetime) -> None:
    """Show every calendar field of VALUE in the selected zone."""
    zone = app.zone
    try:
        millis = ensure_representable(to_epoch_millis(value, zone), zone)
    except (DateRangeError, OverflowError) as exc:
        raise click.BadParameter(
            f"{value.isoformat()} is outside the representable date range", param_hint="VALUE"
        ) from exc
    all_fields = tuple(CalendarField)
    values = extract_fields(millis, all_fields, zone)
    table: dict[str, int | str] = {"epoch_millis": millis}
    for field, number in zip(all_fields, values, strict=True):
        table[field.value] = number
        if field in (CalendarField.MONTH, CalendarField.DAY_OF_WEEK):
            table[f"{field.value}_name"] = render_field_value(field, number)
    app.emit_fields(format_instant(millis, zone), table)
