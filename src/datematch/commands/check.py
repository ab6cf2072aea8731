"""Command: evaluate a single matcher against a date."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

import click
import structlog

from datematch.commands._base import DatematchCommand
from datematch.commands._params import DATETIME
from datematch.domain.errors import DateMatchError
from datematch.matchers import factories

if TYPE_CHECKING:
    from datematch.commands._context import AppContext

log = structlog.get_logger(__name__)

MATCHER_KINDS: dict[str, Callable[..., Any]] = {
    "before": factories.before,
    "after": factories.after,
    "same-instant": factories.same_instant,
    "same-day": factories.same_day,
    "same-day-of-month": factories.same_day_of_month,
    "same-weekday": factories.same_weekday,
    "same-hour": factories.same_hour,
    "same-minute": factories.same_minute,
    "same-second": factories.same_second,
    "same-month": factories.same_month,
    "same-year": factories.same_year,
}


@click.command(
    cls=DatematchCommand,
    examples=(
        "check before 2012-05-12 2012-05-11T23:59:59.999",
        "check same-day 2012-05-12T08:00 2012-05-12T23:59:59",
        "--tz Europe/London check same-hour 2012-05-12T10:00Z 2012-05-12T11:30",
        "--json check same-weekday 2013-01-07 2013-01-14",
    ),
)
@click.argument("kind", type=click.Choice(sorted(MATCHER_KINDS)))
@click.argument("reference", type=DATETIME)
@click.argument("actual", type=DATETIME)
@click.pass_obj
def check(app: AppContext, kind: str, reference: datetime, actual: datetime) -> None:
    """Check ACTUAL against a KIND matcher built from REFERENCE."""
    structlog.contextvars.bind_contextvars(kind=kind)
    try:
        matcher = MATCHER_KINDS[kind](reference, tz=app.zone)
    except DateMatchError as exc:
        raise click.BadParameter(str(exc), param_hint="REFERENCE") from exc
    log.debug("check", reference=reference, matcher=matcher.describe())
    app.emit(matcher.matches(actual))
