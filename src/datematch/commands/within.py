"""Command: check that a date falls inside a tolerance window."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click
import structlog

from datematch.commands._base import DatematchCommand
from datematch.commands._params import DATETIME
from datematch.domain.errors import DateMatchError, ToleranceError
from datematch.domain.types import TimeUnit
from datematch.matchers import factories

if TYPE_CHECKING:
    from datematch.commands._context import AppContext

log = structlog.get_logger(__name__)


@click.command(
    cls=DatematchCommand,
    examples=(
        "within 5 minutes 2012-05-12T10:00:00 2012-05-12T10:05:00",
        "within 2 days 2012-05-12 2012-05-10",
        "-q within 0 seconds 2012-05-12T10:00:00 2012-05-12T10:00:00",
    ),
)
@click.argument("period", type=int)
@click.argument("unit", type=click.Choice([u.value for u in TimeUnit], case_sensitive=False))
@click.argument("reference", type=DATETIME)
@click.argument("actual", type=DATETIME)
@click.pass_obj
def within(app: AppContext, period: int, unit: str, reference: datetime, actual: datetime) -> None:
    """Check ACTUAL is no more than PERIOD UNIT away from REFERENCE."""
    structlog.contextvars.bind_contextvars(kind="within")
    try:
        matcher = factories.within(period, TimeUnit(unit.lower()), reference, tz=app.zone)
    except ToleranceError as exc:
        raise click.BadParameter(str(exc), param_hint="PERIOD") from exc
    except DateMatchError as exc:
        raise click.BadParameter(str(exc), param_hint="REFERENCE") from exc
    log.debug("within", reference=reference, matcher=matcher.describe())
    app.emit(matcher.matches(actual))
