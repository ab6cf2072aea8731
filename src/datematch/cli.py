"""Root CLI group for datematch with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from datematch import __version__
from datematch.commands import register_commands
from datematch.commands._base import DatematchGroup
from datematch.commands._context import AppContext
from datematch.config.settings import DatematchSettings


@click.group(
    name="datematch",
    cls=DatematchGroup,
    invoke_without_command=True,
    examples=(
        "check before 2012-05-12 2012-05-11T23:59:59.999",
        "within 5 minutes 2012-05-12T10:00:00 2012-05-12T10:05:00",
        "--tz UTC fields 2013-01-07T09:30:00",
    ),
)
@click.version_option(version=__version__, prog_name="datematch")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only PASS or FAIL.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--tz", "timezone", default=None, help="IANA timezone (default: system local).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    timezone: str | None,
) -> None:
    """datematch — evaluate date/time matchers from the command line."""
    ctx.ensure_object(dict)
    try:
        settings = DatematchSettings.from_cli(
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            timezone=timezone,
        )
    except ValidationError as exc:
        raise click.BadParameter(f"Unknown timezone: {timezone!r}", param_hint="--tz") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
