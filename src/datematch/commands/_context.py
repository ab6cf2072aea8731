"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides centralized result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datematch.output.formatters import OutputSettings, format_fields, format_result

if TYPE_CHECKING:
    from datetime import tzinfo

    from datematch.config.settings import DatematchSettings
    from datematch.matchers.result import MatchResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: DatematchSettings) -> None:
        self.settings = settings

        # Configure structured logging
        from datematch.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            zone_name=settings.timezone,
        )

    @property
    def zone(self) -> tzinfo | None:
        return self.settings.zone

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: MatchResult) -> None:
        """Format and output a MatchResult with correct exit semantics.

        * Pass: writes to stdout, returns normally.
        * Fail: writes to stdout, exits with code 1 so scripts can branch on it.
        """
        click.echo(format_result(result, settings=self.output_settings))
        if not result.passed:
            raise SystemExit(1)

    def emit_fields(self, shown: str, fields: dict[str, int | str]) -> None:
        click.echo(format_fields(shown, fields, settings=self.output_settings))
