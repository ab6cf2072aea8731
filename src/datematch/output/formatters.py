"""Rich/JSON output helpers.

The CLI renders a MatchResult for humans (Rich output) or machines
(--json). The formatter layer adapts results to the requested mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from datematch.output.console import create_console, get_output

if TYPE_CHECKING:
    from datematch.matchers.result import MatchResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: MatchResult, *, settings: OutputSettings | None = None) -> str:
    """Format a MatchResult for display.

    Quiet mode prints only ``PASS`` or ``FAIL``.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return "PASS" if result.passed else "FAIL"

    console = create_console()
    if result.passed:
        console.print(Text("PASS", style="dm.pass"), Text(f"  {result.expectation}"))
    else:
        console.print(Text("FAIL", style="dm.fail"))
        console.print(Text("  Expected: ", style="dm.label"), Text(result.expectation), sep="")
        console.print(Text("       but: ", style="dm.label"), Text(result.mismatch_description or ""), sep="")
    if settings.verbose and result.actual is not None:
        console.print(Text("    Actual: ", style="dm.label"), Text(result.actual, style="dm.date"), sep="")
    return get_output(console).rstrip("\n")


def format_fields(
    shown: str,
    fields: dict[str, int | str],
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format the calendar fields extracted from one date."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps({"date": shown, "fields": fields}, indent=2)
    if settings.quiet:
        return "\n".join(f"{name}={value}" for name, value in fields.items())

    console = create_console()
    console.print(Text(shown, style="dm.date"))
    table = Table(show_header=True, header_style="dm.label")
    table.add_column("Field", style="dm.field")
    table.add_column("Value", justify="right")
    for name, value in fields.items():
        table.add_row(name, str(value))
    console.print(table)
    return get_output(console).rstrip("\n")
