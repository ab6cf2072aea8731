"""Subcommand modules for datematch.

Provides register_commands() which uses deferred imports to keep
``datematch --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from datematch.commands.check import check
    from datematch.commands.fields import fields
    from datematch.commands.within import within

    cli.add_command(check)
    cli.add_command(within)
    cli.add_command(fields)
