"""Click base classes carrying runnable usage examples.

Examples are given as argument strings without the program name, e.g.
``("check before 2012-05-12 2012-05-11T23:59:59.999",)``. ``--examples``
prints each one prefixed with the root program name, so the listing stays
copy-pasteable however the tool was installed or invoked.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def render_examples(ctx: click.Context, examples: Sequence[str]) -> str:
    prog = ctx.find_root().info_name or "datematch"
    return "\n".join(f"  {prog} {args}" for args in examples)


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(render_examples(ctx, getattr(ctx.command, "examples", ())))
    ctx.exit(0)


class ExamplesMixin:
    """Adds an eager ``--examples`` flag when ``examples`` are given."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show usage examples.",
                )
            )


class DatematchCommand(ExamplesMixin, click.Command):
    """Command with an optional ``--examples`` listing."""


class DatematchGroup(ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`DatematchCommand`."""

    command_class = DatematchCommand
