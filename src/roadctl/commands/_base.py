"""Click command classes that carry usage examples.

Passing ``examples=`` to a command or group gives it an eager
``--examples`` flag (print the snippet, exit 0) and an "Examples"
section at the end of ``--help``.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    lines = getattr(ctx.command, "example_lines", [])
    click.echo(f"Examples for '{ctx.command_path}':\n")
    for line in lines:
        click.echo(f"  {line}")
    ctx.exit(0)


class _ExamplesMixin:
    """Shared ``examples=`` handling for :class:`RoadCommand` and :class:`RoadGroup`."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.example_lines = textwrap.dedent(examples or "").strip("\n").splitlines()
        if self.example_lines:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if not self.example_lines:
            return
        with formatter.section("Examples"):
            for line in self.example_lines:
                formatter.write(f"{'':>{formatter.current_indent}}{line}\n")


class RoadCommand(_ExamplesMixin, click.Command):
    """Leaf command accepting ``examples=``."""


class RoadGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; subcommands default to :class:`RoadCommand`."""

    command_class = RoadCommand
