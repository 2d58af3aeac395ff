"""Subcommand modules for roadctl.

Provides register_commands() which uses deferred imports to keep
``roadctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from roadctl.commands.city import city
    from roadctl.commands.road import road

    cli.add_command(city)
    cli.add_command(road)

    # --- Standalone commands ---
    from roadctl.commands.data import reset, save, show
    from roadctl.commands.shell import shell

    cli.add_command(show)
    cli.add_command(save)
    cli.add_command(reset)
    cli.add_command(shell)
