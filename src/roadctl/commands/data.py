"""Commands: show everything, force a save, reset the registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadctl.commands._base import RoadCommand

if TYPE_CHECKING:
    from roadctl.commands._context import AppContext


@click.command(
    cls=RoadCommand,
    examples="""\
  roadctl show
  roadctl --json show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show cities, the road matrix, and the budget matrix."""
    app.emit(app.service.show_all())


@click.command(
    cls=RoadCommand,
    examples="""\
  roadctl save
  roadctl --data-dir /tmp/roads save""",
)
@click.pass_obj
def save(app: AppContext) -> None:
    """Rewrite cities.txt and roads.txt from the current registry."""
    app.emit(app.service.save())


@click.command(
    cls=RoadCommand,
    examples="""\
  roadctl reset
  roadctl reset --empty --yes""",
)
@click.option("--empty", is_flag=True, help="Start with no cities instead of the seed network.")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def reset(app: AppContext, empty: bool, yes: bool) -> None:
    """Discard all recorded cities and roads."""
    if not yes and not app.settings.no_interact:
        click.confirm("Discard all recorded cities and roads?", abort=True)
    app.emit(app.service.reset(seed=not empty))
