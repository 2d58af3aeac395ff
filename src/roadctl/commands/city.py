"""Command group: cities (add, rename, find, list)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadctl.commands._base import RoadGroup

if TYPE_CHECKING:
    from roadctl.commands._context import AppContext

_CITY_EXAMPLES = """\
  roadctl city add Karongi
  roadctl city add Karongi Nyanza Rwamagana
  roadctl city rename Karongi Kibuye
  roadctl city find 3
  roadctl --json city list"""


@click.group(cls=RoadGroup, examples=_CITY_EXAMPLES)
def city() -> None:
    """Add, rename, and look up cities."""


@city.command(
    examples="""\
  roadctl city add Karongi
  roadctl city add Karongi Nyanza Rwamagana
  roadctl city add 'New Town'"""
)
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def add(app: AppContext, names: tuple[str, ...]) -> None:
    """Add one or more cities. Each gets the next free index."""
    svc = app.service
    if len(names) == 1:
        app.emit(svc.add_city(names[0]))
    else:
        app.emit(svc.add_cities(list(names)))


@city.command(
    examples="""\
  roadctl city rename Karongi Kibuye"""
)
@click.argument("old_name")
@click.argument("new_name")
@click.pass_obj
def rename(app: AppContext, old_name: str, new_name: str) -> None:
    """Rename a city. Its index and roads are kept."""
    app.emit(app.service.rename_city(old_name, new_name))


@city.command(
    examples="""\
  roadctl city find 1
  roadctl -q city find 4"""
)
@click.argument("index", type=int)
@click.pass_obj
def find(app: AppContext, index: int) -> None:
    """Look up a city by its index."""
    app.emit(app.service.find_city(index))


@city.command(
    "list",
    examples="""\
  roadctl city list
  roadctl -q city list
  roadctl --json city list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all cities in index order."""
    app.emit(app.service.list_cities())
