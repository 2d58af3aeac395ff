"""Command group: roads (add, budget, list, matrix, budgets)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadctl.commands._base import RoadGroup

if TYPE_CHECKING:
    from roadctl.commands._context import AppContext

_ROAD_EXAMPLES = """\
  roadctl road add Kigali Huye
  roadctl road budget Kigali Huye 56.7
  roadctl road list
  roadctl road matrix
  roadctl road budgets"""


@click.group(cls=RoadGroup, examples=_ROAD_EXAMPLES)
def road() -> None:
    """Connect cities and record road budgets."""


@road.command(
    examples="""\
  roadctl road add Kigali Huye
  roadctl --json road add Musanze Rubavu"""
)
@click.argument("city_a")
@click.argument("city_b")
@click.pass_obj
def add(app: AppContext, city_a: str, city_b: str) -> None:
    """Add a road between two existing cities."""
    app.emit(app.service.add_road(city_a, city_b))


@road.command(
    context_settings={"ignore_unknown_options": True},
    examples="""\
  roadctl road budget Kigali Huye 56.7
  roadctl road budget Muhanga Rusizi 117.5""",
)
@click.argument("city_a")
@click.argument("city_b")
@click.argument("amount", type=float)
@click.pass_obj
def budget(app: AppContext, city_a: str, city_b: str, amount: float) -> None:
    """Set the budget (billion RWF) of an existing road, replacing any previous value."""
    app.emit(app.service.set_budget(city_a, city_b, amount))


@road.command(
    "list",
    examples="""\
  roadctl road list
  roadctl --json road list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List roads with their budgets."""
    app.emit(app.service.list_roads())


@road.command(
    examples="""\
  roadctl road matrix"""
)
@click.pass_obj
def matrix(app: AppContext) -> None:
    """Show the road adjacency matrix (1 = connected)."""
    app.emit(app.service.road_matrix())


@road.command(
    examples="""\
  roadctl road budgets"""
)
@click.pass_obj
def budgets(app: AppContext) -> None:
    """Show the budget adjacency matrix."""
    app.emit(app.service.budget_matrix())
