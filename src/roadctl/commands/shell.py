"""Command: interactive numbered menu over the registry.

Prompts retry until the input parses (click types); the registry itself
decides whether a parsed value is acceptable.  Every successful mutation
is saved by the service layer before the menu comes back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadctl.commands._base import RoadCommand

if TYPE_CHECKING:
    from roadctl.commands._context import AppContext
    from roadctl.services.registry import RegistryService
    from roadctl.services.result import ServiceResult

MENU = """
Menu:
1. Add new city(ies)
2. Add roads between cities
3. Add the budget for roads
4. Edit city
5. Search for a city
6. Display cities
7. Display roads
8. Display recorded data on the console
9. Exit"""

EXIT_CHOICE = 9


def _prompt_name(label: str) -> str:
    return click.prompt(label, type=str).strip()


def _add_cities(svc: RegistryService) -> ServiceResult:
    count = click.prompt("Enter the number of cities to add", type=click.IntRange(min=1))
    names = [_prompt_name(f"Enter the name for city {i + 1}") for i in range(count)]
    return svc.add_cities(names)


def _add_road(svc: RegistryService) -> ServiceResult:
    city_a = _prompt_name("Enter the name of the first city")
    city_b = _prompt_name("Enter the name of the second city")
    return svc.add_road(city_a, city_b)


def _set_budget(svc: RegistryService, currency: str) -> ServiceResult:
    city_a = _prompt_name("Enter the name of the first city")
    city_b = _prompt_name("Enter the name of the second city")
    amount = click.prompt(f"Enter the budget for the road (in {currency})", type=float)
    return svc.set_budget(city_a, city_b, amount)


def _rename_city(svc: RegistryService) -> ServiceResult:
    old_name = _prompt_name("Enter the current city name")
    new_name = _prompt_name("Enter the new city name")
    return svc.rename_city(old_name, new_name)


def _find_city(svc: RegistryService) -> ServiceResult:
    index = click.prompt("Enter the city index to search", type=int)
    return svc.find_city(index)


@click.command(
    cls=RoadCommand,
    examples="""\
  roadctl shell
  roadctl --data-dir ./rwanda shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Run the interactive menu until Exit is chosen."""
    if app.settings.no_interact:
        raise click.UsageError("The shell needs interactive input; drop --no-interact.")

    svc = app.service
    currency = app.settings.display.currency
    actions = {
        1: lambda: _add_cities(svc),
        2: lambda: _add_road(svc),
        3: lambda: _set_budget(svc, currency),
        4: lambda: _rename_city(svc),
        5: lambda: _find_city(svc),
        6: svc.list_cities,
        7: svc.road_matrix,
        8: svc.show_all,
    }

    while True:
        click.echo(MENU)
        choice = click.prompt(
            "Enter your choice",
            type=click.IntRange(1, EXIT_CHOICE),
        )
        if choice == EXIT_CHOICE:
            click.echo("Exiting program.")
            return
        app.echo(actions[choice]())
