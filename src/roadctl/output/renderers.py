"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from roadctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from roadctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        key = "road" if result.op == "list_roads" else "name"
        return "\n".join(str(item.get(key, "")) for item in items)
    if result.op in ("add_city", "find_city", "rename_city"):
        return str(result.data.get("index", ""))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "road.ok"), (f"  {result.op}", "road.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="road.key")
    if key == "index" or key.startswith("index_"):
        v = Text(str(value), style="road.index")
    elif key in ("name", "old_name", "road", "city_a", "city_b"):
        v = Text(str(value), style="road.city")
    elif key in ("budget", "previous") and isinstance(value, (int, float)):
        v = Text(f"{value:.1f}", style="road.budget")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _print_titled(console: Console, title: str, table: Table) -> None:
    """Print *title* unwrapped on its own line, then *table*."""
    console.print(Text(title, style="road.title"))
    console.print(table)


def _matrix_table(
    indices: list[int],
    matrix: list[list[Any]],
    *,
    fmt: str,
) -> Table:
    """Build a Rich Table with city indices as row and column headers."""
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("", style="road.index", justify="right", no_wrap=True)
    for index in indices:
        table.add_column(str(index), justify="right")
    for index, row in zip(indices, matrix, strict=True):
        cells: list[Text] = []
        for value in row:
            style = "road.connected" if value else "road.empty"
            cells.append(Text(format(value, fmt), style=style))
        table.add_row(str(index), *cells)
    return table


def _print_road_matrix(console: Console, data: dict[str, Any], key: str) -> None:
    indices = data.get("indices", [])
    if not indices:
        console.print("No cities recorded yet.")
        return
    _print_titled(console, "Roads Adjacency Matrix", _matrix_table(indices, data[key], fmt="d"))


def _print_budget_matrix(console: Console, data: dict[str, Any], key: str) -> None:
    indices = data.get("indices", [])
    if not indices:
        console.print("No cities recorded yet.")
        return
    currency = data.get("currency", "")
    title = f"Budgets Adjacency Matrix (in {currency})" if currency else "Budgets Adjacency Matrix"
    _print_titled(console, title, _matrix_table(indices, data[key], fmt=".1f"))


def _print_cities(console: Console, items: list[dict[str, Any]]) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Index", style="road.index", justify="right", no_wrap=True)
    table.add_column("City", style="road.city")
    for item in items:
        table.add_row(str(item.get("index", "")), Text(str(item.get("name", ""))))
    _print_titled(console, "Cities", table)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "road.error"), (f"  {result.op}", "road.op"), " — ", msg)
    )

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add_city / add_road / set_budget / rename_city results."""
    _status_line(console, result)
    mutation_keys = (
        "index",
        "old_name",
        "name",
        "road",
        "budget",
        "currency",
    )
    for key in mutation_keys:
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose and "previous" in result.data:
        _field(console, "previous", result.data["previous"])


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add_cities results."""
    _status_line(console, result)
    added = result.data.get("added", [])
    errors = result.data.get("errors", [])
    for city in added:
        console.print(
            Text.assemble(
                "  City ",
                (str(city["name"]), "road.city"),
                " added with index ",
                (str(city["index"]), "road.index"),
            )
        )
    for err in errors:
        console.print(
            Text.assemble("  ", ("error", "road.error"), f" {err.get('name')}: {err.get('error')}")
        )


def _render_save(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("cities_file", "roads_file", "state_file"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_reset(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("seeded", "cities", "roads"):
        _field(console, key, result.data.get(key))


# ── Query renderers ───────────────────────────────────────────────────


def _render_find(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(
        Text.assemble(
            "City found: ",
            (str(d.get("index")), "road.index"),
            ": ",
            (str(d.get("name")), "road.city"),
        )
    )


def _render_cities(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No cities recorded yet.")
        return
    _print_cities(console, items)
    console.print(f"\n{result.data.get('count', len(items))} cities")


def _render_roads(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No roads recorded yet.")
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Nbr", justify="right", no_wrap=True)
    table.add_column("Road", style="road.city")
    table.add_column("Budget", style="road.budget", justify="right")
    for item in items:
        table.add_row(f"{item['number']}.", Text(item["road"]), f"{item['budget']:.1f}")
    _print_titled(console, "Roads", table)
    total = result.data.get("total_budget", 0.0)
    currency = result.data.get("currency", "")
    console.print(f"\n{result.data.get('count', len(items))} roads, total {total:.1f} {currency}")


def _render_road_matrix(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _print_road_matrix(console, result.data, "matrix")


def _render_budget_matrix(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _print_budget_matrix(console, result.data, "matrix")


def _render_show_all(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    cities = d.get("cities", [])
    if not cities:
        console.print("No cities recorded yet.")
        return
    _print_cities(console, cities)
    console.print()
    _print_road_matrix(console, d, "road_matrix")
    console.print()
    _print_budget_matrix(console, d, "budget_matrix")


# ── Fallback ──────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Key-value fallback for ops without a dedicated renderer."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "add_city": _render_mutation,
    "add_road": _render_mutation,
    "set_budget": _render_mutation,
    "rename_city": _render_mutation,
    "add_cities": _render_batch,
    "save": _render_save,
    "reset": _render_reset,
    "find_city": _render_find,
    "list_cities": _render_cities,
    "list_roads": _render_roads,
    "road_matrix": _render_road_matrix,
    "budget_matrix": _render_budget_matrix,
    "show_all": _render_show_all,
}
