"""Fixed-width text tables for cities and roads.

Cities table::

    Index   City_Name
    1       Kigali

Roads table (one row per connected pair ``i < j``, row-major)::

    Nbr  Road                     Budget
    1.   Kigali-Huye              56.7

Both files are regenerated in full on every save.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from roadctl.infrastructure.filesystem import atomic_write_text

if TYPE_CHECKING:
    from roadctl.domain.registry import InfrastructureRegistry
    from roadctl.domain.types import City, Road

logger = logging.getLogger(__name__)

CITY_COLUMNS: tuple[tuple[str, int], ...] = (("Index", 8), ("City_Name", 20))
ROAD_COLUMNS: tuple[tuple[str, int], ...] = (("Nbr", 5), ("Road", 25), ("Budget", 10))


def _row(values: Iterable[str], columns: tuple[tuple[str, int], ...]) -> str:
    return "".join(f"{value:<{width}}" for value, (_, width) in zip(values, columns, strict=True))


def render_cities_table(cities: Iterable[City]) -> str:
    lines = [_row((name for name, _ in CITY_COLUMNS), CITY_COLUMNS)]
    lines.extend(_row((str(c.index), c.name), CITY_COLUMNS) for c in cities)
    return "\n".join(lines) + "\n"


def render_roads_table(roads: Iterable[Road], *, precision: int = 1) -> str:
    lines = [_row((name for name, _ in ROAD_COLUMNS), ROAD_COLUMNS)]
    lines.extend(
        _row((f"{r.number}.", r.label, f"{r.budget:.{precision}f}"), ROAD_COLUMNS) for r in roads
    )
    return "\n".join(lines) + "\n"


def write_tables(
    registry: InfrastructureRegistry,
    cities_path: Path,
    roads_path: Path,
    *,
    precision: int = 1,
) -> None:
    """Overwrite both table files from the current registry contents.

    The two files are written independently; an ``OSError`` on the
    second leaves the first already replaced.
    """
    atomic_write_text(cities_path, render_cities_table(registry.cities))
    atomic_write_text(roads_path, render_roads_table(registry.roads(), precision=precision))
    logger.debug("Wrote tables %s and %s (%d cities)", cities_path, roads_path, len(registry))
