"""InfrastructureRegistry — cities, roads, and road budgets.

INVARIANT: both matrices are square with dimension equal to the city
count, and symmetric.  A non-zero budget only exists on a connected cell.

INVARIANT: every check runs before any mutation.  A rejected operation
raises :class:`RegistryError` and leaves cities and matrices unchanged.

Name lookups are linear scans over the ordered city list; the registry
holds a handful of cities.
"""

from __future__ import annotations

import math
from typing import Any

from roadctl.domain.matrix import SymmetricMatrix
from roadctl.domain.types import City, ErrorCode, RegistryError, Road

SNAPSHOT_VERSION = 1


class InfrastructureRegistry:
    """Ordered city list plus connectivity and budget matrices."""

    def __init__(self) -> None:
        self._cities: list[City] = []
        self._connected: SymmetricMatrix[bool] = SymmetricMatrix(False)
        self._budgets: SymmetricMatrix[float] = SymmetricMatrix(0.0)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def cities(self) -> list[City]:
        """Cities in insertion order (a copy)."""
        return list(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def resolve_city_by_name(self, name: str) -> int | None:
        """Return the index of the city called *name*, or None."""
        for city in self._cities:
            if city.name == name:
                return city.index
        return None

    def find_city_by_index(self, index: int) -> City:
        """Return the city with *index*; raise CITY_NOT_FOUND otherwise."""
        for city in self._cities:
            if city.index == index:
                return city
        raise RegistryError(
            ErrorCode.CITY_NOT_FOUND,
            f"City with index {index} not found",
            index=index,
        )

    def is_connected(self, name_a: str, name_b: str) -> bool:
        i, j = self._positions(name_a.strip(), name_b.strip())
        return self._connected[i, j]

    def budget_between(self, name_a: str, name_b: str) -> float:
        i, j = self._positions(name_a.strip(), name_b.strip())
        return self._budgets[i, j]

    def connectivity_rows(self) -> list[list[bool]]:
        return self._connected.rows()

    def budget_rows(self) -> list[list[float]]:
        return self._budgets.rows()

    def roads(self) -> list[Road]:
        """Connected pairs ``i < j`` in row-major order, numbered from 1."""
        result: list[Road] = []
        for i, j, connected in self._connected.upper():
            if connected:
                result.append(
                    Road(
                        number=len(result) + 1,
                        city_a=self._cities[i],
                        city_b=self._cities[j],
                        budget=self._budgets[i, j],
                    )
                )
        return result

    def check_invariants(self) -> list[str]:
        """Return a list of broken invariants (empty when consistent)."""
        issues: list[str] = []
        n = len(self._cities)
        if self._connected.size != n or self._budgets.size != n:
            issues.append(
                f"Matrix size mismatch: {n} cities, "
                f"{self._connected.size} connectivity, {self._budgets.size} budget"
            )
            return issues
        indices = [c.index for c in self._cities]
        if any(b <= a for a, b in zip(indices, indices[1:], strict=False)):
            issues.append("City indices are not strictly increasing")
        if len({c.name for c in self._cities}) != n:
            issues.append("City names are not unique")
        if not self._connected.is_symmetric():
            issues.append("Connectivity matrix is not symmetric")
        if not self._budgets.is_symmetric():
            issues.append("Budget matrix is not symmetric")
        for i in range(n):
            for j in range(n):
                if self._budgets[i, j] and not self._connected[i, j]:
                    issues.append(f"Budget without road at ({i}, {j})")
                if self._budgets[i, j] < 0:
                    issues.append(f"Negative budget at ({i}, {j})")
        return issues

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_city(self, name: str) -> City:
        """Append a city and grow both matrices by one row and column."""
        name = _clean_name(name)
        if self.resolve_city_by_name(name) is not None:
            raise RegistryError(
                ErrorCode.DUPLICATE_NAME,
                f"City {name} already exists",
                name=name,
            )
        index = self._cities[-1].index + 1 if self._cities else 1
        city = City(index=index, name=name)
        self._connected.grow()
        self._budgets.grow()
        self._cities.append(city)
        return city

    def add_road(self, name_a: str, name_b: str) -> tuple[City, City]:
        """Connect two distinct cities."""
        name_a, name_b = name_a.strip(), name_b.strip()
        if name_a == name_b:
            raise RegistryError(
                ErrorCode.SELF_LOOP,
                f"Cannot build a road from {name_a} to itself",
                city=name_a,
            )
        i, j = self._positions(name_a, name_b)
        if self._connected[i, j]:
            raise RegistryError(
                ErrorCode.ROAD_ALREADY_EXISTS,
                f"Road between {name_a} and {name_b} already exists",
                city_a=name_a,
                city_b=name_b,
            )
        self._connected[i, j] = True
        return self._cities[i], self._cities[j]

    def set_budget(self, name_a: str, name_b: str, amount: float) -> float:
        """Write the budget of an existing road, replacing any previous value.

        Returns the previous budget.
        """
        name_a, name_b = name_a.strip(), name_b.strip()
        amount = float(amount)
        if math.isnan(amount) or math.isinf(amount):
            raise RegistryError(
                ErrorCode.INVALID_AMOUNT,
                f"Budget must be a finite number, got {amount}",
                amount=amount,
            )
        if amount < 0:
            raise RegistryError(
                ErrorCode.NEGATIVE_AMOUNT,
                f"Budget cannot be negative, got {amount}",
                amount=amount,
            )
        i, j = self._positions(name_a, name_b)
        if not self._connected[i, j]:
            raise RegistryError(
                ErrorCode.NO_ROAD_EXISTS,
                f"No road exists between {name_a} and {name_b}",
                city_a=name_a,
                city_b=name_b,
            )
        previous = self._budgets[i, j]
        self._budgets[i, j] = amount
        return previous

    def rename_city(self, old_name: str, new_name: str) -> City:
        """Rename a city in place, keeping its index and matrix position."""
        old_name, new_name = old_name.strip(), _clean_name(new_name)
        if old_name == new_name:
            raise RegistryError(
                ErrorCode.NOOP_RENAME,
                f"City is already named {old_name}",
                name=old_name,
            )
        index = self.resolve_city_by_name(old_name)
        if index is None:
            raise RegistryError(
                ErrorCode.CITY_NOT_FOUND,
                f"City {old_name} not found",
                name=old_name,
            )
        if self.resolve_city_by_name(new_name) is not None:
            raise RegistryError(
                ErrorCode.DUPLICATE_NAME,
                f"City {new_name} already exists",
                name=new_name,
            )
        position = self._position_of(index)
        renamed = City(index=index, name=new_name)
        self._cities[position] = renamed
        return renamed

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def to_snapshot(self) -> dict[str, Any]:
        """Plain-data view of the registry (JSON-serializable)."""
        return {
            "version": SNAPSHOT_VERSION,
            "cities": [c.to_dict() for c in self._cities],
            "roads": [
                {"a": i, "b": j, "budget": self._budgets[i, j]}
                for i, j, connected in self._connected.upper()
                if connected
            ],
        }

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> InfrastructureRegistry:
        """Rebuild a registry from :meth:`to_snapshot` output.

        Raises CORRUPT_STATE when the data breaks any registry invariant.
        """
        version = data.get("version")
        if version != SNAPSHOT_VERSION:
            raise RegistryError(
                ErrorCode.CORRUPT_STATE,
                f"Unsupported snapshot version: {version!r}",
                version=version,
            )
        registry = cls()
        try:
            for entry in data.get("cities", []):
                name = _clean_name(str(entry["name"]))
                index = int(entry["index"])
                if index != len(registry._cities) + 1:
                    msg = f"City index {index} out of sequence"
                    raise RegistryError(ErrorCode.CORRUPT_STATE, msg, index=index)
                if registry.resolve_city_by_name(name) is not None:
                    msg = f"Duplicate city name {name}"
                    raise RegistryError(ErrorCode.CORRUPT_STATE, msg, name=name)
                registry._connected.grow()
                registry._budgets.grow()
                registry._cities.append(City(index=index, name=name))
            for entry in data.get("roads", []):
                i, j = int(entry["a"]), int(entry["b"])
                budget = float(entry.get("budget", 0.0))
                if i == j or budget < 0 or not math.isfinite(budget):
                    msg = f"Invalid road entry {entry!r}"
                    raise RegistryError(ErrorCode.CORRUPT_STATE, msg)
                registry._connected[i, j] = True
                registry._budgets[i, j] = budget
        except (KeyError, TypeError, ValueError, IndexError) as exc:
            raise RegistryError(
                ErrorCode.CORRUPT_STATE,
                f"Malformed registry snapshot: {exc}",
            ) from exc
        return registry

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _position_of(self, index: int) -> int:
        for position, city in enumerate(self._cities):
            if city.index == index:
                return position
        raise RegistryError(ErrorCode.CITY_NOT_FOUND, f"City with index {index} not found")

    def _positions(self, name_a: str, name_b: str) -> tuple[int, int]:
        """Resolve two names to matrix positions or raise CITY_NOT_FOUND."""
        positions: list[int] = []
        missing: list[str] = []
        for name in (name_a, name_b):
            index = self.resolve_city_by_name(name)
            if index is not None:
                positions.append(self._position_of(index))
            elif name not in missing:
                missing.append(name)
        if missing:
            raise RegistryError(
                ErrorCode.CITY_NOT_FOUND,
                f"City not found: {' and '.join(missing)}",
                missing=missing,
            )
        return positions[0], positions[1]


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise RegistryError(ErrorCode.INVALID_NAME, "City name cannot be empty")
    return cleaned
