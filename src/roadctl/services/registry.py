"""RegistryService — cities, roads, and budgets behind ServiceResult.

Mutations follow: APPLY → PERSIST → RESPOND.  The registry rejects bad
input before touching state; a failed save after a successful APPLY is
reported as a warning and does not roll the mutation back.
"""

from __future__ import annotations

import logging
from typing import Any

from roadctl.domain.types import ErrorCode, RegistryError
from roadctl.services.base import BaseService
from roadctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class RegistryService(BaseService):
    """Registry operations for every front end (CLI commands, shell, tests)."""

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_city(self, name: str) -> ServiceResult:
        op = "add_city"
        try:
            city = self._registry.add_city(name)
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        logger.info("Added city %s with index %d", city.name, city.index)
        warnings = self._persist()
        return ServiceResult(ok=True, op=op, data=city.to_dict(), warnings=warnings)

    def add_cities(self, names: list[str]) -> ServiceResult:
        """Add several cities, saving once at the end.

        Each name is attempted independently.  Fails only when no name
        could be added.
        """
        op = "add_cities"
        added: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []
        try:
            registry = self._registry
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)

        for name in names:
            try:
                city = registry.add_city(name)
            except RegistryError as exc:
                errors.append({"name": name, "code": str(exc.code), "error": exc.message})
                continue
            added.append(city.to_dict())

        if errors and not added:
            first = errors[0]
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=first["code"],
                    message=f"No cities added: {first['error']}",
                    detail={"errors": errors},
                ),
            )

        warnings = [f"{e['name']}: {e['error']}" for e in errors]
        if added:
            warnings.extend(self._persist())
        return ServiceResult(
            ok=True,
            op=op,
            data={"added": added, "errors": errors, "count": len(added)},
            warnings=warnings,
        )

    def add_road(self, city_a: str, city_b: str) -> ServiceResult:
        op = "add_road"
        try:
            a, b = self._registry.add_road(city_a, city_b)
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        logger.info("Added road %s-%s", a.name, b.name)
        warnings = self._persist()
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "road": f"{a.name}-{b.name}",
                "city_a": a.name,
                "city_b": b.name,
                "index_a": a.index,
                "index_b": b.index,
            },
            warnings=warnings,
        )

    def set_budget(self, city_a: str, city_b: str, amount: float) -> ServiceResult:
        op = "set_budget"
        try:
            previous = self._registry.set_budget(city_a, city_b, amount)
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        logger.info("Budget %s-%s set to %s (was %s)", city_a, city_b, amount, previous)
        warnings = self._persist()
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "road": f"{city_a.strip()}-{city_b.strip()}",
                "budget": float(amount),
                "previous": previous,
                "currency": self._workspace.settings.display.currency,
            },
            warnings=warnings,
        )

    def rename_city(self, old_name: str, new_name: str) -> ServiceResult:
        op = "rename_city"
        try:
            city = self._registry.rename_city(old_name, new_name)
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        logger.info("Renamed city %d from %s to %s", city.index, old_name, city.name)
        warnings = self._persist()
        return ServiceResult(
            ok=True,
            op=op,
            data={"index": city.index, "old_name": old_name.strip(), "name": city.name},
            warnings=warnings,
        )

    def reset(self, *, seed: bool = True) -> ServiceResult:
        """Discard all cities and roads, optionally reloading the seed network."""
        op = "reset"
        registry = self._workspace.reset(seed=seed)
        logger.info("Registry reset (seeded=%s)", seed)
        warnings = self._persist()
        return ServiceResult(
            ok=True,
            op=op,
            data={"seeded": seed, "cities": len(registry), "roads": len(registry.roads())},
            warnings=warnings,
        )

    def save(self) -> ServiceResult:
        """Write the snapshot files now. A write failure is an error here."""
        op = "save"
        settings = self._workspace.settings
        try:
            self._workspace.save()
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=str(ErrorCode.SAVE_FAILED),
                    message=f"Could not write snapshot: {exc}",
                    detail={"path": str(settings.data_path)},
                ),
            )
        data: dict[str, Any] = {
            "cities_file": str(settings.cities_path),
            "roads_file": str(settings.roads_path),
        }
        if settings.storage.persist_state:
            data["state_file"] = str(settings.state_path)
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_city(self, index: int) -> ServiceResult:
        op = "find_city"
        try:
            city = self._registry.find_city_by_index(index)
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data=city.to_dict())

    def list_cities(self) -> ServiceResult:
        op = "list_cities"
        try:
            items = [c.to_dict() for c in self._registry.cities]
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    def list_roads(self) -> ServiceResult:
        op = "list_roads"
        try:
            items = [r.to_dict() for r in self._registry.roads()]
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "items": items,
                "count": len(items),
                "total_budget": sum(item["budget"] for item in items),
                "currency": self._workspace.settings.display.currency,
            },
        )

    def road_matrix(self) -> ServiceResult:
        op = "road_matrix"
        try:
            registry = self._registry
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "indices": [c.index for c in registry.cities],
                "matrix": [[int(cell) for cell in row] for row in registry.connectivity_rows()],
            },
        )

    def budget_matrix(self) -> ServiceResult:
        op = "budget_matrix"
        try:
            registry = self._registry
        except RegistryError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "indices": [c.index for c in registry.cities],
                "matrix": registry.budget_rows(),
                "currency": self._workspace.settings.display.currency,
            },
        )

    def show_all(self) -> ServiceResult:
        """Cities, road matrix, and budget matrix in one payload."""
        op = "show_all"
        parts = (self.list_cities(), self.road_matrix(), self.budget_matrix())
        for part in parts:
            if not part.ok:
                return ServiceResult(ok=False, op=op, error=part.error)
        cities, roads, budgets = parts
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "cities": cities.data["items"],
                "indices": roads.data["indices"],
                "road_matrix": roads.data["matrix"],
                "budget_matrix": budgets.data["matrix"],
                "currency": budgets.data["currency"],
            },
        )
