"""Tests for RegistryService — results, persistence, and warnings."""

from __future__ import annotations

from pathlib import Path

import pytest

from roadctl.infrastructure.workspace import Workspace
from roadctl.services.registry import RegistryService
from tests.conftest import ok_data


@pytest.fixture
def svc(workspace: Workspace) -> RegistryService:
    return RegistryService(workspace)


def _read(path: Path) -> list[list[str]]:
    return [line.split() for line in path.read_text(encoding="utf-8").splitlines()]


class TestAddCity:
    def test_success_and_save(self, svc: RegistryService, workspace: Workspace) -> None:
        data = ok_data(svc.add_city("Kigali"))
        assert data == {"index": 1, "name": "Kigali"}
        assert _read(workspace.settings.cities_path) == [["Index", "City_Name"], ["1", "Kigali"]]

    def test_duplicate(self, svc: RegistryService) -> None:
        ok_data(svc.add_city("Kigali"))
        result = svc.add_city("Kigali")
        assert not result.ok
        assert result.op == "add_city"
        assert result.error is not None
        assert result.error.code == "DUPLICATE_NAME"


class TestAddCities:
    def test_batch(self, svc: RegistryService) -> None:
        data = ok_data(svc.add_cities(["Kigali", "Huye", "Kigali"]))
        assert [c["index"] for c in data["added"]] == [1, 2]
        assert data["count"] == 2
        assert data["errors"][0]["code"] == "DUPLICATE_NAME"

    def test_partial_failure_is_warning(self, svc: RegistryService) -> None:
        result = svc.add_cities(["Kigali", "Kigali"])
        assert result.ok
        assert any("Kigali" in w for w in result.warnings)

    def test_all_failed(self, svc: RegistryService) -> None:
        ok_data(svc.add_city("Kigali"))
        result = svc.add_cities(["Kigali", " "])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DUPLICATE_NAME"
        assert len(result.error.detail["errors"]) == 2


class TestRoadsAndBudgets:
    def test_end_to_end_tables(self, svc: RegistryService, workspace: Workspace) -> None:
        ok_data(svc.add_city("Kigali"))
        ok_data(svc.add_city("Huye"))
        ok_data(svc.add_road("Kigali", "Huye"))
        data = ok_data(svc.set_budget("Kigali", "Huye", 56.7))
        assert data["budget"] == 56.7
        assert data["previous"] == 0.0
        assert data["currency"] == "billion RWF"

        roads = _read(workspace.settings.roads_path)
        assert roads == [["Nbr", "Road", "Budget"], ["1.", "Kigali-Huye", "56.7"]]
        cities = _read(workspace.settings.cities_path)
        assert cities[1:] == [["1", "Kigali"], ["2", "Huye"]]

    def test_road_twice(self, svc: RegistryService) -> None:
        svc.add_cities(["A", "B"])
        ok_data(svc.add_road("A", "B"))
        result = svc.add_road("A", "B")
        assert result.error is not None
        assert result.error.code == "ROAD_ALREADY_EXISTS"

    def test_budget_without_road(self, svc: RegistryService) -> None:
        svc.add_cities(["A", "B"])
        result = svc.set_budget("A", "B", 1.0)
        assert result.error is not None
        assert result.error.code == "NO_ROAD_EXISTS"

    def test_negative_budget(self, svc: RegistryService) -> None:
        svc.add_cities(["A", "B"])
        svc.add_road("A", "B")
        result = svc.set_budget("A", "B", -1)
        assert result.error is not None
        assert result.error.code == "NEGATIVE_AMOUNT"
        assert ok_data(svc.budget_matrix())["matrix"] == [[0.0, 0.0], [0.0, 0.0]]

    def test_self_loop(self, svc: RegistryService) -> None:
        svc.add_city("A")
        result = svc.add_road("A", "A")
        assert result.error is not None
        assert result.error.code == "SELF_LOOP"

    def test_list_roads(self, svc: RegistryService) -> None:
        svc.add_cities(["A", "B", "C"])
        svc.add_road("A", "B")
        svc.add_road("B", "C")
        svc.set_budget("A", "B", 1.5)
        svc.set_budget("B", "C", 2.0)
        data = ok_data(svc.list_roads())
        assert [r["road"] for r in data["items"]] == ["A-B", "B-C"]
        assert data["total_budget"] == 3.5


class TestRename:
    def test_padded_names_in_payload(self, svc: RegistryService) -> None:
        svc.add_cities(["Kigali", "Huye"])
        svc.add_road("Kigali", "Huye")
        assert ok_data(svc.set_budget(" Kigali", "Huye ", 2.0))["road"] == "Kigali-Huye"
        assert ok_data(svc.rename_city(" Huye", "Butare"))["old_name"] == "Huye"

    def test_rename_updates_tables(self, svc: RegistryService, workspace: Workspace) -> None:
        svc.add_cities(["Kigali", "Huye"])
        svc.add_road("Kigali", "Huye")
        data = ok_data(svc.rename_city("Huye", "Butare"))
        assert data == {"index": 2, "old_name": "Huye", "name": "Butare"}
        assert _read(workspace.settings.roads_path)[1][1] == "Kigali-Butare"

    @pytest.mark.parametrize(
        ("old", "new", "code"),
        [
            ("Kigali", "Kigali", "NOOP_RENAME"),
            ("Ghost", "Spirit", "CITY_NOT_FOUND"),
            ("Kigali", "Huye", "DUPLICATE_NAME"),
        ],
    )
    def test_rename_errors(self, svc: RegistryService, old: str, new: str, code: str) -> None:
        svc.add_cities(["Kigali", "Huye"])
        result = svc.rename_city(old, new)
        assert result.error is not None
        assert result.error.code == code


class TestQueries:
    def test_find_city(self, svc: RegistryService) -> None:
        svc.add_cities(["Kigali", "Huye"])
        assert ok_data(svc.find_city(2)) == {"index": 2, "name": "Huye"}
        missing = svc.find_city(9)
        assert missing.error is not None
        assert missing.error.code == "CITY_NOT_FOUND"

    def test_list_cities(self, svc: RegistryService) -> None:
        svc.add_cities(["Kigali", "Huye"])
        data = ok_data(svc.list_cities())
        assert data["count"] == 2
        assert data["items"][0] == {"index": 1, "name": "Kigali"}

    def test_road_matrix(self, svc: RegistryService) -> None:
        svc.add_cities(["A", "B", "C"])
        svc.add_road("A", "C")
        data = ok_data(svc.road_matrix())
        assert data["indices"] == [1, 2, 3]
        assert data["matrix"] == [[0, 0, 1], [0, 0, 0], [1, 0, 0]]

    def test_show_all(self, svc: RegistryService) -> None:
        svc.add_cities(["A", "B"])
        svc.add_road("A", "B")
        svc.set_budget("A", "B", 4.0)
        data = ok_data(svc.show_all())
        assert len(data["cities"]) == 2
        assert data["road_matrix"] == [[0, 1], [1, 0]]
        assert data["budget_matrix"] == [[0.0, 4.0], [4.0, 0.0]]

    def test_queries_do_not_write(self, svc: RegistryService, workspace: Workspace) -> None:
        svc.list_cities()
        svc.show_all()
        assert not workspace.settings.cities_path.exists()


class TestPersistence:
    def test_save(self, svc: RegistryService, workspace: Workspace) -> None:
        data = ok_data(svc.save())
        assert Path(data["cities_file"]).is_file()
        assert Path(data["roads_file"]).is_file()
        assert data["state_file"] == str(workspace.settings.state_path)

    def test_save_failure_keeps_mutation(
        self, svc: RegistryService, workspace: Workspace, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def boom() -> None:
            raise PermissionError("read-only destination")

        monkeypatch.setattr(workspace, "save", boom)
        result = svc.add_city("Kigali")
        assert result.ok
        assert result.warnings
        assert "read-only destination" in result.warnings[0]
        assert workspace.registry.resolve_city_by_name("Kigali") == 1

    def test_explicit_save_failure_is_error(
        self, svc: RegistryService, workspace: Workspace, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def boom() -> None:
            raise OSError("disk full")

        monkeypatch.setattr(workspace, "save", boom)
        result = svc.save()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "SAVE_FAILED"

    def test_corrupt_state_reported(self, svc: RegistryService, workspace: Workspace) -> None:
        workspace.settings.state_path.parent.mkdir(parents=True, exist_ok=True)
        workspace.settings.state_path.write_text("{oops", encoding="utf-8")
        result = svc.add_city("Kigali")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CORRUPT_STATE"

    def test_reset(self, svc: RegistryService) -> None:
        svc.add_city("Solo")
        data = ok_data(svc.reset(seed=True))
        assert data == {"seeded": True, "cities": 7, "roads": 9}
        data = ok_data(svc.reset(seed=False))
        assert data["cities"] == 0
