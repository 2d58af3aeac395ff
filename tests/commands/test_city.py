"""Tests for the city CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from roadctl.cli import cli


def _json(result) -> dict:
    return json.loads(result.output)


@pytest.mark.usefixtures("_isolated_workspace")
class TestCityAdd:
    def test_add_single(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "city", "add", "Kigali"])
        assert result.exit_code == 0
        data = _json(result)
        assert data["ok"] is True
        assert data["data"] == {"index": 1, "name": "Kigali"}

    def test_add_many(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "city", "add", "Kigali", "Huye", "Muhanga"])
        assert result.exit_code == 0
        data = _json(result)
        assert data["op"] == "add_cities"
        assert [c["index"] for c in data["data"]["added"]] == [1, 2, 3]

    def test_state_shared_between_runs(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["city", "add", "Kigali"])
        result = cli_runner.invoke(cli, ["--json", "city", "add", "Huye"])
        assert _json(result)["data"]["index"] == 2

    def test_duplicate_exits_1(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["city", "add", "Kigali"])
        result = cli_runner.invoke(cli, ["city", "add", "Kigali"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "already exists" in result.output

    def test_writes_cities_table(self, cli_runner: CliRunner, _isolated_workspace: Path) -> None:
        cli_runner.invoke(cli, ["city", "add", "Kigali", "Huye"])
        lines = (_isolated_workspace / "cities.txt").read_text(encoding="utf-8").splitlines()
        assert [line.split() for line in lines] == [
            ["Index", "City_Name"],
            ["1", "Kigali"],
            ["2", "Huye"],
        ]

    def test_requires_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["city", "add"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_workspace")
class TestCityRenameFindList:
    def test_rename(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["city", "add", "Kigali", "Huye"])
        result = cli_runner.invoke(cli, ["--json", "city", "rename", "Huye", "Butare"])
        assert result.exit_code == 0
        assert _json(result)["data"] == {"index": 2, "old_name": "Huye", "name": "Butare"}

    def test_rename_noop(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["city", "add", "Kigali"])
        result = cli_runner.invoke(cli, ["--json", "city", "rename", "Kigali", "Kigali"])
        assert result.exit_code == 1
        assert _json(result)["error"]["code"] == "NOOP_RENAME"

    def test_find(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["city", "add", "Kigali", "Huye"])
        result = cli_runner.invoke(cli, ["city", "find", "2"])
        assert result.exit_code == 0
        assert "City found: 2: Huye" in result.output

    def test_find_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "city", "find", "42"])
        assert result.exit_code == 1
        assert _json(result)["error"]["code"] == "CITY_NOT_FOUND"

    def test_find_non_integer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["city", "find", "two"])
        assert result.exit_code == 2

    def test_list_quiet(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["city", "add", "Kigali", "Huye"])
        result = cli_runner.invoke(cli, ["-q", "city", "list"])
        assert result.exit_code == 0
        assert result.output.strip().splitlines() == ["Kigali", "Huye"]

    def test_list_with_undecodable_state(
        self, cli_runner: CliRunner, _isolated_workspace: Path
    ) -> None:
        state = _isolated_workspace / ".roadctl" / "state.json"
        state.parent.mkdir(parents=True)
        state.write_bytes(b"\xff\xfe{not json")
        result = cli_runner.invoke(cli, ["city", "list"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "ERROR" in result.output
        assert "list_cities" in result.output

        result = cli_runner.invoke(cli, ["--json", "city", "list"])
        assert _json(result)["error"]["code"] == "CORRUPT_STATE"


class TestSeeding:
    def test_first_run_seeds(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["--json", "city", "list"])
        assert result.exit_code == 0
        assert _json(result)["data"]["count"] == 7
        assert (tmp_path / "roads.txt").is_file()
