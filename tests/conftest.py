"""Shared pytest fixtures and test helpers for roadctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from roadctl.config.settings import RoadSettings
from roadctl.domain.registry import InfrastructureRegistry
from roadctl.infrastructure.workspace import Workspace


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ROADCTL_* variables out of every test."""
    for var in ("ROADCTL_CONFIG", "ROADCTL_DATA_DIR", "ROADCTL_ROOT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Empty data directory for one test."""
    root = tmp_path / "data"
    root.mkdir()
    return root


@pytest.fixture
def registry() -> InfrastructureRegistry:
    """Empty registry."""
    return InfrastructureRegistry()


@pytest.fixture
def workspace(data_root: Path) -> Workspace:
    """Workspace on a temp directory with seeding disabled."""
    settings = RoadSettings.from_cli(root=data_root, seed={"enabled": False})
    return Workspace(settings)


@pytest.fixture
def seeded_workspace(data_root: Path) -> Workspace:
    """Workspace on a temp directory with the seed network loaded."""
    settings = RoadSettings.from_cli(root=data_root)
    return Workspace(settings)


@pytest.fixture
def _isolated_workspace(data_root: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Change CWD to a temp data root with seeding disabled.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes.
    """
    (data_root / "roadctl.toml").write_text("[seed]\nenabled = false\n", encoding="utf-8")
    monkeypatch.chdir(data_root)
    yield data_root


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def add_cities(registry: InfrastructureRegistry, *names: str) -> None:
    for name in names:
        registry.add_city(name)


def assert_symmetric(registry: InfrastructureRegistry) -> None:
    n = len(registry)
    roads = registry.connectivity_rows()
    budgets = registry.budget_rows()
    assert len(roads) == n and all(len(row) == n for row in roads)
    assert len(budgets) == n and all(len(row) == n for row in budgets)
    for i in range(n):
        for j in range(n):
            assert roads[i][j] == roads[j][i]
            assert budgets[i][j] == budgets[j][i]


def ok_data(result: Any) -> dict[str, Any]:
    """Assert a ServiceResult succeeded and return its data."""
    assert result.ok, result.error
    return result.data
