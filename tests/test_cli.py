"""Tests for the root roadctl CLI."""

import pytest
from click.testing import CliRunner

from roadctl import __version__
from roadctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "roadctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [
        ["--json"],
        ["-q"],
        ["-v"],
        ["--log-json"],
        ["--no-interact"],
        ["-c", "/tmp/does-not-exist.toml"],
        ["--data-dir", "/tmp/roadctl-data"],
    ],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


# --- Commands registered ---

EXPECTED_GROUPS = ["city", "road"]
EXPECTED_COMMANDS = ["show", "save", "reset", "shell"]


@pytest.mark.parametrize("name", EXPECTED_GROUPS + EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0


@pytest.mark.parametrize(
    "args",
    [
        ["city", "--examples"],
        ["city", "add", "--examples"],
        ["road", "budget", "--examples"],
        ["shell", "--examples"],
    ],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "roadctl" in result.output


def test_help_does_not_touch_data_dir(cli_runner: CliRunner, tmp_path) -> None:
    data = tmp_path / "data"
    result = cli_runner.invoke(cli, ["--data-dir", str(data), "city", "--help"])
    assert result.exit_code == 0
    assert not data.exists()


def test_help_lists_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["city", "add", "--help"])
    assert result.exit_code == 0
    assert "Examples:" in result.output
    assert "  roadctl city add Karongi Nyanza Rwamagana" in result.output


def test_examples_flag_prints_dedented_lines(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["city", "rename", "--examples"])
    assert result.output.splitlines()[-1] == "  roadctl city rename Karongi Kibuye"
