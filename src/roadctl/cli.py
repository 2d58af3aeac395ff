"""Root CLI group for roadctl with global flags and command registration."""

from __future__ import annotations

import click

from roadctl import __version__
from roadctl.commands import register_commands
from roadctl.commands._context import AppContext
from roadctl.config.settings import RoadSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="roadctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-d",
    "--data-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for cities.txt, roads.txt, and saved state.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    data_dir: str | None,
) -> None:
    """roadctl — record cities, roads, and road budgets."""
    ctx.ensure_object(dict)
    settings = RoadSettings.from_cli(
        config_path=config_path,
        data_dir=data_dir,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    cli()
