"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Workspace initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadctl.config.logging import configure_logging
from roadctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from roadctl.config.settings import RoadSettings
    from roadctl.infrastructure.workspace import Workspace
    from roadctl.services.registry import RegistryService
    from roadctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace is created lazily on first use so ``--help`` and
    ``--version`` never read or write the data directory.
    """

    def __init__(self, settings: RoadSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def workspace(self) -> Workspace:
        """The workspace instance (created lazily on first access)."""
        if self._workspace is None:
            from roadctl.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    @property
    def service(self) -> RegistryService:
        from roadctl.services.registry import RegistryService

        return RegistryService(self.workspace)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def render(self, result: ServiceResult) -> str:
        return format_result(result, settings=self.output_settings)

    def echo(self, result: ServiceResult) -> None:
        """Print a result without exit semantics (used by the interactive shell).

        Failures and warnings go to stderr.
        """
        click.echo(self.render(result), err=not result.ok)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        self.echo(result)
        if not result.ok:
            raise SystemExit(1)
