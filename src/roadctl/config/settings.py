"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ROADCTL_*`` prefix
  3. TOML file    — ``roadctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reads the file located by :mod:`roadctl.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from roadctl.config.discovery import read_config, resolve_config
from roadctl.config.models import DisplayConfig, SeedConfig, StorageConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``roadctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RoadSettings(BaseSettings):
    """Unified settings for the entire roadctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        root: Directory of ``roadctl.toml``, or CWD if no config found.
        config_path: The config file in effect, if any.
        data_dir: Explicit ``--data-dir`` override; wins over
            ``[storage] data_dir``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROADCTL_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths (not in TOML — derived from config location) ---
    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    data_dir: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    storage: StorageConfig = Field(default_factory=StorageConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        data_dir: str | Path | None = None,
        **cli_flags: Any,
    ) -> RoadSettings:
        """Construct settings from CLI invocation.

        Discovers ``roadctl.toml`` via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        toml_path = resolve_config(config_path, root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        if data_dir is not None:
            cli_flags["data_dir"] = Path(data_dir)

        _tls.toml_path = toml_path
        try:
            return cls(
                root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    # --- Derived paths ---

    @property
    def data_path(self) -> Path:
        """Directory holding the text tables and the state file."""
        if self.data_dir is not None:
            return self.data_dir
        return self.root / self.storage.data_dir

    @property
    def cities_path(self) -> Path:
        return self.data_path / self.storage.cities_file

    @property
    def roads_path(self) -> Path:
        return self.data_path / self.storage.roads_file

    @property
    def state_path(self) -> Path:
        return self.data_path / self.storage.state_file
