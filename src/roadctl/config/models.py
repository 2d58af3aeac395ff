"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, roadctl.toml only contains overrides.
A fresh data directory needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- roadctl.toml sections ---


class StorageConfig(BaseModel):
    """[storage] section.

    Relative paths resolve against the data directory; ``data_dir``
    itself resolves against the directory holding ``roadctl.toml``.
    """

    model_config = {"frozen": True}

    data_dir: str = "."
    cities_file: str = "cities.txt"
    roads_file: str = "roads.txt"
    state_file: str = ".roadctl/state.json"
    persist_state: bool = True


class SeedConfig(BaseModel):
    """[seed] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    currency: str = "billion RWF"
    budget_precision: int = Field(default=1, ge=0, le=6)

