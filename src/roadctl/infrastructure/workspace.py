"""Workspace — one registry bound to one data directory.

The Workspace is the single dependency injected into every service. It
owns the in-memory :class:`InfrastructureRegistry` and knows where its
snapshots live:

- **Tables**: ``cities.txt`` and ``roads.txt``, human-readable, rewritten
  in full by :meth:`Workspace.save`.
- **State**: ``.roadctl/state.json``, read back by the next process so
  one-shot CLI commands see each other's changes.

The registry is loaded lazily: from the state file when present,
otherwise seeded (if enabled) and saved once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roadctl.domain.registry import InfrastructureRegistry
from roadctl.domain.seed import seed_registry
from roadctl.infrastructure.store import StateStore
from roadctl.infrastructure.tables import write_tables

if TYPE_CHECKING:
    from pathlib import Path

    from roadctl.config.settings import RoadSettings

logger = logging.getLogger(__name__)


class Workspace:
    """Registry plus its on-disk snapshots for a single data directory."""

    def __init__(self, settings: RoadSettings) -> None:
        self.settings = settings
        self.store = StateStore(settings.state_path)
        self._registry: InfrastructureRegistry | None = None

    @property
    def root(self) -> Path:
        return self.settings.data_path

    @property
    def registry(self) -> InfrastructureRegistry:
        """The registry (loaded or seeded on first access).

        Raises :class:`RegistryError` (CORRUPT_STATE) if the state file
        cannot be read back.
        """
        if self._registry is None:
            self._registry = self._load()
        return self._registry

    def _load(self) -> InfrastructureRegistry:
        if self.settings.storage.persist_state:
            stored = self.store.load()
            if stored is not None:
                return stored
        registry = InfrastructureRegistry()
        if self.settings.seed.enabled:
            seed_registry(registry)
            logger.info("Seeded registry with %d cities", len(registry))
            try:
                self._write(registry)
            except OSError:
                logger.warning("Could not save seeded registry to %s", self.root, exc_info=True)
        return registry

    def reset(self, *, seed: bool) -> InfrastructureRegistry:
        """Replace the registry with an empty (or freshly seeded) one."""
        registry = InfrastructureRegistry()
        if seed:
            seed_registry(registry)
        self._registry = registry
        return registry

    def save(self) -> None:
        """Write both tables and (if enabled) the state file.

        Raises ``OSError`` when any destination cannot be written; the
        in-memory registry is kept as is.
        """
        self._write(self.registry)

    def _write(self, registry: InfrastructureRegistry) -> None:
        write_tables(
            registry,
            self.settings.cities_path,
            self.settings.roads_path,
            precision=self.settings.display.budget_precision,
        )
        if self.settings.storage.persist_state:
            self.store.save(registry)
