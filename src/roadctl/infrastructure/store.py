"""JSON state file so separate CLI invocations share one registry.

The text tables are display snapshots; this file is what a new process
reads back.  Layout::

    {"version": 1,
     "cities": [{"index": 1, "name": "Kigali"}, ...],
     "roads": [{"a": 0, "b": 1, "budget": 56.7}, ...]}

``a``/``b`` are 0-based matrix positions with ``a < b``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from roadctl.domain.registry import InfrastructureRegistry
from roadctl.domain.types import ErrorCode, RegistryError
from roadctl.infrastructure.filesystem import atomic_write_text

logger = logging.getLogger(__name__)


class StateStore:
    """Load and save registry snapshots at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> InfrastructureRegistry | None:
        """Return the stored registry, or None when no state file exists.

        Raises :class:`RegistryError` (CORRUPT_STATE) for unreadable content.
        """
        if not self.exists():
            return None
        try:
            data: Any = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise RegistryError(
                ErrorCode.CORRUPT_STATE,
                f"Cannot read state file {self.path}: {exc}",
                path=str(self.path),
            ) from exc
        if not isinstance(data, dict):
            raise RegistryError(
                ErrorCode.CORRUPT_STATE,
                f"State file {self.path} does not hold an object",
                path=str(self.path),
            )
        registry = InfrastructureRegistry.from_snapshot(data)
        logger.debug("Loaded %d cities from %s", len(registry), self.path)
        return registry

    def save(self, registry: InfrastructureRegistry) -> None:
        atomic_write_text(self.path, json.dumps(registry.to_snapshot(), indent=2) + "\n")
        logger.debug("Saved state to %s", self.path)
