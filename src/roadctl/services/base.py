"""BaseService — foundation for roadctl services.

Every service receives a :class:`Workspace` at construction time. The
workspace provides the registry and persists snapshots of it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roadctl.domain.registry import InfrastructureRegistry
    from roadctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RegistryService(BaseService):
            def add_city(self, name: str) -> ServiceResult:
                city = self._registry.add_city(name)
                warnings = self._persist()
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def _registry(self) -> InfrastructureRegistry:
        return self._workspace.registry

    def _persist(self) -> list[str]:
        """Save after a successful mutation.

        INVARIANT: Save failures are warnings, never errors. The mutation
        already applied in memory is kept.
        """
        try:
            self._workspace.save()
        except OSError as exc:
            logger.warning("Snapshot write failed: %s", exc)
            return [f"Changes kept in memory but not saved: {exc}"]
        return []
