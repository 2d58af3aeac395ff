"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI, the interactive shell, and tests consume this type; a failed
operation is data, never an exception crossing the service boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from roadctl.domain.types import RegistryError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_registry_error(cls, exc: RegistryError) -> ServiceError:
        return cls(code=str(exc.code), message=exc.message, detail=dict(exc.detail))


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_city"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: RegistryError) -> ServiceResult:
        """Build a failed result from a rejected registry operation."""
        return cls(ok=False, op=op, error=ServiceError.from_registry_error(exc))
