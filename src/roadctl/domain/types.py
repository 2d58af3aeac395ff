"""Core value types and the registry error taxonomy.

A :class:`City` is identified by a stable 1-based index; its matrix
position is always ``index - 1``.  Every rejected registry operation
raises :class:`RegistryError` carrying an :class:`ErrorCode`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Reasons a registry operation can be rejected."""

    DUPLICATE_NAME = "DUPLICATE_NAME"
    CITY_NOT_FOUND = "CITY_NOT_FOUND"
    SELF_LOOP = "SELF_LOOP"
    ROAD_ALREADY_EXISTS = "ROAD_ALREADY_EXISTS"
    NO_ROAD_EXISTS = "NO_ROAD_EXISTS"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    NOOP_RENAME = "NOOP_RENAME"
    INVALID_NAME = "INVALID_NAME"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    CORRUPT_STATE = "CORRUPT_STATE"
    SAVE_FAILED = "SAVE_FAILED"


class RegistryError(Exception):
    """A registry operation was rejected. State is left untouched."""

    def __init__(self, code: ErrorCode, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail


@dataclass(frozen=True)
class City:
    """A named location with a permanent index."""

    index: int
    name: str

    @property
    def position(self) -> int:
        """Row/column of this city in the registry matrices."""
        return self.index - 1

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "name": self.name}


@dataclass(frozen=True)
class Road:
    """An undirected road between two cities, as seen from the upper triangle."""

    number: int
    city_a: City
    city_b: City
    budget: float

    @property
    def label(self) -> str:
        return f"{self.city_a.name}-{self.city_b.name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "road": self.label,
            "city_a": self.city_a.name,
            "city_b": self.city_b.name,
            "budget": self.budget,
        }
