# src/commitment_registry/registry/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """
    Failure kinds shared by every registry operation.

    Notes:
    - NOT_FOUND: the call needs an existing objective for the key.
    - ALREADY_EXISTS: the call needs the key to have no objective.
    - INVALID_INPUT: a field failed its validation predicate.
    """

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_INPUT = "invalid_input"


@dataclass(slots=True, frozen=True)
class ObjectiveRecord:
    description: str
    completed: bool = False


@dataclass(slots=True, frozen=True)
class PriorityRecord:
    urgency: int


@dataclass(slots=True, frozen=True)
class DeadlineRecord:
    target_point: int
    alert_activated: bool = False


@dataclass(slots=True, frozen=True)
class ObjectiveStatus:
    """Read-only projection returned by inspect(); absence is a normal value."""

    present: bool
    description_length: int = 0
    completed: bool = False

    @classmethod
    def absent(cls) -> ObjectiveStatus:
        return cls(present=False)


@dataclass(slots=True, frozen=True)
class OpResult:
    """
    Tagged outcome of a mutating operation.

    ok=True carries a confirmation message; ok=False carries the ErrorKind
    and a human-readable failure message.
    """

    ok: bool
    message: str
    error: ErrorKind | None = None

    @classmethod
    def success(cls, message: str) -> OpResult:
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> OpResult:
        return cls(ok=False, message=message, error=error)
