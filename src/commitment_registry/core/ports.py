# src/commitment_registry/core/ports.py

"""
Ports (interfaces) used by the registry core.

The façade depends on Protocols instead of concrete stores, so SQLite tables,
in-memory fakes and any other keyed backend are interchangeable.
"""

from __future__ import annotations

from typing import Protocol

from ..registry.models import DeadlineRecord, ObjectiveRecord, PriorityRecord


class ObjectiveRepo(Protocol):
    def get(self, address: str) -> ObjectiveRecord | None: ...
    def exists(self, address: str) -> bool: ...
    def put(self, address: str, record: ObjectiveRecord) -> None: ...
    def delete(self, address: str) -> bool: ...


class PriorityRepo(Protocol):
    def get(self, address: str) -> PriorityRecord | None: ...
    def put(self, address: str, record: PriorityRecord) -> None: ...


class DeadlineRepo(Protocol):
    def get(self, address: str) -> DeadlineRecord | None: ...
    def put(self, address: str, record: DeadlineRecord) -> None: ...


class BlockCounter(Protocol):
    """Host-provided monotonic counter used as the deadline time reference."""

    def current(self) -> int: ...
