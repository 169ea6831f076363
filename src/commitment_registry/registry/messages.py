# src/commitment_registry/registry/messages.py

"""Numeric bounds and user-facing message strings for registry operations."""

from __future__ import annotations

from typing import Final

from .models import ErrorKind

MAX_DESCRIPTION_LEN: Final = 100
MIN_PRIORITY: Final = 1
MAX_PRIORITY: Final = 3
# Largest value a SQLite INTEGER column can hold.
MAX_POINT: Final = 2**63 - 1

MSG_INITIATED: Final = "Objective initiated."
MSG_MODIFIED: Final = "Objective updated."
MSG_TERMINATED: Final = "Objective terminated."
MSG_CLASSIFIED: Final = "Priority set."
MSG_SCHEDULED: Final = "Deadline scheduled."
MSG_DELEGATED: Final = "Objective delegated."

FAILURE_MESSAGES: Final[dict[ErrorKind, str]] = {
    ErrorKind.NOT_FOUND: "No objective exists for this address.",
    ErrorKind.ALREADY_EXISTS: "An objective already exists for this address.",
    ErrorKind.INVALID_INPUT: "Invalid input.",
}
