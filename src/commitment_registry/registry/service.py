# src/commitment_registry/registry/service.py

"""
Operation façade.

Every mutating call follows the same sequence:
- read the objective table for the relevant address,
- branch on presence,
- validate the supplied fields,
- write to exactly one table.

Consistency between the three tables is enforced here and only here. A
priority or deadline is accepted while an objective exists; terminating the
objective does not remove them (orphans stay readable and overwritable).

Business-rule failures are returned as OpResult values, never raised. Store
I/O errors propagate to the caller.
"""

from __future__ import annotations

import logging
import threading

from ..core.ports import BlockCounter, DeadlineRepo, ObjectiveRepo, PriorityRepo
from . import messages, validation
from .models import (
    DeadlineRecord,
    ErrorKind,
    ObjectiveRecord,
    ObjectiveStatus,
    OpResult,
    PriorityRecord,
)

logger = logging.getLogger(__name__)


def _fail(op: str, address: str, error: ErrorKind) -> OpResult:
    logger.debug("%s rejected address=%s error=%s", op, address, error.value)
    return OpResult.failure(error, messages.FAILURE_MESSAGES[error])


class CommitmentRegistry:
    def __init__(
        self,
        *,
        objectives: ObjectiveRepo,
        priorities: PriorityRepo,
        deadlines: DeadlineRepo,
        counter: BlockCounter,
        max_description_len: int = messages.MAX_DESCRIPTION_LEN,
    ) -> None:
        self.objectives = objectives
        self.priorities = priorities
        self.deadlines = deadlines
        self.counter = counter
        self.max_description_len = int(max_description_len)
        # Serializes operations the way a ledger host would.
        self._lock = threading.RLock()

    def _valid_text(self, text: str) -> bool:
        return validation.is_non_empty(text) and validation.is_within_limit(
            text, self.max_description_len
        )

    # ---- objective table ----

    def initiate(self, caller: str, text: str) -> OpResult:
        with self._lock:
            if self.objectives.exists(caller):
                return _fail("initiate", caller, ErrorKind.ALREADY_EXISTS)
            if not self._valid_text(text):
                return _fail("initiate", caller, ErrorKind.INVALID_INPUT)

            self.objectives.put(caller, ObjectiveRecord(description=text, completed=False))
            logger.info("Objective initiated address=%s len=%d", caller, len(text))
            return OpResult.success(messages.MSG_INITIATED)

    def modify(self, caller: str, text: str, completed: bool) -> OpResult:
        with self._lock:
            if not self.objectives.exists(caller):
                return _fail("modify", caller, ErrorKind.NOT_FOUND)
            if not self._valid_text(text):
                return _fail("modify", caller, ErrorKind.INVALID_INPUT)

            self.objectives.put(caller, ObjectiveRecord(description=text, completed=bool(completed)))
            logger.info("Objective updated address=%s completed=%s", caller, bool(completed))
            return OpResult.success(messages.MSG_MODIFIED)

    def terminate(self, caller: str) -> OpResult:
        with self._lock:
            if not self.objectives.exists(caller):
                return _fail("terminate", caller, ErrorKind.NOT_FOUND)

            self.objectives.delete(caller)
            logger.info("Objective terminated address=%s", caller)
            return OpResult.success(messages.MSG_TERMINATED)

    def inspect(self, caller: str) -> ObjectiveStatus:
        with self._lock:
            record = self.objectives.get(caller)
        if record is None:
            return ObjectiveStatus.absent()
        return ObjectiveStatus(
            present=True,
            description_length=len(record.description),
            completed=record.completed,
        )

    # ---- secondary tables ----

    def classify(self, caller: str, value: int) -> OpResult:
        with self._lock:
            if not self.objectives.exists(caller):
                return _fail("classify", caller, ErrorKind.NOT_FOUND)
            if not validation.is_valid_priority(value):
                return _fail("classify", caller, ErrorKind.INVALID_INPUT)

            self.priorities.put(caller, PriorityRecord(urgency=value))
            logger.info("Priority set address=%s urgency=%s", caller, value)
            return OpResult.success(messages.MSG_CLASSIFIED)

    def schedule(self, caller: str, offset: int) -> OpResult:
        with self._lock:
            if not self.objectives.exists(caller):
                return _fail("schedule", caller, ErrorKind.NOT_FOUND)
            if not validation.is_valid_offset(offset):
                return _fail("schedule", caller, ErrorKind.INVALID_INPUT)

            # Frozen at write time; never re-derived from the counter later.
            target = self.counter.current() + offset
            if target > messages.MAX_POINT:
                return _fail("schedule", caller, ErrorKind.INVALID_INPUT)
            self.deadlines.put(caller, DeadlineRecord(target_point=target, alert_activated=False))
            logger.info("Deadline scheduled address=%s target=%s", caller, target)
            return OpResult.success(messages.MSG_SCHEDULED)

    def priority_of(self, caller: str) -> PriorityRecord | None:
        with self._lock:
            return self.priorities.get(caller)

    def deadline_of(self, caller: str) -> DeadlineRecord | None:
        with self._lock:
            return self.deadlines.get(caller)

    def current_point(self) -> int:
        return self.counter.current()

    # ---- delegation ----

    def delegate(self, caller: str, target: str, text: str) -> OpResult:
        """
        Seed `target`'s objective on its behalf.

        No relationship between caller and target is required: any caller may
        create a record for any address that currently has none.
        """
        with self._lock:
            if self.objectives.exists(target):
                return _fail("delegate", target, ErrorKind.ALREADY_EXISTS)
            if not validation.is_valid_address(target) or not self._valid_text(text):
                return _fail("delegate", target, ErrorKind.INVALID_INPUT)

            self.objectives.put(target, ObjectiveRecord(description=text, completed=False))
            logger.info("Objective delegated caller=%s target=%s", caller, target)
            return OpResult.success(messages.MSG_DELEGATED)
