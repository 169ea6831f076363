# src/commitment_registry/registry/counter.py

"""
Block counter providers.

A counter is the monotonically increasing time reference that schedule()
turns an offset into an absolute target point with. The façade only calls
current(); advancing is a host concern.
"""

from __future__ import annotations

import logging
import math
import sqlite3
import threading
import time
from collections.abc import Callable
from pathlib import Path

from .messages import MAX_POINT

logger = logging.getLogger(__name__)


def _check_step(n: int) -> int:
    n = int(n)
    if n < 0:
        raise ValueError("counter can only move forward")
    return n


def _check_ceiling(value: int) -> int:
    if value > MAX_POINT:
        raise ValueError(f"counter cannot pass {MAX_POINT}")
    return value


class ManualCounter:
    """In-memory counter moved explicitly with advance()."""

    def __init__(self, start: int = 0) -> None:
        self._value = _check_ceiling(_check_step(start))
        self._lock = threading.Lock()

    def current(self) -> int:
        with self._lock:
            return self._value

    def advance(self, n: int = 1) -> int:
        step = _check_step(n)
        with self._lock:
            self._value = _check_ceiling(self._value + step)
            return self._value


class SQLiteCounter:
    """
    Persistent counter kept in a one-row `counter` table.

    Survives restarts; shares the database file with the registry stores.
    """

    def __init__(self, db_path: str | Path, start: int = 0) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        start = _check_ceiling(_check_step(start))

        conn = self._get_conn()
        try:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS counter (id INTEGER PRIMARY KEY CHECK (id = 1), value INTEGER NOT NULL)"
            )
            conn.execute("INSERT OR IGNORE INTO counter(id, value) VALUES (1, ?)", (start,))
            conn.commit()
        finally:
            conn.close()
        logger.info("SQLiteCounter ready db=%s value=%s", self._db_path, self.current())

    def _get_conn(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self._db_path), timeout=30.0)

    def current(self) -> int:
        conn = self._get_conn()
        try:
            (value,) = conn.execute("SELECT value FROM counter WHERE id = 1").fetchone()
            return int(value)
        finally:
            conn.close()

    def advance(self, n: int = 1) -> int:
        step = _check_step(n)
        conn = self._get_conn()
        try:
            # Read and write under one write lock so the ceiling check holds.
            conn.execute("BEGIN IMMEDIATE")
            (value,) = conn.execute("SELECT value FROM counter WHERE id = 1").fetchone()
            try:
                value = _check_ceiling(int(value) + step)
            except ValueError:
                conn.rollback()
                raise
            conn.execute("UPDATE counter SET value = ? WHERE id = 1", (value,))
            conn.commit()
            return value
        finally:
            conn.close()


class WallClockCounter:
    """
    Derives the block number from wall-clock time.

    block = floor((now - genesis_ts) / block_seconds), clamped at 0.
    Never returns a value lower than one it returned before, even if the
    system clock steps backwards.
    """

    def __init__(
        self,
        *,
        block_seconds: float = 6.0,
        genesis_ts: float = 0.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if block_seconds <= 0:
            raise ValueError("block_seconds must be positive")
        self._block_seconds = float(block_seconds)
        self._genesis_ts = float(genesis_ts)
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def current(self) -> int:
        raw = math.floor((self._clock() - self._genesis_ts) / self._block_seconds)
        with self._lock:
            self._last = max(self._last, int(raw), 0)
            return self._last
