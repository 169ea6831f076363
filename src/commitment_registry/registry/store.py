# src/commitment_registry/registry/store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from .models import DeadlineRecord, ObjectiveRecord, PriorityRecord

logger = logging.getLogger(__name__)


class _SQLiteTable:
    """
    One keyed table (address -> row) in a SQLite file.

    The three registry tables may share a database file but never reference
    each other: there are no foreign keys and no cross-table transactions.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    table: str = ""
    schema: str = ""

    def __init__(self, db_path: str | Path = "registry.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count()
        except sqlite3.Error:
            total = -1
        logger.info("%s ready db=%s total=%s", type(self).__name__, self._db_path, total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(self.schema)
            conn.commit()
        finally:
            conn.close()

    def _fetch(self, address: str) -> sqlite3.Row | None:
        conn = self._get_conn()
        try:
            cur = conn.execute(f"SELECT * FROM {self.table} WHERE address = ?", (address,))
            return cur.fetchone()
        finally:
            conn.close()

    def _execute(self, sql: str, params: tuple) -> int:
        conn = self._get_conn()
        try:
            cur = conn.execute(sql, params)
            conn.commit()
            return cur.rowcount
        finally:
            conn.close()

    # ---- public API ----

    def count(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()
            return int(n)
        finally:
            conn.close()

    def exists(self, address: str) -> bool:
        return self._fetch(address) is not None


class ObjectiveStore(_SQLiteTable):
    """Primary table: address -> (description, completed)."""

    table = "objectives"
    schema = """
        CREATE TABLE IF NOT EXISTS objectives (
            address TEXT PRIMARY KEY,
            description TEXT NOT NULL,
            completed INTEGER NOT NULL DEFAULT 0
        )
    """

    def get(self, address: str) -> ObjectiveRecord | None:
        row = self._fetch(address)
        if row is None:
            return None
        return ObjectiveRecord(description=str(row["description"]), completed=bool(row["completed"]))

    def put(self, address: str, record: ObjectiveRecord) -> None:
        self._execute(
            """
            INSERT INTO objectives(address, description, completed)
            VALUES (?, ?, ?)
            ON CONFLICT(address) DO UPDATE SET
                description = excluded.description,
                completed = excluded.completed
            """,
            (address, record.description, int(record.completed)),
        )
        logger.debug("objective stored address=%s completed=%s", address, record.completed)

    def delete(self, address: str) -> bool:
        removed = self._execute("DELETE FROM objectives WHERE address = ?", (address,)) == 1
        logger.debug("objective delete address=%s removed=%s", address, removed)
        return removed


class PriorityStore(_SQLiteTable):
    """Secondary table: address -> urgency (1..3). Never deleted."""

    table = "priorities"
    schema = """
        CREATE TABLE IF NOT EXISTS priorities (
            address TEXT PRIMARY KEY,
            urgency INTEGER NOT NULL
        )
    """

    def get(self, address: str) -> PriorityRecord | None:
        row = self._fetch(address)
        return PriorityRecord(urgency=int(row["urgency"])) if row else None

    def put(self, address: str, record: PriorityRecord) -> None:
        self._execute(
            """
            INSERT INTO priorities(address, urgency) VALUES (?, ?)
            ON CONFLICT(address) DO UPDATE SET urgency = excluded.urgency
            """,
            (address, int(record.urgency)),
        )
        logger.debug("priority stored address=%s urgency=%s", address, record.urgency)


class DeadlineStore(_SQLiteTable):
    """Secondary table: address -> (target_point, alert_activated). Never deleted."""

    table = "deadlines"
    schema = """
        CREATE TABLE IF NOT EXISTS deadlines (
            address TEXT PRIMARY KEY,
            target_point INTEGER NOT NULL,
            alert_activated INTEGER NOT NULL DEFAULT 0
        )
    """

    def get(self, address: str) -> DeadlineRecord | None:
        row = self._fetch(address)
        if row is None:
            return None
        return DeadlineRecord(
            target_point=int(row["target_point"]),
            alert_activated=bool(row["alert_activated"]),
        )

    def put(self, address: str, record: DeadlineRecord) -> None:
        self._execute(
            """
            INSERT INTO deadlines(address, target_point, alert_activated) VALUES (?, ?, ?)
            ON CONFLICT(address) DO UPDATE SET
                target_point = excluded.target_point,
                alert_activated = excluded.alert_activated
            """,
            (address, int(record.target_point), int(record.alert_activated)),
        )
        logger.debug("deadline stored address=%s target=%s", address, record.target_point)
