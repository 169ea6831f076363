# tests/test_counter.py

from __future__ import annotations

from pathlib import Path

import pytest

from commitment_registry.registry.counter import ManualCounter, SQLiteCounter, WallClockCounter
from commitment_registry.registry.messages import MAX_POINT


def test_manual_counter_advances_forward_only() -> None:
    c = ManualCounter(start=5)
    assert c.current() == 5
    assert c.advance(3) == 8
    assert c.advance(0) == 8
    with pytest.raises(ValueError):
        c.advance(-1)
    assert c.current() == 8


def test_sqlite_counter_persists(tmp_path: Path) -> None:
    db = tmp_path / "registry.sqlite3"
    c = SQLiteCounter(db, start=10)
    assert c.current() == 10
    assert c.advance(5) == 15

    # start is ignored once the row exists
    again = SQLiteCounter(db, start=0)
    assert again.current() == 15


def test_wall_clock_counter_is_monotonic() -> None:
    now = [600.0]
    c = WallClockCounter(block_seconds=6.0, genesis_ts=0.0, clock=lambda: now[0])
    assert c.current() == 100

    now[0] = 660.0
    assert c.current() == 110

    # clock steps backwards; counter does not
    now[0] = 0.0
    assert c.current() == 110


def test_wall_clock_counter_before_genesis_is_zero() -> None:
    c = WallClockCounter(block_seconds=6.0, genesis_ts=1000.0, clock=lambda: 10.0)
    assert c.current() == 0


def test_wall_clock_counter_rejects_bad_block_seconds() -> None:
    with pytest.raises(ValueError):
        WallClockCounter(block_seconds=0)


def test_manual_counter_stops_at_ceiling() -> None:
    c = ManualCounter(start=MAX_POINT - 1)
    assert c.advance(1) == MAX_POINT
    with pytest.raises(ValueError):
        c.advance(1)
    assert c.current() == MAX_POINT
    with pytest.raises(ValueError):
        ManualCounter(start=MAX_POINT + 1)


def test_sqlite_counter_stops_at_ceiling(tmp_path: Path) -> None:
    c = SQLiteCounter(tmp_path / "registry.sqlite3", start=5)
    with pytest.raises(ValueError):
        c.advance(2**63)
    assert c.current() == 5
    assert c.advance(MAX_POINT - 5) == MAX_POINT
