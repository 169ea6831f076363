# src/commitment_registry/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the three SQLite tables and the block counter into the registry,
- builds AppState for connectors.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import BlockCounter
from ..core.state import AppState
from ..registry.counter import ManualCounter, SQLiteCounter, WallClockCounter
from ..registry.service import CommitmentRegistry
from ..registry.store import DeadlineStore, ObjectiveStore, PriorityStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def build_counter(settings) -> BlockCounter:
    mode = str(getattr(settings, "counter_mode", "sqlite"))
    start = int(getattr(settings, "counter_start", 0))

    if mode == "manual":
        return ManualCounter(start=start)
    if mode == "clock":
        return WallClockCounter(
            block_seconds=float(getattr(settings, "block_seconds", 6.0)),
            genesis_ts=float(getattr(settings, "genesis_ts", 0.0)),
        )
    return SQLiteCounter(settings.db_path, start=start)


def build_registry(settings, *, counter: BlockCounter | None = None) -> CommitmentRegistry:
    if counter is None:
        counter = build_counter(settings)

    return CommitmentRegistry(
        objectives=ObjectiveStore(settings.db_path),
        priorities=PriorityStore(settings.db_path),
        deadlines=DeadlineStore(settings.db_path),
        counter=counter,
        max_description_len=int(getattr(settings, "max_description_len", 100)),
    )


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    counter = build_counter(settings)
    registry = build_registry(settings, counter=counter)
    logger.info(
        "Registry wired db=%s counter=%s value=%s",
        settings.db_path,
        type(counter).__name__,
        counter.current(),
    )

    return AppState(
        settings=settings,
        registry=registry,
        counter=counter,
        acting_address=str(getattr(settings, "default_address", "alice")),
    )
