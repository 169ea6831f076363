# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from commitment_registry.cli.bootstrap import build_registry, create_initial_state
from commitment_registry.core.state import AppState
from commitment_registry.registry.counter import ManualCounter
from commitment_registry.registry.service import CommitmentRegistry


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="test",
        data_dir=tmp_path,
        db_path=tmp_path / "registry.sqlite3",
        counter_mode="manual",
        counter_start=100,
        block_seconds=6.0,
        genesis_ts=0.0,
        default_address="alice",
        max_description_len=100,
    )


@pytest.fixture()
def counter() -> ManualCounter:
    return ManualCounter(start=100)


@pytest.fixture()
def registry(settings: SimpleNamespace, counter: ManualCounter) -> CommitmentRegistry:
    """
    Registry over real SQLite tables.

    NOTE: the stores are part of what we want to test, so no fakes here.
    """
    return build_registry(settings, counter=counter)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)
