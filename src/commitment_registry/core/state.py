# src/commitment_registry/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..registry.service import CommitmentRegistry
from .ports import BlockCounter


@dataclass
class AppState:
    # Settings are kept on the state so handlers never read global config.
    settings: Any

    registry: CommitmentRegistry
    counter: BlockCounter

    # Host-supplied caller identity for console sessions.
    acting_address: str

    lock: threading.RLock = field(default_factory=threading.RLock)
