# src/commitment_registry/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every variable has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .registry.messages import MAX_DESCRIPTION_LEN

ENV_PREFIX = "CREG"

COUNTER_MODES = ("manual", "sqlite", "clock")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path

    # ---- Block counter ----
    counter_mode: str
    counter_start: int
    block_seconds: float
    genesis_ts: float

    # ---- Registry ----
    default_address: str
    max_description_len: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "commitment-registry").strip() or "commitment-registry"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/commitment_registry"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "registry.sqlite3")

        counter_mode = _env(_k("COUNTER_MODE"), "sqlite").strip().lower()
        if counter_mode not in COUNTER_MODES:
            counter_mode = "sqlite"
        counter_start = max(0, _env_int(_k("COUNTER_START"), 0))
        block_seconds = _env_float(_k("BLOCK_SECONDS"), 6.0)
        if block_seconds <= 0:
            block_seconds = 6.0
        genesis_ts = _env_float(_k("GENESIS_TS"), 0.0)

        default_address = _env(_k("DEFAULT_ADDRESS"), "alice").strip() or "alice"
        max_description_len = _env_int(_k("MAX_DESCRIPTION_LEN"), MAX_DESCRIPTION_LEN)
        if max_description_len <= 0:
            max_description_len = MAX_DESCRIPTION_LEN

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            db_path=db_path,
            counter_mode=counter_mode,
            counter_start=counter_start,
            block_seconds=block_seconds,
            genesis_ts=genesis_ts,
            default_address=default_address,
            max_description_len=max_description_len,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
