# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "CREG_APP_NAME": "App display name (default: commitment-registry).",
    "CREG_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "CREG_DATA_DIR": "Local data directory, also holds registry.log (default: .local/commitment_registry).",
    "CREG_DB_PATH": "SQLite file for the three registry tables (default: <data_dir>/registry.sqlite3).",
    # Block counter
    "CREG_COUNTER_MODE": "manual | sqlite | clock (default: sqlite).",
    "CREG_COUNTER_START": "Initial counter value for manual/sqlite modes (default: 0).",
    "CREG_BLOCK_SECONDS": "Seconds per block in clock mode (default: 6).",
    "CREG_GENESIS_TS": "Epoch seconds of block 0 in clock mode (default: 0).",
    # Registry
    "CREG_DEFAULT_ADDRESS": "Acting address when the console starts (default: alice).",
    "CREG_MAX_DESCRIPTION_LEN": "Maximum objective description length (default: 100).",
}
