# src/commitment_registry/registry/validation.py

"""
Field-level predicates.

All functions are total: they return False for values of the wrong type
instead of raising.
"""

from __future__ import annotations

from typing import Any

from .messages import MAX_DESCRIPTION_LEN, MAX_PRIORITY, MIN_PRIORITY


def _is_int(value: Any) -> bool:
    # bool is an int subclass; True must not pass as priority 1.
    return isinstance(value, int) and not isinstance(value, bool)


def is_non_empty(text: Any) -> bool:
    return isinstance(text, str) and len(text) > 0


def is_within_limit(text: Any, limit: int = MAX_DESCRIPTION_LEN) -> bool:
    return isinstance(text, str) and len(text) <= limit


def is_valid_priority(value: Any) -> bool:
    return _is_int(value) and MIN_PRIORITY <= value <= MAX_PRIORITY


def is_valid_offset(value: Any) -> bool:
    return _is_int(value) and value > 0


def is_valid_address(address: Any) -> bool:
    return isinstance(address, str) and address.strip() != ""
