"""Environment flag helpers.

Consolidates the common pattern of interpreting environment variables as boolean
feature flags using the canonical truthy set {"1","true","yes","on"} (case-insensitive).

Usage examples:
    from promdedup.utils.env_flags import is_truthy_env
    if is_truthy_env('PROMDEDUP_LOG_CREATES'):
        ...
"""
from __future__ import annotations

import os

TRUTHY_SET: set[str] = {"1","true","yes","on"}

def is_truthy(value: str | None) -> bool:
    if not value:
        return False
    return value.strip().lower() in TRUTHY_SET

def is_truthy_env(name: str, default: str | None = None) -> bool:
    return is_truthy(os.getenv(name, default or ''))

def get_bool(name: str, default: bool = False) -> bool:
    """Like is_truthy_env but an unset variable yields `default` instead of False."""
    v = os.getenv(name)
    if v is None:
        return default
    return is_truthy(v)

def get_str(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip()

__all__ = [
    'TRUTHY_SET',
    'is_truthy',
    'is_truthy_env',
    'get_bool',
    'get_str',
]
