"""Environment-driven settings."""

from __future__ import annotations

import os
from typing import TypeVar

_T = TypeVar("_T", bool, int, float, str)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    if isinstance(default, bool):
        return raw.strip().lower() in _TRUE_VALUES
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default
