"""Utility helpers for port facades."""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional


def build_env(overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Merge process environment with optional overrides, keys upper-cased."""

    env: Dict[str, str] = {str(k).upper(): str(v) for k, v in os.environ.items()}
    if overrides:
        env.update({str(k).upper(): str(v) for k, v in overrides.items()})
    return env


def parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


__all__ = ["build_env", "parse_bool"]
