"""Utility helpers for loading project-wide configuration.

The repository ``config.toml`` is used when present. ``SUDOKU_CONFIG_PATH``
points at another file, which then must exist. An installed copy without
either runs on the built-in defaults every caller passes to
:func:`get_section`.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]


_LOGGER = logging.getLogger(__name__)

_CONFIG_ENV_KEY = "SUDOKU_CONFIG_PATH"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.toml"

_MISSING = object()


def _load(path: Path) -> Dict[str, Any]:
    with path.open("rb") as fh:
        return tomllib.load(fh)


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the project configuration as a dictionary."""
    override = os.environ.get(_CONFIG_ENV_KEY)
    if override:
        path = Path(override)
        try:
            return _load(path)
        except FileNotFoundError as exc:
            raise RuntimeError(f"Configuration file '{path}' was not found") from exc

    if DEFAULT_CONFIG_PATH.is_file():
        return _load(DEFAULT_CONFIG_PATH)
    _LOGGER.debug("No %s found, using built-in defaults", DEFAULT_CONFIG_PATH)
    return {}


def reload() -> None:
    """Drop the cached configuration so the next access re-reads the file."""

    get_config.cache_clear()


def get_section(path: str, default: Any = _MISSING) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not _MISSING:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


__all__ = ["DEFAULT_CONFIG_PATH", "get_config", "get_section", "reload"]
