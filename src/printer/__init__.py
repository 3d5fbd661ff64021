"""Text and PDF renderers for solved grids."""

from __future__ import annotations

from .text import ROW_RULE, format_grid, from_string, to_string

__all__ = ["ROW_RULE", "format_grid", "from_string", "to_string"]
