"""Plain-text rendering of 9x9 grids."""

from __future__ import annotations

from typing import List, Sequence

ROW_RULE = "------+-------+------"


def _cell(value: int) -> str:
    return str(value) if value else "."


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render ``grid`` with a bar between column groups and a rule between row groups."""

    lines: List[str] = []
    for r, row in enumerate(grid):
        if r and r % 3 == 0:
            lines.append(ROW_RULE)
        groups = [" ".join(_cell(v) for v in row[c:c + 3]) for c in (0, 3, 6)]
        lines.append(" | ".join(groups))
    return "\n".join(lines)


def to_string(grid: Sequence[Sequence[int]]) -> str:
    """Row-major 81-character encoding with ``.`` for empty cells."""

    return "".join(_cell(v) for row in grid for v in row)


def from_string(text: str) -> List[str]:
    """Split an 81-character encoding back into nine puzzle lines."""

    compact = "".join(text.split())
    if len(compact) != 81:
        raise ValueError(f"grid string must hold 81 cells, got {len(compact)}")
    return [compact[i:i + 9] for i in range(0, 81, 9)]


__all__ = ["ROW_RULE", "format_grid", "from_string", "to_string"]
