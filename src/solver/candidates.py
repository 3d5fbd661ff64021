"""Candidate computation and MRV cell selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .grid_state import ALL_DIGITS, SIZE, GridState


@dataclass(frozen=True)
class Selection:
    """Cell chosen for branching together with its candidate mask.

    A ``mask`` of zero marks a dead end: the cell has no legal digit left.
    """

    row: int
    col: int
    mask: int
    count: int

    @property
    def dead_end(self) -> bool:
        return self.mask == 0


def candidate_mask(state: GridState, r: int, c: int) -> Tuple[int, int]:
    """Return the digits still allowed at ``(r, c)`` and how many there are."""

    mask = ALL_DIGITS & ~state.used_mask(r, c)
    return mask, mask.bit_count()


def iter_digits(mask: int) -> Iterator[int]:
    """Yield the digits of ``mask`` in ascending order."""

    while mask:
        low = mask & -mask
        mask ^= low
        yield low.bit_length()


def select_cell(state: GridState) -> Optional[Selection]:
    """Pick the empty cell with the fewest candidates.

    Cells are scanned in row-major order and only a strictly smaller count
    replaces the current best. The scan stops at the first cell with a single
    candidate, or at the first cell with none. ``None`` means no empty cell is
    left.
    """

    best: Optional[Selection] = None
    for r in range(SIZE):
        row = state.cells[r]
        for c in range(SIZE):
            if row[c]:
                continue
            mask, count = candidate_mask(state, r, c)
            if count == 0:
                return Selection(r, c, 0, 0)
            if best is None or count < best.count:
                best = Selection(r, c, mask, count)
                if count == 1:
                    return best
    return best


__all__ = ["Selection", "candidate_mask", "iter_digits", "select_cell"]
