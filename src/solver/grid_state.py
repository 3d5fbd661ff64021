"""Mutable grid plus row/column/box digit masks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

SIZE = 9
BOX = 3
# Low nine bits set: digits 1..9 map to bits 0..8.
ALL_DIGITS = (1 << SIZE) - 1

Grid = Tuple[Tuple[int, ...], ...]


def box_index(r: int, c: int) -> int:
    return (r // BOX) * BOX + c // BOX


def digit_bit(d: int) -> int:
    return 1 << (d - 1)


@dataclass
class GridState:
    """Cell values and the masks of digits already used per unit.

    For every placed digit ``d`` at ``(r, c)`` bit ``d - 1`` is set in
    ``row_masks[r]``, ``col_masks[c]`` and ``box_masks[box_index(r, c)]``.
    """

    cells: List[List[int]] = field(default_factory=lambda: [[0] * SIZE for _ in range(SIZE)])
    row_masks: List[int] = field(default_factory=lambda: [0] * SIZE)
    col_masks: List[int] = field(default_factory=lambda: [0] * SIZE)
    box_masks: List[int] = field(default_factory=lambda: [0] * SIZE)

    def place(self, r: int, c: int, d: int) -> None:
        bit = digit_bit(d)
        self.cells[r][c] = d
        self.row_masks[r] |= bit
        self.col_masks[c] |= bit
        self.box_masks[box_index(r, c)] |= bit

    def undo(self, r: int, c: int, d: int) -> None:
        keep = ~digit_bit(d)
        self.cells[r][c] = 0
        self.row_masks[r] &= keep
        self.col_masks[c] &= keep
        self.box_masks[box_index(r, c)] &= keep

    def used_mask(self, r: int, c: int) -> int:
        return self.row_masks[r] | self.col_masks[c] | self.box_masks[box_index(r, c)]

    def snapshot(self) -> Grid:
        return tuple(tuple(row) for row in self.cells)

    def masks(self) -> Tuple[Tuple[int, ...], Tuple[int, ...], Tuple[int, ...]]:
        return tuple(self.row_masks), tuple(self.col_masks), tuple(self.box_masks)

    def empty_count(self) -> int:
        return sum(1 for row in self.cells for value in row if value == 0)

    def is_complete(self) -> bool:
        return self.empty_count() == 0


def is_valid_solution(grid: Grid) -> bool:
    """Return ``True`` when every unit of ``grid`` holds digits 1..9 exactly once."""

    full = set(range(1, SIZE + 1))
    for i in range(SIZE):
        if {grid[i][c] for c in range(SIZE)} != full:
            return False
        if {grid[r][i] for r in range(SIZE)} != full:
            return False
        br, bc = (i // BOX) * BOX, (i % BOX) * BOX
        if {grid[br + dr][bc + dc] for dr in range(BOX) for dc in range(BOX)} != full:
            return False
    return True


__all__ = [
    "ALL_DIGITS",
    "BOX",
    "Grid",
    "GridState",
    "SIZE",
    "box_index",
    "digit_bit",
    "is_valid_solution",
]
