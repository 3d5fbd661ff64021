"""Turn puzzle text into a populated :class:`GridState`.

Accepted input is exactly nine lines. Each line is stripped and must keep at
least nine characters; only the first nine are read. ``1``-``9`` place a digit,
``.`` and ``0`` leave the cell empty.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, TextIO

from contracts.errors import (
    DuplicateDigitError,
    InvalidCharacterError,
    LoadErrorKind,
    MalformedInputError,
)

from .grid_state import SIZE, GridState, box_index, digit_bit

EMPTY_CHARS = frozenset(".0")
DIGIT_CHARS = frozenset("123456789")


def parse_lines(lines: Sequence[str]) -> List[List[int]]:
    """Check line count, length and alphabet; return the raw cell values."""

    if len(lines) != SIZE:
        raise MalformedInputError(
            LoadErrorKind.LINE_COUNT,
            f"Expect {SIZE} lines, got {len(lines)}",
        )

    cells: List[List[int]] = []
    for r, raw in enumerate(lines):
        text = raw.strip()
        if len(text) < SIZE:
            raise MalformedInputError(
                LoadErrorKind.LINE_TOO_SHORT,
                f"Line {r + 1} too short",
                row=r + 1,
            )
        row: List[int] = []
        for c, ch in enumerate(text[:SIZE]):
            if ch in EMPTY_CHARS:
                row.append(0)
            elif ch in DIGIT_CHARS:
                row.append(int(ch))
            else:
                raise InvalidCharacterError(r + 1, c + 1, ch)
        cells.append(row)
    return cells


def build_state(cells: Sequence[Sequence[int]]) -> GridState:
    """Fill masks from ``cells`` and reject the first duplicate in row-major order."""

    state = GridState()
    for r in range(SIZE):
        for c in range(SIZE):
            d = cells[r][c]
            if not d:
                continue
            bit = digit_bit(d)
            b = box_index(r, c)
            if state.row_masks[r] & bit:
                raise DuplicateDigitError(r + 1, c + 1, d, "row")
            if state.col_masks[c] & bit:
                raise DuplicateDigitError(r + 1, c + 1, d, "column")
            if state.box_masks[b] & bit:
                raise DuplicateDigitError(r + 1, c + 1, d, "box")
            state.cells[r][c] = d
            state.row_masks[r] |= bit
            state.col_masks[c] |= bit
            state.box_masks[b] |= bit
    return state


def load_lines(lines: Iterable[str]) -> GridState:
    """Return a fresh state for ``lines`` or raise a :class:`LoadError` subclass."""

    return build_state(parse_lines(list(lines)))


def collect_lines(stream: TextIO) -> List[str]:
    """Read up to nine non-blank lines from ``stream``, skipping blank ones."""

    lines: List[str] = []
    for raw in stream:
        text = raw.strip()
        if not text:
            continue
        lines.append(text)
        if len(lines) == SIZE:
            break
    return lines


def read_puzzle_lines(stream: TextIO) -> List[str]:
    """Collect nine non-blank lines from ``stream`` or fail on early EOF."""

    lines = collect_lines(stream)
    if len(lines) == SIZE:
        return lines
    raise MalformedInputError(
        LoadErrorKind.LINE_COUNT,
        f"Not enough lines: expected {SIZE}, got {len(lines)}",
    )


__all__ = ["build_state", "collect_lines", "load_lines", "parse_lines", "read_puzzle_lines"]
