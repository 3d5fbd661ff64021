"""Backtracking search with MRV selection and forward checking.

Two interchangeable strategies are provided. ``recursive`` follows the natural
formulation; ``stack`` keeps an explicit list of frames instead of Python call
frames. Both visit the same nodes in the same order, so they report identical
grids and step counts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .candidates import iter_digits, select_cell
from .grid_state import GridState
from .trace import SearchTrace


@dataclass
class StepCounter:
    """Number of search invocations made by the current solve."""

    value: int = 0

    def tick(self) -> None:
        self.value += 1

    def reset(self) -> None:
        self.value = 0


SearchStrategy = Callable[[GridState, StepCounter, SearchTrace], bool]


class UnknownStrategyError(ValueError):
    """Raised when a search strategy name is not registered."""


_STRATEGIES: Dict[str, SearchStrategy] = {}


def register_strategy(name: str, strategy: SearchStrategy) -> None:
    """Register ``strategy`` under ``name`` for later lookup."""

    if not name:
        raise ValueError("strategy name must be a non-empty string")
    _STRATEGIES[name] = strategy


def get_strategy(name: str) -> SearchStrategy:
    try:
        return _STRATEGIES[name]
    except KeyError:
        known = ", ".join(sorted(_STRATEGIES))
        raise UnknownStrategyError(f"Unknown search strategy {name!r} (known: {known})") from None


def available_strategies() -> List[str]:
    return sorted(_STRATEGIES)


def recursive_search(state: GridState, counter: StepCounter, trace: SearchTrace) -> bool:
    """Fill ``state`` in place; on failure every placement made here is undone."""

    return _descend(state, counter, trace, 0)


def _descend(state: GridState, counter: StepCounter, trace: SearchTrace, depth: int) -> bool:
    counter.tick()
    selection = select_cell(state)
    if selection is None:
        return True
    if selection.dead_end:
        return False

    r, c = selection.row, selection.col
    for d in iter_digits(selection.mask):
        state.place(r, c, d)
        trace.placed(r, c, d, depth)
        if _descend(state, counter, trace, depth + 1):
            return True
        state.undo(r, c, d)
        trace.undone(r, c, d, depth)
    return False


@dataclass
class _Frame:
    row: int
    col: int
    remaining: int
    placed: int = 0


@dataclass
class _FrameStack:
    frames: List[_Frame] = field(default_factory=list)

    def push(self, row: int, col: int, mask: int) -> None:
        self.frames.append(_Frame(row, col, mask))

    def top(self) -> Optional[_Frame]:
        return self.frames[-1] if self.frames else None

    def pop(self) -> None:
        self.frames.pop()

    @property
    def depth(self) -> int:
        return len(self.frames) - 1


def stack_search(state: GridState, counter: StepCounter, trace: SearchTrace) -> bool:
    """Iterative equivalent of :func:`recursive_search`.

    Each frame holds the chosen cell, the candidates not yet tried and the
    digit currently placed there. Descending pushes a frame; a frame whose
    candidates are exhausted is popped and its parent's digit is undone on the
    next iteration.
    """

    counter.tick()
    selection = select_cell(state)
    if selection is None:
        return True
    if selection.dead_end:
        return False

    stack = _FrameStack()
    stack.push(selection.row, selection.col, selection.mask)

    while True:
        frame = stack.top()
        if frame is None:
            return False
        depth = stack.depth

        if frame.placed:
            state.undo(frame.row, frame.col, frame.placed)
            trace.undone(frame.row, frame.col, frame.placed, depth)
            frame.placed = 0

        if not frame.remaining:
            stack.pop()
            continue

        low = frame.remaining & -frame.remaining
        frame.remaining ^= low
        digit = low.bit_length()
        state.place(frame.row, frame.col, digit)
        trace.placed(frame.row, frame.col, digit, depth)
        frame.placed = digit

        counter.tick()
        selection = select_cell(state)
        if selection is None:
            return True
        if selection.dead_end:
            continue
        stack.push(selection.row, selection.col, selection.mask)


register_strategy("recursive", recursive_search)
register_strategy("stack", stack_search)


__all__ = [
    "SearchStrategy",
    "StepCounter",
    "UnknownStrategyError",
    "available_strategies",
    "get_strategy",
    "recursive_search",
    "register_strategy",
    "stack_search",
]
