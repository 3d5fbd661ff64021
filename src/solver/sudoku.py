"""Solver facade owning one puzzle's grid state."""

from __future__ import annotations

import logging
import time
from typing import Iterable, Optional

from .grid_state import Grid, GridState
from .loader import load_lines
from .search import StepCounter, get_strategy
from .trace import SearchTrace, TraceLevel

_LOGGER = logging.getLogger(__name__)


class SudokuSolver:
    """Load a puzzle, solve it in place and expose counters.

    A fresh solver holds an empty grid. ``load`` is atomic: when it raises, the
    previously loaded state is kept untouched.
    """

    def __init__(
        self,
        *,
        strategy: str = "recursive",
        trace_level: str | TraceLevel = TraceLevel.NONE,
    ) -> None:
        self._search = get_strategy(strategy)
        self.strategy = strategy
        self._state = GridState()
        self._counter = StepCounter()
        self.trace = SearchTrace(level=TraceLevel.from_value(trace_level))
        self.elapsed_ms: Optional[float] = None

    def load(self, lines: Iterable[str]) -> None:
        state = load_lines(lines)
        self._state = state
        self._counter.reset()
        self.trace.reset()
        self.elapsed_ms = None
        _LOGGER.debug("Loaded puzzle with %d empty cells", state.empty_count())

    def solve(self) -> bool:
        """Search for a completion; the grid holds it when ``True`` is returned."""

        self._counter.reset()
        self.trace.reset()
        started = time.perf_counter()
        solved = self._search(self._state, self._counter, self.trace)
        self.elapsed_ms = (time.perf_counter() - started) * 1000.0
        _LOGGER.debug(
            "Search %s finished: solved=%s steps=%d elapsed_ms=%.3f",
            self.strategy,
            solved,
            self._counter.value,
            self.elapsed_ms,
        )
        return solved

    def current_grid(self) -> Grid:
        return self._state.snapshot()

    def step_count(self) -> int:
        return self._counter.value

    def is_complete(self) -> bool:
        return self._state.is_complete()


__all__ = ["SudokuSolver"]
