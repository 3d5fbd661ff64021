"""Bitmask Sudoku solver with MRV selection and forward checking."""

from __future__ import annotations

from .candidates import Selection, candidate_mask, iter_digits, select_cell
from .grid_state import ALL_DIGITS, SIZE, Grid, GridState, box_index, is_valid_solution
from .loader import collect_lines, load_lines, read_puzzle_lines
from .search import (
    StepCounter,
    UnknownStrategyError,
    available_strategies,
    get_strategy,
    recursive_search,
    register_strategy,
    stack_search,
)
from .sudoku import SudokuSolver
from .trace import SearchTrace, TraceEvent, TraceLevel

__all__ = [
    "ALL_DIGITS",
    "SIZE",
    "Grid",
    "GridState",
    "SearchTrace",
    "Selection",
    "StepCounter",
    "SudokuSolver",
    "TraceEvent",
    "TraceLevel",
    "UnknownStrategyError",
    "available_strategies",
    "box_index",
    "candidate_mask",
    "collect_lines",
    "get_strategy",
    "is_valid_solution",
    "iter_digits",
    "load_lines",
    "read_puzzle_lines",
    "recursive_search",
    "register_strategy",
    "select_cell",
    "stack_search",
]
