"""Port facades used by the command line tools."""

from __future__ import annotations

from .solver_port import SolveReport, resolve_strategy, solve_lines, solve_stream

__all__ = ["SolveReport", "resolve_strategy", "solve_lines", "solve_stream"]
