"""One-call facade: puzzle lines in, :class:`SolveReport` out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, TextIO

from contracts.errors import LoadError
from printer.text import to_string
from project_config import get_section
from reports.event_log import SolveJournal, record_solve
from solver import SudokuSolver, TraceLevel, read_puzzle_lines
from solver.search import get_strategy

from ._utils import build_env, parse_bool

_LOGGER = logging.getLogger(__name__)

_DEF_STRATEGY = "recursive"
ENV_STRATEGY_KEY = "SUDOKU_SOLVER_STRATEGY"
CLI_STRATEGY_KEY = "CLI_SUDOKU_SOLVER_STRATEGY"
ENV_EVENTS_KEY = "SUDOKU_EVENTS_ENABLED"

STATUS_SOLVED = "solved"
STATUS_UNSATISFIABLE = "unsatisfiable"
STATUS_INVALID = "invalid"


@dataclass(frozen=True)
class StrategyDecision:
    """Search strategy chosen for a run and where the choice came from."""

    name: str
    source: str


@dataclass(frozen=True)
class SolveReport:
    """Outcome of a single solve request.

    ``status`` keeps the three outcomes apart: ``solved``, ``unsatisfiable``
    (search exhausted) and ``invalid`` (the loader rejected the input, see
    ``error``).
    """

    status: str
    strategy: str
    strategy_source: str
    puzzle: Optional[str]
    grid: Optional[str]
    steps: int
    elapsed_ms: float
    error: Optional[Dict[str, Any]] = None

    @property
    def solved(self) -> bool:
        return self.status == STATUS_SOLVED

    def to_payload(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "solved": self.solved,
            "strategy": self.strategy,
            "strategy_source": self.strategy_source,
            "puzzle": self.puzzle,
            "grid": self.grid,
            "steps": self.steps,
            "elapsed_ms": round(self.elapsed_ms, 3),
            "error": self.error,
        }


def resolve_strategy(
    profile: str = "dev",
    env: Mapping[str, str] | None = None,
    *,
    explicit: str | None = None,
) -> StrategyDecision:
    """Apply the precedence config < profile block < env < CLI env < argument."""

    solver_cfg = get_section("solver", {})
    if not isinstance(solver_cfg, dict):
        solver_cfg = {}

    name = str(solver_cfg.get("strategy", _DEF_STRATEGY))
    source = "config"

    by_profile = solver_cfg.get("by_profile")
    if isinstance(by_profile, dict):
        block = by_profile.get(profile.lower())
        if isinstance(block, dict) and block.get("strategy"):
            name = str(block["strategy"])
            source = "profile"

    env_map = build_env(env)
    if env_map.get(ENV_STRATEGY_KEY):
        name = env_map[ENV_STRATEGY_KEY]
        source = "env"
    if env_map.get(CLI_STRATEGY_KEY):
        name = env_map[CLI_STRATEGY_KEY]
        source = "cli"
    if explicit:
        name = explicit
        source = "argument"

    get_strategy(name)
    return StrategyDecision(name=name, source=source)


def _events_enabled(env_map: Mapping[str, str]) -> bool:
    override = parse_bool(env_map.get(ENV_EVENTS_KEY))
    if override is not None:
        return override
    return bool(parse_bool(get_section("events.enabled", False)))


def _rejected(decision: StrategyDecision, exc: LoadError) -> SolveReport:
    _LOGGER.info("Rejected puzzle: %s", exc)
    return SolveReport(
        status=STATUS_INVALID,
        strategy=decision.name,
        strategy_source=decision.source,
        puzzle=None,
        grid=None,
        steps=0,
        elapsed_ms=0.0,
        error=exc.to_payload(),
    )


def _solve(
    read: Callable[[], Iterable[str]],
    *,
    strategy: str | None,
    profile: str,
    env: Mapping[str, str] | None,
    trace_level: str | TraceLevel | None,
    record: bool | None,
    journal: SolveJournal | None,
) -> SolveReport:
    env_map = build_env(env)
    decision = resolve_strategy(profile, env_map, explicit=strategy)
    level = trace_level if trace_level is not None else get_section("solver.trace_level", "none")
    solver = SudokuSolver(strategy=decision.name, trace_level=level)

    try:
        solver.load(read())
    except LoadError as exc:
        report = _rejected(decision, exc)
    else:
        puzzle = to_string(solver.current_grid())
        solved = solver.solve()
        report = SolveReport(
            status=STATUS_SOLVED if solved else STATUS_UNSATISFIABLE,
            strategy=decision.name,
            strategy_source=decision.source,
            puzzle=puzzle,
            grid=to_string(solver.current_grid()),
            steps=solver.step_count(),
            elapsed_ms=solver.elapsed_ms or 0.0,
        )

    if record is None:
        record = _events_enabled(env_map)
    if record:
        record_solve(report.to_payload(), source=profile, journal=journal)
    return report


def solve_lines(
    lines: Iterable[str],
    *,
    strategy: str | None = None,
    profile: str = "dev",
    env: Mapping[str, str] | None = None,
    trace_level: str | TraceLevel | None = None,
    record: bool | None = None,
    journal: SolveJournal | None = None,
) -> SolveReport:
    """Load and solve ``lines``; loader failures become an ``invalid`` report.

    Raises :class:`~solver.search.UnknownStrategyError` when the configured
    strategy is not registered and ``ValueError`` for an unknown trace level.
    """

    return _solve(
        lambda: lines,
        strategy=strategy,
        profile=profile,
        env=env,
        trace_level=trace_level,
        record=record,
        journal=journal,
    )


def solve_stream(
    stream: TextIO,
    *,
    strategy: str | None = None,
    profile: str = "dev",
    env: Mapping[str, str] | None = None,
    trace_level: str | TraceLevel | None = None,
    record: bool | None = None,
    journal: SolveJournal | None = None,
) -> SolveReport:
    """Read nine non-blank lines from ``stream`` and solve them.

    Early end of input is reported like any other load failure.
    """

    return _solve(
        lambda: read_puzzle_lines(stream),
        strategy=strategy,
        profile=profile,
        env=env,
        trace_level=trace_level,
        record=record,
        journal=journal,
    )


__all__ = [
    "CLI_STRATEGY_KEY",
    "ENV_EVENTS_KEY",
    "ENV_STRATEGY_KEY",
    "STATUS_INVALID",
    "STATUS_SOLVED",
    "STATUS_UNSATISFIABLE",
    "SolveReport",
    "StrategyDecision",
    "resolve_strategy",
    "solve_lines",
    "solve_stream",
]
