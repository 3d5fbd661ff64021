"""Command line entry point for the Sudoku solver."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, TextIO

from contracts.schema_validator import validate_solve_report
from ports.solver_port import STATUS_INVALID, STATUS_SOLVED, SolveReport, solve_stream
from printer.text import format_grid, from_string
from project_config import get_section
from reports.event_log import SolveJournal
from solver import available_strategies
from tools.reports import solve_summary

EXIT_SOLVED = 0
EXIT_UNSATISFIABLE = 1
EXIT_INVALID = 2
EXIT_CONFIG = 3

FAILURE_MESSAGE = "No solution found (puzzle invalid or unsolvable)."
PROMPT = "Enter 9 lines with 9 chars (digits 1-9, or . / 0 for empty). Example: 53..7...."


def _configure_logging(level: str | None) -> None:
    name = (level or str(get_section("logging.level", "WARNING"))).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=str(get_section("logging.format", "%(levelname)s %(name)s: %(message)s")),
    )


def _journal(events_dir: str | None) -> tuple[SolveJournal | None, bool | None]:
    """Return the journal to write to and whether recording is forced.

    ``--events-dir`` forces recording into that directory; otherwise the
    decision is left to ``[events]`` and ``SUDOKU_EVENTS_ENABLED``.
    """

    if events_dir:
        return SolveJournal.from_config(events_dir), True
    return None, None


def _open_input(path: str | None, stdin: TextIO) -> TextIO:
    if path and path != "-":
        return open(path, "r", encoding="utf-8")
    if stdin.isatty():
        print(PROMPT, file=sys.stderr)
    return stdin


def _grid_rows(encoded: str) -> List[List[int]]:
    return [[0 if ch == "." else int(ch) for ch in line] for line in from_string(encoded)]


def _exit_code(report: SolveReport) -> int:
    if report.status == STATUS_SOLVED:
        return EXIT_SOLVED
    if report.status == STATUS_INVALID:
        return EXIT_INVALID
    return EXIT_UNSATISFIABLE


def _print_text(report: SolveReport, *, verbose: bool) -> None:
    if not report.solved:
        print(FAILURE_MESSAGE)
        if verbose and report.error:
            print(f"error: {report.error['message']}", file=sys.stderr)
        return
    print("\nSolved Sudoku:")
    print(format_grid(_grid_rows(report.grid)))
    print(f"\nSolved in {report.elapsed_ms:.3f} ms, recursive steps: {report.steps}")


def cmd_solve(args: argparse.Namespace) -> int:
    journal, record = _journal(args.events_dir)
    stream = _open_input(args.puzzle, sys.stdin)
    try:
        report = solve_stream(
            stream,
            strategy=args.strategy,
            profile=args.profile,
            trace_level=args.trace_level,
            record=record,
            journal=journal,
        )
    except ValueError as exc:
        # unknown strategy or trace level from config or environment
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    finally:
        if stream is not sys.stdin:
            stream.close()

    if args.json:
        payload = report.to_payload()
        validate_solve_report(payload)
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        _print_text(report, verbose=args.verbose)

    if args.pdf and report.puzzle is not None:
        from printer.pdf import export_pdf

        solution = _grid_rows(report.grid) if report.solved else None
        footer = f"{report.status} - {report.steps} steps - {report.elapsed_ms:.3f} ms"
        path = export_pdf(_grid_rows(report.puzzle), solution, args.pdf, footer=footer)
        print(f"PDF saved to: {path.resolve()}", file=sys.stderr)

    return _exit_code(report)


def cmd_report(args: argparse.Namespace) -> int:
    base_dir = Path(args.path)
    files = sorted(base_dir.glob("**/*.jsonl"))
    if not files:
        raise SystemExit(f"No JSONL logs found under {base_dir}")
    summary = solve_summary.aggregate(files)
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bitmask MRV Sudoku solver")
    parser.add_argument("--log-level", default=None, help="Logging level (default from config)")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve one puzzle read from a file or stdin")
    solve.add_argument("puzzle", nargs="?", default=None, help="Puzzle file; '-' or omitted reads stdin")
    solve.add_argument(
        "--strategy",
        choices=available_strategies(),
        default=None,
        help="Search strategy (default resolved from config and environment)",
    )
    solve.add_argument("--profile", default="dev")
    solve.add_argument("--trace-level", choices=["none", "placements"], default=None)
    solve.add_argument("--json", action="store_true", help="Print the solve report as JSON")
    solve.add_argument("--pdf", default=None, help="Also render the result to this PDF path")
    solve.add_argument("--events-dir", default=None, help="Append a JSONL solve event below this directory")
    solve.add_argument("-v", "--verbose", action="store_true", help="Explain load failures on stderr")
    solve.set_defaults(func=cmd_solve)

    report = sub.add_parser("report", help="Aggregate JSONL solve events")
    report.add_argument("path", help="Directory containing JSONL logs")
    report.set_defaults(func=cmd_report)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
