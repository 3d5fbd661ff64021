from __future__ import annotations

import io
import json

import pytest

from ports import solver_port
from tools.cli import solve as cli

from sample_grids import CLASSIC, EMPTY, TWO_FIVES_IN_ROW, UNSATISFIABLE


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        solver_port.ENV_STRATEGY_KEY,
        solver_port.CLI_STRATEGY_KEY,
        solver_port.ENV_EVENTS_KEY,
    ):
        monkeypatch.delenv(key, raising=False)


def _puzzle_file(tmp_path, lines: list[str], name: str = "puzzle.txt"):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_solve_prints_grid_and_counters(tmp_path, capsys) -> None:
    code = cli.main(["solve", str(_puzzle_file(tmp_path, CLASSIC))])
    out = capsys.readouterr().out
    assert code == cli.EXIT_SOLVED
    assert "Solved Sudoku:" in out
    assert "5 3 4 | 6 7 8 | 9 1 2" in out
    assert "------+-------+------" in out
    assert "recursive steps:" in out


def test_solve_reads_stdin_with_blank_lines(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("\n\n" + "\n".join(EMPTY) + "\n"))
    code = cli.main(["solve", "--strategy", "stack"])
    assert code == cli.EXIT_SOLVED
    assert "Solved Sudoku:" in capsys.readouterr().out


def test_unsatisfiable_exit_code(tmp_path, capsys) -> None:
    code = cli.main(["solve", str(_puzzle_file(tmp_path, UNSATISFIABLE))])
    assert code == cli.EXIT_UNSATISFIABLE
    assert capsys.readouterr().out.strip() == cli.FAILURE_MESSAGE


def test_invalid_input_exit_code_and_detail(tmp_path, capsys) -> None:
    code = cli.main(["solve", "--verbose", str(_puzzle_file(tmp_path, TWO_FIVES_IN_ROW))])
    captured = capsys.readouterr()
    assert code == cli.EXIT_INVALID
    assert captured.out.strip() == cli.FAILURE_MESSAGE
    assert "duplicates at row 1 col 6" in captured.err


def test_missing_lines_are_invalid(tmp_path, capsys) -> None:
    code = cli.main(["solve", "--json", str(_puzzle_file(tmp_path, CLASSIC[:4]))])
    payload = json.loads(capsys.readouterr().out)
    assert code == cli.EXIT_INVALID
    assert payload["error"]["kind"] == "line_count"


def test_short_input_reports_missing_lines(tmp_path, capsys) -> None:
    code = cli.main(["solve", "-v", str(_puzzle_file(tmp_path, CLASSIC[:4]))])
    captured = capsys.readouterr()
    assert code == cli.EXIT_INVALID
    assert captured.out.strip() == cli.FAILURE_MESSAGE
    assert "Not enough lines: expected 9, got 4" in captured.err


@pytest.mark.parametrize(
    "key", [solver_port.ENV_STRATEGY_KEY, solver_port.CLI_STRATEGY_KEY]
)
def test_unknown_strategy_from_environment(tmp_path, monkeypatch, capsys, key) -> None:
    monkeypatch.setenv(key, "bogus")
    code = cli.main(["solve", str(_puzzle_file(tmp_path, CLASSIC))])
    captured = capsys.readouterr()
    assert code == cli.EXIT_CONFIG
    assert captured.out == ""
    assert "Unknown search strategy 'bogus'" in captured.err


def test_json_output(tmp_path, capsys) -> None:
    code = cli.main(["solve", "--json", "--profile", "ci", str(_puzzle_file(tmp_path, CLASSIC))])
    payload = json.loads(capsys.readouterr().out)
    assert code == cli.EXIT_SOLVED
    assert payload["status"] == "solved"
    assert payload["strategy"] == "stack"
    assert payload["strategy_source"] == "profile"


def test_pdf_export(tmp_path, capsys) -> None:
    out = tmp_path / "solved.pdf"
    code = cli.main(["solve", "--pdf", str(out), str(_puzzle_file(tmp_path, CLASSIC))])
    assert code == cli.EXIT_SOLVED
    assert out.read_bytes().startswith(b"%PDF")
    assert "PDF saved to:" in capsys.readouterr().err


def test_events_and_report(tmp_path, capsys) -> None:
    events_dir = tmp_path / "events"
    cli.main(["solve", "--events-dir", str(events_dir), str(_puzzle_file(tmp_path, CLASSIC))])
    cli.main(["solve", "--events-dir", str(events_dir), str(_puzzle_file(tmp_path, UNSATISFIABLE, "bad.txt"))])
    capsys.readouterr()

    code = cli.main(["report", str(events_dir)])
    summary = json.loads(capsys.readouterr().out)
    assert code == 0
    assert summary["total_events"] == 2
    assert summary["status"] == {"solved": 1, "unsatisfiable": 1}


def test_report_without_logs_exits(tmp_path) -> None:
    with pytest.raises(SystemExit):
        cli.main(["report", str(tmp_path)])
