from __future__ import annotations

import json
from pathlib import Path

import pytest

import project_config
from reports.event_log import DEFAULT_MAX_BYTES, SolveJournal, record_solve
from tools.reports import solve_summary


@pytest.fixture
def journal(tmp_path) -> SolveJournal:
    return SolveJournal(base_dir=tmp_path)


def test_write_adds_timestamp_under_day_directory(journal, tmp_path) -> None:
    path = journal.write({"event": "solve.completed", "status": "solved"})
    assert path.parent.parent == tmp_path
    assert path.name == "solve_00.jsonl"
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["status"] == "solved"
    assert "ts" in payload


def test_rotation_starts_new_file(tmp_path) -> None:
    journal = SolveJournal(base_dir=tmp_path, max_bytes=16)
    first = journal.write({"event": "solve.completed", "steps": 1})
    second = journal.write({"event": "solve.completed", "steps": 2})
    assert first.name == "solve_00.jsonl"
    assert second.name == "solve_01.jsonl"
    assert len(first.read_text(encoding="utf-8").splitlines()) == 1


def test_small_events_share_a_file(journal) -> None:
    first = journal.write({"event": "solve.completed", "steps": 1})
    second = journal.write({"event": "solve.completed", "steps": 2})
    assert first == second
    assert len(first.read_text(encoding="utf-8").splitlines()) == 2


def test_new_journal_appends_to_latest_file(tmp_path) -> None:
    SolveJournal(base_dir=tmp_path, max_bytes=16).write({"steps": 1})
    SolveJournal(base_dir=tmp_path, max_bytes=16).write({"steps": 2})
    path = SolveJournal(base_dir=tmp_path).write({"steps": 3})
    assert path.name == "solve_01.jsonl"


def test_record_keeps_report_fields(journal) -> None:
    report = {
        "status": "invalid",
        "strategy": "stack",
        "steps": 0,
        "elapsed_ms": 0.0,
        "puzzle": None,
        "error": {"kind": "line_count"},
    }
    path = record_solve(report, source="ci", journal=journal)
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["event"] == "solve.completed"
    assert payload["error_kind"] == "line_count"
    assert payload["source"] == "ci"


def test_from_config_reads_events_section(tmp_path, monkeypatch) -> None:
    config = tmp_path / "config.toml"
    config.write_text(
        f'[events]\ndir = "{(tmp_path / "journal").as_posix()}"\nmax_bytes = 64\n',
        encoding="utf-8",
    )
    monkeypatch.setenv("SUDOKU_CONFIG_PATH", str(config))
    project_config.reload()
    try:
        journal = SolveJournal.from_config()
        assert journal.base_dir == tmp_path / "journal"
        assert journal.max_bytes == 64
        assert SolveJournal.from_config(tmp_path / "other").base_dir == tmp_path / "other"
    finally:
        monkeypatch.delenv("SUDOKU_CONFIG_PATH")
        project_config.reload()


def test_from_config_defaults() -> None:
    assert SolveJournal.from_config().max_bytes == DEFAULT_MAX_BYTES


def _write_events(path: Path, events: list[dict]) -> None:
    lines = [json.dumps(event, sort_keys=True) for event in events]
    path.write_text("\n".join(lines), encoding="utf-8")


def test_aggregate_counts_solve_events(tmp_path) -> None:
    events = [
        {"event": "solve.completed", "status": "solved", "strategy": "recursive", "steps": 40, "elapsed_ms": 1.5},
        {"event": "solve.completed", "status": "solved", "strategy": "stack", "steps": 60, "elapsed_ms": 2.0},
        {"event": "solve.completed", "status": "invalid", "strategy": "stack", "steps": 0,
         "elapsed_ms": 0.0, "error_kind": "duplicate_digit"},
        {"event": "something.else", "status": "solved"},
    ]
    log_path = tmp_path / "log.jsonl"
    _write_events(log_path, events)

    summary = solve_summary.aggregate([log_path])

    assert summary["total_events"] == 3
    assert summary["status"] == {"solved": 2, "invalid": 1}
    assert summary["strategy"] == {"recursive": 1, "stack": 2}
    assert summary["errors"] == {"duplicate_digit": 1}
    assert summary["steps"] == {"total": 100, "max": 60}
    assert summary["elapsed_ms"] == 3.5
