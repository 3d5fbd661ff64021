"""Journal of completed solves, one JSON object per line.

Events land in ``<dir>/<YYYYMMDD>/solve_NN.jsonl``. A file is closed once the
next line would take it past ``max_bytes`` and the index moves on, so one day
of runs never shares a file with the next day.
"""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from project_config import get_section

__all__ = ["DEFAULT_DIR", "DEFAULT_MAX_BYTES", "SolveJournal", "record_solve"]

DEFAULT_DIR = "logs/solve"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024

_EVENT_NAME = "solve.completed"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SolveJournal:
    """Append-only JSONL writer for ``solve.completed`` events."""

    base_dir: Path
    max_bytes: int = DEFAULT_MAX_BYTES
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @classmethod
    def from_config(cls, base_dir: str | Path | None = None) -> "SolveJournal":
        """Build a journal from ``[events]``; ``base_dir`` overrides ``events.dir``."""

        directory = base_dir if base_dir else get_section("events.dir", DEFAULT_DIR)
        max_bytes = int(get_section("events.max_bytes", DEFAULT_MAX_BYTES) or DEFAULT_MAX_BYTES)
        return cls(base_dir=Path(directory), max_bytes=max_bytes)

    def _target(self, day_dir: Path, size: int) -> Path:
        indices = [int(p.stem.split("_")[-1]) for p in day_dir.glob("solve_[0-9]*.jsonl")]
        if not indices:
            return day_dir / "solve_00.jsonl"
        index = max(indices)
        last = day_dir / f"solve_{index:02d}.jsonl"
        if last.stat().st_size + size <= self.max_bytes:
            return last
        return day_dir / f"solve_{index + 1:02d}.jsonl"

    def write(self, event: Mapping[str, Any]) -> Path:
        """Append ``event`` with a ``ts`` stamp; return the file it went to."""

        now = _utcnow()
        payload = dict(event)
        payload.setdefault("ts", now.isoformat(timespec="milliseconds"))
        line = json.dumps(payload, sort_keys=True, ensure_ascii=False) + "\n"

        with self._lock:
            day_dir = self.base_dir / now.strftime("%Y%m%d")
            day_dir.mkdir(parents=True, exist_ok=True)
            path = self._target(day_dir, len(line.encode("utf-8")))
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line)
        return path

    def record(self, report: Mapping[str, Any], *, source: Optional[str] = None) -> Path:
        """Journal the outcome carried by a solve report payload."""

        event: Dict[str, Any] = {
            "event": _EVENT_NAME,
            "status": report.get("status"),
            "strategy": report.get("strategy"),
            "steps": report.get("steps"),
            "elapsed_ms": report.get("elapsed_ms"),
            "puzzle": report.get("puzzle"),
        }
        error = report.get("error")
        if isinstance(error, Mapping):
            event["error_kind"] = error.get("kind")
        if source is not None:
            event["source"] = source
        return self.write(event)


def record_solve(
    report: Mapping[str, Any],
    *,
    source: Optional[str] = None,
    journal: Optional[SolveJournal] = None,
) -> Path:
    """Record ``report`` in ``journal``, or in the one ``[events]`` describes."""

    return (journal or SolveJournal.from_config()).record(report, source=source)
