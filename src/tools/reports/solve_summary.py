"""Aggregation helpers for solve event journals."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

__all__ = ["aggregate"]


def _load_events(paths: Iterable[Path]) -> Iterable[Mapping[str, Any]]:
    for path in paths:
        for line in path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            yield json.loads(line)


def aggregate(paths: Iterable[Path]) -> Dict[str, Any]:
    statuses: Counter = Counter()
    strategies: Counter = Counter()
    errors: Counter = Counter()
    total = 0
    total_steps = 0
    max_steps = 0
    total_ms = 0.0
    for event in _load_events(paths):
        if event.get("event") != "solve.completed":
            continue
        total += 1
        statuses[str(event.get("status", "unknown"))] += 1
        strategies[str(event.get("strategy", "unknown"))] += 1
        if event.get("error_kind"):
            errors[str(event["error_kind"])] += 1
        steps = event.get("steps")
        if isinstance(steps, int):
            total_steps += steps
            max_steps = max(max_steps, steps)
        elapsed = event.get("elapsed_ms")
        if isinstance(elapsed, (int, float)):
            total_ms += float(elapsed)

    return {
        "total_events": total,
        "status": dict(statuses),
        "strategy": dict(strategies),
        "errors": dict(errors),
        "steps": {"total": total_steps, "max": max_steps},
        "elapsed_ms": round(total_ms, 3),
    }
