"""Optional record of the placements made during a search."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class TraceLevel(str, Enum):
    NONE = "none"
    PLACEMENTS = "placements"

    @classmethod
    def from_value(cls, value: "str | TraceLevel") -> "TraceLevel":
        if isinstance(value, TraceLevel):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unsupported trace level: {value!r}") from exc


@dataclass(frozen=True)
class TraceEvent:
    """Single place or undo performed by the search."""

    op: str
    row: int
    col: int
    digit: int
    depth: int

    def to_payload(self) -> dict:
        return {
            "op": self.op,
            "row": self.row,
            "col": self.col,
            "digit": self.digit,
            "depth": self.depth,
        }


@dataclass
class SearchTrace:
    """In-memory trace accumulator respecting the configured level."""

    level: TraceLevel = TraceLevel.NONE
    events: List[TraceEvent] = field(default_factory=list)

    @property
    def enabled(self) -> bool:
        return self.level is not TraceLevel.NONE

    def placed(self, r: int, c: int, d: int, depth: int) -> None:
        if self.enabled:
            self.events.append(TraceEvent("place", r, c, d, depth))

    def undone(self, r: int, c: int, d: int, depth: int) -> None:
        if self.enabled:
            self.events.append(TraceEvent("undo", r, c, d, depth))

    def snapshot(self) -> Tuple[TraceEvent, ...]:
        return tuple(self.events)

    def reset(self) -> None:
        self.events.clear()


__all__ = ["SearchTrace", "TraceEvent", "TraceLevel"]
