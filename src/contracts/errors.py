"""Error types raised while loading puzzle text."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class LoadErrorKind(str, Enum):
    """Reason a puzzle could not be loaded."""

    LINE_COUNT = "line_count"
    LINE_TOO_SHORT = "line_too_short"
    INVALID_CHARACTER = "invalid_character"
    DUPLICATE_DIGIT = "duplicate_digit"


class LoadError(ValueError):
    """Raised when puzzle text cannot be turned into a grid.

    ``row`` and ``column`` are 1-based positions of the offending cell or line,
    or ``None`` when the error concerns the input as a whole.
    """

    def __init__(
        self,
        kind: LoadErrorKind,
        message: str,
        *,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.kind = kind
        self.row = row
        self.column = column
        super().__init__(message)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": str(self),
            "row": self.row,
            "column": self.column,
        }


class MalformedInputError(LoadError):
    """Wrong number of lines or a line that is too short."""


class InvalidCharacterError(LoadError):
    """A cell character outside ``1-9``, ``.`` and ``0``."""

    def __init__(self, row: int, column: int, char: str) -> None:
        self.char = char
        super().__init__(
            LoadErrorKind.INVALID_CHARACTER,
            f"Invalid character {char!r} at row {row} col {column}",
            row=row,
            column=column,
        )


class DuplicateDigitError(LoadError):
    """An initial digit already present in its row, column or box."""

    def __init__(self, row: int, column: int, digit: int, unit: str) -> None:
        self.digit = digit
        self.unit = unit
        super().__init__(
            LoadErrorKind.DUPLICATE_DIGIT,
            f"Initial puzzle has duplicates at row {row} col {column} "
            f"(digit {digit} already in {unit})",
            row=row,
            column=column,
        )

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["digit"] = self.digit
        payload["unit"] = self.unit
        return payload


__all__ = [
    "DuplicateDigitError",
    "InvalidCharacterError",
    "LoadError",
    "LoadErrorKind",
    "MalformedInputError",
]
