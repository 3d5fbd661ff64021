"""Error taxonomy and report contracts for the Sudoku solver."""

from __future__ import annotations

from .errors import (
    DuplicateDigitError,
    InvalidCharacterError,
    LoadError,
    LoadErrorKind,
    MalformedInputError,
)
from .schema_validator import SchemaValidationError, validate_solve_report

__all__ = [
    "DuplicateDigitError",
    "InvalidCharacterError",
    "LoadError",
    "LoadErrorKind",
    "MalformedInputError",
    "SchemaValidationError",
    "validate_solve_report",
]
