"""JSON Schema validation for machine-readable solve reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema


class SchemaValidationError(RuntimeError):
    """Exception raised when a payload fails validation."""

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"
_SOLVE_REPORT_SCHEMA = "solve_report.schema.json"

_schema_cache: Dict[str, Dict[str, Any]] = {}


def load_schema(name: str) -> Dict[str, Any]:
    """Load a schema shipped next to this module."""

    if name in _schema_cache:
        return _schema_cache[name]
    path = _SCHEMA_ROOT / name
    try:
        schema = json.loads(path.read_text("utf-8"))
    except FileNotFoundError as exc:
        raise SchemaValidationError("schema-not-found", name) from exc
    _schema_cache[name] = schema
    return schema


def _json_path(error: jsonschema.ValidationError) -> str:
    components: List[str] = ["$"]
    for part in error.absolute_path:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def validate_solve_report(payload: Dict[str, Any]) -> None:
    """Raise :class:`SchemaValidationError` unless ``payload`` matches the schema."""

    schema = load_schema(_SOLVE_REPORT_SCHEMA)
    validator = jsonschema.Draft202012Validator(schema)
    first = jsonschema.exceptions.best_match(validator.iter_errors(payload))
    if first is not None:
        raise SchemaValidationError("schema-invalid", f"{_json_path(first)}: {first.message}")

    solved = payload["solved"]
    if solved != (payload["status"] == "solved"):
        raise SchemaValidationError("invalid-report", "solved flag disagrees with status")
    if payload["status"] == "invalid" and payload["error"] is None:
        raise SchemaValidationError("invalid-report", "invalid status requires an error")
    if solved and "." in payload["grid"]:
        raise SchemaValidationError("invalid-report", "solved grid contains empty cells")


__all__ = ["SchemaValidationError", "load_schema", "validate_solve_report"]
