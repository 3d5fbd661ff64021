from __future__ import annotations

import pytest

from printer.pdf import export_pdf
from printer.text import ROW_RULE, format_grid, from_string, to_string

from sample_grids import CLASSIC, CLASSIC_SOLUTION, as_rows


def test_format_grid_draws_box_dividers() -> None:
    lines = format_grid(as_rows(CLASSIC_SOLUTION)).splitlines()
    assert len(lines) == 11
    assert lines[0] == "5 3 4 | 6 7 8 | 9 1 2"
    assert lines[3] == ROW_RULE
    assert lines[7] == ROW_RULE
    assert lines[10] == "3 4 5 | 2 8 6 | 1 7 9"


def test_format_grid_shows_dots_for_empty_cells() -> None:
    first = format_grid(as_rows(CLASSIC)).splitlines()[0]
    assert first == "5 3 . | . 7 . | . . ."


def test_string_encoding_round_trip() -> None:
    encoded = to_string(as_rows(CLASSIC))
    assert encoded == "".join(CLASSIC)
    assert from_string(encoded) == CLASSIC


def test_from_string_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        from_string("123")


def test_export_pdf_writes_document(tmp_path) -> None:
    out = tmp_path / "nested" / "solution.pdf"
    path = export_pdf(as_rows(CLASSIC), as_rows(CLASSIC_SOLUTION), out, footer="solved")
    assert path == out
    assert out.read_bytes().startswith(b"%PDF")


def test_export_pdf_without_solution(tmp_path) -> None:
    out = export_pdf(as_rows(CLASSIC), None, tmp_path / "puzzle.pdf")
    assert out.stat().st_size > 0
