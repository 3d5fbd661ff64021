"""Render a puzzle and its solution onto a single PDF page."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from project_config import get_section

INCH_PER_CM = 0.3937007874


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _page_settings() -> Dict[str, Any]:
    cfg = _as_dict(get_section("printer.pdf", {}))
    return {
        "width_cm": float(cfg.get("width_cm", 21.0)),
        "height_cm": float(cfg.get("height_cm", 29.7)),
        "margin_cm": float(cfg.get("margin_cm", 2.0)),
        "font_scale": float(cfg.get("font_scale_factor", 0.65)),
        "given_color": str(cfg.get("given_color", "black")),
        "filled_color": str(cfg.get("filled_color", "tab:blue")),
    }


def _draw_grid(ax, puzzle, solution, size_in: float, settings: Dict[str, Any]) -> None:
    ax.tick_params(
        axis="both", which="both", bottom=False, top=False, left=False, right=False,
        labelbottom=False, labelleft=False,
    )
    for idx in range(10):
        linewidth = 1.0 if idx % 3 else 2.5
        ax.axvline(idx / 9, color="k", linewidth=linewidth)
        ax.axhline(idx / 9, color="k", linewidth=linewidth)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")

    font_size = max(1, int(settings["font_scale"] * size_in * 72 / 9))
    for r in range(9):
        for c in range(9):
            given = puzzle[r][c]
            value = given or (solution[r][c] if solution is not None else 0)
            if not value:
                continue
            color = settings["given_color"] if given else settings["filled_color"]
            ax.text((c + 0.5) / 9, 1 - (r + 0.5) / 9, str(value),
                    ha="center", va="center", fontsize=font_size, color=color)


def export_pdf(
    puzzle: Sequence[Sequence[int]],
    solution: Optional[Sequence[Sequence[int]]],
    out_path: str | Path,
    *,
    footer: str = "",
) -> Path:
    """Write ``puzzle`` (with ``solution`` digits overlaid) to ``out_path``.

    Given digits use ``given_color``; digits filled by the solver use
    ``filled_color``. Page geometry comes from ``[printer.pdf]``.
    """

    from matplotlib.backends.backend_pdf import PdfPages
    from matplotlib.figure import Figure

    settings = _page_settings()
    page_w_in = settings["width_cm"] * INCH_PER_CM
    page_h_in = settings["height_cm"] * INCH_PER_CM
    margin_in = settings["margin_cm"] * INCH_PER_CM
    size_in = min(page_w_in, page_h_in) - 2 * margin_in
    if size_in <= 0:
        raise ValueError("printer.pdf margins leave no room for the grid")

    left = (page_w_in - size_in) / 2
    bottom = page_h_in - margin_in - size_in

    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = Figure(figsize=(page_w_in, page_h_in))
    ax = fig.add_axes(
        [left / page_w_in, bottom / page_h_in, size_in / page_w_in, size_in / page_h_in],
        frameon=False,
    )
    _draw_grid(ax, puzzle, solution, size_in, settings)
    if footer:
        fig.text(0.5, margin_in / 2 / page_h_in, footer, ha="center", va="bottom", fontsize=8)

    with PdfPages(path) as pdf:
        pdf.savefig(fig)
    return path


__all__ = ["export_pdf"]
