"""Column width tracking and the grid layout engine."""

from __future__ import annotations

from .widths import ColumnWidths
from .grid import GridShape, fit_grid, layout, render_cell, render_grid, render_layout, render_lines

__all__ = [
    "ColumnWidths",
    "GridShape",
    "fit_grid",
    "layout",
    "render_cell",
    "render_grid",
    "render_layout",
    "render_lines",
]
