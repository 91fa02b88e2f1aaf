"""Grid layout for record batches.

Records are laid out one per line or in a multi-column grid that is searched
for the widest arrangement fitting the target width. Columns-down grids grow
their row count until the grid fits; rows-across grids shrink their column
count. Every field is padded to the widest field at the same position in its
grid column and followed by one space, except the last field of a row, which
ends the line.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from ..format import Record, display_width
from ..options import GridMode
from .widths import ColumnWidths

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridShape:
    """Outcome of the width-fitting search."""

    rows: int
    cols: int
    column_widths: tuple[ColumnWidths, ...]
    iterations: int
    total_width: int


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _row_width(grid: Sequence[ColumnWidths], fields_per_record: int) -> int:
    return sum(column.total() for column in grid) + len(grid) * fields_per_record - 1


def fit_grid(records: Sequence[Record], mode: GridMode, target_width: int) -> GridShape:
    """Search for the row/column split of ``records`` that fits ``target_width``.

    Stops at the first fitting grid, or when the grid has degenerated to a
    single row per entry (columns-down) or a single column (rows-across), in
    which case the grid may be wider than ``target_width``. Runs at most
    ``len(records)`` iterations.
    """
    if mode is GridMode.ONE_PER_LINE:
        raise ValueError("fit_grid needs a grid mode")
    count = len(records)
    if count == 0:
        raise ValueError("fit_grid needs at least one record")

    columns_down = mode is GridMode.COLUMNS_DOWN
    entry_widths = [ColumnWidths.from_record(record) for record in records]
    fields_per_record = entry_widths[0].cols
    rows = 1
    cols = count
    iterations = 0
    while True:
        iterations += 1
        if columns_down:
            cols = _ceil_div(count, rows)
        else:
            rows = _ceil_div(count, cols)

        grid = [ColumnWidths.filled(fields_per_record) for _ in range(cols)]
        for idx, widths in enumerate(entry_widths):
            grid_col = idx // rows if columns_down else idx % cols
            grid[grid_col].merge(widths)

        total = _row_width(grid, fields_per_record)
        LOGGER.debug("grid search %d: %d rows x %d cols, width %d/%d", iterations, rows, cols, total, target_width)
        if total <= target_width:
            break
        if (columns_down and rows == count) or (not columns_down and cols == 1):
            break
        if columns_down:
            rows += 1
        else:
            cols -= 1

    return GridShape(rows=rows, cols=cols, column_widths=tuple(grid), iterations=iterations, total_width=total)


def render_cell(record: Record, widths: ColumnWidths, end_of_row: bool) -> str:
    """Render one record padded to ``widths``.

    The last field of a row-ending cell is written unpadded with a newline.
    """
    parts: list[str] = []
    last = record.cols - 1
    for idx, field in enumerate(record.fields):
        if idx == last and end_of_row:
            parts.append(field)
            parts.append("\n")
        else:
            parts.append(field)
            parts.append(" " * max(0, widths.widths[idx] - display_width(field)))
            parts.append(" ")
    return "".join(parts)


def render_lines(records: Sequence[Record]) -> str:
    """Render one record per line with fields aligned across the batch."""
    if not records:
        return ""
    widths = ColumnWidths.from_records(records)
    return "".join(render_cell(record, widths, True) for record in records)


def render_grid(records: Sequence[Record], mode: GridMode, shape: GridShape) -> str:
    count = len(records)
    out: list[str] = []
    if mode is GridMode.COLUMNS_DOWN:
        for row in range(shape.rows):
            for col in range(shape.cols):
                idx = row + col * shape.rows
                if idx < count:
                    out.append(render_cell(records[idx], shape.column_widths[col], col == shape.cols - 1))
                else:
                    out.append("\n")
    else:
        for idx, record in enumerate(records):
            col = idx % shape.cols
            end_of_row = col == shape.cols - 1 or idx == count - 1
            out.append(render_cell(record, shape.column_widths[col], end_of_row))
    return "".join(out)


def render_layout(records: Sequence[Record], mode: GridMode, target_width: int) -> str:
    """Return the full text for ``records`` laid out in ``mode``."""
    if not records:
        return ""
    if mode is GridMode.ONE_PER_LINE:
        return render_lines(records)
    shape = fit_grid(records, mode, target_width)
    return render_grid(records, mode, shape)


def layout(records: Sequence[Record], mode: GridMode, target_width: int, stream: TextIO | None = None) -> None:
    """Write the laid-out batch to ``stream`` (stdout by default)."""
    text = render_layout(records, mode, target_width)
    if not text:
        return
    out = sys.stdout if stream is None else stream
    out.write(text)


__all__ = [
    "GridShape",
    "fit_grid",
    "render_cell",
    "render_lines",
    "render_grid",
    "render_layout",
    "layout",
]
