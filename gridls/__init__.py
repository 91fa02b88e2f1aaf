"""Public package surface for gridls.

Exports ``main`` for programmatic CLI invocation plus the formatting core:
``build_record``, ``compare`` and ``layout``.
"""

from __future__ import annotations

from .format import Record, build_record
from .layout import ColumnWidths, layout, render_layout
from .options import DisplayOptions, GridMode, SortKey, TimeField
from .sorting import EntryComparator, compare, sort_entries


def main(*args, **kwargs):
    """Lazily import the CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "Record",
    "build_record",
    "ColumnWidths",
    "layout",
    "render_layout",
    "DisplayOptions",
    "GridMode",
    "SortKey",
    "TimeField",
    "EntryComparator",
    "compare",
    "sort_entries",
]
