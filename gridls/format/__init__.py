"""Per-entry field rendering: sizes, names, long-format columns, records."""

from __future__ import annotations

from .fields import FIELD_DELIMITER, display_width, render_name, type_symbol
from .record import MAX_RECORD_BYTES, Record, build_record, build_records
from .sizes import format_block_count, format_byte_size, human_size, kilo_size

__all__ = [
    "FIELD_DELIMITER",
    "MAX_RECORD_BYTES",
    "Record",
    "build_record",
    "build_records",
    "display_width",
    "render_name",
    "type_symbol",
    "format_block_count",
    "format_byte_size",
    "human_size",
    "kilo_size",
]
