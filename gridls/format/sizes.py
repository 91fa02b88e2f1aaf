"""Size conversion shared by the block-count and byte-size fields.

``st_blocks`` is always counted in 512-byte units; ``DisplayOptions.block_size``
only rescales the plain decimal block rendering.
"""

from __future__ import annotations

from ..options import DisplayOptions

STAT_BLOCK_UNIT = 512
HUMAN_UNITS = ("B", "K", "M", "G", "T", "P", "E")


def human_size(size: int) -> str:
    """Render ``size`` bytes with a binary unit letter.

    Divides by 1024 while the value is at least 1000. One fractional digit is
    kept below 10 (except for exactly zero); the byte unit has no letter.
    """
    result = float(size)
    unit = 0
    while result >= 1000 and unit < len(HUMAN_UNITS) - 1:
        result /= 1024
        unit += 1
    frac_digits = 0 if result >= 10 or result == 0 else 1
    text = f"{result:.{frac_digits}f}"
    if unit > 0:
        text += HUMAN_UNITS[unit]
    return text


def kilo_size(size: int) -> str:
    """Render ``size`` bytes as whole kilobytes, rounding any remainder up."""
    return str(-(-size // 1024))


def scaled_block_count(blocks: int, block_size: int) -> int:
    """Convert 512-byte ``blocks`` to ``block_size`` units, rounding up."""
    if block_size <= 0:
        block_size = STAT_BLOCK_UNIT
    return -(-(blocks * STAT_BLOCK_UNIT) // block_size)


def format_block_count(blocks: int, options: DisplayOptions) -> str:
    if options.human_readable:
        return human_size(blocks * STAT_BLOCK_UNIT)
    if options.kilobytes:
        return kilo_size(blocks * STAT_BLOCK_UNIT)
    return str(scaled_block_count(blocks, options.block_size))


def format_byte_size(size: int, options: DisplayOptions) -> str:
    if options.human_readable:
        return human_size(size)
    if options.kilobytes:
        return kilo_size(size)
    return str(size)


__all__ = [
    "STAT_BLOCK_UNIT",
    "HUMAN_UNITS",
    "human_size",
    "kilo_size",
    "scaled_block_count",
    "format_block_count",
    "format_byte_size",
]
