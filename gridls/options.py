"""Display option snapshot consumed by record building and layout."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .entry_model import Entry

DEFAULT_BLOCK_SIZE = 512


class GridMode(enum.Enum):
    ONE_PER_LINE = "one-per-line"
    COLUMNS_DOWN = "columns-down"
    ROWS_ACROSS = "rows-across"


class SortKey(enum.Enum):
    LEXICOGRAPHIC = "name"
    SIZE = "size"
    ACCESS_TIME = "atime"
    MODIFY_TIME = "mtime"
    CHANGE_TIME = "ctime"


class TimeField(enum.Enum):
    """Which of the three entry timestamps is shown and sorted on."""

    ACCESS = "atime"
    MODIFY = "mtime"
    CHANGE = "ctime"

    def of(self, entry: Entry) -> int:
        return int(getattr(entry, self.value))

    @property
    def sort_key(self) -> SortKey:
        return _TIME_SORT_KEYS[self]


_TIME_SORT_KEYS = {
    TimeField.ACCESS: SortKey.ACCESS_TIME,
    TimeField.MODIFY: SortKey.MODIFY_TIME,
    TimeField.CHANGE: SortKey.CHANGE_TIME,
}


@dataclass(frozen=True)
class DisplayOptions:
    """Immutable formatting settings for one listing invocation.

    ``block_size`` and ``now`` are resolved once up front so building a record
    depends only on the entry and this snapshot.
    """

    show_inode: bool = False
    show_blocks: bool = False
    long_format: bool = False
    numeric_ids: bool = False
    human_readable: bool = False
    kilobytes: bool = False
    classify: bool = False
    quote_nonprintable: bool = False
    raw_nonprintable: bool = False
    sort_key: SortKey = SortKey.LEXICOGRAPHIC
    reverse: bool = False
    grid_mode: GridMode = GridMode.ONE_PER_LINE
    time_field: TimeField = TimeField.MODIFY
    block_size: int = DEFAULT_BLOCK_SIZE
    now: int = 0

    @property
    def replace_nonprintable(self) -> bool:
        return self.quote_nonprintable and not self.raw_nonprintable


__all__ = [
    "DEFAULT_BLOCK_SIZE",
    "GridMode",
    "SortKey",
    "TimeField",
    "DisplayOptions",
]
