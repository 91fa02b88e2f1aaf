"""Entry metadata model and filesystem accessors.

- ``Entry``/``EntryKind`` datatypes built from lstat results
- directory reading with hidden-entry filtering and change detection
- symlink target reads validated against the lstat size
"""

from __future__ import annotations

from .types import S_IFWHT, Entry, EntryKind, kind_from_mode
from .fs import (
    MAX_NAME_BYTES,
    check_name_length,
    full_path,
    is_displayed,
    is_dot_dir,
    is_hidden_name,
    lstat_entry,
    lstat_link_target,
    read_directory,
    read_link_target,
    stat_operands,
    total_blocks,
)

__all__ = [
    "S_IFWHT",
    "Entry",
    "EntryKind",
    "kind_from_mode",
    "MAX_NAME_BYTES",
    "check_name_length",
    "full_path",
    "is_displayed",
    "is_dot_dir",
    "is_hidden_name",
    "lstat_entry",
    "lstat_link_target",
    "read_directory",
    "read_link_target",
    "stat_operands",
    "total_blocks",
]
