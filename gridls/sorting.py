"""Entry ordering.

Names compare case-insensitively over their encoded bytes (ASCII folding
only). Size and timestamp keys put larger values first and do not fall back
to the name on ties; the order of tied entries is whatever the sort pass
leaves, which is unspecified.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cmp_to_key

from .entry_model import Entry
from .options import SortKey

LOGGER = logging.getLogger(__name__)


def _folded_name(entry: Entry) -> bytes:
    return os.fsencode(entry.name).lower()


def _sort_value(entry: Entry, key: SortKey) -> int:
    if key is SortKey.SIZE:
        return entry.size
    if key is SortKey.ACCESS_TIME:
        return entry.atime
    if key is SortKey.MODIFY_TIME:
        return entry.mtime
    if key is SortKey.CHANGE_TIME:
        return entry.ctime
    raise ValueError(f"unknown sort key {key!r}")


def compare(a: Entry, b: Entry, key: SortKey, reverse: bool = False) -> int:
    """Return -1, 0 or 1 ordering ``a`` against ``b`` under ``key``."""
    if key is SortKey.LEXICOGRAPHIC:
        left = _folded_name(a)
        right = _folded_name(b)
        result = (left > right) - (left < right)
    else:
        left_value = _sort_value(a, key)
        right_value = _sort_value(b, key)
        result = (left_value < right_value) - (left_value > right_value)
    return -result if reverse else result


@dataclass(frozen=True)
class EntryComparator:
    """Comparator bound to one sort key and direction."""

    key: SortKey = SortKey.LEXICOGRAPHIC
    reverse: bool = False

    def __call__(self, a: Entry, b: Entry) -> int:
        return compare(a, b, self.key, self.reverse)

    def sort_key(self) -> Callable[[Entry], object]:
        return cmp_to_key(self)


def sort_entries(entries: Iterable[Entry], key: SortKey = SortKey.LEXICOGRAPHIC, reverse: bool = False) -> list[Entry]:
    """Sort by name first, then layer ``key`` on top when it is not the name.

    ``reverse`` applies to both passes.
    """
    ordered = sorted(entries, key=EntryComparator(SortKey.LEXICOGRAPHIC, reverse).sort_key())
    if key is not SortKey.LEXICOGRAPHIC:
        ordered.sort(key=EntryComparator(key, reverse).sort_key())
    LOGGER.debug("sorted %d entries by %s (reverse=%s)", len(ordered), key.value, reverse)
    return ordered


def partition_arguments(entries: Iterable[Entry]) -> tuple[list[Entry], list[Entry]]:
    """Split operands into non-directories and directories, each sorted by name."""
    non_dirs: list[Entry] = []
    dirs: list[Entry] = []
    for entry in entries:
        (dirs if entry.is_dir else non_dirs).append(entry)
    by_name = EntryComparator().sort_key()
    non_dirs.sort(key=by_name)
    dirs.sort(key=by_name)
    return non_dirs, dirs


__all__ = [
    "compare",
    "EntryComparator",
    "sort_entries",
    "partition_arguments",
]
