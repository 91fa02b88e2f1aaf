"""Filesystem metadata access for directory listings.

Wraps ``lstat``/``readlink``/``scandir`` and converts failures into
``ListingError`` subclasses. All functions take plain string paths so an
empty directory component (command-line operands) joins cleanly.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from ..errors import DirectoryChangedDuringListing, LinkReadError, MetadataUnavailable, NameTooLong
from .types import Entry

LOGGER = logging.getLogger(__name__)

MAX_NAME_BYTES = 255
DOT_DIRS = (".", "..")


def full_path(directory: str, name: str) -> str:
    """Join ``name`` onto ``directory`` with a single ``/``.

    An empty ``directory`` yields ``name`` unchanged; an empty ``name`` yields
    ``directory``.
    """
    if not name:
        return directory
    if directory and not directory.endswith("/"):
        return f"{directory}/{name}"
    return f"{directory}{name}"


def check_name_length(name: str) -> None:
    if len(os.fsencode(name)) > MAX_NAME_BYTES:
        raise NameTooLong(f"file name too long: {name}")


def is_dot_dir(name: str) -> bool:
    return name in DOT_DIRS


def is_hidden_name(name: str) -> bool:
    return name.startswith(".") and not is_dot_dir(name)


def is_displayed(name: str, show_all: bool, almost_all: bool) -> bool:
    """Return whether ``name`` passes the hidden-entry filter."""
    if is_dot_dir(name):
        return show_all
    if is_hidden_name(name):
        return show_all or almost_all
    return True


def lstat_entry(directory: str, name: str) -> Entry:
    """Return the ``Entry`` for ``name`` inside ``directory`` without following links."""
    check_name_length(name)
    path = full_path(directory, name)
    try:
        st = os.lstat(path)
    except OSError as exc:
        raise MetadataUnavailable(f"lstat error for {path}: {exc.strerror or exc}") from exc
    return Entry.from_stat(name, st)


def read_link_target(directory: str, entry: Entry) -> str:
    """Return the symlink target text for ``entry``.

    A target longer than the size lstat reported means the link was replaced
    between the two calls.
    """
    if entry.link_target is not None:
        return entry.link_target
    path = full_path(directory, entry.name)
    try:
        target = os.readlink(path)
    except OSError as exc:
        raise LinkReadError(f"readlink error for {path}: {exc.strerror or exc}") from exc
    if len(os.fsencode(target)) > entry.size:
        raise LinkReadError(f"symlink increased in size between lstat() and readlink() for {path}")
    return target


def lstat_link_target(directory: str, target: str) -> os.stat_result | None:
    """lstat a symlink target relative to the link's directory, ``None`` on failure."""
    base = "" if target.startswith("/") else directory
    try:
        return os.lstat(full_path(base, target))
    except OSError:
        return None


def _count_entries(path: str) -> int:
    try:
        with os.scandir(path) as it:
            return sum(1 for _ in it)
    except OSError as exc:
        raise MetadataUnavailable(f"error opening directory {path}: {exc.strerror or exc}") from exc


def read_directory(path: str, show_all: bool = False, almost_all: bool = False) -> list[Entry]:
    """Read and lstat the displayed entries of directory ``path``.

    The directory is counted first and read second; a different count on the
    read pass raises ``DirectoryChangedDuringListing``. ``.`` and ``..`` are
    included only when ``show_all`` is set.
    """
    expected = _count_entries(path)
    entries: list[Entry] = []
    if show_all:
        entries.extend(lstat_entry(path, name) for name in DOT_DIRS)

    seen = 0
    try:
        with os.scandir(path) as it:
            for child in it:
                seen += 1
                if not is_displayed(child.name, show_all, almost_all):
                    continue
                entries.append(lstat_entry(path, child.name))
    except OSError as exc:
        raise MetadataUnavailable(f"error reading directory {path}: {exc.strerror or exc}") from exc

    if seen < expected:
        raise DirectoryChangedDuringListing(f"files were removed from directory {path} during traversal")
    if seen > expected:
        raise DirectoryChangedDuringListing(f"files were added to directory {path} during traversal")

    LOGGER.debug("read %d of %d entries from %s", len(entries), seen, path)
    return entries


def stat_operands(paths: Iterable[str]) -> list[Entry]:
    """lstat command-line operands; each ``Entry.name`` is the operand text."""
    return [lstat_entry("", path) for path in paths]


def total_blocks(entries: Iterable[Entry]) -> int:
    return sum(entry.block_count for entry in entries)


__all__ = [
    "MAX_NAME_BYTES",
    "full_path",
    "check_name_length",
    "is_dot_dir",
    "is_hidden_name",
    "is_displayed",
    "lstat_entry",
    "read_link_target",
    "lstat_link_target",
    "read_directory",
    "stat_operands",
    "total_blocks",
]
