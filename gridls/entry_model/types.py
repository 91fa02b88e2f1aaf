"""Domain datatypes for one listed filesystem entry."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass

S_IFWHT = 0o160000


class EntryKind(enum.Enum):
    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    FIFO = "fifo"
    SOCKET = "socket"
    BLOCK = "block"
    CHAR = "char"
    WHITEOUT = "whiteout"
    UNKNOWN = "unknown"


def kind_from_mode(mode: int) -> EntryKind:
    """Map ``st_mode`` file-type bits to an ``EntryKind``."""
    fmt = stat.S_IFMT(mode)
    if fmt == stat.S_IFREG:
        return EntryKind.REGULAR
    if fmt == stat.S_IFDIR:
        return EntryKind.DIRECTORY
    if fmt == stat.S_IFLNK:
        return EntryKind.SYMLINK
    if fmt == stat.S_IFIFO:
        return EntryKind.FIFO
    if fmt == stat.S_IFSOCK:
        return EntryKind.SOCKET
    if fmt == stat.S_IFBLK:
        return EntryKind.BLOCK
    if fmt == stat.S_IFCHR:
        return EntryKind.CHAR
    if fmt == S_IFWHT:
        return EntryKind.WHITEOUT
    return EntryKind.UNKNOWN


@dataclass(frozen=True)
class Entry:
    """Metadata snapshot of one filesystem object.

    Timestamps are whole seconds. ``link_target`` is ``None`` until a caller
    pre-resolves it; record building reads it on demand otherwise.
    """

    name: str
    kind: EntryKind
    mode: int
    size: int = 0
    block_count: int = 0
    link_count: int = 1
    owner_id: int = 0
    group_id: int = 0
    atime: int = 0
    mtime: int = 0
    ctime: int = 0
    inode: int = 0
    rdev: int = 0
    link_target: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "Entry":
        return cls(
            name=name,
            kind=kind_from_mode(st.st_mode),
            mode=int(st.st_mode),
            size=int(st.st_size),
            block_count=int(getattr(st, "st_blocks", 0)),
            link_count=int(st.st_nlink),
            owner_id=int(st.st_uid),
            group_id=int(st.st_gid),
            atime=int(st.st_atime),
            mtime=int(st.st_mtime),
            ctime=int(st.st_ctime),
            inode=int(st.st_ino),
            rdev=int(getattr(st, "st_rdev", 0)),
        )


__all__ = [
    "S_IFWHT",
    "EntryKind",
    "Entry",
    "kind_from_mode",
]
