"""Individual field renderers used by the record builder."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import time
import unicodedata
from functools import lru_cache

from ..entry_model import S_IFWHT, Entry, EntryKind

FIELD_DELIMITER = "\b"
RECENT_SECONDS = 6 * 30 * 24 * 60 * 60
RECENT_TIME_FORMAT = "%b %d %H:%M"
OLD_TIME_FORMAT = "%b %d %Y"
EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def char_display_width(ch: str) -> int:
    """Return terminal cell width for one character.

    Combining marks consume no cells, East Asian wide/fullwidth characters two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def render_name(name: str, replace_nonprintable: bool) -> str:
    """Render a name for output.

    Non-printable characters become ``?`` when requested. The field delimiter
    is always replaced so it can never split a field.
    """
    out: list[str] = []
    for ch in name:
        if ch == FIELD_DELIMITER or (replace_nonprintable and not ch.isprintable()):
            out.append("?")
        else:
            out.append(ch)
    return "".join(out)


def mode_string(mode: int) -> str:
    """Return the ten-character type and permission string, e.g. ``drwxr-xr-x``."""
    text = stat.filemode(mode)
    if stat.S_IFMT(mode) == S_IFWHT:
        text = "w" + text[1:]
    return text


@lru_cache(maxsize=256)
def _user_name(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


@lru_cache(maxsize=256)
def _group_name(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


def owner_text(uid: int, numeric: bool, replace_nonprintable: bool) -> str:
    name = None if numeric else _user_name(uid)
    return str(uid) if name is None else render_name(name, replace_nonprintable)


def group_text(gid: int, numeric: bool, replace_nonprintable: bool) -> str:
    name = None if numeric else _group_name(gid)
    return str(gid) if name is None else render_name(name, replace_nonprintable)


def device_text(rdev: int) -> str:
    return f"{os.major(rdev)},{os.minor(rdev)}"


def time_text(timestamp: int, now: int) -> str:
    """Format a timestamp; entries older than six months show the year."""
    fmt = RECENT_TIME_FORMAT if now - timestamp < RECENT_SECONDS else OLD_TIME_FORMAT
    return time.strftime(fmt, time.localtime(timestamp))


def type_symbol(kind: EntryKind, mode: int, long_format: bool) -> str:
    """Return the classify suffix for an entry of ``kind``.

    Symlinks get ``@`` only outside long format, where the target is shown.
    """
    if kind is EntryKind.DIRECTORY:
        return "/"
    if kind is EntryKind.FIFO:
        return "|"
    if kind is EntryKind.SYMLINK:
        return "" if long_format else "@"
    if kind is EntryKind.SOCKET:
        return "="
    if kind is EntryKind.WHITEOUT:
        return "%"
    if mode & EXECUTABLE_BITS:
        return "*"
    return ""


def entry_type_symbol(entry: Entry, long_format: bool) -> str:
    return type_symbol(entry.kind, entry.mode, long_format)


__all__ = [
    "FIELD_DELIMITER",
    "RECENT_SECONDS",
    "char_display_width",
    "display_width",
    "render_name",
    "mode_string",
    "owner_text",
    "group_text",
    "device_text",
    "time_text",
    "type_symbol",
    "entry_type_symbol",
]
