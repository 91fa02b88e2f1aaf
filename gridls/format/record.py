"""Field record building.

A record is the ordered list of rendered text fields for one entry under one
``DisplayOptions`` snapshot. Fields are joined by ``FIELD_DELIMITER`` when a
flat text form is needed; no field ever contains the delimiter.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..entry_model import (
    MAX_NAME_BYTES,
    Entry,
    EntryKind,
    kind_from_mode,
    lstat_link_target,
    read_link_target,
)
from ..errors import BufferExhausted, NameTooLong
from ..options import DisplayOptions
from .fields import (
    FIELD_DELIMITER,
    device_text,
    display_width,
    entry_type_symbol,
    group_text,
    mode_string,
    owner_text,
    render_name,
    time_text,
    type_symbol,
)
from .sizes import format_block_count, format_byte_size

MAX_RECORD_BYTES = 511
LINK_ARROW = " -> "


@dataclass(frozen=True)
class Record:
    """Rendered fields of one entry."""

    fields: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("record needs at least one field")
        for field in self.fields:
            if FIELD_DELIMITER in field:
                raise ValueError(f"field contains the delimiter: {field!r}")

    @classmethod
    def from_text(cls, text: str) -> "Record":
        return cls(tuple(text.split(FIELD_DELIMITER)))

    @property
    def cols(self) -> int:
        return len(self.fields)

    @property
    def text(self) -> str:
        return FIELD_DELIMITER.join(self.fields)

    def widths(self) -> tuple[int, ...]:
        return tuple(display_width(field) for field in self.fields)


def _encoded_length(text: str) -> int:
    return len(os.fsencode(text))


def _long_fields(entry: Entry, options: DisplayOptions) -> list[str]:
    replace = options.replace_nonprintable
    if entry.kind in (EntryKind.BLOCK, EntryKind.CHAR):
        size = device_text(entry.rdev)
    else:
        size = format_byte_size(entry.size, options)
    return [
        mode_string(entry.mode),
        str(entry.link_count),
        owner_text(entry.owner_id, options.numeric_ids, replace),
        group_text(entry.group_id, options.numeric_ids, replace),
        size,
        time_text(options.time_field.of(entry), options.now),
    ]


def _link_suffix(entry: Entry, options: DisplayOptions, directory_path: str) -> str:
    """Return `` -> target`` plus the target's type symbol when classifying.

    The target symbol is left out when the target cannot be lstat'ed.
    """
    target = read_link_target(directory_path, entry)
    suffix = LINK_ARROW + render_name(target, False)
    if options.classify:
        target_stat = lstat_link_target(directory_path, target)
        if target_stat is not None:
            suffix += type_symbol(kind_from_mode(target_stat.st_mode), target_stat.st_mode, options.long_format)
    return suffix


def build_record(entry: Entry, options: DisplayOptions, directory_path: str) -> Record:
    """Build the record for ``entry`` as displayed inside ``directory_path``.

    Field order: inode, block count, long-format block (mode, links, owner,
    group, size, time), then the name. The classify symbol and, in long
    format, the symlink target are appended to the name field so every
    record of a batch has the same field count.
    """
    fields: list[str] = []
    if options.show_inode:
        fields.append(str(entry.inode))
    if options.show_blocks:
        fields.append(format_block_count(entry.block_count, options))
    if options.long_format:
        fields.extend(_long_fields(entry, options))

    name = render_name(entry.name, options.replace_nonprintable)
    if _encoded_length(name) > MAX_NAME_BYTES:
        raise NameTooLong(f"name too long: {name}")
    if options.classify:
        name += entry_type_symbol(entry, options.long_format)
    if options.long_format and entry.is_symlink:
        name += _link_suffix(entry, options, directory_path)
    fields.append(name)

    record = Record(tuple(fields))
    if _encoded_length(record.text) > MAX_RECORD_BYTES:
        raise BufferExhausted(f"record for {name} exceeds {MAX_RECORD_BYTES} bytes")
    return record


def build_records(entries: list[Entry], options: DisplayOptions, directory_path: str) -> list[Record]:
    return [build_record(entry, options, directory_path) for entry in entries]


__all__ = [
    "MAX_RECORD_BYTES",
    "LINK_ARROW",
    "Record",
    "build_record",
    "build_records",
]
