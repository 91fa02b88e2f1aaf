"""Directory traversal and batch printing.

Collects entries per directory (or per command-line operand batch), sorts
them, prints the optional intro and ``total`` lines, and hands each batch to
the layout engine. Recursion follows sub-directories after their parent's
batch has been printed.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .config import DEFAULT_COLUMNS
from .entry_model import Entry, full_path, is_dot_dir, lstat_entry, read_directory, stat_operands, total_blocks
from .format import build_records, format_block_count, render_name
from .layout import render_layout
from .options import DisplayOptions
from .sorting import partition_arguments, sort_entries

LOGGER = logging.getLogger(__name__)

CURRENT_DIRECTORY = "."


@dataclass(frozen=True)
class ListingOptions:
    """Traversal settings wrapped around the display snapshot."""

    display: DisplayOptions
    show_all: bool = False
    almost_all: bool = False
    directories_as_files: bool = False
    recursive: bool = False
    unsorted: bool = False
    show_total: bool = False
    width: int = DEFAULT_COLUMNS


class Lister:
    """Prints listings for directories and operands to one output stream."""

    def __init__(self, options: ListingOptions, stream: TextIO | None = None) -> None:
        self.options = options
        self.stream = sys.stdout if stream is None else stream

    def _write(self, text: str) -> None:
        if text:
            self.stream.write(text)

    def print_batch(self, entries: Sequence[Entry], directory: str) -> None:
        """Build every record of the batch, then write the laid-out text."""
        display = self.options.display
        records = build_records(list(entries), display, directory)
        self._write(render_layout(records, display.grid_mode, self.options.width))

    def print_intro(self, directory: str, intro: bool, depth: int) -> None:
        if depth > 0:
            self._write("\n")
        if intro or self.options.recursive:
            self._write(f"{render_name(directory, self.options.display.replace_nonprintable)}:\n")

    def print_total(self, entries: Sequence[Entry]) -> None:
        blocks = format_block_count(total_blocks(entries), self.options.display)
        self._write(f"total {blocks}\n")

    def sorted_entries(self, entries: list[Entry]) -> list[Entry]:
        if self.options.unsorted:
            return entries
        display = self.options.display
        return sort_entries(entries, display.sort_key, display.reverse)

    def traverse(self, directory: str, intro: bool = False, depth: int = 0) -> None:
        """List ``directory``; with recursion enabled, descend into sub-directories."""
        self.print_intro(directory, intro, depth)
        entries = read_directory(directory, self.options.show_all, self.options.almost_all)
        entries = self.sorted_entries(entries)
        LOGGER.debug("listing %s: %d entries at depth %d", directory, len(entries), depth)

        if self.options.show_total:
            self.print_total(entries)
        self.print_batch(entries, directory)

        if not self.options.recursive:
            return
        for entry in entries:
            if entry.is_dir and not is_dot_dir(entry.name):
                self.traverse(full_path(directory, entry.name), intro, depth + 1)

    def run(self, paths: Sequence[str]) -> None:
        """List ``paths`` as given on the command line, or ``.`` when empty.

        Non-directory operands are printed first as one batch, followed by each
        directory operand in name order.
        """
        if not paths:
            if self.options.directories_as_files:
                self.print_batch([lstat_entry(CURRENT_DIRECTORY, CURRENT_DIRECTORY)], CURRENT_DIRECTORY)
            else:
                self.traverse(CURRENT_DIRECTORY)
            return

        non_dirs, dirs = partition_arguments(stat_operands(paths))
        if self.options.directories_as_files:
            self.print_batch(non_dirs + dirs, "")
            return

        if non_dirs:
            self.print_batch(non_dirs, "")
            if dirs:
                self._write("\n")
        intro = len(paths) > 1
        for depth, entry in enumerate(dirs):
            self.traverse(entry.name, intro, depth)


__all__ = [
    "CURRENT_DIRECTORY",
    "ListingOptions",
    "Lister",
]
