"""Command-line front door for gridls.

Parses the single-letter flags, resolves conflicting flags (the last one in
each group wins) and terminal-dependent defaults, then runs the listing.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time

from . import config
from .errors import ListingError
from .listing import Lister, ListingOptions
from .options import DEFAULT_BLOCK_SIZE, DisplayOptions, GridMode, SortKey, TimeField

FORMAT_COLUMNS = "columns"
FORMAT_ACROSS = "across"
FORMAT_ONE = "one"
FORMAT_LONG = "long"
FORMAT_NUMERIC = "numeric"
NONPRINTABLE_QUOTE = "quote"
NONPRINTABLE_RAW = "raw"

_GRID_MODES = {
    FORMAT_COLUMNS: GridMode.COLUMNS_DOWN,
    FORMAT_ACROSS: GridMode.ROWS_ACROSS,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridls",
        description="List directory contents.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit.")

    fmt = parser.add_argument_group("output format (last one wins)")
    fmt.add_argument("-C", dest="output_format", action="store_const", const=FORMAT_COLUMNS, help="Multi-column output, filled down columns.")
    fmt.add_argument("-x", dest="output_format", action="store_const", const=FORMAT_ACROSS, help="Multi-column output, filled across rows.")
    fmt.add_argument("-1", dest="output_format", action="store_const", const=FORMAT_ONE, help="One entry per line.")
    fmt.add_argument("-l", dest="output_format", action="store_const", const=FORMAT_LONG, help="Long format.")
    fmt.add_argument("-n", dest="output_format", action="store_const", const=FORMAT_NUMERIC, help="Long format with numeric user and group ids.")

    parser.add_argument("-c", dest="time_field", action="store_const", const=TimeField.CHANGE, help="Use status change time.")
    parser.add_argument("-u", dest="time_field", action="store_const", const=TimeField.ACCESS, help="Use last access time.")
    parser.add_argument("-q", dest="nonprintable", action="store_const", const=NONPRINTABLE_QUOTE, help="Print non-printable characters as '?'.")
    parser.add_argument("-w", dest="nonprintable", action="store_const", const=NONPRINTABLE_RAW, help="Print non-printable characters raw.")

    parser.add_argument("-A", dest="almost_all", action="store_true", help="List all entries except '.' and '..'.")
    parser.add_argument("-a", dest="show_all", action="store_true", help="List all entries, including '.' and '..'.")
    parser.add_argument("-d", dest="directories_as_files", action="store_true", help="List directories as plain entries.")
    parser.add_argument("-F", dest="classify", action="store_true", help="Append a type symbol to each name.")
    parser.add_argument("-f", dest="unsorted", action="store_true", help="Do not sort.")
    parser.add_argument("-h", dest="human_readable", action="store_true", help="Human-readable sizes.")
    parser.add_argument("-i", dest="show_inode", action="store_true", help="Print inode numbers.")
    parser.add_argument("-k", dest="kilobytes", action="store_true", help="Sizes in kilobytes.")
    parser.add_argument("-R", dest="recursive", action="store_true", help="List sub-directories recursively.")
    parser.add_argument("-r", dest="reverse", action="store_true", help="Reverse the sort order.")
    parser.add_argument("-S", dest="sort_size", action="store_true", help="Sort by size, largest first.")
    parser.add_argument("-s", dest="show_blocks", action="store_true", help="Print block counts.")
    parser.add_argument("-t", dest="sort_time", action="store_true", help="Sort by time, newest first.")
    parser.add_argument("paths", nargs="*", metavar="file", help="Files or directories to list.")
    return parser


def resolve_options(
    args: argparse.Namespace,
    *,
    is_tty: bool,
    is_root: bool = False,
    width: int = config.DEFAULT_COLUMNS,
    block_size: int = DEFAULT_BLOCK_SIZE,
    now: int = 0,
) -> ListingOptions:
    """Turn parsed flags plus environment facts into listing options.

    Terminals default to multi-column output with non-printable characters
    replaced; pipes default to one entry per line with raw names.
    """
    output_format = args.output_format or (FORMAT_COLUMNS if is_tty else FORMAT_ONE)
    nonprintable = args.nonprintable or (NONPRINTABLE_QUOTE if is_tty else NONPRINTABLE_RAW)
    time_field = args.time_field or TimeField.MODIFY
    long_format = output_format in (FORMAT_LONG, FORMAT_NUMERIC)

    if args.sort_time:
        sort_key = time_field.sort_key
    elif args.sort_size:
        sort_key = SortKey.SIZE
    else:
        sort_key = SortKey.LEXICOGRAPHIC

    display = DisplayOptions(
        show_inode=args.show_inode,
        show_blocks=args.show_blocks,
        long_format=long_format,
        numeric_ids=output_format == FORMAT_NUMERIC,
        human_readable=args.human_readable,
        kilobytes=args.kilobytes,
        classify=args.classify,
        quote_nonprintable=nonprintable == NONPRINTABLE_QUOTE,
        raw_nonprintable=nonprintable == NONPRINTABLE_RAW,
        sort_key=sort_key,
        reverse=args.reverse,
        grid_mode=_GRID_MODES.get(output_format, GridMode.ONE_PER_LINE),
        time_field=time_field,
        block_size=block_size,
        now=now,
    )
    return ListingOptions(
        display=display,
        show_all=args.show_all,
        almost_all=args.almost_all or is_root,
        directories_as_files=args.directories_as_files,
        recursive=args.recursive,
        unsorted=args.unsorted,
        show_total=long_format or (args.show_blocks and is_tty),
        width=width,
    )


def _configure_logging() -> None:
    if os.environ.get("GRIDLS_DEBUG"):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s] %(name)s: %(message)s",
        )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the listing to stdout.

    Listing errors end the process with ``gridls: <message>`` and status 1;
    output already written stays on stdout.
    """
    _configure_logging()
    args = build_parser().parse_args(argv)
    options = resolve_options(
        args,
        is_tty=sys.stdout.isatty(),
        is_root=os.getuid() == 0,
        width=config.terminal_columns(),
        block_size=config.block_size(),
        now=int(time.time()),
    )

    stdout = sys.stdout
    if hasattr(stdout, "reconfigure"):
        stdout.reconfigure(errors="surrogateescape")
    try:
        Lister(options, stdout).run(args.paths)
    except ListingError as exc:
        stdout.flush()
        raise SystemExit(f"gridls: {exc}") from exc
