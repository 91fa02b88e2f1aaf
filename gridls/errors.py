"""Fatal listing errors.

Every error here aborts the current listing invocation. ``cli.main`` turns
them into a non-zero exit with a one-line message.
"""

from __future__ import annotations


class ListingError(Exception):
    """Base class for errors that terminate a listing pass."""


class NameTooLong(ListingError):
    """Rendered entry name exceeds the maximum name length."""


class BufferExhausted(ListingError):
    """Rendered record exceeds the maximum record size."""


class LinkReadError(ListingError):
    """Symlink target could not be read consistently."""


class FieldCountMismatch(ListingError):
    """Record field count disagrees with an initialized width tracker."""


class MetadataUnavailable(ListingError):
    """lstat/readdir failed for an entry or directory."""


class DirectoryChangedDuringListing(ListingError):
    """Entry count changed between counting and reading a directory."""


__all__ = [
    "ListingError",
    "NameTooLong",
    "BufferExhausted",
    "LinkReadError",
    "FieldCountMismatch",
    "MetadataUnavailable",
    "DirectoryChangedDuringListing",
]
