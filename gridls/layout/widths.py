"""Per-field maximum width tracking across records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..errors import FieldCountMismatch
from ..format import Record


@dataclass
class ColumnWidths:
    """Maximum display width seen at each field position.

    ``cols`` is fixed at construction; folding in a record or tracker with a
    different field count raises ``FieldCountMismatch``.
    """

    widths: list[int] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Record) -> "ColumnWidths":
        return cls(list(record.widths()))

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "ColumnWidths":
        tracker: ColumnWidths | None = None
        for record in records:
            if tracker is None:
                tracker = cls.from_record(record)
            else:
                tracker.update(record)
        if tracker is None:
            raise ValueError("no records to measure")
        return tracker

    @classmethod
    def filled(cls, cols: int, value: int = 1) -> "ColumnWidths":
        return cls([value] * cols)

    @property
    def cols(self) -> int:
        return len(self.widths)

    def _fold(self, widths: tuple[int, ...] | list[int]) -> None:
        if len(widths) != self.cols:
            raise FieldCountMismatch(f"entry has {len(widths)} fields, other entries have {self.cols}")
        for idx, width in enumerate(widths):
            if width > self.widths[idx]:
                self.widths[idx] = width

    def update(self, record: Record) -> None:
        """Fold ``record`` in, keeping the per-field maximum."""
        self._fold(record.widths())

    def merge(self, other: "ColumnWidths") -> None:
        self._fold(other.widths)

    def total(self) -> int:
        return sum(self.widths)


__all__ = ["ColumnWidths"]
