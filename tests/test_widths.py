"""Column width tracker tests."""

from __future__ import annotations

import unittest

from gridls.errors import FieldCountMismatch
from gridls.format import Record
from gridls.layout import ColumnWidths


class ColumnWidthsTests(unittest.TestCase):
    def test_from_record_seeds_field_widths(self) -> None:
        widths = ColumnWidths.from_record(Record(("123", "ab", "日本")))
        self.assertEqual(widths.cols, 3)
        self.assertEqual(widths.widths, [3, 2, 4])

    def test_update_keeps_per_field_maximum(self) -> None:
        widths = ColumnWidths.from_record(Record(("1", "abcd")))
        widths.update(Record(("12345", "a")))
        self.assertEqual(widths.widths, [5, 4])
        self.assertEqual(widths.total(), 9)

    def test_field_count_mismatch_is_fatal(self) -> None:
        widths = ColumnWidths.from_record(Record(("1", "a")))
        with self.assertRaises(FieldCountMismatch):
            widths.update(Record(("a",)))
        with self.assertRaises(FieldCountMismatch):
            widths.merge(ColumnWidths([1, 1, 1]))

    def test_merge_keeps_maximum_over_filled_widths(self) -> None:
        widths = ColumnWidths.filled(2)
        self.assertEqual(widths.widths, [1, 1])
        widths.merge(ColumnWidths([0, 7]))
        self.assertEqual(widths.widths, [1, 7])

    def test_from_records(self) -> None:
        widths = ColumnWidths.from_records([Record(("a", "bb")), Record(("ccc", "d"))])
        self.assertEqual(widths.widths, [3, 2])
        with self.assertRaises(ValueError):
            ColumnWidths.from_records([])


if __name__ == "__main__":
    unittest.main()
