"""Size conversion policy tests for block counts and byte sizes."""

from __future__ import annotations

import unittest

from gridls.format.sizes import format_block_count, format_byte_size, human_size, kilo_size, scaled_block_count
from gridls.options import DisplayOptions


class HumanSizeTests(unittest.TestCase):
    def test_one_mebibyte_renders_with_one_fractional_digit(self) -> None:
        self.assertEqual(human_size(1_048_576), "1.0M")

    def test_base_unit_has_no_letter(self) -> None:
        self.assertEqual(human_size(999), "999")
        self.assertEqual(human_size(5), "5.0")

    def test_zero_has_no_fractional_digit(self) -> None:
        self.assertEqual(human_size(0), "0")

    def test_values_from_one_thousand_switch_unit(self) -> None:
        self.assertEqual(human_size(1000), "1.0K")
        self.assertEqual(human_size(1536), "1.5K")
        self.assertEqual(human_size(10 * 1024), "10K")
        self.assertEqual(human_size(3 * 1024**3), "3.0G")


class KiloSizeTests(unittest.TestCase):
    def test_remainder_rounds_up(self) -> None:
        self.assertEqual(kilo_size(1536), "2")
        self.assertEqual(kilo_size(1025), "2")

    def test_exact_multiples_do_not_round(self) -> None:
        self.assertEqual(kilo_size(1024), "1")
        self.assertEqual(kilo_size(0), "0")


class BlockCountTests(unittest.TestCase):
    def test_default_block_size_prints_raw_block_count(self) -> None:
        self.assertEqual(format_block_count(3, DisplayOptions()), "3")

    def test_block_size_override_rescales_and_rounds_up(self) -> None:
        self.assertEqual(format_block_count(3, DisplayOptions(block_size=1024)), "2")
        self.assertEqual(scaled_block_count(8, 4096), 1)
        self.assertEqual(scaled_block_count(8, 256), 16)

    def test_non_positive_block_size_falls_back_to_512(self) -> None:
        self.assertEqual(scaled_block_count(7, 0), 7)
        self.assertEqual(scaled_block_count(7, -5), 7)

    def test_kilobyte_mode_converts_blocks_to_bytes_first(self) -> None:
        self.assertEqual(format_block_count(3, DisplayOptions(kilobytes=True)), "2")

    def test_human_mode_takes_precedence_over_kilobytes(self) -> None:
        options = DisplayOptions(human_readable=True, kilobytes=True)
        self.assertEqual(format_block_count(2048, options), "1.0M")


class ByteSizeTests(unittest.TestCase):
    def test_policies(self) -> None:
        self.assertEqual(format_byte_size(1536, DisplayOptions()), "1536")
        self.assertEqual(format_byte_size(1536, DisplayOptions(kilobytes=True)), "2")
        self.assertEqual(format_byte_size(1_048_576, DisplayOptions(human_readable=True)), "1.0M")


if __name__ == "__main__":
    unittest.main()
