"""CLI flag resolution and entrypoint tests.

Covers last-flag-wins groups, terminal-dependent defaults, and how listing
errors become a process exit.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from gridls import cli
from gridls.options import GridMode, SortKey, TimeField


def _resolve(argv: list[str], is_tty: bool = False, **kwargs):
    args = cli.build_parser().parse_args(argv)
    return cli.resolve_options(args, is_tty=is_tty, **kwargs)


class ResolveOptionsTests(unittest.TestCase):
    def test_terminal_defaults(self) -> None:
        options = _resolve([], is_tty=True)
        self.assertIs(options.display.grid_mode, GridMode.COLUMNS_DOWN)
        self.assertTrue(options.display.replace_nonprintable)

    def test_pipe_defaults(self) -> None:
        options = _resolve([], is_tty=False)
        self.assertIs(options.display.grid_mode, GridMode.ONE_PER_LINE)
        self.assertTrue(options.display.raw_nonprintable)
        self.assertFalse(options.display.replace_nonprintable)

    def test_last_output_format_flag_wins(self) -> None:
        self.assertIs(_resolve(["-l", "-C"]).display.grid_mode, GridMode.COLUMNS_DOWN)
        self.assertFalse(_resolve(["-l", "-C"]).display.long_format)

        long_last = _resolve(["-C", "-l"])
        self.assertTrue(long_last.display.long_format)
        self.assertIs(long_last.display.grid_mode, GridMode.ONE_PER_LINE)

        self.assertIs(_resolve(["-Cx"]).display.grid_mode, GridMode.ROWS_ACROSS)
        self.assertIs(_resolve(["-x1"]).display.grid_mode, GridMode.ONE_PER_LINE)

    def test_numeric_long_format(self) -> None:
        options = _resolve(["-n"])
        self.assertTrue(options.display.long_format)
        self.assertTrue(options.display.numeric_ids)
        self.assertFalse(_resolve(["-n", "-l"]).display.numeric_ids)

    def test_time_field_and_nonprintable_groups(self) -> None:
        self.assertIs(_resolve(["-c", "-u"]).display.time_field, TimeField.ACCESS)
        self.assertIs(_resolve(["-u", "-c"]).display.time_field, TimeField.CHANGE)
        self.assertTrue(_resolve(["-w", "-q"], is_tty=False).display.replace_nonprintable)
        self.assertFalse(_resolve(["-q", "-w"], is_tty=True).display.replace_nonprintable)

    def test_sort_key_selection(self) -> None:
        self.assertIs(_resolve([]).display.sort_key, SortKey.LEXICOGRAPHIC)
        self.assertIs(_resolve(["-S"]).display.sort_key, SortKey.SIZE)
        self.assertIs(_resolve(["-t"]).display.sort_key, SortKey.MODIFY_TIME)
        self.assertIs(_resolve(["-tc"]).display.sort_key, SortKey.CHANGE_TIME)
        self.assertIs(_resolve(["-tS"]).display.sort_key, SortKey.MODIFY_TIME)
        self.assertTrue(_resolve(["-r"]).display.reverse)

    def test_total_line_rules(self) -> None:
        self.assertTrue(_resolve(["-l"]).show_total)
        self.assertTrue(_resolve(["-s"], is_tty=True).show_total)
        self.assertFalse(_resolve(["-s"], is_tty=False).show_total)
        self.assertFalse(_resolve([]).show_total)

    def test_super_user_sees_hidden_entries(self) -> None:
        self.assertTrue(_resolve([], is_root=True).almost_all)
        self.assertFalse(_resolve([], is_root=False).almost_all)

    def test_environment_facts_are_snapshotted(self) -> None:
        options = _resolve(["-h", "-k", "-i", "-s", "-F"], width=42, block_size=1024, now=99)
        self.assertEqual(options.width, 42)
        self.assertEqual(options.display.block_size, 1024)
        self.assertEqual(options.display.now, 99)
        self.assertTrue(options.display.human_readable)
        self.assertTrue(options.display.kilobytes)
        self.assertTrue(options.display.show_inode)
        self.assertTrue(options.display.show_blocks)
        self.assertTrue(options.display.classify)


class MainTests(unittest.TestCase):
    def _run(self, argv: list[str], columns: str = "80") -> str:
        stdout = io.StringIO()
        with (
            mock.patch.dict("os.environ", {"COLUMNS": columns}),
            mock.patch("gridls.config.CONFIG_PATH", Path("/nonexistent/gridls/config.json")),
            mock.patch("gridls.cli.os.getuid", return_value=1000),
            mock.patch("sys.stdout", stdout),
        ):
            cli.main(argv)
        return stdout.getvalue()

    def test_pipe_output_lists_one_name_per_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("b", "a", ".hidden"):
                Path(tmp, name).write_text("", encoding="utf-8")
            self.assertEqual(self._run([tmp]), "a\nb\n")

    def test_columns_flag_uses_environment_width(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("alpha", "beta", "gamma"):
                Path(tmp, name).write_text("", encoding="utf-8")
            self.assertEqual(self._run(["-C", tmp]), "alpha beta gamma\n")
            self.assertEqual(self._run(["-C", tmp], columns="12"), "alpha gamma\nbeta  \n")

    def test_listing_error_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = str(Path(tmp) / "missing")
            with self.assertRaises(SystemExit) as ctx:
                self._run([missing])
            self.assertIsInstance(ctx.exception.code, str)
            self.assertTrue(ctx.exception.code.startswith("gridls: "))
            self.assertIn(missing, ctx.exception.code)

    def test_unknown_flag_is_a_usage_error(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self._run(["-Z"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
