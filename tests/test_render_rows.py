"""Tests for long/short row formatting and size scaling."""

from __future__ import annotations

import os
import stat
import tempfile
import time
import unittest
from pathlib import Path
from unittest import mock

from lazyexplorer.file_model import Entry, load_snapshot
from lazyexplorer.render import rows
from lazyexplorer.settings import Settings
from lazyexplorer.ui_theme import DEFAULT_THEME, PLAIN_THEME


class HumanSizeTests(unittest.TestCase):
    def test_scales_by_1024_with_one_decimal(self) -> None:
        self.assertEqual(rows.human_size(0), "0.0B")
        self.assertEqual(rows.human_size(1023), "1023.0B")
        self.assertEqual(rows.human_size(1024), "1.0K")
        self.assertEqual(rows.human_size(1536), "1.5K")
        self.assertEqual(rows.human_size(5 * 1024**3), "5.0G")

    def test_stops_at_largest_unit(self) -> None:
        self.assertEqual(rows.human_size(3 * 1024**5), "3072.0T")

    def test_format_size_respects_setting(self) -> None:
        self.assertEqual(rows.format_size(2048, human_readable=False), "2048")
        self.assertEqual(rows.format_size(2048, human_readable=True), "2.0K")


class LongRowTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _entry(self, name: str) -> Entry:
        return next(entry for entry in load_snapshot(self.root, Settings(show_hidden=True)).entries if entry.name == name)

    def test_long_row_fields(self) -> None:
        target = self.root / "a.txt"
        target.write_bytes(b"x" * 1536)
        mtime = time.mktime((2024, 1, 15, 14, 30, 0, 0, 0, -1))
        os.utime(target, (mtime, mtime))
        os.chmod(target, 0o644)

        with mock.patch.object(rows, "owner_name", return_value="alice"), mock.patch.object(
            rows, "group_name", return_value="staff"
        ):
            raw = rows.format_long_row(self._entry("a.txt"), Settings(long_format=True))
            human = rows.format_long_row(self._entry("a.txt"), Settings(long_format=True, human_readable=True))

        self.assertEqual(raw, "-rw-r--r--  1 alice    staff        1536 2024-01-15 14:30 a.txt")
        self.assertIn("    1.5K 2024-01-15 14:30 a.txt", human)

    def test_long_row_shows_symlink_target(self) -> None:
        os.symlink("elsewhere/file", self.root / "link")

        row = rows.format_long_row(self._entry("link"), Settings(long_format=True))

        self.assertTrue(row.startswith("l"))
        self.assertTrue(row.endswith("link -> elsewhere/file"))

    def test_invalid_metadata_uses_placeholders(self) -> None:
        entry = Entry(name="ghost", path=self.root / "ghost")

        row = rows.format_long_row(entry, Settings(long_format=True))

        self.assertTrue(row.startswith("??????????"))
        self.assertTrue(row.endswith(" ghost"))

    def test_unknown_owner_and_group_fall_back_to_dash(self) -> None:
        with mock.patch.object(rows.pwd, "getpwuid", side_effect=KeyError(12345)), mock.patch.object(
            rows.grp, "getgrgid", side_effect=KeyError(12345)
        ):
            self.assertEqual(rows.owner_name(12345), "-")
            self.assertEqual(rows.group_name(12345), "-")

    def test_mode_string_marks_directories(self) -> None:
        (self.root / "sub").mkdir()

        row = rows.format_long_row(self._entry("sub"), Settings(long_format=True))

        self.assertTrue(row.startswith("d"))
        self.assertEqual(row[:10], stat.filemode(os.lstat(self.root / "sub").st_mode))


class StyledRowTests(unittest.TestCase):
    def test_short_row_pads_name(self) -> None:
        entry = Entry(name="a.txt", path=Path("/tmp/a.txt"))

        self.assertEqual(rows.format_short_row(entry), "a.txt" + " " * 35)

    def test_selected_row_uses_reverse_video(self) -> None:
        entry = Entry(name="a.txt", path=Path("/tmp/a.txt"))

        styled = rows.styled_entry_row(entry, Settings(), PLAIN_THEME, selected=True)

        self.assertTrue(styled.startswith("\033[7m"))
        self.assertTrue(styled.endswith("\033[0m"))

    def test_directories_use_theme_color(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            entry = load_snapshot(root, Settings()).entries[0]

        styled = rows.styled_entry_row(entry, Settings(), DEFAULT_THEME, selected=False)

        self.assertTrue(styled.startswith(DEFAULT_THEME.entry_dir))


if __name__ == "__main__":
    unittest.main()
