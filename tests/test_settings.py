"""Tests for settings toggles and the sort-mode cycle.

Covers the dirs-only/files-only exclusion under arbitrary toggle sequences.
"""

from __future__ import annotations

import itertools
import unittest

from lazyexplorer.settings import Settings, SortMode


class SettingsToggleTests(unittest.TestCase):
    def test_constructing_both_type_filters_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Settings(dirs_only=True, files_only=True)

    def test_enabling_dirs_only_clears_files_only(self) -> None:
        settings = Settings(files_only=True).toggled_dirs_only()

        self.assertTrue(settings.dirs_only)
        self.assertFalse(settings.files_only)

    def test_enabling_files_only_clears_dirs_only(self) -> None:
        settings = Settings(dirs_only=True).toggled_files_only()

        self.assertTrue(settings.files_only)
        self.assertFalse(settings.dirs_only)

    def test_disabling_a_filter_leaves_the_other_off(self) -> None:
        settings = Settings(dirs_only=True).toggled_dirs_only()

        self.assertFalse(settings.dirs_only)
        self.assertFalse(settings.files_only)
        self.assertEqual(settings.type_filter_label, "All")

    def test_type_filters_never_both_set_after_any_toggle_sequence(self) -> None:
        toggles = (Settings.toggled_dirs_only, Settings.toggled_files_only)
        for sequence in itertools.product(toggles, repeat=5):
            settings = Settings()
            for toggle in sequence:
                settings = toggle(settings)
                self.assertFalse(settings.dirs_only and settings.files_only)

    def test_display_toggles_flip_only_their_own_switch(self) -> None:
        base = Settings()

        self.assertTrue(base.toggled_hidden().show_hidden)
        self.assertTrue(base.toggled_long_format().long_format)
        self.assertTrue(base.toggled_human_readable().human_readable)
        self.assertEqual(base.toggled_hidden().toggled_hidden(), base)

    def test_type_filter_label(self) -> None:
        self.assertEqual(Settings(dirs_only=True).type_filter_label, "Dirs")
        self.assertEqual(Settings(files_only=True).type_filter_label, "Files")


class SortModeTests(unittest.TestCase):
    def test_cycle_goes_name_size_time_name(self) -> None:
        settings = Settings()
        seen = []
        for _ in range(4):
            seen.append(settings.sort_mode)
            settings = settings.with_next_sort_mode()

        self.assertEqual(seen, [SortMode.NAME, SortMode.SIZE, SortMode.TIME, SortMode.NAME])

    def test_labels(self) -> None:
        self.assertEqual([mode.label for mode in SortMode], ["Name", "Size", "Time"])

    def test_parse_accepts_known_names_case_insensitively(self) -> None:
        self.assertIs(SortMode.parse(" Size "), SortMode.SIZE)
        self.assertIsNone(SortMode.parse("bogus"))
        self.assertIsNone(SortMode.parse(3))


if __name__ == "__main__":
    unittest.main()
