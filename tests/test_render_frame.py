"""Tests for frame layout: header, viewport rows, filler, and footer."""

from __future__ import annotations

import dataclasses
import os
import tempfile
import unittest
from pathlib import Path

from lazyexplorer.ansi import ANSI_ESCAPE_RE, display_width
from lazyexplorer.file_model import Entry, load_snapshot
from lazyexplorer.render import (
    CLEAR_SCREEN,
    FILLER_MARKER,
    FOOTER_HINT,
    available_rows,
    build_frame,
    build_frame_lines,
    build_help_page,
    format_title,
    scroll_offset_for_cursor,
    settings_summary,
)
from lazyexplorer.runtime.state import SessionState
from lazyexplorer.settings import Settings, SortMode
from lazyexplorer.ui_theme import PLAIN_THEME, UITheme


def _state(names: list[str], *, cursor: int = 0, scroll_offset: int = 0, **settings) -> SessionState:
    root = Path("/tmp/d")
    return SessionState(
        current_path=root,
        settings=Settings(**settings),
        snapshot=tuple(Entry(name=name, path=root / name) for name in names),
        cursor=cursor,
        scroll_offset=scroll_offset,
        refresh_pending=False,
    )


def _plain(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class ViewportMathTests(unittest.TestCase):
    def test_available_rows_reserves_header_and_footer(self) -> None:
        self.assertEqual(available_rows(24), 20)
        self.assertEqual(available_rows(5), 1)
        self.assertEqual(available_rows(2), 1)

    def test_scroll_follows_cursor_above_viewport(self) -> None:
        self.assertEqual(scroll_offset_for_cursor(cursor=3, scroll_offset=5, rows=4), 3)

    def test_scroll_follows_cursor_below_viewport(self) -> None:
        self.assertEqual(scroll_offset_for_cursor(cursor=9, scroll_offset=0, rows=4), 6)

    def test_scroll_unchanged_when_cursor_visible(self) -> None:
        self.assertEqual(scroll_offset_for_cursor(cursor=5, scroll_offset=3, rows=4), 3)


class HeaderTests(unittest.TestCase):
    def test_title_fits_untouched(self) -> None:
        self.assertEqual(format_title(Path("/tmp/d"), 80), "=== LAZYEXPLORER: /tmp/d ===")

    def test_long_title_is_cut_with_trailing_ellipsis(self) -> None:
        title = format_title(Path("/very/long/path/" + "x" * 100), 40)

        self.assertEqual(len(title), 40)
        self.assertTrue(title.endswith("..."))
        self.assertTrue(title.startswith("=== LAZYEXPLORER: /very"))

    def test_settings_summary_lists_every_switch(self) -> None:
        summary = settings_summary(Settings(show_hidden=True, long_format=True, dirs_only=True, sort_mode=SortMode.TIME))

        self.assertEqual(
            summary,
            "Settings: [Sort:Time] [Hidden:ON] [Format:Long] [Human:OFF] [Filter:Dirs]",
        )


class FrameTests(unittest.TestCase):
    def test_frame_height_is_stable_and_padded_with_filler(self) -> None:
        lines = build_frame_lines(_state(["a.txt", "sub"]), width=80, height=10, theme=PLAIN_THEME)

        self.assertEqual(len(lines), 10)
        self.assertEqual(_plain(lines[0]), "=== LAZYEXPLORER: /tmp/d ===")
        self.assertTrue(_plain(lines[1]).startswith("Settings: [Sort:Name]"))
        self.assertEqual(lines[2], "")
        self.assertEqual(_plain(lines[3]).rstrip(), "a.txt")
        self.assertEqual(_plain(lines[4]).rstrip(), "sub")
        self.assertEqual([_plain(line) for line in lines[5:9]], [FILLER_MARKER] * 4)
        self.assertEqual(_plain(lines[9]), FOOTER_HINT)

    def test_cursor_row_is_reverse_video(self) -> None:
        lines = build_frame_lines(_state(["a", "b", "c"], cursor=1), width=80, height=10, theme=PLAIN_THEME)

        self.assertFalse(lines[3].startswith("\033[7m"))
        self.assertTrue(lines[4].startswith("\033[7m"))
        self.assertFalse(lines[5].startswith("\033[7m"))

    def test_only_viewport_rows_are_drawn(self) -> None:
        names = [f"f{idx:02d}" for idx in range(20)]
        lines = build_frame_lines(
            _state(names, cursor=12, scroll_offset=10),
            width=80,
            height=8,
            theme=PLAIN_THEME,
        )

        rows = [_plain(line).rstrip() for line in lines[3:-1]]
        self.assertEqual(rows, ["f10", "f11", "f12", "f13"])

    def test_status_message_replaces_footer_hint(self) -> None:
        state = _state([])
        state.status_message = "Cannot open /tmp/d/locked: Permission denied"

        lines = build_frame_lines(state, width=80, height=6, theme=PLAIN_THEME)

        self.assertEqual(_plain(lines[-1]), "Cannot open /tmp/d/locked: Permission denied")

    def test_frame_payload_clears_screen_and_clips_to_width(self) -> None:
        frame = build_frame(_state(["n" * 60], long_format=False), width=30, height=6, theme=PLAIN_THEME)

        self.assertTrue(frame.startswith(CLEAR_SCREEN))
        body = frame[len(CLEAR_SCREEN):]
        rows = body.split("\r\n")
        self.assertEqual(len(rows), 6)
        self.assertTrue(all(display_width(row) <= 30 for row in rows))


class ControlCharacterNameTests(unittest.TestCase):
    def test_names_with_line_breaks_and_escapes_keep_frame_height(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a\nb").write_text("")
            (root / "c\x1b[2Jd").write_text("")
            result = load_snapshot(root, Settings())
            state = SessionState(
                current_path=root,
                settings=Settings(),
                snapshot=result.entries,
                refresh_pending=False,
            )

            frame = build_frame(state, width=80, height=10, theme=PLAIN_THEME)

        body = frame[len(CLEAR_SCREEN):]
        self.assertEqual(frame.count("\n"), 9)
        self.assertEqual(frame.count("\r\n"), 9)
        self.assertEqual(body.count("\r"), 9)
        self.assertNotIn("\x1b[2J", body)
        self.assertTrue(set(ANSI_ESCAPE_RE.findall(body)) <= {"\033[7m", "\033[0m"})
        self.assertNotIn("\x1b", ANSI_ESCAPE_RE.sub("", body))
        self.assertIn("a?b", body)
        self.assertIn("c?[2Jd", body)

    def test_title_path_and_long_row_are_sanitized(self) -> None:
        path = Path("/tmp/evil\x1b]0;x\x07dir")

        self.assertEqual(format_title(path, 80), "=== LAZYEXPLORER: /tmp/evil?]0;x?dir ===")

        state = _state(["tab\there"], long_format=True)
        row = _plain(build_frame_lines(state, width=80, height=6, theme=PLAIN_THEME)[3])
        self.assertTrue(row.rstrip().endswith("tab?here"))
        self.assertNotIn("\t", row)


class ThemePaletteTests(unittest.TestCase):
    def test_every_palette_field_reaches_rendered_output(self) -> None:
        styles = [field.name for field in dataclasses.fields(UITheme) if field.name != "name"]
        theme = UITheme(name="marker", **{style: f"\033[{100 + idx}m" for idx, style in enumerate(styles)})
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "dir").mkdir()
            (root / "file").write_text("x")
            os.symlink("file", root / "link")
            entries = load_snapshot(root, Settings()).entries + (Entry(name="ghost", path=root / "ghost"),)
            state = SessionState(current_path=root, settings=Settings(), snapshot=entries, cursor=1, refresh_pending=False)

            output = build_frame(state, width=80, height=12, theme=theme)
            state.status_message = "Cannot open /x: Permission denied"
            output += build_frame(state, width=80, height=12, theme=theme)
            output += build_help_page(80, 30, theme)

        for idx, style in enumerate(styles):
            self.assertIn(f"\033[{100 + idx}m", output, style)


if __name__ == "__main__":
    unittest.main()
