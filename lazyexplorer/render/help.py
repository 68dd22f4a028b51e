"""Help overlay and entry info view.

Both are full-screen modals built as strings; the session controller writes
them and waits for one acknowledgement key.
"""

from __future__ import annotations

import stat

from ..ansi import clip_ansi_line, display_name, display_width
from ..file_model import Entry, safe_lstat
from ..filetype import guess_language
from ..settings import Settings
from ..ui_theme import UITheme
from .rows import format_mtime, format_size, group_name, owner_name, symlink_target

HELP_TITLE = "LAZYEXPLORER CONTROLS"
CONTINUE_HINT = "Press any key to continue..."

HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "NAVIGATION",
        (
            ("j / k or Down / Up", "Move cursor down/up"),
            ("g / G", "Jump to first/last entry"),
            ("Enter or Right", "Open directory or show file info"),
            ("b, Left or Backspace", "Go back to previous directory"),
        ),
    ),
    (
        "VIEW SETTINGS",
        (
            ("a", "Toggle hidden files (dotfiles)"),
            ("l", "Toggle long format"),
            ("H", "Toggle human-readable sizes"),
            ("s", "Cycle sort order (name -> size -> time)"),
            ("d", "Toggle directories-only filter"),
            ("f", "Toggle files-only filter"),
            ("r", "Re-read current directory"),
        ),
    ),
    (
        "OTHER",
        (
            ("q", "Quit"),
            ("?", "Show this help screen"),
        ),
    ),
)


def help_lines(theme: UITheme) -> list[str]:
    """Return styled help body lines."""
    key_width = max(len(key) for _heading, rows in HELP_SECTIONS for key, _desc in rows)
    lines: list[str] = []
    for heading, rows in HELP_SECTIONS:
        lines.append(f"{theme.help_heading}{heading}{theme.reset}")
        for key, description in rows:
            lines.append(f"  {theme.help_key}{key:<{key_width}}{theme.reset}  {description}")
        lines.append("")
    lines.append(f"{theme.help_dim}{CONTINUE_HINT}{theme.reset}")
    return lines


def _entry_kind(entry: Entry) -> str:
    metadata = entry.metadata
    if metadata is None:
        return "unknown (metadata unavailable)"
    mode = metadata.st_mode
    if stat.S_ISDIR(mode):
        return "directory"
    if stat.S_ISLNK(mode):
        return "symbolic link"
    if stat.S_ISREG(mode):
        return "regular file"
    if stat.S_ISCHR(mode):
        return "character device"
    if stat.S_ISBLK(mode):
        return "block device"
    if stat.S_ISFIFO(mode):
        return "named pipe"
    if stat.S_ISSOCK(mode):
        return "socket"
    return "other"


def refreshed_entry(entry: Entry) -> Entry:
    """Re-read metadata so the info view never shows a stale snapshot."""
    return Entry(name=entry.name, path=entry.path, metadata=safe_lstat(entry.path))


def entry_info_lines(entry: Entry, settings: Settings, theme: UITheme) -> list[str]:
    """Return styled detail lines for one entry."""
    fields: list[tuple[str, str]] = [
        ("Name", display_name(entry.name)),
        ("Path", display_name(entry.path)),
        ("Type", _entry_kind(entry)),
    ]
    metadata = entry.metadata
    if metadata is not None:
        fields.extend(
            [
                ("Size", format_size(metadata.st_size, settings.human_readable)),
                ("Mode", stat.filemode(metadata.st_mode)),
                ("Links", str(metadata.st_nlink)),
                ("Owner", owner_name(metadata.st_uid)),
                ("Group", group_name(metadata.st_gid)),
                ("Modified", format_mtime(metadata.st_mtime)),
            ]
        )
        target = symlink_target(entry)
        if target is not None:
            fields.append(("Target", display_name(target)))
    if entry.is_regular_file:
        language = guess_language(entry.path)
        if language is not None:
            fields.append(("Language", language))

    label_width = max(len(label) for label, _value in fields)
    lines = [f"{theme.help_key}{label:<{label_width}}{theme.reset}  {value}" for label, value in fields]
    lines.append("")
    lines.append(f"{theme.help_dim}{CONTINUE_HINT}{theme.reset}")
    return lines


def build_modal(title: str, body: list[str], width: int, height: int, theme: UITheme) -> str:
    """Draw a centered rounded box holding ``title`` and ``body`` rows."""
    out: list[str] = ["\033[H\033[J"]
    width = max(1, width)
    height = max(1, height)

    content_w = max([display_width(line) for line in body] + [len(title)]) + 4
    modal_w = max(3, min(width, content_w + 2))
    modal_h = max(3, min(height, len(body) + 3))
    x = max(0, (width - modal_w) // 2)
    y = max(0, (height - modal_h) // 2)
    inner_w = max(1, modal_w - 2)
    inner_h = max(1, modal_h - 2)
    border = theme.help_modal_border
    reset = theme.reset

    out.append(f"\033[{y + 1};{x + 1}H{border}╭{'─' * inner_w}╮{reset}")
    for i in range(inner_h):
        out.append(f"\033[{y + 2 + i};{x + 1}H{border}│{reset}{' ' * inner_w}{border}│{reset}")
    out.append(f"\033[{y + modal_h};{x + 1}H{border}╰{'─' * inner_w}╯{reset}")

    title_x = x + max(1, (modal_w - len(title)) // 2)
    out.append(f"\033[{y + 1};{title_x + 1}H{theme.help_modal_title}{clip_ansi_line(title, inner_w)}{reset}")

    body_rows = min(len(body), inner_h - 1)
    for i in range(body_rows):
        text = clip_ansi_line(body[i], max(1, inner_w - 2))
        out.append(f"\033[{y + 3 + i};{x + 3}H{text}{reset}")
    return "".join(out)


def build_help_page(width: int, height: int, theme: UITheme) -> str:
    return build_modal(HELP_TITLE, help_lines(theme), width, height, theme)


def build_entry_info_page(entry: Entry, settings: Settings, width: int, height: int, theme: UITheme) -> str:
    return build_modal(f"File: {display_name(entry.name)}", entry_info_lines(entry, settings, theme), width, height, theme)


__all__ = [
    "CONTINUE_HINT",
    "HELP_SECTIONS",
    "build_entry_info_page",
    "build_help_page",
    "build_modal",
    "entry_info_lines",
    "help_lines",
    "refreshed_entry",
]
