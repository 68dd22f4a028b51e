"""Rendering engine for the directory listing frame.

Builds fully composed ANSI frames from session state without mutating it.
The session controller owns scroll bookkeeping and writes the frame out.
"""

from __future__ import annotations

from pathlib import Path

from ..ansi import clip_ansi_line, display_name, truncate_with_ellipsis
from ..runtime.state import SessionState
from ..settings import Settings
from ..ui_theme import UITheme
from .help import build_entry_info_page, build_help_page
from .rows import styled_entry_row

# Title, settings summary, blank separator, footer.
RESERVED_LINES = 4
FILLER_MARKER = "~"
CLEAR_SCREEN = "\033[H\033[J"
LINE_BREAK = "\r\n"
TITLE_PREFIX = "=== LAZYEXPLORER: "
TITLE_SUFFIX = " ==="
FOOTER_HINT = "Controls: j/k=Navigate, Enter=Open, b=Back, a=Hidden, l=Long, s=Sort, ?=Help, q=Quit"


def available_rows(height: int) -> int:
    """Return how many entry rows fit below the header and above the footer."""
    return max(1, height - RESERVED_LINES)


def scroll_offset_for_cursor(cursor: int, scroll_offset: int, rows: int) -> int:
    """Return the smallest scroll adjustment that keeps ``cursor`` visible."""
    rows = max(1, rows)
    if cursor < scroll_offset:
        return cursor
    if cursor >= scroll_offset + rows:
        return cursor - rows + 1
    return scroll_offset


def format_title(path: Path, width: int) -> str:
    """Return the header line, cutting the path with ``...`` when too wide."""
    full = f"{TITLE_PREFIX}{display_name(path)}{TITLE_SUFFIX}"
    return truncate_with_ellipsis(full, max(1, width))


def settings_summary(settings: Settings) -> str:
    return (
        f"Settings: [Sort:{settings.sort_mode.label}] "
        f"[Hidden:{'ON' if settings.show_hidden else 'OFF'}] "
        f"[Format:{'Long' if settings.long_format else 'Short'}] "
        f"[Human:{'ON' if settings.human_readable else 'OFF'}] "
        f"[Filter:{settings.type_filter_label}]"
    )


def build_footer(status_message: str, theme: UITheme) -> str:
    if status_message:
        return f"{theme.status_error}{status_message}{theme.reset}"
    return f"{theme.footer}{FOOTER_HINT}{theme.reset}"


def build_frame_lines(state: SessionState, width: int, height: int, theme: UITheme) -> list[str]:
    """Return the frame as a list of unclipped, styled lines.

    Rows are drawn from ``state.scroll_offset``; the caller keeps that offset
    in range with :func:`scroll_offset_for_cursor` before rendering.
    """
    rows = available_rows(height)
    lines: list[str] = [
        f"{theme.title}{format_title(state.current_path, width)}{theme.reset}",
        f"{theme.summary}{settings_summary(state.settings)}{theme.reset}",
        "",
    ]

    start = max(0, state.scroll_offset)
    end = min(start + rows, len(state.snapshot))
    for idx in range(start, end):
        entry = state.snapshot[idx]
        row = styled_entry_row(entry, state.settings, theme, selected=idx == state.cursor)
        lines.append(row)
    for _ in range(rows - max(0, end - start)):
        lines.append(f"{theme.filler}{FILLER_MARKER}{theme.reset}")

    lines.append(build_footer(state.status_message, theme))
    return lines


def build_frame(state: SessionState, width: int, height: int, theme: UITheme) -> str:
    """Return the complete screen payload for one redraw."""
    width = max(1, width)
    out: list[str] = [CLEAR_SCREEN]
    lines = build_frame_lines(state, width, height, theme)
    out.append(LINE_BREAK.join(clip_ansi_line(line, width) for line in lines))
    return "".join(out)


__all__ = [
    "CLEAR_SCREEN",
    "FILLER_MARKER",
    "FOOTER_HINT",
    "RESERVED_LINES",
    "available_rows",
    "build_entry_info_page",
    "build_footer",
    "build_frame",
    "build_frame_lines",
    "build_help_page",
    "format_title",
    "scroll_offset_for_cursor",
    "settings_summary",
]
