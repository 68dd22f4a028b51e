"""ANSI-aware text measurement and line shaping utilities.

Frame rows carry SGR styling; these helpers measure and clip them by display
columns so escape sequences never count toward terminal width.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
CONTROL_PLACEHOLDER = "?"
TAB_STOP = 8
ELLIPSIS = "..."


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies, ignoring SGR codes."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        if col >= max_cols:
            i += 1
            continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            w = min(w, max_cols - col)
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            col = max_cols
            i += 1
            continue
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def truncate_with_ellipsis(text: str, max_cols: int) -> str:
    """Cut plain ``text`` to ``max_cols`` columns, ending in ``...`` when cut."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    if max_cols <= len(ELLIPSIS):
        return ELLIPSIS[:max_cols]
    return clip_ansi_line(text, max_cols - len(ELLIPSIS)) + ELLIPSIS


def display_name(text: object) -> str:
    """Return ``text`` with C0/C1 control characters and DEL shown as ``?``.

    Names, paths and link targets come from the filesystem and may carry line
    breaks or escape sequences; they must never reach the terminal raw.
    """
    return CONTROL_CHAR_RE.sub(CONTROL_PLACEHOLDER, str(text))


__all__ = [
    "ANSI_ESCAPE_RE",
    "CONTROL_CHAR_RE",
    "ELLIPSIS",
    "char_display_width",
    "clip_ansi_line",
    "display_name",
    "display_width",
    "truncate_with_ellipsis",
]
