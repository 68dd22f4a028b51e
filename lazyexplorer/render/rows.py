"""Per-entry row formatting for short and long listings.

Shared by the interactive frame and the batch dump. Lookups that can fail
(owner, group, link target) degrade to placeholders instead of raising.
"""

from __future__ import annotations

import grp
import os
import pwd
import stat
import time

from ..ansi import display_name
from ..file_model import Entry
from ..settings import Settings
from ..ui_theme import UITheme

SIZE_UNITS: tuple[str, ...] = ("B", "K", "M", "G", "T")
SHORT_NAME_WIDTH = 40
MTIME_FORMAT = "%Y-%m-%d %H:%M"
UNKNOWN_OWNER = "-"
INVALID_METADATA_PREFIX = "??????????  ? ?        ?               ? ????-??-?? ??:??"


def human_size(size: int) -> str:
    """Scale ``size`` by 1024 until it drops below 1024 or reaches ``T``."""
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit += 1
    return f"{value:.1f}{SIZE_UNITS[unit]}"


def format_size(size: int, human_readable: bool) -> str:
    return human_size(size) if human_readable else str(size)


def format_mtime(mtime: float) -> str:
    return time.strftime(MTIME_FORMAT, time.localtime(mtime))


def owner_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return UNKNOWN_OWNER


def group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return UNKNOWN_OWNER


def symlink_target(entry: Entry) -> str | None:
    """Return the raw link text for symlink entries, ``None`` otherwise."""
    if not entry.is_symlink:
        return None
    try:
        target = os.readlink(entry.path)
    except OSError:
        return None
    return target or None


def format_long_row(entry: Entry, settings: Settings) -> str:
    """Build an ``ls -l`` style row without styling."""
    metadata = entry.metadata
    if metadata is None:
        return f"{INVALID_METADATA_PREFIX} {display_name(entry.name)}"
    row = (
        f"{stat.filemode(metadata.st_mode)} "
        f"{metadata.st_nlink:>2} "
        f"{owner_name(metadata.st_uid):<8} "
        f"{group_name(metadata.st_gid):<8} "
        f"{format_size(metadata.st_size, settings.human_readable):>8} "
        f"{format_mtime(metadata.st_mtime)} "
        f"{display_name(entry.name)}"
    )
    target = symlink_target(entry)
    if target is not None:
        row += f" -> {display_name(target)}"
    return row


def format_short_row(entry: Entry) -> str:
    return f"{display_name(entry.name):<{SHORT_NAME_WIDTH}}"


def format_entry_row(entry: Entry, settings: Settings) -> str:
    if settings.long_format:
        return format_long_row(entry, settings)
    return format_short_row(entry)


def entry_style(entry: Entry, theme: UITheme) -> str:
    """Return the SGR prefix used for an entry outside the cursor row."""
    if not entry.metadata_valid:
        return theme.entry_invalid
    if entry.is_dir:
        return theme.entry_dir
    if entry.is_symlink:
        return theme.entry_symlink
    return ""


def styled_entry_row(entry: Entry, settings: Settings, theme: UITheme, *, selected: bool) -> str:
    """Return one row with cursor or type styling applied."""
    text = format_entry_row(entry, settings)
    if selected:
        return f"{theme.reverse}{text}{theme.reset}"
    style = entry_style(entry, theme)
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


__all__ = [
    "SIZE_UNITS",
    "entry_style",
    "format_entry_row",
    "format_long_row",
    "format_mtime",
    "format_short_row",
    "format_size",
    "group_name",
    "human_size",
    "owner_name",
    "styled_entry_row",
    "symlink_target",
]
