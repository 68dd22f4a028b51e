"""Directory scanning into filtered, sorted snapshots."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from ..settings import Settings
from .ordering import sort_entries
from .types import Entry, SnapshotResult


def safe_lstat(path: Path) -> os.stat_result | None:
    """Return ``lstat`` metadata for ``path`` or ``None`` on failure."""
    try:
        return os.lstat(path)
    except OSError:
        return None


def entry_is_visible(entry: Entry, settings: Settings) -> bool:
    """Apply hidden-name and type filters to one entry.

    Type filters need metadata: an entry whose ``lstat`` failed never counts
    as a directory or a regular file.
    """
    if not settings.show_hidden and entry.is_hidden:
        return False
    if settings.dirs_only and not entry.is_dir:
        return False
    if settings.files_only and not entry.is_regular_file:
        return False
    return True


def filter_entries(entries: Iterable[Entry], settings: Settings) -> list[Entry]:
    return [entry for entry in entries if entry_is_visible(entry, settings)]


def list_directory_entries(
    directory: Path,
    settings: Settings,
) -> tuple[list[Entry], OSError | None]:
    """List visible children of ``directory`` in scan order.

    Returns ``(entries, scan_error)``. ``scan_error`` is set, and ``entries``
    empty, when the directory cannot be opened or read.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    metadata: os.stat_result | None = child.stat(follow_symlinks=False)
                except OSError:
                    metadata = None
                entry = Entry(name=child.name, path=Path(directory) / child.name, metadata=metadata)
                if entry_is_visible(entry, settings):
                    entries.append(entry)
    except OSError as exc:
        return [], exc
    return entries, None


def load_snapshot(directory: Path, settings: Settings) -> SnapshotResult:
    """Load, filter, and sort ``directory`` according to ``settings``."""
    entries, scan_error = list_directory_entries(directory, settings)
    if scan_error is not None:
        return SnapshotResult(directory=directory, entries=(), error=scan_error)
    return SnapshotResult(
        directory=directory,
        entries=tuple(sort_entries(entries, settings.sort_mode)),
    )


__all__ = [
    "entry_is_visible",
    "filter_entries",
    "list_directory_entries",
    "load_snapshot",
    "safe_lstat",
]
