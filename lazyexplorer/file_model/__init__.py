"""Filesystem-backed entry model: scanning, filtering, and ordering."""

from .fs import entry_is_visible, filter_entries, list_directory_entries, load_snapshot, safe_lstat
from .ordering import compare_entries, name_key, sort_entries, sort_key_for
from .types import Entry, Snapshot, SnapshotResult

__all__ = [
    "Entry",
    "Snapshot",
    "SnapshotResult",
    "compare_entries",
    "entry_is_visible",
    "filter_entries",
    "list_directory_entries",
    "load_snapshot",
    "name_key",
    "safe_lstat",
    "sort_entries",
    "sort_key_for",
]
