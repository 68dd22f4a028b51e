"""Total orders over snapshot entries.

Every mode ends in a byte-wise name comparison, so equal keys still resolve
deterministically. Entries without metadata cannot be ranked by size or time
and sort after all entries that have it.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable

from ..settings import SortMode
from .types import Entry

SortKey = tuple


def name_key(entry: Entry) -> bytes:
    """Filesystem-encoded name; ``.`` (0x2E) orders before letters."""
    return os.fsencode(entry.name)


def _size_key(entry: Entry) -> SortKey:
    size = entry.size
    if size is None:
        return (1, 0, name_key(entry))
    return (0, -size, name_key(entry))


def _time_key(entry: Entry) -> SortKey:
    mtime_ns = entry.mtime_ns
    if mtime_ns is None:
        return (1, 0, name_key(entry))
    return (0, -mtime_ns, name_key(entry))


def _name_sort_key(entry: Entry) -> SortKey:
    return (name_key(entry),)


_SORT_KEYS: dict[SortMode, Callable[[Entry], SortKey]] = {
    SortMode.NAME: _name_sort_key,
    SortMode.SIZE: _size_key,
    SortMode.TIME: _time_key,
}


def sort_key_for(mode: SortMode) -> Callable[[Entry], SortKey]:
    return _SORT_KEYS[mode]


def compare_entries(left: Entry, right: Entry, mode: SortMode) -> int:
    """Return -1, 0, or 1 as ``left`` orders before, equal to, or after ``right``."""
    key = sort_key_for(mode)
    left_key = key(left)
    right_key = key(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


def sort_entries(entries: Iterable[Entry], mode: SortMode) -> list[Entry]:
    return sorted(entries, key=sort_key_for(mode))


__all__ = ["compare_entries", "name_key", "sort_entries", "sort_key_for"]
