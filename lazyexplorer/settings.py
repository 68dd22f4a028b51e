"""Display, filter, and sort settings for one browsing session.

``Settings`` is an immutable value; toggles return new instances so the
dirs-only/files-only exclusion can never be observed half-applied.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class SortMode(Enum):
    """Ordering applied to every snapshot after filtering."""

    NAME = "name"
    SIZE = "size"
    TIME = "time"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def next(self) -> SortMode:
        """Return the following mode in the Name -> Size -> Time cycle."""
        modes = list(SortMode)
        return modes[(modes.index(self) + 1) % len(modes)]

    @classmethod
    def parse(cls, value: object) -> SortMode | None:
        """Map a config/CLI string to a mode, ``None`` when unrecognized."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Settings:
    """User-visible switches shared by interactive and batch modes."""

    show_hidden: bool = False
    recursive: bool = False
    long_format: bool = False
    dirs_only: bool = False
    files_only: bool = False
    human_readable: bool = False
    sort_mode: SortMode = SortMode.NAME

    def __post_init__(self) -> None:
        if self.dirs_only and self.files_only:
            raise ValueError("dirs_only and files_only are mutually exclusive")

    @property
    def type_filter_label(self) -> str:
        if self.dirs_only:
            return "Dirs"
        if self.files_only:
            return "Files"
        return "All"

    def toggled_hidden(self) -> Settings:
        return replace(self, show_hidden=not self.show_hidden)

    def toggled_long_format(self) -> Settings:
        return replace(self, long_format=not self.long_format)

    def toggled_human_readable(self) -> Settings:
        return replace(self, human_readable=not self.human_readable)

    def toggled_dirs_only(self) -> Settings:
        """Flip dirs-only; turning it on clears files-only."""
        enabled = not self.dirs_only
        return replace(self, dirs_only=enabled, files_only=self.files_only and not enabled)

    def toggled_files_only(self) -> Settings:
        """Flip files-only; turning it on clears dirs-only."""
        enabled = not self.files_only
        return replace(self, files_only=enabled, dirs_only=self.dirs_only and not enabled)

    def with_next_sort_mode(self) -> Settings:
        return replace(self, sort_mode=self.sort_mode.next())


__all__ = ["Settings", "SortMode"]
