"""Domain datatypes for directory snapshot entries."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One directory child plus its ``lstat`` metadata, when readable."""

    name: str
    path: Path
    metadata: os.stat_result | None = None

    @property
    def metadata_valid(self) -> bool:
        return self.metadata is not None

    @property
    def is_dir(self) -> bool:
        return self.metadata is not None and stat.S_ISDIR(self.metadata.st_mode)

    @property
    def is_regular_file(self) -> bool:
        return self.metadata is not None and stat.S_ISREG(self.metadata.st_mode)

    @property
    def is_symlink(self) -> bool:
        return self.metadata is not None and stat.S_ISLNK(self.metadata.st_mode)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def size(self) -> int | None:
        return None if self.metadata is None else int(self.metadata.st_size)

    @property
    def mtime_ns(self) -> int | None:
        return None if self.metadata is None else int(self.metadata.st_mtime_ns)


Snapshot = tuple[Entry, ...]


@dataclass(frozen=True)
class SnapshotResult:
    """Outcome of loading one directory.

    ``error`` is set when the directory itself could not be opened; ``entries``
    is then empty and callers decide whether to keep their previous snapshot.
    """

    directory: Path
    entries: Snapshot = ()
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["Entry", "Snapshot", "SnapshotResult"]
