"""Non-interactive directory dump.

Prints one listing per directory, ``ls``-style, and optionally recurses into
subdirectories. Unreadable directories are reported on stderr and skipped.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from .ansi import display_name
from .file_model import load_snapshot
from .render.rows import format_entry_row
from .settings import Settings


def dump_directory(
    path: str | Path,
    settings: Settings,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> bool:
    """Write the listing for ``path`` (and subdirectories when recursive).

    Returns ``False`` when any directory could not be opened.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    ok = True
    pending: list[Path] = [Path(path)]
    while pending:
        directory = pending.pop(0)
        result = load_snapshot(directory, settings)
        if result.error is not None:
            err.write(f"opendir({display_name(directory)}): {result.error.strerror or result.error}\n")
            ok = False
            continue

        out.write(f"{display_name(directory)}:\n")
        for entry in result.entries:
            out.write(format_entry_row(entry, settings).rstrip() + "\n")
        out.write("\n")

        if settings.recursive:
            # Depth-first, in listing order.
            subdirectories = [entry.path for entry in result.entries if entry.is_dir]
            pending[0:0] = subdirectories
    return ok


__all__ = ["dump_directory"]
