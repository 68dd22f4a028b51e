"""Back-navigation history of visited directories.

This module intentionally has no UI concerns.
"""

from __future__ import annotations

from pathlib import Path

MAX_HISTORY_ENTRIES = 256


class NavigationHistory:
    """Bounded LIFO stack of absolute directory paths.

    Pushing the path already on top is a no-op, so consecutive entries are
    always distinct and "back" never lands where the user already is.
    """

    def __init__(self, max_entries: int = MAX_HISTORY_ENTRIES) -> None:
        self.max_entries = max(1, max_entries)
        self._stack: list[Path] = []

    def push(self, path: Path) -> None:
        """Record ``path`` unless it duplicates the current top."""
        if self._stack and self._stack[-1] == path:
            return
        self._stack.append(path)
        overflow = len(self._stack) - self.max_entries
        if overflow > 0:
            del self._stack[:overflow]

    def pop(self) -> Path | None:
        """Remove and return the most recent path, or ``None`` when empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self) -> Path | None:
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)


__all__ = ["MAX_HISTORY_ENTRIES", "NavigationHistory"]
