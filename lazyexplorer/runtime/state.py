from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..file_model import Entry, Snapshot
from ..navigation import NavigationHistory
from ..settings import Settings


@dataclass
class SessionState:
    current_path: Path
    settings: Settings
    snapshot: Snapshot = ()
    history: NavigationHistory = field(default_factory=NavigationHistory)
    cursor: int = 0
    scroll_offset: int = 0
    refresh_pending: bool = True
    reset_cursor_on_refresh: bool = True
    last_loaded_path: Path | None = None
    status_message: str = ""
    term_columns: int = 80
    term_lines: int = 24
    skip_next_lf: bool = False

    def request_refresh(self, *, path_changed: bool = False) -> None:
        self.refresh_pending = True
        self.reset_cursor_on_refresh = self.reset_cursor_on_refresh or path_changed

    def clamp_cursor(self) -> None:
        if not self.snapshot:
            self.cursor = 0
            return
        self.cursor = max(0, min(self.cursor, len(self.snapshot) - 1))

    def selected_entry(self) -> Entry | None:
        if not self.snapshot:
            return None
        return self.snapshot[self.cursor]
