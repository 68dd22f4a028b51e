"""Interactive session bootstrap.

Resolves the start directory before touching the terminal, then builds the
session state and hands control to the event loop.
"""

from __future__ import annotations

import sys
from pathlib import Path

from ..settings import Settings
from ..ui_theme import UITheme
from .session import SessionController, resolve_start_path
from .state import SessionState
from .terminal import TerminalController


def run_explorer(
    start_path: str | Path,
    settings: Settings,
    theme: UITheme,
    *,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> None:
    """Browse ``start_path`` interactively until the user quits.

    Raises ``StartPathError`` when the path cannot be resolved; in that case
    the terminal has not been modified.
    """
    current_path = resolve_start_path(start_path)
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    terminal = TerminalController(stdin_fd, stdout_fd)
    state = SessionState(current_path=current_path, settings=settings)
    SessionController(state, terminal, stdin_fd, theme).run()
