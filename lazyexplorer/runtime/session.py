"""Interactive session controller.

Owns the event loop: reloads the snapshot when a refresh is pending, draws a
frame, blocks for one key, and dispatches the decoded command. Session state
is only ever mutated from this loop; the resize signal merely sets a flag on
the terminal controller.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from ..ansi import display_name
from ..file_model import load_snapshot
from ..input import RESIZE_TOKEN, Command, decode_command, read_key
from ..render import available_rows, build_entry_info_page, build_frame, build_help_page, scroll_offset_for_cursor
from ..render.help import refreshed_entry
from ..ui_theme import UITheme
from .state import SessionState
from .terminal import TerminalController


class StartPathError(Exception):
    """Raised when the starting directory cannot be resolved to an absolute path."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"realpath({path}): {reason}")
        self.path = path
        self.reason = reason


def resolve_start_path(path: str | Path) -> Path:
    """Resolve ``path`` to an existing absolute path or raise ``StartPathError``."""
    try:
        return Path(path).resolve(strict=True)
    except OSError as exc:
        raise StartPathError(path, exc.strerror or str(exc)) from exc
    except RuntimeError as exc:
        # Symlink loops surface as RuntimeError on some Python versions.
        raise StartPathError(path, str(exc)) from exc


def _describe_os_error(exc: OSError) -> str:
    return exc.strerror or str(exc)


class SessionController:
    """Run one interactive browsing session over ``state``."""

    def __init__(
        self,
        state: SessionState,
        terminal: TerminalController,
        stdin_fd: int,
        theme: UITheme,
    ) -> None:
        self.state = state
        self.terminal = terminal
        self.stdin_fd = stdin_fd
        self.theme = theme
        self._handlers: dict[Command, Callable[[], None]] = {
            Command.DOWN: lambda: self.move_cursor(1),
            Command.UP: lambda: self.move_cursor(-1),
            Command.TOP: self.move_to_top,
            Command.BOTTOM: self.move_to_bottom,
            Command.OPEN: self.open_selected,
            Command.BACK: self.go_back,
            Command.TOGGLE_HIDDEN: lambda: self._update_settings(self.state.settings.toggled_hidden()),
            Command.TOGGLE_DIRS_ONLY: lambda: self._update_settings(self.state.settings.toggled_dirs_only()),
            Command.TOGGLE_FILES_ONLY: lambda: self._update_settings(self.state.settings.toggled_files_only()),
            Command.CYCLE_SORT: lambda: self._update_settings(self.state.settings.with_next_sort_mode()),
            Command.TOGGLE_LONG: lambda: self._update_settings(
                self.state.settings.toggled_long_format(), reload=False
            ),
            Command.TOGGLE_HUMAN: lambda: self._update_settings(
                self.state.settings.toggled_human_readable(), reload=False
            ),
            Command.REFRESH: self.state.request_refresh,
            Command.HELP: self.show_help,
        }

    # Event loop

    def run(self) -> None:
        """Run until the quit command; the terminal is restored on every exit path."""
        with self.terminal.tui_session():
            while True:
                self.poll_resize()
                self.probe_terminal_size()
                if self.state.refresh_pending:
                    self.reload()
                self.draw()
                key = self.next_key()
                if key is None:
                    continue
                if self.dispatch(decode_command(key)):
                    break

    def poll_resize(self) -> None:
        if self.terminal.consume_resize():
            self.state.request_refresh()

    def probe_terminal_size(self) -> None:
        columns, lines = self.terminal.terminal_size()
        self.state.term_columns = columns
        self.state.term_lines = lines

    def next_key(self) -> str | None:
        """Block for one key token; ``None`` means nothing to dispatch."""
        state = self.state
        try:
            key = read_key(self.stdin_fd, wake_fd=self.terminal.wake_fd)
        except KeyboardInterrupt:
            return None
        if state.skip_next_lf and key == "ENTER_LF":
            state.skip_next_lf = False
            return None
        state.skip_next_lf = key == "ENTER_CR"
        return key

    def dispatch(self, command: Command) -> bool:
        """Apply one command to session state. Returns ``True`` to quit."""
        if command is Command.QUIT:
            return True
        if command in {Command.NONE, Command.RESIZE}:
            return False
        self.state.status_message = ""
        self._handlers[command]()
        return False

    # Snapshot lifecycle

    def reload(self) -> None:
        """Rebuild the snapshot for the current path and settings."""
        state = self.state
        path = state.current_path
        result = load_snapshot(path, state.settings)
        state.refresh_pending = False
        if result.error is not None:
            self._recover_from_load_failure(path, result.error)
            return

        state.snapshot = result.entries
        state.last_loaded_path = path
        if state.reset_cursor_on_refresh:
            state.cursor = 0
            state.scroll_offset = 0
        else:
            state.clamp_cursor()
        state.reset_cursor_on_refresh = False

    def _recover_from_load_failure(self, path: Path, error: OSError) -> None:
        """Report ``error`` and stay on the last directory that loaded."""
        state = self.state
        state.status_message = f"Cannot open {display_name(path)}: {_describe_os_error(error)}"
        previous = state.last_loaded_path
        if previous is not None and previous != path:
            if state.history.peek() == previous:
                state.history.pop()
            state.current_path = previous
        state.reset_cursor_on_refresh = False
        state.clamp_cursor()

    def draw(self) -> None:
        state = self.state
        rows = available_rows(state.term_lines)
        state.clamp_cursor()
        offset = scroll_offset_for_cursor(state.cursor, state.scroll_offset, rows)
        state.scroll_offset = max(0, min(offset, max(0, len(state.snapshot) - rows)))
        self.terminal.write(build_frame(state, state.term_columns, state.term_lines, self.theme))

    # Commands

    def move_cursor(self, delta: int) -> None:
        state = self.state
        if not state.snapshot:
            state.cursor = 0
            return
        state.cursor = max(0, min(state.cursor + delta, len(state.snapshot) - 1))

    def move_to_top(self) -> None:
        self.state.cursor = 0

    def move_to_bottom(self) -> None:
        self.state.cursor = max(0, len(self.state.snapshot) - 1)

    def open_selected(self) -> None:
        """Descend into the selected directory, or show info for anything else."""
        state = self.state
        entry = state.selected_entry()
        if entry is None:
            return
        if entry.is_dir:
            state.history.push(state.current_path)
            self._change_directory(entry.path)
            return
        self._show_modal(
            lambda width, height: build_entry_info_page(
                refreshed_entry(entry), state.settings, width, height, self.theme
            )
        )
        state.request_refresh()

    def go_back(self) -> None:
        """Return to the previous directory, or to the parent when history is spent."""
        state = self.state
        previous = state.history.pop()
        if previous is not None and previous != state.current_path:
            self._change_directory(previous)
            return
        try:
            parent = (state.current_path / os.pardir).resolve()
        except (OSError, RuntimeError) as exc:
            state.status_message = f"Cannot resolve parent of {display_name(state.current_path)}: {exc}"
            return
        if parent != state.current_path:
            self._change_directory(parent)

    def show_help(self) -> None:
        self._show_modal(lambda width, height: build_help_page(width, height, self.theme))
        self.state.request_refresh()

    def _change_directory(self, path: Path) -> None:
        self.state.current_path = path
        self.state.request_refresh(path_changed=True)

    def _update_settings(self, settings, *, reload: bool = True) -> None:
        self.state.settings = settings
        if reload:
            self.state.request_refresh()

    def _show_modal(self, build_page: Callable[[int, int], str]) -> None:
        """Draw a modal page and block until one key acknowledges it."""
        while True:
            self.probe_terminal_size()
            self.terminal.write(build_page(self.state.term_columns, self.state.term_lines))
            try:
                key = read_key(self.stdin_fd, wake_fd=self.terminal.wake_fd)
            except KeyboardInterrupt:
                return
            if key == RESIZE_TOKEN:
                self.terminal.consume_resize()
                self.state.request_refresh()
                continue
            self.state.skip_next_lf = key == "ENTER_CR"
            return


__all__ = ["SessionController", "StartPathError", "resolve_start_path"]
