"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, size probing, and the
SIGWINCH notification that marks a resize for the event loop.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import signal
import termios
import threading
import tty

DEFAULT_TERMINAL_SIZE = (80, 24)
ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
EXIT_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Manage terminal mode transitions and resize notifications.

    Setup and teardown are idempotent so a failure halfway through session
    start still restores exactly what was changed, once.
    """

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._tui_active = False
        self.resize_pending = threading.Event()
        self.wake_fd: int | None = None
        self._wake_write_fd: int | None = None
        self._previous_wakeup_fd: int | None = None
        self._previous_winch_handler = None
        self._resize_handler_installed = False

    def enable_tui_mode(self) -> None:
        """Enter raw mode on the alternate screen with the cursor hidden."""
        if self._tui_active:
            return
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._tui_active = True
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Restore the main screen buffer and the saved tty attributes."""
        if not self._tui_active:
            return
        self._tui_active = False
        try:
            os.write(self.stdout_fd, EXIT_TUI_SEQUENCE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @property
    def tui_active(self) -> bool:
        return self._tui_active

    def _on_resize(self, _signum, _frame) -> None:
        # Runs in signal context: only flip the flag.
        self.resize_pending.set()

    def install_resize_handler(self) -> None:
        """Route SIGWINCH to the resize flag and the wake-up pipe."""
        if self._resize_handler_installed:
            return
        read_fd, write_fd = os.pipe()
        wakeup_installed = False
        try:
            os.set_blocking(read_fd, False)
            os.set_blocking(write_fd, False)
            self._previous_wakeup_fd = signal.set_wakeup_fd(write_fd, warn_on_full_buffer=False)
            wakeup_installed = True
            self._previous_winch_handler = signal.signal(signal.SIGWINCH, self._on_resize)
        except BaseException:
            if wakeup_installed:
                signal.set_wakeup_fd(self._previous_wakeup_fd if self._previous_wakeup_fd is not None else -1)
            os.close(read_fd)
            os.close(write_fd)
            raise
        self.wake_fd = read_fd
        self._wake_write_fd = write_fd
        self._resize_handler_installed = True

    def remove_resize_handler(self) -> None:
        """Restore the previous SIGWINCH disposition and close the pipe."""
        if not self._resize_handler_installed:
            return
        self._resize_handler_installed = False
        previous_handler = self._previous_winch_handler
        signal.signal(signal.SIGWINCH, previous_handler if previous_handler is not None else signal.SIG_DFL)
        signal.set_wakeup_fd(self._previous_wakeup_fd if self._previous_wakeup_fd is not None else -1)
        for fd in (self.wake_fd, self._wake_write_fd):
            if fd is not None:
                os.close(fd)
        self.wake_fd = None
        self._wake_write_fd = None

    def consume_resize(self) -> bool:
        """Return whether a resize arrived since the last call, clearing the flag."""
        if not self.resize_pending.is_set():
            return False
        self.resize_pending.clear()
        return True

    def terminal_size(self) -> tuple[int, int]:
        """Return ``(columns, lines)``, falling back to 80x24."""
        size = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
        return max(1, size.columns), max(1, size.lines)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

    @contextlib.contextmanager
    def tui_session(self):
        """Raw mode plus resize notifications, all undone on any exit path."""
        try:
            self.install_resize_handler()
            with self.raw_mode():
                yield self
        finally:
            self.remove_resize_handler()
