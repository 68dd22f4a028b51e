"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing and the resize wake-up descriptor.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
RESIZE_TOKEN = "RESIZE"
EOF_TOKEN = "EOF"
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

_CSI_FINAL_TOKENS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def drain_wake_fd(wake_fd: int) -> None:
    """Discard every pending byte on the non-blocking wake-up pipe."""
    while True:
        try:
            chunk = os.read(wake_fd, 512)
        except (BlockingIOError, InterruptedError):
            return
        if not chunk:
            return


def _wait_for_input(fd: int, timeout_ms: int | None, wake_fd: int | None) -> str | None:
    """Block until ``fd`` is readable; return a token when something else happened."""
    watched = [fd] if wake_fd is None else [fd, wake_fd]
    timeout = None if timeout_ms is None else max(0.0, timeout_ms / 1000.0)
    ready, _, _ = select.select(watched, [], [], timeout)
    if wake_fd is not None and wake_fd in ready:
        drain_wake_fd(wake_fd)
        return RESIZE_TOKEN
    if not ready:
        return ""
    return None


def read_key(fd: int, timeout_ms: int | None = None, wake_fd: int | None = None) -> str:
    """Read one key and return its token.

    Blocks until a key arrives. With ``wake_fd`` the wait also ends when that
    descriptor becomes readable (a resize notification), returning
    ``"RESIZE"``. End of input returns ``"EOF"``; an expired ``timeout_ms``
    returns ``""``.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None or wake_fd is not None:
            interrupted = _wait_for_input(fd, timeout_ms, wake_fd)
            if interrupted is not None:
                return interrupted

        ch = os.read(fd, 1)
        if not ch:
            return EOF_TOKEN

    control = _CONTROL_TOKENS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        return _decode_text_byte(fd, ch)

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return "ESC"
    token = _CSI_FINAL_TOKENS.get(final)
    if token is not None:
        return token
    if final.isdigit():
        # Extended keys such as ESC [ 5 ~; consume through the terminator.
        for _ in range(8):
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None or part == b"~" or part.isalpha():
                break
    return "ESC"


def _decode_text_byte(fd: int, first: bytes) -> str:
    """Decode one UTF-8 character, reading continuation bytes when needed."""
    lead = first[0]
    if lead < 0x80:
        return first.decode("ascii")
    if lead >= 0xF0:
        expected = 3
    elif lead >= 0xE0:
        expected = 2
    elif lead >= 0xC0:
        expected = 1
    else:
        expected = 0
    data = first
    for _ in range(expected):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")
