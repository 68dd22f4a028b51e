"""Input-layer public API: raw key decoding and command mapping."""

from .commands import KEY_BINDINGS, Command, decode_command
from .reader import (
    EOF_TOKEN,
    ESC_SEQUENCE_TIMEOUT_MS,
    RESIZE_TOKEN,
    _PENDING_BYTES,
    drain_wake_fd,
    read_key,
)

__all__ = [
    "Command",
    "EOF_TOKEN",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KEY_BINDINGS",
    "RESIZE_TOKEN",
    "_PENDING_BYTES",
    "decode_command",
    "drain_wake_fd",
    "read_key",
]
