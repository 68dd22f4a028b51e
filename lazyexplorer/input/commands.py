"""Key-token to command mapping.

Every raw token is decoded once into a :class:`Command` before dispatch, so
the session controller never branches on byte sequences.
"""

from __future__ import annotations

from enum import Enum, auto

from .reader import EOF_TOKEN, RESIZE_TOKEN


class Command(Enum):
    NONE = auto()
    QUIT = auto()
    DOWN = auto()
    UP = auto()
    TOP = auto()
    BOTTOM = auto()
    OPEN = auto()
    BACK = auto()
    TOGGLE_HIDDEN = auto()
    TOGGLE_DIRS_ONLY = auto()
    TOGGLE_FILES_ONLY = auto()
    CYCLE_SORT = auto()
    TOGGLE_LONG = auto()
    TOGGLE_HUMAN = auto()
    REFRESH = auto()
    HELP = auto()
    RESIZE = auto()


KEY_BINDINGS: dict[str, Command] = {
    "q": Command.QUIT,
    "CTRL_C": Command.QUIT,
    EOF_TOKEN: Command.QUIT,
    "j": Command.DOWN,
    "DOWN": Command.DOWN,
    "k": Command.UP,
    "UP": Command.UP,
    "g": Command.TOP,
    "HOME": Command.TOP,
    "G": Command.BOTTOM,
    "END": Command.BOTTOM,
    "ENTER": Command.OPEN,
    "RIGHT": Command.OPEN,
    "b": Command.BACK,
    "LEFT": Command.BACK,
    "BACKSPACE": Command.BACK,
    "a": Command.TOGGLE_HIDDEN,
    "d": Command.TOGGLE_DIRS_ONLY,
    "f": Command.TOGGLE_FILES_ONLY,
    "s": Command.CYCLE_SORT,
    "l": Command.TOGGLE_LONG,
    "H": Command.TOGGLE_HUMAN,
    "r": Command.REFRESH,
    "?": Command.HELP,
    RESIZE_TOKEN: Command.RESIZE,
}


def decode_command(key: str) -> Command:
    """Map a normalized key token to a command; unknown keys map to ``NONE``."""
    if key in {"ENTER_CR", "ENTER_LF"}:
        key = "ENTER"
    return KEY_BINDINGS.get(key, Command.NONE)


__all__ = ["Command", "KEY_BINDINGS", "decode_command"]
