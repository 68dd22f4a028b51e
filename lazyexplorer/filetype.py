"""Filename-based file type hints backed by Pygments lexers.

Pygments is imported lazily on first use so startup and plain listings do not
pay for loading the lexer registry.
"""

from __future__ import annotations

from pathlib import Path

_PYGMENTS_READY = False
_PYGMENTS_GET_LEXER_FOR_FILENAME = None
_PYGMENTS_CLASS_NOT_FOUND: type[Exception] = LookupError
_LANGUAGE_CACHE: dict[str, str | None] = {}


def _ensure_pygments_loaded() -> None:
    """Import and cache the Pygments callables on first use."""
    global _PYGMENTS_READY
    global _PYGMENTS_GET_LEXER_FOR_FILENAME
    global _PYGMENTS_CLASS_NOT_FOUND

    if _PYGMENTS_READY:
        return

    from pygments.lexers import get_lexer_for_filename
    from pygments.util import ClassNotFound

    _PYGMENTS_GET_LEXER_FOR_FILENAME = get_lexer_for_filename
    _PYGMENTS_CLASS_NOT_FOUND = ClassNotFound
    _PYGMENTS_READY = True


def guess_language(path: Path) -> str | None:
    """Return the Pygments lexer name for ``path``'s filename, if any.

    Only the name is inspected; file contents are never read.
    """
    filename = path.name
    if not filename:
        return None
    if filename in _LANGUAGE_CACHE:
        return _LANGUAGE_CACHE[filename]
    _ensure_pygments_loaded()

    assert _PYGMENTS_GET_LEXER_FOR_FILENAME is not None
    try:
        language: str | None = _PYGMENTS_GET_LEXER_FOR_FILENAME(filename).name
    except _PYGMENTS_CLASS_NOT_FOUND:
        language = None
    _LANGUAGE_CACHE[filename] = language
    return language


__all__ = ["guess_language"]
