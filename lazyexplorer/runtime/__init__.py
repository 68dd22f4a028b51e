"""Public runtime orchestration entry points.

This package groups the interactive session bootstrap (`run_explorer`) and the
session controller used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .session import SessionController, StartPathError


def run_explorer(*args, **kwargs):
    """Lazily import the session bootstrap to keep package imports lightweight."""
    from .app import run_explorer as _run_explorer

    return _run_explorer(*args, **kwargs)


def __getattr__(name: str):
    if name in {"SessionController", "StartPathError", "resolve_start_path"}:
        from . import session as _session

        return getattr(_session, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_explorer",
    "SessionController",
    "StartPathError",
    "resolve_start_path",
]
