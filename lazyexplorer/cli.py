"""Command-line front door for lazyexplorer.

Parses startup flags into a ``Settings`` value and picks the mode: the
interactive browser by default, or a one-shot listing with ``-b``.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace

from .batch import dump_directory
from .runtime import run_explorer
from .runtime.config import load_default_settings, load_theme_name
from .runtime.session import StartPathError
from .settings import Settings, SortMode
from .ui_theme import available_theme_names, resolve_theme

FAREWELL = "Thanks for using LAZYEXPLORER!"


def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --human-readable, so help lives on --help only.
    parser = argparse.ArgumentParser(
        prog="lazyexplorer",
        description="Browse a directory interactively, or list it once with -b.",
        add_help=False,
    )
    parser.add_argument("directory", nargs="?", default=".", help="Directory to start in. Defaults to current directory.")
    parser.add_argument("--help", action="help", help="Show this message and exit.")
    parser.add_argument("-a", "--all", dest="show_hidden", action="store_true", help="Start with hidden files shown.")
    parser.add_argument("-r", "--recursive", action="store_true", help="Recurse into subdirectories (batch mode).")
    parser.add_argument("-l", "--long", dest="long_format", action="store_true", help="Start in detailed view.")
    parser.add_argument(
        "-h",
        "--human-readable",
        dest="human_readable",
        action="store_true",
        help="Start with human-readable sizes.",
    )
    parser.add_argument(
        "-S", dest="sort_mode", action="store_const", const=SortMode.SIZE, help="Start sorted by size."
    )
    parser.add_argument(
        "-t", dest="sort_mode", action="store_const", const=SortMode.TIME, help="Start sorted by time."
    )
    parser.add_argument(
        "-n", dest="sort_mode", action="store_const", const=SortMode.NAME, help="Start sorted by name (default)."
    )
    parser.add_argument("-d", "--dirs-only", dest="dirs_only", action="store_true", help="Show only directories.")
    parser.add_argument("-f", "--files-only", dest="files_only", action="store_true", help="Show only regular files.")
    parser.add_argument(
        "-i",
        "--interactive",
        dest="interactive",
        action="store_const",
        const=True,
        help="Interactive mode (default).",
    )
    parser.add_argument(
        "-b",
        "--batch",
        dest="interactive",
        action="store_const",
        const=False,
        help="Batch mode: print the listing and exit.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors in the interactive view.")
    parser.set_defaults(interactive=True, sort_mode=None)
    return parser


def settings_from_args(args: argparse.Namespace, defaults: Settings) -> Settings:
    """Overlay command-line flags on config-provided defaults."""
    return replace(
        defaults,
        show_hidden=defaults.show_hidden or args.show_hidden,
        recursive=args.recursive,
        long_format=defaults.long_format or args.long_format,
        human_readable=defaults.human_readable or args.human_readable,
        dirs_only=args.dirs_only,
        files_only=args.files_only,
        sort_mode=args.sort_mode if args.sort_mode is not None else defaults.sort_mode,
    )


def _stdio_is_tty() -> bool:
    try:
        return os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno())
    except (AttributeError, ValueError, OSError):
        return False


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the browser or the batch listing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.dirs_only and args.files_only:
        parser.error("can't use -d (dirs only) and -f (files only) together")

    settings = settings_from_args(args, load_default_settings())

    if not args.interactive or not _stdio_is_tty():
        if not dump_directory(args.directory, settings):
            raise SystemExit(1)
        return

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    try:
        run_explorer(args.directory, settings, theme)
    except StartPathError as exc:
        raise SystemExit(str(exc)) from exc
    sys.stdout.write(f"{FAREWELL}\n")


if __name__ == "__main__":
    main()
