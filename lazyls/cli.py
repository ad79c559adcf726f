"""Command-line front door for lazyls.

Parses options, scans the target directory, collects display attributes and
writes the selected layout to stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .ansi import DEFAULT_PALETTE, PLAIN_PALETTE, Palette
from .collector import collect_attributes
from .entries import scan_directory
from .errors import LsError
from .identity import IdentityDatabase, NumericIdentity
from .render import render_listing, select_mode
from .terminal import stdout_is_tty, terminal_width

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ls",
        description="List files and directories in the working directory.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-a", dest="show_hidden", action="store_true", help="include hidden files and directories")
    parser.add_argument(
        "-d",
        "--directory",
        dest="directory_only",
        action="store_true",
        help="list only directories and not their contents",
    )
    parser.add_argument("-l", dest="long_mode", action="store_true", help="use a long listing format")
    parser.add_argument(
        "-n",
        "--numeric-uid-gid",
        dest="numeric_ids",
        action="store_true",
        help="list numeric uid/gid's instead of names",
    )
    parser.add_argument("-r", "--reverse", dest="reversed", action="store_true", help="reverse order while sorting")
    parser.add_argument("-1", dest="single_column", action="store_true", help="list in a single column")
    parser.add_argument("--width", type=_positive_int, default=None, help="Terminal width (default: probed).")
    color = parser.add_mutually_exclusive_group()
    color.add_argument("--color", dest="color", action="store_true", default=None, help="Always colorize output.")
    color.add_argument("--no-color", dest="color", action="store_false", help="Disable color output.")
    parser.add_argument("--verbose", action="store_true", help="Log debug information to stderr.")
    parser.add_argument("--version", action="version", version=f"ls (lazyls) {__version__}")
    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def resolve_palette(color: bool | None) -> Palette:
    """Choose colours: explicit flag, then NO_COLOR/config, then tty detection."""
    if color is not None:
        return DEFAULT_PALETTE if color else PLAIN_PALETTE
    if os.environ.get("NO_COLOR") or config.load_no_color():
        return PLAIN_PALETTE
    return DEFAULT_PALETTE if stdout_is_tty() else PLAIN_PALETTE


def run(args: argparse.Namespace, default_path: Path | None = None) -> str:
    """Produce the listing text for parsed ``args``.

    Raises ``LsError`` for a missing target or missing identity databases.
    """
    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    show_hidden = args.show_hidden or config.load_show_hidden()
    numeric_ids = args.numeric_ids or config.load_numeric_ids()
    width = args.width if args.width is not None else terminal_width(config.load_fallback_width())
    palette = resolve_palette(args.color)

    entries = scan_directory(path, show_hidden=show_hidden, directory_only=args.directory_only)

    identity = None
    if args.long_mode:
        identity = NumericIdentity() if numeric_ids else IdentityDatabase.load()

    collection = collect_attributes(
        entries,
        terminal_width=width,
        long_mode=args.long_mode,
        identity=identity,
        palette=palette,
    )
    mode = select_mode(args.long_mode, args.single_column, collection.stats.fits_one_line)
    return render_listing(
        collection,
        mode=mode,
        terminal_width=width,
        palette=palette,
        reversed_=args.reversed,
    )


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed.
    """
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    try:
        output = run(args, default_path=default_path)
    except LsError as exc:
        raise SystemExit(str(exc)) from exc
    sys.stdout.write(output)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
