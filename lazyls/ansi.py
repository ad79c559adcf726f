"""ANSI styling and display-width measurement for listing labels.

Names are measured in terminal columns so padding stays aligned when wide
characters or combining marks are present.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from .entries import Entry

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def text_display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies, ignoring escapes."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


@dataclass(frozen=True)
class Palette:
    """Style prefixes for the four entry kinds plus the reset sequence."""

    name: str
    symlink: str
    directory: str
    executable: str
    plain: str
    reset: str


DEFAULT_PALETTE = Palette(
    name="default",
    symlink="\x1b[36;1m",
    directory="\x1b[34;1m",
    executable="\x1b[32;1m",
    plain="\x1b[0m",
    reset="\x1b[0m",
)

PLAIN_PALETTE = Palette(
    name="plain",
    symlink="",
    directory="",
    executable="",
    plain="",
    reset="",
)


def style_for(entry: Entry, palette: Palette) -> str:
    """Pick the style prefix for ``entry``: symlink, directory, executable, plain."""
    if entry.is_symlink:
        return palette.symlink
    if entry.is_dir:
        return palette.directory
    if entry.is_executable:
        return palette.executable
    return palette.plain


def colorize(entry: Entry, palette: Palette) -> str:
    """Return the styled entry name. No reset is appended."""
    return f"{style_for(entry, palette)}{entry.name}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "text_display_width",
    "strip_ansi",
    "Palette",
    "DEFAULT_PALETTE",
    "PLAIN_PALETTE",
    "style_for",
    "colorize",
]
