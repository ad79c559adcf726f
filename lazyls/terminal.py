"""Terminal geometry probe.

Listing never fails because no terminal is attached; the probe falls back to
``COLUMNS``, then a configured width, then an effectively unbounded width so
short listings still print on one line.
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)

UNBOUNDED_WIDTH = 1 << 16


def _probe_fd_columns() -> int | None:
    for stream in (sys.stdout, sys.stdin):
        try:
            fd = stream.fileno()
        except (AttributeError, OSError, ValueError):
            continue
        try:
            columns = os.get_terminal_size(fd).columns
        except OSError:
            continue
        if columns > 0:
            return columns
    return None


def _env_columns() -> int | None:
    raw = os.environ.get("COLUMNS", "").strip()
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def terminal_width(fallback: int | None = None) -> int:
    """Return the current terminal width in columns."""
    columns = _probe_fd_columns()
    if columns is not None:
        return columns
    columns = _env_columns()
    if columns is not None:
        logger.debug("no terminal attached, using COLUMNS=%d", columns)
        return columns
    if fallback is not None and fallback > 0:
        logger.debug("no terminal attached, using configured width %d", fallback)
        return fallback
    logger.debug("no terminal attached, assuming unbounded width")
    return UNBOUNDED_WIDTH


def stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


__all__ = [
    "UNBOUNDED_WIDTH",
    "terminal_width",
    "stdout_is_tty",
]
