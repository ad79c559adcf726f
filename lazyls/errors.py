"""Exception taxonomy for listing failures.

Only directory access and identity-database failures are fatal. Per-entry
problems (unknown ids, dangling links) never surface as exceptions.
"""

from __future__ import annotations

from pathlib import Path


class LsError(Exception):
    """Base class for fatal, user-facing listing errors."""


class ListingError(LsError):
    """Target path is missing or cannot be read."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"ls: {path} - No such file or directory.")


class IdentityDatabaseError(LsError):
    """The passwd or group database could not be read."""

    def __init__(self, kind: str, path: Path | str) -> None:
        self.kind = kind
        self.path = Path(path)
        super().__init__(f"Error: {kind} file does not exist.")


__all__ = [
    "LsError",
    "ListingError",
    "IdentityDatabaseError",
]
