"""Directory enumeration into immutable listing entries."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from .errors import ListingError

logger = logging.getLogger(__name__)

EXECUTABLE_BITS = 0o111


@dataclass(frozen=True)
class Entry:
    """One filesystem object observed with ``lstat`` semantics."""

    name: str
    path: Path
    mode: int
    size: int
    mtime: float
    uid: int
    gid: int
    symlink_target: str | None = None

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)

    @property
    def is_executable(self) -> bool:
        return bool(self.mode & EXECUTABLE_BITS)

    @property
    def mode_string(self) -> str:
        return stat.filemode(self.mode)

    @classmethod
    def from_stat(cls, name: str, path: Path, st: os.stat_result) -> "Entry":
        """Build an entry from a stat result, reading the link target for symlinks."""
        target: str | None = None
        if stat.S_ISLNK(st.st_mode):
            try:
                target = os.readlink(path)
            except OSError:
                target = None
        return cls(
            name=name,
            path=path,
            mode=st.st_mode,
            size=int(st.st_size),
            mtime=float(st.st_mtime),
            uid=int(st.st_uid),
            gid=int(st.st_gid),
            symlink_target=target,
        )


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def scan_directory(
    path: Path | str,
    show_hidden: bool = False,
    directory_only: bool = False,
) -> list[Entry]:
    """Return entries of ``path`` in name order.

    With ``directory_only`` the path itself is returned as the single entry.
    Raises ``ListingError`` when the path is missing or unreadable; entries
    that disappear while being scanned are skipped.
    """
    target = Path(path)
    if directory_only:
        try:
            st = target.stat()
        except OSError as exc:
            raise ListingError(target) from exc
        return [Entry.from_stat(target.name or str(target), target, st)]

    entries: list[Entry] = []
    try:
        with os.scandir(target) as it:
            for child in it:
                if not show_hidden and is_hidden(child.name):
                    continue
                try:
                    st = child.stat(follow_symlinks=False)
                except OSError:
                    logger.debug("skipping %s: entry vanished during scan", child.path)
                    continue
                entries.append(Entry.from_stat(child.name, Path(child.path), st))
    except OSError as exc:
        raise ListingError(target) from exc

    entries.sort(key=lambda entry: entry.name)
    return entries


__all__ = [
    "EXECUTABLE_BITS",
    "Entry",
    "is_hidden",
    "scan_directory",
]
