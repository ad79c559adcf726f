"""Owner and group name resolution from passwd/group snapshots.

Both databases are read once per invocation. A missing database is fatal;
an id without a matching line falls back to its decimal string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import IdentityDatabaseError

logger = logging.getLogger(__name__)

PASSWD_PATH = Path("/etc/passwd")
GROUP_PATH = Path("/etc/group")


def parse_id_database(text: str) -> dict[int, str]:
    """Map numeric ids to names from ``name:x:id:...`` lines.

    Comments, blank lines, and lines with a non-numeric id are ignored. The
    first line for an id wins.
    """
    names: dict[int, str] = {}
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        fields = line.split(":")
        if len(fields) <= 2:
            continue
        try:
            ident = int(fields[2])
        except ValueError:
            continue
        names.setdefault(ident, fields[0])
    return names


def _read_database(kind: str, path: Path) -> dict[int, str]:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise IdentityDatabaseError(kind, path) from exc
    return parse_id_database(text)


@dataclass(frozen=True)
class IdentityDatabase:
    """Snapshot of user and group names keyed by numeric id."""

    users: dict[int, str] = field(default_factory=dict)
    groups: dict[int, str] = field(default_factory=dict)

    @classmethod
    def load(cls, passwd_path: Path | None = None, group_path: Path | None = None) -> "IdentityDatabase":
        """Read both databases, defaulting to the system passwd and group files."""
        return cls(
            users=_read_database("passwd", Path(passwd_path or PASSWD_PATH)),
            groups=_read_database("group", Path(group_path or GROUP_PATH)),
        )

    def resolve_user(self, uid: int) -> str | None:
        return self.users.get(uid)

    def resolve_group(self, gid: int) -> str | None:
        return self.groups.get(gid)

    def user_name(self, uid: int) -> str:
        name = self.resolve_user(uid)
        if name is None:
            logger.debug("no passwd entry for uid %d", uid)
            return str(uid)
        return name

    def group_name(self, gid: int) -> str:
        name = self.resolve_group(gid)
        if name is None:
            logger.debug("no group entry for gid %d", gid)
            return str(gid)
        return name


class NumericIdentity:
    """Resolver for numeric-id mode: every id renders as its decimal string."""

    def resolve_user(self, uid: int) -> str | None:
        return None

    def resolve_group(self, gid: int) -> str | None:
        return None

    def user_name(self, uid: int) -> str:
        return str(uid)

    def group_name(self, gid: int) -> str:
        return str(gid)


__all__ = [
    "PASSWD_PATH",
    "GROUP_PATH",
    "parse_id_database",
    "IdentityDatabase",
    "NumericIdentity",
]
