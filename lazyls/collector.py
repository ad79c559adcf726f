"""Concurrent collection of per-entry display attributes.

Every attribute list is a pure fold over the immutable entry tuple and runs as
its own task. The executor context is the outer barrier; in long mode an inner
barrier waits for owner, group and size lists before the column-width pass is
submitted. Aggregates are returned by value and merged here, so no task writes
state another task reads.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from datetime import datetime

from .ansi import DEFAULT_PALETTE, Palette, colorize, text_display_width
from .entries import EXECUTABLE_BITS, Entry
from .identity import NumericIdentity

logger = logging.getLogger(__name__)

BROKEN_LINK = "broken link"
ONE_LINE_SEPARATOR_WIDTH = 2
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class AttributeRecord:
    """Display attributes for the entry at the same index."""

    name_length: int
    label: str
    mode_string: str = ""
    owner: str = ""
    group: str = ""
    size: int = 0
    formatted_date: str = ""
    link_label: str | None = None


@dataclass(frozen=True)
class DisplayStats:
    """Write-once aggregates that size the layouts."""

    max_name_length: int = 0
    max_owner_group_length: int = 0
    max_size_length: int = 0
    total_line_length: int = 0
    fits_one_line: bool = True


@dataclass(frozen=True)
class Collection:
    records: tuple[AttributeRecord, ...]
    stats: DisplayStats

    def __len__(self) -> int:
        return len(self.records)


def name_lengths(entries: Sequence[Entry]) -> list[int]:
    return [text_display_width(entry.name) for entry in entries]


def max_name_length(entries: Sequence[Entry]) -> int:
    longest = 0
    for entry in entries:
        length = text_display_width(entry.name)
        if length > longest:
            longest = length
    return longest


def fits_one_line(entries: Sequence[Entry], terminal_width: int) -> tuple[bool, int]:
    """Check whether all names plus two-column separators fit in ``terminal_width``.

    Returns ``(fits, total)``. Summing stops as soon as the running total
    exceeds the width, in which case ``total`` is the partial sum.
    """
    total = 0
    for entry in entries:
        total += text_display_width(entry.name) + ONE_LINE_SEPARATOR_WIDTH
        if total > terminal_width:
            return False, total
    return True, total


def labels(entries: Sequence[Entry], palette: Palette) -> list[str]:
    return [colorize(entry, palette) for entry in entries]


def mode_strings(entries: Sequence[Entry]) -> list[str]:
    return [entry.mode_string for entry in entries]


def format_mod_date(mtime: float, now: datetime) -> str:
    """Format a modification time the way ``ls -l`` does.

    Entries from the current year show ``Mon _2 HH:MM``; older (or future)
    years show ``Mon _2  YYYY``. Both forms are twelve columns wide.
    """
    stamp = datetime.fromtimestamp(mtime)
    month = MONTHS[stamp.month - 1]
    if stamp.year == now.year:
        return f"{month} {stamp.day:>2} {stamp.hour:02d}:{stamp.minute:02d}"
    return f"{month} {stamp.day:>2} {stamp.year:>5}"


def formatted_dates(entries: Sequence[Entry], now: datetime) -> list[str]:
    return [format_mod_date(entry.mtime, now) for entry in entries]


def sizes(entries: Sequence[Entry]) -> list[int]:
    return [entry.size for entry in entries]


def owner_names(entries: Sequence[Entry], identity) -> list[str]:
    return [identity.user_name(entry.uid) for entry in entries]


def group_names(entries: Sequence[Entry], identity) -> list[str]:
    return [identity.group_name(entry.gid) for entry in entries]


def link_label(entry: Entry, palette: Palette) -> str | None:
    """Return the styled symlink target, or the broken-link placeholder.

    The target is stat-ed relative to the link's directory; a target that
    cannot be read or stat-ed renders unstyled as ``broken link``.
    """
    if not entry.is_symlink:
        return None
    if entry.symlink_target is None:
        logger.debug("unreadable symlink %s", entry.path)
        return BROKEN_LINK
    try:
        target_stat = os.stat(entry.path.parent / entry.symlink_target)
    except OSError:
        logger.debug("dangling symlink %s -> %s", entry.path, entry.symlink_target)
        return BROKEN_LINK
    if stat.S_ISDIR(target_stat.st_mode):
        style = palette.directory
    elif target_stat.st_mode & EXECUTABLE_BITS:
        style = palette.executable
    else:
        style = palette.plain
    return f"{style}{entry.symlink_target}"


def link_labels(entries: Sequence[Entry], palette: Palette) -> list[str | None]:
    return [link_label(entry, palette) for entry in entries]


def column_widths(owners: Sequence[str], groups: Sequence[str], file_sizes: Sequence[int]) -> tuple[int, int]:
    """Return ``(max_owner_group_length, max_size_length)`` for long-mode fields."""
    id_width = 0
    size_width = 0
    for owner, group, size in zip(owners, groups, file_sizes):
        id_width = max(id_width, len(owner), len(group))
        size_width = max(size_width, len(str(size)))
    return id_width, size_width


def collect_attributes(
    entries: Sequence[Entry],
    *,
    terminal_width: int,
    long_mode: bool = False,
    identity=None,
    palette: Palette = DEFAULT_PALETTE,
    now: datetime | None = None,
    max_workers: int | None = None,
) -> Collection:
    """Compute one ``AttributeRecord`` per entry plus the display statistics.

    ``identity`` resolves owner/group names in long mode; when omitted, ids
    render numerically. ``now`` anchors the same-year date check.
    """
    entries = tuple(entries)
    if identity is None:
        identity = NumericIdentity()
    if now is None:
        now = datetime.now()
    if max_workers is None:
        max_workers = 10 if long_mode else 4

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="lazyls-collect") as executor:
        lengths_future = executor.submit(name_lengths, entries)
        max_length_future = executor.submit(max_name_length, entries)
        one_line_future = executor.submit(fits_one_line, entries, terminal_width)
        labels_future = executor.submit(labels, entries, palette)

        if long_mode:
            modes_future = executor.submit(mode_strings, entries)
            dates_future = executor.submit(formatted_dates, entries, now)
            links_future = executor.submit(link_labels, entries, palette)
            sizes_future = executor.submit(sizes, entries)
            owners_future = executor.submit(owner_names, entries, identity)
            groups_future = executor.submit(group_names, entries, identity)

            wait([owners_future, groups_future, sizes_future])
            widths_future = executor.submit(
                column_widths,
                owners_future.result(),
                groups_future.result(),
                sizes_future.result(),
            )

    fits, total = one_line_future.result()
    lengths = lengths_future.result()
    styled = labels_future.result()

    if not long_mode:
        stats = DisplayStats(
            max_name_length=max_length_future.result(),
            total_line_length=total,
            fits_one_line=fits,
        )
        records = tuple(
            AttributeRecord(name_length=length, label=label)
            for length, label in zip(lengths, styled)
        )
        return Collection(records=records, stats=stats)

    id_width, size_width = widths_future.result()
    stats = DisplayStats(
        max_name_length=max_length_future.result(),
        max_owner_group_length=id_width,
        max_size_length=size_width,
        total_line_length=total,
        fits_one_line=fits,
    )
    records = tuple(
        AttributeRecord(
            name_length=length,
            label=label,
            mode_string=mode,
            owner=owner,
            group=group,
            size=size,
            formatted_date=date,
            link_label=link,
        )
        for length, label, mode, owner, group, size, date, link in zip(
            lengths,
            styled,
            modes_future.result(),
            owners_future.result(),
            groups_future.result(),
            sizes_future.result(),
            dates_future.result(),
            links_future.result(),
        )
    )
    return Collection(records=records, stats=stats)


__all__ = [
    "BROKEN_LINK",
    "AttributeRecord",
    "DisplayStats",
    "Collection",
    "name_lengths",
    "max_name_length",
    "fits_one_line",
    "labels",
    "mode_strings",
    "format_mod_date",
    "formatted_dates",
    "sizes",
    "owner_names",
    "group_names",
    "link_label",
    "link_labels",
    "column_widths",
    "collect_attributes",
]
