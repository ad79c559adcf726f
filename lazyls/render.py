"""Renderers for the four display modes and the dispatch between them.

Every renderer returns the complete text for the listing; the caller decides
where it is written.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence

from .ansi import DEFAULT_PALETTE, Palette
from .collector import AttributeRecord, Collection, DisplayStats
from .layout import COLUMN_SPACING, LayoutPlan, plan_layout

logger = logging.getLogger(__name__)

ONE_LINE_SEPARATOR = "  "
LINK_ARROW = " -> "


class DisplayMode(enum.Enum):
    LONG = "long"
    SINGLE_COLUMN = "single-column"
    ONE_LINE = "one-line"
    TOP_TO_BOTTOM = "top-to-bottom"


def select_mode(long_mode: bool, single_column: bool, fits_one_line: bool) -> DisplayMode:
    """Pick the display mode: long, then single column, then one line, else columns."""
    if long_mode:
        return DisplayMode.LONG
    if single_column:
        return DisplayMode.SINGLE_COLUMN
    if fits_one_line:
        return DisplayMode.ONE_LINE
    return DisplayMode.TOP_TO_BOTTOM


def _indices(count: int, reversed_: bool) -> range:
    if reversed_:
        return range(count - 1, -1, -1)
    return range(count)


def render_single_column(
    records: Sequence[AttributeRecord],
    palette: Palette = DEFAULT_PALETTE,
    reversed_: bool = False,
) -> str:
    if not records:
        return ""
    out = [f"{records[index].label}\n" for index in _indices(len(records), reversed_)]
    out.append(palette.reset)
    return "".join(out)


def render_one_line(
    records: Sequence[AttributeRecord],
    palette: Palette = DEFAULT_PALETTE,
    reversed_: bool = False,
) -> str:
    if not records:
        return ""
    out = [f"{records[index].label}{ONE_LINE_SEPARATOR}" for index in _indices(len(records), reversed_)]
    out.append(f"{palette.reset}\n")
    return "".join(out)


def padded_label(record: AttributeRecord, max_name_length: int) -> str:
    """Pad a styled label so the next column starts at a fixed offset."""
    padding = max_name_length - record.name_length + COLUMN_SPACING
    return f"{record.label}{' ' * padding}"


def render_top_to_bottom(
    records: Sequence[AttributeRecord],
    stats: DisplayStats,
    terminal_width: int,
    palette: Palette = DEFAULT_PALETTE,
    reversed_: bool = False,
    plan: LayoutPlan | None = None,
) -> str:
    """Render names in columns filled top to bottom.

    Reversed output walks the full rows of the print order backwards, then
    prints the short last row left to right.
    """
    if not records:
        return ""
    if plan is None:
        plan = plan_layout(len(records), stats.max_name_length, terminal_width)
    logger.debug(
        "layout: %d entries in %d columns x %d rows, last row %d",
        plan.count,
        plan.columns,
        plan.rows,
        plan.last_row_count,
    )
    cells = [padded_label(record, stats.max_name_length) for record in records]

    out: list[str] = []
    current_column = 1

    def emit(index: int) -> None:
        nonlocal current_column
        out.append(cells[index])
        if current_column == plan.columns:
            out.append("\n")
            current_column = 0
        current_column += 1

    if reversed_:
        full_rows = plan.full_row_entries
        for position in range(full_rows - 1, -1, -1):
            emit(plan.print_order[position])
        for position in range(full_rows, plan.count):
            out.append(cells[plan.print_order[position]])
    else:
        for index in plan.print_order:
            emit(index)

    out.append(palette.reset)
    if plan.last_row_count != 0:
        out.append("\n")
    return "".join(out)


def long_line(record: AttributeRecord, stats: DisplayStats, palette: Palette = DEFAULT_PALETTE) -> str:
    id_width = stats.max_owner_group_length
    size_width = stats.max_size_length
    name = record.label
    if record.link_label is not None:
        name = f"{name}{palette.reset}{LINK_ARROW}{record.link_label}"
    return (
        f"{record.mode_string:>11} {record.owner:<{id_width}} {record.group:<{id_width}} "
        f"{record.size:>{size_width}} {record.formatted_date:>12} {name}{palette.reset}\n"
    )


def render_long(
    records: Sequence[AttributeRecord],
    stats: DisplayStats,
    palette: Palette = DEFAULT_PALETTE,
    reversed_: bool = False,
) -> str:
    out = [f"total: {len(records)}\n"]
    for index in _indices(len(records), reversed_):
        out.append(long_line(records[index], stats, palette))
    return "".join(out)


def render_listing(
    collection: Collection,
    *,
    mode: DisplayMode,
    terminal_width: int,
    palette: Palette = DEFAULT_PALETTE,
    reversed_: bool = False,
) -> str:
    """Render ``collection`` in ``mode``."""
    logger.debug("display mode %s for %d entries", mode.value, len(collection))
    records = collection.records
    if mode is DisplayMode.LONG:
        return render_long(records, collection.stats, palette, reversed_)
    if mode is DisplayMode.SINGLE_COLUMN:
        return render_single_column(records, palette, reversed_)
    if mode is DisplayMode.ONE_LINE:
        return render_one_line(records, palette, reversed_)
    return render_top_to_bottom(records, collection.stats, terminal_width, palette, reversed_)


__all__ = [
    "DisplayMode",
    "select_mode",
    "render_single_column",
    "render_one_line",
    "padded_label",
    "render_top_to_bottom",
    "long_line",
    "render_long",
    "render_listing",
]
