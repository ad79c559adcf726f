"""Column, row and print-order computation for top-to-bottom listings.

Entries fill each column downward before moving right, but the terminal
prints row by row, so the plan stores the entry indices in emission order.
The first ``last_row_count`` columns are one entry taller than the rest.
"""

from __future__ import annotations

from dataclasses import dataclass

COLUMN_SPACING = 1


@dataclass(frozen=True)
class LayoutPlan:
    """Geometry and emission order for one listing."""

    count: int
    columns: int
    rows: int
    last_row_count: int
    print_order: tuple[int, ...]

    @property
    def full_row_entries(self) -> int:
        """Number of entries printed before the short last row."""
        return (self.rows - 1) * self.columns


def compute_columns(terminal_width: int, max_name_length: int) -> int:
    """Return how many name columns fit in ``terminal_width``; at least one."""
    return max(1, terminal_width // (max_name_length + COLUMN_SPACING))


def compute_rows(count: int, columns: int) -> int:
    """Return the row count, including a trailing empty row when ``count`` divides evenly.

    The surplus row is never printed: its length is ``count % columns`` which
    is zero in exactly that case.
    """
    return count // columns + 1


def top_to_bottom_order(count: int, columns: int, rows: int, last_row_count: int) -> list[int]:
    """Return entry indices in row-major emission order for a column-major fill.

    Within each full row the index advances by ``rows`` while the current
    column still has an entry in the last row, and by ``rows - 1`` once past
    ``last_row_count`` columns. The last row then takes the bottom entry of
    each of the first ``last_row_count`` columns.
    """
    order: list[int] = []
    for row in range(rows - 1):
        index = row
        for column in range(1, columns + 1):
            order.append(index)
            if column <= last_row_count:
                index += rows
            else:
                index += rows - 1

    index = rows - 1
    for _ in range(last_row_count):
        order.append(index)
        index += rows

    if len(order) != count:
        raise ValueError(f"print order covers {len(order)} of {count} entries")
    return order


def plan_layout(count: int, max_name_length: int, terminal_width: int) -> LayoutPlan:
    columns = compute_columns(terminal_width, max_name_length)
    rows = compute_rows(count, columns)
    last_row_count = count % columns
    order = top_to_bottom_order(count, columns, rows, last_row_count)
    return LayoutPlan(
        count=count,
        columns=columns,
        rows=rows,
        last_row_count=last_row_count,
        print_order=tuple(order),
    )


__all__ = [
    "COLUMN_SPACING",
    "LayoutPlan",
    "compute_columns",
    "compute_rows",
    "top_to_bottom_order",
    "plan_layout",
]
