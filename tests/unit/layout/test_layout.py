"""Tests for top-to-bottom column geometry and print order."""

from __future__ import annotations

import unittest

from lazyls.layout import compute_columns, compute_rows, plan_layout, top_to_bottom_order


class ColumnGeometryTests(unittest.TestCase):
    def test_columns_divide_width_by_name_length_plus_spacing(self) -> None:
        self.assertEqual(compute_columns(80, 9), 8)
        self.assertEqual(compute_columns(21, 10), 1)

    def test_columns_never_drop_below_one(self) -> None:
        self.assertEqual(compute_columns(5, 40), 1)
        self.assertEqual(compute_columns(0, 3), 1)

    def test_rows_include_surplus_row_when_count_divides_evenly(self) -> None:
        self.assertEqual(compute_rows(4, 2), 3)
        self.assertEqual(compute_rows(5, 2), 3)

    def test_long_names_degrade_to_single_column(self) -> None:
        plan = plan_layout(4, 10, 21)
        self.assertEqual(plan.columns, 1)
        self.assertEqual(plan.print_order, (0, 1, 2, 3))
        self.assertEqual(plan.last_row_count, 0)


class PrintOrderTests(unittest.TestCase):
    def test_short_last_row_takes_bottom_of_leading_columns(self) -> None:
        self.assertEqual(top_to_bottom_order(5, 2, 3, 1), [0, 3, 1, 4, 2])
        self.assertEqual(top_to_bottom_order(7, 3, 3, 1), [0, 3, 5, 1, 4, 6, 2])

    def test_evenly_divided_count_fills_rows_completely(self) -> None:
        self.assertEqual(top_to_bottom_order(4, 2, 3, 0), [0, 2, 1, 3])
        self.assertEqual(top_to_bottom_order(6, 3, 3, 0), [0, 2, 4, 1, 3, 5])

    def test_more_columns_than_entries_prints_a_single_row(self) -> None:
        plan = plan_layout(3, 2, 80)
        self.assertEqual(plan.rows, 1)
        self.assertEqual(plan.last_row_count, 3)
        self.assertEqual(plan.print_order, (0, 1, 2))

    def test_print_order_is_a_permutation_for_all_small_shapes(self) -> None:
        for count in range(1, 61):
            for columns in range(1, 13):
                rows = compute_rows(count, columns)
                last_row_count = count % columns
                order = top_to_bottom_order(count, columns, rows, last_row_count)
                with self.subTest(count=count, columns=columns):
                    self.assertEqual(sorted(order), list(range(count)))
                    self.assertGreaterEqual(rows * columns, count)

    def test_plan_reports_last_row_count_as_remainder(self) -> None:
        for count in (1, 7, 12, 25):
            plan = plan_layout(count, 4, 23)
            self.assertEqual(plan.last_row_count, count % plan.columns)
            self.assertEqual(len(plan.print_order), count)

    def test_empty_listing_has_empty_order(self) -> None:
        plan = plan_layout(0, 0, 80)
        self.assertEqual(plan.print_order, ())


if __name__ == "__main__":
    unittest.main()
