"""Interaction controller tests: cursor, open flags, sort and threshold."""

from __future__ import annotations

import unittest

from lazydu.runtime.controller import BrowserController, initial_state
from lazydu.size_format import SizeFormat
from lazydu.tree_model import DuNode, SortKey


def _tree() -> DuNode:
    root = DuNode("/r", 100, open=True)
    big = root.add_child(DuNode("/big", 60, root))
    big.add_child(DuNode("/x", 40, big))
    big.add_child(DuNode("/w", 15, big))
    root.add_child(DuNode("/mid", 30, root))
    root.add_child(DuNode("/aaa", 5, root))
    return root


def _names(controller: BrowserController) -> list[str]:
    return [row.full_name for row in controller.state.rows]


class ControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.root = _tree()
        self.state = initial_state(self.root, build_threshold=0, threshold=1)
        self.controller = BrowserController(self.state)

    def test_initial_rows_show_root_and_its_children(self) -> None:
        self.assertEqual(_names(self.controller), ["/r", "/r/aaa", "/r/mid", "/r/big"])
        self.assertEqual(self.state.cursor, 0)

    def test_move_clamps_to_row_range(self) -> None:
        self.assertFalse(self.controller.move(-1))
        self.assertTrue(self.controller.move(2))
        self.assertEqual(self.state.cursor, 2)
        self.controller.move(50)
        self.assertEqual(self.state.cursor, 3)

    def test_page_moves_by_page_rows_and_clamps(self) -> None:
        self.state.page_rows = 2
        self.controller.page(1)
        self.assertEqual(self.state.cursor, 2)
        self.controller.page(1)
        self.assertEqual(self.state.cursor, 3)
        self.controller.page(-1)
        self.assertEqual(self.state.cursor, 1)
        self.controller.page(-1)
        self.assertEqual(self.state.cursor, 0)

    def test_top_and_bottom(self) -> None:
        self.controller.move_to_bottom()
        self.assertEqual(self.state.cursor, 3)
        self.controller.move_to_top()
        self.assertEqual(self.state.cursor, 0)

    def test_expand_opens_selected_directory_only(self) -> None:
        self.controller.move(3)
        self.assertTrue(self.controller.expand())
        self.assertEqual(_names(self.controller)[-2:], ["/r/big/w", "/r/big/x"])
        self.assertFalse(self.controller.expand())

        self.controller.move(1)
        self.assertFalse(self.controller.expand())

    def test_collapse_closes_open_node_in_place(self) -> None:
        self.controller.move(3)
        self.controller.expand()
        self.assertTrue(self.controller.collapse_or_ascend())
        self.assertEqual(self.state.cursor, 3)
        self.assertEqual(len(self.state.rows), 4)

    def test_collapse_on_closed_node_moves_to_parent(self) -> None:
        self.controller.move(3)
        self.controller.expand()
        self.controller.move(2)
        self.assertEqual(self.state.selected.full_name, "/r/big/x")
        rows_before = list(self.state.rows)

        self.assertTrue(self.controller.collapse_or_ascend())
        self.assertEqual(self.state.selected.full_name, "/r/big")
        self.assertEqual(self.state.rows, rows_before)

    def test_collapse_on_root_closes_it_then_does_nothing(self) -> None:
        self.assertTrue(self.controller.collapse_or_ascend())
        self.assertEqual(_names(self.controller), ["/r"])
        self.assertFalse(self.controller.collapse_or_ascend())

    def test_sort_keeps_selected_node(self) -> None:
        self.controller.move(1)
        selected = self.state.selected

        self.controller.cycle_sort(SortKey.SIZE)
        self.assertEqual(self.state.sort_key, SortKey.SIZE)
        self.assertTrue(self.state.sort_descending)
        self.assertEqual(_names(self.controller), ["/r", "/r/big", "/r/mid", "/r/aaa"])
        self.assertIs(self.state.selected, selected)

        self.controller.cycle_sort(SortKey.SIZE)
        self.assertFalse(self.state.sort_descending)
        self.assertEqual(_names(self.controller), ["/r", "/r/aaa", "/r/mid", "/r/big"])
        self.assertIs(self.state.selected, selected)

    def test_name_sort_defaults_to_ascending(self) -> None:
        self.controller.cycle_sort(SortKey.SIZE)
        self.controller.cycle_sort(SortKey.NAME)
        self.assertFalse(self.state.sort_descending)
        self.assertEqual(_names(self.controller), ["/r", "/r/aaa", "/r/big", "/r/mid"])
        self.controller.cycle_sort(SortKey.NAME)
        self.assertEqual(_names(self.controller), ["/r", "/r/mid", "/r/big", "/r/aaa"])

    def test_threshold_change_refilters_and_keeps_nearest_visible_selection(self) -> None:
        self.controller.move(3)
        self.controller.expand()
        self.controller.move(1)
        self.assertEqual(self.state.selected.full_name, "/r/big/w")

        self.controller.set_threshold(20)
        self.assertEqual(_names(self.controller), ["/r", "/r/mid", "/r/big", "/r/big/x"])
        self.assertEqual(self.state.selected.full_name, "/r/big")

        self.controller.set_threshold(-5)
        self.assertEqual(self.state.threshold, 0)

    def test_threshold_prompt_commit_and_cancel(self) -> None:
        self.controller.begin_threshold_edit()
        self.assertTrue(self.state.threshold_editing)
        self.controller.edit_threshold_input("3a5")
        self.assertEqual(self.state.threshold_input, "35")
        self.controller.commit_threshold_edit()
        self.assertFalse(self.state.threshold_editing)
        self.assertEqual(self.state.threshold, 35)
        self.assertEqual(_names(self.controller), ["/r", "/r/big"])

        self.controller.begin_threshold_edit()
        self.controller.edit_threshold_input("1")
        self.controller.cancel_threshold_edit()
        self.assertEqual(self.state.threshold, 35)

        self.controller.begin_threshold_edit()
        self.controller.commit_threshold_edit()
        self.assertEqual(self.state.threshold, 0)

    def test_toggle_size_format_does_not_reflatten(self) -> None:
        rows = self.state.rows
        self.controller.toggle_size_format()
        self.assertIs(self.state.size_format, SizeFormat.HUMAN)
        self.assertIs(self.state.rows, rows)

    def test_scroll_into_view_follows_cursor(self) -> None:
        self.state.page_rows = 2
        self.controller.move(3)
        self.controller.scroll_into_view()
        self.assertEqual(self.state.top, 2)
        self.controller.move_to_top()
        self.controller.scroll_into_view()
        self.assertEqual(self.state.top, 0)


if __name__ == "__main__":
    unittest.main()
