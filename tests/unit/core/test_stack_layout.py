"""Tests for StackLayout.

Author: Michael Economou
Date: 2026-10-06
"""

from dragreorder.core.reorder import Rect, ReorderItem, StackLayout


def make_items(*heights):
    return [ReorderItem(f"item{i}", height) for i, height in enumerate(heights)]


class TestStackLayoutArrange:
    """Test top-to-bottom arrangement."""

    def test_stacks_items_in_order(self):
        items = make_items(10, 30, 20)
        slots = StackLayout().arrange(items, 100)

        assert [item for item, _ in slots] == items
        assert [rect for _, rect in slots] == [
            Rect(0, 0, 100, 10),
            Rect(0, 10, 100, 30),
            Rect(0, 40, 100, 20),
        ]

    def test_override_places_item_at_index(self):
        a, b, c = make_items(10, 30, 20)
        slots = StackLayout().arrange([a, b, c], 50, {a: 2})

        assert [item for item, _ in slots] == [b, c, a]
        assert [rect.y for _, rect in slots] == [0, 30, 50]

    def test_override_does_not_mutate_items(self):
        items = make_items(10, 10, 10)
        original = list(items)

        StackLayout().arrange(items, 50, {items[0]: 2})

        assert items == original

    def test_override_index_is_clamped(self):
        a, b = make_items(10, 10)
        layout = StackLayout()

        assert layout.ordered([a, b], {a: 99}) == [b, a]
        assert layout.ordered([a, b], {b: -3}) == [b, a]

    def test_empty(self):
        assert StackLayout().arrange([], 100) == []

    def test_total_height(self):
        assert StackLayout.total_height(make_items(10, 30, 20)) == 60


class TestClampY:
    """Test vertical clamping of a dragged item."""

    def test_inside_is_unchanged(self):
        assert StackLayout.clamp_y(50, 20, 200) == 50

    def test_above_top(self):
        assert StackLayout.clamp_y(-15, 20, 200) == 0

    def test_below_bottom(self):
        assert StackLayout.clamp_y(500, 20, 200) == 180

    def test_item_taller_than_container(self):
        assert StackLayout.clamp_y(0, 250, 200) == -50
