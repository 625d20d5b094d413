"""Module: stack_layout.py

Author: Michael Economou
Date: 2026-10-03

Top-to-bottom stack layout for the reorder engine.

During a drag the layout is asked "where would everyone go if the dragged
item already sat at the drag index". That question is answered through an
override map {item: index} consulted while ordering, so the resting order
held by the engine is never touched until the drag is committed.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from dragreorder.core.reorder.geometry import Rect
from dragreorder.core.reorder.item import ReorderItem


class StackLayout:
    """Stacks items vertically at x=0 with the full container width."""

    def ordered(
        self,
        items: Sequence[ReorderItem],
        overrides: Mapping[ReorderItem, int] | None = None,
    ) -> list[ReorderItem]:
        """Return the visual order of items with overrides applied.

        Args:
            items: Items in resting order
            overrides: Items to place at a given index among the others

        Returns:
            New list; items is not modified

        """
        if not overrides:
            return list(items)

        order = [item for item in items if item not in overrides]
        for item, index in sorted(overrides.items(), key=lambda entry: entry[1]):
            order.insert(max(0, min(index, len(order))), item)
        return order

    def arrange(
        self,
        items: Sequence[ReorderItem],
        width: int,
        overrides: Mapping[ReorderItem, int] | None = None,
    ) -> list[tuple[ReorderItem, Rect]]:
        """Compute the slot of every item.

        Args:
            items: Items in resting order
            width: Container width given to every item
            overrides: Items to place at a given index among the others

        Returns:
            (item, rect) pairs in visual order

        """
        slots = []
        y = 0
        for item in self.ordered(items, overrides):
            slots.append((item, Rect(0, y, width, item.height)))
            y += item.height
        return slots

    @staticmethod
    def total_height(items: Sequence[ReorderItem]) -> int:
        """Height needed to show all items without overlap."""
        return sum(item.height for item in items)

    @staticmethod
    def clamp_y(y: int, item_height: int, container_height: int) -> int:
        """Keep an item of the given height inside the container vertically.

        The upper bound is applied last, so an item taller than the container
        has its bottom edge pinned to the container's bottom.
        """
        return min(max(y, 0), container_height - item_height)
