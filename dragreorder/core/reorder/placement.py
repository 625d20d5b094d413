"""Module: placement.py

Author: Michael Economou
Date: 2026-10-03

Placement algorithm for drag reordering.

Decides the candidate insertion index of the dragged item from its current
rectangle and the rectangles of its normal-layer siblings. Sibling indices
are positions in the resting order with the dragged item left out, so the
result is directly usable as "remove the dragged item, insert it here".

Pure functions - no state, no Qt.
"""

from __future__ import annotations

from collections.abc import Sequence

from dragreorder.core.reorder.geometry import Point, Rect


def find_rect_at(rects: Sequence[Rect], point: Point) -> int | None:
    """Return the index of the first rectangle containing the point.

    Args:
        rects: Sibling rectangles in resting order
        point: Point in container coordinates

    Returns:
        Index into rects, or None if no rectangle contains the point

    """
    for index, rect in enumerate(rects):
        if rect.contains(point):
            return index
    return None


def compute_drag_index(dragged: Rect, siblings: Sequence[Rect], drag_index: int) -> int:
    """Compute the new candidate index of the dragged item.

    The horizontal center of the dragged rectangle is projected onto its top
    and bottom edges, and the siblings under those two points decide the
    outcome:

    - neither point over a sibling: keep the current index;
    - both points over the same (larger) sibling: take its slot when the
      dragged top edge is closer to the sibling's top than the dragged
      bottom edge is to the sibling's bottom, else the slot after it;
    - top point over a sibling: take its slot once the dragged top edge is
      above the sibling's midpoint, else the slot after it;
    - only the bottom point over a sibling: take the slot after it once the
      dragged bottom edge is below the sibling's midpoint, else its slot.

    Args:
        dragged: Current rectangle of the dragged item
        siblings: Rectangles of the other items in resting order
        drag_index: Current candidate index

    Returns:
        New candidate index (may equal drag_index)

    """
    top_index = find_rect_at(siblings, dragged.top_center)
    bottom_index = find_rect_at(siblings, dragged.bottom_center)

    if top_index is None and bottom_index is None:
        return drag_index

    if top_index == bottom_index:
        sibling = siblings[top_index]
        if dragged.y - sibling.y < sibling.bottom - dragged.bottom:
            return top_index
        return top_index + 1

    if top_index is not None:
        sibling = siblings[top_index]
        return top_index if dragged.y < sibling.mid_y else top_index + 1

    sibling = siblings[bottom_index]
    return bottom_index + 1 if dragged.bottom > sibling.mid_y else bottom_index
