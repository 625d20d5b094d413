"""Protocol for the object that renders reorderable items.

Author: Michael Economou
Date: 2026-10-03
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from dragreorder.core.reorder.geometry import Rect
    from dragreorder.core.reorder.item import RenderLayer


class LayoutHostPort(Protocol):
    """Port through which the reorder engine pushes state to the renderer.

    Decouples the engine from any widget toolkit. The engine owns geometry
    and order; the host only mirrors them.
    """

    def apply_geometry(self, payload: Any, rect: Rect) -> None:
        """Move and resize the rendered item.

        Args:
            payload: Item payload as given to ReorderEngine.add_item
            rect: New geometry in container coordinates

        """
        ...

    def apply_layer(self, payload: Any, layer: RenderLayer) -> None:
        """Put the rendered item on the given layer.

        Args:
            payload: Item payload
            layer: NORMAL for stacked items, ELEVATED while dragged

        """
        ...

    def order_committed(self, payload: Any, old_index: int, new_index: int) -> None:
        """Notify that a drag was committed and moved an item.

        Only called when old_index != new_index.

        Args:
            payload: Item payload that moved
            old_index: Resting index before the drag
            new_index: Resting index after the drag

        """
        ...
