"""Module: reorder_engine.py

Author: Michael Economou
Date: 2026-10-04

Reorder engine: owns the resting order of a vertical list of items and the
drag session that moves one of them.

State machine:
    IDLE --press (primary, >1 item)--> ARMED
    ARMED --move beyond threshold, item under press--> DRAGGING
    ARMED --move beyond threshold, nothing under press--> IDLE
    ARMED --release--> IDLE
    DRAGGING --move--> DRAGGING (placement + re-layout on index change)
    DRAGGING --release--> IDLE (commit)

The engine is toolkit-agnostic. Rendering is delegated to a LayoutHostPort,
input arrives as PointerEvent values (or the press/move/release shortcuts).
Session problems never raise: the session is dropped and the container goes
back to its resting layout.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from dragreorder.config import DEFAULT_DRAG_THRESHOLD
from dragreorder.core.reorder.events import PointerEvent, PointerEventType
from dragreorder.core.reorder.geometry import Point, Rect
from dragreorder.core.reorder.item import RenderLayer, ReorderItem
from dragreorder.core.reorder.placement import compute_drag_index, find_rect_at
from dragreorder.core.reorder.stack_layout import StackLayout
from dragreorder.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from dragreorder.app.ports.layout_host import LayoutHostPort

logger = get_cached_logger(__name__)


class DragState(Enum):
    """Drag session states."""

    IDLE = "idle"
    ARMED = "armed"
    DRAGGING = "dragging"


@dataclass
class DragSession:
    """Ephemeral state of one press-drag-release gesture.

    Attributes:
        press_point: Where the primary button went down
        dragged: Item being dragged, None until the threshold is exceeded
        drag_index: Candidate insertion index among the other items
        y_offset: Pointer offset from the dragged item's top edge

    """

    press_point: Point
    dragged: ReorderItem | None = None
    drag_index: int = -1
    y_offset: int = 0

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self.dragged is not None else DragState.ARMED


class ReorderEngine:
    """Vertical drag-and-drop reordering of a list of items.

    Usage:
        engine = ReorderEngine(host)
        engine.resize(200, 300)
        for widget in widgets:
            engine.add_item(widget, widget.height())

        engine.press(Point(10, 5))
        engine.move(Point(10, 40))
        engine.release(Point(10, 40))
    """

    def __init__(
        self,
        host: LayoutHostPort | None = None,
        drag_threshold: float = DEFAULT_DRAG_THRESHOLD,
    ):
        """Initialize an empty engine.

        Args:
            host: Renderer to keep in sync, optional for headless use
            drag_threshold: Distance the pointer must exceed before dragging

        """
        self._host = host
        self._layout = StackLayout()
        self._items: list[ReorderItem] = []
        self._session: DragSession | None = None
        self._width = 0
        self._height = 0
        self.drag_threshold = drag_threshold

    # =====================================
    # Configuration
    # =====================================

    def set_host(self, host: LayoutHostPort | None) -> None:
        """Attach (or detach) the renderer and push the current layout to it."""
        self._host = host
        for item in self._items:
            self._notify_layer(item)
        self.layout()

    def set_layout(self, layout: StackLayout) -> None:
        """Install a layout strategy.

        Raises:
            TypeError: If layout is not a StackLayout

        """
        if not isinstance(layout, StackLayout):
            raise TypeError(
                f"ReorderEngine only supports StackLayout, got {type(layout).__name__}"
            )
        self._layout = layout
        self.layout()

    def resize(self, width: int, height: int) -> None:
        """Set the container size and re-layout."""
        self._width = width
        self._height = height
        self.layout()

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    # =====================================
    # Container API
    # =====================================

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items())

    def items(self) -> list[Any]:
        """Payloads in resting order."""
        return [item.payload for item in self._items]

    def index_of(self, payload: Any) -> int:
        """Resting index of a payload.

        Raises:
            KeyError: If the payload is not in the container

        """
        for index, item in enumerate(self._items):
            if item.payload is payload:
                return index
        raise KeyError(payload)

    def item_for(self, payload: Any) -> ReorderItem:
        """Item record of a payload.

        Raises:
            KeyError: If the payload is not in the container

        """
        return self._items[self.index_of(payload)]

    def add_item(self, payload: Any, height: int, index: int | None = None) -> ReorderItem:
        """Add a payload to the container.

        An active drag session is aborted first.

        Args:
            payload: Caller object to reorder
            height: Preferred height
            index: Resting index to insert at, appended when None

        Returns:
            The new item record

        Raises:
            ValueError: If the payload is already present or height is negative

        """
        if any(item.payload is payload for item in self._items):
            raise ValueError(f"ReorderEngine already contains {payload!r}")
        if height < 0:
            raise ValueError(f"Item height must not be negative, got {height}")

        self._abort_session("item added")

        item = ReorderItem(payload, height)
        if index is None:
            self._items.append(item)
        else:
            self._items.insert(max(0, min(index, len(self._items))), item)

        self._notify_layer(item)
        self.layout()
        return item

    def remove_item(self, payload: Any) -> None:
        """Remove a payload from the container.

        An active drag session is aborted first.

        Raises:
            KeyError: If the payload is not in the container

        """
        item = self.item_for(payload)
        self._abort_session("item removed")
        self._items.remove(item)
        self.layout()

    def set_item_height(self, payload: Any, height: int) -> None:
        """Update the preferred height of a payload and re-layout.

        Raises:
            KeyError: If the payload is not in the container
            ValueError: If height is negative

        """
        if height < 0:
            raise ValueError(f"Item height must not be negative, got {height}")
        item = self.item_for(payload)
        if item.height != height:
            item.height = height
            self.layout()

    def preferred_height(self) -> int:
        """Height needed to show all items stacked."""
        return self._layout.total_height(self._items)

    # =====================================
    # Drag State
    # =====================================

    @property
    def state(self) -> DragState:
        if self._session is None:
            return DragState.IDLE
        return self._session.state

    @property
    def drag_index(self) -> int | None:
        """Candidate index of the dragged item, None unless dragging."""
        if self._session is None or self._session.dragged is None:
            return None
        return self._session.drag_index

    @property
    def dragged_payload(self) -> Any | None:
        """Payload being dragged, None unless dragging."""
        if self._session is None or self._session.dragged is None:
            return None
        return self._session.dragged.payload

    @property
    def press_point(self) -> Point | None:
        return self._session.press_point if self._session else None

    # =====================================
    # Input
    # =====================================

    def handle_event(self, event: PointerEvent) -> None:
        """Dispatch a pointer event to press, move or release."""
        if event.kind is PointerEventType.PRESS:
            self.press(event.point, event.primary)
        elif event.kind is PointerEventType.MOVE:
            self.move(event.point, event.primary)
        elif event.kind is PointerEventType.RELEASE:
            self.release(event.point, event.primary)
        else:
            raise ValueError(f"Unsupported pointer event kind: {event.kind!r}")

    def press(self, point: Point, primary: bool = True) -> None:
        """Arm a drag session at the given point."""
        if not primary or len(self._items) <= 1:
            return
        if self.state is DragState.DRAGGING:
            return

        self._session = DragSession(press_point=point)
        logger.debug("[ReorderEngine] Armed at (%d, %d)", point.x, point.y, extra={"dev_only": True})

    def move(self, point: Point, primary: bool = True) -> None:
        """Track the pointer while the primary button is held."""
        if not primary or self._session is None:
            return

        if self._session.dragged is not None:
            self._drag(point)
        elif point.distance_to(self._session.press_point) > self.drag_threshold:
            self._start_dragging(point)

    def release(self, point: Point | None = None, primary: bool = True) -> None:
        """Commit the drag (if any) and return to idle.

        The release point is not used; the last move already placed the item.
        """
        if not primary:
            return
        self._finish_dragging()

    def cancel_drag(self) -> None:
        """Abort the active session and restore the resting layout."""
        if self._session is not None:
            self._abort_session("cancelled")
            self.layout()

    # =====================================
    # Layout
    # =====================================

    def layout(self) -> None:
        """Lay out all items and push their geometry to the host.

        While dragging, the other items are arranged as if the dragged item
        already sat at the drag index; the dragged item keeps its
        pointer-driven position.
        """
        dragged = self._session.dragged if self._session else None
        overrides = {dragged: self._session.drag_index} if dragged is not None else None

        for item, rect in self._layout.arrange(self._items, self._width, overrides):
            if item is dragged:
                y = self._layout.clamp_y(item.rect.y, item.height, self._height)
                item.rect = Rect(0, y, self._width, item.height)
            else:
                item.rect = rect
            self._notify_geometry(item)

    # =====================================
    # Drag Steps
    # =====================================

    def _start_dragging(self, point: Point) -> None:
        session = self._session
        candidates = [item for item in self._items if not item.is_elevated]
        index = find_rect_at([item.rect for item in candidates], session.press_point)
        if index is None:
            logger.debug(
                "[ReorderEngine] No item under press point, drag aborted",
                extra={"dev_only": True},
            )
            self._session = None
            return

        item = candidates[index]
        session.dragged = item
        session.y_offset = session.press_point.y - item.rect.y
        session.drag_index = self._items.index(item)

        item.layer = RenderLayer.ELEVATED
        self._notify_layer(item)
        self._move_dragged(point)

        logger.debug(
            "[ReorderEngine] Drag started for item %d", session.drag_index, extra={"dev_only": True}
        )

    def _drag(self, point: Point) -> None:
        session = self._session
        dragged = session.dragged
        self._move_dragged(point)

        siblings = [item.rect for item in self._items if item is not dragged]
        new_index = compute_drag_index(dragged.rect, siblings, session.drag_index)
        if new_index != session.drag_index:
            logger.debug(
                "[ReorderEngine] Drag index %d -> %d",
                session.drag_index,
                new_index,
                extra={"dev_only": True},
            )
            session.drag_index = new_index
            self.layout()

    def _finish_dragging(self) -> None:
        session = self._session
        self._session = None
        if session is None or session.dragged is None:
            return

        dragged = session.dragged
        old_index = self._items.index(dragged)
        new_index = max(0, min(session.drag_index, len(self._items) - 1))
        self._items.remove(dragged)
        self._items.insert(new_index, dragged)

        dragged.layer = RenderLayer.NORMAL
        self._notify_layer(dragged)
        self.layout()

        if new_index != old_index:
            logger.info("[ReorderEngine] Moved item %d -> %d", old_index, new_index)
            if self._host is not None:
                self._host.order_committed(dragged.payload, old_index, new_index)

    def _move_dragged(self, point: Point) -> None:
        session = self._session
        dragged = session.dragged
        y = self._layout.clamp_y(point.y - session.y_offset, dragged.height, self._height)
        dragged.rect = Rect(0, y, self._width, dragged.height)
        self._notify_geometry(dragged)

    def _abort_session(self, reason: str) -> None:
        session = self._session
        if session is None:
            return
        self._session = None

        dragged = session.dragged
        if dragged is not None and dragged.is_elevated:
            dragged.layer = RenderLayer.NORMAL
            if dragged in self._items:
                self._notify_layer(dragged)

        logger.debug("[ReorderEngine] Session aborted: %s", reason, extra={"dev_only": True})

    # =====================================
    # Host Notifications
    # =====================================

    def _notify_geometry(self, item: ReorderItem) -> None:
        if self._host is not None:
            self._host.apply_geometry(item.payload, item.rect)

    def _notify_layer(self, item: ReorderItem) -> None:
        if self._host is not None:
            self._host.apply_layer(item.payload, item.layer)
